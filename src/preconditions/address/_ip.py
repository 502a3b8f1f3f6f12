# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""IPv4 and IPv6 literal grammars.

Both grammars are matched against the whole string. Octal or hexadecimal
octets, leading zeros and bracketed forms are rejected here; brackets are
handled by the email domain scanner.
"""

from __future__ import annotations

import re
from typing import Final

__all__ = [
    "is_ip_valid",
    "is_ipv4_valid",
    "is_ipv6_valid",
]

# Octet 0-255 without leading zeros; the lookahead forbids a trailing dot.
_IPV4_PATTERN: Final = re.compile(
    r"((25[0-5]|(2[0-4]|1[0-9]|[1-9]|)[0-9])(\.(?!$)|$)){4}"
)

_HEX = r"[0-9a-fA-F]"
_EMBEDDED_IPV4 = (
    r"((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}"
    r"(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])"
)
_IPV6_PATTERN: Final = re.compile(
    "|".join(
        (
            rf"({_HEX}{{1,4}}:){{7}}{_HEX}{{1,4}}",
            rf"({_HEX}{{1,4}}:){{1,7}}:",
            rf"({_HEX}{{1,4}}:){{1,6}}:{_HEX}{{1,4}}",
            rf"({_HEX}{{1,4}}:){{1,5}}(:{_HEX}{{1,4}}){{1,2}}",
            rf"({_HEX}{{1,4}}:){{1,4}}(:{_HEX}{{1,4}}){{1,3}}",
            rf"({_HEX}{{1,4}}:){{1,3}}(:{_HEX}{{1,4}}){{1,4}}",
            rf"({_HEX}{{1,4}}:){{1,2}}(:{_HEX}{{1,4}}){{1,5}}",
            rf"{_HEX}{{1,4}}:((:{_HEX}{{1,4}}){{1,6}})",
            rf":((:{_HEX}{{1,4}}){{1,7}}|:)",
            # link-local with zone index
            rf"fe80:(:{_HEX}{{0,4}}){{0,4}}%[0-9a-zA-Z]{{1,}}",
            # IPv4-mapped and IPv4-translated
            rf"::(ffff(:0{{1,4}}){{0,1}}:){{0,1}}{_EMBEDDED_IPV4}",
            # IPv4-embedded
            rf"({_HEX}{{1,4}}:){{1,4}}:{_EMBEDDED_IPV4}",
        )
    )
)


def is_ipv4_valid(address: object) -> bool:
    """Return ``True`` when ``address`` is a dotted-quad IPv4 literal."""

    if not isinstance(address, str):
        return False
    return _IPV4_PATTERN.fullmatch(address) is not None


def is_ipv6_valid(address: object) -> bool:
    """Return ``True`` when ``address`` is an IPv6 literal.

    Accepts full, compressed and ``::`` forms, IPv4-mapped and embedded
    addresses, and ``fe80::`` link-local addresses with a ``%zone`` suffix.
    """

    if not isinstance(address, str):
        return False
    return _IPV6_PATTERN.fullmatch(address) is not None


def is_ip_valid(address: object) -> bool:
    """Return ``True`` when ``address`` is an IPv4 or IPv6 literal."""

    return is_ipv4_valid(address) or is_ipv6_valid(address)
