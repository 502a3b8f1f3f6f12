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

"""Hostname and top-level domain recognizers."""

from __future__ import annotations

from ._characters import is_letter_or_digit, is_puny_character
from ._ip import is_ip_valid

__all__ = [
    "is_hostname_valid",
    "is_tld_valid",
]


def is_tld_valid(tld: object) -> bool:
    """Return ``True`` when ``tld`` is a usable top-level domain label.

    Every character must be a letter, a digit or a punycode-acceptable
    character, and the label must not be blank or purely numeric.
    """

    if not isinstance(tld, str) or not tld.strip():
        return False
    if tld.isdecimal():
        return False
    return all(
        is_letter_or_digit(character) or is_puny_character(character)
        for character in tld
    )


def _is_label_valid(label: str) -> bool:
    if not label.strip():
        return False
    last = len(label) - 1
    for index, character in enumerate(label):
        if is_letter_or_digit(character) or is_puny_character(character):
            continue
        if character != "-":
            return False
        # No hyphen at either end, and never two in a row.
        if index in {0, last} or label[index - 1] == "-":
            return False
    return True


def is_hostname_valid(hostname: object) -> bool:
    """Return ``True`` when ``hostname`` is an IP literal or a dotted name.

    A dotted name needs at least two labels. The last one must pass
    :func:`is_tld_valid`; the others may also contain interior, non-repeated
    hyphens.

    Example::

        assert is_hostname_valid("foo.bar.example.com")
        assert is_hostname_valid("192.168.1.1")
        assert not is_hostname_valid("go--ogle.com")
        assert not is_hostname_valid("localhost")
    """

    if not isinstance(hostname, str):
        return False
    if is_ip_valid(hostname):
        return True

    *labels, tld = hostname.split(".")
    if not labels or not is_tld_valid(tld):
        return False
    return all(_is_label_valid(label) for label in labels)
