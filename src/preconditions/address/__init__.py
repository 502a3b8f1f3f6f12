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

"""Syntactic recognizers for hostnames, IP literals and email addresses.

These predicates never raise and never touch the network: they answer
whether a string *looks* like an address, not whether it resolves.

Supported forms
---------------

- **Hostnames**: two or more dot-separated labels of letters, digits and
  interior single hyphens. Unicode letters are accepted one character at a
  time through :func:`is_puny_character`, which is not full IDNA
  validation.
- **IP literals**: dotted-quad IPv4 without leading zeros, and IPv6 in full,
  compressed, IPv4-embedded and zoned link-local forms.
- **Email addresses**: RFC 5321 style local parts, including quoted
  sections with escapes, followed by a hostname or a bracketed IP literal
  such as ``user@[2001:db8::1]``.
"""

from __future__ import annotations

from ._characters import ACE_PREFIX, is_letter_or_digit, is_puny_character
from ._email import (
    MAX_BRACKETED_DOMAIN_LENGTH,
    MAX_LOCAL_PART_LENGTH,
    is_email_valid,
    split_email_address,
)
from ._hostname import is_hostname_valid, is_tld_valid
from ._ip import is_ip_valid, is_ipv4_valid, is_ipv6_valid

__all__ = [
    "ACE_PREFIX",
    "MAX_BRACKETED_DOMAIN_LENGTH",
    "MAX_LOCAL_PART_LENGTH",
    "is_email_valid",
    "is_hostname_valid",
    "is_ip_valid",
    "is_ipv4_valid",
    "is_ipv6_valid",
    "is_letter_or_digit",
    "is_puny_character",
    "is_tld_valid",
    "split_email_address",
]
