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

"""Character classes shared by the hostname and email scanners.

The punycode test is a per-character heuristic: a character counts as
acceptable when IDNA ToASCII turns it into an ``xn--`` label on its own. Real
IDNA validates whole labels and applies bidi and context rules, so this is an
approximation that lets Unicode letters (Devanagari, CJK, ...) through the
scanners without a full label validator.
"""

from __future__ import annotations

from encodings import idna
from typing import Final

__all__ = [
    "ACE_PREFIX",
    "is_letter_or_digit",
    "is_puny_character",
]

ACE_PREFIX: Final = "xn--"


def is_letter_or_digit(character: str) -> bool:
    """Return ``True`` for a Unicode letter or decimal digit."""

    return character.isalpha() or character.isdecimal()


def is_puny_character(character: str) -> bool:
    """Return ``True`` when ``character`` alone encodes to an ``xn--`` label.

    ASCII characters are returned unchanged by ToASCII and therefore never
    qualify. Characters rejected by nameprep, or mapped to nothing, make
    ToASCII raise and are treated as unacceptable.
    """

    if len(character) != 1:
        return False
    try:
        encoded = idna.ToASCII(character)
    except UnicodeError:
        return False
    return encoded.decode("ascii").startswith(ACE_PREFIX)
