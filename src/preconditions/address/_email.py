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

"""Email address recognizer.

The check is purely syntactic and case-insensitive. The address is split at
the first ``@`` that is neither quoted nor escaped; the local part is run
through a two-state scanner and the domain part must be a hostname or a
bracketed IP literal.

Local part grammar
------------------

``UNQUOTED``
    Letters, digits, punycode-acceptable characters and the specials
    ``! # $ % & ' * + - / = ? ^ _ ` { | } ~``. A ``.`` may appear only
    between other characters and never twice in a row. A backslash is
    rejected.

``QUOTED``
    Entered and left by an unescaped ``"``. Any character is accepted. A
    backslash escapes exactly one following character, which must be CR, LF,
    tab, ``"``, ``\\``, ``[`` or ``^``.

The scan must finish in ``UNQUOTED`` with no pending escape.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Final

from ._characters import is_letter_or_digit, is_puny_character
from ._hostname import is_hostname_valid

__all__ = [
    "MAX_BRACKETED_DOMAIN_LENGTH",
    "MAX_LOCAL_PART_LENGTH",
    "is_email_valid",
    "split_email_address",
]

MAX_LOCAL_PART_LENGTH: Final = 64
MAX_BRACKETED_DOMAIN_LENGTH: Final = 244

_UNQUOTED_SPECIALS: Final = frozenset("!#$%&'*+-/=?^_`{|}~")
_ESCAPABLE: Final = frozenset('\r\n\t"\\[^')


class _ScanState(Enum):
    UNQUOTED = auto()
    QUOTED = auto()


def split_email_address(address: str) -> tuple[str, str] | None:
    """Split ``address`` at its first top-level ``@``.

    Returns ``(local_part, domain_part)``, or ``None`` when every ``@`` sits
    inside a quoted region or there is none at all.
    """

    quoted = False
    escaped = False
    for index, character in enumerate(address):
        if escaped:
            escaped = False
        elif quoted and character == "\\":
            escaped = True
        elif character == '"':
            quoted = not quoted
        elif character == "@" and not quoted:
            return address[:index], address[index + 1 :]
    return None


def _is_unquoted_character_valid(local_part: str, index: int) -> bool:
    character = local_part[index]
    if character == ".":
        if index in {0, len(local_part) - 1}:
            return False
        return local_part[index - 1] != "."
    return (
        is_letter_or_digit(character)
        or is_puny_character(character)
        or character in _UNQUOTED_SPECIALS
    )


def _is_local_part_valid(local_part: str) -> bool:
    stripped = local_part.strip()
    if not stripped or len(stripped) > MAX_LOCAL_PART_LENGTH:
        return False

    state = _ScanState.UNQUOTED
    escaped = False
    for index, character in enumerate(local_part):
        if escaped:
            if character not in _ESCAPABLE:
                return False
            escaped = False
            continue
        if character == '"':
            state = (
                _ScanState.QUOTED
                if state is _ScanState.UNQUOTED
                else _ScanState.UNQUOTED
            )
            continue
        if state is _ScanState.QUOTED:
            escaped = character == "\\"
            continue
        if not _is_unquoted_character_valid(local_part, index):
            return False

    return state is _ScanState.UNQUOTED and not escaped


def _is_domain_part_valid(domain_part: str) -> bool:
    if is_hostname_valid(domain_part):
        return True
    if not (domain_part.startswith("[") and domain_part.endswith("]")):
        return False
    if len(domain_part) > MAX_BRACKETED_DOMAIN_LENGTH:
        return False
    return is_hostname_valid(domain_part[1:-1])


def is_email_valid(address: object) -> bool:
    """Return ``True`` when ``address`` is a syntactically valid email address.

    Example::

        assert is_email_valid("email@example.com")
        assert is_email_valid('"john..doe"@example.com')
        assert is_email_valid("user@[2001:db8::1]")
        assert not is_email_valid("email..email@example.com")
        assert not is_email_valid("@example.com")
    """

    if not isinstance(address, str) or not address.strip():
        return False

    parts = split_email_address(address.lower())
    if parts is None:
        return False
    local_part, domain_part = parts
    return _is_local_part_valid(local_part) and _is_domain_part_valid(domain_part)
