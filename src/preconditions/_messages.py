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

"""Failure descriptions and message composition.

Messages are plain concatenation with no escaping::

    Value [in variable '<name>' ]<description>[. <index suffix>]

Downstream tests and log scrapers match on these strings, so the wording is
part of the public contract.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

__all__ = [
    "EMPTY_COLLECTION_MESSAGE",
    "EMPTY_STRING_MESSAGE",
    "GREATER_NUMBER_MESSAGE",
    "GREATER_OR_EQUAL_NUMBER_MESSAGE",
    "INVALID_EMAIL_MESSAGE",
    "INVALID_HOSTNAME_MESSAGE",
    "INVALID_IP_MESSAGE",
    "INVALID_PORT_MESSAGE",
    "LESSER_NUMBER_MESSAGE",
    "NATURAL_NUMBER_MESSAGE",
    "NONNEGATIVE_NUMBER_MESSAGE",
    "NULLS_IN_COLLECTION_MESSAGE",
    "NULL_VALUE_MESSAGE",
    "VARIABLE_NAME_LABEL",
    "compose_message",
    "compose_message_with_indices",
]

NULL_VALUE_MESSAGE: Final = "is expected to be non-null but is found to be null"
EMPTY_STRING_MESSAGE: Final = (
    "is expected to be non-empty but value is actually a empty string"
)
EMPTY_COLLECTION_MESSAGE: Final = (
    "is expected to be non-empty but value is actually empty"
)
NULLS_IN_COLLECTION_MESSAGE: Final = (
    "is expected to have all of its list members to be non-null "
    "but the list contains null members"
)
NATURAL_NUMBER_MESSAGE: Final = (
    "is expected to be a natural number (1, 2, ..., N-1, N) "
    "but it is actually not a natural number"
)
NONNEGATIVE_NUMBER_MESSAGE: Final = (
    "is expected to be non-negative but value is actually a negative number"
)
GREATER_NUMBER_MESSAGE: Final = "is expected to be greater number, but it is not"
GREATER_OR_EQUAL_NUMBER_MESSAGE: Final = (
    "is expected to be greater or equal number, but it is not"
)
LESSER_NUMBER_MESSAGE: Final = "is expected to be lesser number, but it is not"
INVALID_PORT_MESSAGE: Final = (
    "is expected to be within 1-65535 range but is found to be out of the range"
)
INVALID_HOSTNAME_MESSAGE: Final = (
    "is expected to be a valid hostname but it is actually not a valid hostname"
)
INVALID_IP_MESSAGE: Final = (
    "is expected to be a valid IP but it is actually not a valid IP"
)
INVALID_EMAIL_MESSAGE: Final = (
    "is expected to be a valid email address "
    "but it is actually not a valid email address"
)

# Reported in place of the caller's label when the label itself is None.
VARIABLE_NAME_LABEL: Final = "variable_name"


def compose_message(variable_name: str | None, description: str) -> str:
    """Return ``description`` prefixed with ``Value`` and the optional label."""

    composed = "Value "
    if variable_name is not None:
        composed += f"in variable '{variable_name}' "
    return composed + description


def compose_message_with_indices(
    variable_name: str | None,
    description: str,
    indices: Sequence[int],
) -> str:
    """Return :func:`compose_message` followed by the offending indices.

    A single index is reported as ``The invalid member is at index 3``;
    several are rendered as ``Invalid members are located at indices [1, 4]``.
    """

    if len(indices) == 1:
        suffix = f"The invalid member is at index {indices[0]}"
    else:
        suffix = f"Invalid members are located at indices {list(indices)}"
    return f"{compose_message(variable_name, description)}. {suffix}"
