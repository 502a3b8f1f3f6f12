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

"""Base exception hierarchy for :mod:`preconditions`.

Every failed assertion raises a subclass of :class:`ValidationError`. The
subclasses map one-to-one onto :class:`ErrorKind` so callers can branch on the
failure category without parsing the message.

Exception hierarchy::

    PreconditionError
    └── ValidationError (also a ValueError)
        ├── NullValueError
        ├── EmptyStringError
        ├── EmptyCollectionError
        ├── NullElementsError
        ├── NotNaturalError
        ├── NegativeNumberError
        ├── OutOfRangeError
        ├── InvalidPortError
        ├── InvalidHostnameError
        ├── InvalidIPAddressError
        └── InvalidEmailAddressError

Example::

    from preconditions import assert_port
    from preconditions.errors import ErrorKind, ValidationError

    try:
        port = assert_port(raw_port, "raw_port")
    except ValidationError as e:
        if e.kind is ErrorKind.INVALID_PORT:
            port = DEFAULT_PORT
        else:
            raise
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar

__all__ = [
    "EmptyCollectionError",
    "EmptyStringError",
    "ErrorKind",
    "InvalidEmailAddressError",
    "InvalidHostnameError",
    "InvalidIPAddressError",
    "InvalidPortError",
    "NegativeNumberError",
    "NotNaturalError",
    "NullElementsError",
    "NullValueError",
    "OutOfRangeError",
    "PreconditionError",
    "ValidationError",
]


class ErrorKind(StrEnum):
    """Category of a failed check."""

    NULL_VALUE = "null_value"
    EMPTY_STRING = "empty_string"
    EMPTY_COLLECTION = "empty_collection"
    NULL_ELEMENTS = "null_elements"
    NOT_NATURAL = "not_natural"
    NEGATIVE = "negative"
    OUT_OF_RANGE = "out_of_range"
    INVALID_PORT = "invalid_port"
    INVALID_HOSTNAME = "invalid_hostname"
    INVALID_IP = "invalid_ip"
    INVALID_EMAIL = "invalid_email"


class PreconditionError(Exception):
    """Base class for all preconditions exceptions.

    Catch this to handle any library-specific failure with a single handler
    while letting standard Python exceptions propagate normally.
    """


class ValidationError(PreconditionError, ValueError):
    """Raised when a value fails a precondition check.

    Attributes:
        kind: The :class:`ErrorKind` of the failed check. Fixed per subclass.
        message: The fully composed, human-readable message.
        variable_name: The label the caller supplied, ``None`` when the check
            was unlabeled.

    Note:
        This exception also inherits from ``ValueError`` so handlers expecting
        standard argument errors keep working.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, variable_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.variable_name = variable_name


class NullValueError(ValidationError):
    """Raised when a value is ``None``."""

    kind = ErrorKind.NULL_VALUE


class EmptyStringError(ValidationError):
    """Raised when a string is empty or contains only whitespace."""

    kind = ErrorKind.EMPTY_STRING


class EmptyCollectionError(ValidationError):
    """Raised when a collection has no members."""

    kind = ErrorKind.EMPTY_COLLECTION


class NullElementsError(ValidationError):
    """Raised when a collection contains ``None`` members.

    ``indices`` lists the zero-based positions of the offending members in
    ascending order. It is ``None`` for unordered sets, where only the
    presence of a ``None`` member can be reported.
    """

    kind = ErrorKind.NULL_ELEMENTS

    def __init__(
        self,
        message: str,
        *,
        variable_name: str | None = None,
        indices: Sequence[int] | None = None,
    ) -> None:
        super().__init__(message, variable_name=variable_name)
        self.indices: tuple[int, ...] | None = (
            tuple(indices) if indices is not None else None
        )


class NotNaturalError(ValidationError):
    """Raised when a number is not a natural number (``n > 0``)."""

    kind = ErrorKind.NOT_NATURAL


class NegativeNumberError(ValidationError):
    """Raised when a number is below zero."""

    kind = ErrorKind.NEGATIVE


class OutOfRangeError(ValidationError):
    """Raised when a number fails a comparison against a bound."""

    kind = ErrorKind.OUT_OF_RANGE


class InvalidPortError(ValidationError):
    """Raised when a number is outside the ``1-65535`` port range."""

    kind = ErrorKind.INVALID_PORT


class InvalidHostnameError(ValidationError):
    """Raised when a string is not a syntactically valid hostname."""

    kind = ErrorKind.INVALID_HOSTNAME


class InvalidIPAddressError(ValidationError):
    """Raised when a string is not an IPv4 or IPv6 literal."""

    kind = ErrorKind.INVALID_IP


class InvalidEmailAddressError(ValidationError):
    """Raised when a string is not a syntactically valid email address."""

    kind = ErrorKind.INVALID_EMAIL
