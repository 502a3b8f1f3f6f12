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

"""Assertions that return the validated value or raise a descriptive error.

Every check comes in two flavours:

- ``assert_*`` returns its input unchanged (same object, no normalization) so
  call sites can chain ``port = assert_port(port, "port")``. On failure it
  raises the matching :class:`~preconditions.errors.ValidationError`
  subclass.
- ``is_*`` / ``has_*`` answers the same question with a ``bool``. It never
  raises, and returns ``False`` for ``None`` or a value of the wrong type.

Labels
------

The optional ``variable_name`` only enriches the message::

    >>> assert_natural(0, "retries")
    Traceback (most recent call last):
    ...
    NotNaturalError: Value in variable 'retries' is expected to be a natural ...

Passing ``None`` as the label is itself a precondition failure. It is
reported as a :class:`~preconditions.errors.NullValueError` against the label
``variable_name`` and takes precedence over any problem with the value.
Omitting the label is fine.

Collections
-----------

Ordered collections and sets are checked by separate entry points.
:func:`assert_nonnull_elements` reports the indices of ``None`` members;
:func:`assert_nonnull_members` takes a set, where positions are meaningless,
and only reports that a ``None`` member is present.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence, Set, Sized
from decimal import Decimal
from enum import Enum, auto
from numbers import Real
from typing import Final, TypeGuard

from ._messages import (
    EMPTY_COLLECTION_MESSAGE,
    EMPTY_STRING_MESSAGE,
    GREATER_NUMBER_MESSAGE,
    GREATER_OR_EQUAL_NUMBER_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    INVALID_HOSTNAME_MESSAGE,
    INVALID_IP_MESSAGE,
    INVALID_PORT_MESSAGE,
    LESSER_NUMBER_MESSAGE,
    NATURAL_NUMBER_MESSAGE,
    NONNEGATIVE_NUMBER_MESSAGE,
    NULL_VALUE_MESSAGE,
    NULLS_IN_COLLECTION_MESSAGE,
    VARIABLE_NAME_LABEL,
    compose_message,
    compose_message_with_indices,
)
from .address import is_email_valid, is_hostname_valid, is_ip_valid
from .errors import (
    EmptyCollectionError,
    EmptyStringError,
    InvalidEmailAddressError,
    InvalidHostnameError,
    InvalidIPAddressError,
    InvalidPortError,
    NegativeNumberError,
    NotNaturalError,
    NullElementsError,
    NullValueError,
    OutOfRangeError,
    ValidationError,
)
from .logging import get_logger

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "assert_greater_than",
    "assert_greater_than_or_equal",
    "assert_lesser_than",
    "assert_natural",
    "assert_nonempty",
    "assert_nonempty_string",
    "assert_nonnegative",
    "assert_nonnull",
    "assert_nonnull_elements",
    "assert_nonnull_members",
    "assert_port",
    "assert_valid_email",
    "assert_valid_hostname",
    "assert_valid_ip",
    "has_all_nonnull_elements",
    "has_all_nonnull_members",
    "is_greater_than",
    "is_greater_than_or_equal",
    "is_lesser_than",
    "is_natural",
    "is_nonempty",
    "is_nonempty_string",
    "is_nonnegative",
    "is_nonnull",
    "is_port_valid",
]

MIN_PORT: Final = 1
MAX_PORT: Final = 65535

_LOGGER = get_logger(__name__)


class _Unlabeled(Enum):
    TOKEN = auto()


# Default for ``variable_name``; distinguishes "no label" from an explicit None.
_UNLABELED: Final = _Unlabeled.TOKEN

type _Label = str | _Unlabeled


def _report[E: ValidationError](error: E) -> E:
    _LOGGER.debug(
        "Precondition check failed.",
        event="preconditions.check_failed",
        context={"kind": error.kind.value, "variable_name": error.variable_name},
    )
    return error


def _failure[E: ValidationError](
    error_type: type[E], label: str | None, description: str
) -> E:
    return _report(error_type(compose_message(label, description), variable_name=label))


def _resolve_label(variable_name: _Label | None) -> str | None:
    if variable_name is _UNLABELED:
        return None
    if variable_name is None:
        raise _failure(NullValueError, VARIABLE_NAME_LABEL, NULL_VALUE_MESSAGE)
    return variable_name


def _require_nonnull[T](value: T | None, label: str | None) -> T:
    if value is not None:
        return value
    raise _failure(NullValueError, label, NULL_VALUE_MESSAGE)


def _require_nonempty[C: Sized](value: C, label: str | None) -> C:
    if len(value) != 0:
        return value
    raise _failure(EmptyCollectionError, label, EMPTY_COLLECTION_MESSAGE)


def _is_number(value: object) -> TypeGuard[float | Decimal]:
    # NaN is excluded: ordering comparisons involving Decimal signal on it.
    if isinstance(value, Decimal):
        return not value.is_nan()
    return isinstance(value, Real) and value == value


# -- references and strings ---------------------------------------------------


def is_nonnull(value: object) -> bool:
    """Return ``True`` when ``value`` is not ``None``."""

    return value is not None


def assert_nonnull[T](value: T | None, variable_name: _Label = _UNLABELED) -> T:
    """Return ``value`` if it is not ``None``.

    Raises:
        NullValueError: If ``value`` (or an explicitly passed label) is ``None``.
    """

    label = _resolve_label(variable_name)
    return _require_nonnull(value, label)


def is_nonempty_string(value: object) -> bool:
    """Return ``True`` for a string with at least one non-whitespace character."""

    return isinstance(value, str) and value.strip() != ""


def assert_nonempty_string(
    value: str | None, variable_name: _Label = _UNLABELED
) -> str:
    """Return ``value`` if it holds at least one non-whitespace character.

    Raises:
        NullValueError: If ``value`` is ``None``.
        EmptyStringError: If ``value`` is empty or whitespace only.
        TypeError: If ``value`` is not a string.
    """

    label = _resolve_label(variable_name)
    string = _require_nonnull(value, label)
    if not isinstance(string, str):
        msg = f"Expected str, got {type(string).__name__}"
        raise TypeError(msg)
    if string.strip() != "":
        return string
    raise _failure(EmptyStringError, label, EMPTY_STRING_MESSAGE)


# -- collections ----------------------------------------------------------------


def is_nonempty(value: object) -> bool:
    """Return ``True`` when ``value`` is a collection with at least one member."""

    return isinstance(value, Sized) and len(value) != 0


def assert_nonempty[C: Sized](value: C | None, variable_name: _Label = _UNLABELED) -> C:
    """Return ``value`` if it is a collection with at least one member.

    Works for anything with ``len()``: lists, tuples, sets, mappings, strings.

    Raises:
        NullValueError: If ``value`` is ``None``.
        EmptyCollectionError: If ``value`` has no members.
    """

    label = _resolve_label(variable_name)
    return _require_nonempty(_require_nonnull(value, label), label)


def has_all_nonnull_elements(
    value: object, *, empty_allowed: bool = False
) -> bool:
    """Return ``True`` when no element of ``value`` is ``None``."""

    if not isinstance(value, Collection):
        return False
    if not empty_allowed and len(value) == 0:
        return False
    return all(element is not None for element in value)


def assert_nonnull_elements[S: Sequence[object]](
    value: S | None,
    variable_name: _Label = _UNLABELED,
    *,
    empty_allowed: bool = False,
) -> S:
    """Return ``value`` if none of its elements is ``None``.

    The error lists every offending position in ascending order, e.g.
    ``Invalid members are located at indices [1, 3]``.

    Raises:
        NullValueError: If ``value`` is ``None``.
        EmptyCollectionError: If ``value`` is empty and ``empty_allowed`` is
            false.
        NullElementsError: If any element is ``None``. ``indices`` holds the
            offending positions.
    """

    label = _resolve_label(variable_name)
    sequence = _require_nonnull(value, label)
    if not empty_allowed:
        _require_nonempty(sequence, label)

    indices = [index for index, element in enumerate(sequence) if element is None]
    if not indices:
        return sequence

    error = NullElementsError(
        compose_message_with_indices(label, NULLS_IN_COLLECTION_MESSAGE, indices),
        variable_name=label,
        indices=indices,
    )
    raise _report(error)


def has_all_nonnull_members(
    value: object, *, empty_allowed: bool = False
) -> bool:
    """Return ``True`` when the set ``value`` has no ``None`` member."""

    if not isinstance(value, Set):
        return False
    if not empty_allowed and len(value) == 0:
        return False
    return None not in value


def assert_nonnull_members[S: Set[object]](
    value: S | None,
    variable_name: _Label = _UNLABELED,
    *,
    empty_allowed: bool = False,
) -> S:
    """Return the set ``value`` if it has no ``None`` member.

    Sets have no stable positions, so the error carries ``indices=None`` and
    the message has no index suffix.

    Raises:
        NullValueError: If ``value`` is ``None``.
        EmptyCollectionError: If ``value`` is empty and ``empty_allowed`` is
            false.
        NullElementsError: If ``None`` is a member.
    """

    label = _resolve_label(variable_name)
    members = _require_nonnull(value, label)
    if not empty_allowed:
        _require_nonempty(members, label)
    if None not in members:
        return members
    raise _failure(NullElementsError, label, NULLS_IN_COLLECTION_MESSAGE)


# -- numbers --------------------------------------------------------------------


def is_natural(number: object) -> bool:
    """Return ``True`` when ``number`` is greater than zero."""

    return _is_number(number) and number > 0


def assert_natural[N: float](number: N | None, variable_name: _Label = _UNLABELED) -> N:
    """Return ``number`` if it is a natural number (``number > 0``).

    Raises:
        NullValueError: If ``number`` is ``None``.
        NotNaturalError: If ``number`` is zero or negative.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(number, label)
    if value > 0:
        return value
    raise _failure(NotNaturalError, label, NATURAL_NUMBER_MESSAGE)


def is_nonnegative(number: object) -> bool:
    """Return ``True`` when ``number`` is zero or greater."""

    return _is_number(number) and number >= 0


def assert_nonnegative[N: float](
    number: N | None, variable_name: _Label = _UNLABELED
) -> N:
    """Return ``number`` if it is zero or greater.

    Raises:
        NullValueError: If ``number`` is ``None``.
        NegativeNumberError: If ``number`` is below zero.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(number, label)
    if value >= 0:
        return value
    raise _failure(NegativeNumberError, label, NONNEGATIVE_NUMBER_MESSAGE)


def is_greater_than(number: object, compare: object) -> bool:
    """Return ``True`` when ``number > compare``."""

    return _is_number(number) and _is_number(compare) and number > compare


def assert_greater_than[N: float](
    number: N | None, compare: float, variable_name: _Label = _UNLABELED
) -> N:
    """Return ``number`` if it is strictly greater than ``compare``.

    Raises:
        NullValueError: If ``number`` is ``None``.
        OutOfRangeError: If ``number <= compare``.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(number, label)
    if value > compare:
        return value
    raise _failure(OutOfRangeError, label, GREATER_NUMBER_MESSAGE)


def is_greater_than_or_equal(number: object, compare: object) -> bool:
    """Return ``True`` when ``number >= compare``."""

    return _is_number(number) and _is_number(compare) and number >= compare


def assert_greater_than_or_equal[N: float](
    number: N | None, compare: float, variable_name: _Label = _UNLABELED
) -> N:
    """Return ``number`` if it is greater than or equal to ``compare``.

    Raises:
        NullValueError: If ``number`` is ``None``.
        OutOfRangeError: If ``number < compare``.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(number, label)
    if value >= compare:
        return value
    raise _failure(OutOfRangeError, label, GREATER_OR_EQUAL_NUMBER_MESSAGE)


def is_lesser_than(number: object, compare: object) -> bool:
    """Return ``True`` when ``number < compare``."""

    return _is_number(number) and _is_number(compare) and number < compare


def assert_lesser_than[N: float](
    number: N | None, compare: float, variable_name: _Label = _UNLABELED
) -> N:
    """Return ``number`` if it is strictly lesser than ``compare``.

    Raises:
        NullValueError: If ``number`` is ``None``.
        OutOfRangeError: If ``number >= compare``.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(number, label)
    if value < compare:
        return value
    raise _failure(OutOfRangeError, label, LESSER_NUMBER_MESSAGE)


def is_port_valid(port: object) -> bool:
    """Return ``True`` when ``port`` is within ``1-65535``."""

    return _is_number(port) and MIN_PORT <= port <= MAX_PORT


def assert_port(port: int | None, variable_name: _Label = _UNLABELED) -> int:
    """Return ``port`` if it is within ``1-65535``.

    Raises:
        NullValueError: If ``port`` is ``None``.
        InvalidPortError: If ``port`` is out of range.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(port, label)
    if MIN_PORT <= value <= MAX_PORT:
        return value
    raise _failure(InvalidPortError, label, INVALID_PORT_MESSAGE)


# -- addresses ------------------------------------------------------------------


def assert_valid_hostname(
    hostname: str | None, variable_name: _Label = _UNLABELED
) -> str:
    """Return ``hostname`` if it is an IP literal or a dotted hostname.

    See :func:`preconditions.address.is_hostname_valid` for the grammar.

    Raises:
        NullValueError: If ``hostname`` is ``None``.
        InvalidHostnameError: If ``hostname`` is not syntactically valid.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(hostname, label)
    if is_hostname_valid(value):
        return value
    raise _failure(InvalidHostnameError, label, INVALID_HOSTNAME_MESSAGE)


def assert_valid_ip(address: str | None, variable_name: _Label = _UNLABELED) -> str:
    """Return ``address`` if it is an IPv4 or IPv6 literal.

    Raises:
        NullValueError: If ``address`` is ``None``.
        InvalidIPAddressError: If ``address`` is not an IP literal.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(address, label)
    if is_ip_valid(value):
        return value
    raise _failure(InvalidIPAddressError, label, INVALID_IP_MESSAGE)


def assert_valid_email(
    address: str | None, variable_name: _Label = _UNLABELED
) -> str:
    """Return ``address`` if it is a syntactically valid email address.

    The comparison is case-insensitive but the returned value is the
    caller's original string, not a lower-cased copy.

    Raises:
        NullValueError: If ``address`` is ``None``.
        EmptyStringError: If ``address`` is blank.
        InvalidEmailAddressError: If ``address`` is not a valid email address.
    """

    label = _resolve_label(variable_name)
    value = _require_nonnull(address, label)
    if isinstance(value, str) and value.strip() == "":
        raise _failure(EmptyStringError, label, EMPTY_STRING_MESSAGE)
    if is_email_valid(value):
        return value
    raise _failure(InvalidEmailAddressError, label, INVALID_EMAIL_MESSAGE)
