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

"""Tests for reference and string assertions, including label handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from preconditions import (
    EmptyStringError,
    NullValueError,
    assert_greater_than,
    assert_greater_than_or_equal,
    assert_lesser_than,
    assert_natural,
    assert_nonempty,
    assert_nonempty_string,
    assert_nonnegative,
    assert_nonnull,
    assert_nonnull_elements,
    assert_nonnull_members,
    assert_port,
    assert_valid_email,
    assert_valid_hostname,
    assert_valid_ip,
    is_nonempty_string,
    is_nonnull,
)

pytestmark = pytest.mark.core

NULL_LABEL_MESSAGE = (
    "Value in variable 'variable_name' is expected to be non-null "
    "but is found to be null"
)

# (name, check taking (value, label), passing value, failing value)
_LABELED_CHECKS: list[tuple[str, Callable[[Any, Any], object], object, object]] = [
    ("nonnull", assert_nonnull, "x", None),
    ("nonempty_string", assert_nonempty_string, "x", "   "),
    ("nonempty", assert_nonempty, [1], []),
    ("nonnull_elements", assert_nonnull_elements, ["a"], ["a", None]),
    ("nonnull_members", assert_nonnull_members, {"a"}, {None}),
    ("natural", assert_natural, 1, 0),
    ("nonnegative", assert_nonnegative, 0, -1),
    (
        "greater_than",
        lambda value, label: assert_greater_than(value, 0, label),
        1,
        0,
    ),
    (
        "greater_than_or_equal",
        lambda value, label: assert_greater_than_or_equal(value, 0, label),
        0,
        -1,
    ),
    (
        "lesser_than",
        lambda value, label: assert_lesser_than(value, 0, label),
        -1,
        0,
    ),
    ("port", assert_port, 80, 0),
    ("hostname", assert_valid_hostname, "example.com", "go--ogle.com"),
    ("ip", assert_valid_ip, "10.0.0.1", "256.0.0.1"),
    ("email", assert_valid_email, "a@example.com", "plainaddress"),
]

_NULL_LABEL_CASES = [
    pytest.param(check, value, id=f"{name}-{outcome}")
    for name, check, passing, failing in _LABELED_CHECKS
    for outcome, value in (("valid", passing), ("invalid", failing), ("null", None))
]


class TestNonnull:
    def test_returns_same_object(self) -> None:
        payload = {"key": "value"}

        assert assert_nonnull(payload) is payload
        assert assert_nonnull(payload, "payload") is payload

    def test_falsy_values_pass(self) -> None:
        assert assert_nonnull(0) == 0
        assert assert_nonnull("") == ""
        assert assert_nonnull([]) == []
        assert assert_nonnull(False) is False

    def test_none_without_label(self) -> None:
        with pytest.raises(NullValueError) as exc_info:
            assert_nonnull(None)

        assert str(exc_info.value) == (
            "Value is expected to be non-null but is found to be null"
        )
        assert exc_info.value.variable_name is None

    def test_none_with_label(self) -> None:
        with pytest.raises(NullValueError) as exc_info:
            assert_nonnull(None, "config")

        assert str(exc_info.value) == (
            "Value in variable 'config' is expected to be non-null "
            "but is found to be null"
        )
        assert exc_info.value.variable_name == "config"

    def test_is_nonnull(self) -> None:
        assert is_nonnull(0)
        assert is_nonnull("")
        assert not is_nonnull(None)


class TestNullLabel:
    """A ``None`` label fails before the value is looked at."""

    def test_null_label_with_valid_value(self) -> None:
        with pytest.raises(NullValueError) as exc_info:
            assert_nonnull("fine", None)  # type: ignore[arg-type]

        assert str(exc_info.value) == NULL_LABEL_MESSAGE
        assert exc_info.value.variable_name == "variable_name"

    def test_null_label_wins_over_null_value(self) -> None:
        with pytest.raises(NullValueError) as exc_info:
            assert_nonnull(None, None)  # type: ignore[arg-type]

        assert str(exc_info.value) == NULL_LABEL_MESSAGE

    def test_null_label_wins_over_invalid_value(self) -> None:
        with pytest.raises(NullValueError) as exc_info:
            assert_port(0, None)  # type: ignore[arg-type]

        assert str(exc_info.value) == NULL_LABEL_MESSAGE

    @pytest.mark.parametrize(("check", "value"), _NULL_LABEL_CASES)
    def test_every_labeled_assertion_checks_label_first(
        self, check: Callable[[Any, Any], object], value: object
    ) -> None:
        with pytest.raises(NullValueError) as exc_info:
            check(value, None)

        assert str(exc_info.value) == NULL_LABEL_MESSAGE
        assert exc_info.value.variable_name == "variable_name"

    def test_labeled_checks_pass_with_real_label(self) -> None:
        for _name, check, passing, _failing in _LABELED_CHECKS:
            assert check(passing, "label") is passing

    def test_empty_label_is_used_verbatim(self) -> None:
        with pytest.raises(NullValueError) as exc_info:
            assert_nonnull(None, "")

        assert str(exc_info.value).startswith("Value in variable '' ")


class TestNonemptyString:
    @pytest.mark.parametrize("value", ["a", " a ", "\tname\n", "0"])
    def test_returns_same_object(self, value: str) -> None:
        assert assert_nonempty_string(value) is value
        assert is_nonempty_string(value)

    @pytest.mark.parametrize("value", ["", " ", "   ", "\t\n\r"])
    def test_blank_strings_fail(self, value: str) -> None:
        with pytest.raises(EmptyStringError) as exc_info:
            assert_nonempty_string(value, "name")

        assert str(exc_info.value) == (
            "Value in variable 'name' is expected to be non-empty "
            "but value is actually a empty string"
        )
        assert not is_nonempty_string(value)

    def test_none_and_blank_are_distinguished(self) -> None:
        with pytest.raises(NullValueError):
            assert_nonempty_string(None)
        with pytest.raises(EmptyStringError):
            assert_nonempty_string("   ")

    def test_non_string_raises_type_error(self) -> None:
        value: Any = 42

        with pytest.raises(TypeError, match="Expected str, got int"):
            assert_nonempty_string(value)

    def test_is_nonempty_string_rejects_non_strings(self) -> None:
        assert not is_nonempty_string(None)
        assert not is_nonempty_string(42)
        assert not is_nonempty_string(["a"])
