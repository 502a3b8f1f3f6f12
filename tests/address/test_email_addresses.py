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

"""Tests for email address recognition."""

from __future__ import annotations

import pytest

from preconditions import (
    EmptyStringError,
    InvalidEmailAddressError,
    NullValueError,
    assert_valid_email,
    is_email_valid,
)
from preconditions.address import (
    MAX_BRACKETED_DOMAIN_LENGTH,
    MAX_LOCAL_PART_LENGTH,
    split_email_address,
)

pytestmark = pytest.mark.core

VALID_ADDRESSES = [
    "email@example.com",
    "test@jaymail.com",
    "firstname.lastname@example.com",
    "email@subdomain.example.com",
    "firstname+lastname@example.com",
    "firstname-lastname@example.com",
    "1234567890@example.com",
    "_______@example.com",
    "email@example-one.com",
    "email@example.name",
    "email@123.123.123.123",
    "email@[123.123.123.123]",
    "user@[2001:db8::1]",
    "user@[192.168.1.1]",
    "ünïcode@example.com",
    "o'brien@example.ie",
    '"email"@example.com',
    '"john..doe"@example.com',
    '"john doe"@example.com',
    '"a@b"@example.com',
    'a."quoted".b@example.com',
    '"esc\\"aped"@example.com',
    '"tab\\\tok"@example.com',
]

INVALID_ADDRESSES = [
    "plainaddress",
    "34f3gagf",
    "@example.com",
    "email@",
    "email..email@example.com",
    "Abc..123@example.com",
    ".email@example.com",
    "email.@example.com",
    "email@example",
    "helpdesk@google",
    "help@googl@e.com",
    "email@-example.com",
    "email@example..com",
    "email@111.222.333.44444",
    "email@[]",
    "email@[example.com",
    "Joe Smith <email@example.com>",
    "email@example.com (Joe Smith)",
    "back\\slash@example.com",
    '"unterminated@example.com',
    '"bad\\escape"@example.com',
    '"trailing\\"@example.com',
    " email@example.com",
]


@pytest.mark.parametrize("address", VALID_ADDRESSES)
def test_valid_addresses(address: str) -> None:
    assert is_email_valid(address)
    assert assert_valid_email(address) is address


@pytest.mark.parametrize("address", INVALID_ADDRESSES)
def test_invalid_addresses(address: str) -> None:
    assert not is_email_valid(address)

    with pytest.raises(InvalidEmailAddressError) as exc_info:
        assert_valid_email(address, "email")

    assert str(exc_info.value) == (
        "Value in variable 'email' is expected to be a valid email address "
        "but it is actually not a valid email address"
    )


def test_validation_is_case_insensitive_but_returns_original() -> None:
    address = "Email@Example.COM"

    assert is_email_valid(address)
    assert assert_valid_email(address) is address


class TestLocalPartLength:
    def test_longest_local_part_passes(self) -> None:
        assert is_email_valid("a" * MAX_LOCAL_PART_LENGTH + "@example.com")

    def test_overlong_local_part_fails(self) -> None:
        assert not is_email_valid("a" * (MAX_LOCAL_PART_LENGTH + 1) + "@example.com")


class TestBracketedDomainLength:
    def test_longest_bracketed_domain_passes(self) -> None:
        domain = "[" + "a" * (MAX_BRACKETED_DOMAIN_LENGTH - 6) + ".com]"

        assert len(domain) == MAX_BRACKETED_DOMAIN_LENGTH
        assert is_email_valid(f"user@{domain}")

    def test_overlong_bracketed_domain_fails(self) -> None:
        domain = "[" + "a" * (MAX_BRACKETED_DOMAIN_LENGTH - 5) + ".com]"

        assert len(domain) == MAX_BRACKETED_DOMAIN_LENGTH + 1
        assert not is_email_valid(f"user@{domain}")


class TestAssertValidEmail:
    def test_none_fails_as_null(self) -> None:
        with pytest.raises(NullValueError):
            assert_valid_email(None, "email")

    @pytest.mark.parametrize("address", ["", "   ", "\t"])
    def test_blank_fails_as_empty_string(self, address: str) -> None:
        with pytest.raises(EmptyStringError) as exc_info:
            assert_valid_email(address, "email")

        assert exc_info.value.variable_name == "email"

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_is_email_valid_rejects_non_addresses(self, value: object) -> None:
        assert not is_email_valid(value)


class TestSplitEmailAddress:
    def test_splits_at_first_at_sign(self) -> None:
        assert split_email_address("a@b@c") == ("a", "b@c")

    def test_skips_quoted_at_sign(self) -> None:
        assert split_email_address('"a@b"@example.com') == ('"a@b"', "example.com")

    def test_skips_escaped_quote(self) -> None:
        assert split_email_address('"a\\"@b"@c') == ('"a\\"@b"', "c")

    @pytest.mark.parametrize("address", ["plain", '"a@b', ""])
    def test_no_top_level_at_sign(self, address: str) -> None:
        assert split_email_address(address) is None

    def test_empty_parts(self) -> None:
        assert split_email_address("@") == ("", "")
