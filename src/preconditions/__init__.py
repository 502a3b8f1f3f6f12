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

"""Static precondition checks for function arguments.

Each ``assert_*`` function validates one value and either returns it
unchanged or raises a :class:`~preconditions.errors.ValidationError` with a
human-readable message. Each has a boolean ``is_*`` / ``has_*`` sibling that
answers the same question without raising.

Example::

    from preconditions import (
        assert_nonempty_string,
        assert_port,
        assert_valid_hostname,
    )

    def connect(host: str, port: int) -> Connection:
        host = assert_valid_hostname(host, "host")
        port = assert_port(port, "port")
        ...

    connect("example.com", 0)
    # InvalidPortError: Value in variable 'port' is expected to be within
    # 1-65535 range but is found to be out of the range

Modules
-------
- **assertions**: the assertion functions and their boolean siblings
- **address**: hostname, IP literal and email address recognizers
- **errors**: :class:`ErrorKind` and the exception hierarchy
- **logging**: structured logging helpers

All functions are pure and safe to call from many threads at once.
"""

from __future__ import annotations

from ._messages import compose_message, compose_message_with_indices
from .address import (
    is_email_valid,
    is_hostname_valid,
    is_ip_valid,
    is_ipv4_valid,
    is_ipv6_valid,
    is_tld_valid,
)
from .assertions import (
    MAX_PORT,
    MIN_PORT,
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
    has_all_nonnull_elements,
    has_all_nonnull_members,
    is_greater_than,
    is_greater_than_or_equal,
    is_lesser_than,
    is_natural,
    is_nonempty,
    is_nonempty_string,
    is_nonnegative,
    is_nonnull,
    is_port_valid,
)
from .errors import (
    EmptyCollectionError,
    EmptyStringError,
    ErrorKind,
    InvalidEmailAddressError,
    InvalidHostnameError,
    InvalidIPAddressError,
    InvalidPortError,
    NegativeNumberError,
    NotNaturalError,
    NullElementsError,
    NullValueError,
    OutOfRangeError,
    PreconditionError,
    ValidationError,
)

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
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
    "compose_message",
    "compose_message_with_indices",
    "has_all_nonnull_elements",
    "has_all_nonnull_members",
    "is_email_valid",
    "is_greater_than",
    "is_greater_than_or_equal",
    "is_hostname_valid",
    "is_ip_valid",
    "is_ipv4_valid",
    "is_ipv6_valid",
    "is_lesser_than",
    "is_natural",
    "is_nonempty",
    "is_nonempty_string",
    "is_nonnegative",
    "is_nonnull",
    "is_port_valid",
    "is_tld_valid",
]
