# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Errors raised while encoding or decoding.

There are exactly three kinds of failure and they don't overlap:

- `MessageError`: the value or the data does not match the expected shape (raised by traversal drivers, or by the
  encoder/decoder for invalid values and invalid bytes)
- `TooManyItemsError`: a length-prefixed value has more than `2**32 - 1` items, only raised when encoding
- `BinaryError`: the underlying byte stream failed, for example a short read

None of them is retried, they all abort the current encode/decode call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import Self

if TYPE_CHECKING:
    from binserde.serialization import SerializationError


class CodecError(Exception):
    """Base class for exceptions in binserde."""
    pass


class MessageError(CodecError):
    """Free-form failure, it only carries a human readable message."""

    @classmethod
    def custom(cls, message: object) -> Self:
        return cls(str(message))

    @classmethod
    def invalid_type(cls, expected: str, found: object) -> Self:
        """Build the error for a value of an unexpected type."""
        return cls(f'invalid type: {type(found).__name__}, expected {expected}')

    @classmethod
    def invalid_value(cls, unexpected: str, expected: str) -> Self:
        """Build the error for a value that has the right type but is not acceptable."""
        return cls(f'invalid value: {unexpected}, expected {expected}')

    @property
    def message(self) -> str:
        return str(self)


class TooManyItemsError(CodecError):
    """Raised when a sequence, map, string or byte sequence is too long for its u32 length prefix."""

    def __init__(self) -> None:
        super().__init__('sequence has too many items, limit is 2^32')


class BinaryError(CodecError):
    """Wraps a failure of the byte stream, the original exception is kept in `cause`."""

    cause: SerializationError

    def __init__(self, cause: SerializationError) -> None:
        super().__init__(str(cause))
        self.cause = cause
