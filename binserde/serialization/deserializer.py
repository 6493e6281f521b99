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

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .types import Buffer

if TYPE_CHECKING:
    from .bytes_deserializer import BytesDeserializer


class Deserializer(ABC):
    """Byte source that the decoder reads from, front to back.

    Reads that can't be satisfied raise `OutOfDataError`. The `peek_*` methods return the same bytes as the matching
    `read_*` method without consuming them.
    """

    @staticmethod
    def build_bytes_deserializer(data: Buffer) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data)

    def finalize(self) -> None:
        """Fail with `TrailingDataError` unless every byte was consumed, no read is allowed afterwards."""
        raise TypeError(f'{type(self).__name__} does not know where its data ends')

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_byte(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """With `exact=False` fewer than `n` bytes are returned when the source ends early."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        """With `exact=False` fewer than `n` bytes are returned when the source ends early."""
        raise NotImplementedError

    @abstractmethod
    def read_all(self) -> Buffer:
        """Consume and return whatever is left."""
        raise NotImplementedError

    def peek_struct(self, fmt: str) -> tuple[Any, ...]:
        return struct.unpack(fmt, self.peek_bytes(struct.calcsize(fmt)))

    def read_struct(self, fmt: str) -> tuple[Any, ...]:
        """Read exactly the size of a `struct` format and unpack it."""
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))
