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
    from .bytes_serializer import BytesSerializer


class Serializer(ABC):
    """Byte sink that the encoder writes to, in order and without seeking."""

    @staticmethod
    def build_bytes_serializer() -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer()

    def finalize(self) -> Buffer:
        """Return everything that was written, no write is allowed afterwards.

        Sinks that hand the bytes somewhere else (a file, a socket) have nothing to return and don't implement it.
        """
        raise TypeError(f'{type(self).__name__} does not keep the written bytes')

    @abstractmethod
    def cur_pos(self) -> int:
        """How many bytes were written so far."""
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        raise NotImplementedError

    def write_struct(self, data: tuple[Any, ...], fmt: str) -> None:
        """Pack `data` with a `struct` format and write the result."""
        self.write_bytes(struct.pack(fmt, *data))
