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

from typing_extensions import override

from .exceptions import SerializationError
from .serializer import Serializer
from .types import Buffer


class BytesSerializer(Serializer):
    """In-memory Serializer, every write is appended to a single growing buffer."""

    def __init__(self) -> None:
        self._buffer: bytearray | None = bytearray()

    def _open_buffer(self) -> bytearray:
        if self._buffer is None:
            raise SerializationError('serializer was already finalized')
        return self._buffer

    @override
    def finalize(self) -> memoryview:
        result = memoryview(bytes(self._open_buffer()))
        self._buffer = None
        return result

    @override
    def cur_pos(self) -> int:
        return len(self._open_buffer())

    @override
    def write_byte(self, data: int) -> None:
        if not 0 <= data <= 0xff:
            raise SerializationError(f'byte must be in range(0, 256), got {data}')
        self._open_buffer().append(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        # extending copies, later changes to a mutable `data` don't reach the output
        self._open_buffer().extend(memoryview(data).cast('B'))
