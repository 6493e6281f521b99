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

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError, TrailingDataError
from .types import Buffer


class BytesDeserializer(Deserializer):
    """Deserializer over a byte sequence that is already in memory.

    Reads return views of the given data, nothing is copied. A failed read leaves the position unchanged.
    """

    def __init__(self, data: Buffer) -> None:
        self._data = memoryview(data).cast('B')
        self._offset = 0

    def _remaining(self) -> int:
        return len(self._data) - self._offset

    def _view(self, n: int, exact: bool) -> memoryview:
        if n < 0:
            raise SerializationError(f'cannot read a negative number of bytes: {n}')
        remaining = self._remaining()
        if exact and remaining < n:
            raise OutOfDataError(f'not enough bytes to read, wanted {n} but only {remaining} left')
        return self._data[self._offset:self._offset + min(n, remaining)]

    @override
    def finalize(self) -> None:
        if remaining := self._remaining():
            raise TrailingDataError(f'{remaining} bytes of trailing data')
        del self._data

    @override
    def is_empty(self) -> bool:
        return self._offset == len(self._data)

    @override
    def peek_byte(self) -> int:
        if self.is_empty():
            raise OutOfDataError('not enough bytes to read')
        return self._data[self._offset]

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        return self._view(n, exact)

    @override
    def read_byte(self) -> int:
        byte = self.peek_byte()
        self._offset += 1
        return byte

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> memoryview:
        view = self._view(n, exact)
        self._offset += len(view)
        return view

    @override
    def read_all(self) -> memoryview:
        return self.read_bytes(self._remaining())
