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
Adapters that report every failure of the adapted stream as a `BinaryError`.

The encoder and decoder always wrap their stream with these, so code that writes or reads raw bytes through
`Encoder.serializer` or `Decoder.deserializer` (like manual codecs do) gets the same error model as the rest of the
codec:

>>> from binserde.serialization import Deserializer
>>> de = BinaryErrorDeserializer(Deserializer.build_bytes_deserializer(b'\\x01'))
>>> de.read_byte()
1
>>> try:
...     de.read_byte()
... except BinaryError as e:
...     print(type(e.cause).__name__, *e.args)
OutOfDataError not enough bytes to read
"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from typing_extensions import override

from binserde.error import BinaryError
from binserde.serialization.deserializer import Deserializer
from binserde.serialization.exceptions import SerializationError
from binserde.serialization.serializer import Serializer

from ..types import Buffer

S = TypeVar('S', bound=Serializer)
D = TypeVar('D', bound=Deserializer)


@contextmanager
def _as_binary_error() -> Iterator[None]:
    try:
        yield
    except SerializationError as e:
        raise BinaryError(e) from e


class BinaryErrorSerializer(Serializer, Generic[S]):
    """Forwards every call to `inner`."""

    inner: S

    def __init__(self, serializer: S) -> None:
        self.inner = serializer

    @override
    def finalize(self) -> Buffer:
        with _as_binary_error():
            return self.inner.finalize()

    @override
    def cur_pos(self) -> int:
        with _as_binary_error():
            return self.inner.cur_pos()

    @override
    def write_byte(self, data: int) -> None:
        with _as_binary_error():
            self.inner.write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        with _as_binary_error():
            self.inner.write_bytes(data)


class BinaryErrorDeserializer(Deserializer, Generic[D]):
    """Forwards every call to `inner`."""

    inner: D

    def __init__(self, deserializer: D) -> None:
        self.inner = deserializer

    @override
    def finalize(self) -> None:
        with _as_binary_error():
            self.inner.finalize()

    @override
    def is_empty(self) -> bool:
        return self.inner.is_empty()

    @override
    def peek_byte(self) -> int:
        with _as_binary_error():
            return self.inner.peek_byte()

    @override
    def peek_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        with _as_binary_error():
            return self.inner.peek_bytes(n, exact=exact)

    @override
    def read_byte(self) -> int:
        with _as_binary_error():
            return self.inner.read_byte()

    @override
    def read_bytes(self, n: int, *, exact: bool = True) -> Buffer:
        with _as_binary_error():
            return self.inner.read_bytes(n, exact=exact)

    @override
    def read_all(self) -> Buffer:
        with _as_binary_error():
            return self.inner.read_all()
