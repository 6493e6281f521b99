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

r"""
The decoder reads back the layout written by `binserde.encoder.Encoder`, see that module for the full layout.

Since the data is not self-describing, the caller must ask for exactly the variants that were written, in the same
order:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01000000020000000200000005000000'))
>>> decoder = Decoder(de, Endian.LITTLE)
>>> decoder.decode_struct('Point', [('x', Decoder.decode_u32), ('y', Decoder.decode_u32)])
{'x': 1, 'y': 2}
>>> def select(variant_index, decoder):
...     assert variant_index == 2
...     return decoder.decode_newtype_variant(Decoder.decode_u32)
>>> decoder.decode_enum('E', select)
5
>>> decoder.deserializer.finalize()

A short read is reported as `BinaryError`, the stream error is kept as its cause:

>>> from binserde.error import BinaryError
>>> decoder = Decoder(Deserializer.build_bytes_deserializer(b'\x01\x00'), Endian.LITTLE)
>>> try:
...     decoder.decode_u32()
... except BinaryError as e:
...     print(type(e.cause).__name__)
OutOfDataError
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Callable, TypeVar

from typing_extensions import override

from binserde.encoding.bool import decode_bool
from binserde.encoding.bytes import decode_bytes
from binserde.encoding.char import decode_char
from binserde.encoding.float import decode_float
from binserde.encoding.int import decode_int
from binserde.encoding.length import decode_length
from binserde.encoding.utf8 import decode_utf8
from binserde.endian import Endian
from binserde.serialization import Deserializer
from binserde.serialization.adapters import BinaryErrorDeserializer
from binserde.visitor import DecodeField, DecodeFn, ValueDecoder, VariantSelector

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

PLATFORM_INT_SIZE = 8  # isize/usize are always read with 64 bits


class Decoder(ValueDecoder):
    """ Reads values from a deserializer, using a fixed byte order for every multi-byte number.

    Bytes left in the deserializer after the value are not checked here, call `deserializer.finalize()` for that.
    """

    __slots__ = ('_deserializer', '_endian')

    def __init__(self, deserializer: Deserializer, endian: Endian) -> None:
        self._deserializer = BinaryErrorDeserializer(deserializer)
        self._endian = endian

    @property
    def deserializer(self) -> Deserializer:
        """The (wrapped) deserializer, for reading raw bytes."""
        return self._deserializer

    @property
    def endian(self) -> Endian:
        return self._endian

    def _decode_int(self, length: int, signed: bool) -> int:
        return decode_int(self._deserializer, length=length, signed=signed, endian=self._endian)

    def _decode_items(self, decode_item: DecodeFn[T]) -> Iterator[T]:
        # the builder must consume every item, otherwise the stream is left in the middle of the value
        length = decode_length(self._deserializer, endian=self._endian)
        return (decode_item(self) for _ in range(length))

    @override
    def decode_unit(self) -> None:
        return None

    @override
    def decode_bool(self) -> bool:
        return decode_bool(self._deserializer)

    @override
    def decode_i8(self) -> int:
        return self._decode_int(1, True)

    @override
    def decode_i16(self) -> int:
        return self._decode_int(2, True)

    @override
    def decode_i32(self) -> int:
        return self._decode_int(4, True)

    @override
    def decode_i64(self) -> int:
        return self._decode_int(8, True)

    @override
    def decode_isize(self) -> int:
        return self._decode_int(PLATFORM_INT_SIZE, True)

    @override
    def decode_u8(self) -> int:
        return self._decode_int(1, False)

    @override
    def decode_u16(self) -> int:
        return self._decode_int(2, False)

    @override
    def decode_u32(self) -> int:
        return self._decode_int(4, False)

    @override
    def decode_u64(self) -> int:
        return self._decode_int(8, False)

    @override
    def decode_usize(self) -> int:
        return self._decode_int(PLATFORM_INT_SIZE, False)

    @override
    def decode_f32(self) -> float:
        return decode_float(self._deserializer, length=4, endian=self._endian)

    @override
    def decode_f64(self) -> float:
        return decode_float(self._deserializer, length=8, endian=self._endian)

    @override
    def decode_char(self) -> str:
        return decode_char(self._deserializer, endian=self._endian)

    @override
    def decode_str(self) -> str:
        return decode_utf8(self._deserializer, endian=self._endian)

    @override
    def decode_bytes(self) -> bytes:
        return decode_bytes(self._deserializer, endian=self._endian)

    @override
    def decode_option(self, decode_value: DecodeFn[T]) -> T | None:
        if decode_bool(self._deserializer, expected='an option presence byte'):
            return decode_value(self)
        return None

    @override
    def decode_seq(self, decode_item: DecodeFn[T], builder: Callable[[Iterable[T]], R]) -> R:
        return builder(self._decode_items(decode_item))

    @override
    def decode_tuple(self, decoders: Sequence[DecodeFn[Any]]) -> tuple[Any, ...]:
        return tuple(decode_value(self) for decode_value in decoders)

    @override
    def decode_map(
        self,
        decode_key: DecodeFn[K],
        decode_value: DecodeFn[V],
        builder: Callable[[Iterable[tuple[K, V]]], R],
    ) -> R:
        def decode_pair(decoder: ValueDecoder) -> tuple[K, V]:
            key = decode_key(decoder)
            value = decode_value(decoder)
            return key, value
        return builder(self._decode_items(decode_pair))

    @override
    def decode_unit_struct(self, name: str) -> None:
        return None

    @override
    def decode_newtype_struct(self, name: str, decode_value: DecodeFn[T]) -> T:
        return decode_value(self)

    @override
    def decode_tuple_struct(self, name: str, decoders: Sequence[DecodeFn[Any]]) -> tuple[Any, ...]:
        return self.decode_tuple(decoders)

    @override
    def decode_struct(self, name: str, fields: Sequence[DecodeField]) -> dict[str, Any]:
        return {field_name: decode_value(self) for field_name, decode_value in fields}

    @override
    def decode_enum(self, name: str, select: VariantSelector[T]) -> T:
        variant_index = self._decode_int(4, False)
        return select(variant_index, self)

    @override
    def decode_unit_variant(self) -> None:
        return None

    @override
    def decode_newtype_variant(self, decode_value: DecodeFn[T]) -> T:
        return decode_value(self)

    @override
    def decode_tuple_variant(self, decoders: Sequence[DecodeFn[Any]]) -> tuple[Any, ...]:
        return self.decode_tuple(decoders)

    @override
    def decode_struct_variant(self, fields: Sequence[DecodeField]) -> dict[str, Any]:
        return self.decode_struct('', fields)
