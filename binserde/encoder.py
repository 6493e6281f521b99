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
The encoder writes each variant of the value model with a fixed layout:

- unit, unit struct: nothing
- bool: 1 byte, `0x01` or `0x00`
- integers and floats: their own width, in the encoder's byte order, no tag
- char: the code point as a u32
- str, bytes: u32 length followed by the bytes (utf-8 for str)
- option: `0x00` when absent, `0x01` followed by the value when present
- seq, map: u32 count followed by each item (key then value for maps)
- tuple, tuple struct, struct: each field in order, no count
- newtype struct: the inner value
- enum variants: u32 variant index followed by the payload, laid out like the struct of the same kind

>>> se = Serializer.build_bytes_serializer()
>>> encoder = Encoder(se, Endian.LITTLE)
>>> encoder.encode_struct('Point', [('x', 1, Encoder.encode_u32), ('y', 2, Encoder.encode_u32)])
>>> encoder.encode_newtype_variant('E', 2, 'NewType', 5, Encoder.encode_u32)
>>> bytes(se.finalize()).hex()
'01000000020000000200000005000000'
"""

from collections.abc import Iterable, Mapping, Sequence, Sized
from typing import Any, TypeVar

from typing_extensions import override

from binserde.encoding.bool import encode_bool
from binserde.encoding.bytes import encode_bytes
from binserde.encoding.char import encode_char
from binserde.encoding.float import encode_float
from binserde.encoding.int import encode_int
from binserde.encoding.length import encode_length
from binserde.encoding.utf8 import encode_utf8
from binserde.endian import Endian
from binserde.error import MessageError
from binserde.serialization import Buffer, Serializer
from binserde.serialization.adapters import BinaryErrorSerializer
from binserde.visitor import EncodeField, EncodeFn, ValueEncoder

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')

PLATFORM_INT_SIZE = 8  # isize/usize are always written with 64 bits


class Encoder(ValueEncoder):
    """ Writes values to a serializer, using a fixed byte order for every multi-byte number.

    An instance is meant for a single top-level value. Any failure of the serializer is raised as `BinaryError`,
    including failures caused by raw writes made through the `serializer` property.
    """

    __slots__ = ('_serializer', '_endian')

    def __init__(self, serializer: Serializer, endian: Endian) -> None:
        self._serializer = BinaryErrorSerializer(serializer)
        self._endian = endian

    @property
    def serializer(self) -> Serializer:
        """The (wrapped) serializer, for writing raw bytes."""
        return self._serializer

    @property
    def endian(self) -> Endian:
        return self._endian

    def _encode_int(self, value: int, length: int, signed: bool) -> None:
        encode_int(self._serializer, value, length=length, signed=signed, endian=self._endian)

    def _encode_variant_index(self, name: str, variant_index: int) -> None:
        if not isinstance(variant_index, int) or variant_index < 0:
            raise MessageError.invalid_value(f'variant index {variant_index!r} of {name}', 'a u32')
        self._encode_int(variant_index, 4, False)

    @override
    def encode_unit(self) -> None:
        pass

    @override
    def encode_bool(self, value: bool) -> None:
        encode_bool(self._serializer, value)

    @override
    def encode_i8(self, value: int) -> None:
        self._encode_int(value, 1, True)

    @override
    def encode_i16(self, value: int) -> None:
        self._encode_int(value, 2, True)

    @override
    def encode_i32(self, value: int) -> None:
        self._encode_int(value, 4, True)

    @override
    def encode_i64(self, value: int) -> None:
        self._encode_int(value, 8, True)

    @override
    def encode_isize(self, value: int) -> None:
        self._encode_int(value, PLATFORM_INT_SIZE, True)

    @override
    def encode_u8(self, value: int) -> None:
        self._encode_int(value, 1, False)

    @override
    def encode_u16(self, value: int) -> None:
        self._encode_int(value, 2, False)

    @override
    def encode_u32(self, value: int) -> None:
        self._encode_int(value, 4, False)

    @override
    def encode_u64(self, value: int) -> None:
        self._encode_int(value, 8, False)

    @override
    def encode_usize(self, value: int) -> None:
        self._encode_int(value, PLATFORM_INT_SIZE, False)

    @override
    def encode_f32(self, value: float) -> None:
        encode_float(self._serializer, value, length=4, endian=self._endian)

    @override
    def encode_f64(self, value: float) -> None:
        encode_float(self._serializer, value, length=8, endian=self._endian)

    @override
    def encode_char(self, value: str) -> None:
        encode_char(self._serializer, value, endian=self._endian)

    @override
    def encode_str(self, value: str) -> None:
        encode_utf8(self._serializer, value, endian=self._endian)

    @override
    def encode_bytes(self, value: Buffer) -> None:
        encode_bytes(self._serializer, value, endian=self._endian)

    @override
    def encode_none(self) -> None:
        encode_bool(self._serializer, False)

    @override
    def encode_some(self, value: T, encode_value: EncodeFn[T]) -> None:
        encode_bool(self._serializer, True)
        encode_value(self, value)

    @override
    def encode_seq(self, values: Iterable[T], encode_item: EncodeFn[T]) -> None:
        # the count goes first, so an iterator has to be consumed before anything is written
        items = values if isinstance(values, Sized) else tuple(values)
        encode_length(self._serializer, len(items), endian=self._endian)
        for item in items:
            encode_item(self, item)

    @override
    def encode_tuple(self, values: Sequence[Any], encoders: Sequence[EncodeFn[Any]]) -> None:
        if len(values) != len(encoders):
            raise MessageError.invalid_value(f'tuple of length {len(values)}', f'a tuple of length {len(encoders)}')
        for value, encode_value in zip(values, encoders):
            encode_value(self, value)

    @override
    def encode_map(
        self,
        items: Mapping[K, V] | Iterable[tuple[K, V]],
        encode_key: EncodeFn[K],
        encode_value: EncodeFn[V],
    ) -> None:
        pairs: Iterable[tuple[K, V]] = items.items() if isinstance(items, Mapping) else items
        if not isinstance(pairs, Sized):
            pairs = tuple(pairs)
        encode_length(self._serializer, len(pairs), endian=self._endian)
        for key, value in pairs:
            encode_key(self, key)
            encode_value(self, value)

    @override
    def encode_unit_struct(self, name: str) -> None:
        pass

    @override
    def encode_newtype_struct(self, name: str, value: T, encode_value: EncodeFn[T]) -> None:
        encode_value(self, value)

    @override
    def encode_tuple_struct(self, name: str, values: Sequence[Any], encoders: Sequence[EncodeFn[Any]]) -> None:
        self.encode_tuple(values, encoders)

    @override
    def encode_struct(self, name: str, fields: Sequence[EncodeField]) -> None:
        for _field_name, value, encode_value in fields:
            encode_value(self, value)

    @override
    def encode_unit_variant(self, name: str, variant_index: int, variant: str) -> None:
        self._encode_variant_index(name, variant_index)

    @override
    def encode_newtype_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        value: T,
        encode_value: EncodeFn[T],
    ) -> None:
        self._encode_variant_index(name, variant_index)
        encode_value(self, value)

    @override
    def encode_tuple_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        values: Sequence[Any],
        encoders: Sequence[EncodeFn[Any]],
    ) -> None:
        self._encode_variant_index(name, variant_index)
        self.encode_tuple(values, encoders)

    @override
    def encode_struct_variant(self, name: str, variant_index: int, variant: str, fields: Sequence[EncodeField]) -> None:
        self._encode_variant_index(name, variant_index)
        self.encode_struct(variant, fields)
