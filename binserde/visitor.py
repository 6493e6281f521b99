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
The value model, as a pair of visitor interfaces.

A traversal driver knows the static shape of a type (for example "a struct with fields x: u32 and y: u32") and calls
one method of `ValueEncoder` per value it visits, or one method of `ValueDecoder` per value it expects. Nested values
are handled by passing callbacks (`EncodeFn` / `DecodeFn`) that the encoder/decoder calls back into at the right
point of the layout, which keeps the set of methods closed while any number of concrete types can be supported by new
drivers.

The names given to structs, fields and variants are only informative, they are never part of the encoded data.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, Protocol, TypeAlias, TypeVar

from binserde.serialization import Buffer

T = TypeVar('T')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')
T_co = TypeVar('T_co', covariant=True)
T_contra = TypeVar('T_contra', contravariant=True)


class EncodeFn(Protocol[T_contra]):
    def __call__(self, encoder: ValueEncoder, value: T_contra, /) -> None:
        ...


class DecodeFn(Protocol[T_co]):
    def __call__(self, decoder: ValueDecoder, /) -> T_co:
        ...


class VariantSelector(Protocol[T_co]):
    """Called with the variant index that was read, it must decode that variant's payload or reject the index."""

    def __call__(self, variant_index: int, decoder: ValueDecoder, /) -> T_co:
        ...


# (field name, field value, how to encode the value)
EncodeField: TypeAlias = tuple[str, Any, EncodeFn[Any]]
# (field name, how to decode the value)
DecodeField: TypeAlias = tuple[str, DecodeFn[Any]]


class ValueEncoder(ABC):
    """One method per variant of the value model, the implementation decides how each one is written."""

    __slots__ = ()

    @abstractmethod
    def encode_unit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_bool(self, value: bool) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_i8(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_i16(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_i32(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_i64(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_isize(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_u8(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_u16(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_u32(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_u64(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_usize(self, value: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_f32(self, value: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_f64(self, value: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_char(self, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_str(self, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_bytes(self, value: Buffer) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_none(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_some(self, value: T, encode_value: EncodeFn[T]) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_seq(self, values: Iterable[T], encode_item: EncodeFn[T]) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_tuple(self, values: Sequence[Any], encoders: Sequence[EncodeFn[Any]]) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_map(
        self,
        items: Mapping[K, V] | Iterable[tuple[K, V]],
        encode_key: EncodeFn[K],
        encode_value: EncodeFn[V],
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_unit_struct(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_newtype_struct(self, name: str, value: T, encode_value: EncodeFn[T]) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_tuple_struct(self, name: str, values: Sequence[Any], encoders: Sequence[EncodeFn[Any]]) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_struct(self, name: str, fields: Sequence[EncodeField]) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_unit_variant(self, name: str, variant_index: int, variant: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_newtype_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        value: T,
        encode_value: EncodeFn[T],
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_tuple_variant(
        self,
        name: str,
        variant_index: int,
        variant: str,
        values: Sequence[Any],
        encoders: Sequence[EncodeFn[Any]],
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def encode_struct_variant(self, name: str, variant_index: int, variant: str, fields: Sequence[EncodeField]) -> None:
        raise NotImplementedError


class ValueDecoder(ABC):
    """Inverse of `ValueEncoder`, the caller always says which variant of the value model it expects next."""

    __slots__ = ()

    @abstractmethod
    def decode_unit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def decode_bool(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def decode_i8(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_i16(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_i32(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_i64(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_isize(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_u8(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_u16(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_u32(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_u64(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_usize(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def decode_f32(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def decode_f64(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def decode_char(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def decode_str(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def decode_bytes(self) -> bytes:
        raise NotImplementedError

    @abstractmethod
    def decode_option(self, decode_value: DecodeFn[T]) -> T | None:
        raise NotImplementedError

    @abstractmethod
    def decode_seq(self, decode_item: DecodeFn[T], builder: Callable[[Iterable[T]], R]) -> R:
        raise NotImplementedError

    @abstractmethod
    def decode_tuple(self, decoders: Sequence[DecodeFn[Any]]) -> tuple[Any, ...]:
        raise NotImplementedError

    @abstractmethod
    def decode_map(
        self,
        decode_key: DecodeFn[K],
        decode_value: DecodeFn[V],
        builder: Callable[[Iterable[tuple[K, V]]], R],
    ) -> R:
        raise NotImplementedError

    @abstractmethod
    def decode_unit_struct(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def decode_newtype_struct(self, name: str, decode_value: DecodeFn[T]) -> T:
        raise NotImplementedError

    @abstractmethod
    def decode_tuple_struct(self, name: str, decoders: Sequence[DecodeFn[Any]]) -> tuple[Any, ...]:
        raise NotImplementedError

    @abstractmethod
    def decode_struct(self, name: str, fields: Sequence[DecodeField]) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def decode_enum(self, name: str, select: VariantSelector[T]) -> T:
        """Read the variant index and let `select` decode the payload with one of the `decode_*_variant` methods."""
        raise NotImplementedError

    @abstractmethod
    def decode_unit_variant(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def decode_newtype_variant(self, decode_value: DecodeFn[T]) -> T:
        raise NotImplementedError

    @abstractmethod
    def decode_tuple_variant(self, decoders: Sequence[DecodeFn[Any]]) -> tuple[Any, ...]:
        raise NotImplementedError

    @abstractmethod
    def decode_struct_variant(self, fields: Sequence[DecodeField]) -> dict[str, Any]:
        raise NotImplementedError
