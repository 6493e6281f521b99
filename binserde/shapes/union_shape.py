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

from collections.abc import Iterable
from types import NoneType, UnionType
from typing import Any, Union, get_args, get_origin

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.variant import Variant, invalid_variant_index, make_variant
from binserde.visitor import ValueDecoder, ValueEncoder


class UnionShape(Shape[Any]):
    """ Represents an enum whose variants are classes, built from an union like `Quit | Move | Write`.

    The variant index is the position of the class in the union. The variant of a value is the first class of the
    union that the value is exactly an instance of, or else the first one it's an instance of (so `bool | int` works).

    It can also be built from explicit variants, which is needed when the kind of a variant can't be inferred:

    >>> from dataclasses import dataclass
    >>> from binserde.encoder import Encoder
    >>> from binserde.endian import Endian
    >>> from binserde.serialization import Serializer
    >>> from binserde.shapes import DEFAULT_TYPE_MAP
    >>> from binserde.shapes.variant import VariantKind
    >>> from binserde.types import u16
    >>> @dataclass
    ... class Point:
    ...     x: u16
    ...     y: u16
    >>> shape = UnionShape('Message', [
    ...     make_variant(str, type_map=DEFAULT_TYPE_MAP),
    ...     make_variant(Point, type_map=DEFAULT_TYPE_MAP, kind=VariantKind.NEWTYPE),
    ... ])
    >>> se = Serializer.build_bytes_serializer()
    >>> shape.serialize(Encoder(se, Endian.BIG), Point(u16(1), u16(2)))
    >>> bytes(se.finalize()).hex()
    '0000000100010002'
    """

    __slots__ = ('_name', '_variants')

    _name: str
    _variants: tuple[Variant, ...]

    def __init__(self, name: str, variants: Iterable[Variant]) -> None:
        self._name = name
        self._variants = tuple(variants)
        classes = [variant.class_ for variant in self._variants]
        if len(set(classes)) != len(classes):
            raise TypeError('each variant must have a different class')

    @property
    def name(self) -> str:
        return self._name

    @property
    def variants(self) -> tuple[Variant, ...]:
        return self._variants

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if get_origin(type_) not in (UnionType, Union):
            raise TypeError('expected type union')
        args = get_args(type_)
        if NoneType in args:
            raise TypeError('an union with None is an option, not an enum')
        variants = [make_variant(arg, type_map=type_map) for arg in args]
        return cls(' | '.join(variant.name for variant in variants), variants)

    def _find_variant(self, value: Any) -> tuple[int, Variant]:
        for variant_index, variant in enumerate(self._variants):
            if type(value) is variant.class_:
                return variant_index, variant
        for variant_index, variant in enumerate(self._variants):
            if isinstance(value, variant.class_):
                return variant_index, variant
        raise MessageError.invalid_type(f'one of {self._name}', value)

    @override
    def _check_value(self, value: Any, /, *, deep: bool) -> None:
        _, variant = self._find_variant(value)
        variant.check_value(value, deep=deep)

    @override
    def _serialize(self, encoder: ValueEncoder, value: Any, /) -> None:
        variant_index, variant = self._find_variant(value)
        variant.encode(encoder, self._name, variant_index, value)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> Any:
        return decoder.decode_enum(self._name, self._select)

    def _select(self, variant_index: int, decoder: ValueDecoder) -> Any:
        if variant_index >= len(self._variants):
            raise invalid_variant_index(self._name, variant_index, len(self._variants))
        return self._variants[variant_index].decode(decoder)
