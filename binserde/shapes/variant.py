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
Variants of enums that are built from classes, see `binserde.shapes.union_shape.UnionShape`.

The value model has four kinds of enum variants, each class is mapped to one of them:

- `UNIT`: no payload, a dataclass without fields
- `NEWTYPE`: a single value of any supported type, the payload is the value itself
- `TUPLE`: positional fields, a `typing.NamedTuple`
- `STRUCT`: named fields, a dataclass

When the kind is not given it is inferred from the class in the order above, a class that is none of the others is a
`NEWTYPE` variant. A `typing.NewType` (like the width markers of `binserde.types`) is always a `NEWTYPE` variant, its
values are matched by the class it wraps.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import StrEnum
from typing import Any, Generic, NewType, TypeVar

from binserde.error import MessageError
from binserde.shapes.dataclass_shape import DataclassShape
from binserde.shapes.namedtuple_shape import NamedTupleShape
from binserde.shapes.shape import Shape
from binserde.shapes.utils import get_newtype_supertype, is_namedtuple, is_subclass
from binserde.visitor import ValueDecoder, ValueEncoder

T = TypeVar('T')


class VariantKind(StrEnum):
    UNIT = 'unit'
    NEWTYPE = 'newtype'
    TUPLE = 'tuple'
    STRUCT = 'struct'


def invalid_variant_index(name: str, variant_index: int, variant_count: int) -> MessageError:
    """ The error raised when an enum's variant index is not one of its variants.

    >>> print(invalid_variant_index('Color', 3, 3))
    invalid value: variant index 3 of Color, expected variant index 0 <= i < 3
    """
    return MessageError.invalid_value(
        f'variant index {variant_index} of {name}',
        f'variant index 0 <= i < {variant_count}',
    )


class Variant(Generic[T]):
    """ One variant of an enum: its name, its kind and how its payload is traversed.

    The variant index is not part of the variant, it's the position of the variant in its enum.
    """

    __slots__ = ('name', 'kind', 'class_', '_payload')

    name: str
    kind: VariantKind
    class_: type[T]
    _payload: Shape[Any] | None

    def __init__(self, name: str, kind: VariantKind, class_: type[T], payload: Shape[Any] | None) -> None:
        self.name = name
        self.kind = kind
        self.class_ = class_
        self._payload = payload

    def __repr__(self) -> str:
        return f'Variant({self.name!r}, {self.kind.value})'

    def check_value(self, value: T, *, deep: bool) -> None:
        if not isinstance(value, self.class_):
            raise MessageError.invalid_type(f'{self.name} instance', value)
        if deep and self._payload is not None:
            self._payload._check_value(value, deep=True)

    def encode(self, encoder: ValueEncoder, enum_name: str, variant_index: int, value: T) -> None:
        payload = self._payload
        match self.kind:
            case VariantKind.UNIT:
                encoder.encode_unit_variant(enum_name, variant_index, self.name)
            case VariantKind.NEWTYPE:
                assert payload is not None
                encoder.encode_newtype_variant(enum_name, variant_index, self.name, value, payload.serialize)
            case VariantKind.TUPLE:
                assert isinstance(payload, NamedTupleShape)
                encoder.encode_tuple_variant(enum_name, variant_index, self.name, value, payload.encoders())
            case VariantKind.STRUCT:
                assert isinstance(payload, DataclassShape)
                encoder.encode_struct_variant(enum_name, variant_index, self.name, payload.encode_fields(value))

    def decode(self, decoder: ValueDecoder) -> T:
        payload = self._payload
        match self.kind:
            case VariantKind.UNIT:
                decoder.decode_unit_variant()
                return self.class_()
            case VariantKind.NEWTYPE:
                assert payload is not None
                return decoder.decode_newtype_variant(payload.deserialize)
            case VariantKind.TUPLE:
                assert isinstance(payload, NamedTupleShape)
                return payload.build(decoder.decode_tuple_variant(payload.decoders()))
            case VariantKind.STRUCT:
                assert isinstance(payload, DataclassShape)
                return payload.build(decoder.decode_struct_variant(payload.decode_fields()))
        raise NotImplementedError(self.kind)


def infer_variant_kind(class_: type) -> VariantKind:
    """ Which kind of variant a class is, when it's not given explicitly.

    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Quit:
    ...     pass
    >>> @dataclass
    ... class Move:
    ...     x: int
    ...     y: int
    >>> infer_variant_kind(Quit), infer_variant_kind(Move), infer_variant_kind(str)
    (<VariantKind.UNIT: 'unit'>, <VariantKind.STRUCT: 'struct'>, <VariantKind.NEWTYPE: 'newtype'>)
    """
    if is_dataclass(class_):
        if not any(field.init for field in fields(class_)):
            return VariantKind.UNIT
        return VariantKind.STRUCT
    if is_namedtuple(class_):
        return VariantKind.TUPLE
    return VariantKind.NEWTYPE


def make_variant(
    class_: type[T],
    /,
    *,
    type_map: Shape.TypeMap,
    kind: VariantKind | None = None,
    name: str | None = None,
) -> Variant[T]:
    """ Build the variant for a class, the kind is inferred when not given and the name defaults to the class name.
    """
    if isinstance(class_, NewType):
        return _make_newtype_variant(class_, type_map=type_map, kind=kind, name=name)
    if not is_subclass(class_, object):
        raise TypeError(f'enum variants must be classes, got {class_!r}')
    if kind is None:
        kind = infer_variant_kind(class_)
    if name is None:
        name = class_.__name__

    payload: Shape[Any] | None
    match kind:
        case VariantKind.UNIT:
            payload = None
        case VariantKind.NEWTYPE:
            payload = Shape.from_type(class_, type_map=type_map)
        case VariantKind.TUPLE:
            payload = NamedTupleShape._from_type(class_, type_map=type_map)
        case VariantKind.STRUCT:
            payload = DataclassShape._from_type(class_, type_map=type_map)
        case _:
            raise TypeError(f'unknown variant kind {kind!r}')
    return Variant(name, kind, class_, payload)


def _make_newtype_variant(
    newtype: Any,
    /,
    *,
    type_map: Shape.TypeMap,
    kind: VariantKind | None,
    name: str | None,
) -> Variant[Any]:
    # a marker like `u32` only exists in annotations, values are matched by the class it wraps
    if kind not in (None, VariantKind.NEWTYPE):
        raise TypeError(f'{newtype.__name__} can only be a newtype variant')
    runtime_class = newtype
    while isinstance(runtime_class, NewType):
        runtime_class = get_newtype_supertype(runtime_class)
    payload = Shape.from_type(newtype, type_map=type_map)
    return Variant(name or newtype.__name__, VariantKind.NEWTYPE, runtime_class, payload)
