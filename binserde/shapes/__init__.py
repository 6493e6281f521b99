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
Shapes drive the encoder and decoder from ordinary type annotations.

>>> from dataclasses import dataclass
>>> from binserde.types import u8, u32
>>> @dataclass
... class Todo:
...     title: str
...     done: bool
...     priority: u8 | None
...     tags: list[str]
...     votes: dict[str, u32]
>>> shape = make_shape(Todo)
>>> shape.check_value(Todo('write docs', False, None, ['doc'], {'alice': u32(1)}))

Most types map to the variant of the value model with the same meaning, `int` and `float` have no fixed width and are
handled as `i64` and `f64` (use the markers in `binserde.types` to pick another width).
"""

from collections import OrderedDict, deque
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import NoneType, UnionType
from typing import Any, NamedTuple, NewType

from binserde.shapes.bool_shape import BoolShape
from binserde.shapes.bytes_shape import BytesShape
from binserde.shapes.char_shape import CharShape
from binserde.shapes.collection_shape import DequeShape, FrozenSetShape, ListShape, SetShape
from binserde.shapes.dataclass_shape import DataclassShape
from binserde.shapes.enum_shape import EnumShape
from binserde.shapes.float_shape import F32Shape, F64Shape
from binserde.shapes.map_shape import DictShape
from binserde.shapes.namedtuple_shape import NamedTupleShape
from binserde.shapes.newtype_shape import NewTypeShape
from binserde.shapes.optional_shape import OptionalShape
from binserde.shapes.shape import Shape
from binserde.shapes.sized_int_shape import (
    I8Shape,
    I16Shape,
    I32Shape,
    I64Shape,
    IsizeShape,
    U8Shape,
    U16Shape,
    U32Shape,
    U64Shape,
    UsizeShape,
)
from binserde.shapes.str_shape import StrShape
from binserde.shapes.tuple_shape import TupleShape
from binserde.shapes.union_shape import UnionShape
from binserde.shapes.unit_shape import UnitShape
from binserde.shapes.utils import TypeAliasMap, TypeToShapeMap
from binserde.shapes.variant import Variant, VariantKind, make_variant
from binserde.types import char, f32, f64, i8, i16, i32, i64, isize, u8, u16, u32, u64, usize

__all__ = [
    'DEFAULT_TYPE_ALIAS_MAP',
    'DEFAULT_TYPE_MAP',
    'DEFAULT_TYPE_TO_SHAPE_MAP',
    'BoolShape',
    'BytesShape',
    'CharShape',
    'DataclassShape',
    'DequeShape',
    'DictShape',
    'EnumShape',
    'F32Shape',
    'F64Shape',
    'FrozenSetShape',
    'I8Shape',
    'I16Shape',
    'I32Shape',
    'I64Shape',
    'IsizeShape',
    'ListShape',
    'NamedTupleShape',
    'NewTypeShape',
    'OptionalShape',
    'SetShape',
    'Shape',
    'StrShape',
    'TupleShape',
    'TypeAliasMap',
    'TypeToShapeMap',
    'U8Shape',
    'U16Shape',
    'U32Shape',
    'U64Shape',
    'UnionShape',
    'UnitShape',
    'UsizeShape',
    'Variant',
    'VariantKind',
    'make_shape',
    'make_variant',
]

# `int` and `float` have no width of their own, the replacement is logged when a shape is built
DEFAULT_TYPE_ALIAS_MAP: TypeAliasMap = {
    OrderedDict: dict,
    bytearray: bytes,
    float: f64,
    int: i64,
}

# Mapping between types (or the special keys of `get_usable_origin_type`) and Shape classes.
DEFAULT_TYPE_TO_SHAPE_MAP: TypeToShapeMap = {
    # unit:
    None: UnitShape,
    NoneType: UnitShape,
    # scalars:
    bool: BoolShape,
    i8: I8Shape,
    i16: I16Shape,
    i32: I32Shape,
    i64: I64Shape,
    isize: IsizeShape,
    u8: U8Shape,
    u16: U16Shape,
    u32: U32Shape,
    u64: U64Shape,
    usize: UsizeShape,
    f32: F32Shape,
    f64: F64Shape,
    char: CharShape,
    str: StrShape,
    bytes: BytesShape,
    # containers:
    UnionType: OptionalShape,
    list: ListShape,
    set: SetShape,
    frozenset: FrozenSetShape,
    deque: DequeShape,
    tuple: TupleShape,
    dict: DictShape,
    Mapping: DictShape,
    # user classes:
    dataclass: DataclassShape,
    NamedTuple: NamedTupleShape,
    NewType: NewTypeShape,
    Enum: EnumShape,
    Variant: UnionShape,
}

DEFAULT_TYPE_MAP = Shape.TypeMap(DEFAULT_TYPE_ALIAS_MAP, DEFAULT_TYPE_TO_SHAPE_MAP)


def make_shape(type_: Any, /) -> Shape[Any]:
    """ Like Shape.from_type, but with the default maps.

    If you need to customize the mapping use `Shape.from_type` instead.
    """
    return Shape.from_type(type_, type_map=DEFAULT_TYPE_MAP)
