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

from functools import reduce
from operator import or_
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, get_args, get_origin

from typing_extensions import Self, override

from binserde.shapes.shape import Shape
from binserde.visitor import ValueDecoder, ValueEncoder

V = TypeVar('V')


class OptionalShape(Shape[V | None]):
    """ Represents a value that is either `V` or `None`.

    Python flattens `A | B | None` into a single union, the members other than `None` are joined back into `A | B`, so
    it is an option of an enum.
    """

    __slots__ = ('_value',)

    _value: Shape[V]

    def __init__(self, shape: Shape[V]) -> None:
        self._value = shape

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if get_origin(type_) not in (UnionType, Union):
            raise TypeError('expected type union')
        args = get_args(type_)
        assert args, 'union always has args'
        if NoneType not in args:
            raise TypeError('type must be either `None | T` or `T | None`')
        not_none_args = [arg for arg in args if arg is not NoneType]
        return cls(Shape.from_type(reduce(or_, not_none_args), type_map=type_map))

    @override
    def _check_value(self, value: V | None, /, *, deep: bool) -> None:
        if value is None:
            return
        if deep:
            self._value._check_value(value, deep=True)

    @override
    def _serialize(self, encoder: ValueEncoder, value: V | None, /) -> None:
        if value is None:
            encoder.encode_none()
        else:
            encoder.encode_some(value, self._value.serialize)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> V | None:
        return decoder.decode_option(self._value.deserialize)
