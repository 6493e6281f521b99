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
from typing import Any, get_args, get_origin

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_subclass
from binserde.visitor import ValueDecoder, ValueEncoder


class TupleShape(Shape[tuple]):
    """ Represents tuple values, which can either be homogeneous-type variable size or heterogeneous-type fixed size.

    A variable size tuple, `tuple[T, ...]`, is a sequence and has a length prefix, a fixed size tuple like
    `tuple[A, B]` is a tuple of the value model and has none.
    """

    __slots__ = ('_varsize', '_args')

    _varsize: bool
    _args: tuple[Shape, ...]

    def __init__(self, args: Shape | Iterable[Shape]) -> None:
        if isinstance(args, Shape):
            self._varsize = True
            self._args = (args,)
        else:
            self._varsize = False
            self._args = tuple(args)
            for arg in self._args:
                assert isinstance(arg, Shape)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        origin_type = get_origin(type_) or type_
        if not is_subclass(origin_type, tuple):
            raise TypeError('expected tuple type')
        if not hasattr(type_, '__args__'):
            raise TypeError('expected tuple[<args...>]')
        args = get_args(type_)
        if args and args[-1] is Ellipsis:
            if len(args) != 2:
                raise TypeError('ellipsis only allowed with one type: tuple[T, ...]')
            arg, _ellipsis = args
            return cls(Shape.from_type(arg, type_map=type_map))
        else:
            return cls(Shape.from_type(arg, type_map=type_map) for arg in args)

    @override
    def _check_value(self, value: tuple, /, *, deep: bool) -> None:
        if not isinstance(value, tuple):
            raise MessageError.invalid_type('a tuple', value)
        if self._varsize:
            if deep:
                arg_shape, = self._args
                for i in value:
                    arg_shape._check_value(i, deep=True)
        else:
            if len(value) != len(self._args):
                raise MessageError.invalid_value(f'tuple of length {len(value)}', f'a tuple of length {len(self._args)}')
            if deep:
                for i, arg_shape in zip(value, self._args):
                    arg_shape._check_value(i, deep=True)

    @override
    def _serialize(self, encoder: ValueEncoder, value: tuple, /) -> None:
        if self._varsize:
            encoder.encode_seq(value, self._args[0].serialize)
        else:
            encoder.encode_tuple(value, [i.serialize for i in self._args])

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> tuple:
        if self._varsize:
            return decoder.decode_seq(self._args[0].deserialize, tuple)
        else:
            return decoder.decode_tuple([i.deserialize for i in self._args])
