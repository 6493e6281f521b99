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
from typing import Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_namedtuple
from binserde.visitor import DecodeFn, EncodeFn, ValueDecoder, ValueEncoder

N = TypeVar('N', bound=tuple)


class NamedTupleShape(Shape[N]):
    """ Represents a `typing.NamedTuple` as a tuple struct, the field names are not encoded.
    """

    __slots__ = ('_args', '_actual_type')

    _args: tuple[Shape, ...]
    _actual_type: type[N]

    def __init__(self, namedtuple: type[N], args: Iterable[Shape]) -> None:
        self._actual_type = namedtuple
        self._args = tuple(args)

    @property
    def name(self) -> str:
        return self._actual_type.__name__

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_namedtuple(type_):
            raise TypeError('expected NamedTuple type')
        hints = get_type_hints(type_)
        args = [hints[field_name] for field_name in type_._fields]
        return cls(type_, (Shape.from_type(arg, type_map=type_map) for arg in args))

    def encoders(self) -> list[EncodeFn[Any]]:
        return [i.serialize for i in self._args]

    def decoders(self) -> list[DecodeFn[Any]]:
        return [i.deserialize for i in self._args]

    def build(self, values: tuple[Any, ...]) -> N:
        return self._actual_type(*values)

    @override
    def _check_value(self, value: N, /, *, deep: bool) -> None:
        if not isinstance(value, self._actual_type):
            raise MessageError.invalid_type(f'{self.name} instance', value)
        if deep:
            for i, arg_shape in zip(value, self._args):
                arg_shape._check_value(i, deep=True)

    @override
    def _serialize(self, encoder: ValueEncoder, value: N, /) -> None:
        encoder.encode_tuple_struct(self.name, value, self.encoders())

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> N:
        return self.build(decoder.decode_tuple_struct(self.name, self.decoders()))
