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

from typing import Any, NewType, TypeVar

from typing_extensions import Self, override

from binserde.shapes.shape import Shape
from binserde.shapes.utils import get_newtype_supertype
from binserde.visitor import ValueDecoder, ValueEncoder

T = TypeVar('T')


class NewTypeShape(Shape[T]):
    """ Represents a user `typing.NewType` as a newtype struct, which is encoded exactly like the wrapped type.

    >>> from binserde.encoder import Encoder
    >>> from binserde.endian import Endian
    >>> from binserde.serialization import Serializer
    >>> from binserde.shapes import make_shape
    >>> from binserde.types import u16
    >>> Port = NewType('Port', u16)
    >>> se = Serializer.build_bytes_serializer()
    >>> make_shape(Port).serialize(Encoder(se, Endian.BIG), Port(u16(8080)))
    >>> bytes(se.finalize()).hex()
    '1f90'
    """

    __slots__ = ('_name', '_inner')

    _name: str
    _inner: Shape[T]

    def __init__(self, name: str, inner: Shape[T]) -> None:
        self._name = name
        self._inner = inner

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, NewType):
            raise TypeError('expected a NewType')
        return cls(type_.__name__, Shape.from_type(get_newtype_supertype(type_), type_map=type_map))

    @override
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        # XXX: a NewType doesn't exist at runtime, the value is checked by the inner shape when it's serialized
        if deep:
            self._inner._check_value(value, deep=True)

    @override
    def _serialize(self, encoder: ValueEncoder, value: T, /) -> None:
        encoder.encode_newtype_struct(self._name, value, self._inner.serialize)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> T:
        return decoder.decode_newtype_struct(self._name, self._inner.deserialize)
