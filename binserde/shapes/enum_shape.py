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

from enum import Enum
from typing import Any, TypeVar

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_subclass
from binserde.shapes.variant import invalid_variant_index
from binserde.visitor import ValueDecoder, ValueEncoder

E = TypeVar('E', bound=Enum)


class EnumShape(Shape[E]):
    """ Represents `enum.Enum` subclasses as an enum of unit variants.

    The variant index is the position of the member in the class body, the member's value is never encoded. Aliases
    (members with the same value as an earlier member) are the same variant as the member they alias.

    >>> from binserde.decoder import Decoder
    >>> from binserde.encoder import Encoder
    >>> from binserde.endian import Endian
    >>> from binserde.serialization import Deserializer, Serializer
    >>> class Color(Enum):
    ...     RED = 'r'
    ...     GREEN = 'g'
    ...     BLUE = 'b'
    >>> shape = EnumShape(Color)
    >>> se = Serializer.build_bytes_serializer()
    >>> shape.serialize(Encoder(se, Endian.LITTLE), Color.BLUE)
    >>> bytes(se.finalize()).hex()
    '02000000'
    >>> shape.deserialize(Decoder(Deserializer.build_bytes_deserializer(bytes.fromhex('01000000')), Endian.LITTLE))
    <Color.GREEN: 'g'>
    >>> try:
    ...     shape.deserialize(Decoder(Deserializer.build_bytes_deserializer(bytes.fromhex('03000000')), Endian.LITTLE))
    ... except MessageError as e:
    ...     print(e)
    invalid value: variant index 3 of Color, expected variant index 0 <= i < 3
    """

    __slots__ = ('_class', '_members', '_indexes')

    _class: type[E]
    _members: tuple[E, ...]
    _indexes: dict[str, int]

    def __init__(self, enum_class: type[E]) -> None:
        self._class = enum_class
        self._members = tuple(enum_class)
        # XXX: indexed by name because members aren't necessarily hashable
        self._indexes = {member.name: index for index, member in enumerate(self._members)}

    @property
    def name(self) -> str:
        return self._class.__name__

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, Enum):
            raise TypeError('expected Enum subclass')
        return cls(type_)

    @override
    def _check_value(self, value: E, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise MessageError.invalid_type(f'{self.name} member', value)

    @override
    def _serialize(self, encoder: ValueEncoder, value: E, /) -> None:
        encoder.encode_unit_variant(self.name, self._indexes[value.name], value.name)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> E:
        return decoder.decode_enum(self.name, self._select)

    def _select(self, variant_index: int, decoder: ValueDecoder) -> E:
        if variant_index >= len(self._members):
            raise invalid_variant_index(self.name, variant_index, len(self._members))
        decoder.decode_unit_variant()
        return self._members[variant_index]
