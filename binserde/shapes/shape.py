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

from abc import ABC, abstractmethod
from typing import Any, Generic, NamedTuple, TypeVar, final

from typing_extensions import Self

from binserde.endian import Endian
from binserde.serialization import Buffer
from binserde.shapes.utils import TypeAliasMap, TypeToShapeMap, get_aliased_type, get_usable_origin_type
from binserde.visitor import ValueDecoder, ValueEncoder

T = TypeVar('T')


class Shape(ABC, Generic[T]):
    """ This class models a type with a known type signature and how it is traversed by an encoder or decoder.

    A shape knows which variant of the value model each part of a value is (a `u32`, a struct with these fields, an
    enum with these variants), which is what the encoder and decoder can't know on their own. Instances are built from
    annotations with `Shape.from_type` (or `binserde.shapes.make_shape`) and can be reused for any number of values.
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        shapes_map: TypeToShapeMap

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> Shape[Any]:
        """ Instantiate a Shape from a type signature using the given maps.

        The `shapes_map` associates types (or the special keys documented in `get_usable_origin_type`) to Shape
        classes, while the `alias_map` associates types with substitute types to use instead.
        """
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        shape_class = type_map.shapes_map[usable_origin]
        aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=False)
        return shape_class._from_type(aliased_type, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> Self:
        """ Instantiate a Shape from a type signature.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `Shape.from_type` for inner types, forwarding the given `type_map`.
        """
        # XXX: a Shape that is only meant for local use does not need to implement _from_type
        raise TypeError(f'{cls} is not compatible with use in a Shape.TypeMap')

    @final
    def check_value(self, value: T, /) -> None:
        """ Raises `MessageError` if the value can't be encoded with this shape, inner values are checked too.
        """
        # XXX: subclasses must implement Shape._check_value, not Shape.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, encoder: ValueEncoder, value: T, /) -> None:
        """ Traverse a value with the given encoder, according to the signature that was abstracted.

        The value is checked while it is being serialized, so calling check_value before is not needed.
        """
        # XXX: subclasses must implement Shape._serialize, not Shape.serialize
        self._check_value(value, deep=False)
        self._serialize(encoder, value)

    @final
    def deserialize(self, decoder: ValueDecoder, /) -> T:
        """ Build a value with the given decoder, according to the signature that was abstracted.
        """
        # XXX: subclasses must implement Shape._deserialize, not Shape.deserialize
        value = self._deserialize(decoder)
        self._check_value(value, deep=False)
        return value

    @final
    def to_bytes(self, value: T, /, *, endian: Endian | None = None) -> bytes:
        """ Shortcut for `binserde.to_bytes(value, shape, endian=endian)`.
        """
        from binserde.codec import to_bytes
        return to_bytes(value, self, endian=endian)

    @final
    def from_bytes(self, data: Buffer, /, *, endian: Endian | None = None) -> T:
        """ Shortcut for `binserde.from_bytes(data, shape, endian=endian)`.
        """
        from binserde.codec import from_bytes
        return from_bytes(data, self, endian=endian)

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `Shape.check_value`, raises `MessageError` when the value is not valid.

        Compound shapes should use `Shape._check_value` on the inner shape(s) only when `deep=True`, otherwise the
        inner values are checked when they are serialized.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, encoder: ValueEncoder, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the given value has been "shallow checked".

        Inner values should be passed to the encoder with `Shape.serialize` as the `EncodeFn`, not `Shape._serialize`,
        that way every inner value is checked as well.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, decoder: ValueDecoder, /) -> T:
        """ Inner implementation of `deserialize`, it uses `Shape.deserialize` of inner shapes as `DecodeFn`.
        """
        raise NotImplementedError
