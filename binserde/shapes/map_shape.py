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

from collections.abc import Hashable, Iterable, Mapping
from typing import Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_origin_hashable, is_subclass, pretty_type
from binserde.visitor import ValueDecoder, ValueEncoder

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class DictShape(Shape[Mapping[H, T]]):
    """ Represents mappings, any `Mapping` can be encoded and a `dict` is always decoded.

    Entries are encoded in iteration order, so for a `dict` it's the insertion order.
    """

    __slots__ = ('_key', '_value')

    _key: Shape[H]
    _value: Shape[T]

    def __init__(self, key: Shape[H], value: Shape[T]) -> None:
        self._key = key
        self._value = value

    def _build(self, items: Iterable[tuple[H, T]]) -> dict[H, T]:
        return dict(items)

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        origin_type = get_origin(type_) or type_
        if not is_subclass(origin_type, Mapping):
            raise TypeError('expected Mapping type')
        args = get_args(type_)
        if not args or len(args) != 2:
            raise TypeError(f'expected {pretty_type(origin_type)}[<key type>, <value type>]')
        key_type, value_type = args
        if not is_origin_hashable(key_type):
            raise TypeError(f'{pretty_type(key_type)} is not hashable')
        return cls(Shape.from_type(key_type, type_map=type_map), Shape.from_type(value_type, type_map=type_map))

    @override
    def _check_value(self, value: Mapping[H, T], /, *, deep: bool) -> None:
        if not isinstance(value, Mapping):
            raise MessageError.invalid_type('a mapping', value)
        if deep:
            for k, v in value.items():
                self._key._check_value(k, deep=True)
                self._value._check_value(v, deep=True)

    @override
    def _serialize(self, encoder: ValueEncoder, value: Mapping[H, T], /) -> None:
        encoder.encode_map(value, self._key.serialize, self._value.serialize)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> Mapping[H, T]:
        return decoder.decode_map(self._key.deserialize, self._value.deserialize, self._build)
