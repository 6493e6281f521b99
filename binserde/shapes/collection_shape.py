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
from collections import deque
from collections.abc import Collection, Hashable, Iterable, Set
from typing import Any, TypeVar, get_args, get_origin

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_origin_hashable, is_subclass, pretty_type
from binserde.visitor import ValueDecoder, ValueEncoder

T = TypeVar('T')
H = TypeVar('H', bound=Hashable)


class _CollectionShape(Shape[Collection[T]], ABC):
    """ Used as base for Shape classes that represent collections, all of them are encoded as a sequence.
    """
    __slots__ = ('_item',)

    _item: Shape[T]
    # XXX: subclass must define this value:
    _expected: type

    def __init__(self, item_shape: Shape[T], /) -> None:
        self._item = item_shape

    @abstractmethod
    def _build(self, items: Iterable[T]) -> Collection[T]:
        """ How to build the concrete collection from an iterable of items.
        """
        raise NotImplementedError

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        member_type = cls._get_member_type(type_)
        member_shape = Shape.from_type(member_type, type_map=type_map)
        return cls(member_shape)

    @classmethod
    def _get_member_type(cls, type_: Any) -> Any:
        origin_type = get_origin(type_) or type_
        if not is_subclass(origin_type, Collection):
            raise TypeError('expected Collection type')
        args = get_args(type_)
        if not args or len(args) != 1:
            raise TypeError(f'expected {pretty_type(origin_type)}[<type>]')
        return args[0]

    def _check_item(self, item: T) -> None:
        self._item._check_value(item, deep=True)

    @override
    def _check_value(self, value: Collection[T], /, *, deep: bool) -> None:
        if not isinstance(value, self._expected):
            raise MessageError.invalid_type(f'a {self._expected.__name__}', value)
        if deep:
            for i in value:
                self._check_item(i)

    @override
    def _serialize(self, encoder: ValueEncoder, value: Collection[T], /) -> None:
        encoder.encode_seq(value, self._item.serialize)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> Collection[T]:
        return decoder.decode_seq(self._item.deserialize, self._build)


class ListShape(_CollectionShape[T]):
    """ Represents builtin `list` values.
    """

    _expected = list

    @override
    def _build(self, items: Iterable[T]) -> list[T]:
        return list(items)


class DequeShape(_CollectionShape[T]):
    """ Represents builtin `collections.deque` values.
    """

    _expected = deque

    @override
    def _build(self, items: Iterable[T]) -> deque[T]:
        return deque(items)


class SetShape(_CollectionShape[H]):
    """ Represents builtin `set` values, items are encoded in iteration order.
    """

    _expected = set

    @override
    def _build(self, items: Iterable[H]) -> Set[H]:
        return set(items)

    @override
    @classmethod
    def _get_member_type(cls, type_: Any) -> Any:
        member_type = super()._get_member_type(type_)
        if not is_origin_hashable(member_type):
            raise TypeError(f'{pretty_type(member_type)} is not hashable')
        return member_type


class FrozenSetShape(SetShape[H]):
    """ Represents builtin `frozenset` values.
    """

    _expected = frozenset

    @override
    def _build(self, items: Iterable[H]) -> frozenset[H]:
        return frozenset(items)
