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

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, is_dataclass
from enum import Enum
from functools import reduce
from operator import or_
from types import MappingProxyType as mappingproxy, NoneType, UnionType
from typing import TYPE_CHECKING, Any, NamedTuple, NewType, TypeAlias, TypeVar, Union, cast, get_args, get_origin

from structlog import get_logger

if TYPE_CHECKING:
    from binserde.shapes.shape import Shape


logger = get_logger()

T = TypeVar('T')
TypeAliasMap: TypeAlias = Mapping[Any, Any]
TypeToShapeMap: TypeAlias = Mapping[Any, type['Shape']]


def is_subclass(type_: Any, class_: type | tuple[type, ...]) -> bool:
    """ Like `issubclass` but returns `False` instead of failing when `type_` is not a class.

    >>> is_subclass(bool, int)
    True
    >>> is_subclass(list[int], list)
    False
    >>> is_subclass(None, object)
    False
    """
    return isinstance(type_, type) and issubclass(type_, class_)


def is_namedtuple(type_: Any) -> bool:
    """ Checks whether the given type was created with `typing.NamedTuple`.

    >>> class Pair(NamedTuple):
    ...     a: int
    ...     b: int
    >>> is_namedtuple(Pair)
    True
    >>> is_namedtuple(tuple)
    False
    """
    return is_subclass(type_, tuple) and NamedTuple in getattr(type_, '__orig_bases__', tuple())


def is_origin_hashable(type_: Any) -> bool:
    """ Checks whether the given type signature satisfies `collections.abc.Hashable`, type arguments are ignored.

    >>> is_origin_hashable(int)
    True
    >>> is_origin_hashable(frozenset[int])
    True
    >>> is_origin_hashable(set[int])
    False
    >>> is_origin_hashable(int | None)
    True
    >>> is_origin_hashable(list[int] | None)
    False
    """
    origin_type = get_origin(type_) or type_
    if origin_type is UnionType or origin_type is Union:
        return all(is_origin_hashable(arg) for arg in get_args(type_))
    # NewType markers are not classes, what matters is the type they wrap
    if isinstance(origin_type, NewType):
        return is_origin_hashable(origin_type.__supertype__)
    # XXX: mappingproxy claims to be Hashable on some Python versions, but hashing an instance fails
    if origin_type is mappingproxy:
        return False
    if not isinstance(origin_type, type):
        return True
    return issubclass(origin_type, Hashable)


def pretty_type(type_: Any) -> str:
    """ Shows a cleaner string representation for a type.

    >>> pretty_type(int)
    'int'
    >>> pretty_type(None)
    'None'
    >>> pretty_type(list[int])
    'list[int]'
    """
    if type_ is NoneType or type_ is None:
        return 'None'
    elif hasattr(type_, '__args__'):
        return str(type_)
    else:
        return getattr(type_, '__name__', repr(type_))


# XXX: _verbose argument is used to help with doctest
def get_aliased_type(type_: Any, alias_map: TypeAliasMap, *, _verbose: bool = True) -> Any:
    """ Map a type to its usable alias including the type's arguments.

    For example, `int` is mapped to `i64` and `bytearray` to `bytes` in the default alias map:

    >>> from binserde.shapes import DEFAULT_TYPE_ALIAS_MAP as alias_map
    >>> get_aliased_type(dict[str, tuple[int, bytearray]], alias_map, _verbose=False)
    dict[str, tuple[binserde.types.i64, bytes]]
    """
    new_type, replaced = _get_aliased_type(type_, alias_map)
    if replaced and _verbose:
        logger.debug('type replaced', old=pretty_type(type_), new=pretty_type(new_type))
    return new_type


def _get_aliased_type(type_: Any, alias_map: TypeAliasMap) -> tuple[Any, bool]:
    """ Implementation of get_aliased_type with indication of whether there was a replacement.
    """
    origin_type = get_origin(type_) or type_
    aliased_origin: Any
    replaced = False

    # XXX: special case, `Optional[T]` and `Union[A, B]` are handled as `T | None` and `A | B`
    if origin_type is Union:
        aliased_origin = UnionType
    elif isinstance(origin_type, Hashable) and origin_type in alias_map:
        aliased_origin = alias_map[origin_type]
        replaced = True
    else:
        aliased_origin = origin_type

    type_args = get_args(type_)
    if not hasattr(type_, '__args__') or isinstance(origin_type, NewType):
        # normal case when there aren't type arguments
        return aliased_origin, replaced

    # XXX: `tuple[()]` is the only way of having `__args__` without any argument
    if not type_args:
        return aliased_origin[()], replaced

    # use _get_aliased_type for recursion so we don't log multiple times when a replacement happens
    aliased_args_replaced = [_get_aliased_type(arg, alias_map) for arg in type_args]
    aliased_args = [aliased_arg for aliased_arg, _ in aliased_args_replaced]
    replaced |= any(arg_replaced for _, arg_replaced in aliased_args_replaced)

    # XXX: special case, UnionType can't be instantiated directly, this is the simplest way to do it
    if aliased_origin is UnionType:
        return reduce(or_, aliased_args), replaced

    assert hasattr(aliased_origin, '__class_getitem__'), 'we must have an indexable class at this point'
    return aliased_origin[*aliased_args], replaced


def get_usable_origin_type(type_: Any, /, *, type_map: Shape.TypeMap, _verbose: bool = True) -> Any:
    """ Map a type into a key that exists in `type_map.shapes_map`, or raise `TypeError` if there is no such key.

    A type is first looked up by itself (after aliasing, for example `int` becomes `i64`), then by its origin (for
    example `dict[str, int]` becomes `dict`), and finally by the kind of class it is, using these special keys:

    - `NamedTuple` for classes created with `typing.NamedTuple`
    - `dataclass` for dataclasses
    - `Enum` for `enum.Enum` subclasses
    - `NewType` for types created with `typing.NewType`
    - `Variant` for unions that don't include `None`, like `A | B`

    >>> from binserde.shapes import DEFAULT_TYPE_MAP as default_type_map
    >>> origin = get_usable_origin_type(list[int], type_map=default_type_map, _verbose=False)
    >>> assert origin in default_type_map.shapes_map
    >>> origin
    <class 'list'>
    >>> try:
    ...     get_usable_origin_type(complex, type_map=default_type_map)
    ... except TypeError as e:
    ...     print(e)
    type complex is not supported by any Shape class
    """
    from binserde.shapes.variant import Variant

    if isinstance(type_, str):
        raise TypeError('string annotations are not supported, use `typing.get_type_hints` to resolve them')

    aliased_type = get_aliased_type(type_, type_map.alias_map, _verbose=_verbose)
    shapes_map = type_map.shapes_map

    if isinstance(aliased_type, Hashable) and aliased_type in shapes_map:
        return aliased_type

    origin_aliased_type = get_origin(aliased_type) or aliased_type

    if origin_aliased_type is UnionType or origin_aliased_type is Union:
        args = get_args(aliased_type)
        if NoneType in args and UnionType in shapes_map:
            return UnionType
        # a specific union can still be mapped to its own class, like `(A, B): SomeShape`
        if args in shapes_map:
            return args
        if Variant in shapes_map:
            return Variant

    if isinstance(origin_aliased_type, Hashable) and origin_aliased_type in shapes_map:
        return origin_aliased_type

    special_keys: list[tuple[Any, bool]] = [
        (NamedTuple, is_namedtuple(aliased_type)),
        (dataclass, is_subclass(aliased_type, object) and is_dataclass(aliased_type)),
        (Enum, is_subclass(aliased_type, Enum)),
        (NewType, isinstance(aliased_type, NewType)),
    ]
    for key, matches in special_keys:
        if matches and key in shapes_map:
            return key

    raise TypeError(f'type {pretty_type(type_)} is not supported by any Shape class')


def get_newtype_supertype(type_: Any) -> Any:
    """ The type wrapped by a `typing.NewType`.

    >>> UserId = NewType('UserId', int)
    >>> get_newtype_supertype(UserId)
    <class 'int'>
    """
    if not isinstance(type_, NewType):
        raise TypeError('expected a NewType')
    return cast(Any, type_).__supertype__
