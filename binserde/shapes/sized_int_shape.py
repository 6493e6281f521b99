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

from typing import Any, ClassVar, NewType

from typing_extensions import Self, override

from binserde.encoding.int import int_type_name
from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import get_newtype_supertype, is_subclass
from binserde.visitor import ValueDecoder, ValueEncoder


class _SizedIntShape(Shape[int]):
    """ Base class for classes that represent builtin `int` values with a fixed size and signedness.

    The name of the integer variant (like `u32`) is also the suffix of the encoder/decoder methods that are used.
    """

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]
    # `isize` and `usize` have the same range as `i64` and `u64` but are a different variant of the value model
    _variant: ClassVar[str | None] = None

    @classmethod
    def _variant_name(cls) -> str:
        return cls._variant or int_type_name(cls._byte_size, signed=cls._signed)

    @classmethod
    def _upper_bound_value(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def _lower_bound_value(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, NewType) or not is_subclass(get_newtype_supertype(type_), int):
            raise TypeError('expected an integer width marker, like u32')
        return cls()

    @override
    def _check_value(self, value: int, /, *, deep: bool) -> None:
        # XXX: bool is a subclass of int, but True is not a valid integer value
        if not isinstance(value, int) or isinstance(value, bool):
            raise MessageError.invalid_type(self._variant_name(), value)
        self._check_range(value)

    def _check_range(self, value: int) -> None:
        if not self._lower_bound_value() <= value <= self._upper_bound_value():
            raise MessageError.invalid_value(f'integer `{value}`', self._variant_name())

    @override
    def _serialize(self, encoder: ValueEncoder, value: int, /) -> None:
        getattr(encoder, f'encode_{self._variant_name()}')(value)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> int:
        return getattr(decoder, f'decode_{self._variant_name()}')()


class I8Shape(_SizedIntShape):
    _signed = True
    _byte_size = 1


class I16Shape(_SizedIntShape):
    _signed = True
    _byte_size = 2


class I32Shape(_SizedIntShape):
    _signed = True
    _byte_size = 4


class I64Shape(_SizedIntShape):
    _signed = True
    _byte_size = 8


class IsizeShape(_SizedIntShape):
    _signed = True
    _byte_size = 8
    _variant = 'isize'


class U8Shape(_SizedIntShape):
    _signed = False
    _byte_size = 1


class U16Shape(_SizedIntShape):
    _signed = False
    _byte_size = 2


class U32Shape(_SizedIntShape):
    _signed = False
    _byte_size = 4


class U64Shape(_SizedIntShape):
    _signed = False
    _byte_size = 8


class UsizeShape(_SizedIntShape):
    _signed = False
    _byte_size = 8
    _variant = 'usize'
