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

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import get_newtype_supertype, is_subclass
from binserde.visitor import ValueDecoder, ValueEncoder


class _FloatShape(Shape[float]):
    """ Base class for IEEE 754 floats, an `int` is accepted when encoding and decoded back as a `float`.
    """

    # XXX: subclass must define this value:
    _variant: ClassVar[str]

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not isinstance(type_, NewType) or not is_subclass(get_newtype_supertype(type_), float):
            raise TypeError('expected a float width marker, like f64')
        return cls()

    @override
    def _check_value(self, value: float, /, *, deep: bool) -> None:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise MessageError.invalid_type(self._variant, value)

    @override
    def _serialize(self, encoder: ValueEncoder, value: float, /) -> None:
        getattr(encoder, f'encode_{self._variant}')(value)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> float:
        return getattr(decoder, f'decode_{self._variant}')()


class F32Shape(_FloatShape):
    _variant = 'f32'


class F64Shape(_FloatShape):
    _variant = 'f64'
