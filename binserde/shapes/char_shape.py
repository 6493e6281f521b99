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

from typing import Any

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.types import char
from binserde.visitor import ValueDecoder, ValueEncoder


class CharShape(Shape[str]):
    """ Represents a single character, annotated with `binserde.types.char`.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if type_ is not char:
            raise TypeError('expected char type')
        return cls()

    @override
    def _check_value(self, value: str, /, *, deep: bool) -> None:
        if not isinstance(value, str):
            raise MessageError.invalid_type('a character', value)
        if len(value) != 1:
            raise MessageError.invalid_value(f'string of length {len(value)}', 'a character')

    @override
    def _serialize(self, encoder: ValueEncoder, value: str, /) -> None:
        encoder.encode_char(value)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> str:
        return decoder.decode_char()
