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
from binserde.serialization import Buffer
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_subclass
from binserde.visitor import ValueDecoder, ValueEncoder


class BytesShape(Shape[bytes]):
    """ Represents builtin `bytes` values, `bytearray` and `memoryview` are accepted too but always decoded as `bytes`.
    """

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, (bytes, bytearray, memoryview)):
            raise TypeError('expected bytes type')
        return cls()

    @override
    def _check_value(self, value: Buffer, /, *, deep: bool) -> None:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise MessageError.invalid_type('a byte sequence', value)

    @override
    def _serialize(self, encoder: ValueEncoder, value: Buffer, /) -> None:
        encoder.encode_bytes(value)

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> bytes:
        return decoder.decode_bytes()
