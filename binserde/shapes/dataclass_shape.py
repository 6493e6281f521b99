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

from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, TypeVar, get_type_hints

from typing_extensions import Self, override

from binserde.error import MessageError
from binserde.shapes.shape import Shape
from binserde.shapes.utils import is_subclass
from binserde.visitor import DecodeField, EncodeField, ValueDecoder, ValueEncoder

if TYPE_CHECKING:
    from _typeshed import DataclassInstance

D = TypeVar('D', bound='DataclassInstance')


class DataclassShape(Shape[D]):
    """ Represents a dataclass as a struct with named fields, or as a unit struct when it has no fields.

    Only fields that are part of `__init__` are encoded, in declaration order.
    """

    __slots__ = ('_fields', '_class')

    _fields: dict[str, Shape]
    _class: type[D]

    def __init__(self, fields_: dict[str, Shape], class_: type[D]):
        self._fields = fields_
        self._class = class_

    @property
    def name(self) -> str:
        return self._class.__name__

    @property
    def is_unit(self) -> bool:
        return not self._fields

    @override
    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: Shape.TypeMap) -> Self:
        if not is_subclass(type_, object) or not is_dataclass(type_):
            raise TypeError('expected a dataclass')
        # annotations can be strings when the dataclass is defined under `from __future__ import annotations`
        hints = get_type_hints(type_)
        # XXX: the order is important, but `dict` and `fields` should have a stable order
        values: dict[str, Shape] = {}
        for field in fields(type_):
            if field.init:
                values[field.name] = Shape.from_type(hints[field.name], type_map=type_map)
        return cls(values, type_)

    def encode_fields(self, value: D) -> list[EncodeField]:
        """ The fields of `value` as expected by `ValueEncoder.encode_struct`.
        """
        return [
            (field_name, getattr(value, field_name), field_shape.serialize)
            for field_name, field_shape in self._fields.items()
        ]

    def decode_fields(self) -> list[DecodeField]:
        """ The fields as expected by `ValueDecoder.decode_struct`.
        """
        return [(field_name, field_shape.deserialize) for field_name, field_shape in self._fields.items()]

    def build(self, kwargs: dict[str, Any]) -> D:
        return self._class(**kwargs)

    @override
    def _check_value(self, value: D, /, *, deep: bool) -> None:
        if not isinstance(value, self._class):
            raise MessageError.invalid_type(f'{self.name} instance', value)
        if deep:
            for field_name, field_shape in self._fields.items():
                field_shape._check_value(getattr(value, field_name), deep=True)

    @override
    def _serialize(self, encoder: ValueEncoder, value: D, /) -> None:
        if self.is_unit:
            encoder.encode_unit_struct(self.name)
        else:
            encoder.encode_struct(self.name, self.encode_fields(value))

    @override
    def _deserialize(self, decoder: ValueDecoder, /) -> D:
        if self.is_unit:
            decoder.decode_unit_struct(self.name)
            return self._class()
        return self.build(decoder.decode_struct(self.name, self.decode_fields()))
