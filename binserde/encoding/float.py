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

r"""
This module implements IEEE 754 floats of 4 (`f32`) or 8 (`f64`) bytes in the given byte order.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5, length=4, endian=Endian.LITTLE)  # writes 0000c03f
>>> encode_float(se, -2.0, length=8, endian=Endian.BIG)  # writes c000000000000000
>>> bytes(se.finalize()).hex()
'0000c03fc000000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000c03fc000000000000000'))
>>> decode_float(de, length=4, endian=Endian.LITTLE)
1.5
>>> decode_float(de, length=8, endian=Endian.BIG)
-2.0

An `f32` can't hold every Python float, values that are too big are rejected instead of becoming infinite:

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, 1e300, length=4, endian=Endian.LITTLE)
... except MessageError as e:
...     print(*e.args)
invalid value: floating point `1e+300`, expected f32
"""

import struct

from binserde.endian import Endian
from binserde.error import MessageError
from binserde.serialization import Deserializer, Serializer

_FORMAT_BY_LENGTH = {
    4: 'f',
    8: 'd',
}


def _struct_format(length: int, endian: Endian) -> str:
    try:
        return endian.struct_prefix + _FORMAT_BY_LENGTH[length]
    except KeyError:
        raise ValueError(f'unsupported float length: {length}')


def encode_float(serializer: Serializer, value: float, *, length: int, endian: Endian) -> None:
    """ Encode a float using the given byte-length (4 or 8) and byte order.
    """
    type_name = f'f{length * 8}'
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise MessageError.invalid_type(type_name, value)
    try:
        serializer.write_struct((value,), _struct_format(length, endian))
    except (OverflowError, struct.error):
        raise MessageError.invalid_value(f'floating point `{value}`', type_name)


def decode_float(deserializer: Deserializer, *, length: int, endian: Endian) -> float:
    """ Decode a float using the given byte-length (4 or 8) and byte order.
    """
    value, = deserializer.read_struct(_struct_format(length, endian))
    return value
