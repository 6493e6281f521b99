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

"""
This module implements encoding of integers with a fixed size, the size, signedness and byte order are parametrized.

There is no tag or prefix, an N-byte integer is always exactly N bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 0, length=1, signed=True, endian=Endian.LITTLE)  # writes 00
>>> encode_int(se, 255, length=1, signed=False, endian=Endian.LITTLE)  # writes ff
>>> encode_int(se, 1234, length=2, signed=True, endian=Endian.BIG)  # writes 04d2
>>> encode_int(se, 1234, length=2, signed=True, endian=Endian.LITTLE)  # writes d204
>>> encode_int(se, -1234, length=2, signed=True, endian=Endian.LITTLE)  # writes 2efb
>>> bytes(se.finalize()).hex()
'00ff04d2d2042efb'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00ff04d2d2042efb'))
>>> decode_int(de, length=1, signed=True, endian=Endian.LITTLE)  # reads 00
0
>>> decode_int(de, length=1, signed=False, endian=Endian.LITTLE)  # reads ff
255
>>> decode_int(de, length=2, signed=True, endian=Endian.BIG)  # reads 04d2
1234
>>> decode_int(de, length=2, signed=True, endian=Endian.LITTLE)  # reads d204
1234
>>> decode_int(de, length=2, signed=True, endian=Endian.LITTLE)  # reads 2efb
-1234
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 256, length=1, signed=False, endian=Endian.LITTLE)
... except MessageError as e:
...     print(*e.args)
invalid value: integer `256`, expected u8
"""

from binserde.endian import Endian
from binserde.error import MessageError
from binserde.serialization import Deserializer, Serializer


def int_type_name(length: int, *, signed: bool) -> str:
    """ Name of the fixed-size integer type, like `u8` or `i64`.
    """
    return f'{"i" if signed else "u"}{length * 8}'


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, endian: Endian) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    The module docstring has examples.
    """
    # XXX: bool is a subclass of int, but True is not a valid integer value
    if not isinstance(number, int) or isinstance(number, bool):
        raise MessageError.invalid_type(int_type_name(length, signed=signed), number)
    try:
        data = int.to_bytes(number, length, byteorder=endian.value, signed=signed)
    except OverflowError:
        raise MessageError.invalid_value(f'integer `{number}`', int_type_name(length, signed=signed))
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool, endian: Endian) -> int:
    """ Decode an int using the given byte-length, signedness and byte order.

    The module docstring has examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder=endian.value, signed=signed)
