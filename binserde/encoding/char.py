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
This module implements encoding of a single character as its code point in a 4-byte unsigned integer.

A character is a `str` of length 1 holding a Unicode scalar value, that is, any code point except surrogates.

>>> se = Serializer.build_bytes_serializer()
>>> encode_char(se, 'x', endian=Endian.LITTLE)  # writes 78000000
>>> encode_char(se, '😎', endian=Endian.BIG)  # writes 0001f60e
>>> bytes(se.finalize()).hex()
'780000000001f60e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('780000000001f60e'))
>>> decode_char(de, endian=Endian.LITTLE)
'x'
>>> decode_char(de, endian=Endian.BIG)
'😎'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00d80000'))
>>> try:
...     decode_char(de, endian=Endian.LITTLE)
... except MessageError as e:
...     print(*e.args)
invalid value: integer `55296`, expected a character
"""

from binserde.endian import Endian
from binserde.error import MessageError
from binserde.serialization import Deserializer, Serializer

from .int import decode_int, encode_int

MAX_CODE_POINT = 0x10ffff
SURROGATES = range(0xd800, 0xe000)


def _is_scalar_value(code_point: int) -> bool:
    return 0 <= code_point <= MAX_CODE_POINT and code_point not in SURROGATES


def encode_char(serializer: Serializer, value: str, *, endian: Endian) -> None:
    """ Encodes a character as a u32 code point.
    """
    if not isinstance(value, str):
        raise MessageError.invalid_type('a character', value)
    if len(value) != 1 or not _is_scalar_value(ord(value)):
        raise MessageError.invalid_value(f'string {value!r}', 'a character')
    encode_int(serializer, ord(value), length=4, signed=False, endian=endian)


def decode_char(deserializer: Deserializer, *, endian: Endian) -> str:
    """ Decodes a u32 code point into a character.
    """
    code_point = decode_int(deserializer, length=4, signed=False, endian=endian)
    if not _is_scalar_value(code_point):
        raise MessageError.invalid_value(f'integer `{code_point}`', 'a character')
    return chr(code_point)
