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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`. The prefix
counts bytes, not characters.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foo', endian=Endian.LITTLE)  # writes 03000000666f6f
>>> encode_utf8(se, 'π', endian=Endian.LITTLE)  # writes 02000000cf80
>>> bytes(se.finalize()).hex()
'03000000666f6f02000000cf80'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('03000000666f6f02000000cf80'))
>>> decode_utf8(de, endian=Endian.LITTLE)
'foo'
>>> decode_utf8(de, endian=Endian.LITTLE)
'π'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('01000000ff'))
>>> try:
...     decode_utf8(de, endian=Endian.LITTLE)
... except MessageError as e:
...     print(*e.args)
invalid value: byte sequence of length 1, expected a valid utf-8 string
"""

from binserde.endian import Endian
from binserde.error import MessageError
from binserde.serialization import Deserializer, Serializer

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str, *, endian: Endian) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    The module docstring has examples.
    """
    if not isinstance(value, str):
        raise MessageError.invalid_type('a string', value)
    try:
        data = value.encode('utf-8')
    except UnicodeEncodeError:
        # lone surrogates can't be represented in utf-8
        raise MessageError.invalid_value(f'string {value!r}', 'a valid unicode string')
    encode_bytes(serializer, data, endian=endian)


def decode_utf8(deserializer: Deserializer, *, endian: Endian) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    The module docstring has examples.
    """
    data = decode_bytes(deserializer, endian=endian)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        raise MessageError.invalid_value(f'byte sequence of length {len(data)}', 'a valid utf-8 string')
