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
A byte sequence is written as its length, a u32, followed by the bytes themselves.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test', endian=Endian.LITTLE)  # will prepend 04000000 before writing b'test'
>>> bytes(se.finalize()).hex()
'0400000074657374'

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test', endian=Endian.BIG)  # the prefix follows the byte order, the data doesn't
>>> bytes(se.finalize()).hex()
'0000000474657374'

>>> de = Deserializer.build_bytes_deserializer(b'\x04\x00\x00\x00testfoo')
>>> decode_bytes(de, endian=Endian.LITTLE)
b'test'
>>> bytes(de.read_all())
b'foo'

A prefix that promises more bytes than there are fails with the stream's own error:

>>> from binserde.serialization import OutOfDataError
>>> de = Deserializer.build_bytes_deserializer(b'\x05\x00\x00\x00test')
>>> try:
...     decode_bytes(de, endian=Endian.LITTLE)
... except OutOfDataError as e:
...     print(*e.args)
not enough bytes to read, wanted 5 but only 4 left
"""

from binserde.endian import Endian
from binserde.error import MessageError
from binserde.serialization import Buffer, Deserializer, Serializer

from .length import decode_length, encode_length


def encode_bytes(serializer: Serializer, data: Buffer, *, endian: Endian) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    The module docstring has examples.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MessageError.invalid_type('a byte sequence', data)
    view = memoryview(data).cast('B')
    encode_length(serializer, len(view), endian=endian)
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer, *, endian: Endian) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    The module docstring has examples.
    """
    size = decode_length(deserializer, endian=endian)
    return bytes(deserializer.read_bytes(size))
