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
This module implements the length prefix shared by strings, byte sequences, sequences and maps.

The prefix is always a 4-byte unsigned integer, so the longest value that can be encoded has `2**32 - 1` items. A
longer value is an error, it is never truncated:

>>> se = Serializer.build_bytes_serializer()
>>> encode_length(se, 3, endian=Endian.LITTLE)
>>> encode_length(se, MAX_LENGTH, endian=Endian.LITTLE)
>>> bytes(se.finalize()).hex()
'03000000ffffffff'

>>> try:
...     encode_length(Serializer.build_bytes_serializer(), MAX_LENGTH + 1, endian=Endian.LITTLE)
... except TooManyItemsError as e:
...     print(*e.args)
sequence has too many items, limit is 2^32

When decoding there is no limit to check, any u32 is a valid length:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff'))
>>> decode_length(de, endian=Endian.LITTLE)
4294967295
"""

from binserde.endian import Endian
from binserde.error import MessageError, TooManyItemsError
from binserde.serialization import Deserializer, Serializer

from .int import decode_int, encode_int

LENGTH_PREFIX_SIZE = 4  # u32
MAX_LENGTH = 2 ** (LENGTH_PREFIX_SIZE * 8) - 1


def encode_length(serializer: Serializer, length: int, *, endian: Endian) -> None:
    """ Encodes the length prefix, raises `TooManyItemsError` if it doesn't fit.
    """
    if length < 0:
        raise MessageError.invalid_value(f'length {length}', 'a non-negative length')
    if length > MAX_LENGTH:
        raise TooManyItemsError
    encode_int(serializer, length, length=LENGTH_PREFIX_SIZE, signed=False, endian=endian)


def decode_length(deserializer: Deserializer, *, endian: Endian) -> int:
    """ Decodes the length prefix.
    """
    return decode_int(deserializer, length=LENGTH_PREFIX_SIZE, signed=False, endian=endian)
