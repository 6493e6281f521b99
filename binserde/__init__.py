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
Compact binary encoding for a serde-like value model.

Values are written without any self-description: no field names, no type tags, only the variant index of enums and a
u32 length before strings, byte sequences, sequences and maps. Reader and writer must agree on the shape of the data,
which is described with annotations (`binserde.shapes.make_shape`) or with hand-written `Encode`/`Decode` methods.
"""

from binserde.codec import Decode, Encode, ValueDriver, decode, encode, from_bytes, to_bytes
from binserde.decoder import Decoder
from binserde.encoder import Encoder
from binserde.endian import Endian
from binserde.error import BinaryError, CodecError, MessageError, TooManyItemsError
from binserde.version import __version__

__all__ = [
    'BinaryError',
    'CodecError',
    'Decode',
    'Decoder',
    'Encode',
    'Encoder',
    'Endian',
    'MessageError',
    'TooManyItemsError',
    'ValueDriver',
    '__version__',
    'decode',
    'encode',
    'from_bytes',
    'to_bytes',
]
