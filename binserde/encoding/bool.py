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
A boolean takes exactly 1 byte: `0x01` for `True`, `0x00` for `False`. The same byte is the presence flag of options.

Decoding is strict, any other byte is rejected instead of being read as `True`:

>>> se = Serializer.build_bytes_serializer()
>>> for flag in (True, False):
...     encode_bool(se, flag)
>>> data = bytes(se.finalize())
>>> data
b'\x01\x00'
>>> de = Deserializer.build_bytes_deserializer(data + b'\x02')
>>> decode_bool(de), decode_bool(de)
(True, False)
>>> try:
...     decode_bool(de)
... except MessageError as e:
...     print(e)
invalid value: byte `0x02`, expected a boolean
"""

from binserde.error import MessageError
from binserde.serialization import Deserializer, Serializer


def encode_bool(serializer: Serializer, value: bool) -> None:
    if not isinstance(value, bool):
        raise MessageError.invalid_type('a boolean', value)
    serializer.write_byte(1 if value else 0)


def decode_bool(deserializer: Deserializer, *, expected: str = 'a boolean') -> bool:
    """ Read one byte as a boolean, `expected` names the value in the error message.
    """
    match deserializer.read_byte():
        case 0:
            return False
        case 1:
            return True
        case byte:
            raise MessageError.invalid_value(f'byte `{byte:#04x}`', expected)
