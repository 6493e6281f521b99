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

from enum import StrEnum, unique


@unique
class Endian(StrEnum):
    """Byte order of multi-byte numbers.

    The values are the ones accepted by `int.to_bytes(byteorder=...)`:

    >>> (1).to_bytes(2, byteorder=Endian.LITTLE.value)
    b'\\x01\\x00'
    >>> Endian('big').struct_prefix
    '>'
    """

    LITTLE = 'little'
    BIG = 'big'

    @property
    def struct_prefix(self) -> str:
        """Prefix for `struct` format strings, it also disables native alignment."""
        return '<' if self is Endian.LITTLE else '>'
