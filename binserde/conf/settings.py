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

from pydantic import field_validator

from binserde.endian import Endian
from binserde.utils.pydantic import BaseModel


class CodecSettings(BaseModel):
    # Byte order used by `to_bytes`/`from_bytes` when the caller doesn't pass one.
    DEFAULT_ENDIAN: Endian = Endian.LITTLE

    # Byte order used by `encode`/`decode`, the entry points for types with a manual codec.
    MANUAL_CODEC_ENDIAN: Endian = Endian.BIG

    @field_validator('DEFAULT_ENDIAN', 'MANUAL_CODEC_ENDIAN', mode='before')
    @classmethod
    def _parse_endian(cls, value: object) -> object:
        # environment variables are commonly written in upper case
        if isinstance(value, str):
            return value.strip().lower()
        return value
