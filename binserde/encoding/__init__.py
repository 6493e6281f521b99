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
This module holds the fixed layouts of the primitive (non-compound) values.

Each submodule `x` deals with a single kind of value and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(deserializer: Deserializer, ...config params...) -> ValueType:
        ...

The config params are keyword-only, most encoders take the `endian` to use for multi-byte numbers. Invalid values
and invalid bytes raise `MessageError`, lengths that don't fit the u32 prefix raise `TooManyItemsError`, and stream
failures are raised as-is by the given serializer/deserializer.

Compound values (options, sequences, maps, structs and enums) are laid out by the `Encoder` and `Decoder` classes,
which use these functions for every primitive they write or read.
"""
