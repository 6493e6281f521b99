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
Width markers for annotations.

Python has a single `int` and a single `float`, these markers say which fixed-width number of the value model a field
holds, for example `count: u32`. At runtime they are the identity function, `u32(5) == 5`.
"""

from typing import NewType

i8 = NewType('i8', int)
i16 = NewType('i16', int)
i32 = NewType('i32', int)
i64 = NewType('i64', int)
isize = NewType('isize', int)

u8 = NewType('u8', int)
u16 = NewType('u16', int)
u32 = NewType('u32', int)
u64 = NewType('u64', int)
usize = NewType('usize', int)

f32 = NewType('f32', float)
f64 = NewType('f64', float)

# a single unicode scalar value, a `str` of length 1
char = NewType('char', str)

__all__ = [
    'i8',
    'i16',
    'i32',
    'i64',
    'isize',
    'u8',
    'u16',
    'u32',
    'u64',
    'usize',
    'f32',
    'f64',
    'char',
]
