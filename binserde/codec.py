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
Entry points that turn a value into bytes and back.

There are two pairs of them:

- `to_bytes`/`from_bytes` take a driver, which knows the shape of the value (any `binserde.shapes.Shape` is a driver),
  and use the default byte order, little-endian unless configured otherwise
- `encode`/`decode` are for types that implement `Encode`/`Decode` by hand, they use the manual codec byte order,
  big-endian unless configured otherwise

In both cases bytes left after the value are ignored.
"""

from typing import Protocol, TypeVar

from structlog import get_logger

from binserde.conf import get_global_settings
from binserde.decoder import Decoder
from binserde.encoder import Encoder
from binserde.endian import Endian
from binserde.serialization import Buffer, Deserializer, Serializer

logger = get_logger()

T = TypeVar('T')
D = TypeVar('D', bound='Decode')


class ValueDriver(Protocol[T]):
    """ Anything that can traverse a value of type `T` with an encoder and build one with a decoder.
    """

    def serialize(self, encoder: Encoder, value: T, /) -> None:
        ...

    def deserialize(self, decoder: Decoder, /) -> T:
        ...


class Encode(Protocol):
    """ A type that writes itself, calling the encoder methods in the order its layout requires.
    """

    def encode(self, encoder: Encoder) -> None:
        ...


class Decode(Protocol):
    """ A type that reads itself into a default-constructed instance, mirroring its `encode`.
    """

    def decode(self, decoder: Decoder) -> None:
        ...


class EncodeCallback(Protocol):
    def __call__(self, encoder: Encoder, /) -> None:
        ...


def _encode_with(endian: Endian, encode_value: EncodeCallback) -> bytes:
    serializer = Serializer.build_bytes_serializer()
    encoder = Encoder(serializer, endian)
    encode_value(encoder)
    return bytes(encoder.serializer.finalize())


def to_bytes(value: T, driver: ValueDriver[T], *, endian: Endian | None = None) -> bytes:
    """ Encode a value into a new byte string, `driver` decides which variants of the value model are written.

    When `endian` is not given the `DEFAULT_ENDIAN` setting is used.
    """
    if endian is None:
        endian = get_global_settings().DEFAULT_ENDIAN
    data = _encode_with(endian, lambda encoder: driver.serialize(encoder, value))
    logger.debug('encoded value', driver=type(driver).__name__, endian=endian.value, size=len(data))
    return data


def from_bytes(data: Buffer, driver: ValueDriver[T], *, endian: Endian | None = None) -> T:
    """ Decode a value from the start of `data`, `driver` must expect the same variants that were written.

    When `endian` is not given the `DEFAULT_ENDIAN` setting is used.
    """
    if endian is None:
        endian = get_global_settings().DEFAULT_ENDIAN
    deserializer = Deserializer.build_bytes_deserializer(data)
    decoder = Decoder(deserializer, endian)
    value = driver.deserialize(decoder)
    logger.debug('decoded value', driver=type(driver).__name__, endian=endian.value, size=memoryview(data).nbytes)
    return value


def encode(obj: Encode, *, endian: Endian | None = None) -> bytes:
    """ Encode an object that implements `Encode` into a new byte string.

    When `endian` is not given the `MANUAL_CODEC_ENDIAN` setting is used.
    """
    if endian is None:
        endian = get_global_settings().MANUAL_CODEC_ENDIAN
    data = _encode_with(endian, obj.encode)
    logger.debug('encoded value', type=type(obj).__name__, endian=endian.value, size=len(data))
    return data


def decode(cls: type[D], data: Buffer, *, endian: Endian | None = None) -> D:
    """ Decode an instance of `cls`, which must implement `Decode` and be constructible without arguments.

    When `endian` is not given the `MANUAL_CODEC_ENDIAN` setting is used.
    """
    if endian is None:
        endian = get_global_settings().MANUAL_CODEC_ENDIAN
    deserializer = Deserializer.build_bytes_deserializer(data)
    obj = cls()
    obj.decode(Decoder(deserializer, endian))
    logger.debug('decoded value', type=cls.__name__, endian=endian.value, size=memoryview(data).nbytes)
    return obj
