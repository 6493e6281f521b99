import math

import pytest

from binserde.encoding.bool import decode_bool, encode_bool
from binserde.encoding.bytes import decode_bytes, encode_bytes
from binserde.encoding.char import decode_char, encode_char
from binserde.encoding.float import decode_float, encode_float
from binserde.encoding.int import decode_int, encode_int
from binserde.encoding.length import MAX_LENGTH, decode_length, encode_length
from binserde.encoding.utf8 import decode_utf8, encode_utf8
from binserde.endian import Endian
from binserde.error import MessageError, TooManyItemsError
from binserde.serialization import Deserializer, OutOfDataError, Serializer


def _written(write) -> str:
    se = Serializer.build_bytes_serializer()
    write(se)
    return bytes(se.finalize()).hex()


def _reader(hex_data: str) -> Deserializer:
    return Deserializer.build_bytes_deserializer(bytes.fromhex(hex_data))


@pytest.mark.parametrize('number, length, signed, endian, expected', [
    (1, 1, False, Endian.LITTLE, '01'),
    (-1, 1, True, Endian.LITTLE, 'ff'),
    (0x1234, 2, False, Endian.LITTLE, '3412'),
    (0x1234, 2, False, Endian.BIG, '1234'),
    (-2, 4, True, Endian.BIG, 'fffffffe'),
    (2**64 - 1, 8, False, Endian.LITTLE, 'ff' * 8),
    (-2**63, 8, True, Endian.LITTLE, '0000000000000080'),
])
def test_int(number: int, length: int, signed: bool, endian: Endian, expected: str) -> None:
    assert _written(lambda se: encode_int(se, number, length=length, signed=signed, endian=endian)) == expected
    de = _reader(expected)
    assert decode_int(de, length=length, signed=signed, endian=endian) == number
    de.finalize()


@pytest.mark.parametrize('number, length, signed', [
    (256, 1, False),
    (-1, 1, False),
    (128, 1, True),
    (-129, 1, True),
    (2**32, 4, False),
    (2**63, 8, True),
])
def test_int_out_of_range(number: int, length: int, signed: bool) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(MessageError, match='invalid value: integer'):
        encode_int(se, number, length=length, signed=signed, endian=Endian.LITTLE)
    assert se.cur_pos() == 0


@pytest.mark.parametrize('value', [True, 1.0, '1', None])
def test_int_invalid_type(value: object) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(MessageError, match='invalid type'):
        encode_int(se, value, length=4, signed=False, endian=Endian.LITTLE)  # type: ignore[arg-type]


def test_float() -> None:
    assert _written(lambda se: encode_float(se, 1.5, length=4, endian=Endian.LITTLE)) == '0000c03f'
    assert _written(lambda se: encode_float(se, 1.5, length=8, endian=Endian.BIG)) == '3ff8000000000000'
    assert _written(lambda se: encode_float(se, 2, length=4, endian=Endian.BIG)) == '40000000'
    assert decode_float(_reader('0000c03f'), length=4, endian=Endian.LITTLE) == 1.5
    assert decode_float(_reader('3ff8000000000000'), length=8, endian=Endian.BIG) == 1.5


def test_float_special_values() -> None:
    for length in (4, 8):
        for value in (math.inf, -math.inf):
            data = _written(lambda se: encode_float(se, value, length=length, endian=Endian.LITTLE))
            assert decode_float(_reader(data), length=length, endian=Endian.LITTLE) == value
        data = _written(lambda se: encode_float(se, math.nan, length=length, endian=Endian.LITTLE))
        assert math.isnan(decode_float(_reader(data), length=length, endian=Endian.LITTLE))


def test_float_too_big_for_f32() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(MessageError, match='expected f32'):
        encode_float(se, 1e300, length=4, endian=Endian.LITTLE)
    with pytest.raises(MessageError, match='invalid type'):
        encode_float(se, False, length=8, endian=Endian.LITTLE)


def test_bool_is_strict() -> None:
    assert _written(lambda se: encode_bool(se, True)) == '01'
    assert _written(lambda se: encode_bool(se, False)) == '00'
    assert decode_bool(_reader('01')) is True
    assert decode_bool(_reader('00')) is False
    for data in ('02', 'ff'):
        with pytest.raises(MessageError, match='expected a boolean'):
            decode_bool(_reader(data))
    with pytest.raises(MessageError, match='invalid type'):
        encode_bool(Serializer.build_bytes_serializer(), 1)  # type: ignore[arg-type]


def test_char() -> None:
    assert _written(lambda se: encode_char(se, 'A', endian=Endian.LITTLE)) == '41000000'
    assert _written(lambda se: encode_char(se, '\U0010ffff', endian=Endian.BIG)) == '0010ffff'
    assert decode_char(_reader('41000000'), endian=Endian.LITTLE) == 'A'


@pytest.mark.parametrize('value', ['', 'ab', '\ud800'])
def test_char_invalid_value(value: str) -> None:
    with pytest.raises(MessageError, match='expected a character'):
        encode_char(Serializer.build_bytes_serializer(), value, endian=Endian.LITTLE)


@pytest.mark.parametrize('data', ['00d80000', '00001100', 'ffffffff'])
def test_char_invalid_code_point(data: str) -> None:
    with pytest.raises(MessageError, match='expected a character'):
        decode_char(_reader(data), endian=Endian.LITTLE)


def test_length() -> None:
    assert _written(lambda se: encode_length(se, 0, endian=Endian.LITTLE)) == '00000000'
    assert _written(lambda se: encode_length(se, MAX_LENGTH, endian=Endian.BIG)) == 'ffffffff'
    assert decode_length(_reader('0a000000'), endian=Endian.LITTLE) == 10
    with pytest.raises(TooManyItemsError):
        encode_length(Serializer.build_bytes_serializer(), MAX_LENGTH + 1, endian=Endian.LITTLE)


def test_negative_length_is_rejected() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(MessageError, match='expected a non-negative length'):
        encode_length(se, -1, endian=Endian.LITTLE)
    assert se.cur_pos() == 0


def test_bytes() -> None:
    for data in (b'abc', bytearray(b'abc'), memoryview(b'abc')):
        assert _written(lambda se: encode_bytes(se, data, endian=Endian.LITTLE)) == '03000000616263'
    assert _written(lambda se: encode_bytes(se, b'', endian=Endian.BIG)) == '00000000'
    assert decode_bytes(_reader('0000000161'), endian=Endian.BIG) == b'a'
    with pytest.raises(MessageError, match='invalid type'):
        encode_bytes(Serializer.build_bytes_serializer(), 'abc', endian=Endian.LITTLE)  # type: ignore[arg-type]


def test_bytes_short_read() -> None:
    with pytest.raises(OutOfDataError):
        decode_bytes(_reader('0500000061'), endian=Endian.LITTLE)


def test_utf8() -> None:
    assert _written(lambda se: encode_utf8(se, 'foo', endian=Endian.LITTLE)) == '03000000666f6f'
    assert _written(lambda se: encode_utf8(se, 'ção', endian=Endian.BIG)) == '00000005c3a7c3a36f'
    assert decode_utf8(_reader('00000005c3a7c3a36f'), endian=Endian.BIG) == 'ção'


def test_utf8_invalid() -> None:
    with pytest.raises(MessageError, match='expected a valid utf-8 string'):
        decode_utf8(_reader('02000000c328'), endian=Endian.LITTLE)
    with pytest.raises(MessageError, match='expected a valid unicode string'):
        encode_utf8(Serializer.build_bytes_serializer(), '\udc80', endian=Endian.LITTLE)
    with pytest.raises(MessageError, match='invalid type'):
        encode_utf8(Serializer.build_bytes_serializer(), b'foo', endian=Endian.LITTLE)  # type: ignore[arg-type]
