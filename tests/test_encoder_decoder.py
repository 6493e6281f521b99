from collections.abc import Iterable, Iterator
from typing import Any, Callable

import pytest

from binserde.decoder import Decoder
from binserde.encoder import Encoder
from binserde.endian import Endian
from binserde.error import BinaryError, MessageError, TooManyItemsError
from binserde.serialization import Deserializer, OutOfDataError, Serializer
from binserde.visitor import ValueDecoder


def _encode(write: Callable[[Encoder], None], endian: Endian = Endian.LITTLE) -> bytes:
    se = Serializer.build_bytes_serializer()
    write(Encoder(se, endian))
    return bytes(se.finalize())


def _decoder(data: bytes, endian: Endian = Endian.LITTLE) -> Decoder:
    return Decoder(Deserializer.build_bytes_deserializer(data), endian)


class _HugeCollection:
    """Reports a length without holding any item."""

    def __init__(self, length: int) -> None:
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return iter(())


@pytest.mark.parametrize('endian', [Endian.LITTLE, Endian.BIG])
@pytest.mark.parametrize('variant, value, size', [
    ('i8', -128, 1),
    ('i16', -32768, 2),
    ('i32', 2**31 - 1, 4),
    ('i64', -2**63, 8),
    ('isize', -5, 8),
    ('u8', 255, 1),
    ('u16', 65535, 2),
    ('u32', 2**32 - 1, 4),
    ('u64', 2**64 - 1, 8),
    ('usize', 7, 8),
    ('f32', 0.25, 4),
    ('f64', -1.5, 8),
    ('char', 'λ', 4),
])
def test_fixed_size_round_trip(variant: str, value: Any, size: int, endian: Endian) -> None:
    data = _encode(lambda encoder: getattr(encoder, f'encode_{variant}')(value), endian)
    assert len(data) == size
    decoder = _decoder(data, endian)
    assert getattr(decoder, f'decode_{variant}')() == value
    decoder.deserializer.finalize()


def test_endianness_of_multi_byte_numbers() -> None:
    assert _encode(lambda encoder: encoder.encode_u16(1), Endian.LITTLE) == b'\x01\x00'
    assert _encode(lambda encoder: encoder.encode_u16(1), Endian.BIG) == b'\x00\x01'
    assert _encode(lambda encoder: encoder.encode_str('a'), Endian.BIG) == b'\x00\x00\x00\x01a'


def test_unit_and_unit_struct_are_empty() -> None:
    def write(encoder: Encoder) -> None:
        encoder.encode_unit()
        encoder.encode_unit_struct('Empty')
    assert _encode(write) == b''
    decoder = _decoder(b'')
    assert decoder.decode_unit() is None
    assert decoder.decode_unit_struct('Empty') is None


def test_option() -> None:
    assert _encode(lambda encoder: encoder.encode_none()) == b'\x00'
    assert _encode(lambda encoder: encoder.encode_some(7, Encoder.encode_u16)) == b'\x01\x07\x00'
    assert _decoder(b'\x00').decode_option(Decoder.decode_u16) is None
    assert _decoder(b'\x01\x07\x00').decode_option(Decoder.decode_u16) == 7


def test_option_presence_byte_is_strict() -> None:
    with pytest.raises(MessageError, match='expected an option presence byte'):
        _decoder(b'\x02\x07\x00').decode_option(Decoder.decode_u16)


def test_bool_is_strict() -> None:
    with pytest.raises(MessageError, match='expected a boolean'):
        _decoder(b'\x02').decode_bool()


def test_seq() -> None:
    data = _encode(lambda encoder: encoder.encode_seq([1, 2, 3], Encoder.encode_u8))
    assert data == b'\x03\x00\x00\x00\x01\x02\x03'
    assert _decoder(data).decode_seq(Decoder.decode_u8, list) == [1, 2, 3]
    assert _decoder(data).decode_seq(Decoder.decode_u8, frozenset) == frozenset({1, 2, 3})


def test_seq_from_iterator() -> None:
    data = _encode(lambda encoder: encoder.encode_seq((i * 2 for i in range(3)), Encoder.encode_u8))
    assert data == b'\x03\x00\x00\x00\x00\x02\x04'


def test_nested_seq() -> None:
    def encode_row(encoder: Any, row: list[int]) -> None:
        encoder.encode_seq(row, Encoder.encode_u8)

    def decode_row(decoder: ValueDecoder) -> list[int]:
        return decoder.decode_seq(Decoder.decode_u8, list)

    data = _encode(lambda encoder: encoder.encode_seq([[1], [], [2, 3]], encode_row))
    assert data.hex() == '03000000' '0100000001' '00000000' '020000000203'
    assert _decoder(data).decode_seq(decode_row, list) == [[1], [], [2, 3]]


def test_map() -> None:
    data = _encode(lambda encoder: encoder.encode_map({'a': 1, 'b': 2}, Encoder.encode_str, Encoder.encode_u8))
    assert data.hex() == '02000000' '0100000061' '01' '0100000062' '02'
    assert _decoder(data).decode_map(Decoder.decode_str, Decoder.decode_u8, dict) == {'a': 1, 'b': 2}
    pairs = _encode(lambda encoder: encoder.encode_map([('a', 1), ('b', 2)], Encoder.encode_str, Encoder.encode_u8))
    assert pairs == data


def test_tuple_has_no_prefix() -> None:
    data = _encode(lambda encoder: encoder.encode_tuple((1, 'x'), [Encoder.encode_u8, Encoder.encode_char]))
    assert data == b'\x01x\x00\x00\x00'
    assert _decoder(data).decode_tuple([Decoder.decode_u8, Decoder.decode_char]) == (1, 'x')
    assert _decoder(data).decode_tuple_struct('Pair', [Decoder.decode_u8, Decoder.decode_char]) == (1, 'x')


def test_tuple_arity_mismatch() -> None:
    with pytest.raises(MessageError, match='expected a tuple of length 2'):
        _encode(lambda encoder: encoder.encode_tuple((1, 2, 3), [Encoder.encode_u8, Encoder.encode_u8]))


def test_newtype_struct_is_transparent() -> None:
    assert _encode(lambda encoder: encoder.encode_newtype_struct('Meters', 5, Encoder.encode_u32)) == \
        _encode(lambda encoder: encoder.encode_u32(5))
    assert _decoder(b'\x05\x00\x00\x00').decode_newtype_struct('Meters', Decoder.decode_u32) == 5


def test_struct() -> None:
    data = _encode(lambda encoder: encoder.encode_struct('Point', [
        ('x', -1, Encoder.encode_i16),
        ('name', 'p', Encoder.encode_str),
    ]), Endian.BIG)
    assert data == b'\xff\xff\x00\x00\x00\x01p'
    decoded = _decoder(data, Endian.BIG).decode_struct('Point', [('x', Decoder.decode_i16), ('name', Decoder.decode_str)])
    assert decoded == {'x': -1, 'name': 'p'}


def test_enum_variants() -> None:
    def write(encoder: Encoder) -> None:
        encoder.encode_unit_variant('E', 0, 'A')
        encoder.encode_newtype_variant('E', 1, 'B', 9, Encoder.encode_u8)
        encoder.encode_tuple_variant('E', 2, 'C', (1, 2), [Encoder.encode_u8, Encoder.encode_u8])
        encoder.encode_struct_variant('E', 3, 'D', [('flag', True, Encoder.encode_bool)])

    data = _encode(write, Endian.BIG)
    assert data.hex() == '00000000' '0000000109' '000000020102' '0000000301'

    def select(variant_index: int, decoder: ValueDecoder) -> Any:
        match variant_index:
            case 0:
                return decoder.decode_unit_variant()
            case 1:
                return decoder.decode_newtype_variant(Decoder.decode_u8)
            case 2:
                return decoder.decode_tuple_variant([Decoder.decode_u8, Decoder.decode_u8])
            case 3:
                return decoder.decode_struct_variant([('flag', Decoder.decode_bool)])
        raise MessageError.custom(f'unknown variant {variant_index}')

    decoder = _decoder(data, Endian.BIG)
    assert [decoder.decode_enum('E', select) for _ in range(4)] == [None, 9, (1, 2), {'flag': True}]
    decoder.deserializer.finalize()


def test_enum_unknown_index_is_rejected_by_selector() -> None:
    def select(variant_index: int, decoder: ValueDecoder) -> None:
        raise MessageError.custom(f'unknown variant {variant_index}')

    with pytest.raises(MessageError, match='unknown variant 7'):
        _decoder(b'\x07\x00\x00\x00').decode_enum('E', select)


def test_invalid_variant_index() -> None:
    with pytest.raises(MessageError):
        _encode(lambda encoder: encoder.encode_unit_variant('E', -1, 'A'))
    with pytest.raises(MessageError):
        _encode(lambda encoder: encoder.encode_unit_variant('E', 2**32, 'A'))


def test_length_limit() -> None:
    ok = _encode(lambda encoder: encoder.encode_seq(_HugeCollection(2**32 - 1), Encoder.encode_u8))
    assert ok == b'\xff\xff\xff\xff'
    with pytest.raises(TooManyItemsError, match='limit is 2\\^32'):
        _encode(lambda encoder: encoder.encode_seq(_HugeCollection(2**32), Encoder.encode_u8))
    with pytest.raises(TooManyItemsError):
        _encode(lambda encoder: encoder.encode_map(_HugeCollection(2**32), Encoder.encode_u8, Encoder.encode_u8))


def test_short_read_is_binary_error() -> None:
    with pytest.raises(BinaryError) as exc_info:
        _decoder(b'\x01\x00').decode_u32()
    assert isinstance(exc_info.value.cause, OutOfDataError)


def test_truncated_seq_is_binary_error() -> None:
    with pytest.raises(BinaryError):
        _decoder(b'\x03\x00\x00\x00\x01\x02').decode_seq(Decoder.decode_u8, list)


def test_invalid_utf8_is_message_error() -> None:
    with pytest.raises(MessageError):
        _decoder(b'\x01\x00\x00\x00\xff').decode_str()


def test_raw_access_for_manual_codecs() -> None:
    se = Serializer.build_bytes_serializer()
    encoder = Encoder(se, Endian.BIG)
    encoder.serializer.write_bytes(b'MAGIC')
    encoder.encode_u8(1)
    assert bytes(se.finalize()) == b'MAGIC\x01'

    decoder = _decoder(b'MA', Endian.BIG)
    with pytest.raises(BinaryError):
        decoder.deserializer.read_bytes(5)


def test_values_are_copied_from_any_iterable() -> None:
    def gen() -> Iterable[tuple[str, int]]:
        yield ('k', 1)

    data = _encode(lambda encoder: encoder.encode_map(gen(), Encoder.encode_str, Encoder.encode_u8))
    assert data == b'\x01\x00\x00\x00\x01\x00\x00\x00k\x01'
