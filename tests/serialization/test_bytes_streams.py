import pytest

from binserde.serialization import Deserializer, OutOfDataError, SerializationError, Serializer, TrailingDataError


def test_serializer_writes_in_order() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_byte(0x01)
    se.write_bytes(b'\x02\x03')
    se.write_struct((4,), '>H')
    assert se.cur_pos() == 5
    assert bytes(se.finalize()) == b'\x01\x02\x03\x00\x04'


def test_serializer_copies_mutable_buffers() -> None:
    data = bytearray(b'ab')
    se = Serializer.build_bytes_serializer()
    se.write_bytes(data)
    data[0] = ord('z')
    assert bytes(se.finalize()) == b'ab'


@pytest.mark.parametrize('value', [-1, 256, 1000])
def test_serializer_rejects_invalid_byte(value: int) -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(SerializationError):
        se.write_byte(value)


def test_deserializer_reads_and_peeks() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02\x03\x04')
    assert de.peek_byte() == 1
    assert de.read_byte() == 1
    assert bytes(de.peek_bytes(2)) == b'\x02\x03'
    assert bytes(de.read_bytes(2)) == b'\x02\x03'
    assert not de.is_empty()
    assert bytes(de.read_all()) == b'\x04'
    assert de.is_empty()
    de.finalize()


def test_deserializer_read_struct() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x2a\x2a\x00')
    assert de.peek_struct('>I') == (42,)
    assert de.read_struct('>I') == (42,)
    assert de.read_struct('<H') == (42,)
    de.finalize()


def test_deserializer_short_read_consumes_nothing() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    with pytest.raises(OutOfDataError, match='wanted 3 but only 2 left'):
        de.read_bytes(3)
    assert bytes(de.read_bytes(5, exact=False)) == b'\x01\x02'
    with pytest.raises(OutOfDataError):
        de.read_byte()


def test_deserializer_rejects_negative_size() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01')
    with pytest.raises(SerializationError):
        de.peek_bytes(-1)


def test_deserializer_finalize_with_trailing_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01\x02')
    de.read_byte()
    with pytest.raises(TrailingDataError, match='1 bytes of trailing data'):
        de.finalize()


def test_deserializer_accepts_any_buffer() -> None:
    for data in (b'ab', bytearray(b'ab'), memoryview(b'ab')):
        de = Deserializer.build_bytes_deserializer(data)
        assert bytes(de.read_all()) == b'ab'


def test_serializer_cannot_be_used_after_finalize() -> None:
    se = Serializer.build_bytes_serializer()
    se.write_byte(1)
    assert bytes(se.finalize()) == b'\x01'
    with pytest.raises(SerializationError, match='already finalized'):
        se.write_byte(2)


def test_deserializer_views_share_the_data() -> None:
    de = Deserializer.build_bytes_deserializer(b'abc')
    view = de.read_bytes(2)
    assert isinstance(view, memoryview)
    assert view.tobytes() == b'ab'
    assert bytes(de.peek_bytes(5, exact=False)) == b'c'
