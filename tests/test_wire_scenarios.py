from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple

import pytest

from binserde import BinaryError, Endian, MessageError, TooManyItemsError, from_bytes, to_bytes
from binserde.serialization import OutOfDataError
from binserde.shapes import make_shape
from binserde.types import char, u8, u16, u32


@dataclass
class Point:
    x: u32
    y: u32


@dataclass
class Unit:
    pass


@dataclass
class Move:
    x: u8
    y: u8


class Pair(NamedTuple):
    a: u8
    b: u16


class _HugeList(list):
    """A list that claims to hold more items than a u32 can count."""

    def __len__(self) -> int:
        return 2**32

    def __iter__(self) -> Iterator[Any]:
        return iter(())


@pytest.mark.parametrize('type_, value, expected', [
    (bool, True, '01'),
    (bool, False, '00'),
    (u32, 32, '20000000'),
    (str, 'foo', '03000000666f6f'),
    (u8 | None, None, '00'),
    (u8 | None, 1, '0101'),
    (Point, Point(u32(1), u32(2)), '0100000002000000'),
    (Unit, Unit(), ''),
    (None, None, ''),
    (char, 'a', '61000000'),
    (bytes, b'\x00\xff', '0200000000ff'),
    (list[u16], [1, 2], '0200000001000200'),
    (tuple[u8, u16], (1, 2), '010200'),
    (tuple[u8, ...], (1, 2), '020000000102'),
    (Pair, Pair(u8(1), u16(2)), '010200'),
    (dict[str, u8], {'a': 1}, '01000000' '0100000061' '01'),
])
def test_little_endian_layout(type_: Any, value: Any, expected: str) -> None:
    shape = make_shape(type_)
    data = to_bytes(value, shape)
    assert data.hex() == expected
    assert from_bytes(data, shape) == value


def test_struct_layout_big_endian() -> None:
    shape = make_shape(Point)
    data = to_bytes(Point(u32(1), u32(2)), shape, endian=Endian.BIG)
    assert data.hex() == '0000000100000002'
    assert from_bytes(data, shape, endian=Endian.BIG) == Point(u32(1), u32(2))


def test_enum_newtype_variant_layout() -> None:
    # variant index 2 followed by a u32 payload
    shape = make_shape(Unit | Move | u32)
    data = to_bytes(u32(5), shape)
    assert data.hex() == '0200000005000000'
    assert from_bytes(data, shape) == 5


def test_enum_other_variant_layouts() -> None:
    shape = make_shape(Unit | Move | u32)
    assert to_bytes(Unit(), shape).hex() == '00000000'
    assert to_bytes(Move(u8(3), u8(4)), shape).hex() == '010000000304'
    assert from_bytes(bytes.fromhex('010000000304'), shape) == Move(u8(3), u8(4))


def test_unknown_enum_variant() -> None:
    shape = make_shape(Unit | Move | u32)
    with pytest.raises(MessageError, match='variant index 3'):
        from_bytes(bytes.fromhex('03000000'), shape)


def test_option_presence_byte_is_strict() -> None:
    with pytest.raises(MessageError):
        from_bytes(b'\x02', make_shape(u8 | None))


def test_short_read() -> None:
    with pytest.raises(BinaryError) as exc_info:
        from_bytes(b'\x01\x00', make_shape(u32))
    assert isinstance(exc_info.value.cause, OutOfDataError)


def test_length_prefix_larger_than_data() -> None:
    with pytest.raises(BinaryError):
        from_bytes(b'\x05\x00\x00\x00abc', make_shape(str))


def test_too_many_items() -> None:
    with pytest.raises(TooManyItemsError):
        to_bytes(_HugeList(), make_shape(list[u8]))


def test_trailing_bytes_are_ignored() -> None:
    assert from_bytes(b'\x01\xff\xff', make_shape(bool)) is True


def test_invalid_value_is_rejected_before_writing() -> None:
    with pytest.raises(MessageError):
        to_bytes(Point(u32(1), -1), make_shape(Point))
    with pytest.raises(MessageError):
        to_bytes('not a point', make_shape(Point))
