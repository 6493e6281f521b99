from dataclasses import dataclass, field

import pytest

from binserde import BinaryError, Decoder, Encoder, Endian, MessageError, decode, encode
from binserde.shapes import make_shape

MAGIC = b'TODO'


@dataclass
class Todo:
    name: str = ''
    note: str | None = None

    def encode(self, encoder: Encoder) -> None:
        encoder.encode_str(self.name)
        if self.note is None:
            encoder.encode_none()
        else:
            encoder.encode_some(self.note, Encoder.encode_str)

    def decode(self, decoder: Decoder) -> None:
        self.name = decoder.decode_str()
        self.note = decoder.decode_option(Decoder.decode_str)


@dataclass
class TodoList:
    todos: list[Todo] = field(default_factory=list)

    def encode(self, encoder: Encoder) -> None:
        encoder.serializer.write_bytes(MAGIC)
        encoder.encode_seq(self.todos, lambda encoder, todo: todo.encode(encoder))

    def decode(self, decoder: Decoder) -> None:
        magic = bytes(decoder.deserializer.read_bytes(len(MAGIC)))
        if magic != MAGIC:
            raise MessageError.invalid_value(f'magic {magic!r}', f'{MAGIC!r}')

        def decode_todo(decoder: Decoder) -> Todo:
            todo = Todo()
            todo.decode(decoder)
            return todo

        self.todos = decoder.decode_seq(decode_todo, list)


def test_round_trip() -> None:
    todos = TodoList([Todo('buy milk'), Todo('write tests', 'before friday')])
    data = encode(todos)
    assert data.startswith(MAGIC)
    assert decode(TodoList, data) == todos


def test_manual_codec_is_big_endian_by_default() -> None:
    data = encode(TodoList([Todo('a')]))
    assert data.hex() == MAGIC.hex() + '00000001' '0000000161' '00'


def test_explicit_endian() -> None:
    todos = TodoList([Todo('a')])
    data = encode(todos, endian=Endian.LITTLE)
    assert data.hex() == MAGIC.hex() + '01000000' '0100000061' '00'
    assert decode(TodoList, data, endian=Endian.LITTLE) == todos


def test_bad_magic() -> None:
    with pytest.raises(MessageError, match='magic'):
        decode(TodoList, b'DONE\x00\x00\x00\x00')


def test_truncated() -> None:
    data = encode(TodoList([Todo('buy milk')]))
    with pytest.raises(BinaryError):
        decode(TodoList, data[:-3])


def test_empty_list() -> None:
    assert decode(TodoList, encode(TodoList())) == TodoList()


@dataclass
class Entry:
    name: str
    note: str


@dataclass
class EntryList:
    """Writes its header by hand and leaves the records to a shape."""

    entries: list[Entry] = field(default_factory=list)

    _entries_shape = make_shape(list[Entry])

    def encode(self, encoder: Encoder) -> None:
        encoder.serializer.write_bytes(MAGIC)
        self._entries_shape.serialize(encoder, self.entries)

    def decode(self, decoder: Decoder) -> None:
        magic = bytes(decoder.deserializer.read_bytes(len(MAGIC)))
        if magic != MAGIC:
            raise MessageError.invalid_value(f'magic {magic!r}', f'{MAGIC!r}')
        self.entries = self._entries_shape.deserialize(decoder)


def test_manual_header_with_shape_records() -> None:
    entries = EntryList([Entry('foo', 'bar')])
    data = encode(entries)
    assert data.hex() == '544f444f' '00000001' '00000003666f6f' '00000003626172'
    assert decode(EntryList, data) == entries


def test_manual_header_with_shape_records_little_endian() -> None:
    entries = EntryList([Entry('a', ''), Entry('b', 'c')])
    data = encode(entries, endian=Endian.LITTLE)
    assert data[:8] == MAGIC + b'\x02\x00\x00\x00'
    assert decode(EntryList, data, endian=Endian.LITTLE) == entries
