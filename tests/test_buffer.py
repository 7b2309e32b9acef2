"""Tests for ByteBuffer."""

import pytest

from binedit.core import ByteBuffer, InvalidByteValueError, OutOfRangeError


def test_load_replaces_contents(buffer):
    buffer.set_byte(0, 0x7A)
    buffer.load(b'\x01\x02', name='two.bin')

    assert buffer.length() == 2
    assert len(buffer) == 2
    assert buffer.name == 'two.bin'
    assert not buffer.modified


def test_load_empty():
    buf = ByteBuffer(b'xyz')
    buf.new_empty()

    assert buf.length() == 0
    assert buf.to_bytes() == b''
    assert buf.name is None


def test_get_and_set_roundtrip():
    buf = ByteBuffer(bytes(4))
    for offset in range(4):
        for value in (0, 1, 0x7F, 0x80, 0xFF):
            buf.set_byte(offset, value)
            assert buf.get_byte(offset) == value

    assert buf.modified


@pytest.mark.parametrize('offset', [-1, 3, 100])
def test_get_byte_out_of_range(buffer, offset):
    with pytest.raises(OutOfRangeError):
        buffer.get_byte(offset)


def test_set_byte_out_of_range_leaves_buffer_untouched(buffer):
    with pytest.raises(OutOfRangeError):
        buffer.set_byte(3, 0)

    assert buffer.to_bytes() == b'ABC'
    assert not buffer.modified


@pytest.mark.parametrize('value', [-1, 256, 1000])
def test_set_byte_rejects_invalid_value(buffer, value):
    with pytest.raises(InvalidByteValueError):
        buffer.set_byte(0, value)

    assert buffer.to_bytes() == b'ABC'


def test_invalid_value_is_also_value_error(buffer):
    with pytest.raises(ValueError):
        buffer.set_byte(0, 300)


def test_slice(buffer):
    assert buffer.slice(0, 3) == b'ABC'
    assert buffer.slice(1, 2) == b'B'
    assert buffer.slice(3, 3) == b''
    assert buffer.slice(2, 1) == b''


@pytest.mark.parametrize('start,end', [(-1, 2), (0, 4), (4, 4)])
def test_slice_out_of_range(buffer, start, end):
    with pytest.raises(OutOfRangeError):
        buffer.slice(start, end)


def test_write_truncates_at_end(buffer):
    written = buffer.write(1, b'xyzw')

    assert written == 2
    assert buffer.to_bytes() == b'Axy'
    assert buffer.length() == 3


def test_snapshot_is_independent(buffer):
    snap = buffer.snapshot()
    buffer.set_byte(0, 0)

    assert snap == b'ABC'

    buffer.restore(snap, modified=False)
    assert buffer.to_bytes() == b'ABC'
    assert not buffer.modified
