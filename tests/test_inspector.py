"""Tests for the data inspector."""

import struct

import pytest

from binedit.core import ByteBuffer, OutOfRangeError
from binedit.utils.inspector import INVALID, UNAVAILABLE, inspect


def test_zero_bytes():
    result = inspect(ByteBuffer(bytes(4)), 0)

    assert result.byte == 0
    assert result.int16 == 0
    assert result.int32 == 0
    assert result.float32 == 0.0


def test_all_ones_is_minus_one_and_invalid_float():
    result = inspect(b'\xff\xff\xff\xff', 0)

    assert result.byte == 0xFF
    assert result.int16 == -1
    assert result.int32 == -1
    assert result.float32 == INVALID


def test_infinity_is_invalid():
    assert inspect(struct.pack('<f', float('inf')), 0).float32 == INVALID


def test_little_endian_decoding():
    data = struct.pack('<i', -123456) + b'\x00'
    result = inspect(data, 0)

    assert result.int32 == -123456
    assert result.int16 == struct.unpack('<h', data[:2])[0]


def test_float_value():
    result = inspect(struct.pack('<f', 1.5), 0)

    assert result.float32 == 1.5
    assert result.format_value('float32') == '1.5'


def test_unavailable_near_end():
    data = b'\x01\x02\x03\x04'

    assert inspect(data, 1).int32 == UNAVAILABLE
    assert inspect(data, 1).float32 == UNAVAILABLE
    assert inspect(data, 2).int16 == 0x0403
    assert inspect(data, 3).int16 == UNAVAILABLE
    assert inspect(data, 3).byte == 4


def test_out_of_range():
    with pytest.raises(OutOfRangeError):
        inspect(b'ab', 2)
    with pytest.raises(OutOfRangeError):
        inspect(b'', 0)


def test_as_dict_and_char():
    result = inspect(b'A', 0)

    assert result.char == 'A'
    assert result.as_dict() == {
        'offset': 0,
        'byte': 0x41,
        'int16': UNAVAILABLE,
        'int32': UNAVAILABLE,
        'float32': UNAVAILABLE,
    }
    assert result.format_value('int16') == UNAVAILABLE
