"""
Data inspector decoding the bytes at an offset as little-endian numbers.
"""

import math
import struct
from dataclasses import asdict, dataclass
from typing import Dict, Final, Union

from ..core.buffer import ByteBuffer
from ..core.errors import OutOfRangeError
from .hex_utils import ascii_char

UNAVAILABLE: Final[str] = 'unavailable'
INVALID: Final[str] = 'invalid'

Field = Union[int, float, str]


@dataclass(frozen=True)
class InspectionResult:
    """Interpretations of the bytes starting at one offset.

    Fields that would read past the end of the buffer hold UNAVAILABLE; a
    float32 whose bit pattern is NaN or infinite holds INVALID.
    """

    offset: int
    byte: int
    int16: Field
    int32: Field
    float32: Field

    @property
    def char(self) -> str:
        return ascii_char(self.byte)

    def as_dict(self) -> Dict[str, Field]:
        return asdict(self)

    def format_value(self, name: str) -> str:
        """Get the display text of one field."""

        value = getattr(self, name)
        if isinstance(value, str):
            return value
        if isinstance(value, float):
            return f"{value:.7g}"

        return str(value)


def inspect(source: Union[ByteBuffer, bytes, bytearray], offset: int) -> InspectionResult:
    """
    Decode the bytes at offset.

    Args:
        source: Buffer or bytes to read from
        offset (int): Offset of the first byte, within 0..length-1

    Returns:
        InspectionResult: byte, int16, int32 and float32 interpretations
    """

    data = bytes(source.data if isinstance(source, ByteBuffer) else source)
    size = len(data)
    if not 0 <= offset < size:
        raise OutOfRangeError(offset, size)

    int16: Field = UNAVAILABLE
    if offset + 1 < size:
        int16 = struct.unpack_from('<h', data, offset)[0]

    int32: Field = UNAVAILABLE
    float32: Field = UNAVAILABLE
    if offset + 3 < size:
        int32 = struct.unpack_from('<i', data, offset)[0]
        value = struct.unpack_from('<f', data, offset)[0]
        float32 = value if math.isfinite(value) else INVALID

    return InspectionResult(
        offset=offset,
        byte=data[offset],
        int16=int16,
        int32=int32,
        float32=float32,
    )
