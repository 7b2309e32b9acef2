"""
Text hexdump rows and status line for presentation layers.
"""

from typing import TYPE_CHECKING, List, Optional, Union

from ..config import DEFAULT_BYTES_PER_ROW
from ..core.buffer import ByteBuffer
from ..utils.hex_utils import ascii_char, format_byte, format_offset

if TYPE_CHECKING:
    from ..session import EditSession


def _raw(source: Union[ByteBuffer, bytes, bytearray]) -> bytes:
    return bytes(source.data if isinstance(source, ByteBuffer) else source)


def format_row(data: bytes, offset: int, bytes_per_row: int = DEFAULT_BYTES_PER_ROW) -> str:
    """
    Format one row as ``AAAAAAAA  HH HH ..  |ascii|``.

    Args:
        data (bytes): Whole data the row is taken from
        offset (int): Offset of the first byte of the row
        bytes_per_row (int): Number of byte cells per row

    Returns:
        str: The formatted row, hex cells padded so short rows stay aligned
    """

    row = data[offset:offset + bytes_per_row]
    hex_cells = ' '.join(format_byte(b) for b in row)
    ascii_str = ''.join(ascii_char(b) for b in row)
    hex_width = bytes_per_row * 3 - 1

    return f"{format_offset(offset)}  {hex_cells:<{hex_width}}  |{ascii_str}|"


def hexdump(source: Union[ByteBuffer, bytes, bytearray], bytes_per_row: int = DEFAULT_BYTES_PER_ROW,
            start: int = 0, end: Optional[int] = None) -> List[str]:
    """
    Format [start, end) as hexdump rows.

    Rows are aligned to multiples of bytes_per_row so addresses match a full
    dump of the same data.
    """

    if bytes_per_row <= 0:
        raise ValueError("bytes_per_row must be positive")

    data = _raw(source)
    if end is None or end > len(data):
        end = len(data)

    first = max(start, 0) // bytes_per_row * bytes_per_row
    return [format_row(data[:end], offset, bytes_per_row)
            for offset in range(first, end, bytes_per_row)]


def status_line(session: 'EditSession') -> str:
    """Get the status bar text: file, size, cursor offset and value."""

    buf = session.buffer
    if buf.name is not None:
        parts = [f"File: {buf.name}"]
    else:
        parts = ["No file loaded" if not len(buf) else "File: untitled"]

    parts.append(f"Size: {len(buf)} bytes")

    offset = session.active_offset
    if 0 <= offset < len(buf):
        value = format_byte(buf.get_byte(offset))
        parts.append(f"Offset: {format_offset(offset)}")
        parts.append(f"Value: {value} (0x{value})")
    else:
        parts.append("Offset: -")
        parts.append("Value: -")

    if buf.modified:
        parts.append("[modified]")

    return '  '.join(parts)
