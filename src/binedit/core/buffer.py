"""
Buffer module holding the raw bytes of an edit session.
"""

import logging
from typing import Optional

from .errors import InvalidByteValueError, OutOfRangeError

logger = logging.getLogger(__name__)


class ByteBuffer:
    """Fixed-length mutable byte store.

    The length only changes when the contents are replaced wholesale via
    load(), new_empty() or restore(); edits never grow or shrink it.
    """

    def __init__(self, initial_data: bytes = b'') -> None:
        self.data = bytearray(initial_data)
        self.modified = False
        self.name: Optional[str] = None

    def __len__(self) -> int:
        return len(self.data)

    def length(self) -> int:
        """Get the size of the buffer in bytes."""

        return len(self.data)

    def load(self, data: bytes, name: Optional[str] = None) -> None:
        """Replace the contents wholesale."""

        self.data = bytearray(data)
        self.modified = False
        self.name = name
        logger.debug("Loaded %d bytes%s", len(self.data), f" from {name}" if name else "")

    def new_empty(self) -> None:
        """Reset to an empty, unnamed buffer."""

        self.load(b'')

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < len(self.data):
            raise OutOfRangeError(offset, len(self.data))

    def get_byte(self, offset: int) -> int:
        """Get the byte at the specified offset."""

        self._check_offset(offset)
        return self.data[offset]

    def set_byte(self, offset: int, value: int) -> None:
        """Replace the byte at the specified offset."""

        if not 0 <= value <= 255:
            raise InvalidByteValueError(value)

        self._check_offset(offset)

        self.data[offset] = value
        self.modified = True

    def slice(self, start: int, end: int) -> bytes:
        """
        Copy the bytes in [start, end).

        Args:
            start (int): First offset, within 0..length
            end (int): End offset (exclusive), within 0..length

        Returns:
            bytes: The copied range, empty when end <= start
        """

        size = len(self.data)
        if not 0 <= start <= size:
            raise OutOfRangeError(start, size, "Range start")
        if not 0 <= end <= size:
            raise OutOfRangeError(end, size, "Range end")

        if end <= start:
            return b''

        return bytes(self.data[start:end])

    def write(self, offset: int, data: bytes) -> int:
        """
        Overwrite bytes starting at offset, truncated at the buffer end.

        Args:
            offset (int): First offset to write, within 0..length-1
            data (bytes): Bytes to copy in

        Returns:
            int: Number of bytes actually written
        """

        self._check_offset(offset)

        count = min(len(data), len(self.data) - offset)
        if count < len(data):
            logger.debug("Write at %d truncated from %d to %d bytes", offset, len(data), count)

        if count:
            self.data[offset:offset + count] = data[:count]
            self.modified = True

        return count

    def snapshot(self) -> bytes:
        """Get an immutable copy of the current contents."""

        return bytes(self.data)

    def restore(self, snapshot: bytes, modified: bool) -> None:
        """Install a previously taken snapshot, keeping the buffer name."""

        self.data = bytearray(snapshot)
        self.modified = modified

    def to_bytes(self) -> bytes:
        """Export the full current content."""

        return bytes(self.data)
