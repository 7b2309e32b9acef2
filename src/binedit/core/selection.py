"""
Cursor, selection and clipboard state.
"""

import logging
from typing import Optional, Tuple

from .buffer import ByteBuffer
from .history import HistoryStack

logger = logging.getLogger(__name__)

NO_OFFSET = -1


class SelectionModel:
    """Tracks the active offset, an optional selected range and the clipboard.

    Offsets of -1 mean "unset". The selection ends are stored in the order
    they were set and normalized to (min, max) on read.
    """

    def __init__(self) -> None:
        self.active_offset = NO_OFFSET
        self.selection_start = NO_OFFSET
        self.selection_end = NO_OFFSET
        self.clipboard = b''

    def set_active(self, offset: int, extend: bool = False) -> None:
        """Move the cursor, either extending or dropping the selection."""

        if extend:
            self.extend_selection(offset)
        else:
            self.clear()

        self.active_offset = offset

    def extend_selection(self, to_offset: int) -> None:
        """Extend the selection to to_offset, anchoring at the cursor if needed."""

        if self.selection_start < 0:
            anchor = self.active_offset if self.active_offset >= 0 else to_offset
            self.selection_start = anchor

        self.selection_end = to_offset

    def select_range(self, start: int, end: int) -> None:
        self.selection_start = start
        self.selection_end = end

    def normalized_range(self) -> Optional[Tuple[int, int]]:
        """Get the selection as an inclusive (min, max) pair, or None."""

        if self.selection_start < 0 or self.selection_end < 0:
            return None

        return (min(self.selection_start, self.selection_end),
                max(self.selection_start, self.selection_end))

    def has_selection(self) -> bool:
        return self.normalized_range() is not None

    def selection_length(self) -> int:
        selection = self.normalized_range()
        if selection is None:
            return 0

        return selection[1] - selection[0] + 1

    def clear(self) -> None:
        """Drop the selection; the cursor and clipboard are left alone."""

        self.selection_start = NO_OFFSET
        self.selection_end = NO_OFFSET

    def reset(self) -> None:
        """Drop cursor and selection after the buffer was replaced."""

        self.clear()
        self.active_offset = NO_OFFSET

    def copy(self, buffer: ByteBuffer) -> bytes:
        """
        Copy the selection, or the byte under the cursor, to the clipboard.

        Returns:
            bytes: The clipboard contents after the call
        """

        selection = self.normalized_range()
        if selection is not None:
            start, end = selection
            self.clipboard = buffer.slice(start, end + 1)
        elif self.active_offset >= 0:
            self.clipboard = bytes([buffer.get_byte(self.active_offset)])

        return self.clipboard

    def paste(self, buffer: ByteBuffer, history: HistoryStack) -> int:
        """
        Overwrite bytes at the cursor with the clipboard.

        The write is truncated at the end of the buffer, which never grows.

        Returns:
            int: Number of bytes written, 0 when there was nothing to do
        """

        if not self.clipboard or self.active_offset < 0:
            return 0

        if self.active_offset >= len(buffer):
            return 0

        history.begin_mutation()
        written = buffer.write(self.active_offset, self.clipboard)
        logger.debug("Pasted %d of %d bytes at %d", written, len(self.clipboard), self.active_offset)

        return written
