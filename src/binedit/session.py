"""
Edit session tying the buffer, history, selection and queries together.

A presentation layer holds one EditSession and calls it for every request.
Mutations are recorded in the history before they touch the buffer; queries
read the current buffer state. A session is not thread-safe: a multi-threaded
host must guard the whole session with one lock.
"""

import logging
from typing import List, Optional, Union

from .config import EXPORT_PREFIX, EditorConfig
from .core.buffer import ByteBuffer
from .core.errors import InvalidByteValueError, OutOfRangeError
from .core.history import HistoryStack
from .core.selection import NO_OFFSET, SelectionModel
from .utils.analysis import AnalysisResult, BlockEntropies, analyze
from .utils.hex_utils import filter_hex_digits, text_to_bytes
from .utils.inspector import InspectionResult, inspect
from .utils.search import (
    DIRECTION_ALL,
    DIRECTION_NEXT,
    DIRECTION_PREV,
    MODE_HEX,
    Pattern,
    SearchEngine,
    SearchResult
)

logger = logging.getLogger(__name__)


class EditSession:
    """Owns one buffer with its undo history, cursor, selection and clipboard."""

    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        self.config = config or EditorConfig()
        self.buffer = ByteBuffer()
        self.history = HistoryStack(self.buffer, self.config.undo_depth)
        self.selection = SelectionModel()
        self.search_engine = SearchEngine(self.buffer)

    # Buffer lifecycle

    def load(self, data: bytes, name: Optional[str] = None) -> None:
        """Replace the buffer wholesale and forget history and selection."""

        self.buffer.load(data, name)
        self.history.reset()
        self.selection.reset()
        logger.debug("Session loaded %d bytes", len(self.buffer))

    def new_empty(self) -> None:
        self.load(b'')

    @property
    def modified(self) -> bool:
        return self.buffer.modified

    def length(self) -> int:
        return len(self.buffer)

    def get_byte(self, offset: int) -> int:
        return self.buffer.get_byte(offset)

    def slice(self, start: int, end: int) -> bytes:
        return self.buffer.slice(start, end)

    def export(self) -> bytes:
        """Get the full buffer content for saving."""

        return self.buffer.to_bytes()

    def export_name(self) -> str:
        """Get the file name a save should use."""

        return f"{EXPORT_PREFIX}{self.buffer.name or 'untitled.bin'}"

    # Mutations

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < len(self.buffer):
            raise OutOfRangeError(offset, len(self.buffer))

    def set_byte(self, offset: int, value: int) -> None:
        """Replace one byte as a single undoable step."""

        if not 0 <= value <= 255:
            raise InvalidByteValueError(value)
        self._check_offset(offset)

        self.history.begin_mutation()
        self.buffer.set_byte(offset, value)

    def enter_hex(self, offset: int, text: str) -> Optional[int]:
        """
        Handle text typed into a hex cell.

        Non-hex characters are dropped. The byte is only written once exactly
        two hex digits remain.

        Args:
            offset (int): Offset of the edited cell
            text (str): Raw cell text

        Returns:
            Optional[int]: The committed byte value, None if nothing was written
        """

        self._check_offset(offset)

        digits = filter_hex_digits(text)
        if len(digits) != 2:
            return None

        value = int(digits, 16)
        self.set_byte(offset, value)
        return value

    def write(self, offset: int, data: bytes) -> int:
        """
        Overwrite bytes starting at offset as a single undoable step.

        The whole range is checked before anything changes; data running
        past the end of the buffer is rejected rather than truncated.

        Returns:
            int: Number of bytes written
        """

        self._check_offset(offset)
        if not data:
            return 0

        last = offset + len(data) - 1
        if last >= len(self.buffer):
            raise OutOfRangeError(last, len(self.buffer), "Write end")

        self.history.begin_mutation()
        return self.buffer.write(offset, data)

    def type_text(self, offset: int, text: str) -> int:
        """
        Handle characters typed into the ASCII column.

        Each character becomes one byte, its code point masked to 8 bits.
        Only the typed characters are overwritten; the rest of the row keeps
        its bytes instead of being padded with spaces. The write is truncated
        at the end of the buffer.

        Returns:
            int: Number of bytes written
        """

        self._check_offset(offset)
        if not text:
            return 0

        data = text_to_bytes(text)
        self.history.begin_mutation()
        return self.buffer.write(offset, data)

    def undo(self) -> None:
        self.history.undo()
        self.selection.clear()

    def redo(self) -> None:
        self.history.redo()
        self.selection.clear()

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    # Cursor, selection and clipboard

    @property
    def active_offset(self) -> int:
        return self.selection.active_offset

    def set_active(self, offset: int, extend: bool = False) -> None:
        """Move the cursor; extend=True grows the selection instead of clearing it."""

        if offset == NO_OFFSET and not extend:
            self.selection.set_active(NO_OFFSET)
            return

        self._check_offset(offset)
        self.selection.set_active(offset, extend)

    def move(self, direction: str, extend: bool = False) -> int:
        """
        Move the cursor one byte or one row.

        A move that would leave the buffer is ignored.

        Args:
            direction (str): One of 'left', 'right', 'up', 'down'
            extend (bool): Grow the selection instead of clearing it

        Returns:
            int: The active offset after the move
        """

        steps = {
            'left': -1,
            'right': 1,
            'up': -self.config.bytes_per_row,
            'down': self.config.bytes_per_row,
        }
        if direction not in steps:
            raise ValueError(f"Unknown direction: {direction!r}")

        current = self.selection.active_offset
        if current < 0:
            return current

        target = current + steps[direction]
        if 0 <= target < len(self.buffer):
            self.selection.set_active(target, extend)

        return self.selection.active_offset

    def select_range(self, start: int, end: int) -> None:
        self._check_offset(start)
        self._check_offset(end)
        self.selection.select_range(start, end)

    def clear_selection(self) -> None:
        self.selection.clear()

    def copy(self) -> bytes:
        return self.selection.copy(self.buffer)

    def paste(self) -> int:
        return self.selection.paste(self.buffer, self.history)

    # Queries

    def search(self, pattern: Union[str, Pattern], mode: str = MODE_HEX,
               case_sensitive: bool = True, direction: str = DIRECTION_NEXT) -> List[SearchResult]:
        """
        Search the buffer relative to the cursor.

        'next' starts after the active offset (or at the start when there is
        none), 'prev' before it (or at the end). A directional hit selects the
        match and moves the cursor to its first byte.

        Args:
            pattern: Pattern or user text parsed according to mode
            mode (str): 'hex' or 'text', ignored for Pattern objects
            case_sensitive (bool): Only used for text patterns
            direction (str): 'next', 'prev' or 'all'

        Returns:
            List[SearchResult]: The hit for 'next'/'prev', all hits for 'all'
        """

        if not isinstance(pattern, Pattern):
            pattern = Pattern.parse(pattern, mode, case_sensitive)

        active = self.selection.active_offset
        if direction == DIRECTION_PREV:
            from_offset = active if active >= 0 else len(self.buffer)
        else:
            from_offset = active

        results = self.search_engine.search(pattern, direction, from_offset)

        if direction != DIRECTION_ALL:
            hit = results[0]
            self.selection.select_range(hit.position, hit.end)
            self.selection.active_offset = hit.position

        return results

    def analyze(self, start: int = 0, end: Optional[int] = None) -> AnalysisResult:
        return analyze(self.buffer, start, end)

    def block_entropies(self, block_size: Optional[int] = None) -> BlockEntropies:
        return BlockEntropies(
            self.buffer, self.config.block_size if block_size is None else block_size
        )

    def inspect(self, offset: Optional[int] = None) -> InspectionResult:
        """Decode the bytes at offset, defaulting to the cursor."""

        if offset is None:
            offset = self.selection.active_offset

        return inspect(self.buffer, offset)
