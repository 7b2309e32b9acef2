"""
Snapshot based undo/redo history for a ByteBuffer.
"""

import logging
from collections import deque

from ..config import DEFAULT_UNDO_DEPTH
from .buffer import ByteBuffer
from .errors import NothingToRedoError, NothingToUndoError

logger = logging.getLogger(__name__)


class HistoryStack:
    """Keeps whole-buffer snapshots taken before each mutation.

    The undo stack holds at most ``capacity`` snapshots and drops the oldest
    one when full. The redo stack only fills through undo() and is emptied by
    the next begin_mutation().
    """

    def __init__(self, buffer: ByteBuffer, capacity: int = DEFAULT_UNDO_DEPTH) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")

        self.buffer = buffer
        self.capacity = capacity
        self.undo_stack: deque[bytes] = deque(maxlen=capacity)
        self.redo_stack: deque[bytes] = deque()

    @property
    def undo_depth(self) -> int:
        return len(self.undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self.redo_stack)

    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def reset(self) -> None:
        """Forget all history, used when a new buffer is loaded."""

        self.undo_stack.clear()
        self.redo_stack.clear()

    def begin_mutation(self) -> None:
        """Record the current contents before a mutating request."""

        if len(self.undo_stack) == self.capacity:
            logger.debug("Undo stack full, dropping oldest of %d snapshots", self.capacity)

        # deque(maxlen=...) evicts from the left, i.e. the oldest snapshot
        self.undo_stack.append(self.buffer.snapshot())
        self.redo_stack.clear()

    def undo(self) -> None:
        """Restore the most recent snapshot."""

        if not self.undo_stack:
            raise NothingToUndoError()

        self.redo_stack.append(self.buffer.snapshot())
        snapshot = self.undo_stack.pop()
        self.buffer.restore(snapshot, modified=bool(self.undo_stack))

        logger.debug("Undo: %d undo / %d redo snapshots left",
                     len(self.undo_stack), len(self.redo_stack))

    def redo(self) -> None:
        """Re-apply the most recently undone mutation."""

        if not self.redo_stack:
            raise NothingToRedoError()

        self.undo_stack.append(self.buffer.snapshot())
        snapshot = self.redo_stack.pop()
        self.buffer.restore(snapshot, modified=True)

        logger.debug("Redo: %d undo / %d redo snapshots left",
                     len(self.undo_stack), len(self.redo_stack))
