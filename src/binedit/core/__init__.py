"""
Core package holding the mutable state of an edit session.

This package implements the ByteBuffer byte store, the HistoryStack that
snapshots it for undo/redo, and the SelectionModel tracking the cursor,
selected range and clipboard.
"""

from .buffer import ByteBuffer
from .history import HistoryStack
from .selection import SelectionModel
from .errors import (
    BinEditError,
    OutOfRangeError,
    InvalidByteValueError,
    EmptyPatternError,
    InvalidHexPatternError,
    NotFoundError,
    NothingToUndoError,
    NothingToRedoError
)

__all__ = [
    'ByteBuffer',
    'HistoryStack',
    'SelectionModel',
    'BinEditError',
    'OutOfRangeError',
    'InvalidByteValueError',
    'EmptyPatternError',
    'InvalidHexPatternError',
    'NotFoundError',
    'NothingToUndoError',
    'NothingToRedoError'
]
