"""
Exceptions raised by the edit engine.

Every error is raised before any state changes, so a failed call leaves the
buffer, history and selection exactly as they were.
"""


class BinEditError(Exception):
    """Base class for all edit engine errors."""


class OutOfRangeError(BinEditError, IndexError):
    """An offset or range lies outside the buffer."""

    def __init__(self, offset: int, length: int, what: str = "Offset") -> None:
        self.offset = offset
        self.length = length
        super().__init__(f"{what} {offset} out of range for buffer of {length} bytes")


class InvalidByteValueError(BinEditError, ValueError):
    """A byte value outside 0..255 was supplied."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Byte value must be between 0 and 255, got {value}")


class EmptyPatternError(BinEditError, ValueError):
    """A search was requested with an empty pattern."""

    def __init__(self) -> None:
        super().__init__("Search pattern is empty")


class InvalidHexPatternError(BinEditError, ValueError):
    """A hex search pattern has an odd digit count or a non-hex character."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid hex pattern {pattern!r}: {reason}")


class NotFoundError(BinEditError, LookupError):
    """A directional search ran out of buffer without a match."""


class NothingToUndoError(BinEditError):
    """Undo was requested with an empty undo stack."""

    def __init__(self) -> None:
        super().__init__("Nothing to undo")


class NothingToRedoError(BinEditError):
    """Redo was requested with an empty redo stack."""

    def __init__(self) -> None:
        super().__init__("Nothing to redo")
