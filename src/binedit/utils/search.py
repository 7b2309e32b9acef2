"""
Byte pattern search over a buffer.
"""

import logging
from dataclasses import dataclass
from typing import Final, List, Optional, Union

from ..core.buffer import ByteBuffer
from ..core.errors import EmptyPatternError, NotFoundError
from .hex_utils import parse_hex_string, text_to_bytes

logger = logging.getLogger(__name__)

MODE_HEX: Final[str] = 'hex'
MODE_TEXT: Final[str] = 'text'
SEARCH_MODES: Final[tuple] = (MODE_HEX, MODE_TEXT)

DIRECTION_NEXT: Final[str] = 'next'
DIRECTION_PREV: Final[str] = 'prev'
DIRECTION_ALL: Final[str] = 'all'
SEARCH_DIRECTIONS: Final[tuple] = (DIRECTION_NEXT, DIRECTION_PREV, DIRECTION_ALL)

# Only ASCII uppercase folds, and only towards lowercase.
_ASCII_FOLD: Final[bytes] = bytes(
    b + 0x20 if 0x41 <= b <= 0x5A else b for b in range(256)
)

Haystack = Union[ByteBuffer, bytes, bytearray]


@dataclass(frozen=True)
class Pattern:
    """A non-empty byte sequence to look for."""

    data: bytes
    mode: str = MODE_HEX
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        if not self.data:
            raise EmptyPatternError()
        if self.mode not in SEARCH_MODES:
            raise ValueError(f"Unknown search mode: {self.mode!r}")

    @classmethod
    def from_hex(cls, text: str) -> 'Pattern':
        return cls(parse_hex_string(text), MODE_HEX)

    @classmethod
    def from_text(cls, text: str, case_sensitive: bool = True) -> 'Pattern':
        if not text:
            raise EmptyPatternError()

        return cls(text_to_bytes(text), MODE_TEXT, case_sensitive)

    @classmethod
    def parse(cls, text: str, mode: str = MODE_HEX, case_sensitive: bool = True) -> 'Pattern':
        """Build a pattern from user input in the given mode."""

        if mode == MODE_HEX:
            return cls.from_hex(text)
        if mode == MODE_TEXT:
            return cls.from_text(text, case_sensitive)

        raise ValueError(f"Unknown search mode: {mode!r}")

    @property
    def folds(self) -> bool:
        return self.mode == MODE_TEXT and not self.case_sensitive

    def __len__(self) -> int:
        return len(self.data)


@dataclass
class SearchResult:
    """Represents a search result with position and match information."""

    position: int
    length: int
    match: bytes

    @property
    def end(self) -> int:
        """Offset of the last matched byte."""

        return self.position + self.length - 1


def fold_ascii(data: bytes) -> bytes:
    """Lowercase ASCII A-Z, leaving every other byte value alone."""

    return bytes(data).translate(_ASCII_FOLD)


def _prepare(source: Haystack, pattern: Pattern):
    data = source.data if isinstance(source, ByteBuffer) else source
    if pattern.folds:
        return fold_ascii(data), fold_ascii(pattern.data)

    return bytes(data), pattern.data


def find_all(source: Haystack, pattern: Pattern) -> List[int]:
    """
    Find every offset where the pattern matches, overlaps included.

    Args:
        source: Buffer or bytes to search in
        pattern (Pattern): Pattern to search for

    Returns:
        List[int]: Match offsets in ascending order
    """

    data, needle = _prepare(source, pattern)

    offsets = []
    pos = data.find(needle)
    while pos >= 0:
        offsets.append(pos)
        pos = data.find(needle, pos + 1)

    return offsets


def find_next(source: Haystack, pattern: Pattern, from_offset: int) -> int:
    """
    Find the first match strictly after from_offset.

    Pass -1 to search from the start. The search does not wrap around.

    Raises:
        NotFoundError: If no match starts after from_offset
    """

    data, needle = _prepare(source, pattern)

    pos = data.find(needle, max(from_offset + 1, 0))
    if pos < 0:
        raise NotFoundError(f"Pattern not found after offset {from_offset}")

    return pos


def find_prev(source: Haystack, pattern: Pattern, from_offset: int) -> int:
    """
    Find the nearest match strictly before from_offset.

    Pass the buffer length to search from the end. The search does not wrap around.

    Raises:
        NotFoundError: If no match starts before from_offset
    """

    data, needle = _prepare(source, pattern)

    if from_offset > 0:
        end = min(from_offset - 1 + len(needle), len(data))
        pos = data.rfind(needle, 0, end)
        if pos >= 0:
            return pos

    raise NotFoundError(f"Pattern not found before offset {from_offset}")


class SearchEngine:
    """Runs searches against one buffer and remembers the last query."""

    def __init__(self, buffer: ByteBuffer) -> None:
        self.buffer = buffer
        self.last_pattern: Optional[Pattern] = None

    def _result(self, position: int, pattern: Pattern) -> SearchResult:
        return SearchResult(position, len(pattern),
                            self.buffer.slice(position, position + len(pattern)))

    def search(self, pattern: Pattern, direction: str = DIRECTION_NEXT,
               from_offset: int = -1) -> List[SearchResult]:
        """
        Search in the given direction.

        Args:
            pattern (Pattern): The pattern to search for
            direction (str): One of 'next', 'prev' or 'all'
            from_offset (int): Reference offset for 'next' and 'prev'

        Returns:
            List[SearchResult]: One result for 'next'/'prev', every match for 'all'
        """

        if direction not in SEARCH_DIRECTIONS:
            raise ValueError(f"Unknown search direction: {direction!r}")

        self.last_pattern = pattern

        if direction == DIRECTION_ALL:
            results = [self._result(pos, pattern) for pos in find_all(self.buffer, pattern)]
            logger.debug("Found %d matches for %r", len(results), pattern.data)
            return results

        if direction == DIRECTION_NEXT:
            position = find_next(self.buffer, pattern, from_offset)
        else:
            position = find_prev(self.buffer, pattern, from_offset)

        logger.debug("Found %r at %d searching %s from %d", pattern.data, position, direction, from_offset)
        return [self._result(position, pattern)]

    def find_next(self, from_offset: int) -> SearchResult:
        """Find the next occurrence of the last searched pattern."""

        return self._repeat(DIRECTION_NEXT, from_offset)

    def find_previous(self, from_offset: int) -> SearchResult:
        """Find the previous occurrence of the last searched pattern."""

        return self._repeat(DIRECTION_PREV, from_offset)

    def _repeat(self, direction: str, from_offset: int) -> SearchResult:
        if self.last_pattern is None:
            raise EmptyPatternError()

        return self.search(self.last_pattern, direction, from_offset)[0]
