"""
Byte statistics: frequency tables, Shannon entropy and character classes.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from ..config import DEFAULT_BLOCK_SIZE
from ..core.buffer import ByteBuffer
from ..core.errors import InvalidByteValueError, OutOfRangeError

Source = Union[ByteBuffer, bytes, bytearray]

BITS_PER_BYTE = 8


class ByteClass(Enum):
    """Character class of a byte value, used to pick display colors."""

    PRINTABLE = 'printable'
    NULL = 'null'
    CONTROL = 'control'
    EXTENDED = 'extended'


def classify(value: int) -> ByteClass:
    """Classify a single byte value."""

    if not 0 <= value <= 255:
        raise InvalidByteValueError(value)

    if 32 <= value <= 126:
        return ByteClass.PRINTABLE
    if value == 0:
        return ByteClass.NULL
    if value < 32:
        return ByteClass.CONTROL

    return ByteClass.EXTENDED


def _raw(source: Source) -> Sequence[int]:
    return source.data if isinstance(source, ByteBuffer) else source


def _bounds(data: Sequence[int], start: int, end: Optional[int]) -> Tuple[int, int]:
    size = len(data)
    if end is None:
        end = size

    if not 0 <= start <= size:
        raise OutOfRangeError(start, size, "Range start")
    if not 0 <= end <= size:
        raise OutOfRangeError(end, size, "Range end")

    return start, end


def frequency_table(source: Source, start: int = 0, end: Optional[int] = None) -> List[int]:
    """
    Count occurrences of each byte value in [start, end).

    Returns:
        List[int]: 256 counts indexed by byte value, all zero for an empty range
    """

    data = _raw(source)
    start, end = _bounds(data, start, end)

    counts = [0] * 256
    if start >= end:
        return counts

    for value, count in Counter(data[start:end]).items():
        counts[value] = count

    return counts


def entropy_from_counts(counts: Sequence[int]) -> float:
    """Shannon entropy of a frequency table, normalized to 0..1."""

    total = sum(counts)
    if not total:
        return 0.0

    bits = 0.0
    for count in counts:
        if count:
            probability = count / total
            bits -= probability * math.log2(probability)

    return bits / BITS_PER_BYTE


def entropy(source: Source, start: int = 0, end: Optional[int] = None) -> float:
    """
    Normalized Shannon entropy of the bytes in [start, end).

    A range with start >= end has no information content and yields 0.0.
    """

    data = _raw(source)
    start, end = _bounds(data, start, end)
    if start >= end:
        return 0.0

    return entropy_from_counts(frequency_table(data, start, end))


class BlockEntropies(Sequence[float]):
    """Lazy per-block entropy values of a byte sequence.

    Each iteration starts from the first block again; values are computed on
    access and the last block may be shorter than block_size.
    """

    def __init__(self, source: Source, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if block_size <= 0:
            raise ValueError("Block size must be positive")

        self.data = bytes(_raw(source))
        self.block_size = block_size

    def __len__(self) -> int:
        return (len(self.data) + self.block_size - 1) // self.block_size

    def block_range(self, index: int) -> Tuple[int, int]:
        """Get the [start, end) byte range of a block."""

        start = index * self.block_size
        return start, min(start + self.block_size, len(self.data))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError("block index out of range")

        start, end = self.block_range(index)
        return entropy(self.data, start, end)

    def __iter__(self) -> Iterator[float]:
        for index in range(len(self)):
            start, end = self.block_range(index)
            yield entropy(self.data, start, end)


def block_entropies(source: Source, block_size: int = DEFAULT_BLOCK_SIZE) -> BlockEntropies:
    return BlockEntropies(source, block_size)


def density_map(source: Source) -> List[float]:
    """
    Relative frequency of each byte's value across the whole data.

    Returns:
        List[float]: One value per byte, the count of its value divided by
        the highest count, so the most common value maps to 1.0
    """

    data = _raw(source)
    counts = frequency_table(data)
    peak = max(counts)
    if not peak:
        return []

    return [counts[value] / peak for value in data]


def _class_totals(frequencies: Sequence[int]) -> Dict[ByteClass, int]:
    totals = {byte_class: 0 for byte_class in ByteClass}
    for value, count in enumerate(frequencies):
        if count:
            totals[classify(value)] += count

    return totals


def class_counts(source: Source, start: int = 0, end: Optional[int] = None) -> Dict[ByteClass, int]:
    """Count how many bytes of [start, end) fall in each ByteClass."""

    return _class_totals(frequency_table(source, start, end))


@dataclass
class AnalysisResult:
    """Statistics over one byte range."""

    start: int
    end: int
    frequencies: List[int]
    entropy: float
    classes: Dict[ByteClass, int] = field(default_factory=dict)

    @property
    def length(self) -> int:
        return max(self.end - self.start, 0)

    @property
    def distinct_values(self) -> int:
        return sum(1 for count in self.frequencies if count)

    def most_common(self, n: int = 5) -> List[Tuple[int, int]]:
        """Get the n most frequent (value, count) pairs, ties by lower value."""

        pairs = [(value, count) for value, count in enumerate(self.frequencies) if count]
        pairs.sort(key=lambda pair: (-pair[1], pair[0]))
        return pairs[:n]


def analyze(source: Source, start: int = 0, end: Optional[int] = None) -> AnalysisResult:
    """Compute the frequency table, entropy and class counts of a range."""

    data = _raw(source)
    start, end = _bounds(data, start, end)

    frequencies = frequency_table(data, start, end)

    return AnalysisResult(
        start=start,
        end=end,
        frequencies=frequencies,
        entropy=entropy_from_counts(frequencies),
        classes=_class_totals(frequencies),
    )
