"""
Per-byte colors for the structure visualizations.

Each mode maps every byte of the data to an RGB triple; a presentation layer
lays them out in rows of ``width`` pixels.
"""

from typing import Dict, Final, List, Tuple, Union

from ..config import DEFAULT_BLOCK_SIZE
from ..core.buffer import ByteBuffer
from ..core.errors import OutOfRangeError
from ..utils.analysis import BlockEntropies, ByteClass, classify, density_map, entropy, frequency_table
from ..utils.hex_utils import ascii_char, format_byte

RGB = Tuple[int, int, int]

MODE_BITMAP: Final[str] = 'bitmap'
MODE_DENSITY: Final[str] = 'density'
MODE_ENTROPY: Final[str] = 'entropy'
MODE_ASCII: Final[str] = 'ascii'
VISUALIZATION_MODES: Final[tuple] = (MODE_BITMAP, MODE_DENSITY, MODE_ENTROPY, MODE_ASCII)

CLASS_COLORS: Final[Dict[ByteClass, RGB]] = {
    ByteClass.PRINTABLE: (0x00, 0xFF, 0x00),
    ByteClass.NULL: (0x00, 0x00, 0x00),
    ByteClass.CONTROL: (0x00, 0x00, 0xFF),
    ByteClass.EXTENDED: (0xFF, 0x00, 0x00),
}


def _raw(source: Union[ByteBuffer, bytes, bytearray]) -> Union[bytes, bytearray]:
    return source.data if isinstance(source, ByteBuffer) else source


class Visualizer:
    """Computes pixel colors for one visualization mode."""

    def __init__(self, mode: str = MODE_BITMAP, width: int = 64,
                 block_size: int = DEFAULT_BLOCK_SIZE) -> None:
        if mode not in VISUALIZATION_MODES:
            raise ValueError(f"Unknown visualization mode: {mode!r}")
        if width <= 0:
            raise ValueError("Visualization width must be positive")

        self.mode = mode
        self.width = width
        self.block_size = block_size

    def colors(self, source: Union[ByteBuffer, bytes, bytearray]) -> List[RGB]:
        """Get one RGB color per byte."""

        data = _raw(source)

        if self.mode == MODE_BITMAP:
            return [(b, b, b) for b in data]

        if self.mode == MODE_DENSITY:
            colors = []
            for density in density_map(data):
                intensity = int(density * 255)
                colors.append((255 - intensity, intensity, 0))
            return colors

        if self.mode == MODE_ENTROPY:
            colors = []
            blocks = BlockEntropies(data, self.block_size)
            for index, value in enumerate(blocks):
                start, end = blocks.block_range(index)
                shade = int(value * 255)
                colors.extend([(shade, 0, 255 - shade)] * (end - start))
            return colors

        return [CLASS_COLORS[classify(b)] for b in data]

    def rows(self, source: Union[ByteBuffer, bytes, bytearray]) -> List[List[RGB]]:
        """Get the colors laid out in rows of self.width pixels."""

        colors = self.colors(source)
        return [colors[i:i + self.width] for i in range(0, len(colors), self.width)]

    def describe(self, source: Union[ByteBuffer, bytes, bytearray], offset: int) -> str:
        """Get the hover text of the pixel at offset."""

        data = _raw(source)
        if not 0 <= offset < len(data):
            raise OutOfRangeError(offset, len(data))

        value = data[offset]
        text = f"Offset: 0x{offset:X}, Value: 0x{format_byte(value)}"

        if self.mode == MODE_DENSITY:
            counts = frequency_table(data)
            density = counts[value] / max(counts)
            return f"{text}, Density: {density * 100:.1f}%"

        if self.mode == MODE_ENTROPY:
            start = offset // self.block_size * self.block_size
            block = entropy(data, start, min(start + self.block_size, len(data)))
            return f"Offset: 0x{offset:X}, Block Entropy: {block:.3f}"

        if self.mode == MODE_ASCII:
            return f"{text}, Char: {ascii_char(value)}"

        return text
