"""
UI package with presentation data for hex views.

This package turns buffer contents into what a front end draws: hexdump rows
and the status line, Pygments based hexdump highlighting, and per-byte colors
for the bitmap, density, entropy and ascii visualizations.
"""

from .hexdump import format_row, hexdump, status_line
from .highlight import HexdumpHighlighter
from .visualize import Visualizer

__all__ = ['format_row', 'hexdump', 'status_line', 'HexdumpHighlighter', 'Visualizer']
