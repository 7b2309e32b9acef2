"""
Utility package with the search, analysis and inspection algorithms.
"""

from .hex_utils import (
    parse_hex_string,
    parse_offset,
    format_offset,
    format_byte,
    ascii_char,
    text_to_bytes
)
from .search import Pattern, SearchEngine, SearchResult, find_all, find_next, find_prev
from .analysis import (
    AnalysisResult,
    BlockEntropies,
    ByteClass,
    analyze,
    block_entropies,
    classify,
    density_map,
    entropy,
    frequency_table
)
from .inspector import InspectionResult, inspect

__all__ = [
    'parse_hex_string',
    'parse_offset',
    'format_offset',
    'format_byte',
    'ascii_char',
    'text_to_bytes',
    'Pattern',
    'SearchEngine',
    'SearchResult',
    'find_all',
    'find_next',
    'find_prev',
    'AnalysisResult',
    'BlockEntropies',
    'ByteClass',
    'analyze',
    'block_entropies',
    'classify',
    'density_map',
    'entropy',
    'frequency_table',
    'InspectionResult',
    'inspect'
]
