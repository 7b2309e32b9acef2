"""
binedit - binary buffer edit engine.

Load a byte blob, edit it byte by byte with undo/redo, select and paste
ranges, search for byte or text patterns, and analyze its structure through
frequency tables, block entropy, character classes and a data inspector.
"""

from .config import EditorConfig
from .session import EditSession

__all__ = ['EditorConfig', 'EditSession']
