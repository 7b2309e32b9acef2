"""
Hexdump highlighting using Pygments.
"""

from typing import Any, Dict, Final, List, Tuple

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer
from pygments.token import Token

HEXDUMP_COLORS: Final[Dict[str, int]] = {
    'offset': 1,       # Cyan
    'hex': 2,          # Yellow
    'text': 3,         # Green
    'punctuation': 4,  # White
    'default': 0,      # Default
}

TOKEN_COLOR_MAP: Final[Dict[Any, int]] = {
    Token.Name.Label: HEXDUMP_COLORS['offset'],
    Token.Number.Hex: HEXDUMP_COLORS['hex'],
    Token.Number: HEXDUMP_COLORS['hex'],
    Token.String: HEXDUMP_COLORS['text'],
    Token.Punctuation: HEXDUMP_COLORS['punctuation'],
    Token.Text: HEXDUMP_COLORS['default'],
    Token.Text.Whitespace: HEXDUMP_COLORS['default'],
}


class HexdumpHighlighter:
    """Splits hexdump rows into colored segments."""

    def __init__(self) -> None:
        self.lexer = HexdumpLexer(ensurenl=False)

    def highlight_line(self, line: str) -> List[Tuple[str, int]]:
        """
        Highlight one hexdump row.

        Args:
            line: The row text, as produced by format_row()

        Returns:
            A list of (text, color_slot) tuples, color slots from HEXDUMP_COLORS
        """

        if not line:
            return [(line, HEXDUMP_COLORS['default'])]

        return [(text, self._get_token_color(token_type))
                for token_type, text in self.lexer.get_tokens(line)]

    def highlight(self, text: str) -> str:
        """Render a whole hexdump with ANSI terminal colors."""

        return pygments_highlight(text, HexdumpLexer(), TerminalFormatter())

    def _get_token_color(self, token_type: Any) -> int:
        """
        Get the color slot for a token type.

        Args:
            token_type: The Pygments token type

        Returns:
            The color slot of the token or of its closest mapped parent
        """

        if token_type in TOKEN_COLOR_MAP:
            return TOKEN_COLOR_MAP[token_type]

        while token_type.parent:
            token_type = token_type.parent
            if token_type in TOKEN_COLOR_MAP:
                return TOKEN_COLOR_MAP[token_type]

        return HEXDUMP_COLORS['default']
