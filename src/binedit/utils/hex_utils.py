"""
Utility functions for hex text conversion.
"""

from typing import Final

from ..core.errors import EmptyPatternError, InvalidHexPatternError

HEX_DIGITS: Final[str] = '0123456789ABCDEFabcdef'


def parse_hex_string(hex_str: str) -> bytes:
    """
    Parse a hex string into bytes.

    Args:
        hex_str (str): String of hex values (e.g. "FF 00 A5" or "FF00A5")

    Returns:
        bytes: Parsed bytes

    Raises:
        EmptyPatternError: If the string holds no digits
        InvalidHexPatternError: If it has a non-hex character or an odd digit count
    """

    clean_str = ''.join(hex_str.split())
    if not clean_str:
        raise EmptyPatternError()

    for c in clean_str:
        if c not in HEX_DIGITS:
            raise InvalidHexPatternError(hex_str, f"{c!r} is not a hex digit")

    if len(clean_str) % 2:
        raise InvalidHexPatternError(hex_str, "odd number of hex digits")

    return bytes.fromhex(clean_str)


def filter_hex_digits(text: str) -> str:
    """Drop everything but hex digits and uppercase the rest."""

    return ''.join(c for c in text if c in HEX_DIGITS).upper()


def parse_offset(text: str) -> int:
    """
    Parse an offset written in decimal or with a 0x prefix.

    Args:
        text (str): Offset text, e.g. "128" or "0x80"

    Returns:
        int: Parsed offset
    """

    return int(text.strip(), 0)


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def format_byte(value: int) -> str:
    return f"{value:02X}"


def ascii_char(value: int) -> str:
    """Get the display character for a byte, '.' when not printable."""

    return chr(value) if 32 <= value <= 126 else '.'


def text_to_bytes(text: str) -> bytes:
    """
    Convert text to bytes, one byte per character.

    Each character's code point is masked to 8 bits, the way an ASCII cell
    stores a typed character.

    Args:
        text (str): Text to convert

    Returns:
        bytes: One byte per character of text
    """

    return bytes(ord(c) & 0xFF for c in text)
