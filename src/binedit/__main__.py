#!/usr/bin/python3

"""
Command line entry point for binedit.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import EditorConfig
from .core.errors import BinEditError
from .session import EditSession
from .ui.hexdump import hexdump
from .ui.highlight import HexdumpHighlighter
from .utils.hex_utils import format_byte, format_offset, parse_hex_string, parse_offset
from .utils.search import DIRECTION_ALL, DIRECTION_NEXT, DIRECTION_PREV, MODE_HEX, MODE_TEXT

logger = logging.getLogger("binedit")

INSPECT_FIELDS = ('byte', 'int16', 'int32', 'float32')


def _offset(text: str) -> int:
    try:
        value = parse_offset(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid offset: {text!r}")

    if value < 0:
        raise argparse.ArgumentTypeError(f"offset must not be negative: {text!r}")

    return value


def _edit(text: str) -> Tuple[int, bytes]:
    offset_text, sep, hex_text = text.partition('=')
    if not sep:
        raise argparse.ArgumentTypeError(f"expected OFFSET=HEX, got {text!r}")

    try:
        return _offset(offset_text), parse_hex_string(hex_text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="binedit",
        description="binedit - Binary buffer viewer, editor and analyzer"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    dump = commands.add_parser("dump", help="Print a hexdump")
    dump.add_argument("file", help="File to dump")
    dump.add_argument("--width", type=int, default=None, help="Bytes per row")
    dump.add_argument("--start", type=_offset, default=0, help="First offset")
    dump.add_argument("--length", type=_offset, default=None, help="Number of bytes")
    dump.add_argument("--color", action="store_true", help="Highlight the output")

    find = commands.add_parser("find", help="Search for a pattern")
    find.add_argument("file", help="File to search")
    find.add_argument("pattern", help="Text, or hex bytes with --hex")
    find.add_argument("--hex", action="store_true", help="Pattern is hex bytes")
    find.add_argument("-i", "--ignore-case", action="store_true", help="Fold ASCII case in text mode")
    find.add_argument("--from", dest="from_offset", type=_offset, default=None,
                      help="Reference offset for directional search")
    direction = find.add_mutually_exclusive_group()
    direction.add_argument("--prev", action="store_true", help="Search backwards")
    direction.add_argument("--all", action="store_true", help="List every match")

    inspect = commands.add_parser("inspect", help="Decode the bytes at an offset")
    inspect.add_argument("file", help="File to inspect")
    inspect.add_argument("offset", type=_offset, help="Offset to decode")

    stats = commands.add_parser("stats", help="Print byte statistics")
    stats.add_argument("file", help="File to analyze")
    stats.add_argument("--block-size", type=int, default=None, help="Entropy block size")
    stats.add_argument("--start", type=_offset, default=0, help="First offset")
    stats.add_argument("--end", type=_offset, default=None, help="End offset (exclusive)")

    patch = commands.add_parser("patch", help="Overwrite bytes and save a copy")
    patch.add_argument("file", help="File to patch")
    patch.add_argument("edits", nargs="+", type=_edit, metavar="OFFSET=HEX",
                       help="Bytes to write, e.g. 0x10=DEADBEEF")
    patch.add_argument("-o", "--output", default=None,
                       help="Output path (default: edited_<name> next to the input)")

    return parser.parse_args(argv)


def _open(path: str, config: EditorConfig) -> EditSession:
    session = EditSession(config)
    session.load(Path(path).read_bytes(), Path(path).name)
    return session


def cmd_dump(session: EditSession, args: argparse.Namespace) -> None:
    width = args.width or session.config.bytes_per_row
    end = None if args.length is None else args.start + args.length
    text = '\n'.join(hexdump(session.buffer, width, args.start, end))

    if not text:
        if not len(session.buffer):
            logger.info("File is empty.")
        else:
            logger.info("No bytes at offset %s.", format_offset(args.start))
        return

    if args.color:
        sys.stdout.write(HexdumpHighlighter().highlight(text))
    else:
        print(text)


def cmd_find(session: EditSession, args: argparse.Namespace) -> None:
    mode = MODE_HEX if args.hex else MODE_TEXT
    if args.all:
        direction = DIRECTION_ALL
    elif args.prev:
        direction = DIRECTION_PREV
    else:
        direction = DIRECTION_NEXT

    if args.from_offset is not None:
        session.set_active(args.from_offset)

    results = session.search(args.pattern, mode, not args.ignore_case, direction)
    for result in results:
        print(f"{format_offset(result.position)}  {result.match.hex(' ').upper()}")

    logger.debug("%d match(es)", len(results))


def cmd_inspect(session: EditSession, args: argparse.Namespace) -> None:
    result = session.inspect(args.offset)
    print(f"Offset: {format_offset(result.offset)}")
    for name in INSPECT_FIELDS:
        print(f"{name:>8}: {result.format_value(name)}")


def cmd_stats(session: EditSession, args: argparse.Namespace) -> None:
    result = session.analyze(args.start, args.end)
    print(f"Range: {format_offset(result.start)}-{format_offset(result.end)} ({result.length} bytes)")
    print(f"Entropy: {result.entropy:.3f}")
    print(f"Distinct values: {result.distinct_values}")
    for byte_class, count in result.classes.items():
        print(f"{byte_class.value:>10}: {count}")

    top = ', '.join(f"{format_byte(value)}x{count}" for value, count in result.most_common())
    print(f"Most common: {top or '-'}")

    blocks = session.block_entropies(args.block_size)
    for index, value in enumerate(blocks):
        start, _ = blocks.block_range(index)
        print(f"{format_offset(start)}  {value:.3f}")


def cmd_patch(session: EditSession, args: argparse.Namespace) -> None:
    for offset, data in args.edits:
        session.write(offset, data)

    source = Path(args.file)
    output = Path(args.output) if args.output else source.with_name(session.export_name())
    output.write_bytes(session.export())
    logger.info("File saved as '%s'.", output)


COMMANDS = {
    "dump": cmd_dump,
    "find": cmd_find,
    "inspect": cmd_inspect,
    "stats": cmd_stats,
    "patch": cmd_patch,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = EditorConfig.from_env()
        session = _open(args.file, config)
        COMMANDS[args.command](session, args)
    except (BinEditError, OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
