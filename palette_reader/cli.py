#!/usr/bin/env python3
"""
Command-line palette inspector
Decodes a GIMP palette file and prints its contents
"""

import argparse
import sys

from .exceptions import PaletteError
from .logging_config import setup_logging
from .parsing_mode import ParsingMode
from .reader import read_palette_file
from .security_utils import SecurityError
from .settings_manager import get_settings


def build_parser():
    parser = argparse.ArgumentParser(
        prog="palette-info", description="Inspect a GIMP palette (.gpl) file"
    )
    parser.add_argument("path", help="Palette file to read")
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--strict", dest="mode", action="store_const",
                            const=ParsingMode.STRICT, help="Reject any malformed line")
    mode_group.add_argument("--lenient", dest="mode", action="store_const",
                            const=ParsingMode.LENIENT, help="Coerce malformed lines")
    parser.add_argument("--encoding", help="File encoding (default from settings)")
    parser.add_argument("--log-level", help="Log level (default from settings)")
    return parser


def format_palette(palette):
    """Render a palette as printable lines"""
    lines = [
        f"Name: {palette.name or '(none)'}",
        f"Columns: {palette.columns or '(unspecified)'}",
        f"Comments: {len(palette.comments)}",
    ]
    lines.extend(f"  #{comment}" for comment in palette.comments)
    lines.append(f"Entries: {len(palette)}")
    for entry in palette:
        r, g, b = entry.color.as_tuple()
        lines.append(f"  {entry.color.hex}  {r:3d} {g:3d} {b:3d}  {entry.name}".rstrip())
    return lines


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(
        args.log_level or settings.get_log_level(),
        settings.get_log_file(),
    )

    try:
        palette = read_palette_file(args.path, args.mode, args.encoding)
    except (PaletteError, SecurityError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings.add_recent_file(args.path)
    for line in format_palette(palette):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
