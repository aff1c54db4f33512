#!/usr/bin/env python3
"""
GIMP palette decoder
Walks the header, the optional Name:/Columns: lines and the body of a
.gpl document and assembles a Palette
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional, Union

from .constants import (
    COLUMNS_PREFIX,
    COMMENT_MARKER,
    DEFAULT_ENCODING,
    MAGIC_HEADER,
    NAME_PREFIX,
)
from .exceptions import (
    BadColumnsError,
    BadHeaderError,
    MissingColumnsError,
    MissingNameError,
    PaletteError,
)
from .line_source import LineSource
from .logging_config import get_logger
from .palette import Palette
from .parsing_mode import ParsingMode
from .row_parser import parse_decimal, parse_row
from .security_utils import validate_file_path
from .settings_manager import get_settings

logger = get_logger(__name__)


def _read_header(source: LineSource) -> None:
    line = source.next_line()
    if line != MAGIC_HEADER:
        raise BadHeaderError(f"Expected {MAGIC_HEADER!r}, got {line!r}")


def _read_metadata_line(source: LineSource, prefix: str, mode: ParsingMode,
                        missing_error: type[PaletteError]) -> Optional[str]:
    """
    Read an optional "Prefix: value" line.

    Returns:
        The text following the prefix, or None when the line is absent
        (lenient mode only; the line is pushed back for the next stage)
    """
    line = source.next_line()
    if line is not None and line.startswith(prefix):
        return line[len(prefix):]

    if mode.strict:
        raise missing_error(f"Expected {prefix.strip()!r} line, got {line!r}")

    if line is not None:
        source.push_back(line)
    return None


def _read_name(source: LineSource, mode: ParsingMode) -> str:
    value = _read_metadata_line(source, NAME_PREFIX, mode, MissingNameError)
    return value.strip() if value is not None else ""


def _read_columns(source: LineSource, mode: ParsingMode) -> int:
    value = _read_metadata_line(source, COLUMNS_PREFIX, mode, MissingColumnsError)
    if value is None:
        return 0

    try:
        return parse_decimal(value.strip())
    except ValueError as e:
        if mode.strict:
            raise BadColumnsError(f"Bad columns entry {value.strip()!r}: {e}") from e
        logger.debug(f"Ignoring malformed columns value {value.strip()!r}")
        return 0


def read_palette(stream: IO, mode: ParsingMode = ParsingMode.STRICT,
                 encoding: str = DEFAULT_ENCODING) -> Palette:
    """
    Decode a GIMP palette from a stream.

    Args:
        stream: Text or binary stream (or any iterable of lines)
        mode: Validation policy
        encoding: Encoding used for binary streams

    Returns:
        The decoded Palette

    Raises:
        BadHeaderError: If the magic header line is missing (both modes)
        StreamReadError: If the stream fails while being read (both modes)
        MissingNameError, MissingColumnsError, BadColumnsError, RowError:
            Structural and row faults (strict mode only)
    """
    mode = ParsingMode.from_name(mode)
    source = LineSource(stream, encoding=encoding)

    _read_header(source)
    name = _read_name(source, mode)
    columns = _read_columns(source, mode)

    comments = []
    entries = []
    for raw_line in source:
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(COMMENT_MARKER):
            comments.append(line[len(COMMENT_MARKER):])
        else:
            entries.append(parse_row(line, mode, source.line_number))

    logger.info(
        f"Decoded palette {name!r}: {len(entries)} entries, "
        f"{len(comments)} comments ({mode.value})"
    )
    return Palette(name, columns, tuple(comments), tuple(entries))


def read_palette_file(path: Union[str, Path], mode: Optional[ParsingMode] = None,
                      encoding: Optional[str] = None) -> Palette:
    """
    Decode a GIMP palette file.

    Args:
        path: Path to the .gpl file
        mode: Validation policy (defaults to the configured parsing mode)
        encoding: File encoding (defaults to the configured encoding)

    Returns:
        The decoded Palette

    Raises:
        SecurityError: If the path is unsafe or the file is too large
        OSError: If the file cannot be opened
        PaletteError: If decoding fails
    """
    settings = get_settings()
    if mode is None:
        mode = settings.get_parsing_mode()
    if encoding is None:
        encoding = settings.get_encoding()

    file_path = validate_file_path(path, max_size=settings.get_max_file_size())
    logger.debug(f"Reading palette file {file_path}")
    with open(file_path, "rb") as f:
        return read_palette(f, mode, encoding)
