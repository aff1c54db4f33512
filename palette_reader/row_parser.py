#!/usr/bin/env python3
"""
Row parser for palette body lines
Turns one "R G B [name]" line into a PaletteEntry
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .constants import CHANNEL_FIELD_COUNT, CHANNEL_MAX, CHANNEL_MIN, MAX_ROW_FIELDS
from .exceptions import (
    FieldError,
    MalformedFieldError,
    MissingFieldError,
    OutOfRangeError,
    RowError,
)
from .logging_config import get_logger
from .palette import PaletteEntry, RGBColor
from .parsing_mode import ParsingMode

logger = get_logger(__name__)

CHANNEL_NAMES = ("red", "green", "blue")

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


class ChannelResult(NamedTuple):
    """Resolved channel value and the fault found while resolving it, if any"""

    value: int
    fault: Optional[FieldError] = None


def parse_decimal(text: str) -> int:
    """
    Parse the leading decimal integer of text, with an optional sign.

    Anything after the digits is ignored, so "12abc" gives 12 and
    "1.5" gives 1.

    Raises:
        ValueError: If text does not start with a decimal integer
    """
    match = _DECIMAL_RE.match(text)
    if match is None:
        raise ValueError(f"invalid decimal integer: {text!r}")
    return int(match.group())


def resolve_channel(channel: str, text: str) -> ChannelResult:
    """
    Resolve one channel field.

    Unparseable text resolves to 0 without a range check. Parsed values
    outside 0-255 are clamped to the nearer bound.

    Args:
        channel: Channel name used in fault messages
        text: Field text

    Returns:
        ChannelResult with the coerced value and the fault, if any
    """
    try:
        value = parse_decimal(text)
    except ValueError:
        return ChannelResult(0, MalformedFieldError(channel, text))

    if value < CHANNEL_MIN or value > CHANNEL_MAX:
        clamped = max(CHANNEL_MIN, min(CHANNEL_MAX, value))
        return ChannelResult(clamped, OutOfRangeError(channel, value))

    return ChannelResult(value)


def parse_row(line: str, mode: ParsingMode, line_number: int = 0) -> PaletteEntry:
    """
    Parse a trimmed, non-empty, non-comment body line.

    Args:
        line: Row text, already stripped of surrounding whitespace
        mode: ParsingMode controlling whether faults are raised or coerced
        line_number: Line number used in error messages

    Returns:
        The decoded PaletteEntry

    Raises:
        RowError: In strict mode, with every fault found in the row
    """
    fields = line.split(None, MAX_ROW_FIELDS - 1)

    if len(fields) < CHANNEL_FIELD_COUNT and mode.strict:
        raise RowError(
            [MissingFieldError(
                f"expected {CHANNEL_FIELD_COUNT} channel fields, got {len(fields)}"
            )],
            line,
            line_number,
        )

    channels = [0] * CHANNEL_FIELD_COUNT
    faults = []
    for index, text in enumerate(fields[:CHANNEL_FIELD_COUNT]):
        result = resolve_channel(CHANNEL_NAMES[index], text)
        channels[index] = result.value
        if result.fault is not None:
            faults.append(result.fault)

    if faults:
        if mode.strict:
            raise RowError(faults, line, line_number)
        logger.debug(f"Line {line_number}: coerced {line!r} ({len(faults)} faults)")

    name = fields[CHANNEL_FIELD_COUNT] if len(fields) > CHANNEL_FIELD_COUNT else ""
    return PaletteEntry(name, RGBColor(*channels))
