"""
GIMP Palette Reader
Decodes GIMP palette (.gpl) files into immutable Palette values
"""

from .exceptions import (
    BadColumnsError,
    BadHeaderError,
    FieldError,
    MalformedFieldError,
    MissingColumnsError,
    MissingFieldError,
    MissingNameError,
    OutOfRangeError,
    PaletteError,
    RowError,
    StreamReadError,
)
from .line_source import LineSource
from .palette import Palette, PaletteEntry, RGBColor
from .parsing_mode import ParsingMode
from .reader import read_palette, read_palette_file
from .row_parser import parse_row
from .security_utils import SecurityError

__version__ = "1.0.0"
__all__ = [
    "BadColumnsError",
    "BadHeaderError",
    "FieldError",
    "LineSource",
    "MalformedFieldError",
    "MissingColumnsError",
    "MissingFieldError",
    "MissingNameError",
    "OutOfRangeError",
    "Palette",
    "PaletteEntry",
    "PaletteError",
    "ParsingMode",
    "RGBColor",
    "RowError",
    "SecurityError",
    "StreamReadError",
    "parse_row",
    "read_palette",
    "read_palette_file",
]
