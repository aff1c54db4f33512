#!/usr/bin/env python3
"""
Constants for the GIMP palette reader
All magic strings and limits of the .gpl format in one place
"""

# File structure
MAGIC_HEADER = "GIMP Palette"
NAME_PREFIX = "Name: "
COLUMNS_PREFIX = "Columns: "
COMMENT_MARKER = "#"

# Row layout
CHANNEL_FIELD_COUNT = 3  # R, G, B
MAX_ROW_FIELDS = 4  # R, G, B, name

# Channel values
CHANNEL_MIN = 0
CHANNEL_MAX = 255
OPAQUE_ALPHA = 255

# Reading
DEFAULT_ENCODING = "utf-8"
MAX_PALETTE_FILE_SIZE = 16 * 1024 * 1024  # 16MB
