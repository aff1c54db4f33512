"""Custom exceptions for the palette reader"""

from __future__ import annotations


class PaletteError(Exception):
    """Base exception for all palette decoding errors."""


class BadHeaderError(PaletteError):
    """Raised when the first line is not the GIMP palette magic header."""


class MissingNameError(PaletteError):
    """Raised in strict mode when the Name: line is absent."""


class MissingColumnsError(PaletteError):
    """Raised in strict mode when the Columns: line is absent."""


class BadColumnsError(PaletteError):
    """Raised in strict mode when the Columns: value is not an integer."""


class StreamReadError(PaletteError):
    """Raised when the underlying stream fails while lines are read."""


class FieldError(PaletteError):
    """A single fault found in one field of a body row."""


class MissingFieldError(FieldError):
    """Raised for rows with fewer than three channel fields."""


class MalformedFieldError(FieldError):
    """Raised for channel fields that are not decimal integers."""

    def __init__(self, channel: str, text: str) -> None:
        super().__init__(f"{channel} value {text!r} is not an integer")
        self.channel = channel
        self.text = text


class OutOfRangeError(FieldError):
    """Raised for channel values outside 0-255."""

    def __init__(self, channel: str, value: int) -> None:
        super().__init__(f"{channel} value {value} is out of range (0-255)")
        self.channel = channel
        self.value = value


class RowError(PaletteError):
    """
    Every fault found in one body row, reported together.

    Attributes:
        errors: The individual FieldError instances, in field order
        line: The trimmed row text
        line_number: 1-based line number of the row (0 if unknown)
    """

    def __init__(
        self, errors: list[FieldError], line: str, line_number: int = 0
    ) -> None:
        self.errors = tuple(errors)
        self.line = line
        self.line_number = line_number
        details = "; ".join(str(error) for error in self.errors)
        location = f"line {line_number}" if line_number else "row"
        super().__init__(f"{location}: malformed row {line!r}: {details}")

    def has_fault(self, fault_type: type[FieldError]) -> bool:
        """Check whether any collected fault is of the given type"""
        return any(isinstance(error, fault_type) for error in self.errors)
