"""Validation policy selector for the palette decoder"""

from __future__ import annotations

from enum import Enum
from typing import Union


class ParsingMode(Enum):
    """Validation policy applied while decoding."""
    STRICT = "strict"    # Any irregularity is fatal
    LENIENT = "lenient"  # Irregularities are defaulted, clamped or skipped

    @property
    def strict(self) -> bool:
        return self is ParsingMode.STRICT

    @classmethod
    def from_name(cls, name: Union[str, ParsingMode]) -> ParsingMode:
        """Look up a mode by case-insensitive name"""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(
                f"Unknown parsing mode {name!r} (expected one of: {choices})"
            ) from None
