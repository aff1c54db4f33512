"""
Palette data model

Immutable value types produced by the decoder, plus in-memory exports
to Pillow palettes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from PIL import Image, ImagePalette

from .constants import CHANNEL_MAX, CHANNEL_MIN, OPAQUE_ALPHA


@dataclass(frozen=True)
class RGBColor:
    """Opaque 8-bit RGB color. The format carries no alpha channel."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"Channel {channel} must be in [{CHANNEL_MIN},{CHANNEL_MAX}], got {value}"
                )

    @property
    def a(self) -> int:
        return OPAQUE_ALPHA

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def as_rgba(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, OPAQUE_ALPHA


@dataclass(frozen=True)
class PaletteEntry:
    """One color swatch. Name is empty when the row had none."""

    name: str
    color: RGBColor


@dataclass(frozen=True)
class Palette:
    """A decoded GIMP palette document."""

    name: str = ""
    columns: int = 0  # 0 = unspecified
    comments: tuple[str, ...] = field(default_factory=tuple)
    entries: tuple[PaletteEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    @property
    def colors(self) -> list[tuple[int, int, int]]:
        """RGB tuples of all entries, in file order"""
        return [entry.color.as_tuple() for entry in self.entries]

    def to_flat_rgb(self) -> list[int]:
        """
        Flatten the palette for Pillow.

        Returns:
            List of [r, g, b, r, g, b, ...] values, as accepted by putpalette
        """
        flat = []
        for entry in self.entries:
            flat.extend(entry.color.as_tuple())
        return flat

    def to_image_palette(self) -> ImagePalette.ImagePalette:
        """Build a Pillow ImagePalette holding the entries in order"""
        return ImagePalette.ImagePalette("RGB", self.to_flat_rgb())

    def apply_to_image(self, image: Image.Image) -> bool:
        """
        Apply this palette to an indexed image.

        Args:
            image: Pillow image in mode 'P'

        Returns:
            True if the palette was applied, False for unsupported images
        """
        if not isinstance(image, Image.Image) or image.mode != "P":
            return False
        if not self.entries:
            return False

        image.putpalette(self.to_flat_rgb())
        return True
