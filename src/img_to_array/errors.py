"""Exceptions raised while converting images to arrays."""

from __future__ import annotations

from .color import Color, ColorFormat, format_color


class ConversionError(Exception):
    """Custom exception for conversion errors."""


class DecodeError(ConversionError):
    """Raised when an image or palette file cannot be decoded."""


class PaletteCapacityError(ConversionError):
    """Raised when a palette holds more colours than the index width can address."""

    def __init__(self, size: int, index_width: int):
        self.size = size
        self.index_width = index_width
        super().__init__(
            f"Image file has too many colours for palette size of {index_width} "
            f"({size} colours, maximum {2 ** index_width})"
        )


class ColorNotInPaletteError(ConversionError):
    """Raised when an image colour is missing from a supplied palette."""

    def __init__(
        self,
        color: int,
        rgb: Color,
        position: tuple[int, int],
        color_format: ColorFormat,
    ):
        self.color = color
        self.rgb = rgb
        self.position = position
        self.color_format = color_format
        r, g, b = rgb
        x, y = position
        super().__init__(
            "Error creating colour index array: colour "
            f"{format_color(color, color_format)} (#{r:02X}{g:02X}{b:02X}) at pixel "
            f"({x}, {y}) isn't present in the palette"
        )


class InternalLookupError(RuntimeError):
    """Raised when a validated palette does not contain a pixel's colour."""
