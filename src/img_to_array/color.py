"""Colour encoding for the supported pixel formats.

RGB565 keeps the most significant 5/6/5 bits of each channel (truncation, no
rounding). RGB888 keeps all 24 bits. The alpha channel is never encoded.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Sequence, Tuple

Pixel = Tuple[int, int, int, int]
Color = Tuple[int, int, int]


class ColorFormat(StrEnum):
    """Packed colour layouts."""

    RGB565 = "RGB565"
    RGB888 = "RGB888"

    @property
    def bits(self) -> int:
        """Storage width of one encoded colour."""
        return 16 if self is ColorFormat.RGB565 else 32

    @property
    def hex_digits(self) -> int:
        return 4 if self is ColorFormat.RGB565 else 6


_FORMAT_ALIASES = {
    "RGB565": ColorFormat.RGB565,
    "565": ColorFormat.RGB565,
    "RGB": ColorFormat.RGB888,
    "RGB888": ColorFormat.RGB888,
    "888": ColorFormat.RGB888,
}


def parse_color_format(text: str | ColorFormat) -> ColorFormat:
    if isinstance(text, ColorFormat):
        return text
    key = str(text).strip().upper()
    try:
        return _FORMAT_ALIASES[key]
    except KeyError:
        raise ValueError(f"Unknown colour format {text}") from None


def encode(pixel: Sequence[int], color_format: ColorFormat) -> int:
    """Pack the RGB part of ``pixel`` into ``color_format``."""

    r, g, b = pixel[0], pixel[1], pixel[2]
    if color_format is ColorFormat.RGB565:
        return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)
    return (r << 16) | (g << 8) | b


def decode(value: int, color_format: ColorFormat) -> Color:
    """Unpack an encoded colour back to 8-bit channels.

    RGB565 fields are shifted back up, so the discarded low bits read as zero.
    """

    if color_format is ColorFormat.RGB565:
        r = ((value >> 11) & 0x1F) << 3
        g = ((value >> 5) & 0x3F) << 2
        b = (value & 0x1F) << 3
        return (r, g, b)
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def format_color(value: int, color_format: ColorFormat) -> str:
    return f"0x{value:0{color_format.hex_digits}X}"
