"""Pixel to output value mapping."""

from __future__ import annotations

from typing import List, Tuple

from .color import ColorFormat, encode, format_color
from .errors import InternalLookupError
from .grid import PixelGrid
from .palette import Palette


def map_pixels(
    grid: PixelGrid,
    color_format: ColorFormat,
    palette: Palette | None = None,
) -> Tuple[int, ...]:
    """Return one value per pixel in row-major order.

    Without a palette the values are encoded colours. With a palette they are
    indices into it; the palette must already have passed coverage validation.
    """

    if palette is None:
        return tuple(encode(pixel, color_format) for pixel in grid)

    values: List[int] = []
    for i, pixel in enumerate(grid):
        color = encode(pixel, color_format)
        index = palette.index_of(color)
        if index is None:
            x, y = grid.position(i)
            raise InternalLookupError(
                f"Colour {format_color(color, color_format)} at pixel ({x}, {y}) "
                "was not found in a validated palette"
            )
        values.append(index)
    return tuple(values)
