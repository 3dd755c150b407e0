"""Palette construction and validation.

A palette is an ordered list of unique encoded colours. It is either built
from the colours found in the image (first seen, first indexed) or loaded from
a separate palette image, in which case every image colour must be present.
"""

from __future__ import annotations

import warnings
from typing import Dict, Iterable, Iterator, Tuple

from .color import ColorFormat, encode
from .errors import ColorNotInPaletteError, PaletteCapacityError
from .grid import PixelGrid

INDEX_WIDTHS = (8, 16, 32)


class Palette:
    """Ordered set of encoded colours with constant-time index lookup."""

    __slots__ = ("_colors", "_index")

    def __init__(self, colors: Iterable[int] = ()):
        index: Dict[int, int] = {}
        for color in colors:
            if color not in index:
                index[color] = len(index)
        self._index = index
        self._colors: Tuple[int, ...] = tuple(index)

    @property
    def colors(self) -> Tuple[int, ...]:
        return self._colors

    def index_of(self, color: int) -> int | None:
        return self._index.get(color)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[int]:
        return iter(self._colors)

    def __getitem__(self, index: int) -> int:
        return self._colors[index]

    def __contains__(self, color: object) -> bool:
        return color in self._index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Palette):
            return self._colors == other._colors
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"Palette({list(self._colors)!r})"


def parse_index_width(value: int | str) -> int:
    try:
        width = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Unknown palette size {value}") from None
    if width not in INDEX_WIDTHS:
        raise ValueError(f"Unknown palette size {value}")
    return width


def palette_capacity(index_width: int) -> int:
    """Number of distinct indices representable in ``index_width`` bits."""
    return 2 ** index_width


def check_capacity(palette: Palette, index_width: int) -> None:
    if len(palette) > palette_capacity(index_width):
        raise PaletteCapacityError(len(palette), index_width)


def build_palette(grid: PixelGrid, color_format: ColorFormat) -> Palette:
    """Collect the distinct colours of ``grid`` in row-major first-seen order."""
    return Palette(encode(pixel, color_format) for pixel in grid)


def load_palette(palette_grid: PixelGrid, color_format: ColorFormat) -> Palette:
    """Read a palette from a palette image of any shape.

    Later duplicates of a colour are dropped and reported with a warning.
    """

    encoded = [encode(pixel, color_format) for pixel in palette_grid]
    palette = Palette(encoded)
    duplicates = len(encoded) - len(palette)
    if duplicates:
        warnings.warn(
            f"Palette image contains {duplicates} duplicate colour(s) in {color_format}; "
            "only the first occurrence of each is used",
            RuntimeWarning,
            stacklevel=2,
        )
    return palette


def validate_coverage(grid: PixelGrid, palette: Palette, color_format: ColorFormat) -> None:
    """Raise ColorNotInPaletteError for the first image colour the palette lacks."""

    checked: set[int] = set()
    for i, pixel in enumerate(grid):
        color = encode(pixel, color_format)
        if color in checked:
            continue
        if color not in palette:
            raise ColorNotInPaletteError(
                color,
                (pixel[0], pixel[1], pixel[2]),
                grid.position(i),
                color_format,
            )
        checked.add(color)
