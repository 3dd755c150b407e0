"""Immutable row-major pixel grids."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Sequence, Tuple

from PIL import Image

from .color import Pixel


@dataclass(frozen=True)
class PixelGrid:
    width: int
    height: int
    pixels: Tuple[Pixel, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid grid size {self.width}x{self.height}")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Grid of {self.width}x{self.height} needs {self.width * self.height} pixels, "
                f"got {len(self.pixels)}"
            )

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return iter(self.pixels)

    def __getitem__(self, index: int) -> Pixel:
        return self.pixels[index]

    def position(self, index: int) -> tuple[int, int]:
        """Return the ``(x, y)`` coordinate of the pixel at ``index``."""
        return (index % self.width, index // self.width)

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Iterable[Sequence[int]]) -> "PixelGrid":
        """Build a grid from RGB or RGBA samples in row-major order."""

        normalized = []
        for pixel in pixels:
            if len(pixel) == 3:
                r, g, b = pixel
                a = 255
            elif len(pixel) == 4:
                r, g, b, a = pixel
            else:
                raise ValueError(f"Pixel must have 3 or 4 channels: {pixel!r}")
            channels = (int(r), int(g), int(b), int(a))
            if any(not (0 <= c <= 255) for c in channels):
                raise ValueError(f"Channel values must be between 0 and 255: {pixel!r}")
            normalized.append(channels)
        return cls(width, height, tuple(normalized))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "PixelGrid":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")
        return cls.from_pixels(width, height, (pixel for row in rows for pixel in row))

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelGrid":
        rgba = image.convert("RGBA")
        width, height = rgba.size
        data = rgba.tobytes()
        pixels = tuple(tuple(data[i : i + 4]) for i in range(0, len(data), 4))
        return cls(width, height, pixels)


def load_pixel_grid(path: str | Path) -> PixelGrid:
    """Decode an image file into a grid. Decoder errors propagate unchanged."""

    with Image.open(Path(path)) as img:
        return PixelGrid.from_image(img)
