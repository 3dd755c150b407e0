"""Core conversion logic: image pixels to palette and value arrays."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

from PIL import Image

from .color import ColorFormat, parse_color_format
from .errors import (
    ColorNotInPaletteError,
    ConversionError,
    DecodeError,
    InternalLookupError,
    PaletteCapacityError,
)
from .grid import PixelGrid, load_pixel_grid
from .mapper import map_pixels
from .palette import (
    Palette,
    build_palette,
    check_capacity,
    load_palette,
    parse_index_width,
    validate_coverage,
)

__all__ = [
    "ColorNotInPaletteError",
    "ConversionError",
    "ConversionResult",
    "ConvertOptions",
    "DecodeError",
    "InternalLookupError",
    "PaletteCapacityError",
    "convert_grid",
    "convert_image_to_array",
    "convert_png_to_array",
    "read_pixel_grid",
]


@dataclass
class ConvertOptions:
    """Options for colour format and palette handling."""

    color_format: ColorFormat = ColorFormat.RGB565
    index_width: int = 8  # 8, 16, 32
    use_palette: bool = True
    palette_source: PixelGrid | None = None

    def validate(self) -> "ConvertOptions":
        """Return a copy with the colour format and index width normalized."""
        try:
            return replace(
                self,
                color_format=parse_color_format(self.color_format),
                index_width=parse_index_width(self.index_width),
            )
        except ValueError as exc:
            raise ConversionError(str(exc)) from exc


@dataclass(frozen=True)
class ConversionResult:
    palette: Palette | None
    values: Tuple[int, ...]
    color_format: ColorFormat
    index_width: int
    width: int
    height: int

    @property
    def value_bits(self) -> int:
        """Element width of ``values``: index width, or colour width without a palette."""
        if self.palette is None:
            return self.color_format.bits
        return self.index_width


def convert_grid(grid: PixelGrid, options: ConvertOptions | None = None) -> ConversionResult:
    """Build the palette (if enabled) and map every pixel of ``grid``."""

    options = (options or ConvertOptions()).validate()
    if grid.width == 0 or grid.height == 0:
        raise ConversionError("Image has no pixels")
    color_format = options.color_format

    palette: Palette | None = None
    if options.use_palette:
        if options.palette_source is not None:
            palette = load_palette(options.palette_source, color_format)
            check_capacity(palette, options.index_width)
            validate_coverage(grid, palette, color_format)
        else:
            palette = build_palette(grid, color_format)
            check_capacity(palette, options.index_width)

    values = map_pixels(grid, color_format, palette)
    return ConversionResult(
        palette=palette,
        values=values,
        color_format=color_format,
        index_width=options.index_width,
        width=grid.width,
        height=grid.height,
    )


def convert_image_to_array(
    image: Image.Image, options: ConvertOptions | None = None
) -> ConversionResult:
    """Convert an in-memory image."""

    return convert_grid(PixelGrid.from_image(image), options)


def read_pixel_grid(path: str | Path, kind: str = "image") -> PixelGrid:
    path = Path(path)
    try:
        return load_pixel_grid(path)
    except FileNotFoundError as exc:
        raise DecodeError(f"Error opening {kind} file \"{path}\": file not found") from exc
    except (OSError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Error opening {kind} file \"{path}\": {exc}") from exc


def convert_png_to_array(
    path: str | Path,
    options: ConvertOptions | None = None,
    palette_path: str | Path | None = None,
) -> ConversionResult:
    """Decode ``path`` (and ``palette_path`` if given) and convert it.

    A ``palette_path`` takes precedence over ``options.palette_source`` for
    this call only; ``options`` itself is left untouched.
    """

    options = options or ConvertOptions()
    grid = read_pixel_grid(path, "image")
    if palette_path is not None:
        options = replace(options, palette_source=read_pixel_grid(palette_path, "palette"))
    return convert_grid(grid, options)
