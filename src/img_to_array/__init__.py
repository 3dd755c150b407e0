"""Image to C array converter.

Turns an image into a palette of packed colours (RGB565 or RGB888) and an
array of palette indices, ready to be compiled into program memory. It can be
invoked through the CLI (``python -m img_to_array``) or imported to convert
an image or pixel grid in memory.
"""

from .color import ColorFormat, decode, encode, parse_color_format
from .converter import (
    ColorNotInPaletteError,
    ConversionError,
    ConversionResult,
    ConvertOptions,
    DecodeError,
    InternalLookupError,
    PaletteCapacityError,
    convert_grid,
    convert_image_to_array,
    convert_png_to_array,
)
from .formatter import format_c_source
from .grid import PixelGrid
from .mapper import map_pixels
from .palette import Palette, build_palette, load_palette, validate_coverage

__all__ = [
    "ColorFormat",
    "ColorNotInPaletteError",
    "ConversionError",
    "ConversionResult",
    "ConvertOptions",
    "DecodeError",
    "InternalLookupError",
    "Palette",
    "PaletteCapacityError",
    "PixelGrid",
    "build_palette",
    "convert_grid",
    "convert_image_to_array",
    "convert_png_to_array",
    "decode",
    "encode",
    "format_c_source",
    "load_palette",
    "map_pixels",
    "parse_color_format",
    "validate_coverage",
]
