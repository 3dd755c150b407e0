"""Command line interface for img_to_array."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

from .color import parse_color_format
from .converter import ConversionError, ConvertOptions, convert_png_to_array
from .formatter import format_c_source
from .palette import parse_index_width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="img-to-array",
        description=(
            "Convert an image into C arrays (palette + pixel data) for program memory.\n"
            "Without --palette the palette is built from the image colours in scan order.\n"
            "With --palette every image colour must appear in the palette image."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("image", help="Image file to convert")
    parser.add_argument(
        "-c",
        "--colour",
        default="RGB565",
        metavar="FORMAT",
        help="Colour format ([RGB]565, RGB[888]); default RGB565",
    )
    parser.add_argument("-p", "--palette", metavar="FILE", help="Palette image file")
    parser.add_argument(
        "--palsize",
        default="8",
        metavar="SIZE",
        help="Palette index size in bits (8, 16, 32); default 8",
    )
    parser.add_argument(
        "--no-palette",
        action="store_true",
        help="Write encoded colours directly instead of palette indices",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="output.c",
        metavar="FILE",
        help="Output file name (output.c by default)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite an existing output file",
    )
    return parser


def build_options(args: argparse.Namespace) -> ConvertOptions:
    try:
        color_format = parse_color_format(args.colour)
        index_width = parse_index_width(args.palsize)
    except ValueError as exc:
        raise ConversionError(str(exc)) from exc
    return ConvertOptions(
        color_format=color_format,
        index_width=index_width,
        use_palette=not args.no_palette,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = build_options(args)
        output = Path(args.output)
        if output.exists() and not args.force:
            raise ConversionError(
                f"Output file already exists (use --force to overwrite): {output}"
            )

        palette_path = args.palette if options.use_palette else None
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = convert_png_to_array(args.image, options, palette_path=palette_path)
        for warning in caught:
            print(f"Warning: {warning.message}", file=sys.stderr)

        source = format_c_source(result)
        try:
            output.write_text(source)
        except OSError as exc:
            raise ConversionError(f"Error writing output file: {exc}") from exc
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f'Arrays written successfully to file "{output}"')
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
