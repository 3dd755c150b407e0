"""Render conversion results as C source arrays."""

from __future__ import annotations

from typing import Iterable, List

from .color import ColorFormat, format_color
from .converter import ConversionResult

LINE_WIDTH = 80
INDENT = "    "


def format_values(items: Iterable[str], separator: str) -> List[str]:
    """Pack items into indented lines no longer than ``LINE_WIDTH``.

    Every item keeps its trailing separator.
    """

    lines: List[str] = []
    line = INDENT
    for item in items:
        to_add = f"{item}{separator}"
        if line.strip() and len(line) + len(to_add.rstrip()) > LINE_WIDTH:
            lines.append(line.rstrip())
            line = INDENT
        line += to_add
    if line.strip():
        lines.append(line.rstrip())
    return lines


def _color_type(color_format: ColorFormat) -> str:
    return f"uint{color_format.bits}_t"


def format_c_source(
    result: ConversionResult,
    palette_name: str = "palette",
    data_name: str = "image_data",
) -> str:
    out = ["#include <stdint.h>", ""]
    color_format = result.color_format

    if result.palette is not None:
        out.append(
            f"const {_color_type(color_format)} {palette_name}[{len(result.palette)}] PROGMEM = {{"
        )
        out.extend(format_values((format_color(c, color_format) for c in result.palette), ", "))
        out.append("};")
        items = (str(v) for v in result.values)
        separator = ","
    else:
        items = (format_color(v, color_format) for v in result.values)
        separator = ", "

    out.append(f"const uint{result.value_bits}_t {data_name}[{len(result.values)}] PROGMEM = {{")
    out.extend(format_values(items, separator))
    out.append("};")
    return "\n".join(out) + "\n"
