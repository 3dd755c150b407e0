from pathlib import Path

import pytest
from PIL import Image

from img_to_array.cli import main


def _write_png(path: Path, pixels, size) -> Path:
    image = Image.new("RGB", size)
    image.putdata(pixels)
    image.save(path)
    return path


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    return _write_png(tmp_path / "in.png", [(0, 0, 0), (255, 0, 0), (255, 0, 0), (0, 0, 255)], (2, 2))


def test_writes_output_file(tmp_path: Path, image_path: Path, capsys) -> None:
    output = tmp_path / "out.c"
    assert main([str(image_path), "-o", str(output)]) == 0

    text = output.read_text()
    assert "const uint16_t palette[3] PROGMEM" in text
    assert "0,1,1,2," in text
    assert f'Arrays written successfully to file "{output}"' in capsys.readouterr().out


def test_colour_and_palsize_options(tmp_path: Path, image_path: Path) -> None:
    output = tmp_path / "out.c"
    assert main([str(image_path), "-o", str(output), "-c", "888", "--palsize", "16"]) == 0

    text = output.read_text()
    assert "const uint32_t palette[3] PROGMEM" in text
    assert "const uint16_t image_data[4] PROGMEM" in text


def test_no_palette_option(tmp_path: Path, image_path: Path) -> None:
    output = tmp_path / "out.c"
    assert main([str(image_path), "-o", str(output), "--no-palette"]) == 0
    assert "palette" not in output.read_text()


def test_missing_palette_colour_writes_nothing(tmp_path: Path, image_path: Path, capsys) -> None:
    palette = _write_png(tmp_path / "pal.png", [(0, 0, 0), (255, 0, 0)], (2, 1))
    output = tmp_path / "out.c"

    assert main([str(image_path), "-p", str(palette), "-o", str(output)]) == 1
    assert not output.exists()
    assert "isn't present in the palette" in capsys.readouterr().err


def test_duplicate_palette_entries_are_reported(tmp_path: Path, image_path: Path, capsys) -> None:
    palette = _write_png(
        tmp_path / "pal.png",
        [(0, 0, 0), (255, 0, 0), (0, 0, 255), (0, 0, 0)],
        (4, 1),
    )
    output = tmp_path / "out.c"

    assert main([str(image_path), "-p", str(palette), "-o", str(output)]) == 0
    assert "Warning: Palette image contains 1 duplicate" in capsys.readouterr().err


def test_refuses_to_overwrite_without_force(tmp_path: Path, image_path: Path) -> None:
    output = tmp_path / "out.c"
    output.write_text("keep")

    assert main([str(image_path), "-o", str(output)]) == 1
    assert output.read_text() == "keep"
    assert main([str(image_path), "-o", str(output), "--force"]) == 0
    assert output.read_text().startswith("#include <stdint.h>")


def test_unknown_colour_format(tmp_path: Path, image_path: Path, capsys) -> None:
    assert main([str(image_path), "-o", str(tmp_path / "out.c"), "-c", "RGB444"]) == 1
    assert "Unknown colour format RGB444" in capsys.readouterr().err


def test_unknown_palette_size(tmp_path: Path, image_path: Path, capsys) -> None:
    assert main([str(image_path), "-o", str(tmp_path / "out.c"), "--palsize", "12"]) == 1
    assert "Unknown palette size 12" in capsys.readouterr().err


def test_missing_image(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "nope.png"), "-o", str(tmp_path / "out.c")]) == 1
    assert "Error opening image file" in capsys.readouterr().err


def test_oversized_image_reports_error(tmp_path: Path, capsys, monkeypatch) -> None:
    big = tmp_path / "big.png"
    Image.new("RGB", (20, 20)).save(big)
    output = tmp_path / "out.c"
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)

    assert main([str(big), "-o", str(output)]) == 1
    assert not output.exists()
    assert "Error opening image file" in capsys.readouterr().err
