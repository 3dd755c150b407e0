import pytest

from img_to_array import PixelGrid

BLACK = (0, 0, 0, 255)
LIGHT_RED = (255, 128, 128, 255)
MID_RED = (255, 0, 0, 255)
DARK_RED = (128, 0, 0, 255)

_K, _L, _M, _D = BLACK, LIGHT_RED, MID_RED, DARK_RED

HEART_ROWS = [
    [_K, _M, _M, _K, _M, _M, _K],
    [_M, _D, _M, _M, _M, _L, _M],
    [_M, _D, _M, _M, _M, _M, _M],
    [_K, _M, _M, _M, _M, _M, _K],
    [_K, _K, _M, _M, _M, _K, _K],
    [_K, _K, _K, _M, _K, _K, _K],
    [_K, _K, _K, _K, _K, _K, _K],
]


@pytest.fixture
def heart_rows() -> list:
    return [list(row) for row in HEART_ROWS]


@pytest.fixture
def heart_grid() -> PixelGrid:
    """7x7 image drawn with black and three shades of red."""
    return PixelGrid.from_rows(HEART_ROWS)


@pytest.fixture
def heart_palette_grid() -> PixelGrid:
    """1x4 palette image: black, light red, mid red, dark red."""
    return PixelGrid.from_rows([[BLACK, LIGHT_RED, MID_RED, DARK_RED]])
