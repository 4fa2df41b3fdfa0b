import pytest
from PIL import Image

from chinese_bitmap_font import AtlasLayout, build_canvas

BG = (45, 45, 45)


def _cell(color, size=10):
    return Image.new('RGB', (size, size), color)


def test_fills_background_and_pastes_cells():
    grid = AtlasLayout(3, 2, 10, 10)
    cells = [_cell((255, 0, 0)), _cell((0, 255, 0)), _cell((0, 0, 255))]
    canvas = build_canvas(grid, cells, BG)
    assert canvas.size == (20, 20)
    assert canvas.mode == 'RGB'
    assert canvas.getpixel((0, 0)) == (255, 0, 0)
    assert canvas.getpixel((19, 9)) == (0, 255, 0)
    assert canvas.getpixel((5, 15)) == (0, 0, 255)
    # unused cell in the last row
    assert canvas.getpixel((15, 15)) == BG


def test_every_cell_lands_at_its_origin():
    grid = AtlasLayout(5, 3, 11, 11)
    cells = [_cell((i * 40, 0, 0), 11) for i in range(5)]
    canvas = build_canvas(grid, cells, BG)
    for i in range(5):
        x, y = grid.origin(i)
        assert canvas.crop((x, y, x + 11, y + 11)).getcolors() == [(121, (i * 40, 0, 0))]


def test_cell_count_must_match_layout():
    with pytest.raises(ValueError):
        build_canvas(AtlasLayout(2, 2, 10, 10), [_cell(BG)], BG)


def test_cell_size_must_match_layout():
    with pytest.raises(ValueError):
        build_canvas(AtlasLayout(1, 1, 10, 10), [_cell(BG, 11)], BG)
