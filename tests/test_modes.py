import pytest

from chinese_bitmap_font import ConfigurationError, ScriptVariant, SizeMode
from chinese_bitmap_font.modes import GLYPH_BODY, OUTLINE, SHADOW


def test_ten_pixel_geometry():
    mode = SizeMode.TEN_PIXEL
    assert mode.cell_size == 10
    assert mode.margin == 0
    assert mode.effect == SHADOW
    assert mode.halo_offsets == ((1, 1),)
    assert mode.margin + GLYPH_BODY + 1 == mode.cell_size


def test_eleven_pixel_geometry():
    mode = SizeMode.ELEVEN_PIXEL
    assert mode.cell_size == 11
    assert mode.margin == 1
    assert mode.effect == OUTLINE
    assert len(mode.halo_offsets) == 8
    assert (0, 0) not in mode.halo_offsets
    assert mode.margin * 2 + GLYPH_BODY == mode.cell_size


@pytest.mark.parametrize("pixels, expected", [
    (10, SizeMode.TEN_PIXEL),
    (11, SizeMode.ELEVEN_PIXEL),
    (SizeMode.ELEVEN_PIXEL, SizeMode.ELEVEN_PIXEL),
])
def test_from_pixels(pixels, expected):
    assert SizeMode.from_pixels(pixels) is expected


@pytest.mark.parametrize("pixels", [9, 12, 0, "10"])
def test_from_pixels_rejects_unsupported_sizes(pixels):
    with pytest.raises(ConfigurationError) as excinfo:
        SizeMode.from_pixels(pixels)
    assert excinfo.value.value == pixels


def test_script_variant_from_flag():
    assert ScriptVariant.from_flag(True) is ScriptVariant.TRADITIONAL
    assert ScriptVariant.from_flag(False) is ScriptVariant.SIMPLIFIED
