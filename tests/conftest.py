from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from chinese_bitmap_font import ColorConfig, OutlineFont

# units_per_em 1000, ascent - descent 1350 -> em renders at exactly 10px
UNITS_PER_EM = 1000
ASCENT = 1000
DESCENT = -350


def _box_glyph(*boxes):
    pen = TTGlyphPen(None)
    for x0, y0, x1, y1 in boxes:
        pen.moveTo((x0, y0))
        pen.lineTo((x0, y1))
        pen.lineTo((x1, y1))
        pen.lineTo((x1, y0))
        pen.closePath()
    return pen.glyph()


# glyph name -> (code point, boxes in font units)
GLYPHS = {
    "A": (0x41, [(100, 0, 700, 700)]),
    "B": (0x42, [(100, 0, 300, 700), (300, 500, 700, 700)]),
    "uni4E00": (0x4E00, [(0, 300, 900, 400)]),           # 一
    "uni53E3": (0x53E3, [(100, 0, 800, 800)]),           # 口
    "uni3002": (0x3002, [(100, 0, 300, 200)]),           # 。
    "uniFF0C": (0xFF0C, [(100, -100, 200, 200)]),        # ，
    "uni4E09": (0x4E09, []),                             # 三, mapped but no outline
}


def build_test_font() -> bytes:
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    glyph_order = [".notdef"] + list(GLYPHS)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({code: name for name, (code, _) in GLYPHS.items()})

    glyphs = {".notdef": _box_glyph((50, 0, 450, 700))}
    for name, (_, boxes) in GLYPHS.items():
        glyphs[name] = _box_glyph(*boxes)
    fb.setupGlyf(glyphs)

    glyph_table = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (1000, getattr(glyph_table[name], "xMin", 0)) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "AtlasTest", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT,
                usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    buf = BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope="session")
def font_bytes():
    return build_test_font()


@pytest.fixture
def font(font_bytes):
    return OutlineFont(font_bytes, name="AtlasTest")


@pytest.fixture
def font_file(tmp_path, font_bytes):
    path = tmp_path / "atlas-test.ttf"
    path.write_bytes(font_bytes)
    return path


@pytest.fixture
def colors():
    return ColorConfig()
