"""
Glyph rasterizer.

Renders one character through FreeType (via Pillow) with anti-aliasing
disabled, so every pixel is either ink or background, then fits the ink
into the 9x9 glyph body of a cell.
"""

import math
import struct
from io import BytesIO
from typing import Optional

from PIL import Image, ImageDraw, ImageFont
from fontTools.ttLib import TTFont, TTLibError

from .errors import FontLoadError, MissingGlyphError
from .mask import GlyphMask
from .modes import GLYPH_BODY, SizeMode
from .punctuation import is_punctuation

# 6.75 pt = 9 px, rendered at twice that as line height (ascent - descent)
LINE_HEIGHT_PX = GLYPH_BODY * 0.75 * 2.0


class OutlineFont:
    """A TrueType/OpenType font held in memory, with its character map"""

    def __init__(self, font_data: bytes, name: str = "<memory>"):
        self.name = name
        self._data = font_data

        try:
            tt = TTFont(BytesIO(font_data))
        except (TTLibError, struct.error) as e:
            raise FontLoadError(name, e) from e
        try:
            self._cmap = dict(tt.getBestCmap() or {})
            self.units_per_em = tt['head'].unitsPerEm
            self.ascent = tt['hhea'].ascent
            self.descent = tt['hhea'].descent
        except (TTLibError, KeyError, struct.error) as e:
            raise FontLoadError(name, e) from e
        finally:
            tt.close()

        line_units = self.ascent - self.descent
        if line_units <= 0:
            line_units = self.units_per_em
        # Pixel size of the em square so that ascent - descent == LINE_HEIGHT_PX
        self.pixel_size = LINE_HEIGHT_PX * self.units_per_em / line_units
        self._face: Optional[ImageFont.FreeTypeFont] = None

    @classmethod
    def from_file(cls, path: str) -> 'OutlineFont':
        with open(path, 'rb') as f:
            return cls(f.read(), name=str(path))

    @property
    def face(self) -> ImageFont.FreeTypeFont:
        if self._face is None:
            self._face = ImageFont.truetype(BytesIO(self._data), self.pixel_size)
        return self._face

    def has_glyph(self, char: str) -> bool:
        return self._cmap.get(ord(char)) not in (None, '.notdef')

    def __len__(self):
        return len(self._cmap)

    def __repr__(self):
        return f"OutlineFont({self.name!r}, glyphs={len(self._cmap)})"


def _render_scratch(font: OutlineFont, char: str):
    """
    Draw char on a scratch image with the pen at (pad, pad) and the ascender
    line on y = pad. Returns (binary image, pad).
    """
    pad = max(GLYPH_BODY, int(math.ceil(font.pixel_size)))
    size = pad * 4
    img = Image.new('L', (size, size), 0)
    draw = ImageDraw.Draw(img)
    draw.fontmode = "1"
    draw.text((pad, pad), char, font=font.face, fill=255, anchor='la')
    return img.point(lambda v: 255 if v > 127 else 0), pad


def _fit_to_body(width: int, height: int, left_bearing: int, top_bearing: int):
    """Choose the top-left corner of the ink inside the 9x9 body"""
    if width + left_bearing > GLYPH_BODY:
        # A few glyphs are wider than the body once the bearing is added, drop it
        x = 0
    elif width < GLYPH_BODY and width + left_bearing == GLYPH_BODY:
        # Narrow glyphs (日, 口, 目...) lean one pixel left
        x = left_bearing - 1
    else:
        x = left_bearing

    if height + top_bearing > GLYPH_BODY:
        # Tall glyphs sit on the bottom of the body
        y = GLYPH_BODY - height
    else:
        y = top_bearing

    return max(x, 0), max(y, 0)


def rasterize(font: OutlineFont, char: str, size_mode: SizeMode) -> GlyphMask:
    """
    Render char into a mask the size of one cell.

    The ink is placed inside the glyph body, which starts at
    (size_mode.margin, size_mode.margin). Punctuation marks are anchored at
    the body origin and left for the punctuation table to position.

    Raises MissingGlyphError if the font has no glyph for char or the
    glyph has no outline to draw.
    """
    if not font.has_glyph(char):
        raise MissingGlyphError(char)

    cell = size_mode.cell_size
    margin = size_mode.margin

    scratch, pad = _render_scratch(font, char)
    bbox = scratch.getbbox()
    if bbox is None:
        # Mapped, but the outline draws no ink
        raise MissingGlyphError(char)

    left, top, right, bottom = bbox
    ink = GlyphMask.from_image(scratch.crop(bbox))

    if is_punctuation(char):
        x, y = 0, 0
    else:
        x, y = _fit_to_body(ink.width, ink.height, left - pad, top - pad)

    # Clip to the body so nothing lands in the effect margin
    body_end = margin + GLYPH_BODY
    points = []
    for ix, iy in ink.ink_pixels():
        px, py = margin + x + ix, margin + y + iy
        if px < body_end and py < body_end:
            points.append((px, py))
    return GlyphMask.from_points(cell, cell, points)
