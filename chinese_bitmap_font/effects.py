"""
Effect compositor: turn a glyph mask into a colored cell.

10px cells get a drop shadow one pixel down-right of every ink pixel,
11px cells get a one pixel outline on all eight sides. Character color
always wins over the shadow/outline color.
"""

from PIL import Image

from .config import ColorConfig
from .mask import GlyphMask
from .modes import SizeMode


def halo_pixels(mask: GlyphMask, size_mode: SizeMode):
    """Cell coordinates that get the shadow/outline color"""
    halo = set()
    for x, y in mask.ink_pixels():
        for dx, dy in size_mode.halo_offsets:
            hx, hy = x + dx, y + dy
            if 0 <= hx < mask.width and 0 <= hy < mask.height and not mask[hx, hy]:
                halo.add((hx, hy))
    return halo


def composite(mask: GlyphMask, size_mode: SizeMode, colors: ColorConfig) -> Image.Image:
    """Return an RGB cell of the mask's size with glyph, effect and background painted"""
    cell = Image.new('RGB', (mask.width, mask.height), colors.background)
    pixels = cell.load()

    for x, y in halo_pixels(mask, size_mode):
        pixels[x, y] = colors.shadow
    for x, y in mask.ink_pixels():
        pixels[x, y] = colors.character

    return cell
