"""
Size modes and script variants.

A SizeMode fixes the whole cell geometry and the effect drawn around the
glyph. It is resolved once at the start of a build and passed down as-is.
"""

from enum import Enum
from typing import Tuple

from .errors import ConfigurationError

# Fusion Pixel style glyph body: 9px of ink inside every cell
GLYPH_BODY = 9

SHADOW = "shadow"
OUTLINE = "outline"

# (dx, dy) neighbours painted in the shadow color around each ink pixel
SHADOW_OFFSETS = ((1, 1),)
OUTLINE_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class SizeMode(Enum):
    """Supported atlas pixel sizes"""

    TEN_PIXEL = 10
    ELEVEN_PIXEL = 11

    @property
    def cell_size(self) -> int:
        return self.value

    @property
    def margin(self) -> int:
        """Offset of the glyph body inside the cell"""
        return 0 if self is SizeMode.TEN_PIXEL else 1

    @property
    def effect(self) -> str:
        return SHADOW if self is SizeMode.TEN_PIXEL else OUTLINE

    @property
    def halo_offsets(self) -> Tuple[Tuple[int, int], ...]:
        return SHADOW_OFFSETS if self is SizeMode.TEN_PIXEL else OUTLINE_OFFSETS

    @classmethod
    def from_pixels(cls, pixels) -> 'SizeMode':
        """Resolve a pixel size (10 or 11) into a SizeMode"""
        if isinstance(pixels, SizeMode):
            return pixels
        try:
            return cls(pixels)
        except ValueError:
            raise ConfigurationError(
                f"only 10px or 11px is supported, got {pixels!r}", pixels
            ) from None


class ScriptVariant(Enum):
    """Han typesetting convention, affects punctuation placement only"""

    SIMPLIFIED = "zh-hans"
    TRADITIONAL = "zh-hant"

    @classmethod
    def from_flag(cls, is_zh_hant: bool) -> 'ScriptVariant':
        return cls.TRADITIONAL if is_zh_hant else cls.SIMPLIFIED
