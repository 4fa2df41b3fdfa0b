"""
Chinese bitmap font atlas generator.

Bakes the Han characters of a game script into a 10px (drop shadow) or
11px (outline) pixel font image.
"""

from .atlas import Atlas, build_atlas, render_glyph
from .canvas import build_canvas
from .config import ColorConfig, load_config, save_config
from .corpus import extract_characters
from .effects import composite
from .errors import (
    AtlasError,
    ConfigurationError,
    EmptyCharacterSetError,
    FontLoadError,
    MissingGlyphError,
)
from .layout import AtlasLayout, CharacterLayout, layout
from .mask import GlyphMask
from .modes import ScriptVariant, SizeMode
from .punctuation import indent_for, offset_for
from .rasterizer import OutlineFont, rasterize

__version__ = "0.1.0"
