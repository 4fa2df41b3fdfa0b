"""
Atlas builder: the full glyph -> mask -> colored cell -> canvas pipeline.

Everything is validated before the first glyph is rendered, and the canvas
is only allocated once every cell has been composited, so a failure never
leaves a partial atlas behind.
"""

from typing import List

from PIL import Image

from .canvas import build_canvas
from .config import ColorConfig
from .effects import composite
from .errors import ConfigurationError, EmptyCharacterSetError, MissingGlyphError
from .layout import CharacterLayout, layout
from .mask import GlyphMask
from .modes import ScriptVariant, SizeMode
from .punctuation import placement_for
from .rasterizer import OutlineFont, rasterize


class Atlas:
    """Result of a build: the canvas plus where each character landed"""

    def __init__(self, image: Image.Image, layout: CharacterLayout, size_mode: SizeMode,
                 variant: ScriptVariant, masks: List[GlyphMask]):
        self.image = image
        self.layout = layout
        self.size_mode = size_mode
        self.variant = variant
        self.masks = masks

    @property
    def characters(self) -> List[str]:
        return self.layout.characters

    def cell_image(self, char: str) -> Image.Image:
        return self.image.crop(self.layout.rect(self.layout.index_of(char)))

    def save(self, path: str):
        self.image.save(path, format='PNG')


def render_glyph(font: OutlineFont, char: str, size_mode: SizeMode,
                 variant: ScriptVariant) -> GlyphMask:
    """Rasterize char and move punctuation to its conventional position"""
    mask = rasterize(font, char, size_mode)
    indent, offset = placement_for(char, variant)
    return mask.shifted(indent, offset)


def build_atlas(font: OutlineFont, characters, size_mode, config: ColorConfig,
                variant: ScriptVariant = ScriptVariant.SIMPLIFIED,
                verbose: bool = False) -> Atlas:
    """
    Render every character into one atlas image.

    Raises ConfigurationError for an unsupported size or bad config,
    EmptyCharacterSetError when there is nothing to render, and
    MissingGlyphError on the first character the font cannot draw.
    """
    size_mode = SizeMode.from_pixels(size_mode)
    if not isinstance(config, ColorConfig):
        raise ConfigurationError(f"expected a ColorConfig, got {type(config).__name__}", config)

    cell = size_mode.cell_size
    grid = layout(characters, config.chars_per_line, cell, cell)
    if grid.count == 0:
        raise EmptyCharacterSetError()

    if verbose:
        print(f"🎨 Rendering {grid.count} characters at {cell}px ({size_mode.effect}, {variant.value})")
        print(f"   Grid: {grid.columns} cols × {grid.rows} rows, image {grid.width}×{grid.height}")

    masks = []
    cells = []
    for index, char in enumerate(grid.characters):
        try:
            mask = render_glyph(font, char, size_mode, variant)
        except MissingGlyphError as e:
            raise MissingGlyphError(char, index) from e
        masks.append(mask)
        cells.append(composite(mask, size_mode, config))
        if verbose:
            print(f"  ✓ Rendered '{char}' (U+{ord(char):04X}) at row {index // grid.columns}, "
                  f"col {index % grid.columns}: {mask.ink_count()} ink pixels")

    image = build_canvas(grid, cells, config.background)
    return Atlas(image, grid, size_mode, variant, masks)
