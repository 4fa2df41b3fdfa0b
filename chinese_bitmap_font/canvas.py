"""
Canvas compositor: paste colored cells into the atlas image.
"""

from typing import Sequence

from PIL import Image

from .layout import AtlasLayout


def build_canvas(layout: AtlasLayout, cells: Sequence[Image.Image], background) -> Image.Image:
    """
    Fill a layout.width x layout.height RGB image with background and paste
    cells[i] at the origin of cell i. Cells never overlap so pasting is a
    plain overwrite.
    """
    if len(cells) != layout.count:
        raise ValueError(f"expected {layout.count} cells, got {len(cells)}")

    canvas = Image.new('RGB', layout.size, tuple(background))
    for index, cell in enumerate(cells):
        if cell.size != (layout.cell_width, layout.cell_height):
            raise ValueError(
                f"cell {index} is {cell.size[0]}x{cell.size[1]}, "
                f"expected {layout.cell_width}x{layout.cell_height}"
            )
        canvas.paste(cell, layout.origin(index))
    return canvas
