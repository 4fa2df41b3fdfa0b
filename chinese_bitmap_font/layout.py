"""
Atlas layout: row-major grid packing of character cells.
"""

from typing import Dict, List, Tuple

from .config import validate_chars_per_line
from .corpus import unique_characters


class AtlasLayout:
    """Grid positions for count cells, chars_per_line cells per row"""

    def __init__(self, count: int, chars_per_line: int, cell_width: int, cell_height: int):
        self.chars_per_line = validate_chars_per_line(chars_per_line)
        self.count = count
        self.cell_width = cell_width
        self.cell_height = cell_height

    @property
    def columns(self) -> int:
        # Width is fixed by chars_per_line even when the last row is short
        return self.chars_per_line

    @property
    def rows(self) -> int:
        return (self.count + self.chars_per_line - 1) // self.chars_per_line

    @property
    def width(self) -> int:
        return self.columns * self.cell_width

    @property
    def height(self) -> int:
        return self.rows * self.cell_height

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def position(self, index: int) -> Tuple[int, int]:
        """(row, column) of the cell at index"""
        if not 0 <= index < self.count:
            raise IndexError(f"cell index {index} out of range 0-{self.count - 1}")
        return index // self.chars_per_line, index % self.chars_per_line

    def origin(self, index: int) -> Tuple[int, int]:
        """Top-left pixel (x, y) of the cell at index"""
        row, column = self.position(index)
        return column * self.cell_width, row * self.cell_height

    def rect(self, index: int) -> Tuple[int, int, int, int]:
        x, y = self.origin(index)
        return x, y, x + self.cell_width, y + self.cell_height

    def __repr__(self):
        return (f"AtlasLayout(count={self.count}, cols={self.columns}, rows={self.rows}, "
                f"cell={self.cell_width}x{self.cell_height})")


class CharacterLayout(AtlasLayout):
    """AtlasLayout bound to the characters it places"""

    def __init__(self, characters: List[str], chars_per_line: int, cell_width: int, cell_height: int):
        self.characters = unique_characters(characters)
        super().__init__(len(self.characters), chars_per_line, cell_width, cell_height)
        self._index = {c: i for i, c in enumerate(self.characters)}

    @property
    def mapping(self) -> Dict[str, Tuple[int, int]]:
        """character -> (row, column)"""
        return {c: self.position(i) for i, c in enumerate(self.characters)}

    def index_of(self, char: str) -> int:
        return self._index[char]

    def to_dict(self) -> dict:
        """Glyph map in the shape written next to the atlas image"""
        glyphs = {}
        for i, c in enumerate(self.characters):
            row, column = self.position(i)
            x, y = self.origin(i)
            glyphs[c] = {
                'index': i,
                'codepoint': f"U+{ord(c):04X}",
                'row': row,
                'column': column,
                'x': x,
                'y': y,
            }
        return {
            'cell_width': self.cell_width,
            'cell_height': self.cell_height,
            'cols': self.columns,
            'rows': self.rows,
            'count': self.count,
            'mapping': glyphs,
        }


def layout(characters, chars_per_line: int, cell_width: int, cell_height: int) -> CharacterLayout:
    """
    Assign every unique character a cell in row-major order.

    Raises ConfigurationError if chars_per_line < 1.
    """
    return CharacterLayout(list(characters), chars_per_line, cell_width, cell_height)
