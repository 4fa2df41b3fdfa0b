"""
Monochrome glyph masks.
"""

from typing import Iterator, Tuple

from PIL import Image


class GlyphMask:
    """Immutable grid of ink / no-ink pixels, indexed as mask[x, y]"""

    __slots__ = ('width', 'height', '_rows')

    def __init__(self, width: int, height: int, rows: Tuple[Tuple[bool, ...], ...] = None):
        if rows is None:
            rows = tuple((False,) * width for _ in range(height))
        if len(rows) != height or any(len(row) != width for row in rows):
            raise ValueError(f"mask rows do not match {width}x{height}")
        self.width = width
        self.height = height
        self._rows = tuple(tuple(bool(v) for v in row) for row in rows)

    @classmethod
    def blank(cls, width: int, height: int) -> 'GlyphMask':
        return cls(width, height)

    @classmethod
    def from_points(cls, width: int, height: int, points) -> 'GlyphMask':
        """Build a mask from (x, y) ink coordinates, dropping any outside the grid"""
        grid = [[False] * width for _ in range(height)]
        for x, y in points:
            if 0 <= x < width and 0 <= y < height:
                grid[y][x] = True
        return cls(width, height, tuple(tuple(row) for row in grid))

    @classmethod
    def from_image(cls, img: Image.Image, threshold: int = 127) -> 'GlyphMask':
        """Binarize a grayscale image: pixels above threshold are ink"""
        img = img.convert('L')
        width, height = img.size
        pixels = img.load()
        rows = tuple(
            tuple(pixels[x, y] > threshold for x in range(width))
            for y in range(height)
        )
        return cls(width, height, rows)

    def __getitem__(self, xy: Tuple[int, int]) -> bool:
        x, y = xy
        return self._rows[y][x]

    def is_ink(self, x: int, y: int) -> bool:
        """Ink test that treats everything outside the grid as background"""
        return 0 <= x < self.width and 0 <= y < self.height and self._rows[y][x]

    def ink_pixels(self) -> Iterator[Tuple[int, int]]:
        for y, row in enumerate(self._rows):
            for x, ink in enumerate(row):
                if ink:
                    yield x, y

    def ink_count(self) -> int:
        return sum(sum(row) for row in self._rows)

    def bbox(self):
        """(left, top, right, bottom) of the ink, exclusive on the right/bottom, or None"""
        points = list(self.ink_pixels())
        if not points:
            return None
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return min(xs), min(ys), max(xs) + 1, max(ys) + 1

    def shifted(self, dx: int, dy: int) -> 'GlyphMask':
        """Move the ink by (dx, dy); ink pushed past an edge is clipped, never wrapped"""
        if dx == 0 and dy == 0:
            return self
        return GlyphMask.from_points(
            self.width, self.height,
            ((x + dx, y + dy) for x, y in self.ink_pixels()),
        )

    def to_ascii(self, ink: str = "█", blank: str = " ") -> str:
        lines = ["|" + "".join(ink if v else blank for v in row) + "|" for row in self._rows]
        border = "─" * (self.width + 2)
        return "\n".join([border] + lines + [border])

    def __eq__(self, other):
        if not isinstance(other, GlyphMask):
            return NotImplemented
        return (self.width, self.height, self._rows) == (other.width, other.height, other._rows)

    def __hash__(self):
        return hash((self.width, self.height, self._rows))

    def __repr__(self):
        return f"GlyphMask({self.width}x{self.height}, ink={self.ink_count()})"
