# renderer/tiles.py
from typing import Iterator, List, NamedTuple, Tuple


class Tile(NamedTuple):
    """Half-open pixel rectangle [x0, x1) x [y0, y1) rendered by one worker."""
    index: int
    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def pixels(self) -> Iterator[Tuple[int, int]]:
        """Yield (i, j) pixel coordinates in row-major order."""
        for j in range(self.y0, self.y1):
            for i in range(self.x0, self.x1):
                yield i, j


def _split(length: int, parts: int) -> List[Tuple[int, int]]:
    # Earlier bands absorb the remainder so band sizes differ by at most one.
    base, extra = divmod(length, parts)
    bounds = []
    start = 0
    for k in range(parts):
        size = base + (1 if k < extra else 0)
        bounds.append((start, start + size))
        start += size
    return bounds


def partition(width: int, height: int, rows: int, cols: int) -> List[Tile]:
    """
    Split a width x height image into a rows x cols grid of disjoint tiles,
    returned in row-major order. The grid is shrunk so that no tile is empty.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    if rows <= 0 or cols <= 0:
        raise ValueError(f"tile grid must be positive, got {rows}x{cols}")
    rows = min(rows, height)
    cols = min(cols, width)

    tiles = []
    for y0, y1 in _split(height, rows):
        for x0, x1 in _split(width, cols):
            tiles.append(Tile(len(tiles), x0, y0, x1, y1))
    return tiles
