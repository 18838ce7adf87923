"""Square spiral of stamped cells.

A cursor starts at the centre of the square heading "up" and turns 90 degrees
at each corner of the classic square spiral.  After ``size * size`` steps it
has visited every cell of the square exactly once, stamping each with the step
number which later selects the cell's color.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import PatternConfig
from .banners import section_title
from .palette import Palette


EMPTY = -1
GLYPH = "1"

Grid = NDArray[np.int32]


def walk_spiral(size: int) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(step, x, y)`` for each of the ``size * size`` cursor positions.

    Coordinates are relative to the spiral's centre, with ``y`` growing
    downwards.  For an even ``size`` every position satisfies
    ``-size // 2 < x, y <= size // 2``.
    """

    x, y = 0, 0
    dx, dy = 0, -1
    for step in range(size * size):
        yield step, x, y
        if x == y or (x < 0 and x == -y) or (x > 0 and x == 1 - y):
            dx, dy = -dy, dx
        x, y = x + dx, y + dy


class SpiralGrid:
    """Stamped step numbers for a ``size`` x ``size`` spiral."""

    def __init__(self, size: int) -> None:
        if size <= 0 or size % 2:
            raise ValueError("Spiral size must be a positive even number")
        self.size = size
        self.half = size // 2
        self.cells: Grid = np.full((size, size), EMPTY, dtype=np.int32)

    def in_bounds(self, x: int, y: int) -> bool:
        return -self.half < x <= self.half and -self.half < y <= self.half

    def index(self, x: int, y: int) -> Tuple[int, int]:
        """Return the ``(row, col)`` grid index for spiral coordinates."""

        return y + self.half - 1, x + self.half - 1

    def stamp(self, x: int, y: int, step: int) -> bool:
        """Record ``step`` at ``(x, y)``.

        Returns ``False`` without touching the grid when the position lies
        outside the square.
        """

        if not self.in_bounds(x, y):
            return False
        self.cells[self.index(x, y)] = step
        return True

    def get_cell(self, row: int, col: int) -> int:
        """Return the step stamped at ``(row, col)`` or ``EMPTY``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if 0 <= row < self.size and 0 <= col < self.size:
            return int(self.cells[row, col])
        raise IndexError("Cell out of bounds")

    def is_full(self) -> bool:
        return bool(np.all(self.cells != EMPTY))


def build_spiral(size: int) -> SpiralGrid:
    grid = SpiralGrid(size)
    for step, x, y in walk_spiral(size):
        grid.stamp(x, y, step)
    return grid


def spiral_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    yield section_title(palette, "SPIRAL OF 1's")
    grid = build_spiral(config.spiral_size)
    for row in grid.cells:
        cells = [
            "  " if step == EMPTY else palette.paint(int(step), GLYPH) + " "
            for step in row
        ]
        yield config.pad + "".join(cells)


__all__ = ["EMPTY", "SpiralGrid", "build_spiral", "spiral_lines", "walk_spiral"]
