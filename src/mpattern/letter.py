"""The large shaded "M" letter field.

Each cell of a ``height`` x ``width`` field is classified as one of the M's two
pillars, one of its two diagonal strokes, or background.  The first matching
shape in :data:`PRECEDENCE` wins.  A cell's *depth* (distance to the pillar's
outer edge or to the diagonal's centre line) selects both its shading glyph
and its color.

Diagonal stroke edges come from truncating ``row * SLOPE`` to an integer, so
their boundaries follow that arithmetic rather than an exact line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import PatternConfig
from .palette import ACCENT_INDEX, DIM_DOT, Palette


PILLAR_WIDTH = 9
# Horizontal distance a diagonal may reach from its centre line.
STROKE_HALF_WIDTH = 4
# Columns advanced per row along each diagonal.
SLOPE = 0.8

SOLID = "█"
DARK = "▓"
MEDIUM = "▒"
SPARKLE = "✦"
DOT = "·"


class Shape(str, Enum):
    """Classification of a single letter cell."""

    LEFT_PILLAR = "left_pillar"
    RIGHT_PILLAR = "right_pillar"
    LEFT_DIAGONAL = "left_diagonal"
    RIGHT_DIAGONAL = "right_diagonal"
    BACKGROUND = "background"


PRECEDENCE: Tuple[Shape, ...] = (
    Shape.LEFT_PILLAR,
    Shape.RIGHT_PILLAR,
    Shape.LEFT_DIAGONAL,
    Shape.RIGHT_DIAGONAL,
    Shape.BACKGROUND,
)

# Integer stored in :func:`shape_mask` grids for each shape.
SHAPE_CODES = {shape: i for i, shape in enumerate(PRECEDENCE)}


@dataclass(frozen=True)
class LetterCell:
    """Resolved appearance of one cell; ``sparkle`` overrides the glyph when set."""

    shape: Shape
    depth: int = 0
    glyph: str = " "
    color_index: int = 0
    sparkle: bool = False


def _left_centre(row: int) -> float:
    return row * SLOPE + PILLAR_WIDTH - 1


def _right_centre(row: int, width: int) -> float:
    return (width - PILLAR_WIDTH) - row * SLOPE


def memberships(row: int, col: int, height: int, width: int) -> Tuple[bool, bool, bool, bool]:
    """Return which of the four strokes contain ``(row, col)``.

    The tuple follows :data:`PRECEDENCE` order without the background entry.
    More than one flag may be set; :func:`classify_cell` resolves overlaps.
    """

    left_pillar = 0 <= col <= PILLAR_WIDTH - 1
    right_pillar = width - PILLAR_WIDTH <= col <= width - 1
    top_half = row < height // 2

    left_base = int(row * SLOPE) + PILLAR_WIDTH - 1
    left_diagonal = (
        top_half
        and left_base - STROKE_HALF_WIDTH <= col <= left_base + STROKE_HALF_WIDTH
    )
    right_base = int(_right_centre(row, width))
    right_diagonal = (
        top_half
        and right_base - STROKE_HALF_WIDTH <= col <= right_base + STROKE_HALF_WIDTH
    )
    return left_pillar, right_pillar, left_diagonal, right_diagonal


def _pillar_glyph(depth: int, row: int) -> str:
    if depth < 3:
        return SOLID
    if depth < 6:
        return DARK
    return SOLID if row % 2 == 0 else DARK


def _diagonal_glyph(depth: int) -> str:
    if depth == 0:
        return SOLID
    if depth <= 2:
        return DARK
    return MEDIUM


def classify_cell(row: int, col: int, height: int, width: int) -> LetterCell:
    """Return the :class:`LetterCell` for ``(row, col)``."""

    left_pillar, right_pillar, left_diagonal, right_diagonal = memberships(
        row, col, height, width
    )
    sparkle = (
        left_pillar or right_pillar or left_diagonal or right_diagonal
    ) and row % 7 == col % 7

    if left_pillar:
        depth = col
        return LetterCell(Shape.LEFT_PILLAR, depth, _pillar_glyph(depth, row), depth, sparkle)
    if right_pillar:
        depth = width - col - 1
        return LetterCell(Shape.RIGHT_PILLAR, depth, _pillar_glyph(depth, row), depth, sparkle)
    if left_diagonal:
        depth = int(abs(col - _left_centre(row)))
        return LetterCell(
            Shape.LEFT_DIAGONAL, depth, _diagonal_glyph(depth), depth + row // 5, sparkle
        )
    if right_diagonal:
        depth = int(abs(col - _right_centre(row, width)))
        return LetterCell(
            Shape.RIGHT_DIAGONAL, depth, _diagonal_glyph(depth), depth + row // 5, sparkle
        )
    return LetterCell(Shape.BACKGROUND)


def shape_mask(height: int, width: int) -> NDArray[np.uint8]:
    """Return a ``(height, width)`` grid of :data:`SHAPE_CODES` values."""

    mask = np.empty((height, width), dtype=np.uint8)
    for row in range(height):
        for col in range(width):
            mask[row, col] = SHAPE_CODES[classify_cell(row, col, height, width).shape]
    return mask


def render_cell(cell: LetterCell, row: int, col: int, palette: Palette) -> str:
    """Return the printable text for a classified cell."""

    if cell.sparkle:
        return palette.paint(ACCENT_INDEX, SPARKLE)
    if cell.shape is not Shape.BACKGROUND:
        return palette.paint(cell.color_index, cell.glyph)
    if row % 3 == 0 and col % 6 == 0:
        return f"{DIM_DOT}{DOT}{palette.reset}"
    return " "


def letter_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    """Yield one rendered line per row of the letter field."""

    height, width = config.letter_height, config.letter_width
    for row in range(height):
        yield "".join(
            render_cell(classify_cell(row, col, height, width), row, col, palette)
            for col in range(width)
        )


__all__ = [
    "LetterCell",
    "PRECEDENCE",
    "SHAPE_CODES",
    "Shape",
    "classify_cell",
    "letter_lines",
    "memberships",
    "render_cell",
    "shape_mask",
]
