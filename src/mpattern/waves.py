"""Color-cycling patterns made of a single repeated glyph.

These patterns do no shape classification: each cell's color index is a pure
function of its (line, column) position.
"""

from __future__ import annotations

import math
from typing import Iterator

from .config import PatternConfig
from .palette import Palette

GLYPH = "1"

# Number of color offsets the finale's intensity is folded into.
INTENSITY_BUCKETS = 4


def stripe_color_index(row: int, col: int) -> int:
    """Columns divisible by ``row + 1`` keep the row's base color."""

    return row if col % (row + 1) == 0 else row + 1


def wave_height(line: int, pos: int) -> int:
    return int(15 * (math.sin(pos / 5.0 + line) + 1))


def wave_color_index(line: int, pos: int) -> int:
    height = wave_height(line, pos)
    return height if pos % 2 == line % 2 else height + 1


def intensity_bucket(line: int, col: int) -> int:
    """Return the finale bucket in ``[0, INTENSITY_BUCKETS)`` for a cell.

    The raw intensity ``int((sin(col/3 + line/2) + 1) * 3.5)`` spans 0-7 and
    is folded into the buckets with a modulo.
    """

    intensity = int((math.sin(col / 3.0 + line / 2.0) + 1) * 3.5)
    return intensity % INTENSITY_BUCKETS


def finale_color_index(line: int, col: int, palette_size: int) -> int:
    return line % palette_size + intensity_bucket(line, col)


def stripe_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    for row in range(config.stripe_rows):
        yield "".join(
            palette.paint(stripe_color_index(row, col), GLYPH)
            for col in range(config.stripe_cols)
        )


def wave_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    for line in range(config.wave_lines):
        yield "".join(
            palette.paint(wave_color_index(line, pos), GLYPH)
            for pos in range(config.wave_cols)
        )


def finale_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    size = len(palette)
    for line in range(config.finale_lines):
        yield "".join(
            palette.paint(finale_color_index(line, col, size), GLYPH)
            for col in range(config.finale_cols)
        )


__all__ = [
    "INTENSITY_BUCKETS",
    "finale_color_index",
    "finale_lines",
    "intensity_bucket",
    "stripe_color_index",
    "stripe_lines",
    "wave_color_index",
    "wave_height",
    "wave_lines",
]
