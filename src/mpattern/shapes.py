"""Diamond and checkerboard fills."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .banners import section_title
from .config import PatternConfig
from .palette import Palette


def diamond_row_counts(size: int) -> List[Tuple[int, int]]:
    """Return ``(pad, glyphs)`` for each of the ``size`` diamond rows.

    Row ``i`` holds ``size - 2 * abs(size // 2 - i)`` glyphs, peaking on the
    middle row.  Each glyph is two columns wide, so padding by the
    complementary ``size - glyphs`` spaces keeps the diamond centred and
    ``pad + glyphs`` equal to ``size`` on every row.
    """

    counts = []
    for i in range(size):
        glyphs = size - 2 * abs(size // 2 - i)
        counts.append((size - glyphs, glyphs))
    return counts


def diamond_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    yield section_title(palette, "DIAMOND OF 1's")
    for i, (pad, glyphs) in enumerate(diamond_row_counts(config.diamond_size)):
        cells = "".join(palette.paint(i + o % 2, "1 ") for o in range(glyphs))
        yield config.pad + " " * pad + cells


def checker_color_index(i: int, j: int) -> int:
    """Even ``i + j`` cells take the row's color, odd cells the next one."""

    return i if (i + j) % 2 == 0 else i + 1


def checkerboard_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    yield section_title(palette, "CHECKERBOARD OF 1's")
    for i in range(config.checker_rows):
        cells = "".join(
            palette.paint(checker_color_index(i, j), "11")
            for j in range(config.checker_cols)
        )
        yield config.pad + cells


__all__ = [
    "checker_color_index",
    "checkerboard_lines",
    "diamond_lines",
    "diamond_row_counts",
]
