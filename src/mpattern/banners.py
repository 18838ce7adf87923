"""Static banner and box-drawing art printed between the patterns."""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

from .config import PatternConfig
from .palette import ACCENT_INDEX, Palette


BOX_INNER = 115
TITLE_RULE = 30

# (color index, text) rows of the block-letter M.
ASCII_M: Tuple[Tuple[int, str], ...] = (
    (6, "                          ████████╗    ████████╗"),
    (5, "                          ███╔═══██║  ██╔═══███║"),
    (4, "                          ███║   ╚██████╔   ███║"),
    (3, "                          ███║    ╚════╝    ███║"),
    (2, "                          ███║             ███║"),
    (1, "                          ███║             ███║"),
    (0, "                          ████████╗     ████████╗"),
)

CLOSING_ART: Tuple[Tuple[int, str], ...] = (
    (4, "           " + "██╗    ██╗ " * 6 + "██╗    ██╗"),
    (3, "          " + "████║  ████║" * 7),
    (2, "         " + "██╔═██╗" * 12),
    (1, "        ██║" + "  ████║" * 12),
)


def box_top() -> str:
    return "╔" + "═" * BOX_INNER + "╗"


def box_bottom() -> str:
    return "╚" + "═" * BOX_INNER + "╝"


def box_row(text: str, trailing: int) -> str:
    return "║" + " " * 36 + text + " " * trailing + "║"


def framed_title(text: str) -> str:
    """Return a ``╔═══ TEXT ═══╗`` section header."""

    rule = "═" * TITLE_RULE
    return f"╔{rule} {text} {rule}╗"


def section_title(palette: Palette, text: str) -> str:
    return palette.paint(ACCENT_INDEX, framed_title(text))


def _painted(palette: Palette, rows: Sequence[Tuple[int, str]]) -> Iterator[str]:
    for index, text in rows:
        yield palette.paint(index, text)


def title_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    yield palette.paint(ACCENT_INDEX, box_top())
    yield palette.paint(ACCENT_INDEX, box_row("MAGNIFICENT 3D M PATTERN", 54))
    yield palette.paint(ACCENT_INDEX, box_bottom())
    yield ""


def made_with_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    edge = palette.paint(ACCENT_INDEX, "║")
    yield ""
    yield palette.paint(ACCENT_INDEX, box_top())
    yield edge + palette.paint(3, "  Made with " + "1" * 97 + "  ") + edge
    yield edge + palette.paint(2, "  " + "1" * 106 + "  ") + edge
    yield edge + palette.paint(1, "  " + "1" * 106 + "  ") + edge
    yield palette.paint(ACCENT_INDEX, box_bottom())


def ascii_m_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    yield from _painted(palette, ASCII_M)


def giant_ones_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    solid = "1" * 114
    gapped = "111  " * 21 + "111"
    yield ""
    yield from _painted(
        palette,
        ((5, solid), (4, solid), (3, gapped), (2, gapped), (1, solid), (0, solid)),
    )


def finale_title_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    yield ""
    yield palette.paint(ACCENT_INDEX, box_top())
    yield palette.paint(ACCENT_INDEX, box_row("MASSIVE 1's FINALE", 61))
    yield palette.paint(ACCENT_INDEX, box_bottom())


def closing_lines(palette: Palette, config: PatternConfig) -> Iterator[str]:
    rule = "═" * BOX_INNER
    yield ""
    yield palette.paint(ACCENT_INDEX, rule)
    yield from _painted(palette, CLOSING_ART)
    yield palette.paint(0, rule)
    yield ""
    yield palette.paint(ACCENT_INDEX, " " * 36 + "✨ MAGNIFICENT M ✨")
    yield ""


__all__ = [
    "ascii_m_lines",
    "box_bottom",
    "box_top",
    "closing_lines",
    "finale_title_lines",
    "framed_title",
    "giant_ones_lines",
    "made_with_lines",
    "section_title",
    "title_lines",
]
