"""Color palette definitions and ANSI escape helpers.

Every pattern picks its colors through a :class:`Palette`.  Indices are wrapped
modulo the palette length so any integer selects a valid color; callers never
need to bounds-check the arithmetic that produced the index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"


def fg256(code: int) -> str:
    """Return the SGR escape selecting 256-color foreground ``code``."""

    return f"{CSI}38;5;{code}m"


# Warm gradient from bright red through yellow to light green.
DEFAULT_CODES: Tuple[int, ...] = (196, 202, 208, 214, 220, 226, 190, 154)

# Index of the highlight color used for banners and sparkles.
ACCENT_INDEX = 5

# Dim grey used for the dotted background texture.
DIM_DOT = fg256(236)


@dataclass(frozen=True)
class Palette:
    """Ordered, immutable set of color tokens plus a reset token."""

    colors: Tuple[str, ...]
    reset: str = RESET

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("Palette requires at least one color")
        # Accept any sequence but store a tuple so the palette stays hashable.
        object.__setattr__(self, "colors", tuple(self.colors))

    def __len__(self) -> int:
        return len(self.colors)

    def color_at(self, index: int) -> str:
        """Return the color token for ``index``.

        Parameters
        ----------
        index:
            Any integer.  Values are wrapped around the palette length using
            Python's modulo, which is never negative for a positive divisor,
            so ``color_at(-1)`` returns the last color.
        """

        return self.colors[index % len(self.colors)]

    def paint(self, index: int, text: str) -> str:
        """Return ``text`` wrapped in the color at ``index`` and the reset token."""

        return f"{self.color_at(index)}{text}{self.reset}"

    @classmethod
    def from_codes(cls, codes: Sequence[int], reset: str = RESET) -> "Palette":
        """Build a palette of 256-color foreground escapes from ``codes``."""

        return cls(tuple(fg256(code) for code in codes), reset)


DEFAULT_PALETTE = Palette.from_codes(DEFAULT_CODES)


__all__ = [
    "ACCENT_INDEX",
    "CSI",
    "DEFAULT_CODES",
    "DEFAULT_PALETTE",
    "DIM_DOT",
    "ESC",
    "Palette",
    "RESET",
    "fg256",
]
