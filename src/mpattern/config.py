"""Fixed dimensions for every pattern."""

from __future__ import annotations

from dataclasses import dataclass, fields


# Size of the big letter field.
LETTER_HEIGHT = 60
LETTER_WIDTH = 120

SPIRAL_SIZE = 30
DIAMOND_SIZE = 20

# Left padding in front of the spiral, diamond and checkerboard rows.
MARGIN = 5


@dataclass(frozen=True)
class PatternConfig:
    """Dimensions used by the pattern generators.

    The defaults are the program's fixed output.  Nothing reads external
    configuration; smaller instances exist for tests and profiling.
    """

    letter_height: int = LETTER_HEIGHT
    letter_width: int = LETTER_WIDTH
    stripe_rows: int = 15
    stripe_cols: int = 110
    wave_lines: int = 10
    wave_cols: int = 100
    spiral_size: int = SPIRAL_SIZE
    diamond_size: int = DIAMOND_SIZE
    checker_rows: int = 15
    checker_cols: int = 50
    finale_lines: int = 30
    finale_cols: int = 110
    margin: int = MARGIN

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "margin":
                if value < 0:
                    raise ValueError("margin must not be negative")
            elif value <= 0:
                raise ValueError(f"{f.name} must be positive, got {value}")
        if self.spiral_size % 2:
            raise ValueError("spiral_size must be even")
        # Both pillars are nine columns wide.
        if self.letter_width < 18:
            raise ValueError("letter_width must leave room for both pillars")

    @property
    def pad(self) -> str:
        return " " * self.margin


DEFAULT_CONFIG = PatternConfig()


__all__ = ["DEFAULT_CONFIG", "PatternConfig"]
