"""Compose the pattern generators into the full program output."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, TextIO

from . import banners, letter, shapes, spiral, waves
from .config import DEFAULT_CONFIG, PatternConfig
from .palette import DEFAULT_PALETTE, Palette
from .perf import PerformanceTracker


LOGGER = logging.getLogger(__name__)

LineGenerator = Callable[[Palette, PatternConfig], Iterator[str]]


@dataclass(frozen=True)
class Pattern:
    """A named, independent block of output."""

    name: str
    generate: LineGenerator

    def lines(self, palette: Palette, config: PatternConfig) -> Iterator[str]:
        return self.generate(palette, config)


def default_patterns() -> List[Pattern]:
    """Return the program's blocks in print order."""

    return [
        Pattern("title", banners.title_lines),
        Pattern("letter", letter.letter_lines),
        Pattern("made_with", banners.made_with_lines),
        Pattern("ascii_m", banners.ascii_m_lines),
        Pattern("giant_ones", banners.giant_ones_lines),
        Pattern("stripes", waves.stripe_lines),
        Pattern("waves", waves.wave_lines),
        Pattern("spiral", spiral.spiral_lines),
        Pattern("diamond", shapes.diamond_lines),
        Pattern("checkerboard", shapes.checkerboard_lines),
        Pattern("finale_title", banners.finale_title_lines),
        Pattern("finale", waves.finale_lines),
        Pattern("closing", banners.closing_lines),
    ]


class Renderer:
    """Write every pattern, in order, to an output stream."""

    def __init__(
        self,
        palette: Palette = DEFAULT_PALETTE,
        config: PatternConfig = DEFAULT_CONFIG,
        patterns: Optional[Sequence[Pattern]] = None,
        tracker: Optional[PerformanceTracker] = None,
    ) -> None:
        self.palette = palette
        self.config = config
        self.patterns: List[Pattern] = list(
            default_patterns() if patterns is None else patterns
        )
        self.tracker = tracker or PerformanceTracker()

    def iter_lines(self) -> Iterator[str]:
        """Yield every output line without trailing newlines."""

        for pattern in self.patterns:
            yield from pattern.lines(self.palette, self.config)

    def render(self, stream: TextIO) -> int:
        """Write all patterns to ``stream`` and return the number of lines.

        Errors raised by ``stream`` propagate unchanged.
        """

        written = 0
        for pattern in self.patterns:
            with self.tracker.section(pattern.name) as timer:
                for line in pattern.lines(self.palette, self.config):
                    stream.write(line + "\n")
                    timer.lines += 1
            written += timer.lines
            LOGGER.debug(
                "Rendered %s: %d lines in %.3fms",
                pattern.name,
                timer.lines,
                timer.elapsed * 1000.0,
            )
        LOGGER.debug("Rendered %d patterns, %d lines", len(self.patterns), written)
        return written


def render_to_string(
    palette: Palette = DEFAULT_PALETTE,
    config: PatternConfig = DEFAULT_CONFIG,
    patterns: Optional[Sequence[Pattern]] = None,
) -> str:
    """Return the complete output as a single string."""

    buffer = io.StringIO()
    Renderer(palette, config, patterns).render(buffer)
    return buffer.getvalue()


__all__ = ["LineGenerator", "Pattern", "Renderer", "default_patterns", "render_to_string"]
