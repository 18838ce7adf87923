"""Decorative ANSI-colored pattern renderer."""

from .config import DEFAULT_CONFIG, PatternConfig
from .palette import DEFAULT_PALETTE, Palette
from .letter import LetterCell, Shape, classify_cell, shape_mask
from .spiral import SpiralGrid, build_spiral, walk_spiral
from .shapes import checker_color_index, diamond_row_counts
from .perf import PerfStat, PerformanceTracker
from .renderer import Pattern, Renderer, default_patterns, render_to_string

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PALETTE",
    "LetterCell",
    "Palette",
    "Pattern",
    "PatternConfig",
    "PerfStat",
    "PerformanceTracker",
    "Renderer",
    "Shape",
    "SpiralGrid",
    "build_spiral",
    "checker_color_index",
    "classify_cell",
    "default_patterns",
    "diamond_row_counts",
    "render_to_string",
    "shape_mask",
    "walk_spiral",
]
