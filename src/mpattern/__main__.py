"""Print every pattern to the terminal.

Run with: `python -m mpattern`

The program reads no arguments or environment.  A failed write to standard
output propagates and ends the process with a non-zero status.
"""

from __future__ import annotations

import sys

from .renderer import Renderer


def main() -> None:
    Renderer().render(sys.stdout)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
