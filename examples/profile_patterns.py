"""Profile pattern rendering using :mod:`mpattern.perf`.

Run with::

    PYTHONPATH=src python examples/profile_patterns.py

Output is rendered into a discarded buffer.  Pass ``--help`` to see options for
repeated renders and periodic logging summaries.
"""

from __future__ import annotations

import argparse
import io
import logging

from mpattern.perf import PerformanceTracker
from mpattern.renderer import Renderer


LOGGER = logging.getLogger(__name__)


def run_render(tracker: PerformanceTracker) -> int:
    renderer = Renderer(tracker=tracker)
    return renderer.render(io.StringIO())


def _format_summary(summary: list[dict[str, float | int | str]], limit: int = 10) -> str:
    if not summary:
        return "No timings recorded."
    parts: list[str] = []
    for row in summary[:limit]:
        total_ms = row["total"] * 1000.0
        avg_ms = row["average"] * 1000.0
        parts.append(
            (
                f"{row['name']}: total={total_ms:.3f}ms, "
                f"count={int(row['count'])}, lines={int(row['lines'])}, avg={avg_ms:.3f}ms"
            )
        )
    return "; ".join(parts)


def print_summary(tracker: PerformanceTracker, limit: int = 10) -> None:
    summary = tracker.summary(sort_by="total")
    if not summary:
        print("No timings recorded.")
        return
    width = max(len(row["name"]) for row in summary[:limit])
    header = f"{'Pattern':<{width}}  Total (ms)  Lines  Count  Avg (ms)"
    print(header)
    print("-" * len(header))
    for row in summary[:limit]:
        total_ms = row["total"] * 1000.0
        avg_ms = row["average"] * 1000.0
        print(
            f"{row['name']:<{width}}  {total_ms:10.3f}  {int(row['lines']):5d}"
            f"  {int(row['count']):5d}  {avg_ms:8.3f}"
        )


def log_summary(
    tracker: PerformanceTracker, *, limit: int, index: int
) -> list[dict[str, float | int | str]]:
    summary = tracker.summary(sort_by="total")
    limit = max(0, limit)
    limited_summary = summary[:limit] if limit else []
    message = _format_summary(limited_summary, limit=limit)
    LOGGER.info("Render %d performance: %s", index, message)
    return limited_summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--renders", type=int, default=5, help="How many full renders to run.")
    parser.add_argument(
        "--log-interval",
        type=int,
        default=0,
        help="Emit a performance summary every N renders (0 logs only the last).",
    )
    parser.add_argument(
        "--summary-limit",
        type=int,
        default=13,
        help="Maximum number of patterns to include in summaries.",
    )
    parser.add_argument(
        "--no-table",
        dest="print_table",
        action="store_false",
        help="Skip printing the final tabular summary (logging only).",
    )
    parser.set_defaults(print_table=True)
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    tracker = PerformanceTracker()
    for render_idx in range(1, args.renders + 1):
        run_render(tracker)
        should_log = render_idx == args.renders
        if args.log_interval > 0 and render_idx % args.log_interval == 0:
            should_log = True
        if should_log:
            log_summary(tracker, limit=args.summary_limit, index=render_idx)

    if args.print_table:
        print_summary(tracker, limit=args.summary_limit)


if __name__ == "__main__":
    main()
