import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.profile_patterns import log_summary, run_render
from mpattern.perf import PerformanceTracker


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_log_summary_limits_rows_and_output(caplog):
    clock = FakeClock()
    tracker = PerformanceTracker(clock=clock)
    with tracker.section("slow"):
        clock.advance(0.5)
    with tracker.section("fast"):
        clock.advance(0.1)

    with caplog.at_level(logging.INFO, logger="examples.profile_patterns"):
        summary = log_summary(tracker, limit=1, index=7)

    assert len(summary) == 1
    assert summary[0]["name"] == "slow"
    message = "".join(caplog.messages)
    assert "Render 7" in message
    assert "slow" in message
    assert "fast" not in message


def test_run_render_times_every_pattern():
    tracker = PerformanceTracker(clock=FakeClock())
    lines = run_render(tracker)
    summary = tracker.summary(sort_by="lines")
    assert len(summary) == 13
    assert sum(row["lines"] for row in summary) == lines
    assert summary[0]["name"] == "letter"
