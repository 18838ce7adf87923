import pytest

from mpattern.perf import PerformanceTracker


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_tracker_records_basic_stats():
    clock = FakeClock()
    tracker = PerformanceTracker(clock=clock)
    with tracker.section("letter") as timer:
        clock.advance(0.5)
        timer.lines = 60
    assert timer.elapsed == pytest.approx(0.5)
    summary = tracker.summary()
    assert len(summary) == 1
    row = summary[0]
    assert row["name"] == "letter"
    assert row["count"] == 1
    assert row["lines"] == 60
    assert row["total"] == pytest.approx(0.5)
    assert row["average"] == pytest.approx(0.5)
    assert row["min"] == pytest.approx(0.5)
    assert row["max"] == pytest.approx(0.5)


def test_repeated_sections_aggregate():
    clock = FakeClock()
    tracker = PerformanceTracker(clock=clock)
    for delta in (0.1, 0.3):
        with tracker.section("spiral") as timer:
            clock.advance(delta)
            timer.lines = 32
    stat = tracker.snapshot()["spiral"]
    assert stat.count == 2
    assert stat.lines == 64
    assert stat.average == pytest.approx(0.2)
    assert stat.min_time == pytest.approx(0.1)
    assert stat.max_time == pytest.approx(0.3)


def test_nested_sections_rejected():
    tracker = PerformanceTracker(clock=FakeClock())
    with pytest.raises(RuntimeError):
        with tracker.section("outer"):
            with tracker.section("inner"):
                pass


def test_summary_sorting_and_errors():
    clock = FakeClock()
    tracker = PerformanceTracker(clock=clock)
    with tracker.section("a") as timer:
        clock.advance(0.1)
        timer.lines = 5
    with tracker.section("b") as timer:
        clock.advance(0.3)
        timer.lines = 1
    summary = tracker.summary(sort_by="total")
    assert [row["name"] for row in summary] == ["b", "a"]
    summary = tracker.summary(sort_by="lines")
    assert summary[0]["name"] == "a"
    with pytest.raises(ValueError):
        tracker.summary(sort_by="unknown")


def test_disable_enable_and_reset():
    clock = FakeClock()
    tracker = PerformanceTracker(clock=clock)
    tracker.disable()
    with tracker.section("ignored") as timer:
        clock.advance(0.4)
    assert timer.elapsed == 0.0
    assert tracker.summary() == []
    tracker.enable()
    with tracker.section("active"):
        clock.advance(0.2)
    assert tracker.summary()[0]["name"] == "active"
    tracker.reset()
    assert tracker.summary() == []


def test_disable_during_open_section_releases_it():
    clock = FakeClock()
    tracker = PerformanceTracker(clock=clock)
    with tracker.section("letter"):
        clock.advance(0.1)
        tracker.disable()
    assert tracker.summary() == []
    tracker.enable()
    with tracker.section("spiral"):
        clock.advance(0.2)
    assert [row["name"] for row in tracker.summary()] == ["spiral"]
