"""Light-weight timing of pattern rendering."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterator, List, Optional


@dataclass
class PerfStat:
    """Aggregated timing information for a single pattern."""

    count: int = 0
    total: float = 0.0
    lines: int = 0
    min_time: Optional[float] = None
    max_time: float = 0.0

    def add(self, elapsed: float, lines: int) -> None:
        """Update the aggregates with a new timing sample."""

        self.count += 1
        self.total += elapsed
        self.lines += lines
        if self.min_time is None or elapsed < self.min_time:
            self.min_time = elapsed
        if elapsed > self.max_time:
            self.max_time = elapsed

    @property
    def average(self) -> float:
        """Return the average time per render in seconds."""

        return self.total / self.count if self.count else 0.0


class _PerfTimer:
    """Context manager that records one pattern's runtime and output size."""

    __slots__ = ("_tracker", "_name", "_start", "lines", "elapsed")

    def __init__(self, tracker: "PerformanceTracker", name: str) -> None:
        self._tracker = tracker
        self._name = name
        self._start: Optional[float] = None
        self.lines = 0
        self.elapsed = 0.0

    def __enter__(self) -> "_PerfTimer":
        self._start = self._tracker._begin(self._name)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = self._tracker._end(self._name, self._start, self.lines)
        self._start = None
        return False


class PerformanceTracker:
    """Collect execution time statistics for labelled patterns."""

    def __init__(
        self,
        *,
        clock: Optional[Callable[[], float]] = None,
        enabled: bool = True,
    ) -> None:
        self._clock = clock or time.perf_counter
        self.enabled = enabled
        self._stats: Dict[str, PerfStat] = {}
        self._active: Optional[str] = None

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def reset(self) -> None:
        """Clear accumulated statistics."""

        self._stats.clear()
        self._active = None

    # Internal helpers -------------------------------------------------
    def _begin(self, name: str) -> Optional[float]:
        if not self.enabled:
            return None
        if self._active is not None:
            raise RuntimeError(f"Section {self._active!r} is still running")
        self._active = name
        return self._clock()

    def _end(self, name: str, start: Optional[float], lines: int) -> float:
        if start is None:
            return 0.0
        if self._active != name:
            raise RuntimeError("Timer out of sync")
        self._active = None
        if not self.enabled:
            return 0.0
        elapsed = self._clock() - start
        stat = self._stats.get(name)
        if stat is None:
            stat = PerfStat()
            self._stats[name] = stat
        stat.add(elapsed, lines)
        return elapsed

    # Public API -------------------------------------------------------
    def section(self, name: str) -> _PerfTimer:
        """Return a context manager tracking ``name``'s runtime.

        Set ``lines`` on the returned timer before it exits to record how much
        output the section produced.
        """

        return _PerfTimer(self, name)

    def snapshot(self) -> Dict[str, PerfStat]:
        """Return a copy of the accumulated statistics."""

        return {name: replace(stat) for name, stat in self._stats.items()}

    def iter_stats(self) -> Iterator[tuple[str, PerfStat]]:
        for name, stat in self._stats.items():
            yield name, stat

    def summary(
        self, *, sort_by: str = "total", descending: bool = True
    ) -> List[Dict[str, float | int | str]]:
        """Return a sorted summary of the collected statistics."""

        key_map = {
            "total": lambda item: item[1].total,
            "count": lambda item: item[1].count,
            "lines": lambda item: item[1].lines,
            "average": lambda item: item[1].average,
            "max": lambda item: item[1].max_time,
            "min": lambda item: item[1].min_time if item[1].min_time is not None else 0.0,
        }
        if sort_by not in key_map:
            raise ValueError(f"Unknown sort key: {sort_by}")
        items = sorted(self._stats.items(), key=key_map[sort_by], reverse=descending)
        return [
            {
                "name": name,
                "count": stat.count,
                "lines": stat.lines,
                "total": stat.total,
                "average": stat.average,
                "min": stat.min_time if stat.min_time is not None else 0.0,
                "max": stat.max_time,
            }
            for name, stat in items
        ]


__all__ = ["PerfStat", "PerformanceTracker"]
