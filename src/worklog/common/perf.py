from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class _OpStats:
    __slots__ = ("calls", "total_ms", "max_ms")

    def __init__(self):
        self.calls = 0
        self.total_ms = 0.0
        self.max_ms = 0.0

    def add(self, duration_ms: float) -> None:
        self.calls += 1
        self.total_ms += duration_ms
        if duration_ms > self.max_ms:
            self.max_ms = duration_ms


class PerformanceCollector:
    """Running totals of wall-clock durations (ms) per named operation.

    One instance is created per app and handed out by the container. Only
    aggregates are kept, so memory grows with the number of operation names,
    not with the number of calls.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._stats: dict[str, _OpStats] = {}

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        started = time.perf_counter()
        try:
            yield
        finally:
            self.record(name, (time.perf_counter() - started) * 1000.0)

    def record(self, name: str, duration_ms: float) -> None:
        with self._lock:
            stats = self._stats.get(name)
            if stats is None:
                stats = self._stats[name] = _OpStats()
            stats.add(duration_ms)
        logger.debug("%s took %.2fms", name, duration_ms)

    def summary(self) -> list[dict]:
        with self._lock:
            items = [(name, s.calls, s.total_ms, s.max_ms) for name, s in self._stats.items()]

        return [
            {
                "operation": name,
                "calls": calls,
                "averageMs": round(total / calls, 2),
                "totalMs": round(total, 2),
                "maxMs": round(peak, 2),
            }
            for name, calls, total, peak in sorted(items)
        ]

    def log_summary(self) -> None:
        for row in self.summary():
            logger.info(
                "%-40s calls=%d avg=%.2fms max=%.2fms total=%.2fms",
                row["operation"], row["calls"], row["averageMs"], row["maxMs"], row["totalMs"],
            )

    def reset(self) -> None:
        with self._lock:
            self._stats.clear()
