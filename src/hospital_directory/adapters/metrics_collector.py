"""
In-Memory Metrics Collector.

Keeps load counters and timings in memory, keyed by metric name.
"""

from __future__ import annotations

from collections import defaultdict
from threading import Lock
from typing import Any, DefaultDict, Dict, List, Optional


class InMemoryMetricsCollector:
    """Thread-safe counters and timings."""

    def __init__(self) -> None:
        self._counts: DefaultDict[str, int] = defaultdict(int)
        self._timings: DefaultDict[str, List[float]] = defaultdict(list)
        self._lock = Lock()

    @staticmethod
    def _key(name: str, tags: Optional[Dict[str, str]]) -> str:
        if not tags:
            return name
        rendered = ",".join(f"{k}={v}" for k, v in sorted(tags.items()))
        return f"{name}{{{rendered}}}"

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        with self._lock:
            self._timings[self._key(name, tags)].append(duration_seconds)

    def record_count(
        self,
        name: str,
        value: int = 1,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Add value to a counter."""
        with self._lock:
            self._counts[self._key(name, tags)] += value

    def count(self, name: str, tags: Optional[Dict[str, str]] = None) -> int:
        with self._lock:
            return self._counts.get(self._key(name, tags), 0)

    def get_metrics(self) -> Dict[str, Any]:
        """Snapshot of counters and timing summaries."""
        with self._lock:
            summary: Dict[str, Any] = dict(self._counts)
            for key, values in self._timings.items():
                summary[key] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
            return summary

    def clear(self) -> None:
        with self._lock:
            self._counts.clear()
            self._timings.clear()
