"""
In-Memory Metrics Collector.

A simple metrics collector that stores metrics in memory.
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        with self._lock:
            self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        with self._lock:
            self._record(name, "count", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """Summary per metric name: count, total and last value."""
        with self._lock:
            summary = {}
            for name, entries in self._metrics.items():
                values = [e["value"] for e in entries]
                summary[name] = {
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
            return summary

    def get_tagged(self, name: str) -> List[Dict[str, str]]:
        """Tags of every entry recorded under name."""
        with self._lock:
            return [dict(e["tags"]) for e in self._metrics.get(name, [])]

    def clear(self) -> None:
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: Any,
        tags: Optional[Dict[str, str]],
    ) -> None:
        self._metrics.setdefault(name, []).append(
            {
                "type": metric_type,
                "value": value,
                "tags": tags or {},
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )
