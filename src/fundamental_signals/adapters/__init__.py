"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the interfaces package, following the
Hexagonal Architecture (Ports & Adapters) pattern.

Repositories:
    - InMemoryFundamentalsRepository: Fundamentals kept in memory

Clocks:
    - SystemClock: UTC wall clock
    - FixedClock: Frozen instant for tests and replays

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Serialization:
    - wire_format: SignalResult -> JSON wire shape

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from fundamental_signals.adapters.clock import FixedClock, SystemClock
from fundamental_signals.adapters.memory_repository import (
    InMemoryFundamentalsRepository,
)
from fundamental_signals.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_signals.adapters.wire_format import to_json, to_wire

__all__ = [
    "FixedClock",
    "InMemoryFundamentalsRepository",
    "InMemoryMetricsCollector",
    "SystemClock",
    "to_json",
    "to_wire",
]
