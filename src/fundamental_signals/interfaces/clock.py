"""
Clock Protocol.

Wall-clock time source. Injected wherever a "now" is needed so that
computations are reproducible under test.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Abstract time source."""

    def now(self) -> datetime:
        """Current time, timezone-aware."""
        ...
