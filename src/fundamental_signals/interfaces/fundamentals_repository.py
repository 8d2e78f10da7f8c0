"""
Fundamentals Repository Protocol.

Defines the abstract interface for fundamentals data access. The
signal core never fetches data itself; it asks a repository for the
two most recent fiscal periods of a ticker.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Records are immutable; a new period is a new record
    - Retry/timeout policy belongs to implementations, not the core
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Tuple, runtime_checkable

if TYPE_CHECKING:
    from fundamental_signals.domain.entities import Fundamentals


@runtime_checkable
class FundamentalsRepository(Protocol):
    """Abstract interface for fundamentals access."""

    def get_latest_periods(self, ticker: str) -> Tuple[Fundamentals, Fundamentals]:
        """
        Return the current and immediately prior fiscal periods.

        Args:
            ticker: Stock identifier

        Returns:
            Tuple of (current, prior)

        Raises:
            InsufficientDataError: If fewer than two periods exist
        """
        ...
