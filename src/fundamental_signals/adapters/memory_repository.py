"""
In-Memory Fundamentals Repository.

Keeps fundamentals records in memory, keyed by ticker and fiscal year.
Suitable for tests and local runs.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, Iterable, List, Optional, Tuple

from fundamental_signals.domain.entities import Fundamentals
from fundamental_signals.errors import DuplicatePeriodError, InsufficientDataError

logger = logging.getLogger(__name__)


class InMemoryFundamentalsRepository:
    """Thread-safe in-memory store of fundamentals records."""

    def __init__(self, records: Optional[Iterable[Fundamentals]] = None) -> None:
        """
        Initialize repository.

        Args:
            records: Optional initial records
        """
        self._records: Dict[str, Dict[int, Fundamentals]] = {}
        self._lock = RLock()
        for record in records or ():
            self.add(record)

    def add(self, fundamentals: Fundamentals) -> None:
        """
        Record a fiscal period.

        Raises:
            DuplicatePeriodError: If the period is already recorded
        """
        ticker = fundamentals.stock_id.upper()
        with self._lock:
            periods = self._records.setdefault(ticker, {})
            if fundamentals.fiscal_year in periods:
                raise DuplicatePeriodError(ticker, fundamentals.fiscal_year)
            periods[fundamentals.fiscal_year] = fundamentals

    def get_periods(self, ticker: str) -> List[Fundamentals]:
        """All recorded periods for a ticker, newest first."""
        with self._lock:
            periods = self._records.get(ticker.upper(), {})
            return [periods[year] for year in sorted(periods, reverse=True)]

    def get_latest_periods(self, ticker: str) -> Tuple[Fundamentals, Fundamentals]:
        """
        Return the current and immediately prior fiscal periods.

        The two periods must be consecutive fiscal years; a gap means
        there is no year-over-year comparison to make.

        Raises:
            InsufficientDataError: If fewer than two consecutive periods exist
        """
        periods = self.get_periods(ticker)
        if len(periods) < 2:
            logger.warning(
                f"Insufficient history for {ticker}: {len(periods)} period(s)"
            )
            raise InsufficientDataError(
                f"{ticker} has {len(periods)} fiscal period(s), need 2",
                ticker=ticker,
                available_periods=len(periods),
            )
        current, prior = periods[0], periods[1]
        if current.fiscal_year - prior.fiscal_year != 1:
            logger.warning(
                f"No FY{current.fiscal_year - 1} record for {ticker}; "
                f"latest prior is FY{prior.fiscal_year}"
            )
            raise InsufficientDataError(
                f"{ticker} has no period immediately prior to "
                f"FY{current.fiscal_year}",
                ticker=ticker,
                available_periods=1,
            )
        return current, prior

    def tickers(self) -> List[str]:
        with self._lock:
            return sorted(self._records)
