"""
Error Taxonomy for the Signal Computation Core.

Only genuinely unanswerable requests raise. "Not computable" numbers
(median of nothing, growth against a non-positive base) are values,
represented as None, and never raise.
"""

from __future__ import annotations

from typing import List, Optional


class FundamentalSignalsError(Exception):
    """Base class for all package errors."""
    pass


class InsufficientDataError(FundamentalSignalsError):
    """Raised when fewer than two fiscal periods are available."""

    def __init__(
        self,
        message: str,
        ticker: Optional[str] = None,
        available_periods: int = 0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.ticker = ticker
        self.available_periods = available_periods


class DuplicatePeriodError(FundamentalSignalsError):
    """Raised when a fiscal period is recorded twice for the same stock."""

    def __init__(self, stock_id: str, fiscal_year: int) -> None:
        super().__init__(
            f"Fundamentals for {stock_id} FY{fiscal_year} already recorded"
        )
        self.stock_id = stock_id
        self.fiscal_year = fiscal_year


class ConfigurationError(FundamentalSignalsError):
    """Raised when a configuration source cannot be turned into a config."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        problems: Optional[List[str]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.problems = problems or []
