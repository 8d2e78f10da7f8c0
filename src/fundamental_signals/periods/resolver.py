"""
Period Resolver - Filing-Quarter Date Arithmetic.

Institutional (13F) filings are due 45 days after quarter end:
    Q1 (Mar 31) -> May 15, Q2 (Jun 30) -> Aug 14,
    Q3 (Sep 30) -> Nov 14, Q4 (Dec 31) -> Feb 14

The resolver picks a quarter old enough that major filers have certainly
reported. The month -> quarter mapping is a declarative table
(FilingCalendarConfig) so the policy can change without touching code.

"now" is always an argument. Nothing here reads the system clock.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field

from fundamental_signals.config.models import FilingCalendarConfig

logger = logging.getLogger(__name__)

_QUARTER_END_MONTH_DAY: Dict[int, Tuple[int, int]] = {
    1: (3, 31),
    2: (6, 30),
    3: (9, 30),
    4: (12, 31),
}


class FilingQuarter(BaseModel):
    """A calendar quarter identified by year and quarter number."""

    year: int
    quarter: int = Field(..., ge=1, le=4)

    model_config = {"frozen": True}

    def as_tuple(self) -> Tuple[int, int]:
        return self.year, self.quarter

    @property
    def end_date(self) -> datetime:
        return quarter_end_date(self.year, self.quarter)

    def previous(self) -> FilingQuarter:
        year, quarter = previous_quarter(self.year, self.quarter)
        return FilingQuarter(year=year, quarter=quarter)

    def __str__(self) -> str:
        return f"{self.year}Q{self.quarter}"


def previous_quarter(year: int, quarter: int) -> Tuple[int, int]:
    """Return the quarter before (year, quarter), wrapping Q1 to Q4."""
    quarter -= 1
    if quarter < 1:
        quarter = 4
        year -= 1
    return year, quarter


def quarter_end_date(year: int, quarter: int) -> datetime:
    """Calendar end of a quarter in UTC. Quarters outside 1-3 are Q4."""
    month, day = _QUARTER_END_MONTH_DAY.get(quarter, _QUARTER_END_MONTH_DAY[4])
    return datetime(year, month, day, tzinfo=timezone.utc)


class PeriodResolver:
    """
    Maps a point in time to the most recent complete filing quarter.

    Stateless after construction; safe to share across threads.
    """

    def __init__(self, config: Optional[FilingCalendarConfig] = None) -> None:
        """
        Initialize with a filing calendar.

        Args:
            config: Filing calendar (defaults to the 13F deadline table)
        """
        self.config = config or FilingCalendarConfig()
        self._by_month: Dict[int, Tuple[int, int]] = {}
        for rule in self.config.rules:
            for month in rule.months:
                self._by_month[month] = (rule.year_offset, rule.quarter)

    def most_recent_filing_quarter(
        self,
        now: Union[date, datetime],
    ) -> Tuple[int, int]:
        """
        Resolve the safe filing quarter for a given moment.

        Args:
            now: The reference date/time (explicit, never sampled)

        Returns:
            Tuple of (year, quarter)
        """
        year_offset, quarter = self._by_month[now.month]
        year = now.year + year_offset
        logger.debug(f"Filing quarter for {now.isoformat()}: {year}Q{quarter}")
        return year, quarter

    def resolve(self, now: Union[date, datetime]) -> FilingQuarter:
        """Same as most_recent_filing_quarter, as a FilingQuarter."""
        year, quarter = self.most_recent_filing_quarter(now)
        return FilingQuarter(year=year, quarter=quarter)
