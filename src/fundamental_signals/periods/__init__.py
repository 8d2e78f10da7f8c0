"""
Periods Package - Fiscal Quarter Arithmetic.

Used by ingestion scheduling to decide which quarter's institutional
filings to request. Has no data dependency on the scoring components.
"""

from fundamental_signals.periods.resolver import (
    FilingQuarter,
    PeriodResolver,
    previous_quarter,
    quarter_end_date,
)

__all__ = [
    "FilingQuarter",
    "PeriodResolver",
    "previous_quarter",
    "quarter_end_date",
]
