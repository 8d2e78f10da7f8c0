"""
Ratio Calculator.

Derives standard financial ratios from exactly one period of
fundamentals. Cross-period comparisons belong to the Piotroski scorer.

Every division goes through safe_divide, so a zero denominator yields
0. Ratios whose inputs the provider does not track (current assets,
gross profit, operating income) are None.
"""

from __future__ import annotations

import logging
from typing import Optional

from fundamental_signals.analytics.stats import safe_divide
from fundamental_signals.domain.entities import Fundamentals
from fundamental_signals.domain.value_objects import FinancialRatios

logger = logging.getLogger(__name__)


def _optional_divide(
    numerator: Optional[float],
    denominator: Optional[float],
) -> Optional[float]:
    if numerator is None or denominator is None:
        return None
    return safe_divide(numerator, denominator)


class RatioCalculator:
    """Computes FinancialRatios for a single Fundamentals record."""

    def calculate(self, fundamentals: Fundamentals) -> FinancialRatios:
        """
        Compute ratios for one period.

        Args:
            fundamentals: Reported figures for the period

        Returns:
            FinancialRatios with non-finite values coerced to None
        """
        f = fundamentals
        equity = f.total_equity

        ratios = FinancialRatios(
            return_on_assets=safe_divide(f.net_income, f.total_assets),
            return_on_equity=safe_divide(f.net_income, equity),
            current_ratio=_optional_divide(f.current_assets, f.current_liabilities),
            debt_to_equity=safe_divide(f.total_liabilities, equity),
            gross_margin=_optional_divide(f.gross_profit, f.revenue),
            operating_margin=_optional_divide(f.operating_income, f.revenue),
            net_margin=safe_divide(f.net_income, f.revenue),
            asset_turnover=safe_divide(f.revenue, f.total_assets),
        )
        logger.debug(f"Ratios for {f.stock_id} FY{f.fiscal_year}: {ratios}")
        return ratios
