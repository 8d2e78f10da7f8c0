"""
Piotroski F-Score.

Nine binary year-over-year quality tests, one point each:

    Profitability (4): positive ROA, positive operating cash flow,
        ROA improvement, operating cash flow above net income
    Leverage & liquidity (3): lower debt-to-equity, higher current
        ratio, no new shares
    Operating efficiency (2): higher gross margin, higher asset turnover

A score of 7 or more indicates strong financial health; 3 or less
indicates potential weakness.

Any comparison where either side is not computable scores False.
"""

from __future__ import annotations

import logging
from typing import Optional

from fundamental_signals.analytics.ratios import RatioCalculator
from fundamental_signals.analytics.stats import safe_divide
from fundamental_signals.domain.entities import Fundamentals
from fundamental_signals.domain.value_objects import (
    EfficiencyScore,
    FinancialRatios,
    LeverageScore,
    PiotroskiScore,
    ProfitabilityScore,
)
from fundamental_signals.errors import InsufficientDataError

logger = logging.getLogger(__name__)


def _greater(a: Optional[float], b: Optional[float]) -> bool:
    if a is None or b is None:
        return False
    return a > b


def _less(a: Optional[float], b: Optional[float]) -> bool:
    if a is None or b is None:
        return False
    return a < b


def _asset_turnover(f: Fundamentals, ratios: FinancialRatios) -> float:
    # Supplied ratio sets may leave turnover out; revenue and assets always exist
    if ratios.asset_turnover is not None:
        return ratios.asset_turnover
    return safe_divide(f.revenue, f.total_assets)


class PiotroskiScorer:
    """Scores a period against its predecessor."""

    def __init__(self, ratio_calculator: Optional[RatioCalculator] = None) -> None:
        """
        Initialize scorer.

        Args:
            ratio_calculator: Used when ratios are not supplied to score()
        """
        self._ratios = ratio_calculator or RatioCalculator()

    def score(
        self,
        current: Optional[Fundamentals],
        prior: Optional[Fundamentals],
        current_ratios: Optional[FinancialRatios] = None,
        prior_ratios: Optional[FinancialRatios] = None,
    ) -> PiotroskiScore:
        """
        Compute the F-Score.

        Args:
            current: Fundamentals for the current period
            prior: Fundamentals for the immediately prior period
            current_ratios: Ratios for current (computed if omitted)
            prior_ratios: Ratios for prior (computed if omitted)

        Returns:
            PiotroskiScore whose total is the sum of its components

        Raises:
            InsufficientDataError: If either period is missing
        """
        if current is None or prior is None:
            present = [p for p in (current, prior) if p is not None]
            raise InsufficientDataError(
                f"Piotroski score requires two periods, got {len(present)}",
                ticker=present[0].stock_id if present else None,
                available_periods=len(present),
            )

        if current_ratios is None:
            current_ratios = self._ratios.calculate(current)
        if prior_ratios is None:
            prior_ratios = self._ratios.calculate(prior)

        result = PiotroskiScore(
            profitability=self._profitability(current, current_ratios, prior_ratios),
            leverage=self._leverage(current, prior, current_ratios, prior_ratios),
            efficiency=self._efficiency(
                current, prior, current_ratios, prior_ratios
            ),
        )
        logger.debug(
            f"Piotroski score for {current.stock_id} "
            f"FY{prior.fiscal_year}->FY{current.fiscal_year}: {result.total}/9"
        )
        return result

    def _profitability(
        self,
        current: Fundamentals,
        current_ratios: FinancialRatios,
        prior_ratios: FinancialRatios,
    ) -> ProfitabilityScore:
        return ProfitabilityScore(
            positive_roa=_greater(current_ratios.return_on_assets, 0.0),
            positive_operating_cash_flow=current.operating_cash_flow > 0,
            roa_improvement=_greater(
                current_ratios.return_on_assets, prior_ratios.return_on_assets
            ),
            # Accrual quality: earnings backed by cash
            cash_flow_greater_than_net_income=(
                current.operating_cash_flow > current.net_income
            ),
        )

    def _leverage(
        self,
        current: Fundamentals,
        prior: Fundamentals,
        current_ratios: FinancialRatios,
        prior_ratios: FinancialRatios,
    ) -> LeverageScore:
        return LeverageScore(
            decreased_leverage=_less(
                current_ratios.debt_to_equity, prior_ratios.debt_to_equity
            ),
            increased_current_ratio=_greater(
                current_ratios.current_ratio, prior_ratios.current_ratio
            ),
            no_new_shares=current.shares_outstanding <= prior.shares_outstanding,
        )

    def _efficiency(
        self,
        current: Fundamentals,
        prior: Fundamentals,
        current_ratios: FinancialRatios,
        prior_ratios: FinancialRatios,
    ) -> EfficiencyScore:
        return EfficiencyScore(
            improved_gross_margin=_greater(
                current_ratios.gross_margin, prior_ratios.gross_margin
            ),
            improved_asset_turnover=_greater(
                _asset_turnover(current, current_ratios),
                _asset_turnover(prior, prior_ratios),
            ),
        )
