"""
Growth Calculator.

Period-over-period percentage growth for the headline fundamentals.
"""

from __future__ import annotations

from fundamental_signals.analytics.stats import growth_rate
from fundamental_signals.domain.entities import Fundamentals
from fundamental_signals.domain.value_objects import GrowthRates


class GrowthCalculator:
    """Computes GrowthRates between a current and a prior period."""

    def calculate(self, current: Fundamentals, prior: Fundamentals) -> GrowthRates:
        return GrowthRates(
            revenue=growth_rate(current.revenue, prior.revenue),
            net_income=growth_rate(current.net_income, prior.net_income),
            operating_cash_flow=growth_rate(
                current.operating_cash_flow, prior.operating_cash_flow
            ),
            total_assets=growth_rate(current.total_assets, prior.total_assets),
            total_liabilities=growth_rate(
                current.total_liabilities, prior.total_liabilities
            ),
        )
