"""
Value Objects for Domain Layer.

Value objects are immutable objects derived from fundamentals. They are
recomputed on demand and never persisted on their own.

A numeric field set to None is "not computable". It is never a stand-in
for zero.
"""

from __future__ import annotations

import math
from typing import ClassVar, Optional

from pydantic import BaseModel, Field, computed_field, field_validator


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return value if math.isfinite(value) else None


class FinancialRatios(BaseModel):
    """Standard ratios derived from a single period's fundamentals."""

    return_on_assets: Optional[float] = None
    return_on_equity: Optional[float] = None
    current_ratio: Optional[float] = None
    debt_to_equity: Optional[float] = None
    gross_margin: Optional[float] = None
    operating_margin: Optional[float] = None
    net_margin: Optional[float] = None
    asset_turnover: Optional[float] = None

    model_config = {"frozen": True}

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_non_finite(cls, v: Optional[float]) -> Optional[float]:
        # inf/NaN collapse to "not computable"
        return _finite_or_none(v)


class GrowthRates(BaseModel):
    """Period-over-period growth in percent."""

    revenue: Optional[float] = None
    net_income: Optional[float] = None
    operating_cash_flow: Optional[float] = None
    total_assets: Optional[float] = None
    total_liabilities: Optional[float] = None

    model_config = {"frozen": True}

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_non_finite(cls, v: Optional[float]) -> Optional[float]:
        return _finite_or_none(v)


class ProfitabilityScore(BaseModel):
    """Piotroski profitability tests (0-4 points)."""

    positive_roa: bool = False
    positive_operating_cash_flow: bool = False
    roa_improvement: bool = False
    cash_flow_greater_than_net_income: bool = False

    model_config = {"frozen": True}

    @computed_field
    @property
    def points(self) -> int:
        return sum(
            (
                self.positive_roa,
                self.positive_operating_cash_flow,
                self.roa_improvement,
                self.cash_flow_greater_than_net_income,
            )
        )

    @property
    def fraction(self) -> float:
        return self.points / 4


class LeverageScore(BaseModel):
    """Piotroski leverage and liquidity tests (0-3 points)."""

    decreased_leverage: bool = False
    increased_current_ratio: bool = False
    no_new_shares: bool = False

    model_config = {"frozen": True}

    @computed_field
    @property
    def points(self) -> int:
        return sum(
            (
                self.decreased_leverage,
                self.increased_current_ratio,
                self.no_new_shares,
            )
        )

    @property
    def fraction(self) -> float:
        return self.points / 3


class EfficiencyScore(BaseModel):
    """Piotroski operating efficiency tests (0-2 points)."""

    improved_gross_margin: bool = False
    improved_asset_turnover: bool = False

    model_config = {"frozen": True}

    @computed_field
    @property
    def points(self) -> int:
        return sum((self.improved_gross_margin, self.improved_asset_turnover))

    @property
    def fraction(self) -> float:
        return self.points / 2


class PiotroskiScore(BaseModel):
    """
    Nine-point Piotroski F-Score.

    The total is always derived from the nine component booleans and
    cannot be set directly.
    """

    profitability: ProfitabilityScore = Field(default_factory=ProfitabilityScore)
    leverage: LeverageScore = Field(default_factory=LeverageScore)
    efficiency: EfficiencyScore = Field(default_factory=EfficiencyScore)

    model_config = {"frozen": True}

    STRONG_THRESHOLD: ClassVar[int] = 7
    WEAK_THRESHOLD: ClassVar[int] = 3

    @computed_field
    @property
    def total(self) -> int:
        return (
            self.profitability.points
            + self.leverage.points
            + self.efficiency.points
        )

    @property
    def strength(self) -> str:
        """strong (>= 7), weak (<= 3) or moderate."""
        if self.total >= self.STRONG_THRESHOLD:
            return "strong"
        if self.total <= self.WEAK_THRESHOLD:
            return "weak"
        return "moderate"

