"""
Signal Rules - One Rule per Signal Category.

Each rule turns a RuleContext into a single Signal:
    - ProfitabilityRule: return on assets, earnings growth, F-Score
      profitability group
    - LeverageRule: debt-to-equity, liability growth, F-Score leverage
      group
    - EfficiencyRule: asset turnover, revenue growth, F-Score
      efficiency group
    - QualityRule: overall F-Score (optional)

Design Notes:
    - Scores combine a ratio level, a growth trend and the F-Score group
      fraction, weighted equally; factors that are not computable are
      left out of the mean
    - Descriptions are built from the same factors that drive the score
    - Rules are stateless; thresholds and ranges come from config
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from fundamental_signals.analytics.stats import clamp, percentile_in_range
from fundamental_signals.config.models import (
    EfficiencySignalConfig,
    FactorRange,
    LeverageSignalConfig,
    ProfitabilitySignalConfig,
    ThresholdConfig,
)
from fundamental_signals.domain.entities import Signal, SignalType
from fundamental_signals.domain.value_objects import (
    FinancialRatios,
    GrowthRates,
    PiotroskiScore,
)

logger = logging.getLogger(__name__)

PROFITABILITY = "Profitability"
LEVERAGE = "Leverage"
EFFICIENCY = "Efficiency"
QUALITY = "Quality"


@dataclass(frozen=True)
class RuleContext:
    """All inputs available to signal rules for one ticker."""

    ticker: str
    ratios: FinancialRatios
    growth: GrowthRates
    piotroski: PiotroskiScore


class SignalRule(Protocol):
    """Protocol for signal rules."""

    @property
    def name(self) -> str:
        ...

    def evaluate(self, context: RuleContext) -> Optional[Signal]:
        ...


def classify(score: float, thresholds: ThresholdConfig) -> SignalType:
    """Map a [0, 1] score onto a sentiment."""
    if score >= thresholds.bullish:
        return SignalType.BULLISH
    if score <= thresholds.bearish:
        return SignalType.BEARISH
    return SignalType.NEUTRAL


def factor_score(value: Optional[float], range_: FactorRange) -> Optional[float]:
    """Position of value within range_ on [0, 1], None if not computable."""
    if value is None:
        return None
    position = percentile_in_range(value, range_.min, range_.max) / 100
    return position if range_.higher_is_better else 1.0 - position


def combine(factors: List[Optional[float]]) -> float:
    """Equal-weighted mean of the computable factors."""
    present = [f for f in factors if f is not None]
    if not present:
        return 0.5
    return clamp(sum(present) / len(present), 0.0, 1.0)


def _level(factor: Optional[float], thresholds: ThresholdConfig) -> str:
    if factor is None:
        return "unknown"
    if factor >= thresholds.bullish:
        return "strong"
    if factor <= thresholds.bearish:
        return "weak"
    return "moderate"


def _change(label: str, rate: Optional[float]) -> Optional[str]:
    if rate is None:
        return None
    direction = "up" if rate >= 0 else "down"
    return f"{label} {direction} {abs(rate):.1f}%"


def _sentence(phrases: List[Optional[str]]) -> str:
    parts = [p for p in phrases if p]
    if len(parts) > 1:
        text = ", ".join(parts[:-1]) + " and " + parts[-1]
    else:
        text = parts[0] if parts else "No contributing factors available"
    return text[0].upper() + text[1:]


class ProfitabilityRule:
    """Profitability: ROA level, net income trend, F-Score group."""

    def __init__(
        self,
        config: ProfitabilitySignalConfig,
        thresholds: ThresholdConfig,
    ) -> None:
        self.config = config
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return PROFITABILITY

    def evaluate(self, context: RuleContext) -> Optional[Signal]:
        roa = context.ratios.return_on_assets
        group = context.piotroski.profitability
        ratio_factor = factor_score(roa, self.config.return_on_assets)
        growth_factor = factor_score(
            context.growth.net_income, self.config.net_income_growth
        )
        score = combine([ratio_factor, growth_factor, group.fraction])

        level = _level(ratio_factor, self.thresholds)
        if roa is None:
            roa_phrase = "return on assets not computable"
        else:
            roa_phrase = f"{level} return on assets ({roa:.1%})"
        cash_phrase = (
            "positive cash flow"
            if group.positive_operating_cash_flow
            else "negative operating cash flow"
        )
        accrual_phrase = (
            None
            if group.cash_flow_greater_than_net_income
            else "earnings not backed by cash"
        )

        return Signal(
            name=self.name,
            type=classify(score, self.thresholds),
            score=score,
            description=_sentence(
                [
                    roa_phrase,
                    cash_phrase,
                    accrual_phrase,
                    _change("net income", context.growth.net_income),
                ]
            ),
        )


class LeverageRule:
    """Leverage: debt-to-equity level, liability trend, F-Score group."""

    def __init__(
        self,
        config: LeverageSignalConfig,
        thresholds: ThresholdConfig,
    ) -> None:
        self.config = config
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return LEVERAGE

    def evaluate(self, context: RuleContext) -> Optional[Signal]:
        de = context.ratios.debt_to_equity
        group = context.piotroski.leverage
        ratio_factor = factor_score(de, self.config.debt_to_equity)
        growth_factor = factor_score(
            context.growth.total_liabilities, self.config.total_liabilities_growth
        )
        score = combine([ratio_factor, growth_factor, group.fraction])

        # Factor is inverted: strong factor means low debt
        level = {"strong": "low", "weak": "high"}.get(
            _level(ratio_factor, self.thresholds), "moderate"
        )
        if de is None:
            de_phrase = "debt-to-equity not computable"
        else:
            de_phrase = f"{level} debt-to-equity ({de:.2f})"

        return Signal(
            name=self.name,
            type=classify(score, self.thresholds),
            score=score,
            description=_sentence(
                [
                    de_phrase,
                    "falling leverage" if group.decreased_leverage else "leverage not reduced",
                    "improving liquidity" if group.increased_current_ratio else None,
                    "no share dilution" if group.no_new_shares else "new shares issued",
                    _change("liabilities", context.growth.total_liabilities),
                ]
            ),
        )


class EfficiencyRule:
    """Efficiency: asset turnover level, revenue trend, F-Score group."""

    def __init__(
        self,
        config: EfficiencySignalConfig,
        thresholds: ThresholdConfig,
    ) -> None:
        self.config = config
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return EFFICIENCY

    def evaluate(self, context: RuleContext) -> Optional[Signal]:
        turnover = context.ratios.asset_turnover
        group = context.piotroski.efficiency
        ratio_factor = factor_score(turnover, self.config.asset_turnover)
        growth_factor = factor_score(
            context.growth.revenue, self.config.revenue_growth
        )
        score = combine([ratio_factor, growth_factor, group.fraction])

        level = {"strong": "high", "weak": "low"}.get(
            _level(ratio_factor, self.thresholds), "moderate"
        )
        if turnover is None:
            turnover_phrase = "asset turnover not computable"
        else:
            turnover_phrase = f"{level} asset turnover ({turnover:.2f}x)"

        return Signal(
            name=self.name,
            type=classify(score, self.thresholds),
            score=score,
            description=_sentence(
                [
                    turnover_phrase,
                    "improving gross margin" if group.improved_gross_margin else None,
                    "improving asset turnover" if group.improved_asset_turnover else None,
                    _change("revenue", context.growth.revenue),
                ]
            ),
        )


class QualityRule:
    """Quality: overall F-Score as a fraction of nine."""

    def __init__(self, thresholds: ThresholdConfig) -> None:
        self.thresholds = thresholds

    @property
    def name(self) -> str:
        return QUALITY

    def evaluate(self, context: RuleContext) -> Optional[Signal]:
        piotroski = context.piotroski
        score = piotroski.total / 9
        return Signal(
            name=self.name,
            type=classify(score, self.thresholds),
            score=score,
            description=(
                f"{piotroski.strength.capitalize()} Piotroski F-Score of "
                f"{piotroski.total}/9"
            ),
        )
