"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator


class FilingRule(BaseModel):
    """Maps a set of calendar months to the safe filing quarter."""

    months: List[int] = Field(..., min_length=1)
    quarter: int = Field(..., ge=1, le=4)
    year_offset: int = Field(default=0, ge=-1, le=0)

    @model_validator(mode="after")
    def _check_months(self) -> "FilingRule":
        for month in self.months:
            if not 1 <= month <= 12:
                raise ValueError(f"month {month} outside 1-12")
        return self


def _default_filing_rules() -> List[FilingRule]:
    # 13F filings are due 45 days after quarter end
    return [
        FilingRule(months=[1, 2], quarter=3, year_offset=-1),
        FilingRule(months=[3, 4, 5], quarter=4, year_offset=-1),
        FilingRule(months=[6, 7, 8], quarter=1),
        FilingRule(months=[9, 10, 11], quarter=2),
        FilingRule(months=[12], quarter=3),
    ]


class FilingCalendarConfig(BaseModel):
    """Configuration for the filing-quarter resolver."""

    rules: List[FilingRule] = Field(default_factory=_default_filing_rules)

    @model_validator(mode="after")
    def _check_coverage(self) -> "FilingCalendarConfig":
        seen: List[int] = []
        for rule in self.rules:
            for month in rule.months:
                if month in seen:
                    raise ValueError(f"month {month} mapped by more than one rule")
                seen.append(month)
        missing = sorted(set(range(1, 13)) - set(seen))
        if missing:
            raise ValueError(f"months without a filing rule: {missing}")
        return self


class FactorRange(BaseModel):
    """Range used to map a raw factor onto [0, 1]."""

    min: float
    max: float
    higher_is_better: bool = True


class ThresholdConfig(BaseModel):
    """Score cut-offs for sentiment classification."""

    bullish: float = Field(default=0.6, ge=0, le=1)
    bearish: float = Field(default=0.4, ge=0, le=1)

    @model_validator(mode="after")
    def _check_order(self) -> "ThresholdConfig":
        if self.bearish >= self.bullish:
            raise ValueError(
                f"bearish threshold {self.bearish} must be below "
                f"bullish threshold {self.bullish}"
            )
        return self


class ProfitabilitySignalConfig(BaseModel):
    """Profitability signal: return on assets and earnings growth."""

    return_on_assets: FactorRange = Field(
        default_factory=lambda: FactorRange(min=-0.05, max=0.15)
    )
    net_income_growth: FactorRange = Field(
        default_factory=lambda: FactorRange(min=-25.0, max=25.0)
    )


class LeverageSignalConfig(BaseModel):
    """Leverage signal: debt-to-equity and liability growth."""

    debt_to_equity: FactorRange = Field(
        default_factory=lambda: FactorRange(min=0.0, max=2.0, higher_is_better=False)
    )
    total_liabilities_growth: FactorRange = Field(
        default_factory=lambda: FactorRange(
            min=-25.0, max=25.0, higher_is_better=False
        )
    )


class EfficiencySignalConfig(BaseModel):
    """Efficiency signal: asset turnover and revenue growth."""

    asset_turnover: FactorRange = Field(
        default_factory=lambda: FactorRange(min=0.0, max=2.0)
    )
    revenue_growth: FactorRange = Field(
        default_factory=lambda: FactorRange(min=-25.0, max=25.0)
    )


class SignalsConfig(BaseModel):
    """Configuration for signal aggregation."""

    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    profitability: ProfitabilitySignalConfig = Field(
        default_factory=ProfitabilitySignalConfig
    )
    leverage: LeverageSignalConfig = Field(default_factory=LeverageSignalConfig)
    efficiency: EfficiencySignalConfig = Field(
        default_factory=EfficiencySignalConfig
    )
    include_quality_signal: bool = False


class FundamentalSignalsConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    filing_calendar: FilingCalendarConfig = Field(
        default_factory=FilingCalendarConfig,
    )
    signals: SignalsConfig = Field(default_factory=SignalsConfig)

    model_config = {"populate_by_name": True}
