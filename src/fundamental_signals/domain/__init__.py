"""
Domain Layer - Core Entities and Value Objects.

Entities:
    - Fundamentals: Reported figures for one fiscal period
    - Signal / SignalType: Scored, sentiment-classified summaries
    - SignalResult: Complete output of one signal computation

Value Objects:
    - FinancialRatios: Ratios derived from one period
    - GrowthRates: Period-over-period growth
    - PiotroskiScore: Nine-point F-Score with grouped components

Design Principles:
    - Immutable (frozen pydantic models)
    - None means "not computable", never zero
    - No infrastructure dependencies
"""

from fundamental_signals.domain.value_objects import (
    EfficiencyScore,
    FinancialRatios,
    GrowthRates,
    LeverageScore,
    PiotroskiScore,
    ProfitabilityScore,
)
from fundamental_signals.domain.entities import (
    Fundamentals,
    Signal,
    SignalResult,
    SignalType,
)

__all__ = [
    "EfficiencyScore",
    "FinancialRatios",
    "Fundamentals",
    "GrowthRates",
    "LeverageScore",
    "PiotroskiScore",
    "ProfitabilityScore",
    "Signal",
    "SignalResult",
    "SignalType",
]
