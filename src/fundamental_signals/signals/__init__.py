"""
Signals Package - Rule-Based Sentiment Signals.

Components:
    - SignalAggregator: Runs rules, votes overall sentiment
    - ProfitabilityRule / LeverageRule / EfficiencyRule: default rules
    - QualityRule: optional F-Score summary rule
"""

from fundamental_signals.signals.aggregator import (
    SignalAggregator,
    default_rules,
    overall_sentiment,
)
from fundamental_signals.signals.rules import (
    EfficiencyRule,
    LeverageRule,
    ProfitabilityRule,
    QualityRule,
    RuleContext,
    SignalRule,
    classify,
)

__all__ = [
    "EfficiencyRule",
    "LeverageRule",
    "ProfitabilityRule",
    "QualityRule",
    "RuleContext",
    "SignalAggregator",
    "SignalRule",
    "classify",
    "default_rules",
    "overall_sentiment",
]
