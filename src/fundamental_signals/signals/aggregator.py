"""
Signal Aggregator.

Runs the configured rules over one ticker's ratios, growth rates and
F-Score, then derives an overall sentiment by majority vote.

Each call builds a fresh SignalResult; nothing accumulates between
calls, so a single aggregator can serve concurrent requests.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from fundamental_signals.adapters.clock import SystemClock
from fundamental_signals.config.models import SignalsConfig
from fundamental_signals.domain.entities import Signal, SignalResult, SignalType
from fundamental_signals.domain.value_objects import (
    FinancialRatios,
    GrowthRates,
    PiotroskiScore,
)
from fundamental_signals.errors import InsufficientDataError
from fundamental_signals.interfaces.clock import Clock
from fundamental_signals.signals.rules import (
    EfficiencyRule,
    LeverageRule,
    ProfitabilityRule,
    QualityRule,
    RuleContext,
    SignalRule,
)

logger = logging.getLogger(__name__)


def overall_sentiment(signals: Iterable[Signal]) -> SignalType:
    """
    Plurality sentiment across signals.

    The most frequent type wins even without more than half of the
    votes (2 bullish, 1 bearish, 1 neutral is bullish). Any tie for
    first place, or no signals at all, resolves to neutral.
    """
    counts = Counter(s.type for s in signals)
    if not counts:
        return SignalType.NEUTRAL

    ranked = counts.most_common()
    if len(ranked) > 1 and ranked[0][1] == ranked[1][1]:
        return SignalType.NEUTRAL
    return ranked[0][0]


def default_rules(config: SignalsConfig) -> List[SignalRule]:
    """Profitability, Leverage and Efficiency (plus Quality if enabled)."""
    thresholds = config.thresholds
    rules: List[SignalRule] = [
        ProfitabilityRule(config.profitability, thresholds),
        LeverageRule(config.leverage, thresholds),
        EfficiencyRule(config.efficiency, thresholds),
    ]
    if config.include_quality_signal:
        rules.append(QualityRule(thresholds))
    return rules


class SignalAggregator:
    """Combines ratios, growth and F-Score into a SignalResult."""

    def __init__(
        self,
        config: Optional[SignalsConfig] = None,
        rules: Optional[Sequence[SignalRule]] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize aggregator.

        Args:
            config: Signal configuration (defaults apply if omitted)
            rules: Explicit rule list; overrides the config defaults
            clock: Time source for computed_at when the caller passes none
        """
        self.config = config or SignalsConfig()
        self.clock = clock or SystemClock()
        self._rules: tuple = tuple(
            rules if rules is not None else default_rules(self.config)
        )

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def aggregate(
        self,
        ticker: str,
        ratios: Optional[FinancialRatios],
        growth_rates: Optional[GrowthRates],
        piotroski: Optional[PiotroskiScore],
        computed_at: Optional[datetime] = None,
    ) -> SignalResult:
        """
        Build the signal result for one ticker.

        Args:
            ticker: Stock identifier
            ratios: Current-period ratios
            growth_rates: Current vs prior period growth
            piotroski: F-Score for the current period
            computed_at: Timestamp to stamp on the result (read from the
                injected clock if omitted)

        Returns:
            A new SignalResult

        Raises:
            InsufficientDataError: If any input is missing; a result is
                never produced from a partial comparison
        """
        missing = [
            name
            for name, value in (
                ("ratios", ratios),
                ("growth rates", growth_rates),
                ("Piotroski score", piotroski),
            )
            if value is None
        ]
        if missing:
            raise InsufficientDataError(
                f"Cannot aggregate signals for {ticker}: "
                f"missing {', '.join(missing)}",
                ticker=ticker,
            )

        context = RuleContext(
            ticker=ticker,
            ratios=ratios,
            growth=growth_rates,
            piotroski=piotroski,
        )

        signals: List[Signal] = []
        for rule in self._rules:
            signal = rule.evaluate(context)
            if signal is not None:
                signals.append(signal)

        sentiment = overall_sentiment(signals)
        logger.debug(
            f"{ticker}: {len(signals)} signals, overall {sentiment.value} "
            f"({', '.join(f'{s.name}={s.score:.2f}' for s in signals)})"
        )

        return SignalResult(
            ticker=ticker,
            signals=tuple(signals),
            piotroski_score=piotroski,
            overall_sentiment=sentiment,
            computed_at=computed_at or self.clock.now(),
        )
