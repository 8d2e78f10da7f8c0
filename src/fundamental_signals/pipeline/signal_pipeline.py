"""
Signal Pipeline - Main Orchestrator.

Coordinates one signal computation:

    repository -> (current, prior) -> RatioCalculator (x2)
        -> GrowthCalculator -> PiotroskiScorer -> SignalAggregator
        -> SignalResult

The pipeline holds only its collaborators; every call builds fresh
values, so one instance can serve concurrent request handlers.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional, Protocol

from fundamental_signals.adapters.clock import SystemClock
from fundamental_signals.analytics.growth import GrowthCalculator
from fundamental_signals.analytics.ratios import RatioCalculator
from fundamental_signals.config.models import FundamentalSignalsConfig
from fundamental_signals.domain.entities import Fundamentals, SignalResult
from fundamental_signals.errors import InsufficientDataError
from fundamental_signals.interfaces.clock import Clock
from fundamental_signals.interfaces.fundamentals_repository import (
    FundamentalsRepository,
)
from fundamental_signals.scoring.piotroski import PiotroskiScorer
from fundamental_signals.signals.aggregator import SignalAggregator

logger = logging.getLogger(__name__)


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...


class SignalPipeline:
    """Computes SignalResults from repository-supplied fundamentals."""

    def __init__(
        self,
        repository: Optional[FundamentalsRepository] = None,
        config: Optional[FundamentalSignalsConfig] = None,
        clock: Optional[Clock] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        aggregator: Optional[SignalAggregator] = None,
    ) -> None:
        """
        Initialize pipeline with its dependencies.

        Args:
            repository: Source of fundamentals (required for compute())
            config: Configuration (defaults apply if omitted)
            clock: Time source for computed_at (UTC wall clock if omitted)
            metrics_collector: Optional timing/count sink
            aggregator: Custom aggregator (built from config if omitted)
        """
        self.repository = repository
        self.config = config or FundamentalSignalsConfig()
        self.clock = clock or SystemClock()
        self.metrics_collector = metrics_collector
        self.ratio_calculator = RatioCalculator()
        self.growth_calculator = GrowthCalculator()
        self.scorer = PiotroskiScorer(self.ratio_calculator)
        self.aggregator = aggregator or SignalAggregator(
            self.config.signals, clock=self.clock
        )

    def compute(self, ticker: str) -> SignalResult:
        """
        Compute signals for a ticker using the repository.

        Raises:
            InsufficientDataError: If fewer than two periods are available
        """
        if self.repository is None:
            raise ValueError("SignalPipeline.compute requires a repository")

        try:
            current, prior = self.repository.get_latest_periods(ticker)
        except InsufficientDataError:
            self._count("insufficient_data_total", ticker)
            raise

        return self.compute_from_periods(ticker, current, prior)

    def compute_from_periods(
        self,
        ticker: str,
        current: Optional[Fundamentals],
        prior: Optional[Fundamentals],
    ) -> SignalResult:
        """
        Compute signals from two already-loaded periods.

        Raises:
            InsufficientDataError: If either period is missing
        """
        start = time.perf_counter()

        if current is None or prior is None:
            available = int(current is not None) + int(prior is not None)
            self._count("insufficient_data_total", ticker)
            raise InsufficientDataError(
                f"{ticker} has {available} fiscal period(s), need 2",
                ticker=ticker,
                available_periods=available,
            )

        current_ratios = self.ratio_calculator.calculate(current)
        prior_ratios = self.ratio_calculator.calculate(prior)
        piotroski = self.scorer.score(current, prior, current_ratios, prior_ratios)
        growth = self.growth_calculator.calculate(current, prior)

        result = self.aggregator.aggregate(
            ticker,
            current_ratios,
            growth,
            piotroski,
            computed_at=self.clock.now(),
        )

        duration = time.perf_counter() - start
        logger.info(
            f"Computed signals for {ticker}: F-Score {piotroski.total}/9, "
            f"overall {result.overall_sentiment.value} ({duration * 1000:.1f}ms)"
        )
        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "signal_computation_seconds", duration, {"ticker": ticker}
            )
            self.metrics_collector.record_count(
                "signals_computed_total",
                1,
                {"sentiment": result.overall_sentiment.value},
            )
        return result

    def _count(self, name: str, ticker: str) -> None:
        if self.metrics_collector:
            self.metrics_collector.record_count(name, 1, {"ticker": ticker})
