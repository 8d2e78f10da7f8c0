"""
Integration Tests for SignalPipeline.

Tests cover:
    - Full repository -> SignalResult workflow
    - Insufficient-data handling and metrics
    - Config-driven pipeline construction
    - Concurrent use of one pipeline instance
"""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path

import pytest

from fundamental_signals.adapters.clock import FixedClock
from fundamental_signals.adapters.memory_repository import (
    InMemoryFundamentalsRepository,
)
from fundamental_signals.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_signals.adapters.wire_format import to_json
from fundamental_signals.config.loader import load_config
from fundamental_signals.domain.entities import Fundamentals, SignalType
from fundamental_signals.errors import InsufficientDataError
from fundamental_signals.periods.resolver import PeriodResolver
from fundamental_signals.pipeline.signal_pipeline import SignalPipeline


@pytest.fixture
def pipeline(
    repository: InMemoryFundamentalsRepository,
    fixed_clock: FixedClock,
    metrics_collector: InMemoryMetricsCollector,
) -> SignalPipeline:
    """Create a pipeline over the shared test repository."""
    return SignalPipeline(
        repository=repository,
        clock=fixed_clock,
        metrics_collector=metrics_collector,
    )


class TestSignalPipeline:
    """Integration tests for SignalPipeline."""

    def test_reference_company_end_to_end(
        self,
        pipeline: SignalPipeline,
        reference_time: datetime,
    ) -> None:
        """
        SCENARIO: Improving company with two periods in the repository
        EXPECTED: F-Score 7, three bullish signals, overall bullish
        """
        # Act
        result = pipeline.compute("ACME")

        # Assert
        assert result.ticker == "ACME"
        assert result.piotroski_score.total == 7
        assert [s.type for s in result.signals] == [SignalType.BULLISH] * 3
        assert result.overall_sentiment == SignalType.BULLISH
        assert result.computed_at == reference_time

    def test_deteriorating_company_end_to_end(self, pipeline: SignalPipeline) -> None:
        result = pipeline.compute("DECL")

        assert result.piotroski_score.total == 1
        assert result.overall_sentiment == SignalType.BEARISH

    def test_metrics_recorded(
        self,
        pipeline: SignalPipeline,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        pipeline.compute("ACME")
        pipeline.compute("DECL")

        metrics = metrics_collector.get_metrics()
        assert metrics["signals_computed_total"]["total"] == 2
        assert metrics["signal_computation_seconds"]["count"] == 2
        assert metrics_collector.get_tagged("signals_computed_total") == [
            {"sentiment": "bullish"},
            {"sentiment": "bearish"},
        ]

    def test_unknown_ticker_raises_insufficient_data(
        self,
        pipeline: SignalPipeline,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        """
        SCENARIO: Ticker with no stored periods
        EXPECTED: InsufficientDataError surfaces, counted in metrics
        """
        with pytest.raises(InsufficientDataError):
            pipeline.compute("NOPE")

        assert metrics_collector.get_metrics()["insufficient_data_total"]["total"] == 1

    def test_single_period_raises_insufficient_data(
        self,
        current_fundamentals: Fundamentals,
        fixed_clock: FixedClock,
    ) -> None:
        pipeline = SignalPipeline(
            repository=InMemoryFundamentalsRepository([current_fundamentals]),
            clock=fixed_clock,
        )

        with pytest.raises(InsufficientDataError) as exc_info:
            pipeline.compute("ACME")

        assert exc_info.value.available_periods == 1

    def test_gap_year_raises_insufficient_data(
        self,
        current_fundamentals: Fundamentals,
        prior_fundamentals: Fundamentals,
        fixed_clock: FixedClock,
        metrics_collector: InMemoryMetricsCollector,
    ) -> None:
        """
        SCENARIO: Latest periods are FY2024 and FY2021
        EXPECTED: No year-over-year result; failure counted in metrics
        """
        stale = prior_fundamentals.model_copy(update={"fiscal_year": 2021})
        pipeline = SignalPipeline(
            repository=InMemoryFundamentalsRepository([current_fundamentals, stale]),
            clock=fixed_clock,
            metrics_collector=metrics_collector,
        )

        with pytest.raises(InsufficientDataError):
            pipeline.compute("ACME")

        assert metrics_collector.get_metrics()["insufficient_data_total"]["total"] == 1

    def test_compute_from_periods_without_repository(
        self,
        current_fundamentals: Fundamentals,
        prior_fundamentals: Fundamentals,
        fixed_clock: FixedClock,
    ) -> None:
        pipeline = SignalPipeline(clock=fixed_clock)

        result = pipeline.compute_from_periods(
            "ACME", current_fundamentals, prior_fundamentals
        )

        assert result.piotroski_score.total == 7
        with pytest.raises(InsufficientDataError):
            pipeline.compute_from_periods("ACME", current_fundamentals, None)
        with pytest.raises(ValueError):
            pipeline.compute("ACME")

    def test_config_enables_quality_signal(
        self,
        repository: InMemoryFundamentalsRepository,
        fixed_clock: FixedClock,
        sample_config_path: Path,
    ) -> None:
        """
        SCENARIO: Pipeline built from the sample YAML config
        EXPECTED: Quality signal appended after the three core signals
        """
        config = load_config(sample_config_path)
        pipeline = SignalPipeline(repository=repository, config=config, clock=fixed_clock)

        result = pipeline.compute("ACME")

        assert [s.name for s in result.signals][-1] == "Quality"
        assert result.signal("Quality").type == SignalType.BULLISH

    def test_sample_calendar_drives_resolver(
        self,
        sample_config_path: Path,
        reference_time: datetime,
    ) -> None:
        config = load_config(sample_config_path)

        # March maps to Q3 of the previous year in the sample calendar
        assert PeriodResolver(config.filing_calendar).most_recent_filing_quarter(
            reference_time
        ) == (2024, 3)

    def test_wire_output(self, pipeline: SignalPipeline) -> None:
        payload = json.loads(to_json(pipeline.compute("ACME")))["result"]

        assert payload["overallSentiment"] == "bullish"
        assert payload["piotroskiScore"]["total"] == 7
        assert payload["computedAt"] == "2025-03-14T12:00:00+00:00"

    def test_concurrent_computations_are_independent(
        self,
        pipeline: SignalPipeline,
    ) -> None:
        """
        SCENARIO: One pipeline shared by many threads
        EXPECTED: Every result equals the single-threaded result
        """
        expected = {t: pipeline.compute(t) for t in ("ACME", "DECL")}
        tickers = ["ACME", "DECL"] * 25

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(pipeline.compute, tickers))

        for ticker, result in zip(tickers, results):
            assert result == expected[ticker]
