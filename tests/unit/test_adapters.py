"""
Unit Tests for Adapters.

Test Aspects Covered:
    ✅ Business Logic: Repository ordering, clocks, metrics, wire format
    ✅ Edge Cases: Single period, duplicate periods, null serialization
    ✅ Error Handling: InsufficientDataError, DuplicatePeriodError
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from fundamental_signals.adapters.clock import FixedClock, SystemClock
from fundamental_signals.adapters.memory_repository import (
    InMemoryFundamentalsRepository,
)
from fundamental_signals.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_signals.adapters.wire_format import ratios_to_wire, to_json, to_wire
from fundamental_signals.domain.entities import (
    Fundamentals,
    Signal,
    SignalResult,
    SignalType,
)
from fundamental_signals.domain.value_objects import (
    FinancialRatios,
    LeverageScore,
    PiotroskiScore,
    ProfitabilityScore,
)
from fundamental_signals.errors import DuplicatePeriodError, InsufficientDataError
from fundamental_signals.interfaces.clock import Clock
from fundamental_signals.interfaces.fundamentals_repository import (
    FundamentalsRepository,
)


class TestInMemoryFundamentalsRepository:
    """Test cases for InMemoryFundamentalsRepository."""

    def test_implements_protocol(self) -> None:
        assert isinstance(InMemoryFundamentalsRepository(), FundamentalsRepository)

    def test_latest_periods_newest_first(
        self,
        repository: InMemoryFundamentalsRepository,
    ) -> None:
        """
        SCENARIO: Periods added oldest first
        EXPECTED: (current, prior) ordered by fiscal year
        """
        current, prior = repository.get_latest_periods("ACME")

        assert current.fiscal_year == 2024
        assert prior.fiscal_year == 2023

    def test_ticker_lookup_case_insensitive(
        self,
        repository: InMemoryFundamentalsRepository,
    ) -> None:
        assert len(repository.get_periods("acme")) == 2
        assert repository.tickers() == ["ACME", "DECL"]

    def test_single_period_insufficient(self, current_fundamentals: Fundamentals) -> None:
        repo = InMemoryFundamentalsRepository([current_fundamentals])

        with pytest.raises(InsufficientDataError) as exc_info:
            repo.get_latest_periods("ACME")

        assert exc_info.value.available_periods == 1
        assert exc_info.value.ticker == "ACME"

    def test_unknown_ticker_insufficient(self) -> None:
        with pytest.raises(InsufficientDataError) as exc_info:
            InMemoryFundamentalsRepository().get_latest_periods("NONE")

        assert exc_info.value.available_periods == 0

    def test_gap_between_fiscal_years_insufficient(
        self,
        current_fundamentals: Fundamentals,
        prior_fundamentals: Fundamentals,
    ) -> None:
        """
        SCENARIO: FY2024 recorded, FY2023 missing, FY2020 present
        EXPECTED: InsufficientDataError; FY2020 is not the prior period
        """
        # Arrange
        stale = prior_fundamentals.model_copy(update={"fiscal_year": 2020})
        repo = InMemoryFundamentalsRepository([current_fundamentals, stale])

        # Act
        with pytest.raises(InsufficientDataError) as exc_info:
            repo.get_latest_periods("ACME")

        # Assert
        assert "FY2024" in str(exc_info.value)
        assert exc_info.value.available_periods == 1

    def test_older_gap_is_irrelevant(
        self,
        current_fundamentals: Fundamentals,
        prior_fundamentals: Fundamentals,
    ) -> None:
        older = prior_fundamentals.model_copy(update={"fiscal_year": 2019})
        repo = InMemoryFundamentalsRepository(
            [older, prior_fundamentals, current_fundamentals]
        )

        current, prior = repo.get_latest_periods("ACME")

        assert (current.fiscal_year, prior.fiscal_year) == (2024, 2023)

    def test_duplicate_period_rejected(
        self,
        repository: InMemoryFundamentalsRepository,
        current_fundamentals: Fundamentals,
    ) -> None:
        """
        SCENARIO: Same fiscal year recorded twice
        EXPECTED: DuplicatePeriodError, original record kept
        """
        changed = current_fundamentals.model_copy(update={"revenue": 1})

        with pytest.raises(DuplicatePeriodError):
            repository.add(changed)

        assert repository.get_latest_periods("ACME")[0].revenue == 2000


class TestClocks:
    """Test cases for clock adapters."""

    def test_fixed_clock_assumes_utc(self) -> None:
        clock = FixedClock(datetime(2025, 1, 1))

        assert clock.now() == datetime(2025, 1, 1, tzinfo=timezone.utc)
        assert isinstance(clock, Clock)

    def test_system_clock_is_aware(self) -> None:
        assert SystemClock().now().tzinfo is not None


class TestMetricsCollector:
    """Test cases for InMemoryMetricsCollector."""

    def test_summarizes_by_name(self) -> None:
        collector = InMemoryMetricsCollector()

        collector.record_count("runs", 1, {"sentiment": "bullish"})
        collector.record_count("runs", 1, {"sentiment": "bearish"})
        collector.record_timing("seconds", 0.5)

        metrics = collector.get_metrics()
        assert metrics["runs"] == {"count": 2, "total": 2, "last": 1}
        assert metrics["seconds"]["total"] == 0.5
        assert collector.get_tagged("runs")[1] == {"sentiment": "bearish"}

    def test_clear(self) -> None:
        collector = InMemoryMetricsCollector()
        collector.record_count("runs", 1)

        collector.clear()

        assert collector.get_metrics() == {}


class TestWireFormat:
    """Test cases for JSON wire serialization."""

    @pytest.fixture
    def result(self) -> SignalResult:
        return SignalResult(
            ticker="ACME",
            signals=(
                Signal(
                    name="Profitability",
                    type=SignalType.BULLISH,
                    score=0.8,
                    description="Strong return on assets and positive cash flow",
                ),
            ),
            piotroski_score=PiotroskiScore(
                profitability=ProfitabilityScore(positive_roa=True),
                leverage=LeverageScore(no_new_shares=True),
            ),
            overall_sentiment=SignalType.BULLISH,
            computed_at=datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc),
        )

    def test_shape(self, result: SignalResult) -> None:
        """
        SCENARIO: Serialize a SignalResult
        EXPECTED: Top-level "result" object with camelCase keys
        """
        wire = to_wire(result)["result"]

        assert set(wire) == {
            "ticker",
            "signals",
            "piotroskiScore",
            "overallSentiment",
            "computedAt",
        }
        assert wire["signals"][0] == {
            "name": "Profitability",
            "type": "bullish",
            "score": 0.8,
            "description": "Strong return on assets and positive cash flow",
        }
        assert wire["overallSentiment"] == "bullish"
        assert wire["computedAt"] == "2025-03-14T12:00:00+00:00"

    def test_piotroski_shape(self, result: SignalResult) -> None:
        piotroski = to_wire(result)["result"]["piotroskiScore"]

        assert piotroski["total"] == 2
        assert piotroski["profitability"]["positiveROA"] is True
        assert piotroski["profitability"]["score"] == 1
        assert piotroski["leverage"]["noNewShares"] is True
        assert piotroski["efficiency"] == {
            "score": 0,
            "improvedGrossMargin": False,
            "improvedAssetTurnover": False,
        }

    def test_json_round_trip(self, result: SignalResult) -> None:
        payload = json.loads(to_json(result))

        assert payload["result"]["ticker"] == "ACME"

    def test_not_computable_ratios_serialize_as_null(self) -> None:
        """
        SCENARIO: Ratio set with untracked and zero values
        EXPECTED: None -> null, zero stays 0 (never conflated)
        """
        wire = ratios_to_wire(FinancialRatios(return_on_assets=0.0))

        assert wire["returnOnAssets"] == 0.0
        assert wire["currentRatio"] is None
        assert "grossMargin" in wire
        assert '"currentRatio": null' in json.dumps(wire)
