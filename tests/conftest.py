"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from datetime import datetime, timezone
from pathlib import Path

import pytest

from fundamental_signals.adapters.clock import FixedClock
from fundamental_signals.adapters.memory_repository import (
    InMemoryFundamentalsRepository,
)
from fundamental_signals.adapters.metrics_collector import InMemoryMetricsCollector
from fundamental_signals.config.models import FundamentalSignalsConfig
from fundamental_signals.domain.entities import Fundamentals


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def reference_time() -> datetime:
    """Standard computation time for testing."""
    return datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock(reference_time: datetime) -> FixedClock:
    return FixedClock(reference_time)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> FundamentalSignalsConfig:
    return FundamentalSignalsConfig()


@pytest.fixture
def current_fundamentals() -> Fundamentals:
    """Reference current period: improving profitability, lower leverage."""
    return Fundamentals(
        stock_id="ACME",
        fiscal_year=2024,
        revenue=2000,
        net_income=100,
        total_assets=1000,
        total_liabilities=400,
        operating_cash_flow=120,
        shares_outstanding=50,
        gross_profit=900,
        updated_at=datetime(2025, 2, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def prior_fundamentals() -> Fundamentals:
    """Reference prior period for current_fundamentals."""
    return Fundamentals(
        stock_id="ACME",
        fiscal_year=2023,
        revenue=1800,
        net_income=80,
        total_assets=900,
        total_liabilities=450,
        operating_cash_flow=90,
        shares_outstanding=50,
        gross_profit=780,
        updated_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def deteriorating_periods() -> tuple[Fundamentals, Fundamentals]:
    """(current, prior) for a company in decline: losses, more debt, dilution."""
    updated = datetime(2025, 2, 1, tzinfo=timezone.utc)
    current = Fundamentals(
        stock_id="DECL",
        fiscal_year=2024,
        revenue=1000,
        net_income=-50,
        total_assets=1000,
        total_liabilities=800,
        operating_cash_flow=-20,
        shares_outstanding=60,
        updated_at=updated,
    )
    prior = Fundamentals(
        stock_id="DECL",
        fiscal_year=2023,
        revenue=1200,
        net_income=40,
        total_assets=1000,
        total_liabilities=600,
        operating_cash_flow=60,
        shares_outstanding=50,
        updated_at=updated,
    )
    return current, prior


@pytest.fixture
def repository(
    current_fundamentals: Fundamentals,
    prior_fundamentals: Fundamentals,
    deteriorating_periods: tuple[Fundamentals, Fundamentals],
) -> InMemoryFundamentalsRepository:
    """Repository holding ACME and DECL with two periods each."""
    return InMemoryFundamentalsRepository(
        [prior_fundamentals, current_fundamentals, *deteriorating_periods]
    )
