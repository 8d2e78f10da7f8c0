"""
Core Domain Entities.

This module defines the records the signal core consumes and produces:
per-period fundamentals in, a SignalResult out.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from fundamental_signals.domain.value_objects import PiotroskiScore


class SignalType(str, Enum):
    """Sentiment classification of a signal."""

    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


class Fundamentals(BaseModel):
    """Reported financial figures for one fiscal period of one stock."""

    stock_id: str = Field(..., description="Stock identifier (ticker)")
    fiscal_year: int = Field(..., description="Fiscal year of the period")
    revenue: float
    net_income: float
    total_assets: float
    total_liabilities: float
    operating_cash_flow: float
    shares_outstanding: int
    updated_at: datetime = Field(..., description="Last time the record changed")

    # Not every provider reports these; None means "not tracked"
    gross_profit: Optional[float] = None
    operating_income: Optional[float] = None
    current_assets: Optional[float] = None
    current_liabilities: Optional[float] = None

    model_config = {"frozen": True}

    @property
    def total_equity(self) -> float:
        """Book equity (assets minus liabilities)."""
        return self.total_assets - self.total_liabilities


class Signal(BaseModel):
    """A named, scored, sentiment-classified summary."""

    name: str
    type: SignalType
    score: float = Field(..., ge=0.0, le=1.0)
    description: str

    model_config = {"frozen": True}


class SignalResult(BaseModel):
    """Complete result of a signal computation for one ticker."""

    ticker: str
    signals: Tuple[Signal, ...] = Field(default_factory=tuple)
    piotroski_score: PiotroskiScore
    overall_sentiment: SignalType
    computed_at: datetime

    model_config = {"frozen": True}

    def signal(self, name: str) -> Optional[Signal]:
        """Look up a signal by name."""
        for s in self.signals:
            if s.name == name:
                return s
        return None
