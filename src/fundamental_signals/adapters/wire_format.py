"""
JSON Wire Format.

Serializes SignalResult into the shape the transport layer returns:

    {"result": {"ticker", "signals", "piotroskiScore",
                "overallSentiment", "computedAt"}}

Keys are camelCase. Not-computable numbers serialize as null, never 0
and never omitted.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Optional

from fundamental_signals.domain.entities import Signal, SignalResult
from fundamental_signals.domain.value_objects import FinancialRatios, PiotroskiScore

_RATIO_KEYS = {
    "return_on_assets": "returnOnAssets",
    "return_on_equity": "returnOnEquity",
    "current_ratio": "currentRatio",
    "debt_to_equity": "debtToEquity",
    "gross_margin": "grossMargin",
    "operating_margin": "operatingMargin",
    "net_margin": "netMargin",
    "asset_turnover": "assetTurnover",
}


def _number(value: Optional[float]) -> Optional[float]:
    if value is None or not math.isfinite(value):
        return None
    return value


def signal_to_wire(signal: Signal) -> Dict[str, Any]:
    return {
        "name": signal.name,
        "type": signal.type.value,
        "score": _number(signal.score),
        "description": signal.description,
    }


def piotroski_to_wire(score: PiotroskiScore) -> Dict[str, Any]:
    p, l, e = score.profitability, score.leverage, score.efficiency
    return {
        "total": score.total,
        "profitability": {
            "score": p.points,
            "positiveROA": p.positive_roa,
            "positiveOperatingCashFlow": p.positive_operating_cash_flow,
            "roaImprovement": p.roa_improvement,
            "cashFlowGreaterThanNetIncome": p.cash_flow_greater_than_net_income,
        },
        "leverage": {
            "score": l.points,
            "decreasedLeverage": l.decreased_leverage,
            "increasedCurrentRatio": l.increased_current_ratio,
            "noNewShares": l.no_new_shares,
        },
        "efficiency": {
            "score": e.points,
            "improvedGrossMargin": e.improved_gross_margin,
            "improvedAssetTurnover": e.improved_asset_turnover,
        },
    }


def ratios_to_wire(ratios: FinancialRatios) -> Dict[str, Optional[float]]:
    return {
        wire_key: _number(getattr(ratios, field))
        for field, wire_key in _RATIO_KEYS.items()
    }


def to_wire(result: SignalResult) -> Dict[str, Any]:
    """Build the wire dictionary for a SignalResult."""
    return {
        "result": {
            "ticker": result.ticker,
            "signals": [signal_to_wire(s) for s in result.signals],
            "piotroskiScore": piotroski_to_wire(result.piotroski_score),
            "overallSentiment": result.overall_sentiment.value,
            "computedAt": result.computed_at.isoformat(),
        }
    }


def to_json(result: SignalResult, indent: Optional[int] = None) -> str:
    """Serialize a SignalResult to a JSON string."""
    return json.dumps(to_wire(result), indent=indent, allow_nan=False)
