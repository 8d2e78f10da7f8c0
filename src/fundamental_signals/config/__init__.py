"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - FundamentalSignalsConfig: Root configuration object
    - FilingCalendarConfig: Month -> safe filing quarter table
    - SignalsConfig: Factor ranges and sentiment thresholds

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. conservative)
"""

from fundamental_signals.config.loader import ConfigLoader, load_config
from fundamental_signals.config.models import (
    FactorRange,
    FilingCalendarConfig,
    FilingRule,
    FundamentalSignalsConfig,
    SignalsConfig,
    ThresholdConfig,
)

__all__ = [
    "ConfigLoader",
    "FactorRange",
    "FilingCalendarConfig",
    "FilingRule",
    "FundamentalSignalsConfig",
    "SignalsConfig",
    "ThresholdConfig",
    "load_config",
]
