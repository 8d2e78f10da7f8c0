"""
Analytics Package - Numeric Primitives and Single-Period Derivations.

Modules:
    - stats: median, percentile rank, range percentile, clamp,
      safe division, growth rate
    - ratios: RatioCalculator (one period -> FinancialRatios)
    - growth: GrowthCalculator (two periods -> GrowthRates)
"""

from fundamental_signals.analytics.growth import GrowthCalculator
from fundamental_signals.analytics.ratios import RatioCalculator

__all__ = ["GrowthCalculator", "RatioCalculator"]
