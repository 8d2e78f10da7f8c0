"""
Pipeline Package - Orchestration.

Components:
    - SignalPipeline: Repository -> ratios -> F-Score -> signals
"""

from fundamental_signals.pipeline.signal_pipeline import SignalPipeline

__all__ = ["SignalPipeline"]
