"""
Fundamental Signals - Financial Signal Computation Core.

Turns raw per-period fundamentals into derived ratios, a 9-point
Piotroski F-Score, and human-readable sentiment signals. Also resolves
the most recent fiscal quarter whose institutional (13F) filings can be
assumed complete.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Pure functions over immutable value objects
    - Rule-based signal generation
    - Configuration-driven thresholds via YAML

Main Components:
    - domain: Fundamentals, ratios, scores and signal value objects
    - periods: Filing-quarter resolution and quarter arithmetic
    - analytics: Numeric primitives, ratio and growth calculators
    - scoring: Piotroski F-Score
    - signals: Signal rules and aggregation into overall sentiment
    - pipeline: Repository -> ratios -> score -> signals orchestration
    - adapters: In-memory repository, clocks, JSON wire format
    - config: Configuration models and loaders

Example:
    >>> from fundamental_signals.pipeline.signal_pipeline import SignalPipeline
    >>> pipeline = SignalPipeline(repository=repo)
    >>> result = pipeline.compute("AAPL")
    >>> print(result.overall_sentiment)

"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Fundamental Signals.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import fundamental_signals
        >>> fundamental_signals.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("fundamental_signals").setLevel(level)
