"""
Scoring Package - Cross-Period Quality Scores.
"""

from fundamental_signals.scoring.piotroski import PiotroskiScorer

__all__ = ["PiotroskiScorer"]
