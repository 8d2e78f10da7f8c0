"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - FundamentalsRepository: Fundamentals data access
    - Clock: Wall-clock time source

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from fundamental_signals.interfaces.clock import Clock
from fundamental_signals.interfaces.fundamentals_repository import (
    FundamentalsRepository,
)

__all__ = ["Clock", "FundamentalsRepository"]
