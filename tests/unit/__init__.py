"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with in-memory collaborators.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_period_resolver.py: Filing-quarter calendar
    - test_stats.py: Statistical helpers
    - test_ratio_calculator.py: Financial ratios
    - test_piotroski_scorer.py: F-Score components
    - test_signal_aggregator.py: Signal rules and sentiment
    - test_config_loader.py: Configuration loading/validation
    - test_adapters.py: Repository, clocks, metrics, wire format
    - test_properties.py: Property-based invariants
"""
