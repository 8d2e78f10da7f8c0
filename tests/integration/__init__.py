"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that all components work together correctly.
Integration tests use the InMemoryFundamentalsRepository to avoid
external dependencies while testing the full workflow.

Test Files:
    - test_signal_pipeline.py: Full signal computation workflow
"""
