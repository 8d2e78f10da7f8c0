"""
Test Fixtures - Sample configuration files.
"""
