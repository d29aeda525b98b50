"""
Test Fixtures - Sample configuration for tests.
"""
