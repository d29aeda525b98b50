"""
Test Suite for Hospital Directory.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end load and query tests
    - fixtures/: Sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
