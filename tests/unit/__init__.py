"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_normalizer.py: Row normalization and mapping
    - test_qualification_filter.py: Qualification checks
    - test_directory_store.py: Store, builder and publication
    - test_query_engine.py: Filters, lookup and search
    - test_config_loader.py: Configuration loading/validation
"""
