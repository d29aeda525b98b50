"""
Integration Tests - End-to-End Load and Query Tests.

These tests verify that all components work together correctly,
loading from in-memory sources or temporary CSV files.

Test Files:
    - test_ingestion_pipeline.py: Full ingestion pass and publication
    - test_directory_queries.py: Queries over loaded directories
"""
