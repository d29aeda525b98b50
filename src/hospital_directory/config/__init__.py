"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - DirectoryConfig: Root configuration object
    - SourceConfig: CSV location and dialect
    - IngestionConfig: Error tolerance, source retry, audit verbosity
    - QualificationFilterConfig: Thresholds and excluded terms

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (config/profiles/<name>.yaml)
    - HOSPITAL_DIRECTORY_CSV overrides source.path
"""

from hospital_directory.config.loader import ConfigLoader, load_config
from hospital_directory.config.models import (
    DirectoryConfig,
    IngestionConfig,
    QualificationFilterConfig,
    SourceConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "DirectoryConfig",
    "IngestionConfig",
    "QualificationFilterConfig",
    "SourceConfig",
]
