"""
Hospital Directory - Curated Hospital Dataset with Query API.

Loads the national hospital directory CSV, keeps the facilities that
qualify as substantive allopathic hospitals, and answers filter, lookup
and search queries against the result.

Main Components:
    - normalization: Raw row cleanup
    - filters: Qualification classifier
    - store: Immutable directory store and its publication point
    - pipeline: Ingestion pass (sync and async)
    - query: Query engine
    - adapters: Row sources, audit logger, metrics
    - config: Configuration models and loaders

Example:
    >>> from hospital_directory import QueryEngine, load_directory
    >>> store = load_directory("hospital_directory.csv")
    >>> engine = QueryEngine(store)
    >>> engine.search("general", district="Pune")
"""

import logging

from hospital_directory.adapters.csv_source import CsvRowSource
from hospital_directory.adapters.row_source import InMemoryRowSource, SourceUnavailable
from hospital_directory.domain.entities import HospitalRecord
from hospital_directory.pipeline.ingestion_pipeline import (
    IngestionPipeline,
    load_directory,
    load_directory_async,
)
from hospital_directory.query.engine import NotFound, QueryEngine
from hospital_directory.resilience.error_handler import RowProcessingError
from hospital_directory.store.directory_store import DirectoryStore, StoreHolder
from hospital_directory.validation.request_validator import InvalidArgument

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the hospital directory.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import hospital_directory
        >>> hospital_directory.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("hospital_directory").setLevel(level)


__all__ = [
    "configure_logging",
    "CsvRowSource",
    "DirectoryStore",
    "HospitalRecord",
    "IngestionPipeline",
    "InMemoryRowSource",
    "InvalidArgument",
    "NotFound",
    "QueryEngine",
    "RowProcessingError",
    "SourceUnavailable",
    "StoreHolder",
    "load_directory",
    "load_directory_async",
]
