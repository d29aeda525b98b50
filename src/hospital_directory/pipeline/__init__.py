"""
Pipeline Package - Directory Ingestion.

Components:
    - IngestionPipeline: Drains a row source into a DirectoryStore
    - load_directory / load_directory_async: One-call entry points
"""

from hospital_directory.pipeline.ingestion_pipeline import (
    IngestionPipeline,
    LoadOutcome,
    load_directory,
    load_directory_async,
)

__all__ = [
    "IngestionPipeline",
    "LoadOutcome",
    "load_directory",
    "load_directory_async",
]
