"""
Domain Layer - Core Entities and Value Objects.

Entities:
    - HospitalRecord: A qualifying hospital row, immutable once built
    - COLUMN_MAP: Directory CSV column -> record field

Value Objects:
    - ClassificationResult: Outcome of the qualification checks
    - LoadReport: Counts and timing for one ingestion pass
"""

from hospital_directory.domain.entities import COLUMN_MAP, HospitalRecord
from hospital_directory.domain.value_objects import ClassificationResult, LoadReport

__all__ = [
    "COLUMN_MAP",
    "HospitalRecord",
    "ClassificationResult",
    "LoadReport",
]
