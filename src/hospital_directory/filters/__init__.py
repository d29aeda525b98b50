"""
Filters Package - Record Qualification.

Filters:
    - QualificationClassifier: Keeps substantive allopathic hospitals

Design Principles:
    - Each check is independently testable
    - Configuration injected via constructor
    - Clear rejection reasons for the audit trail
"""

from hospital_directory.filters.qualification import (
    QualificationCheck,
    QualificationClassifier,
    parse_count,
)

__all__ = [
    "QualificationCheck",
    "QualificationClassifier",
    "parse_count",
]
