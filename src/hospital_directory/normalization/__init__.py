"""
Normalization Package - Raw Row Cleanup.

Functions:
    - normalize_row: Trim values, collapse placeholders to ""
    - map_row: Normalized row -> HospitalRecord
    - to_record: Both steps at once
"""

from hospital_directory.normalization.normalizer import (
    map_row,
    normalize_row,
    normalize_value,
    to_record,
)

__all__ = ["map_row", "normalize_row", "normalize_value", "to_record"]
