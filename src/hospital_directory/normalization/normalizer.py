"""
Record Normalizer.

Turns a raw directory row into a canonical one: values are trimmed and
the placeholders used by the source export (empty cells, whitespace,
a bare "0") all collapse to "".
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from hospital_directory.domain.entities import HospitalRecord
from hospital_directory.resilience.error_handler import RowProcessingError

# Value the export writes for "no data"
PLACEHOLDER = "0"


def normalize_value(value: Optional[str]) -> str:
    """Collapse empty and placeholder values to "", trim everything else."""
    if not value or value == PLACEHOLDER:
        return ""
    if not isinstance(value, str):
        raise RowProcessingError(f"expected text value, got {type(value).__name__}")
    return value.strip()


def normalize_row(raw: Mapping[str, Any]) -> Dict[str, str]:
    """
    Normalize every value of a raw row.

    Keys are kept as-is; a key missing from the input stays missing.

    Args:
        raw: Column name -> raw text value

    Returns:
        Column name -> normalized value

    Raises:
        RowProcessingError: If the row is not a mapping or holds non-text values
    """
    if not isinstance(raw, Mapping):
        raise RowProcessingError(f"expected a column mapping, got {type(raw).__name__}")

    result: Dict[str, str] = {}
    for key, value in raw.items():
        if key is None:
            # csv.DictReader puts surplus cells under a None key
            raise RowProcessingError("row has more cells than the header")
        result[key] = normalize_value(value)
    return result


def map_row(normalized: Mapping[str, str]) -> HospitalRecord:
    """Map a normalized row onto a HospitalRecord."""
    return HospitalRecord.from_columns(normalized)


def to_record(raw: Mapping[str, Any]) -> HospitalRecord:
    """Normalize and map a raw row in one step."""
    return map_row(normalize_row(raw))
