"""
Value Objects for Domain Layer.

Immutable results produced while classifying and loading records.
"""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field


class ClassificationResult(BaseModel):
    """Outcome of running the qualification checks on one record."""

    accepted: bool
    failed_check: Optional[str] = Field(
        default=None, description="Name of the first check that failed"
    )
    reason: str = ""

    model_config = {"frozen": True}


class LoadReport(BaseModel):
    """Summary of one ingestion pass."""

    source: str
    rows_read: int = Field(default=0, ge=0)
    accepted: int = Field(default=0, ge=0)
    rejected: int = Field(default=0, ge=0)
    errored: int = Field(default=0, ge=0)
    rejections_by_check: Dict[str, int] = Field(default_factory=dict)
    duration_seconds: float = 0.0

    model_config = {"frozen": True}

    @property
    def acceptance_ratio(self) -> float:
        """Share of read rows that were accepted (0.0 when nothing was read)."""
        if self.rows_read == 0:
            return 0.0
        return self.accepted / self.rows_read

    @property
    def error_rate(self) -> float:
        if self.rows_read == 0:
            return 0.0
        return self.errored / self.rows_read
