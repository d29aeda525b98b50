"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class SourceConfig(BaseModel):
    """Where the directory rows come from."""

    path: Optional[str] = Field(default=None, description="Path to the directory CSV")
    encoding: str = Field(default="utf-8-sig")
    delimiter: str = Field(default=",", min_length=1, max_length=1)


class IngestionConfig(BaseModel):
    """Configuration for the ingestion pass."""

    max_error_rate: float = Field(default=0.05, ge=0, le=1)
    open_attempts: int = Field(default=1, ge=1, le=10)
    retry_delay_seconds: float = Field(default=0.5, ge=0)
    verbose_audit: bool = False


class QualificationFilterConfig(BaseModel):
    """Thresholds and keyword lists for the qualification checks."""

    required_medicine: str = Field(default="allopathy", min_length=1)
    excluded_category_terms: List[str] = Field(
        default_factory=lambda: ["dispensary", "nursing"]
    )
    excluded_name_terms: List[str] = Field(
        default_factory=lambda: [
            "children",
            "child",
            "nursing",
            "clinic",
            "dispensary",
            "health center",
            "health centre",
            "healthcare center",
            "healthcare centre",
        ]
    )
    excluded_specialty_terms: List[str] = Field(
        default_factory=lambda: ["pediatric", "children"]
    )
    excluded_care_type_terms: List[str] = Field(default_factory=lambda: ["nursing"])
    min_beds_exclusive: int = Field(default=10, ge=0)
    min_doctors_exclusive: int = Field(default=2, ge=0)


class DirectoryConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    source: SourceConfig = Field(default_factory=SourceConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    qualification_filter: QualificationFilterConfig = Field(
        default_factory=QualificationFilterConfig,
    )

    model_config = {"populate_by_name": True}
