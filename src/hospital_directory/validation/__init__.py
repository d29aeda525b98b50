"""
Validation Package - Query Argument Checks.
"""

from hospital_directory.validation.request_validator import (
    InvalidArgument,
    RequestValidator,
)

__all__ = ["InvalidArgument", "RequestValidator"]
