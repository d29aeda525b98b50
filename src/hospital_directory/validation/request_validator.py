"""
Request Validator - Validate Query Arguments.

Validates query arguments before the dataset is touched:
    - Required arguments are present and not blank
    - Optional arguments are either absent or text

Design Notes:
    - Fail-fast principle
    - Clear error messages naming the argument
"""

from __future__ import annotations

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a required query argument is missing or empty."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class RequestValidator:
    """Checks query arguments for the query engine."""

    def require(self, field: str, value: Any) -> str:
        """
        Validate a required text argument.

        Args:
            field: Argument name, for the error message
            value: Supplied value

        Returns:
            The value, unchanged

        Raises:
            InvalidArgument: If the value is missing, not text or blank
        """
        if value is None or not isinstance(value, str) or not value.strip():
            logger.debug(f"Rejected query: {field} is required")
            raise InvalidArgument(f"{field} is required", field=field)
        return value

    def optional(self, field: str, value: Any) -> Optional[str]:
        """
        Validate an optional text argument.

        Blank strings are treated as not supplied.

        Raises:
            InvalidArgument: If the value is not text
        """
        if value is None:
            return None
        if not isinstance(value, str):
            raise InvalidArgument(f"{field} must be text", field=field)
        if not value.strip():
            return None
        return value
