"""
Resilience Package - Retry and Row Isolation.

Components:
    - ErrorHandler: Retry for the source, per-row failure isolation
    - RowProcessingError: A single row could not be processed
"""

from hospital_directory.resilience.error_handler import (
    ErrorHandler,
    PartialResult,
    RetryConfig,
    RetryExhausted,
    RowProcessingError,
)

__all__ = [
    "ErrorHandler",
    "PartialResult",
    "RetryConfig",
    "RetryExhausted",
    "RowProcessingError",
]
