"""
Error Handler - Fault Isolation for Ingestion.

Provides:
    - Retry with exponential backoff for opening the row source
    - Per-row isolation so one malformed row never aborts a load

Design Notes:
    - Configurable retry attempts and backoff
    - Row failures are collected, logged and counted, never re-raised
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RowProcessingError(Exception):
    """Raised when a single source row cannot be normalized or mapped."""

    def __init__(self, message: str, row_number: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.row_number = row_number


class RetryExhausted(Exception):
    """Raised when all retry attempts are exhausted."""
    pass


@dataclass
class RetryConfig:
    """Configuration for retry logic."""
    max_attempts: int = 1
    base_delay_seconds: float = 0.5
    max_delay_seconds: float = 10.0
    exponential_base: float = 2.0
    retryable_exceptions: tuple = (OSError,)


@dataclass
class PartialResult:
    """How many rows made it through processing, and the ones that did not."""
    succeeded: int = 0
    failed: List[Tuple[int, Exception]] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Calculate success rate (0.0 to 1.0)."""
        total = self.succeeded + len(self.failed)
        if total == 0:
            return 1.0
        return self.succeeded / total

    @property
    def has_failures(self) -> bool:
        return len(self.failed) > 0


class ErrorHandler:
    """
    Resilience helpers used by the ingestion pipeline.

    Features:
        - Retry with exponential backoff
        - Row-level failure isolation
    """

    def __init__(self, retry_config: Optional[RetryConfig] = None) -> None:
        """
        Initialize error handler.

        Args:
            retry_config: Configuration for retry logic
        """
        self.retry_config = retry_config or RetryConfig()

    def retry(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
    ) -> T:
        """
        Execute function with retry and exponential backoff.

        Args:
            func: Function to execute
            operation_name: Name for logging

        Returns:
            Result of successful execution

        Raises:
            RetryExhausted: When all attempts fail
        """
        last_exception: Optional[Exception] = None

        for attempt in range(1, self.retry_config.max_attempts + 1):
            try:
                result = func()
                if attempt > 1:
                    logger.info(f"{operation_name} succeeded on attempt {attempt}")
                return result

            except self.retry_config.retryable_exceptions as e:
                last_exception = e
                if attempt < self.retry_config.max_attempts:
                    delay = self._calculate_delay(attempt)
                    logger.warning(
                        f"{operation_name} failed (attempt {attempt}/{self.retry_config.max_attempts}), "
                        f"retrying in {delay:.2f}s: {e}"
                    )
                    time.sleep(delay)
                else:
                    logger.error(f"{operation_name} failed after {attempt} attempts: {e}")

        raise RetryExhausted(
            f"{operation_name} failed after {self.retry_config.max_attempts} attempts"
        ) from last_exception

    def _calculate_delay(self, attempt: int) -> float:
        """Calculate delay with exponential backoff."""
        delay = self.retry_config.base_delay_seconds * (
            self.retry_config.exponential_base ** (attempt - 1)
        )
        return min(delay, self.retry_config.max_delay_seconds)

    def isolate_row(
        self,
        row_number: int,
        row: Any,
        processor: Callable[[Any], T],
        result: PartialResult,
    ) -> Optional[T]:
        """
        Process one row, recording a failure instead of raising.

        Args:
            row_number: 1-based data row number, for logs
            row: Raw row handed to the processor
            processor: Function to process the row
            result: Accumulator for successes and failures

        Returns:
            The processed value, or None when the row failed
        """
        try:
            processed = processor(row)
        except RowProcessingError as e:
            if e.row_number is None:
                e.row_number = row_number
            result.failed.append((row_number, e))
            logger.warning(f"Skipping row {row_number}: {e.message}")
            logger.debug(f"Problematic row {row_number}: {row!r}")
            return None
        result.succeeded += 1
        return processed
