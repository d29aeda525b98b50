"""
Unit Tests for ErrorHandler.

Test Aspects Covered:
    ✅ Business Logic: Retry, row isolation
    ✅ Edge Cases: Immediate success, all failures, non-retryable errors
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from hospital_directory.resilience.error_handler import (
    ErrorHandler,
    PartialResult,
    RetryConfig,
    RetryExhausted,
    RowProcessingError,
)


class TestRetry:
    """Test cases for retry logic."""

    def test_succeeds_on_first_attempt(self) -> None:
        """
        SCENARIO: Function succeeds on first attempt
        EXPECTED: Result returned, no retries
        """
        # Arrange
        handler = ErrorHandler()
        mock_func = Mock(return_value="rows")

        # Act
        result = handler.retry(mock_func, "open_source")

        # Assert
        assert result == "rows"
        assert mock_func.call_count == 1

    def test_succeeds_after_retries(self) -> None:
        """
        SCENARIO: Function fails twice, succeeds on third attempt
        EXPECTED: Result returned after retries
        """
        # Arrange
        handler = ErrorHandler(RetryConfig(max_attempts=3, base_delay_seconds=0.0))
        mock_func = Mock(side_effect=[OSError("busy"), OSError("busy"), "rows"])

        # Act
        result = handler.retry(mock_func, "open_source")

        # Assert
        assert result == "rows"
        assert mock_func.call_count == 3

    def test_exhausted_keeps_cause(self) -> None:
        handler = ErrorHandler(RetryConfig(max_attempts=2, base_delay_seconds=0.0))
        error = OSError("gone")

        with pytest.raises(RetryExhausted) as exc_info:
            handler.retry(Mock(side_effect=error), "open_source")

        assert exc_info.value.__cause__ is error

    def test_non_retryable_propagates(self) -> None:
        handler = ErrorHandler(RetryConfig(max_attempts=3, base_delay_seconds=0.0))
        mock_func = Mock(side_effect=KeyError("bug"))

        with pytest.raises(KeyError):
            handler.retry(mock_func, "open_source")

        assert mock_func.call_count == 1

    def test_delay_is_capped(self) -> None:
        handler = ErrorHandler(
            RetryConfig(base_delay_seconds=1.0, max_delay_seconds=3.0, exponential_base=2.0)
        )

        assert handler._calculate_delay(1) == 1.0
        assert handler._calculate_delay(2) == 2.0
        assert handler._calculate_delay(5) == 3.0


class TestIsolateRow:
    """Test cases for row-level failure isolation."""

    def test_records_success(self) -> None:
        handler = ErrorHandler()
        result = PartialResult()

        value = handler.isolate_row(1, {"a": "1"}, lambda row: "ok", result)

        assert value == "ok"
        assert result.succeeded == 1
        assert not result.has_failures

    def test_records_row_failure(self) -> None:
        """
        SCENARIO: Processor raises RowProcessingError
        EXPECTED: None returned, failure recorded with row number
        """
        # Arrange
        handler = ErrorHandler()
        result = PartialResult()

        def broken(row):
            raise RowProcessingError("bad shape")

        # Act
        value = handler.isolate_row(7, ["x"], broken, result)

        # Assert
        assert value is None
        row_number, error = result.failed[0]
        assert row_number == 7
        assert error.row_number == 7
        assert result.success_rate == 0.0

    def test_unexpected_errors_are_not_swallowed(self) -> None:
        handler = ErrorHandler()

        def buggy(row):
            raise ZeroDivisionError()

        with pytest.raises(ZeroDivisionError):
            handler.isolate_row(1, {}, buggy, PartialResult())

    def test_empty_result_rate(self) -> None:
        assert PartialResult().success_rate == 1.0
