"""
Console Audit Logger.

Prints the ingestion audit trail: load start, rejected and skipped rows,
and the final summary.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from hospital_directory.domain.entities import HospitalRecord
from hospital_directory.domain.value_objects import LoadReport


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every rejected row. If False, only summaries.
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_load_start(self, source: str) -> None:
        self._log("INFO", f"Reading hospital directory from {source}")

    def log_record_rejected(
        self,
        record: HospitalRecord,
        check_name: str,
        reason: str,
    ) -> None:
        """Log that a record failed qualification."""
        if self._verbose:
            label = record.name or f"row id={record.id!r}"
            self._log("DEBUG", f"{label} rejected by {check_name}: {reason}")

    def log_row_error(self, row_number: int, message: str) -> None:
        self._log("WARN", f"Row {row_number} skipped: {message}")

    def log_load_end(
        self,
        report: LoadReport,
        district_count: int,
        state_count: int,
    ) -> None:
        """Log the end of an ingestion pass."""
        self._log(
            "INFO",
            f"Loaded {report.accepted} hospitals from {report.rows_read} rows "
            f"({report.rejected} rejected, {report.errored} skipped, "
            f"{report.duration_seconds:.3f}s)",
        )
        self._log("INFO", f"Found {district_count} districts and {state_count} states")

    def log_anomaly(
        self,
        message: str,
        severity: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an anomaly or warning."""
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
