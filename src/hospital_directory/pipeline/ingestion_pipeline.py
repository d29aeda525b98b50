"""
Ingestion Pipeline - Builds the Directory Store.

The IngestionPipeline drains a row source once: each row is normalized,
mapped to a HospitalRecord and classified; accepted records accumulate in
a private builder. The finished store is only published after the source
is exhausted, so readers never observe a partial load.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, Union

from hospital_directory.adapters.console_logger import ConsoleAuditLogger
from hospital_directory.adapters.csv_source import CsvRowSource
from hospital_directory.adapters.metrics_collector import InMemoryMetricsCollector
from hospital_directory.adapters.row_source import RowSourceProtocol, SourceUnavailable
from hospital_directory.config.models import DirectoryConfig
from hospital_directory.domain.entities import HospitalRecord
from hospital_directory.domain.value_objects import ClassificationResult, LoadReport
from hospital_directory.filters.qualification import QualificationClassifier
from hospital_directory.normalization.normalizer import to_record
from hospital_directory.resilience.error_handler import (
    ErrorHandler,
    PartialResult,
    RetryConfig,
    RetryExhausted,
    RowProcessingError,
)
from hospital_directory.store.directory_store import (
    DirectoryBuilder,
    DirectoryStore,
    StoreHolder,
)

logger = logging.getLogger(__name__)

# Number of sample districts/states shown in the debug summary
_SAMPLE_SIZE = 5


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_load_start(self, source: str) -> None:
        ...

    def log_record_rejected(self, record: HospitalRecord, check_name: str, reason: str) -> None:
        ...

    def log_row_error(self, row_number: int, message: str) -> None:
        ...

    def log_load_end(self, report: LoadReport, district_count: int, state_count: int) -> None:
        ...

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int = 1, tags: Optional[Dict] = None
    ) -> None:
        ...

    def get_metrics(self) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class LoadOutcome:
    """A built store together with the report of the pass that built it."""

    store: DirectoryStore
    report: LoadReport


class IngestionPipeline:
    """Main orchestrator for loading the directory."""

    def __init__(
        self,
        source: RowSourceProtocol,
        config: Optional[DirectoryConfig] = None,
        classifier: Optional[QualificationClassifier] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Args:
            source: Row source to drain
            config: Directory configuration (defaults apply when omitted)
            classifier: Qualification classifier (built from config if omitted)
            audit_logger: For the audit trail
            metrics_collector: For load counters and timings
            error_handler: For source retry and row isolation
        """
        self.source = source
        self.config = config or DirectoryConfig()
        self.classifier = classifier or QualificationClassifier(
            self.config.qualification_filter
        )
        self.audit_logger = audit_logger or ConsoleAuditLogger(
            verbose=self.config.ingestion.verbose_audit
        )
        self.metrics_collector = metrics_collector or InMemoryMetricsCollector()
        self.error_handler = error_handler or ErrorHandler(
            RetryConfig(
                max_attempts=self.config.ingestion.open_attempts,
                base_delay_seconds=self.config.ingestion.retry_delay_seconds,
                retryable_exceptions=(SourceUnavailable,),
            )
        )

    def run(self) -> LoadOutcome:
        """
        Execute one ingestion pass.

        Returns:
            LoadOutcome with the completed store and its LoadReport

        Raises:
            SourceUnavailable: If the source cannot be opened or read
        """
        start_time = time.perf_counter()
        correlation_id = str(uuid.uuid4())
        self.audit_logger.set_correlation_id(correlation_id)
        source_name = self.source.describe()
        self.audit_logger.log_load_start(source_name)

        # 1. Open source (with retry)
        rows = self._open_source(source_name)

        # 2. Normalize, classify, accumulate
        builder = DirectoryBuilder()
        partial = PartialResult()
        rejections: Counter = Counter()
        rows_read = 0

        for row_number, raw in enumerate(rows, start=1):
            rows_read = row_number
            processed = self.error_handler.isolate_row(
                row_number, raw, self._process_row, partial
            )
            if processed is None:
                _, error = partial.failed[-1]
                self.audit_logger.log_row_error(row_number, str(error))
                continue

            record, result = processed
            if result.accepted:
                builder.add(record)
            else:
                rejections[result.failed_check] += 1
                self.audit_logger.log_record_rejected(
                    record, result.failed_check or "", result.reason
                )

        # 3. Freeze
        store = builder.build()
        duration = time.perf_counter() - start_time
        report = LoadReport(
            source=source_name,
            rows_read=rows_read,
            accepted=len(store),
            rejected=sum(rejections.values()),
            errored=len(partial.failed),
            rejections_by_check=dict(rejections),
            duration_seconds=duration,
        )

        self._record_metrics(report)
        self._report(store, report)
        return LoadOutcome(store=store, report=report)

    def _process_row(
        self, raw: Mapping[str, Any]
    ) -> Tuple[HospitalRecord, ClassificationResult]:
        record = to_record(raw)
        try:
            result = self.classifier.classify(record)
        except (ValueError, TypeError) as e:
            raise RowProcessingError(f"cannot classify record: {e}") from e
        return record, result

    def _open_source(self, source_name: str):
        try:
            return self.error_handler.retry(self.source.open, operation_name="open_source")
        except RetryExhausted as e:
            cause = e.__cause__
            if isinstance(cause, SourceUnavailable):
                raise cause
            raise SourceUnavailable(str(e), source=source_name) from e

    def _record_metrics(self, report: LoadReport) -> None:
        self.metrics_collector.record_timing("load_seconds", report.duration_seconds)
        self.metrics_collector.record_count("rows_read_total", report.rows_read)
        self.metrics_collector.record_count("records_accepted_total", report.accepted)
        self.metrics_collector.record_count("rows_errored_total", report.errored)
        for check_name, count in report.rejections_by_check.items():
            self.metrics_collector.record_count(
                "records_rejected_total", count, {"check": check_name}
            )

    def _report(self, store: DirectoryStore, report: LoadReport) -> None:
        districts = store.districts()
        states = store.states()
        self.audit_logger.log_load_end(report, len(districts), len(states))

        if report.error_rate > self.config.ingestion.max_error_rate:
            message = (
                f"{report.errored} of {report.rows_read} rows could not be processed "
                f"({report.error_rate:.1%})"
            )
            logger.error(message)
            self.audit_logger.log_anomaly(
                message, severity="ERROR", context={"source": report.source}
            )

        logger.info(
            f"Loaded {report.accepted} hospitals from {report.source}; "
            f"found {len(districts)} districts and {len(states)} states"
        )
        logger.debug(f"Sample states: {states[:_SAMPLE_SIZE]}")
        logger.debug(f"Sample districts: {districts[:_SAMPLE_SIZE]}")
        if not store.is_empty:
            logger.debug(f"Sample hospital: {store.records[0].to_dict()}")


def _as_source(
    source: Union[RowSourceProtocol, str, Path],
    config: DirectoryConfig,
) -> RowSourceProtocol:
    if isinstance(source, (str, Path)):
        return CsvRowSource(
            source,
            encoding=config.source.encoding,
            delimiter=config.source.delimiter,
        )
    return source


def load_directory(
    source: Union[RowSourceProtocol, str, Path, None] = None,
    config: Optional[DirectoryConfig] = None,
    holder: Optional[StoreHolder] = None,
    **pipeline_kwargs: Any,
) -> DirectoryStore:
    """
    Build the directory store from a row source.

    Args:
        source: Row source, or a CSV path; defaults to config.source
        config: Directory configuration
        holder: If given, the finished store is published here
        **pipeline_kwargs: Extra IngestionPipeline dependencies

    Returns:
        The completed DirectoryStore

    Raises:
        SourceUnavailable: If the source cannot be opened or read; the
            holder keeps whatever it held before
    """
    config = config or DirectoryConfig()
    if source is None:
        row_source = CsvRowSource.from_config(config.source)
    else:
        row_source = _as_source(source, config)

    pipeline = IngestionPipeline(row_source, config=config, **pipeline_kwargs)
    try:
        outcome = pipeline.run()
    except SourceUnavailable as e:
        logger.error(f"Hospital directory unavailable: {e.message}")
        raise

    if holder is not None:
        holder.publish(outcome.store)
    return outcome.store


async def load_directory_async(
    source: Union[RowSourceProtocol, str, Path, None] = None,
    config: Optional[DirectoryConfig] = None,
    holder: Optional[StoreHolder] = None,
    **pipeline_kwargs: Any,
) -> DirectoryStore:
    """Run load_directory on a worker thread."""
    return await asyncio.to_thread(
        load_directory, source, config, holder, **pipeline_kwargs
    )
