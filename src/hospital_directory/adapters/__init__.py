"""
Adapters Package - Infrastructure Implementations.

Sources:
    - CsvRowSource: Streams the directory CSV export
    - InMemoryRowSource: Rows already held in memory

Loggers:
    - ConsoleAuditLogger: Ingestion audit trail on the console

Metrics:
    - InMemoryMetricsCollector: Counters and timings

Design Principles:
    - Sources implement RowSourceProtocol
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from hospital_directory.adapters.console_logger import ConsoleAuditLogger
from hospital_directory.adapters.csv_source import CsvRowSource
from hospital_directory.adapters.metrics_collector import InMemoryMetricsCollector
from hospital_directory.adapters.row_source import (
    InMemoryRowSource,
    RowSourceProtocol,
    SourceUnavailable,
)

__all__ = [
    "ConsoleAuditLogger",
    "CsvRowSource",
    "InMemoryMetricsCollector",
    "InMemoryRowSource",
    "RowSourceProtocol",
    "SourceUnavailable",
]
