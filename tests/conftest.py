"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List

import pytest

from hospital_directory.adapters.console_logger import ConsoleAuditLogger
from hospital_directory.adapters.metrics_collector import InMemoryMetricsCollector
from hospital_directory.config.models import DirectoryConfig, QualificationFilterConfig
from hospital_directory.store.directory_store import DirectoryBuilder, DirectoryStore
from tests.fixtures.records import make_record, sample_rows, write_csv


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> DirectoryConfig:
    return DirectoryConfig()


@pytest.fixture
def qualification_config() -> QualificationFilterConfig:
    return QualificationFilterConfig()


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    return InMemoryMetricsCollector()


@pytest.fixture
def directory_csv(tmp_path: Path) -> Path:
    """Sample directory written to a temporary CSV file."""
    return write_csv(tmp_path / "hospital_directory.csv", sample_rows())


@pytest.fixture
def csv_writer(tmp_path: Path) -> Callable[[List[Dict[str, str]]], Path]:
    """Write arbitrary rows to a temporary CSV file."""

    def _write(rows: List[Dict[str, str]], name: str = "directory.csv") -> Path:
        return write_csv(tmp_path / name, rows)

    return _write


@pytest.fixture
def query_store() -> DirectoryStore:
    """A store for query tests, built directly from records."""
    builder = DirectoryBuilder()
    for record in [
        make_record(id="101", name="Sassoon General Hospital", subdistrict="Pune City"),
        make_record(id="102", name="Aditya Birla Hospital", subdistrict="Haveli"),
        make_record(id="103", name="Jupiter Hospital", subdistrict="Pune City"),
        make_record(id="104", name="Deenanath Hospital", subdistrict="Mulshi"),
        make_record(id="105", name="General Hospital", district="Satara", subdistrict="Karad"),
        make_record(
            id="106",
            name="Lilavati Hospital",
            district="Mumbai",
            subdistrict="Bandra",
        ),
        make_record(
            id="107",
            name="Manipal Hospital",
            state="Karnataka",
            district="Bengaluru Urban",
            subdistrict="Bangalore South",
        ),
        make_record(
            id="108",
            name="St. John's Hospital",
            state="Karnataka",
            district="Bengaluru Urban",
            subdistrict="Bangalore South",
        ),
        make_record(
            id="109",
            name="KLE Hospital",
            state="Karnataka",
            district="Belagavi",
            subdistrict="",
        ),
        make_record(id="103", name="Duplicate Id Hospital", subdistrict="Haveli"),
    ]:
        builder.add(record)
    return builder.build()
