"""
Row Source Protocol and In-Memory Source.

A row source yields column-keyed text rows. Opening the source is where
an unavailable input is detected; iteration drives the ingestion pass.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Protocol


class SourceUnavailable(Exception):
    """Raised when the row source cannot be opened or read."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source


class RowSourceProtocol(Protocol):
    """Protocol for row sources."""

    def open(self) -> Iterator[Mapping[str, Any]]:
        ...

    def describe(self) -> str:
        ...


class InMemoryRowSource:
    """Row source over rows that are already in memory."""

    def __init__(
        self,
        rows: Optional[Iterable[Mapping[str, Any]]],
        name: str = "memory",
    ) -> None:
        """
        Args:
            rows: Rows to serve; None marks the source as unavailable
            name: Label used in logs and load reports
        """
        self._rows: Optional[List[Mapping[str, Any]]] = None if rows is None else list(rows)
        self._name = name

    def open(self) -> Iterator[Mapping[str, Any]]:
        if self._rows is None:
            raise SourceUnavailable(f"{self._name} has no rows", source=self._name)
        return iter(self._rows)

    def describe(self) -> str:
        return self._name

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, str]], name: str = "memory") -> "InMemoryRowSource":
        """Build a source from dicts keyed by directory column names."""
        return cls(list(records), name=name)
