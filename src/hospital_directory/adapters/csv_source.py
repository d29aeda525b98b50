"""
CSV Row Source.

Streams rows of the hospital directory CSV export. The header is read
when the source is opened so that a missing, unreadable or undecodable
file fails before any row is processed.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import IO, Dict, Iterator, Optional, Union

from hospital_directory.adapters.row_source import SourceUnavailable
from hospital_directory.config.models import SourceConfig

logger = logging.getLogger(__name__)


class CsvRowSource:
    """Row source backed by a CSV file on disk."""

    def __init__(
        self,
        path: Union[str, Path],
        encoding: str = "utf-8-sig",
        delimiter: str = ",",
    ) -> None:
        """
        Initialize CSV source.

        Args:
            path: Path to the directory CSV
            encoding: File encoding (utf-8-sig tolerates a BOM)
            delimiter: Field delimiter
        """
        self.path = Path(path)
        self.encoding = encoding
        self.delimiter = delimiter

    @classmethod
    def from_config(
        cls,
        config: SourceConfig,
        base_path: Optional[Path] = None,
    ) -> "CsvRowSource":
        """
        Build a source from configuration.

        Raises:
            SourceUnavailable: If no path is configured
        """
        if not config.path:
            raise SourceUnavailable("no source path configured")
        path = Path(config.path)
        if base_path is not None and not path.is_absolute():
            path = base_path / path
        return cls(path, encoding=config.encoding, delimiter=config.delimiter)

    def describe(self) -> str:
        return str(self.path)

    def open(self) -> Iterator[Dict[str, Optional[str]]]:
        """
        Open the file and read its header.

        Returns:
            Iterator over data rows; the file closes when it is exhausted

        Raises:
            SourceUnavailable: If the file cannot be opened or its header read
        """
        logger.info(f"Loading hospital directory from {self.path}")
        try:
            handle = open(self.path, newline="", encoding=self.encoding)
        except OSError as e:
            raise SourceUnavailable(
                f"cannot open {self.path}: {e.strerror or e}", source=str(self.path)
            ) from e

        try:
            reader = csv.DictReader(handle, delimiter=self.delimiter)
            fieldnames = reader.fieldnames
        except (UnicodeDecodeError, csv.Error, OSError) as e:
            handle.close()
            raise SourceUnavailable(
                f"cannot read header of {self.path}: {e}", source=str(self.path)
            ) from e

        if not fieldnames:
            logger.warning(f"{self.path} is empty")
        else:
            logger.debug(f"{self.path} columns: {', '.join(fieldnames)}")

        return self._iter_rows(handle, reader)

    def _iter_rows(
        self,
        handle: IO[str],
        reader: "csv.DictReader[str]",
    ) -> Iterator[Dict[str, Optional[str]]]:
        with handle:
            try:
                yield from reader
            except (UnicodeDecodeError, csv.Error, OSError) as e:
                raise SourceUnavailable(
                    f"read failed at line {reader.line_num} of {self.path}: {e}",
                    source=str(self.path),
                ) from e
