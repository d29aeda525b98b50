"""
Directory Store - Immutable In-Memory Dataset.

The DirectoryStore holds the accepted records and the derived district
and state sets for the life of the process.

Design Notes:
    - DirectoryBuilder accumulates privately during a load
    - build() freezes the result; the store has no mutation API
    - StoreHolder publishes a finished store as one reference swap
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import FrozenSet, Iterable, List, Optional, Tuple

from hospital_directory.domain.entities import HospitalRecord

logger = logging.getLogger(__name__)


class DirectoryStore:
    """Read-only accepted records plus distinct districts and states."""

    def __init__(
        self,
        records: Iterable[HospitalRecord] = (),
        districts: Iterable[str] = (),
        states: Iterable[str] = (),
    ) -> None:
        self._records: Tuple[HospitalRecord, ...] = tuple(records)
        self._districts: FrozenSet[str] = frozenset(d for d in districts if d)
        self._states: FrozenSet[str] = frozenset(s for s in states if s)

    @classmethod
    def empty(cls) -> "DirectoryStore":
        return cls()

    @property
    def records(self) -> Tuple[HospitalRecord, ...]:
        """Accepted records in source row order."""
        return self._records

    def list_all(self) -> List[HospitalRecord]:
        return list(self._records)

    def districts(self) -> List[str]:
        """Distinct districts, sorted."""
        return sorted(self._districts)

    def states(self) -> List[str]:
        """Distinct states, sorted."""
        return sorted(self._states)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"DirectoryStore(records={len(self._records)}, "
            f"districts={len(self._districts)}, states={len(self._states)})"
        )


class DirectoryBuilder:
    """Accumulates accepted records for a store that is not yet published."""

    def __init__(self) -> None:
        self._records: List[HospitalRecord] = []
        self._districts: set = set()
        self._states: set = set()

    def add(self, record: HospitalRecord) -> None:
        """Append an accepted record and index its district and state."""
        self._records.append(record)
        district = record.district.strip()
        if district:
            self._districts.add(district)
        state = record.state.strip()
        if state:
            self._states.add(state)

    def __len__(self) -> int:
        return len(self._records)

    def build(self) -> DirectoryStore:
        return DirectoryStore(self._records, self._districts, self._states)


class StoreHolder:
    """
    Publication point for the current store.

    Readers always see either the empty store or a fully built one.
    """

    def __init__(self, initial: Optional[DirectoryStore] = None) -> None:
        self._store = initial or DirectoryStore.empty()
        self._lock = Lock()
        self._committed = initial is not None

    @property
    def current(self) -> DirectoryStore:
        with self._lock:
            return self._store

    @property
    def is_committed(self) -> bool:
        with self._lock:
            return self._committed

    def publish(self, store: DirectoryStore) -> None:
        """Swap in a completed store."""
        with self._lock:
            self._store = store
            self._committed = True
        logger.debug(f"Published {store!r}")
