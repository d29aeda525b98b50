"""
Query Engine - Read-Only Lookups over the Directory Store.

Every operation reads one store snapshot and never mutates it, so the
engine can serve concurrent callers without locking.

Ranking contracts:
    - by_district with a locality is a stable partition: locality
      matches first, store order kept inside each group
    - search is a strict multi-key sort: exact name match, then
      locality match, then locale-aware name order
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from hospital_directory.domain.entities import HospitalRecord
from hospital_directory.store.directory_store import DirectoryStore, StoreHolder
from hospital_directory.text import collation_key, contains_folded, equals_folded, fold
from hospital_directory.validation.request_validator import RequestValidator

logger = logging.getLogger(__name__)


class NotFound(LookupError):
    """Raised when no record has the requested identifier."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Hospital not found: {record_id}")
        self.record_id = record_id


class QueryEngine:
    """Filter, lookup and search operations."""

    def __init__(
        self,
        store: Union[DirectoryStore, StoreHolder],
        validator: Optional[RequestValidator] = None,
    ) -> None:
        """
        Args:
            store: A built store, or a holder whose current store is read per query
            validator: Argument validator
        """
        self._source = store
        self._validator = validator or RequestValidator()

    @property
    def store(self) -> DirectoryStore:
        if isinstance(self._source, StoreHolder):
            return self._source.current
        return self._source

    def list_all(self) -> List[HospitalRecord]:
        return self.store.list_all()

    def by_district(
        self,
        district: str,
        locality: Optional[str] = None,
    ) -> List[HospitalRecord]:
        """
        Records in a district, optionally with a locality brought forward.

        Args:
            district: District name, matched exactly ignoring case
            locality: Subdistrict substring; matching records come first

        Raises:
            InvalidArgument: If district is missing or blank
        """
        district = self._validator.require("district", district)
        locality = self._validator.optional("locality", locality)

        matches = [r for r in self.store.records if equals_folded(r.district, district)]
        if locality is None:
            return matches

        in_locality = [r for r in matches if contains_folded(r.subdistrict, locality)]
        elsewhere = [r for r in matches if not contains_folded(r.subdistrict, locality)]
        return in_locality + elsewhere

    def by_state(self, state: str) -> List[HospitalRecord]:
        state = self._validator.require("state", state)
        return [r for r in self.store.records if equals_folded(r.state, state)]

    def districts_for_state(self, state: str) -> List[str]:
        """Distinct districts of the records in a state, sorted."""
        state = self._validator.require("state", state)
        return sorted(
            {r.district for r in self.store.records if r.district and equals_folded(r.state, state)}
        )

    def by_locality(self, locality: str) -> List[HospitalRecord]:
        locality = self._validator.require("locality", locality)
        return [r for r in self.store.records if contains_folded(r.subdistrict, locality)]

    def by_id(self, record_id: str) -> HospitalRecord:
        """
        Look up a record by identifier (case-sensitive, first match wins).

        Raises:
            InvalidArgument: If record_id is missing or blank
            NotFound: If no record has this identifier
        """
        record_id = self._validator.require("id", record_id)
        for record in self.store.records:
            if record.id == record_id:
                return record
        logger.debug(f"No hospital with id {record_id!r}")
        raise NotFound(record_id)

    def search(
        self,
        query: str,
        district: Optional[str] = None,
        locality: Optional[str] = None,
    ) -> List[HospitalRecord]:
        """
        Name search ranked by relevance.

        Args:
            query: Substring of the hospital name
            district: Restrict to this district (exact, ignoring case)
            locality: Restrict to subdistricts containing this text

        Returns:
            Matches ordered exact-name first, then locality, then by name

        Raises:
            InvalidArgument: If query is missing or blank
        """
        query = self._validator.require("query", query)
        district = self._validator.optional("district", district)
        locality = self._validator.optional("locality", locality)

        candidates = [r for r in self.store.records if contains_folded(r.name, query)]
        if district is not None:
            candidates = [r for r in candidates if equals_folded(r.district, district)]
        if locality is not None:
            candidates = [r for r in candidates if contains_folded(r.subdistrict, locality)]

        folded_query = fold(query)

        def rank(record: HospitalRecord):
            exact = fold(record.name) == folded_query
            in_locality = locality is not None and contains_folded(record.subdistrict, locality)
            return (not exact, locality is not None and not in_locality, collation_key(record.name))

        return sorted(candidates, key=rank)

    def districts(self) -> List[str]:
        return self.store.districts()

    def states(self) -> List[str]:
        return self.store.states()
