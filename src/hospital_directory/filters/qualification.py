"""
Qualification Filter Implementation.

Decides whether a hospital record belongs in the served directory.
Small-format facilities (dispensaries, nursing homes, clinics) and
pediatric-only facilities are excluded; bed and doctor counts stand in
for "is a substantive hospital".

The checks are an ordered list of named predicates so each one can be
tested on its own and the first failure can be reported.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from hospital_directory.config.models import QualificationFilterConfig
from hospital_directory.domain.entities import HospitalRecord
from hospital_directory.domain.value_objects import ClassificationResult
from hospital_directory.text import contains_any_folded, contains_folded

_LEADING_INT_RE = re.compile(r"^\s*([+-]?)([0-9]+)")

# Longer digit runs overflow a double; they count as infinite
_MAX_COUNT_DIGITS = 308

Count = Union[int, float]


def parse_count(value: str) -> Optional[Count]:
    """
    Parse the leading integer of a count field.

    "25" and "25 beds" give 25; "", "abc", "beds: 25" and non-ASCII
    digits give None. Digit runs longer than a double can hold give +/-inf.
    """
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    count: Count = math.inf if len(digits) > _MAX_COUNT_DIGITS else int(digits)
    return -count if sign == "-" else count


@dataclass(frozen=True)
class QualificationCheck:
    """A named predicate; returns (passes, reason)."""

    name: str
    description: str
    predicate: Callable[[HospitalRecord], Tuple[bool, str]]

    def __call__(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self.predicate(record)


class QualificationClassifier:
    """Accept or reject hospital records."""

    def __init__(self, config: Optional[QualificationFilterConfig] = None) -> None:
        """
        Initialize with configuration.

        Args:
            config: Qualification thresholds and excluded terms
        """
        self.config = config or QualificationFilterConfig()
        self._checks: Tuple[QualificationCheck, ...] = (
            QualificationCheck("name_present", "name is not empty", self._check_name_present),
            QualificationCheck(
                "allopathic_medicine",
                "system of medicine includes allopathy",
                self._check_medicine,
            ),
            QualificationCheck(
                "category_not_small_format",
                "category is not a dispensary or nursing home",
                self._check_category,
            ),
            QualificationCheck(
                "name_not_excluded",
                "name does not describe a clinic, nursing home or children's facility",
                self._check_name_terms,
            ),
            QualificationCheck(
                "specialties_not_pediatric",
                "specialties are not pediatric",
                self._check_specialties,
            ),
            QualificationCheck(
                "care_type_not_nursing",
                "care type is not nursing",
                self._check_care_type,
            ),
            QualificationCheck("min_beds", "more beds than the minimum", self._check_beds),
            QualificationCheck("min_doctors", "more doctors than the minimum", self._check_doctors),
        )

    @property
    def name(self) -> str:
        """Unique name of this filter stage."""
        return "qualification_filter"

    @property
    def checks(self) -> Tuple[QualificationCheck, ...]:
        return self._checks

    def check(self, name: str) -> QualificationCheck:
        """Look up a check by name."""
        for check in self._checks:
            if check.name == name:
                return check
        raise KeyError(name)

    def classify(self, record: HospitalRecord) -> ClassificationResult:
        """Run the checks in order and report the first failure."""
        for check in self._checks:
            passes, reason = check(record)
            if not passes:
                return ClassificationResult(
                    accepted=False, failed_check=check.name, reason=reason
                )
        return ClassificationResult(accepted=True)

    def accepts(self, record: HospitalRecord) -> bool:
        return self.classify(record).accepted

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _check_name_present(self, record: HospitalRecord) -> Tuple[bool, str]:
        if not record.name:
            return False, "name is empty"
        return True, ""

    def _check_medicine(self, record: HospitalRecord) -> Tuple[bool, str]:
        required = self.config.required_medicine
        if not contains_folded(record.medicine, required):
            return False, f"medicine={record.medicine!r} does not include {required}"
        return True, ""

    def _check_category(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self._excludes("category", record.category, self.config.excluded_category_terms)

    def _check_name_terms(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self._excludes("name", record.name, self.config.excluded_name_terms)

    def _check_specialties(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self._excludes(
            "specialties", record.specialties, self.config.excluded_specialty_terms
        )

    def _check_care_type(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self._excludes("care_type", record.care_type, self.config.excluded_care_type_terms)

    def _check_beds(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self._exceeds("total_beds", record.total_beds, self.config.min_beds_exclusive)

    def _check_doctors(self, record: HospitalRecord) -> Tuple[bool, str]:
        return self._exceeds("doctors", record.doctors, self.config.min_doctors_exclusive)

    @staticmethod
    def _excludes(field: str, value: str, terms: List[str]) -> Tuple[bool, str]:
        found = contains_any_folded(value, terms)
        if found is not None:
            return False, f"{field} contains {found!r}"
        return True, ""

    @staticmethod
    def _exceeds(field: str, value: str, minimum: int) -> Tuple[bool, str]:
        count = parse_count(value)
        if count is None:
            return False, f"{field}={value!r} is not a number"
        if count <= minimum:
            return False, f"{field}={count} <= {minimum}"
        return True, ""
