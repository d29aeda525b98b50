"""
Record and CSV builders shared by the test suite.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List

from hospital_directory.domain.entities import COLUMN_MAP, HospitalRecord


def make_row(**overrides: str) -> Dict[str, str]:
    """A raw CSV row for a hospital that passes every qualification check."""
    row = {column: "" for column in COLUMN_MAP}
    row.update(
        {
            "Sr_No": "1",
            "Hospital_Name": "City General Hospital",
            "Hospital_Category": "General",
            "Hospital_Care_Type": "Private",
            "Discipline_Systems_of_Medicine": "Allopathy",
            "State": "Maharashtra",
            "District": "Pune",
            "Subdistrict": "Haveli",
            "Total_Num_Beds": "50",
            "Number_Doctor": "10",
        }
    )
    row.update(overrides)
    return row


def make_record(**overrides: str) -> HospitalRecord:
    """A HospitalRecord that passes every qualification check."""
    fields = {
        "id": "1",
        "name": "City General Hospital",
        "category": "General",
        "care_type": "Private",
        "medicine": "Allopathy",
        "state": "Maharashtra",
        "district": "Pune",
        "subdistrict": "Haveli",
        "total_beds": "50",
        "doctors": "10",
    }
    fields.update(overrides)
    return HospitalRecord(**fields)


def sample_rows() -> List[Dict[str, str]]:
    """A small directory: four qualifying hospitals and six rejects."""
    return [
        make_row(
            Sr_No="1",
            Hospital_Name="City General Hospital",
            Location_Coordinates="18.52, 73.85",
            Specialties="Oncology, Cardiology",
            Facilities="ICU, Blood Bank",
            Bloodbank_Phone_No="0",
        ),
        make_row(
            Sr_No="2",
            Hospital_Name="Ruby Hall Hospital",
            Subdistrict="Pune City",
            Total_Num_Beds="200",
            Number_Doctor="40",
        ),
        make_row(Sr_No="3", Hospital_Name="Sunrise Hospital", Hospital_Category="Nursing Home"),
        make_row(Sr_No="4", Hospital_Name="Rainbow Children Hospital"),
        make_row(Sr_No="5", Hospital_Name="Sahyadri Hospital", Total_Num_Beds="10"),
        make_row(
            Sr_No="6",
            Hospital_Name="Lilavati Hospital",
            District="Mumbai",
            Subdistrict="Bandra",
            Total_Num_Beds="300",
            Number_Doctor="80",
        ),
        make_row(Sr_No="7", Hospital_Name="Ayush Hospital", Discipline_Systems_of_Medicine="Ayurveda"),
        make_row(
            Sr_No="8",
            Hospital_Name="Apollo Hospital",
            State="Karnataka",
            District="Bengaluru Urban",
            Subdistrict="Bangalore North",
            Total_Num_Beds="0",
        ),
        make_row(
            Sr_No="9",
            Hospital_Name="Manipal Hospital",
            State="Karnataka",
            District="Bengaluru Urban",
            Subdistrict="Bangalore South",
            Total_Num_Beds="600",
            Number_Doctor="150",
        ),
        make_row(Sr_No="10", Hospital_Name="Jehangir Hospital", Number_Doctor="2"),
    ]


def write_csv(path: Path, rows: List[Dict[str, str]]) -> Path:
    """Write rows as a directory CSV export."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(COLUMN_MAP))
        writer.writeheader()
        writer.writerows(rows)
    return path
