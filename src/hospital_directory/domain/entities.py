"""
Core Domain Entities.

This module defines the hospital record served by the query engine and
the mapping from directory CSV columns onto its fields.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from pydantic import BaseModel, Field


# CSV column -> HospitalRecord field
COLUMN_MAP: Dict[str, str] = {
    "Sr_No": "id",
    "Hospital_Name": "name",
    "Location_Coordinates": "coordinates",
    "Location": "location",
    "Hospital_Category": "category",
    "Hospital_Care_Type": "care_type",
    "Discipline_Systems_of_Medicine": "medicine",
    "Address_Original_First_Line": "address",
    "State": "state",
    "District": "district",
    "Subdistrict": "subdistrict",
    "Pincode": "pincode",
    "Telephone": "telephone",
    "Mobile_Number": "mobile",
    "Emergency_Num": "emergency",
    "Ambulance_Phone_No": "ambulance",
    "Bloodbank_Phone_No": "bloodbank",
    "Hospital_Primary_Email_Id": "email",
    "Website": "website",
    "Specialties": "specialties",
    "Facilities": "facilities",
    "Total_Num_Beds": "total_beds",
    "Number_Private_Wards": "private_wards",
    "Number_Doctor": "doctors",
}

# Field -> key used when a record is serialized for clients
_EXPORT_NAMES: Dict[str, str] = {
    "care_type": "careType",
    "total_beds": "totalBeds",
    "private_wards": "privateWards",
}


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class HospitalRecord(BaseModel):
    """A qualifying hospital as served by the directory."""

    id: str = Field(default="", description="Source row identifier (Sr_No)")
    name: str = Field(default="", description="Hospital name")
    coordinates: str = Field(default="", description="Raw lat/long text")
    location: str = ""
    category: str = Field(default="", description="Hospital category")
    care_type: str = Field(default="", description="Public/private care type")
    medicine: str = Field(default="", description="Systems of medicine")
    address: str = ""
    state: str = ""
    district: str = ""
    subdistrict: str = Field(default="", description="Locality within district")
    pincode: str = ""
    telephone: str = ""
    mobile: str = ""
    emergency: str = ""
    ambulance: str = ""
    bloodbank: str = ""
    email: str = ""
    website: str = ""
    specialties: str = Field(default="", description="Comma-joined specialties")
    facilities: str = Field(default="", description="Comma-joined facilities")
    total_beds: str = ""
    private_wards: str = ""
    doctors: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_columns(cls, row: Mapping[str, str]) -> "HospitalRecord":
        """Build a record from a normalized CSV row; absent columns become ""."""
        return cls(**{field: row.get(column) or "" for column, field in COLUMN_MAP.items()})

    @property
    def specialty_list(self) -> List[str]:
        return _split_list(self.specialties)

    @property
    def facility_list(self) -> List[str]:
        return _split_list(self.facilities)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys clients expect."""
        return {
            _EXPORT_NAMES.get(key, key): value
            for key, value in self.model_dump().items()
        }
