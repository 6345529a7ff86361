from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional

# Profile fields the backend does not carry; persisted on the device
LOCAL_ONLY_FIELDS = (
    "category",
    "engine_type",
    "max_weight",
    "base_operations",
    "country_manufacture",
    "registration_type",
    "owner_since",
    "address_line1",
    "address_line2",
    "city",
    "country",
    "photo_uri",
    "designator",
    "owner_name",
    "owner_city",
    "owner_province",
)

class AircraftBase(BaseModel):
    registration: str  # Format: C-GABC (always UPPER CASE)
    common_name: str = ""
    model: str = ""
    serial_number: str = ""
    manufacturer: str = ""
    year_manufacture: str = ""

    # Hours
    airframe_hours: float = 0.0
    engine_hours: float = 0.0
    propeller_hours: float = 0.0

    # Local-only
    category: str = ""
    engine_type: str = ""
    max_weight: str = ""
    base_operations: str = ""
    country_manufacture: str = ""
    registration_type: str = ""
    owner_since: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    country: str = ""
    photo_uri: Optional[str] = None
    designator: Optional[str] = None
    owner_name: Optional[str] = None
    owner_city: Optional[str] = None
    owner_province: Optional[str] = None

    # New TC AD/SB items flagged by the backend
    adsb_has_new_tc_items: bool = Field(default=False, alias="adsb_has_new_tc_items")

    @field_validator("registration")
    @classmethod
    def upper_registration(cls, v: str) -> str:
        return v.strip().upper()

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class Aircraft(AircraftBase):
    id: str
    created_at: str = ""

class AircraftCreate(BaseModel):
    """POST/PUT /api/aircraft body"""
    registration: Optional[str] = None
    aircraft_type: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    serial_number: Optional[str] = None
    airframe_hours: Optional[float] = None
    engine_hours: Optional[float] = None
    propeller_hours: Optional[float] = None
    photo_url: Optional[str] = None
    description: Optional[str] = None
    purpose: Optional[str] = None
    base_of_operations: Optional[str] = None
