"""ELT (Emergency Locator Transmitter) Models for AeroLogix"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional, Dict
from enum import Enum


class ELTStatus(str, Enum):
    """Visual ELT status - TC-SAFE, not a compliance decision"""
    OPERATIONAL = "operational"
    ATTENTION = "attention"
    EXPIRED = "expired"
    UNKNOWN = "unknown"


class ELTType(str, Enum):
    MHZ_121 = "121.5 MHz"
    MHZ_406 = "406 MHz"
    MHZ_406_GPS = "406 MHz + GPS"
    NONE = ""


# Visual references only, not regulatory
ELT_FIXED_LIMITS = {
    "TEST_MONTHS": 12,
    "BATTERY_MIN_MONTHS": 24,
    "BATTERY_MAX_MONTHS": 72,
}


class EltData(BaseModel):
    """ELT data as held by the ELT store"""
    # Identification
    manufacturer: str = ""
    model: str = ""
    serial_number: str = ""
    elt_type: ELTType = ELTType.NONE
    hex_code: str = ""  # 406 MHz hex code

    # Dates (YYYY-MM-DD)
    activation_date: str = ""
    service_date: str = ""
    last_test_date: str = ""  # 12 month cycle
    last_battery_date: str = ""
    battery_expiry_date: str = ""

    aircraft_id: str = ""

    # OCR metadata
    last_ocr_scan_date: str = ""
    ocr_validated: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def has_any_date(self) -> bool:
        return any([
            self.last_test_date,
            self.last_battery_date,
            self.battery_expiry_date,
            self.activation_date,
            self.service_date,
        ])


class ELTBackend(BaseModel):
    """ELT record as exchanged with /api/elt"""
    aircraft_id: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = None
    beacon_hex_id: Optional[str] = None
    installation_date: Optional[str] = None
    certification_date: Optional[str] = None
    last_test_date: Optional[str] = None
    battery_install_date: Optional[str] = None
    battery_expiry_date: Optional[str] = None
    remarks: Optional[str] = None  # ELT type is carried here


class DateProgress(BaseModel):
    percent: int = 0
    days_remaining: int = 0
    status: ELTStatus = ELTStatus.OPERATIONAL


class OcrScanRecord(BaseModel):
    """Entry of the ELT OCR scan history"""
    id: str
    document_type: str  # maintenance_report, elt_certificate, battery_label, registration, other
    scan_date: str
    detected_data: Dict = {}
    validated: bool = False
    aircraft_id: str = ""
