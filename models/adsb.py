from pydantic import BaseModel
from typing import Optional
from enum import Enum
from models.base import LocalRecord

class ADSBType(str, Enum):
    AD = "AD"  # Airworthiness Directive
    SB = "SB"  # Service Bulletin

class ADSBStatus(str, Enum):
    COMPLIED = "COMPLIED"
    PENDING = "PENDING"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    UNKNOWN = "UNKNOWN"

class AdSb(LocalRecord):
    kind: ADSBType
    number: str  # e.g., "AD 96-09-06" or "SB 1256"
    description: str = ""
    date_added: str = ""

    # Compliance status (informational only)
    status: Optional[ADSBStatus] = None
    compliance_date: Optional[str] = None

class ADSBRecordCreate(BaseModel):
    """POST /api/adsb body"""
    aircraft_id: str
    adsb_type: ADSBType
    reference_number: str
    description: Optional[str] = None
    status: ADSBStatus = ADSBStatus.UNKNOWN
    compliance_date: Optional[str] = None
    airframe_hours: Optional[float] = None
    engine_hours: Optional[float] = None
    source_scan_id: Optional[str] = None
