from pydantic import BaseModel
from typing import Optional
from models.base import LocalRecord

class Stc(LocalRecord):
    number: str  # e.g., "SA02345CH"
    reference: str = ""
    description: str = ""
    date_added: str = ""

class STCRecordCreate(BaseModel):
    """POST /api/stc body"""
    aircraft_id: str
    stc_number: str
    title: Optional[str] = None
    description: Optional[str] = None
    approval_date: Optional[str] = None
    source_scan_id: Optional[str] = None
