from pydantic import BaseModel, Field
from typing import Optional
from models.base import LocalRecord

class Part(LocalRecord):
    name: str = ""
    part_number: str
    quantity: int = Field(default=1, gt=0)
    installed_date: str = ""  # YYYY-MM-DD

    # Present on backend-synced parts only
    serial_number: Optional[str] = None
    supplier: Optional[str] = None
    price: Optional[float] = None

class PartRecordCreate(BaseModel):
    """POST /api/parts body"""
    aircraft_id: str
    part_number: str
    name: Optional[str] = None
    serial_number: Optional[str] = None
    quantity: int = 1
    action: str = "installed"
    installed_date: Optional[str] = None
    supplier: Optional[str] = None
    price: Optional[float] = None
    source_scan_id: Optional[str] = None
