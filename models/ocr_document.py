from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict
from enum import Enum

class OcrDocumentType(str, Enum):
    MAINTENANCE_REPORT = "maintenance_report"
    INVOICE = "invoice"
    OTHER = "other"

class OcrSourceType(str, Enum):
    PHOTO = "photo"
    IMPORT = "import"

class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class DetectedHours(_CamelModel):
    airframe_hours: Optional[float] = None
    engine_hours: Optional[float] = None
    propeller_hours: Optional[float] = None

class DetectedPart(_CamelModel):
    name: str
    part_number: str
    quantity: int = 1
    action: str = "installed"  # installed, replaced, removed, inspected

class DetectedAdSb(_CamelModel):
    type: str  # AD or SB
    number: str
    description: str = ""

class DetectedElt(_CamelModel):
    test_mentioned: bool = False
    test_date: Optional[str] = None
    installation_mentioned: bool = False
    removal_mentioned: bool = False

class DetectedInvoice(_CamelModel):
    supplier: str = ""
    date: str = ""
    parts_amount: float = 0.0
    labor_amount: float = 0.0
    hours_worked: float = 0.0
    total_amount: float = 0.0

class MaintenanceReportData(_CamelModel):
    """Structured data read from a maintenance report"""
    registration: Optional[str] = None
    report_date: Optional[str] = None
    amo: Optional[str] = None
    description: Optional[str] = None
    hours: Optional[DetectedHours] = None
    parts: List[DetectedPart] = []
    ad_sbs: List[DetectedAdSb] = []
    elt: Optional[DetectedElt] = None
    confidence: Dict[str, float] = {}

class InvoiceData(_CamelModel):
    invoice: DetectedInvoice
    confidence: Dict[str, float] = {}

class OcrDocument(_CamelModel):
    id: str
    type: OcrDocumentType
    aircraft_id: str
    registration: str = ""
    scan_date: str = ""
    document_date: Optional[str] = None

    # Source
    source_type: OcrSourceType = OcrSourceType.PHOTO
    image_uri: Optional[str] = None

    # Detected data (depends on type)
    maintenance_data: Optional[MaintenanceReportData] = None
    invoice_data: Optional[InvoiceData] = None

    # Validation - nothing is applied before the user validates
    validated: bool = False
    applied_to_modules: List[str] = []

    # User tags (for 'other' type)
    tags: List[str] = []
    notes: Optional[str] = None

    # Anti-duplicate key for maintenance reports
    duplicate_key: Optional[str] = None
