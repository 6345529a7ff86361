"""Invoice Models for AeroLogix"""

from pydantic import BaseModel, model_validator
from typing import Optional
from models.base import LocalRecord


class Invoice(LocalRecord):
    """
    Maintenance invoice.

    total_amount is filled in from parts + labor when the caller does not
    supply one. It is never re-checked afterwards.
    """
    supplier: str = ""
    date: str = ""
    parts_amount: float = 0.0
    labor_amount: float = 0.0
    hours_worked: float = 0.0
    total_amount: Optional[float] = None
    notes: str = ""

    @model_validator(mode="after")
    def fill_total(self):
        if self.total_amount is None:
            self.total_amount = self.parts_amount + self.labor_amount
        return self


class InvoiceRecordCreate(BaseModel):
    """POST /api/invoices body"""
    aircraft_id: str
    vendor_name: Optional[str] = None
    invoice_date: Optional[str] = None
    invoice_number: Optional[str] = None
    labor_cost: Optional[float] = None
    parts_cost: Optional[float] = None
    total_cost: Optional[float] = None
    labor_hours: Optional[float] = None
    description: Optional[str] = None
    source_scan_id: Optional[str] = None
