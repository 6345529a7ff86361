"""
Maintenance Service - API calls for Parts, AD/SB, STC, Invoices
Maps backend records (snake_case) to the local record shapes
"""

import logging
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar
from pydantic import BaseModel
from models.adsb import AdSb, ADSBRecordCreate
from models.invoice import Invoice, InvoiceRecordCreate
from models.parts import Part, PartRecordCreate
from models.stc import Stc, STCRecordCreate
from services.api import ApiClient
from services.dates import clean_date_string

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def backend_id(doc: Dict[str, Any]) -> str:
    """Backend returns either `id` or the MongoDB `_id`"""
    value = doc.get("id") or doc.get("_id")
    return str(value) if value is not None else ""


# ============== backend -> local ==============

def map_part(doc: Dict[str, Any]) -> Part:
    return Part(
        id=backend_id(doc),
        aircraft_id=doc.get("aircraft_id") or "",
        name=doc.get("name") or "",
        part_number=doc.get("part_number") or "",
        quantity=doc.get("quantity") or 1,
        installed_date=clean_date_string(doc.get("installed_date") or doc.get("installation_date")),
        serial_number=doc.get("serial_number"),
        supplier=doc.get("supplier"),
        price=doc.get("price", doc.get("purchase_price")),
    )


def map_adsb(doc: Dict[str, Any]) -> AdSb:
    return AdSb(
        id=backend_id(doc),
        aircraft_id=doc.get("aircraft_id") or "",
        kind=doc.get("adsb_type") or "AD",
        number=doc.get("reference_number") or "",
        description=doc.get("description") or doc.get("title") or "",
        date_added=clean_date_string(doc.get("created_at")),
        status=doc.get("status"),
        compliance_date=clean_date_string(doc.get("compliance_date")) or None,
    )


def map_stc(doc: Dict[str, Any]) -> Stc:
    return Stc(
        id=backend_id(doc),
        aircraft_id=doc.get("aircraft_id") or "",
        number=doc.get("stc_number") or "",
        reference=doc.get("title") or doc.get("work_order_reference") or "",
        description=doc.get("description") or "",
        date_added=clean_date_string(doc.get("created_at")),
    )


def map_invoice(doc: Dict[str, Any]) -> Invoice:
    return Invoice(
        id=backend_id(doc),
        aircraft_id=doc.get("aircraft_id") or "",
        supplier=doc.get("vendor_name") or doc.get("supplier") or "",
        date=clean_date_string(doc.get("invoice_date")),
        parts_amount=doc.get("parts_cost") or 0,
        labor_amount=doc.get("labor_cost") or 0,
        hours_worked=doc.get("labor_hours") or 0,
        total_amount=doc.get("total_cost", doc.get("total")),
        notes=doc.get("description") or doc.get("remarks") or "",
    )


# ============== local -> backend (creation only) ==============

def part_payload(fields: Dict[str, Any]) -> PartRecordCreate:
    return PartRecordCreate(
        aircraft_id=fields["aircraft_id"],
        part_number=fields["part_number"],
        name=fields.get("name"),
        serial_number=fields.get("serial_number"),
        quantity=fields.get("quantity", 1),
        installed_date=fields.get("installed_date") or None,
        supplier=fields.get("supplier"),
        price=fields.get("price"),
    )


def adsb_payload(fields: Dict[str, Any]) -> ADSBRecordCreate:
    return ADSBRecordCreate(
        aircraft_id=fields["aircraft_id"],
        adsb_type=fields["kind"],
        reference_number=fields["number"].upper(),
        description=fields.get("description"),
        compliance_date=fields.get("compliance_date"),
    )


def stc_payload(fields: Dict[str, Any]) -> STCRecordCreate:
    return STCRecordCreate(
        aircraft_id=fields["aircraft_id"],
        stc_number=fields["number"],
        title=fields.get("reference") or None,
        description=fields.get("description"),
    )


def invoice_payload(fields: Dict[str, Any]) -> InvoiceRecordCreate:
    parts_cost = fields.get("parts_amount", 0)
    labor_cost = fields.get("labor_amount", 0)
    total = fields.get("total_amount")
    return InvoiceRecordCreate(
        aircraft_id=fields["aircraft_id"],
        vendor_name=fields.get("supplier"),
        invoice_date=fields.get("date") or None,
        parts_cost=parts_cost,
        labor_cost=labor_cost,
        total_cost=total if total is not None else parts_cost + labor_cost,
        labor_hours=fields.get("hours_worked"),
        description=fields.get("notes"),
    )


class RemoteResource(Generic[T]):
    """
    One REST resource under /api/<name>.

    list   -> GET    /api/<name>?aircraft_id=<id>
    create -> POST   /api/<name>
    delete -> DELETE /api/<name>/<id>

    `create` takes the snake_case fields of a validated record.
    Errors from the HTTP layer (ApiError) propagate to the caller.
    """

    def __init__(
        self,
        api: ApiClient,
        name: str,
        model: Type[T],
        to_local: Callable[[Dict[str, Any]], T],
        to_backend: Callable[[Dict[str, Any]], BaseModel],
    ):
        self.api = api
        self.name = name
        self.model = model
        self.to_local = to_local
        self.to_backend = to_backend

    @property
    def path(self) -> str:
        return f"/api/{self.name}"

    async def list(self, aircraft_id: str) -> List[T]:
        data = await self.api.get(self.path, params={"aircraft_id": aircraft_id})
        return [self.to_local(doc) for doc in (data or [])]

    async def create(self, fields: Dict[str, Any]) -> T:
        payload = self.to_backend(fields).model_dump(mode="json", exclude_none=True)
        data = await self.api.post(self.path, json=payload)
        # Some routes only answer {"id": ..., "message": ...}
        return self.to_local({**payload, **(data or {})})

    async def delete(self, record_id: str):
        logger.info(f"DELETE {self.name} request: {record_id}")
        await self.api.delete(f"{self.path}/{record_id}")


class MaintenanceService:
    def __init__(self, api: ApiClient):
        self.parts = RemoteResource(api, "parts", Part, map_part, part_payload)
        self.adsb = RemoteResource(api, "adsb", AdSb, map_adsb, adsb_payload)
        self.stc = RemoteResource(api, "stc", Stc, map_stc, stc_payload)
        self.invoices = RemoteResource(api, "invoices", Invoice, map_invoice, invoice_payload)

