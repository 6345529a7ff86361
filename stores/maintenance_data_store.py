"""
Maintenance Data Store - Parts, AD/SB, STC, Invoices
Visual storage only - no regulatory decisions
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional
from models.adsb import AdSb
from models.invoice import Invoice
from models.parts import Part
from models.stc import Stc
from services.api import ApiClient
from services.maintenance_service import MaintenanceService
from stores.data_sources import LocalDataSource, RemoteDataSource
from stores.domain_store import DomainStore, NullDomainStore

logger = logging.getLogger(__name__)


class MaintenanceDataStore:
    """One Domain Store per record kind, all on the same kind of data source"""

    def __init__(self, parts: DomainStore, adsbs: DomainStore, stcs: DomainStore, invoices: DomainStore):
        self.parts = parts
        self.adsbs = adsbs
        self.stcs = stcs
        self.invoices = invoices

    @classmethod
    def local(cls) -> "MaintenanceDataStore":
        """Device-only store, ids generated locally"""
        return cls(
            parts=DomainStore(LocalDataSource(Part), "parts"),
            adsbs=DomainStore(LocalDataSource(AdSb), "adsb"),
            stcs=DomainStore(LocalDataSource(Stc), "stc"),
            invoices=DomainStore(LocalDataSource(Invoice), "invoices"),
        )

    @classmethod
    def remote(cls, api: ApiClient) -> "MaintenanceDataStore":
        """Store backed by the /api/parts, /api/adsb, /api/stc, /api/invoices resources"""
        service = MaintenanceService(api)
        return cls(
            parts=DomainStore(RemoteDataSource(service.parts), "parts"),
            adsbs=DomainStore(RemoteDataSource(service.adsb), "adsb"),
            stcs=DomainStore(RemoteDataSource(service.stc), "stc"),
            invoices=DomainStore(RemoteDataSource(service.invoices), "invoices"),
        )

    # ========== PARTS ==========

    async def add_part(self, part: Dict[str, Any]) -> Optional[Part]:
        return await self.parts.add(part)

    async def delete_part(self, part_id: str) -> bool:
        return await self.parts.delete(part_id)

    def get_parts_by_aircraft(self, aircraft_id: str) -> List[Part]:
        return self.parts.query(aircraft_id)

    # ========== AD/SB ==========

    async def add_adsb(self, adsb: Dict[str, Any]) -> Optional[AdSb]:
        return await self.adsbs.add(adsb)

    async def delete_adsb(self, adsb_id: str) -> bool:
        return await self.adsbs.delete(adsb_id)

    def get_adsbs_by_aircraft(self, aircraft_id: str) -> List[AdSb]:
        return self.adsbs.query(aircraft_id)

    # ========== STC ==========

    async def add_stc(self, stc: Dict[str, Any]) -> Optional[Stc]:
        return await self.stcs.add(stc)

    async def delete_stc(self, stc_id: str) -> bool:
        return await self.stcs.delete(stc_id)

    def get_stcs_by_aircraft(self, aircraft_id: str) -> List[Stc]:
        return self.stcs.query(aircraft_id)

    # ========== INVOICES ==========

    async def add_invoice(self, invoice: Dict[str, Any]) -> Optional[Invoice]:
        """total_amount defaults to parts_amount + labor_amount (see Invoice)"""
        return await self.invoices.add(invoice)

    def update_invoice(self, invoice_id: str, **changes) -> Optional[Invoice]:
        return self.invoices.update(invoice_id, **changes)

    async def delete_invoice(self, invoice_id: str) -> bool:
        return await self.invoices.delete(invoice_id)

    def get_invoices_by_aircraft(self, aircraft_id: str) -> List[Invoice]:
        return self.invoices.query(aircraft_id)

    def get_invoice_by_id(self, invoice_id: str) -> Optional[Invoice]:
        return self.invoices.get_by_id(invoice_id)

    # ========== SYNC ALL ==========

    async def sync_all(self, aircraft_id: str) -> Dict[str, bool]:
        """
        Refresh every collection from backend for an aircraft.
        Call this after an OCR apply. Each kind succeeds or fails on its own.
        """
        results = await asyncio.gather(
            self.parts.sync(aircraft_id),
            self.adsbs.sync(aircraft_id),
            self.stcs.sync(aircraft_id),
            self.invoices.sync(aircraft_id),
        )
        return dict(zip(("parts", "adsbs", "stcs", "invoices"), results))


class NullMaintenanceDataStore(MaintenanceDataStore):
    """Used when no MaintenanceDataProvider is mounted"""

    def __init__(self):
        super().__init__(
            parts=NullDomainStore("parts"),
            adsbs=NullDomainStore("adsb"),
            stcs=NullDomainStore("stc"),
            invoices=NullDomainStore("invoices"),
        )
