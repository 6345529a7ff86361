"""
ELT Store - ELT (Emergency Locator Transmitter) data for one aircraft
TC-SAFE: visual storage only, no regulatory validation.
OCR data must be validated by the user before it is applied.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional
from models.elt import ELT_FIXED_LIMITS, DateProgress, ELTStatus, EltData, OcrScanRecord
from services.api import ApiError
from services.dates import parse_date_string, today_string
from services.elt_service import EltService, to_backend_format, to_frontend_format
from services.progress import elt_date_progress, elt_interval_progress
from stores.data_sources import generate_id

logger = logging.getLogger(__name__)


class EltStore:
    fixed_limits = ELT_FIXED_LIMITS

    def __init__(self, service: Optional[EltService] = None):
        # Without a service the store keeps everything in memory
        self.service = service
        self.elt_data = EltData()
        self.ocr_history: List[OcrScanRecord] = []
        self.is_loading = False
        self.error: Optional[str] = None

    async def load_elt_data(self, aircraft_id: str):
        """Load ELT data from backend for a specific aircraft"""
        if not aircraft_id:
            logger.info("No aircraft_id provided, using empty data")
            self.elt_data = EltData()
            return

        if self.service is None:
            self.elt_data = EltData(aircraft_id=aircraft_id)
            return

        self.is_loading = True
        self.error = None
        try:
            backend_data = await self.service.get_by_aircraft_id(aircraft_id)
            if backend_data:
                self.elt_data = to_frontend_format(backend_data, aircraft_id)
                logger.info(f"ELT data loaded from backend for aircraft: {aircraft_id}")
            else:
                self.elt_data = EltData(aircraft_id=aircraft_id)
                logger.info(f"No ELT data found for aircraft, using empty data: {aircraft_id}")
        except ApiError as e:
            logger.error(f"Error loading ELT data: {e}")
            self.error = str(e) or "Failed to load ELT data"
            self.elt_data = EltData(aircraft_id=aircraft_id)
        finally:
            self.is_loading = False

    async def save_elt_data(self):
        """Save current ELT data to backend"""
        if not self.elt_data.aircraft_id:
            logger.warning("Cannot save ELT data: no aircraft_id")
            return
        if self.service is None:
            return

        self.is_loading = True
        self.error = None
        try:
            await self.service.upsert(self.elt_data.aircraft_id, to_backend_format(self.elt_data))
            logger.info(f"ELT data saved to backend for aircraft: {self.elt_data.aircraft_id}")
        except ApiError as e:
            logger.error(f"Error saving ELT data: {e}")
            self.error = str(e) or "Failed to save ELT data"
            raise
        finally:
            self.is_loading = False

    async def update_elt_data(self, **changes):
        """
        Update locally, then save to backend. The local update stands
        even when the save fails.
        """
        self.elt_data = EltData(**{**self.elt_data.model_dump(), **changes})
        if not self.elt_data.aircraft_id or self.service is None:
            return
        try:
            await self.service.upsert(self.elt_data.aircraft_id, to_backend_format(self.elt_data))
            logger.info("ELT data updated and saved to backend")
        except ApiError as e:
            logger.error(f"Error saving ELT data to backend: {e}")
            self.error = str(e) or "Failed to save ELT data"

    async def apply_ocr_data(self, **changes):
        """Apply OCR data after user validation, then auto-save"""
        self.elt_data = EltData(**{
            **self.elt_data.model_dump(),
            **changes,
            "last_ocr_scan_date": today_string(),
            "ocr_validated": True,
        })
        if not self.elt_data.aircraft_id or self.service is None:
            return
        try:
            await self.service.upsert(self.elt_data.aircraft_id, to_backend_format(self.elt_data))
        except ApiError as e:
            logger.error(f"Error saving OCR data to backend: {e}")

    def add_ocr_scan(self, scan: Dict[str, Any]) -> OcrScanRecord:
        record = OcrScanRecord(**{**scan, "id": generate_id()})
        self.ocr_history = [record] + self.ocr_history
        return record

    def get_test_progress(self, today: Optional[date] = None) -> DateProgress:
        return elt_date_progress(self.elt_data.last_test_date, self.fixed_limits["TEST_MONTHS"], today)

    def get_battery_progress(self, today: Optional[date] = None) -> DateProgress:
        expiry = parse_date_string(self.elt_data.battery_expiry_date)
        last = parse_date_string(self.elt_data.last_battery_date)
        if expiry is None or last is None:
            return DateProgress()
        return elt_interval_progress(last, expiry, today)

    def get_elt_status(self, today: Optional[date] = None) -> ELTStatus:
        # TC-SAFE: no ELT date at all means we know nothing
        if not self.elt_data.has_any_date():
            return ELTStatus.UNKNOWN

        statuses = (self.get_test_progress(today).status, self.get_battery_progress(today).status)
        if ELTStatus.EXPIRED in statuses:
            return ELTStatus.EXPIRED
        if ELTStatus.ATTENTION in statuses:
            return ELTStatus.ATTENTION
        return ELTStatus.OPERATIONAL


class NullEltStore:
    """Defaults used when no EltProvider is mounted"""

    def __init__(self):
        self.fixed_limits = dict(ELT_FIXED_LIMITS)
        self.elt_data = EltData()
        self.ocr_history: List[OcrScanRecord] = []
        self.is_loading = False
        self.error = None

    async def load_elt_data(self, aircraft_id: str):
        logger.warning("EltProvider not found")

    async def save_elt_data(self):
        logger.warning("EltProvider not found")

    async def update_elt_data(self, **changes):
        logger.warning("EltProvider not found")

    async def apply_ocr_data(self, **changes):
        logger.warning("EltProvider not found")

    def add_ocr_scan(self, scan: Dict[str, Any]) -> None:
        logger.warning("EltProvider not found")
        return None

    def get_test_progress(self, today: Optional[date] = None) -> DateProgress:
        return DateProgress()

    def get_battery_progress(self, today: Optional[date] = None) -> DateProgress:
        return DateProgress()

    def get_elt_status(self, today: Optional[date] = None) -> ELTStatus:
        return ELTStatus.UNKNOWN
