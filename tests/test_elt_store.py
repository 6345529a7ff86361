"""
ELT store: progress bars, visual status and the /api/elt mapping

Dates are fixed through the `today` argument:
- test cycle 2024-01-01 -> 2025-01-01 is 366 days (leap year)
- ATTENTION from 80 %, EXPIRED when no day remains
"""

import asyncio
from datetime import date

import pytest

from models.elt import ELTStatus, ELTType
from services.elt_service import EltService
from services.progress import elt_date_progress, elt_interval_progress
from stores.elt_store import EltStore

AIRCRAFT_ID = "aircraft_001"


class TestEltProgress:

    def test_test_cycle_midway_is_operational(self):
        progress = elt_date_progress("2024-01-01", 12, today=date(2024, 7, 1))
        assert progress.percent == 50
        assert progress.days_remaining == 184
        assert progress.status == ELTStatus.OPERATIONAL

    def test_test_cycle_past_attention_threshold(self):
        progress = elt_date_progress("2024-01-01", 12, today=date(2024, 11, 15))
        assert progress.percent == 87
        assert progress.days_remaining == 47
        assert progress.status == ELTStatus.ATTENTION

    @pytest.mark.parametrize("today", [date(2025, 1, 1), date(2025, 6, 1)])
    def test_test_cycle_expired(self, today):
        progress = elt_date_progress("2024-01-01", 12, today=today)
        assert progress.percent == 100
        assert progress.days_remaining <= 0
        assert progress.status == ELTStatus.EXPIRED

    def test_missing_date_gives_empty_progress(self):
        progress = elt_date_progress("", 12)
        assert (progress.percent, progress.days_remaining, progress.status) == (0, 0, ELTStatus.OPERATIONAL)

    def test_zero_length_interval_is_expired(self):
        progress = elt_interval_progress(date(2024, 1, 1), date(2024, 1, 1), today=date(2023, 6, 1))
        assert progress.percent == 100
        assert progress.status == ELTStatus.EXPIRED


class TestEltStatus:

    def test_no_dates_is_unknown(self):
        store = EltStore()
        assert store.get_elt_status() == ELTStatus.UNKNOWN

    def test_worst_of_test_and_battery(self):
        store = EltStore()
        asyncio.run(store.update_elt_data(
            last_test_date="2024-01-01",
            last_battery_date="2020-03-01",
            battery_expiry_date="2026-03-01",
        ))
        today = date(2024, 7, 1)

        assert store.get_test_progress(today).status == ELTStatus.OPERATIONAL
        assert store.get_battery_progress(today).status == ELTStatus.OPERATIONAL
        assert store.get_elt_status(today) == ELTStatus.OPERATIONAL
        assert store.get_elt_status(date(2024, 11, 15)) == ELTStatus.ATTENTION
        assert store.get_elt_status(date(2026, 4, 1)) == ELTStatus.EXPIRED

    def test_battery_progress_needs_both_dates(self):
        store = EltStore()
        asyncio.run(store.update_elt_data(battery_expiry_date="2027-01-01"))
        assert store.get_battery_progress().percent == 0
        assert store.get_elt_status() == ELTStatus.OPERATIONAL

    def test_ocr_history_is_newest_first(self):
        store = EltStore()
        first = store.add_ocr_scan({"document_type": "elt_certificate", "scan_date": "2024-05-01"})
        second = store.add_ocr_scan({"document_type": "battery_label", "scan_date": "2024-06-01"})
        assert [scan.id for scan in store.ocr_history] == [second.id, first.id]


class TestEltBackend:

    def test_load_maps_backend_fields(self, api, backend):
        backend.elt[AIRCRAFT_ID] = {
            "_id": "elt_1",
            "aircraft_id": AIRCRAFT_ID,
            "brand": "Kannad",
            "model": "406 AF-Compact",
            "serial_number": "KN-2231",
            "beacon_hex_id": "ADCD0228C500401",
            "last_test_date": "2024-05-01T00:00:00",
            "battery_expiry_date": "2027-01-01",
            "remarks": "406 MHz",
        }
        store = EltStore(EltService(api))

        asyncio.run(store.load_elt_data(AIRCRAFT_ID))

        data = store.elt_data
        assert data.manufacturer == "Kannad"
        assert data.hex_code == "ADCD0228C500401"
        assert data.last_test_date == "2024-05-01"
        assert data.elt_type == ELTType.MHZ_406
        assert data.aircraft_id == AIRCRAFT_ID
        assert store.error is None

    def test_load_without_record_gives_empty_data(self, api):
        store = EltStore(EltService(api))

        asyncio.run(store.load_elt_data(AIRCRAFT_ID))

        assert store.elt_data.aircraft_id == AIRCRAFT_ID
        assert store.elt_data.manufacturer == ""
        assert store.error is None

    def test_load_failure_sets_error(self, api, backend):
        backend.fail("GET", "elt", 500)
        store = EltStore(EltService(api))

        asyncio.run(store.load_elt_data(AIRCRAFT_ID))

        assert store.error
        assert store.is_loading is False
        assert store.elt_data.aircraft_id == AIRCRAFT_ID

    def test_update_saves_to_backend(self, api, backend):
        store = EltStore(EltService(api))

        async def scenario():
            await store.load_elt_data(AIRCRAFT_ID)
            await store.update_elt_data(manufacturer="Artex", elt_type=ELTType.MHZ_406_GPS,
                                        last_test_date="2024-05-01")

        asyncio.run(scenario())

        saved = backend.elt[AIRCRAFT_ID]
        assert saved["brand"] == "Artex"
        assert saved["remarks"] == "406 MHz + GPS"
        assert saved["last_test_date"] == "2024-05-01"

    def test_update_keeps_local_change_when_save_fails(self, api, backend):
        store = EltStore(EltService(api))

        async def scenario():
            await store.load_elt_data(AIRCRAFT_ID)
            backend.fail("PUT", "elt", 503)
            await store.update_elt_data(model="ME406")

        asyncio.run(scenario())

        assert store.elt_data.model == "ME406"
        assert store.error
        assert AIRCRAFT_ID not in backend.elt

    def test_apply_ocr_data_marks_validated(self, api, backend):
        store = EltStore(EltService(api))

        async def scenario():
            await store.load_elt_data(AIRCRAFT_ID)
            await store.apply_ocr_data(last_test_date="2024-09-12")

        asyncio.run(scenario())

        assert store.elt_data.ocr_validated is True
        assert store.elt_data.last_ocr_scan_date == date.today().isoformat()
        assert backend.elt[AIRCRAFT_ID]["last_test_date"] == "2024-09-12"
