"""
Store providers and their Null Object fallbacks

Key rules:
- inside a provider, use_* returns the injected store
- outside, use_* returns a stand-in that never raises
- leaving the provider restores the previous scope
"""

import asyncio
import logging

from stores.maintenance_data_store import MaintenanceDataStore, NullMaintenanceDataStore
from stores.provider import (
    AircraftProvider, EltProvider, MaintenanceDataProvider, OcrProvider,
    ReportSettingsProvider, use_aircraft_store, use_elt, use_maintenance_data,
    use_ocr, use_report_settings,
)


class TestMountedProvider:

    def test_store_is_visible_inside_block(self):
        with MaintenanceDataProvider() as store:
            assert use_maintenance_data() is store
        assert isinstance(use_maintenance_data(), NullMaintenanceDataStore)

    def test_provider_reports_mount_state(self):
        provider = MaintenanceDataProvider()
        assert provider.mounted is False
        with provider:
            assert provider.mounted is True
        assert provider.mounted is False

    def test_nested_provider_shadows_outer(self):
        outer_store = MaintenanceDataStore.local()
        inner_store = MaintenanceDataStore.local()
        with MaintenanceDataProvider(store=outer_store):
            with MaintenanceDataProvider(store=inner_store):
                assert use_maintenance_data() is inner_store
            assert use_maintenance_data() is outer_store

    def test_async_provider(self, api):
        async def scenario():
            async with MaintenanceDataProvider(api=api) as store:
                assert use_maintenance_data() is store
                return store.parts.remote

        assert asyncio.run(scenario()) is True

    def test_state_is_dropped_on_unmount(self):
        async def scenario():
            with MaintenanceDataProvider():
                await use_maintenance_data().add_part({
                    "name": "Spark Plug", "part_number": "REM40E", "aircraft_id": "ac-1",
                })
                assert len(use_maintenance_data().get_parts_by_aircraft("ac-1")) == 1
            with MaintenanceDataProvider():
                return use_maintenance_data().get_parts_by_aircraft("ac-1")

        assert asyncio.run(scenario()) == []

    def test_other_providers(self, api, tmp_path):
        with AircraftProvider(api, local_data_path=str(tmp_path / "local.json")) as aircraft_store, \
                EltProvider() as elt_store, OcrProvider() as ocr_store, \
                ReportSettingsProvider() as report_store:
            assert use_aircraft_store() is aircraft_store
            assert use_elt() is elt_store
            assert use_ocr() is ocr_store
            assert use_report_settings() is report_store


class TestWithoutProvider:

    def test_maintenance_operations_are_benign(self, caplog):
        store = use_maintenance_data()

        async def scenario():
            added = await store.add_part({"part_number": "X", "aircraft_id": "ac-1"})
            deleted = await store.delete_part("p1")
            synced = await store.sync_all("ac-1")
            return added, deleted, synced

        with caplog.at_level(logging.WARNING):
            added, deleted, synced = asyncio.run(scenario())

        assert added is None
        assert deleted is False
        assert synced == {"parts": False, "adsbs": False, "stcs": False, "invoices": False}
        assert store.get_parts_by_aircraft("ac-1") == []
        assert store.get_invoice_by_id("inv1") is None
        assert store.update_invoice("inv1", notes="x") is None
        assert "outside of its provider" in caplog.text

    def test_aircraft_defaults(self):
        store = use_aircraft_store()
        asyncio.run(store.refresh())
        assert store.aircraft == []
        assert store.get_by_id("a1") is None
        assert asyncio.run(store.add({"registration": "C-GABC"})) is None

    def test_elt_defaults(self):
        store = use_elt()
        asyncio.run(store.update_elt_data(model="ME406"))
        assert store.get_test_progress().percent == 0
        assert store.get_elt_status().value == "unknown"
        assert store.add_ocr_scan({"document_type": "other", "scan_date": "2024-01-01"}) is None

    def test_ocr_defaults(self):
        store = use_ocr()
        assert store.add_document({"type": "other", "aircraft_id": "ac-1"}) == ""
        assert store.get_documents_by_aircraft("ac-1") == []
        assert store.check_duplicate("C-FKZY", "2024-10-28", "Air Mechanic") is False

    def test_report_settings_defaults(self):
        store = use_report_settings()
        store.update_limits(magnetos_hours=1)
        assert store.limits.magnetos_hours == 500
        assert len(store.build_report(engine_hours=100)) == 7

    def test_null_stores_do_not_share_state(self):
        first, second = use_ocr(), use_ocr()
        first.documents.append("stray")
        assert second.documents == []

        elt = use_elt()
        elt.ocr_history.append("stray")
        elt.elt_data.model = "ME406"
        assert use_elt().ocr_history == []
        assert use_elt().elt_data.model == ""

        use_aircraft_store().aircraft.append("stray")
        assert use_aircraft_store().aircraft == []
