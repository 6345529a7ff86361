"""
Aircraft store against the fake backend

Tests for:
- backend fields go to /api/aircraft, device-only fields to the local JSON file
- refresh merges both sources back into one profile
- aircraft delete does not touch maintenance records
"""

import asyncio
import json

import pytest

from services.aircraft_service import AircraftService
from services.api import ApiError
from services.local_storage import LocalAircraftStorage
from stores.aircraft_store import AircraftStore


@pytest.fixture
def local_path(tmp_path):
    return tmp_path / "aircraft_local.json"


@pytest.fixture
def store(api, local_path):
    return AircraftStore(AircraftService(api), LocalAircraftStorage(str(local_path)))


def cessna(**overrides):
    aircraft = {
        "registration": "c-gabc",
        "common_name": "Training",
        "model": "172S",
        "manufacturer": "Cessna",
        "year_manufacture": "1998",
        "airframe_hours": 6344.6,
        "engine_hours": 1120.0,
        "category": "Normal",
        "photo_uri": "file:///photos/c-gabc.jpg",
        "owner_name": "Aéroclub de Québec",
    }
    aircraft.update(overrides)
    return aircraft


class TestAircraftStore:

    def test_add_splits_backend_and_local_fields(self, store, backend, local_path):
        aircraft = asyncio.run(store.add(cessna()))

        doc = backend.aircraft[aircraft.id]
        assert doc["registration"] == "C-GABC"
        assert doc["aircraft_type"] == "Training"
        assert doc["year"] == 1998
        assert "photo_url" not in doc
        assert "category" not in doc

        saved = json.loads(local_path.read_text(encoding="utf-8"))
        assert saved[aircraft.id]["category"] == "Normal"
        assert saved[aircraft.id]["photo_uri"] == "file:///photos/c-gabc.jpg"

        assert aircraft.registration == "C-GABC"
        assert aircraft.owner_name == "Aéroclub de Québec"
        assert store.aircraft[0].id == aircraft.id

    def test_refresh_merges_local_fields(self, api, store, local_path):
        created = asyncio.run(store.add(cessna()))

        fresh = AircraftStore(AircraftService(api), LocalAircraftStorage(str(local_path)))
        asyncio.run(fresh.refresh())

        aircraft = fresh.get_by_id(created.id)
        assert aircraft.model == "172S"
        assert aircraft.year_manufacture == "1998"
        assert aircraft.category == "Normal"
        assert aircraft.photo_uri == "file:///photos/c-gabc.jpg"

    def test_update_local_only_field(self, store, backend, local_path):
        created = asyncio.run(store.add(cessna()))

        updated = asyncio.run(store.update(created.id, category="Utility", engine_hours=1150.5))

        assert updated.category == "Utility"
        assert updated.engine_hours == 1150.5
        assert backend.aircraft[created.id]["engine_hours"] == 1150.5
        assert "category" not in backend.aircraft[created.id]
        saved = json.loads(local_path.read_text(encoding="utf-8"))
        assert saved[created.id]["category"] == "Utility"

    def test_delete_leaves_maintenance_records(self, store, backend, local_path):
        created = asyncio.run(store.add(cessna()))
        backend.seed("parts", aircraft_id=created.id, part_number="CH48110-1", name="Oil Filter")

        asyncio.run(store.delete(created.id))

        assert store.get_by_id(created.id) is None
        assert created.id not in backend.aircraft
        assert len(backend.records["parts"]) == 1
        assert created.id not in json.loads(local_path.read_text(encoding="utf-8"))

    def test_delete_failure_raises(self, store, backend):
        created = asyncio.run(store.add(cessna()))
        backend.fail("DELETE", "aircraft", 500)

        with pytest.raises(ApiError):
            asyncio.run(store.delete(created.id))

        assert store.get_by_id(created.id) is not None
        assert store.error

    def test_refresh_without_token_is_skipped(self, api, store, backend):
        backend.aircraft["a1"] = {"_id": "a1", "registration": "C-FKZY"}
        api.set_token(None)

        asyncio.run(store.refresh())

        assert store.aircraft == []
        assert backend.requests == []

    def test_missing_endpoint_is_not_an_error(self, store, backend):
        backend.fail("GET", "aircraft", 404)

        asyncio.run(store.refresh())

        assert store.error is None
        assert store.is_loading is False

    def test_corrupt_local_file_is_ignored(self, api, local_path):
        local_path.write_text("{not json", encoding="utf-8")
        store = AircraftStore(AircraftService(api), LocalAircraftStorage(str(local_path)))
        assert store.local_data == {}

    def test_update_failure_leaves_local_file(self, store, backend, local_path):
        created = asyncio.run(store.add(cessna()))
        backend.fail("PUT", "aircraft", 500)

        with pytest.raises(ApiError):
            asyncio.run(store.update(created.id, category="Utility"))

        saved = json.loads(local_path.read_text(encoding="utf-8"))
        assert saved[created.id]["category"] == "Normal"
        assert store.local_data[created.id]["category"] == "Normal"
        assert store.get_by_id(created.id).category == "Normal"
