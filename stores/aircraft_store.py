"""
Aircraft store - aircraft profiles synced with the backend.
Fields the backend does not support (photo, category, address, ...) are
persisted on the device and merged back on every refresh.
"""

import logging
from typing import Any, Dict, List, Optional
from models.aircraft import Aircraft, AircraftBase
from services.aircraft_service import AircraftService, map_api_to_local, map_changes_to_api, map_local_to_api
from services.api import ApiError
from services.local_storage import LocalAircraftStorage, extract_local_data
from services.maintenance_service import backend_id

logger = logging.getLogger(__name__)


class AircraftStore:
    def __init__(self, service: AircraftService, storage: LocalAircraftStorage):
        self.service = service
        self.storage = storage
        self.aircraft: List[Aircraft] = []
        self.is_loading = False
        self.error: Optional[str] = None
        self.local_data = storage.load()
        logger.info(f"Loaded local aircraft data for {len(self.local_data)} aircraft")

    async def refresh(self):
        """Fetch aircraft from backend and merge with local data"""
        if not self.service.api.token:
            logger.info("No token, skipping aircraft fetch")
            return

        self.is_loading = True
        self.error = None
        try:
            self.local_data = self.storage.load()
            docs = await self.service.get_all()
            self.aircraft = [
                map_api_to_local(doc, self.local_data.get(backend_id(doc)))
                for doc in docs
            ]
        except ApiError as e:
            logger.error(f"Error fetching aircraft: {e}")
            # 404 - endpoint might not exist on this backend
            if e.status_code != 404:
                self.error = str(e) or "Failed to load aircraft"
        finally:
            self.is_loading = False

    async def add(self, aircraft: Dict[str, Any]) -> Aircraft:
        self.is_loading = True
        self.error = None
        try:
            data = AircraftBase(**aircraft)
            created = await self.service.create(map_local_to_api(data))
            new_id = backend_id(created)

            local_fields = extract_local_data(data.model_dump())
            self.local_data = {**self.local_data, new_id: local_fields}
            self.storage.save(self.local_data)

            new_aircraft = map_api_to_local(created, local_fields)
            self.aircraft = [new_aircraft] + self.aircraft
            return new_aircraft
        except ApiError as e:
            logger.error(f"Error creating aircraft: {e}")
            self.error = str(e) or "Failed to create aircraft"
            raise
        finally:
            self.is_loading = False

    async def update(self, aircraft_id: str, **changes) -> Aircraft:
        self.is_loading = True
        self.error = None
        try:
            updated = await self.service.update(aircraft_id, map_changes_to_api(changes))

            # Local-only fields are written once the backend has accepted the update
            merged_local = {**self.local_data.get(aircraft_id, {}), **extract_local_data(changes)}
            self.local_data = {**self.local_data, aircraft_id: merged_local}
            self.storage.save(self.local_data)

            updated_aircraft = map_api_to_local({"id": aircraft_id, **(updated or {})}, merged_local)
            self.aircraft = [updated_aircraft if a.id == aircraft_id else a for a in self.aircraft]
            return updated_aircraft
        except ApiError as e:
            logger.error(f"Error updating aircraft: {e}")
            self.error = str(e) or "Failed to update aircraft"
            raise
        finally:
            self.is_loading = False

    async def delete(self, aircraft_id: str):
        """
        Delete an aircraft. Its parts, AD/SB, STC and invoices are left to
        the backend; no cascade happens on the device.
        """
        self.is_loading = True
        self.error = None
        try:
            await self.service.delete(aircraft_id)

            self.local_data = {k: v for k, v in self.local_data.items() if k != aircraft_id}
            self.storage.save(self.local_data)
            self.aircraft = [a for a in self.aircraft if a.id != aircraft_id]
        except ApiError as e:
            logger.error(f"Error deleting aircraft: {e}")
            self.error = str(e) or "Failed to delete aircraft"
            raise
        finally:
            self.is_loading = False

    def get_by_id(self, aircraft_id: str) -> Optional[Aircraft]:
        return next((a for a in self.aircraft if a.id == aircraft_id), None)


class NullAircraftStore:
    """Defaults used when no AircraftProvider is mounted"""

    def __init__(self):
        self.aircraft: List[Aircraft] = []
        self.is_loading = False
        self.error = None

    async def refresh(self):
        logger.warning("AircraftProvider not found")

    async def add(self, aircraft: Dict[str, Any]) -> None:
        logger.warning("AircraftProvider not found")
        return None

    async def update(self, aircraft_id: str, **changes) -> None:
        logger.warning("AircraftProvider not found")
        return None

    async def delete(self, aircraft_id: str):
        logger.warning("AircraftProvider not found")

    def get_by_id(self, aircraft_id: str) -> None:
        return None
