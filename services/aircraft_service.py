import logging
from typing import Any, Dict, List
from models.aircraft import Aircraft, AircraftBase, AircraftCreate
from services.api import ApiClient
from services.maintenance_service import backend_id

logger = logging.getLogger(__name__)


def map_api_to_local(doc: Dict[str, Any], local_data: Dict[str, Any] = None) -> Aircraft:
    """Backend aircraft merged with the fields kept on the device"""
    local_data = local_data or {}
    year = doc.get("year")
    return Aircraft(
        id=backend_id(doc),
        registration=doc.get("registration") or "",
        # Purpose: backend 'purpose' or 'aircraft_type'
        common_name=doc.get("purpose") or doc.get("aircraft_type") or "",
        model=doc.get("model") or "",
        serial_number=doc.get("serial_number") or "",
        manufacturer=doc.get("manufacturer") or "",
        year_manufacture=str(year) if year else "",
        airframe_hours=doc.get("airframe_hours") or 0,
        engine_hours=doc.get("engine_hours") or 0,
        propeller_hours=doc.get("propeller_hours") or 0,
        created_at=str(doc.get("created_at") or ""),
        adsb_has_new_tc_items=bool(doc.get("adsb_has_new_tc_items")),
        **{
            **local_data,
            # City/Airport: backend value first, then local
            "base_operations": doc.get("base_of_operations") or doc.get("city") or local_data.get("base_operations") or "",
            "photo_uri": local_data.get("photo_uri") or doc.get("photo_url"),
        },
    )


def map_local_to_api(aircraft: AircraftBase) -> AircraftCreate:
    year = aircraft.year_manufacture
    return AircraftCreate(
        registration=aircraft.registration,
        aircraft_type=aircraft.common_name or None,
        model=aircraft.model or None,
        serial_number=aircraft.serial_number or None,
        manufacturer=aircraft.manufacturer or None,
        year=int(year) if year and year.isdigit() else None,
        airframe_hours=aircraft.airframe_hours or 0,
        engine_hours=aircraft.engine_hours or 0,
        propeller_hours=aircraft.propeller_hours or 0,
        # Photo stays on the device
        photo_url=None,
    )


def map_changes_to_api(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Only the backend-supported fields that are being updated"""
    field_map = {
        "registration": "registration",
        "common_name": "aircraft_type",
        "model": "model",
        "serial_number": "serial_number",
        "manufacturer": "manufacturer",
        "airframe_hours": "airframe_hours",
        "engine_hours": "engine_hours",
        "propeller_hours": "propeller_hours",
    }
    api_data = {field_map[k]: v for k, v in changes.items() if k in field_map and v is not None}
    year = changes.get("year_manufacture")
    if year and str(year).isdigit():
        api_data["year"] = int(year)
    return api_data


class AircraftService:
    def __init__(self, api: ApiClient):
        self.api = api

    async def get_all(self) -> List[Dict[str, Any]]:
        return await self.api.get("/api/aircraft") or []

    async def get_by_id(self, aircraft_id: str) -> Dict[str, Any]:
        return await self.api.get(f"/api/aircraft/{aircraft_id}")

    async def create(self, aircraft: AircraftCreate) -> Dict[str, Any]:
        payload = aircraft.model_dump(exclude_none=True)
        data = await self.api.post("/api/aircraft", json=payload)
        return {**payload, **(data or {})}

    async def update(self, aircraft_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self.api.put(f"/api/aircraft/{aircraft_id}", json=changes)

    async def delete(self, aircraft_id: str):
        await self.api.delete(f"/api/aircraft/{aircraft_id}")
