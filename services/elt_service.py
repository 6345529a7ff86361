"""
ELT Service - API communication for ELT (Emergency Locator Transmitter) data
Backend endpoints: /api/elt
"""

import logging
from typing import Optional
from models.elt import ELTBackend, ELTType, EltData
from services.api import ApiClient, ApiError
from services.dates import clean_date_string

logger = logging.getLogger(__name__)


def to_backend_format(data: EltData) -> ELTBackend:
    """
    Backend field mapping:
    - brand <- manufacturer
    - beacon_hex_id <- hex_code
    - installation_date <- activation_date
    - certification_date <- service_date
    - battery_install_date <- last_battery_date
    - remarks <- elt_type (not part of the backend schema)
    """
    return ELTBackend(
        aircraft_id=data.aircraft_id,
        brand=data.manufacturer,
        model=data.model,
        serial_number=data.serial_number,
        beacon_hex_id=data.hex_code,
        installation_date=clean_date_string(data.activation_date),
        certification_date=clean_date_string(data.service_date),
        last_test_date=clean_date_string(data.last_test_date),
        battery_install_date=clean_date_string(data.last_battery_date),
        battery_expiry_date=clean_date_string(data.battery_expiry_date),
        remarks=data.elt_type.value,
    )


def to_frontend_format(data: ELTBackend, aircraft_id: str) -> EltData:
    try:
        elt_type = ELTType(data.remarks or "")
    except ValueError:
        elt_type = ELTType.NONE
    return EltData(
        manufacturer=data.brand or "",
        model=data.model or "",
        serial_number=data.serial_number or "",
        elt_type=elt_type,
        hex_code=data.beacon_hex_id or "",
        activation_date=clean_date_string(data.installation_date),
        service_date=clean_date_string(data.certification_date),
        last_test_date=clean_date_string(data.last_test_date),
        last_battery_date=clean_date_string(data.battery_install_date),
        battery_expiry_date=clean_date_string(data.battery_expiry_date),
        aircraft_id=aircraft_id or data.aircraft_id or "",
    )


class EltService:
    def __init__(self, api: ApiClient):
        self.api = api

    async def get_by_aircraft_id(self, aircraft_id: str) -> Optional[ELTBackend]:
        """ELT data for an aircraft, None when the aircraft has none yet"""
        try:
            data = await self.api.get(f"/api/elt/aircraft/{aircraft_id}")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        if not data:
            return None
        return ELTBackend(**data)

    async def upsert(self, aircraft_id: str, data: ELTBackend) -> Optional[ELTBackend]:
        payload = data.model_dump(exclude_none=True)
        payload["aircraft_id"] = aircraft_id
        result = await self.api.put(f"/api/elt/aircraft/{aircraft_id}", json=payload)
        return ELTBackend(**result) if result else None
