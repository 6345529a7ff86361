"""
Store providers - scope a live store to a block of work.

    with MaintenanceDataProvider(api=api) as store:
        await store.sync_all(aircraft_id)
        ...
        use_maintenance_data()  # -> the same store

Outside of any provider the use_* accessors return a Null Object store
whose operations are logged no-ops with benign results.
"""

import logging
from contextvars import ContextVar
from typing import Any, Callable, Dict, Optional
from config import get_settings
from services.aircraft_service import AircraftService
from services.api import ApiClient
from services.elt_service import EltService
from services.local_storage import LocalAircraftStorage
from stores.aircraft_store import AircraftStore, NullAircraftStore
from stores.elt_store import EltStore, NullEltStore
from stores.maintenance_data_store import MaintenanceDataStore, NullMaintenanceDataStore
from stores.ocr_store import NullOcrStore, OcrStore
from stores.report_settings_store import NullReportSettingsStore, ReportSettingsStore

logger = logging.getLogger(__name__)

_scopes: Dict[str, ContextVar] = {}


def _scope(name: str) -> ContextVar:
    if name not in _scopes:
        _scopes[name] = ContextVar(f"store:{name}", default=None)
    return _scopes[name]


class StoreProvider:
    """
    Injects `store` under `name` for the lifetime of the with-block.
    Nested providers shadow outer ones; leaving the block restores them.
    """

    name = "store"

    def __init__(self, store: Any):
        self.store = store
        self._token = None

    @property
    def mounted(self) -> bool:
        return self._token is not None

    def __enter__(self):
        if self.mounted:
            raise RuntimeError(f"{type(self).__name__} is already mounted")
        self._token = _scope(self.name).set(self.store)
        return self.store

    def __exit__(self, exc_type, exc, tb):
        _scope(self.name).reset(self._token)
        self._token = None

    async def __aenter__(self):
        return self.__enter__()

    async def __aexit__(self, exc_type, exc, tb):
        self.__exit__(exc_type, exc, tb)


def use_store(name: str, null_factory: Callable[[], Any]) -> Any:
    store = _scope(name).get()
    if store is None:
        logger.warning(f"use_{name} called outside of its provider, using defaults")
        return null_factory()
    return store


class MaintenanceDataProvider(StoreProvider):
    name = "maintenance_data"

    def __init__(self, store: Optional[MaintenanceDataStore] = None, api: Optional[ApiClient] = None):
        if store is None:
            store = MaintenanceDataStore.remote(api) if api else MaintenanceDataStore.local()
        super().__init__(store)


class AircraftProvider(StoreProvider):
    name = "aircraft"

    def __init__(self, api: ApiClient, store: Optional[AircraftStore] = None, local_data_path: Optional[str] = None):
        if store is None:
            path = local_data_path or get_settings().local_data_path
            store = AircraftStore(AircraftService(api), LocalAircraftStorage(path))
        super().__init__(store)


class EltProvider(StoreProvider):
    name = "elt"

    def __init__(self, store: Optional[EltStore] = None, api: Optional[ApiClient] = None):
        if store is None:
            store = EltStore(EltService(api) if api else None)
        super().__init__(store)


class OcrProvider(StoreProvider):
    name = "ocr"

    def __init__(self, store: Optional[OcrStore] = None):
        super().__init__(store or OcrStore())


class ReportSettingsProvider(StoreProvider):
    name = "report_settings"

    def __init__(self, store: Optional[ReportSettingsStore] = None):
        super().__init__(store or ReportSettingsStore())


def use_maintenance_data() -> MaintenanceDataStore:
    return use_store(MaintenanceDataProvider.name, NullMaintenanceDataStore)


def use_aircraft_store() -> AircraftStore:
    return use_store(AircraftProvider.name, NullAircraftStore)


def use_elt() -> EltStore:
    return use_store(EltProvider.name, NullEltStore)


def use_ocr() -> OcrStore:
    return use_store(OcrProvider.name, NullOcrStore)


def use_report_settings() -> ReportSettingsStore:
    return use_store(ReportSettingsProvider.name, NullReportSettingsStore)
