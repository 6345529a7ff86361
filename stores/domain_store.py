"""
Domain Store - in-memory ordered collection of one record kind,
optionally reconciled with a backend resource.

Visual storage only - no regulatory decisions.
"""

import logging
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar, Union
from pydantic import BaseModel, ValidationError
from services.api import ApiError
from stores.data_sources import DataSource

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Listener = Callable[[List[Any]], None]


def merge_changes(record: T, changes: Dict[str, Any]) -> T:
    """
    Rebuild `record` with `changes` applied and validated again.
    Changes may use field names or their camelCase aliases.
    """
    fields = type(record).model_fields
    aliases = {field.alias: name for name, field in fields.items() if field.alias}
    changes = {aliases.get(k, k): v for k, v in changes.items() if aliases.get(k, k) != "id"}
    return type(record).model_validate({**record.model_dump(), **changes})


def require_owner(aircraft_id: Optional[str]) -> str:
    if not aircraft_id:
        raise ValueError("aircraft_id is required")
    return aircraft_id


class DomainStore(Generic[T]):
    """
    Owns the collection; screens never mutate it directly.

    Newest records come first. Every mutation bumps `revision`; a sync
    whose fetch started before a later mutation is dropped instead of
    overwriting that mutation.
    """

    def __init__(self, source: DataSource[T], name: str, initial: Iterable[T] = ()):
        self.source = source
        self.name = name
        self._records: List[T] = list(initial)
        self._revision = 0
        self._listeners: List[Listener] = []

    @property
    def records(self) -> List[T]:
        return list(self._records)

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def remote(self) -> bool:
        return self.source.remote

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener` with the new snapshot after every change"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, records: List[T]):
        self._records = records
        self._revision += 1
        snapshot = self.records
        for listener in list(self._listeners):
            listener(snapshot)

    async def add(self, fields: Union[Dict[str, Any], BaseModel]) -> Optional[T]:
        """
        Create a record and put it at the head of the collection.

        Fields may use snake_case names or camelCase aliases; they are
        validated against the record model before reaching the source, so
        invalid input raises ValidationError (a ValueError).
        """
        if isinstance(fields, BaseModel):
            fields = fields.model_dump()
        draft = self.source.model.model_validate({**fields, "id": ""})
        fields = draft.model_dump(exclude={"id"})

        try:
            record = await self.source.create(fields)
        except (ApiError, ValidationError) as e:
            logger.error(f"Error adding {self.name}: {e}")
            return None

        self._commit([record] + self._records)
        return record

    async def delete(self, record_id: str) -> bool:
        """
        Remove a record. Backend-connected stores only drop the local entry
        once the server has confirmed; on failure the collection is left
        untouched and False is returned.
        """
        try:
            await self.source.delete(record_id)
        except ApiError as e:
            logger.warning(f"DELETE {self.name} error: {e.status_code} {e}")
            return False

        self._commit([r for r in self._records if r.id != record_id])
        return True

    def query(self, aircraft_id: str) -> List[T]:
        """Records owned by `aircraft_id`, in collection order"""
        owner = require_owner(aircraft_id)
        return [r for r in self._records if r.aircraft_id == owner]

    def get_by_id(self, record_id: str) -> Optional[T]:
        return next((r for r in self._records if r.id == record_id), None)

    def update(self, record_id: str, **changes) -> Optional[T]:
        """
        Merge changes into one record in memory (no backend call).
        Invalid changes raise ValidationError and leave the record as it was.
        """
        updated = None
        records = []
        for record in self._records:
            if record.id == record_id:
                updated = merge_changes(record, changes)
                record = updated
            records.append(record)
        if updated is not None:
            self._commit(records)
        return updated

    async def sync(self, aircraft_id: str) -> bool:
        """
        Replace the whole collection with the backend records for an
        aircraft. Local-only entries that the server does not know are
        discarded. Returns False (state untouched) when there is no
        backend, the fetch failed, or a mutation happened meanwhile.
        """
        owner = require_owner(aircraft_id)
        started_at = self._revision

        try:
            fetched = await self.source.fetch_all(owner)
        except ApiError as e:
            logger.error(f"Error fetching {self.name}: {e}")
            return False
        except ValidationError as e:
            logger.error(f"Invalid {self.name} record from backend for aircraft {owner}: {e}")
            return False

        if fetched is None:
            return False

        if self._revision != started_at:
            logger.info(
                f"Discarding {self.name} sync for {owner}: "
                f"revision {started_at} superseded by {self._revision}"
            )
            return False

        self._commit(list(fetched))
        logger.info(f"Synced {len(fetched)} {self.name} for aircraft {owner}")
        return True


class NullDomainStore:
    """
    Stand-in used when no provider has injected a live store.
    Every operation is a harmless no-op that logs a warning.
    """

    remote = False
    revision = 0

    def __init__(self, name: str):
        self.name = name

    def _warn(self, operation: str):
        logger.warning(f"{self.name}.{operation} called without a mounted provider")

    @property
    def records(self) -> list:
        return []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return lambda: None

    async def add(self, fields) -> None:
        self._warn("add")
        return None

    async def delete(self, record_id: str) -> bool:
        self._warn("delete")
        return False

    def query(self, aircraft_id: str) -> list:
        return []

    def get_by_id(self, record_id: str) -> None:
        return None

    def update(self, record_id: str, **changes) -> None:
        self._warn("update")
        return None

    async def sync(self, aircraft_id: str) -> bool:
        self._warn("sync")
        return False
