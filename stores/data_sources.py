"""
Data sources a Domain Store can be composed with.

LocalDataSource: ids generated on the device, nothing to sync against.
RemoteDataSource: backend-issued ids, every mutation goes through the API.
"""

import secrets
import string
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
from services.maintenance_service import RemoteResource

T = TypeVar("T", bound=BaseModel)

BASE36 = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Millisecond timestamp in base 36 plus a random suffix"""
    suffix = "".join(secrets.choice(BASE36) for _ in range(11))
    return to_base36(int(time.time() * 1000)) + suffix


class DataSource(ABC, Generic[T]):
    """Where a Domain Store's records come from and go to"""

    remote: bool = False
    model: Type[T]

    @abstractmethod
    async def create(self, fields: Dict[str, Any]) -> T:
        """Build (and persist, if remote) a record from caller fields"""

    @abstractmethod
    async def delete(self, record_id: str):
        """Remove a record; raises when the removal is not confirmed"""

    @abstractmethod
    async def fetch_all(self, aircraft_id: str) -> Optional[List[T]]:
        """Server truth for an aircraft, None when there is no server"""


class LocalDataSource(DataSource[T]):
    remote = False

    def __init__(self, model: Type[T]):
        self.model = model

    async def create(self, fields: Dict[str, Any]) -> T:
        return self.model(**{**fields, "id": generate_id()})

    async def delete(self, record_id: str):
        return None

    async def fetch_all(self, aircraft_id: str) -> Optional[List[T]]:
        return None


class RemoteDataSource(DataSource[T]):
    remote = True

    def __init__(self, resource: RemoteResource):
        self.resource = resource
        self.model = resource.model

    @property
    def name(self) -> str:
        return self.resource.name

    async def create(self, fields: Dict[str, Any]) -> T:
        return await self.resource.create(fields)

    async def delete(self, record_id: str):
        await self.resource.delete(record_id)

    async def fetch_all(self, aircraft_id: str) -> Optional[List[T]]:
        return await self.resource.list(aircraft_id)
