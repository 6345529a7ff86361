"""Shared base for local record shapes"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class LocalRecord(BaseModel):
    """
    Record as held by a Domain Store.

    Attributes are snake_case; dumping with by_alias=True gives the
    camelCase shape the screens read (partNumber, totalAmount, ...).
    """
    id: str
    aircraft_id: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_local(self) -> dict:
        return self.model_dump(by_alias=True)
