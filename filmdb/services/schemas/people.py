# filmdb/services/schemas/people.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from filmdb.services.schemas.common import NonBlankStr


class PersonBase(BaseModel):
    name: NonBlankStr = Field(..., max_length=255)
    date_of_birth: Optional[date] = None


class PersonCreate(PersonBase):
    pass


class PersonUpdate(BaseModel):
    name: Optional[NonBlankStr] = Field(default=None, max_length=255)
    date_of_birth: Optional[date] = None


class PersonRead(PersonBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class PersonPage(BaseModel):
    items: List[PersonRead]
    total: int
    page: int
    size: int
