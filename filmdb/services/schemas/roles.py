# filmdb/services/schemas/roles.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from filmdb.domain.entities.cast import CastMember
from filmdb.services.schemas.common import NonBlankStr


class RoleCreate(BaseModel):
    film_id: int
    person_id: int
    character: NonBlankStr = Field(..., max_length=255)


class RoleUpdate(BaseModel):
    character: NonBlankStr = Field(..., max_length=255)


class RoleRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    film_id: int
    person_id: int
    character: str


# ---------- Cast ----------

class CastMemberIn(BaseModel):
    person_id: int
    character: NonBlankStr = Field(..., max_length=255)

    def to_domain(self) -> CastMember:
        return CastMember(person_id=self.person_id, character=self.character)


class CastUpdate(BaseModel):
    cast: Optional[List[CastMemberIn]] = None
