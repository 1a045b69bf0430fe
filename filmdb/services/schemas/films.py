# filmdb/services/schemas/films.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from filmdb.services.schemas.common import NonBlankStr


class FilmBase(BaseModel):
    title: NonBlankStr = Field(..., max_length=255)
    release_date: date
    synopsis: Optional[str] = None


class FilmCreate(FilmBase):
    pass


class FilmUpdate(BaseModel):
    title: Optional[NonBlankStr] = Field(default=None, max_length=255)
    release_date: Optional[date] = None
    synopsis: Optional[str] = None


class FilmRead(FilmBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class FilmPage(BaseModel):
    items: List[FilmRead]
    total: int
    page: int
    size: int


# ---------- Directors ----------

class DirectorsUpdate(BaseModel):
    person_ids: Optional[List[int]] = None
