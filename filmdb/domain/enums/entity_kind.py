from __future__ import annotations
from enum import StrEnum

class EntityKind(StrEnum):
    film = "film"
    person = "person"
    role = "role"
