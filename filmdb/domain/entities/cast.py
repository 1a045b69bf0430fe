# filmdb/domain/entities/cast.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class RoleKey:
    """
    Composite identity of a Role: at most one role per (film, person) pair.
    Value equality/hash make it usable directly as a dict key.
    """
    film_id: int
    person_id: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.film_id, self.person_id)

    def describe(self) -> str:
        return f"(film_id={self.film_id}, person_id={self.person_id})"


@dataclass(frozen=True)
class CastMember:
    """One desired entry of a film's cast."""
    person_id: int
    character: str


def dedupe_cast(desired: Iterable[CastMember] | None) -> List[CastMember]:
    """
    Collapse repeated person ids: the last character wins, the position is the
    one where the person first appeared.
    """
    latest: dict[int, CastMember] = {}
    for m in desired or ():
        latest[m.person_id] = m
    return list(latest.values())
