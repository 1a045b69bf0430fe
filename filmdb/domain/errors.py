# filmdb/domain/errors.py
from __future__ import annotations

from typing import Iterable, Sequence

from filmdb.domain.enums.entity_kind import EntityKind


class CatalogError(Exception):
    """Base class for errors the catalog core hands back to the transport layer."""


class NotFoundError(CatalogError):
    """
    One or more referenced records do not exist.
    `ids` holds every missing id (or RoleKey), never just the first.
    """

    def __init__(self, kind: EntityKind, *ids: object):
        self.kind = kind
        self.ids = tuple(ids)
        if len(self.ids) == 1:
            msg = f"Could not find {kind} with id {_fmt(self.ids[0])}"
        else:
            msg = f"Could not find {kind} with ids [{', '.join(_fmt(i) for i in self.ids)}]"
        super().__init__(msg)


class ConflictError(CatalogError):
    """A record with the same key already exists."""

    def __init__(self, kind: EntityKind, key: object):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind.capitalize()} {_fmt(key)} already exists")


class ValidationError(CatalogError, ValueError):
    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


def _fmt(value: object) -> str:
    describe = getattr(value, "describe", None)
    return describe() if callable(describe) else str(value)


def require_text(field: str, value: str | None) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(field, "must not be blank")
    return value


def missing_ids(requested: Sequence[object], found: Iterable[object]) -> list:
    """Requested ids not present in `found`, in request order, without repeats."""
    have = set(found)
    out: list = []
    for i in requested:
        if i not in have and i not in out:
            out.append(i)
    return out
