# filmdb/database/repos/_base.py
from __future__ import annotations

from typing import ClassVar, Generic, Iterable, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import ColumnElement, delete, func, select, true
from sqlalchemy.orm import Session

from filmdb.domain.dataclasses.paging import Page, PageRequest, SortOrder
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.enums.sort_direction import SortDirection
from filmdb.domain.policies.sort_guard import guard_sort

M = TypeVar("M")


class SqlAlchemyRepo(Generic[M]):
    """
    Id-indexed CRUD plus predicate search for one mapped class.
    Subclasses set `model` and `kind`.
    """
    model: ClassVar[Type]
    kind: ClassVar[EntityKind]

    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, obj_id: int) -> Optional[M]:
        return self.db.get(self.model, obj_id)

    def get_many(self, ids: Iterable[int]) -> List[M]:
        """Batch lookup; the result is shorter than `ids` when some are missing."""
        ids = list(dict.fromkeys(ids))
        if not ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())

    def exists(self, obj_id: int) -> bool:
        stmt = select(func.count()).select_from(self.model).where(self.model.id == obj_id)
        return self.db.execute(stmt).scalar_one() > 0

    def add(self, obj: M) -> M:
        self.db.add(obj)
        self.db.flush()  # ensure id
        return obj

    def delete(self, obj: M) -> None:
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, obj_id: int) -> None:
        """No-op when the row is already gone."""
        self.db.execute(delete(self.model).where(self.model.id == obj_id))

    def search(self, where: ColumnElement[bool] | None, page: PageRequest) -> Page[M]:
        where = where if where is not None else true()
        total = int(
            self.db.execute(select(func.count()).select_from(self.model).where(where)).scalar_one()
        )
        stmt = (
            select(self.model)
            .where(where)
            .order_by(*self._order_by(page.sort))
            .offset(page.offset)
            .limit(page.size)
        )
        rows = list(self.db.execute(stmt).scalars().all())
        return Page(items=rows, total=total, page=page.page, size=page.size)

    def _order_by(self, orders: Sequence[SortOrder]) -> list:
        # Only whitelisted names are ever turned into column references.
        clauses = []
        seen = set()
        for o in guard_sort(orders, self.kind):
            col = getattr(self.model, o.field)
            clauses.append(col.desc() if o.direction == SortDirection.desc else col.asc())
            seen.add(o.field)
        if "id" not in seen:
            clauses.append(self.model.id.asc())  # stable paging
        return clauses
