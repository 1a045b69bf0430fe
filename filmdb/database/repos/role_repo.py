# filmdb/database/repos/role_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from filmdb.database.models.film import Film as DBFilm
from filmdb.database.models.person import Person as DBPerson
from filmdb.database.models.role import Role as DBRole
from filmdb.domain.entities.cast import RoleKey
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.errors import ConflictError


class SqlAlchemyRoleRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, key: RoleKey) -> Optional[DBRole]:
        return self.db.get(DBRole, key.as_tuple())

    def exists(self, key: RoleKey) -> bool:
        stmt = select(func.count()).select_from(DBRole).where(
            and_(DBRole.film_id == key.film_id, DBRole.person_id == key.person_id)
        )
        return self.db.execute(stmt).scalar_one() > 0

    def list_by_film(self, film_id: int) -> List[DBRole]:
        stmt = select(DBRole).where(DBRole.film_id == film_id).order_by(DBRole.person_id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def list_by_person(self, person_id: int) -> List[DBRole]:
        stmt = select(DBRole).where(DBRole.person_id == person_id).order_by(DBRole.film_id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def add(self, role: DBRole) -> DBRole:
        """
        Insert a new role. A unique violation (a concurrent insert of the same
        pair) is reported as ConflictError; the surrounding transaction survives.
        """
        try:
            with self.db.begin_nested():
                self.db.add(role)
                self.db.flush()
        except IntegrityError as e:
            raise ConflictError(EntityKind.role, role.key) from e
        self._expire([role.film_id], [role.person_id])
        return role

    def save(self, role: DBRole) -> DBRole:
        self.db.flush()
        return role

    def delete(self, role: DBRole) -> None:
        film_id, person_id = role.film_id, role.person_id
        self.db.delete(role)
        self.db.flush()
        self._expire([film_id], [person_id])

    def delete_by_key(self, key: RoleKey) -> None:
        """No-op when the role is already gone."""
        self.db.flush()
        self.db.execute(
            delete(DBRole).where(and_(DBRole.film_id == key.film_id, DBRole.person_id == key.person_id))
        )
        self._expire([key.film_id], [key.person_id])

    def delete_by_film(self, film_id: int) -> int:
        self.db.flush()
        person_ids = [r.person_id for r in self.list_by_film(film_id)]
        res = self.db.execute(delete(DBRole).where(DBRole.film_id == film_id))
        self._expire([film_id], person_ids)
        return res.rowcount or 0

    def delete_by_person(self, person_id: int) -> int:
        self.db.flush()
        film_ids = [r.film_id for r in self.list_by_person(person_id)]
        res = self.db.execute(delete(DBRole).where(DBRole.person_id == person_id))
        self._expire(film_ids, [person_id])
        return res.rowcount or 0

    def _expire(self, film_ids, person_ids) -> None:
        film_ids, person_ids = set(film_ids), set(person_ids)
        for obj in list(self.db.identity_map.values()):
            if isinstance(obj, DBFilm) and obj.id in film_ids:
                self.db.expire(obj, ["cast"])
            elif isinstance(obj, DBPerson) and obj.id in person_ids:
                self.db.expire(obj, ["roles"])
