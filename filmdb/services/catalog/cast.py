# filmdb/services/catalog/cast.py
from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from filmdb.common.logging import get_logger
from filmdb.database.core.transaction import transactional
from filmdb.database.models.film import Film as DBFilm
from filmdb.database.models.person import Person as DBPerson
from filmdb.database.models.role import Role as DBRole
from filmdb.database.repos.film_repo import SqlAlchemyFilmRepo
from filmdb.database.repos.people_repo import SqlAlchemyPeopleRepo
from filmdb.database.repos.role_repo import SqlAlchemyRoleRepo
from filmdb.domain.entities.cast import CastMember, RoleKey, dedupe_cast
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.errors import ConflictError, NotFoundError, missing_ids, require_text

logger = get_logger(__name__)


class CastService:
    """
    Roles of films, addressed by their (film_id, person_id) key, and
    reconciliation of a whole cast against a desired list.
    """

    def __init__(self, db: Session):
        self.db = db
        self.films = SqlAlchemyFilmRepo(db)
        self.people = SqlAlchemyPeopleRepo(db)
        self.roles = SqlAlchemyRoleRepo(db)

    # ---------- lookups ----------

    def _film_or_404(self, film_id: int) -> DBFilm:
        film = self.films.get(film_id)
        if film is None:
            raise NotFoundError(EntityKind.film, film_id)
        return film

    def _person_or_404(self, person_id: int) -> DBPerson:
        person = self.people.get(person_id)
        if person is None:
            raise NotFoundError(EntityKind.person, person_id)
        return person

    def get_role(self, film_id: int, person_id: int) -> DBRole:
        key = RoleKey(film_id, person_id)
        role = self.roles.get(key)
        if role is None:
            raise NotFoundError(EntityKind.role, key)
        return role

    def role_exists(self, film_id: int, person_id: int) -> bool:
        return self.roles.exists(RoleKey(film_id, person_id))

    def get_cast(self, film_id: int) -> List[DBRole]:
        self._film_or_404(film_id)
        return self.roles.list_by_film(film_id)

    def get_roles(self, person_id: int) -> List[DBRole]:
        self._person_or_404(person_id)
        return self.roles.list_by_person(person_id)

    # ---------- single roles ----------

    def create_role(self, film_id: int, person_id: int, character: str) -> DBRole:
        """
        Not idempotent: a retry after an unseen success reports ConflictError,
        which the caller should read as "already created".
        """
        require_text("character", character)
        key = RoleKey(film_id, person_id)
        with transactional(self.db):
            self._film_or_404(film_id)
            self._person_or_404(person_id)
            if self.roles.exists(key):
                raise ConflictError(EntityKind.role, key)
            role = self.roles.add(DBRole(film_id=film_id, person_id=person_id, character=character))
        logger.info("Role %s created", key.describe())
        return role

    def update_role(self, film_id: int, person_id: int, character: str) -> DBRole:
        require_text("character", character)
        with transactional(self.db):
            role = self.get_role(film_id, person_id)
            role.character = character
            self.roles.save(role)
        return role

    def delete_role(self, film_id: int, person_id: int) -> None:
        """Idempotent: deleting a missing role is not an error."""
        with transactional(self.db):
            self.roles.delete_by_key(RoleKey(film_id, person_id))

    def delete_cast(self, film_id: int) -> int:
        with transactional(self.db):
            n = self.roles.delete_by_film(film_id)
        if n:
            logger.info("Deleted %d role(s) of film %s", n, film_id)
        return n

    def delete_roles_of_person(self, person_id: int) -> int:
        with transactional(self.db):
            return self.roles.delete_by_person(person_id)

    # ---------- reconciliation ----------

    def update_cast(self, film_id: int, desired: Optional[Iterable[CastMember]]) -> List[DBRole]:
        """
        Make the film's cast equal `desired` with the fewest writes:

          * roles whose person is not wanted any more are deleted (first, and
            flushed, so no insert can collide with a row on its way out);
          * roles that stay keep their record and only get the new character;
          * the remaining entries become new roles.

        A person listed twice keeps the last character. Unknown people are all
        reported in one NotFoundError and the cast is left untouched.
        """
        wanted = dedupe_cast(desired)
        for m in wanted:
            require_text("character", m.character)

        with transactional(self.db):
            self._film_or_404(film_id)
            current = {r.person_id: r for r in self.roles.list_by_film(film_id)}
            wanted_ids = {m.person_id for m in wanted}

            stale = [r for pid, r in current.items() if pid not in wanted_ids]
            for r in stale:
                self.roles.delete(r)

            new_ids = [m.person_id for m in wanted if m.person_id not in current]
            found = {p.id for p in self.people.get_many(new_ids)}
            if len(found) != len(set(new_ids)):
                raise NotFoundError(EntityKind.person, *missing_ids(new_ids, found))

            result: List[DBRole] = []
            updated = created = 0
            for m in wanted:
                role = current.get(m.person_id)
                if role is not None:
                    if role.character != m.character:
                        role.character = m.character
                        self.roles.save(role)
                        updated += 1
                else:
                    role = self.roles.add(DBRole(film_id=film_id, person_id=m.person_id, character=m.character))
                    created += 1
                result.append(role)

        logger.info(
            "Cast of film %s reconciled: %d deleted, %d updated, %d created",
            film_id, len(stale), updated, created,
        )
        return result
