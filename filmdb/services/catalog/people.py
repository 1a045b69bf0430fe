# filmdb/services/catalog/people.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from filmdb.common.logging import get_logger
from filmdb.common.settings import get_settings
from filmdb.database.core.transaction import transactional
from filmdb.database.models.person import Person as DBPerson
from filmdb.database.repos.people_repo import SqlAlchemyPeopleRepo
from filmdb.database.repos.predicates import person_filter
from filmdb.domain.dataclasses.paging import Page, PageRequest
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.errors import NotFoundError, require_text
from filmdb.services.catalog.cast import CastService
from filmdb.services.catalog.directors import DirectorService

logger = get_logger(__name__)

_UNSET = object()


class PersonService:
    def __init__(self, db: Session):
        self.db = db
        self.cfg = get_settings()
        self.people = SqlAlchemyPeopleRepo(db)

    def get_person(self, person_id: int) -> DBPerson:
        person = self.people.get(person_id)
        if person is None:
            raise NotFoundError(EntityKind.person, person_id)
        return person

    def person_exists(self, person_id: int) -> bool:
        return self.people.exists(person_id)

    def search(
        self,
        page: PageRequest,
        *,
        name: Optional[str] = None,
        born_before: Optional[date] = None,
        born_after: Optional[date] = None,
    ) -> Page[DBPerson]:
        where = person_filter(name, born_before, born_after)
        return self.people.search(where, page.clamp(self.cfg.api.max_page_size))

    def create_person(self, *, name: str, date_of_birth: Optional[date] = None) -> DBPerson:
        require_text("name", name)
        with transactional(self.db):
            person = self.people.add(DBPerson(name=name, date_of_birth=date_of_birth))
        logger.info("Person %s created: %r", person.id, person.name)
        return person

    def update_person(self, person_id: int, *, name: Optional[str] = None, date_of_birth=_UNSET) -> DBPerson:
        if name is not None:
            require_text("name", name)
        with transactional(self.db):
            person = self.get_person(person_id)
            if name is not None:
                person.name = name
            if date_of_birth is not _UNSET:
                person.date_of_birth = date_of_birth
            self.db.flush()
        return person

    def delete_person(self, person_id: int) -> None:
        """Unlinks the person from directed films and deletes their roles first."""
        with transactional(self.db):
            person = self.people.get(person_id)
            if person is None:
                return
            DirectorService(self.db).delete_films_directed(person_id)
            CastService(self.db).delete_roles_of_person(person_id)
            self.people.delete(person)
        logger.info("Person %s deleted", person_id)
