# filmdb/services/catalog/directors.py
from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from filmdb.common.logging import get_logger
from filmdb.database.core.transaction import transactional
from filmdb.database.models.film import Film as DBFilm
from filmdb.database.models.person import Person as DBPerson
from filmdb.database.repos.director_repo import SqlAlchemyDirectorRepo
from filmdb.database.repos.film_repo import SqlAlchemyFilmRepo
from filmdb.database.repos.people_repo import SqlAlchemyPeopleRepo
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.errors import NotFoundError, missing_ids

logger = get_logger(__name__)


class DirectorService:
    """
    The one code path that writes Film <-> Person "directed" pairings.
    Both Film.directors and Person.films_directed are views over the same
    join rows, so a film lists a person exactly when that person lists the film.
    """

    def __init__(self, db: Session):
        self.db = db
        self.films = SqlAlchemyFilmRepo(db)
        self.people = SqlAlchemyPeopleRepo(db)
        self.links = SqlAlchemyDirectorRepo(db)

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

    def get_directors(self, film_id: int) -> List[DBPerson]:
        return list(self._film_or_404(film_id).directors)

    def get_films_directed(self, person_id: int) -> List[DBFilm]:
        return list(self._person_or_404(person_id).films_directed)

    def set_director(self, film_id: int, person_id: int) -> None:
        """Idempotent: an existing pairing is left as is."""
        with transactional(self.db):
            self._film_or_404(film_id)
            self._person_or_404(person_id)
            if self.links.exists(film_id, person_id):
                return
            self.links.link(film_id, [person_id])
        logger.info("Director %s set for film %s", person_id, film_id)

    def update_directors(self, film_id: int, person_ids: Optional[Iterable[int]]) -> List[DBPerson]:
        """
        Replace the film's director set with `person_ids` (None or empty clears it).
        Raises NotFoundError naming every unknown person id; nothing changes then.
        """
        requested = list(dict.fromkeys(person_ids or ()))
        with transactional(self.db):
            film = self._film_or_404(film_id)
            if not requested:
                removed = self.links.unlink_film(film_id)
                logger.info("Cleared %d director(s) of film %s", len(removed), film_id)
                return []

            found = self.people.get_many(requested)
            if len(found) != len(requested):
                raise NotFoundError(EntityKind.person, *missing_ids(requested, (p.id for p in found)))

            current = set(self.links.director_ids(film_id))
            wanted = set(requested)
            to_remove = sorted(current - wanted)
            to_add = [pid for pid in requested if pid not in current]
            self.links.unlink(film_id, to_remove)
            self.links.link(film_id, to_add)

        logger.info(
            "Directors of film %s updated: +%d -%d =%d",
            film_id, len(to_add), len(to_remove), len(current & wanted),
        )
        return list(film.directors)

    def delete_director(self, film_id: int, person_id: int) -> None:
        """Remove one pairing; silently does nothing if it (or either side) is absent."""
        with transactional(self.db):
            if not self.links.exists(film_id, person_id):
                return
            self.links.unlink(film_id, [person_id])
        logger.info("Director %s removed from film %s", person_id, film_id)

    def delete_directors(self, film_id: int) -> None:
        self.update_directors(film_id, None)

    def delete_films_directed(self, person_id: int) -> List[int]:
        """Unlink a person from every film they directed (used before deleting the person)."""
        with transactional(self.db):
            film_ids = self.links.unlink_person(person_id)
        if film_ids:
            logger.info("Person %s removed as director of %d film(s)", person_id, len(film_ids))
        return film_ids
