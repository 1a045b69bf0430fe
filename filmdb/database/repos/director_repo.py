# filmdb/database/repos/director_repo.py
from __future__ import annotations

from typing import Iterable, List

from sqlalchemy import and_, delete, select
from sqlalchemy.orm import Session

from filmdb.database.models.film import Film as DBFilm
from filmdb.database.models.person import Person as DBPerson, FilmDirector as DBFilmDirector


class SqlAlchemyDirectorRepo:
    """
    Rows of the film_director join table. Every write expires the matching
    Film.directors / Person.films_directed collections already loaded in the
    session, so both sides re-read the same rows on next access.
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    def director_ids(self, film_id: int) -> List[int]:
        stmt = (
            select(DBFilmDirector.person_id)
            .where(DBFilmDirector.film_id == film_id)
            .order_by(DBFilmDirector.person_id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def film_ids_directed(self, person_id: int) -> List[int]:
        stmt = (
            select(DBFilmDirector.film_id)
            .where(DBFilmDirector.person_id == person_id)
            .order_by(DBFilmDirector.film_id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def exists(self, film_id: int, person_id: int) -> bool:
        stmt = select(DBFilmDirector).where(
            and_(
                DBFilmDirector.film_id == film_id,
                DBFilmDirector.person_id == person_id,
            )
        ).limit(1)
        return self.db.execute(stmt).scalars().first() is not None

    def link(self, film_id: int, person_ids: Iterable[int]) -> None:
        person_ids = list(person_ids)
        if not person_ids:
            return
        self.db.add_all(DBFilmDirector(film_id=film_id, person_id=pid) for pid in person_ids)
        self.db.flush()
        self._expire([film_id], person_ids)

    def unlink(self, film_id: int, person_ids: Iterable[int]) -> None:
        person_ids = list(person_ids)
        if not person_ids:
            return
        self.db.flush()
        self.db.execute(
            delete(DBFilmDirector).where(
                and_(
                    DBFilmDirector.film_id == film_id,
                    DBFilmDirector.person_id.in_(person_ids),
                )
            )
        )
        self._expire([film_id], person_ids)

    def unlink_film(self, film_id: int) -> List[int]:
        """Remove every pairing of a film; returns the person ids that were unlinked."""
        person_ids = self.director_ids(film_id)
        self.unlink(film_id, person_ids)
        return person_ids

    def unlink_person(self, person_id: int) -> List[int]:
        """Remove every pairing of a person; returns the film ids that were unlinked."""
        film_ids = self.film_ids_directed(person_id)
        if not film_ids:
            return []
        self.db.flush()
        self.db.execute(delete(DBFilmDirector).where(DBFilmDirector.person_id == person_id))
        self._expire(film_ids, [person_id])
        return film_ids

    def _expire(self, film_ids: Iterable[int], person_ids: Iterable[int]) -> None:
        film_ids, person_ids = set(film_ids), set(person_ids)
        for obj in list(self.db.identity_map.values()):
            if isinstance(obj, DBFilm) and obj.id in film_ids:
                self.db.expire(obj, ["directors"])
            elif isinstance(obj, DBPerson) and obj.id in person_ids:
                self.db.expire(obj, ["films_directed"])
