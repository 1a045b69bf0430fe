# filmdb/services/catalog/films.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from filmdb.common.logging import get_logger
from filmdb.common.settings import get_settings
from filmdb.database.core.transaction import transactional
from filmdb.database.models.film import Film as DBFilm
from filmdb.database.repos.film_repo import SqlAlchemyFilmRepo
from filmdb.database.repos.predicates import film_filter
from filmdb.domain.dataclasses.paging import Page, PageRequest
from filmdb.domain.enums.entity_kind import EntityKind
from filmdb.domain.errors import NotFoundError, ValidationError, require_text
from filmdb.services.catalog.cast import CastService
from filmdb.services.catalog.directors import DirectorService

logger = get_logger(__name__)

_UNSET = object()


class FilmService:
    def __init__(self, db: Session):
        self.db = db
        self.cfg = get_settings()
        self.films = SqlAlchemyFilmRepo(db)

    def get_film(self, film_id: int) -> DBFilm:
        film = self.films.get(film_id)
        if film is None:
            raise NotFoundError(EntityKind.film, film_id)
        return film

    def film_exists(self, film_id: int) -> bool:
        return self.films.exists(film_id)

    def search(
        self,
        page: PageRequest,
        *,
        title: Optional[str] = None,
        released_before: Optional[date] = None,
        released_after: Optional[date] = None,
    ) -> Page[DBFilm]:
        """Films matching all given filters; unknown sort fields in `page` are ignored."""
        where = film_filter(title, released_before, released_after)
        return self.films.search(where, page.clamp(self.cfg.api.max_page_size))

    def create_film(self, *, title: str, release_date: date, synopsis: Optional[str] = None) -> DBFilm:
        require_text("title", title)
        if release_date is None:
            raise ValidationError("release_date", "must not be null")
        with transactional(self.db):
            film = self.films.add(DBFilm(title=title, release_date=release_date, synopsis=synopsis))
        logger.info("Film %s created: %r", film.id, film.title)
        return film

    def update_film(
        self,
        film_id: int,
        *,
        title: Optional[str] = None,
        release_date: Optional[date] = None,
        synopsis=_UNSET,
    ) -> DBFilm:
        """Partial update; `synopsis=None` clears it, omitting it keeps the old value."""
        if title is not None:
            require_text("title", title)
        with transactional(self.db):
            film = self.get_film(film_id)
            if title is not None:
                film.title = title
            if release_date is not None:
                film.release_date = release_date
            if synopsis is not _UNSET:
                film.synopsis = synopsis
            self.db.flush()
        return film

    def delete_film(self, film_id: int) -> None:
        """Removes the film's roles and director pairings first; no-op if the film is gone."""
        with transactional(self.db):
            film = self.films.get(film_id)
            if film is None:
                return
            CastService(self.db).delete_cast(film_id)
            DirectorService(self.db).delete_directors(film_id)
            self.films.delete(film)
        logger.info("Film %s deleted", film_id)
