from __future__ import annotations

from filmdb.database.models.film import Film as DBFilm
from filmdb.database.repos._base import SqlAlchemyRepo
from filmdb.domain.enums.entity_kind import EntityKind


class SqlAlchemyFilmRepo(SqlAlchemyRepo[DBFilm]):
    model = DBFilm
    kind = EntityKind.film
