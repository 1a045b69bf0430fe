from __future__ import annotations

from filmdb.database.models.person import Person as DBPerson
from filmdb.database.repos._base import SqlAlchemyRepo
from filmdb.domain.enums.entity_kind import EntityKind


class SqlAlchemyPeopleRepo(SqlAlchemyRepo[DBPerson]):
    model = DBPerson
    kind = EntityKind.person
