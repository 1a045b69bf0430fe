# filmdb/database/models/film.py
from __future__ import annotations

from datetime import date
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import Date, String, Text, CheckConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmdb.database.core.main import Base
from filmdb.database.core.service_object import ServiceObject
from filmdb.database.models._tables import _t

if TYPE_CHECKING:
    from .person import Person
    from .role import Role


class Film(ServiceObject, Base):
    """
    Both association collections are read-only views. Director pairings live in
    `film_director` rows and cast entries in `role` rows; DirectorService and
    CastService are the only writers.
    """
    __tablename__ = "film"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="title_not_blank"),
        Index("ix_film_title", "title"),
        Index("ix_film_release_date", "release_date"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    synopsis: Mapped[Optional[str]] = mapped_column(Text)

    directors: Mapped[List["Person"]] = relationship(
        "Person",
        secondary=lambda: _t("film_director"),
        order_by="Person.id",
        viewonly=True,
    )
    cast: Mapped[List["Role"]] = relationship(
        "Role",
        primaryjoin="Film.id == Role.film_id",
        order_by="Role.person_id",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Film id={self.id} title={self.title!r}>"
