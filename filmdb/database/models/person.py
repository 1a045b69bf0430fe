# filmdb/database/models/person.py
from __future__ import annotations

from datetime import date
from typing import Optional, List, TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmdb.database.core.main import Base
from filmdb.database.core.service_object import ServiceObject
from filmdb.database.models._tables import _t

if TYPE_CHECKING:
    from .film import Film
    from .role import Role


# =======================
# People
# =======================
class Person(ServiceObject, Base):
    __tablename__ = "person"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="name_not_blank"),
        Index("ix_person_name", "name"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date)

    films_directed: Mapped[List["Film"]] = relationship(
        "Film",
        secondary=lambda: _t("film_director"),
        order_by="Film.id",
        viewonly=True,
    )
    roles: Mapped[List["Role"]] = relationship(
        "Role",
        primaryjoin="Person.id == Role.person_id",
        order_by="Role.film_id",
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.name!r}>"


class FilmDirector(Base):
    """
    Association table for Film <-> Person (directed).
    One row is one pairing; both Film.directors and Person.films_directed read it.
    """
    __tablename__ = "film_director"
    __table_args__ = (
        Index("ix_film_director_person_id", "person_id"),
    )

    film_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("film.id", ondelete="RESTRICT"),
        primary_key=True,
    )
    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="RESTRICT"),
        primary_key=True,
    )

    def __repr__(self) -> str:
        return f"<FilmDirector film_id={self.film_id} person_id={self.person_id}>"
