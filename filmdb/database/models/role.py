# filmdb/database/models/role.py
from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmdb.database.core.main import Base
from filmdb.domain.entities.cast import RoleKey

if TYPE_CHECKING:
    from .film import Film
    from .person import Person


class Role(Base):
    """
    Film <-> Person cast entry. The composite primary key (film_id, person_id)
    is the uniqueness guarantee: a second role for the same pair is rejected by
    the database.
    """
    __tablename__ = "role"
    __table_args__ = (
        CheckConstraint('length(trim("character")) > 0', name="character_not_blank"),
        Index("ix_role_person_id", "person_id"),
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
    character: Mapped[str] = mapped_column(String(255), nullable=False)

    film: Mapped["Film"] = relationship("Film", viewonly=True)
    person: Mapped["Person"] = relationship("Person", viewonly=True)

    @property
    def key(self) -> RoleKey:
        return RoleKey(self.film_id, self.person_id)

    def __repr__(self) -> str:
        return f"<Role film_id={self.film_id} person_id={self.person_id} character={self.character!r}>"
