# tests/database/test_database_models.py
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from filmdb.database.models import FilmDirector, Role
from tests.factories import mk_film, mk_person, mk_role


def test_role_unique_pair(db):
    f = mk_film(db)
    p = mk_person(db)
    mk_role(db, f, p, "Butler")
    db.expunge_all()

    # Duplicate pair -> relies on DB primary key
    with pytest.raises(IntegrityError):
        with db.begin_nested():
            db.add(Role(film_id=f.id, person_id=p.id, character="Maid"))
            db.flush()


def test_role_character_must_not_be_blank(db):
    f = mk_film(db)
    p = mk_person(db)
    with pytest.raises(IntegrityError):
        with db.begin_nested():
            db.add(Role(film_id=f.id, person_id=p.id, character="   "))
            db.flush()


def test_director_link_requires_existing_rows(db):
    f = mk_film(db)
    with pytest.raises(IntegrityError):
        with db.begin_nested():
            db.add(FilmDirector(film_id=f.id, person_id=999_999))
            db.flush()


def test_relationship_views_read_join_rows(db):
    f = mk_film(db, "Heat")
    p = mk_person(db, "Michael Mann")
    db.add(FilmDirector(film_id=f.id, person_id=p.id))
    r = mk_role(db, f, p, "Cameo")
    db.expire_all()

    assert [d.id for d in f.directors] == [p.id]
    assert [x.id for x in p.films_directed] == [f.id]
    assert f.cast == [r]
    assert p.roles == [r]
    assert r.film is f and r.person is p
