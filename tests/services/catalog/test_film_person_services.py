# tests/services/catalog/test_film_person_services.py
from __future__ import annotations

from datetime import date

import pytest

from filmdb.database.models import FilmDirector, Role
from filmdb.domain.dataclasses.paging import PageRequest, SortOrder
from filmdb.domain.enums import SortDirection
from filmdb.domain.errors import NotFoundError, ValidationError
from filmdb.services.catalog.cast import CastService
from filmdb.services.catalog.directors import DirectorService
from filmdb.services.catalog.films import FilmService
from filmdb.services.catalog.people import PersonService


def _count(db, model) -> int:
    return db.query(model).count()


def test_film_crud(db):
    svc = FilmService(db)
    f = svc.create_film(title="Alien", release_date=date(1979, 5, 25), synopsis="In space")
    assert svc.get_film(f.id).title == "Alien"

    svc.update_film(f.id, title="Aliens")
    assert f.title == "Aliens" and f.synopsis == "In space"
    svc.update_film(f.id, synopsis=None)
    assert f.synopsis is None

    with pytest.raises(ValidationError):
        svc.create_film(title="  ", release_date=date(2000, 1, 1))
    with pytest.raises(ValidationError):
        svc.update_film(f.id, title="")
    with pytest.raises(NotFoundError):
        svc.get_film(999_999)


def test_film_search_filters_and_guards_sort(db):
    svc = FilmService(db)
    svc.create_film(title="Fresh Air", release_date=date(1990, 1, 1))
    svc.create_film(title="Mango Tango", release_date=date(2005, 1, 1))
    svc.create_film(title="Banana Split", release_date=date(2010, 1, 1))

    page = svc.search(
        PageRequest(sort=(SortOrder("directors"), SortOrder("release_date", SortDirection.desc))),
        title="mango fresh",
    )
    assert [f.title for f in page.items] == ["Mango Tango", "Fresh Air"]

    page = svc.search(PageRequest(size=1000), released_after=date(2000, 1, 1))
    assert page.total == 2
    assert page.size == svc.cfg.api.max_page_size


def test_delete_film_removes_roles_and_director_links(db):
    films, people = FilmService(db), PersonService(db)
    f = films.create_film(title="Heat", release_date=date(1995, 12, 15))
    keep = films.create_film(title="Thief", release_date=date(1981, 3, 27))
    mann = people.create_person(name="Michael Mann")
    pacino = people.create_person(name="Al Pacino")
    DirectorService(db).update_directors(f.id, [mann.id])
    DirectorService(db).update_directors(keep.id, [mann.id])
    CastService(db).create_role(f.id, pacino.id, "Vincent Hanna")

    films.delete_film(f.id)
    films.delete_film(f.id)  # already gone

    assert not films.film_exists(f.id)
    assert _count(db, Role) == 0
    assert _count(db, FilmDirector) == 1
    assert mann.films_directed == [keep]
    assert pacino.roles == []


def test_person_crud_and_search(db):
    svc = PersonService(db)
    ada = svc.create_person(name="Ada Lovelace", date_of_birth=date(1815, 12, 10))
    svc.create_person(name="Alan Turing", date_of_birth=date(1912, 6, 23))

    svc.update_person(ada.id, name="Augusta Ada King")
    assert svc.get_person(ada.id).name == "Augusta Ada King"
    svc.update_person(ada.id, date_of_birth=None)
    assert ada.date_of_birth is None

    page = svc.search(PageRequest(sort=(SortOrder("name", SortDirection.desc),)), name="ada turing")
    assert [p.name for p in page.items] == ["Augusta Ada King", "Alan Turing"]
    assert svc.search(PageRequest(), born_before=date(1950, 1, 1)).total == 1

    with pytest.raises(ValidationError):
        svc.create_person(name="")


def test_delete_person_unlinks_both_relations(db):
    films, people = FilmService(db), PersonService(db)
    f = films.create_film(title="Heat", release_date=date(1995, 12, 15))
    mann = people.create_person(name="Michael Mann")
    other = people.create_person(name="Someone Else")
    DirectorService(db).update_directors(f.id, [mann.id, other.id])
    CastService(db).create_role(f.id, mann.id, "Cameo")

    people.delete_person(mann.id)
    people.delete_person(mann.id)  # already gone

    assert not people.person_exists(mann.id)
    assert f.directors == [other]
    assert f.cast == []
