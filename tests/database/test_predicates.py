# tests/database/test_predicates.py
from __future__ import annotations

from datetime import date

from sqlalchemy import select

from filmdb.database.models import Film, Person
from filmdb.database.repos.predicates import (
    after, all_of, any_of, before, contains_any_token, film_filter, person_filter,
)
from tests.factories import mk_film, mk_person


def _titles(db, where) -> set[str]:
    return set(db.execute(select(Film.title).where(where)).scalars().all())


def _seed(db):
    mk_film(db, "Fresh Air", date(1990, 5, 1))
    mk_film(db, "Mango Tango", date(2001, 7, 4))
    mk_film(db, "Banana Split", date(2010, 1, 1))


def test_any_token_matches(db):
    _seed(db)
    assert _titles(db, film_filter("mango fresh")) == {"Fresh Air", "Mango Tango"}


def test_blank_or_missing_text_matches_everything(db):
    _seed(db)
    everything = {"Fresh Air", "Mango Tango", "Banana Split"}
    assert _titles(db, film_filter(None)) == everything
    assert _titles(db, film_filter("   ")) == everything
    assert contains_any_token(Film.title, None) is None


def test_case_insensitive_and_extra_whitespace(db):
    _seed(db)
    assert _titles(db, film_filter("  TANGO\t")) == {"Mango Tango"}


def test_like_wildcards_are_literal(db):
    _seed(db)
    mk_film(db, "100% Wolf", date(2020, 1, 1))
    assert _titles(db, film_filter("%")) == {"100% Wolf"}
    assert _titles(db, film_filter("_")) == set()


def test_date_bounds_are_strict(db):
    _seed(db)
    assert _titles(db, film_filter(released_before=date(2001, 7, 4))) == {"Fresh Air"}
    assert _titles(db, film_filter(released_after=date(2001, 7, 4))) == {"Banana Split"}
    assert _titles(
        db, film_filter(released_after=date(1990, 5, 1), released_before=date(2010, 1, 1))
    ) == {"Mango Tango"}


def test_text_and_range_are_anded(db):
    _seed(db)
    where = film_filter("mango fresh banana", released_after=date(2000, 1, 1))
    assert _titles(db, where) == {"Mango Tango", "Banana Split"}


def test_person_filter(db):
    mk_person(db, "Ada Lovelace", date(1815, 12, 10))
    mk_person(db, "Alan Turing", date(1912, 6, 23))
    mk_person(db, "Nobody Known")
    names = lambda where: set(db.execute(select(Person.name).where(where)).scalars().all())

    assert names(person_filter("turing lovelace")) == {"Ada Lovelace", "Alan Turing"}
    assert names(person_filter(born_before=date(1900, 1, 1))) == {"Ada Lovelace"}
    # a missing birth date never satisfies a bound
    assert names(person_filter(born_after=date(1800, 1, 1))) == {"Ada Lovelace", "Alan Turing"}
    assert len(names(person_filter())) == 3


def test_combinators_drop_missing_legs(db):
    _seed(db)
    assert before(Film.release_date, None) is None
    assert after(Film.release_date, None) is None
    assert _titles(db, all_of(None, None)) == _titles(db, any_of())
    assert len(_titles(db, all_of())) == 3
