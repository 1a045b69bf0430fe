# filmdb/database/repos/predicates.py
"""
Search predicates for the film and person listings.

Each leg builder returns an expression or None when its input is empty; the
combinators drop the None legs and fold what is left. A filter with nothing
to say therefore matches every row instead of none.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import ColumnElement, and_, or_, true

from filmdb.common.strings.splitters import words
from filmdb.database.models.film import Film as DBFilm
from filmdb.database.models.person import Person as DBPerson

Predicate = ColumnElement[bool]


def contains_any_token(column, text: Optional[str]) -> Optional[Predicate]:
    """
    Case-insensitive "fuzzy" match: the value must contain at least one of the
    whitespace-separated tokens of `text`. LIKE wildcards typed by the user are
    matched literally.
    """
    tokens = words(text)
    if not tokens:
        return None
    return any_of(*(column.icontains(t, autoescape=True) for t in tokens))


def before(column, bound: Optional[date]) -> Optional[Predicate]:
    return column < bound if bound is not None else None


def after(column, bound: Optional[date]) -> Optional[Predicate]:
    return column > bound if bound is not None else None


def all_of(*legs: Optional[Predicate]) -> Predicate:
    kept = [p for p in legs if p is not None]
    if not kept:
        return true()
    return kept[0] if len(kept) == 1 else and_(*kept)


def any_of(*legs: Optional[Predicate]) -> Predicate:
    kept = [p for p in legs if p is not None]
    if not kept:
        return true()
    return kept[0] if len(kept) == 1 else or_(*kept)


def film_filter(
    title: Optional[str] = None,
    released_before: Optional[date] = None,
    released_after: Optional[date] = None,
) -> Predicate:
    return all_of(
        contains_any_token(DBFilm.title, title),
        before(DBFilm.release_date, released_before),
        after(DBFilm.release_date, released_after),
    )


def person_filter(
    name: Optional[str] = None,
    born_before: Optional[date] = None,
    born_after: Optional[date] = None,
) -> Predicate:
    return all_of(
        contains_any_token(DBPerson.name, name),
        before(DBPerson.date_of_birth, born_before),
        after(DBPerson.date_of_birth, born_after),
    )
