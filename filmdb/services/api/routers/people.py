# filmdb/services/api/routers/people.py
from __future__ import annotations

from datetime import date
from http import HTTPStatus
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from filmdb.common.settings import get_settings
from filmdb.domain.dataclasses.paging import PageRequest
from filmdb.services.api.deps import page_request, transactional_session
from filmdb.services.catalog.cast import CastService
from filmdb.services.catalog.directors import DirectorService
from filmdb.services.catalog.people import PersonService
from filmdb.services.schemas.films import FilmRead
from filmdb.services.schemas.people import PersonCreate, PersonUpdate, PersonRead, PersonPage
from filmdb.services.schemas.roles import RoleRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/people", tags=["people"])


@router.get("", response_model=PersonPage)
def search_people(
    name: Optional[str] = Query(None, description="Any whitespace-separated word, case-insensitive"),
    born_before: Optional[date] = Query(None),
    born_after: Optional[date] = Query(None),
    page: PageRequest = Depends(page_request),
    db: Session = Depends(transactional_session),
) -> PersonPage:
    res = PersonService(db).search(page, name=name, born_before=born_before, born_after=born_after)
    return PersonPage(
        items=[PersonRead.model_validate(p) for p in res.items],
        total=res.total, page=res.page, size=res.size,
    )


@router.post("", response_model=PersonRead, status_code=HTTPStatus.CREATED)
def create_person(
    payload: PersonCreate,
    db: Session = Depends(transactional_session),
) -> PersonRead:
    person = PersonService(db).create_person(name=payload.name, date_of_birth=payload.date_of_birth)
    return PersonRead.model_validate(person)


@router.get("/{person_id}", response_model=PersonRead)
def get_person(
    person_id: int = Path(...),
    db: Session = Depends(transactional_session),
) -> PersonRead:
    return PersonRead.model_validate(PersonService(db).get_person(person_id))


@router.patch("/{person_id}", response_model=PersonRead)
def update_person(
    person_id: int,
    payload: PersonUpdate,
    db: Session = Depends(transactional_session),
) -> PersonRead:
    person = PersonService(db).update_person(person_id, **payload.model_dump(exclude_unset=True))
    return PersonRead.model_validate(person)


@router.delete("/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_person(
    person_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    PersonService(db).delete_person(person_id)
    return None


@router.get("/{person_id}/roles", response_model=List[RoleRead])
def list_roles(
    person_id: int,
    db: Session = Depends(transactional_session),
) -> List[RoleRead]:
    return [RoleRead.model_validate(r) for r in CastService(db).get_roles(person_id)]


@router.get("/{person_id}/films-directed", response_model=List[FilmRead])
def list_films_directed(
    person_id: int,
    db: Session = Depends(transactional_session),
) -> List[FilmRead]:
    return [FilmRead.model_validate(f) for f in DirectorService(db).get_films_directed(person_id)]
