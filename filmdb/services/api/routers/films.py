# filmdb/services/api/routers/films.py
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
from filmdb.services.catalog.films import FilmService
from filmdb.services.schemas.films import (
    FilmCreate, FilmUpdate, FilmRead, FilmPage, DirectorsUpdate,
)
from filmdb.services.schemas.people import PersonRead
from filmdb.services.schemas.roles import RoleRead, CastUpdate

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/films", tags=["films"])


# ---- CRUD ----

@router.get("", response_model=FilmPage)
def search_films(
    title: Optional[str] = Query(None, description="Any whitespace-separated word, case-insensitive"),
    released_before: Optional[date] = Query(None),
    released_after: Optional[date] = Query(None),
    page: PageRequest = Depends(page_request),
    db: Session = Depends(transactional_session),
) -> FilmPage:
    res = FilmService(db).search(
        page, title=title, released_before=released_before, released_after=released_after,
    )
    return FilmPage(
        items=[FilmRead.model_validate(f) for f in res.items],
        total=res.total, page=res.page, size=res.size,
    )


@router.post("", response_model=FilmRead, status_code=HTTPStatus.CREATED)
def create_film(
    payload: FilmCreate,
    db: Session = Depends(transactional_session),
) -> FilmRead:
    film = FilmService(db).create_film(
        title=payload.title, release_date=payload.release_date, synopsis=payload.synopsis,
    )
    return FilmRead.model_validate(film)


@router.get("/{film_id}", response_model=FilmRead)
def get_film(
    film_id: int = Path(...),
    db: Session = Depends(transactional_session),
) -> FilmRead:
    return FilmRead.model_validate(FilmService(db).get_film(film_id))


@router.patch("/{film_id}", response_model=FilmRead)
def update_film(
    film_id: int,
    payload: FilmUpdate,
    db: Session = Depends(transactional_session),
) -> FilmRead:
    changes = payload.model_dump(exclude_unset=True)
    film = FilmService(db).update_film(film_id, **changes)
    return FilmRead.model_validate(film)


@router.delete("/{film_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_film(
    film_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    FilmService(db).delete_film(film_id)
    return None


# ---- Directors ----

@router.get("/{film_id}/directors", response_model=List[PersonRead])
def list_directors(
    film_id: int,
    db: Session = Depends(transactional_session),
) -> List[PersonRead]:
    return [PersonRead.model_validate(p) for p in DirectorService(db).get_directors(film_id)]


@router.put("/{film_id}/directors", response_model=List[PersonRead])
def replace_directors(
    film_id: int,
    payload: DirectorsUpdate,
    db: Session = Depends(transactional_session),
) -> List[PersonRead]:
    people = DirectorService(db).update_directors(film_id, payload.person_ids)
    return [PersonRead.model_validate(p) for p in people]


@router.delete("/{film_id}/directors", status_code=HTTPStatus.NO_CONTENT)
def clear_directors(
    film_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    DirectorService(db).delete_directors(film_id)
    return None


@router.put("/{film_id}/directors/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def add_director(
    film_id: int,
    person_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    DirectorService(db).set_director(film_id, person_id)
    return None


@router.delete("/{film_id}/directors/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_director(
    film_id: int,
    person_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    DirectorService(db).delete_director(film_id, person_id)
    return None


# ---- Cast ----

@router.get("/{film_id}/cast", response_model=List[RoleRead])
def list_cast(
    film_id: int,
    db: Session = Depends(transactional_session),
) -> List[RoleRead]:
    return [RoleRead.model_validate(r) for r in CastService(db).get_cast(film_id)]


@router.put("/{film_id}/cast", response_model=List[RoleRead])
def replace_cast(
    film_id: int,
    payload: CastUpdate,
    db: Session = Depends(transactional_session),
) -> List[RoleRead]:
    desired = [m.to_domain() for m in payload.cast or []]
    return [RoleRead.model_validate(r) for r in CastService(db).update_cast(film_id, desired)]


@router.delete("/{film_id}/cast", status_code=HTTPStatus.NO_CONTENT)
def clear_cast(
    film_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    CastService(db).delete_cast(film_id)
    return None
