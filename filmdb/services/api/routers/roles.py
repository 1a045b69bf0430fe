# filmdb/services/api/routers/roles.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from filmdb.common.settings import get_settings
from filmdb.services.api.deps import transactional_session
from filmdb.services.catalog.cast import CastService
from filmdb.services.schemas.roles import RoleCreate, RoleUpdate, RoleRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/roles", tags=["roles"])


@router.post("", response_model=RoleRead, status_code=HTTPStatus.CREATED)
def create_role(
    payload: RoleCreate,
    db: Session = Depends(transactional_session),
) -> RoleRead:
    role = CastService(db).create_role(payload.film_id, payload.person_id, payload.character)
    return RoleRead.model_validate(role)


@router.get("/{film_id}/{person_id}", response_model=RoleRead)
def get_role(
    film_id: int,
    person_id: int,
    db: Session = Depends(transactional_session),
) -> RoleRead:
    return RoleRead.model_validate(CastService(db).get_role(film_id, person_id))


@router.patch("/{film_id}/{person_id}", response_model=RoleRead)
def update_role(
    film_id: int,
    person_id: int,
    payload: RoleUpdate,
    db: Session = Depends(transactional_session),
) -> RoleRead:
    role = CastService(db).update_role(film_id, person_id, payload.character)
    return RoleRead.model_validate(role)


@router.delete("/{film_id}/{person_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_role(
    film_id: int,
    person_id: int,
    db: Session = Depends(transactional_session),
) -> None:
    CastService(db).delete_role(film_id, person_id)
    return None
