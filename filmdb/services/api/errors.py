# filmdb/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from filmdb.common.logging import get_logger
from filmdb.domain.errors import ConflictError, NotFoundError, ValidationError

logger = get_logger(__name__)


def _key(value: object):
    as_tuple = getattr(value, "as_tuple", None)
    return list(as_tuple()) if callable(as_tuple) else value


def install_error_handlers(app: FastAPI) -> None:
    """Translate catalog errors into HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def _not_found(_: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=HTTPStatus.NOT_FOUND,
            content={"detail": str(exc), "kind": str(exc.kind), "ids": [_key(i) for i in exc.ids]},
        )

    @app.exception_handler(ConflictError)
    async def _conflict(_: Request, exc: ConflictError):
        return JSONResponse(
            status_code=HTTPStatus.CONFLICT,
            content={"detail": str(exc), "kind": str(exc.kind), "key": _key(exc.key)},
        )

    @app.exception_handler(ValidationError)
    async def _invalid(_: Request, exc: ValidationError):
        logger.debug("Rejected request: %s", exc)
        return JSONResponse(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            content={"detail": str(exc), "field": exc.field},
        )
