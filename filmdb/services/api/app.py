from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmdb.common.settings import get_settings
from filmdb.services.api.errors import install_error_handlers
from filmdb.services.api.routers import films, health, people, roles

cfg = get_settings()
dev = cfg.app_env.lower() == "development"


def create_app() -> FastAPI:
    app = FastAPI(
        title="filmdb API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(films.router)
    app.include_router(people.router)
    app.include_router(roles.router)
    return app

app = create_app()
