# filmdb/database/core/main.py
from __future__ import annotations

from functools import lru_cache
from typing import Iterator, List

from sqlalchemy import MetaData, create_engine, event, Column, Table
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from filmdb.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated", "data_origin")

class Base(DeclarativeBase):
    metadata = MetaData(
        schema=_settings.db_schema,
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        # Positional args are (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args

        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        # Stable ordering: ServiceObject fields first, then everything else in their original order
        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}

        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def _engine_kwargs(url: str) -> dict:
    if make_url(url).get_backend_name() == "sqlite":
        # SQLite uses a single-connection pool; pool sizing options don't apply
        return {"echo": _settings.db.echo}
    return {
        "echo": _settings.db.echo,
        "pool_size": _settings.db.pool_size,
        "max_overflow": _settings.db.max_overflow,
        "pool_pre_ping": _settings.db.pool_pre_ping,
        "pool_recycle": _settings.db.pool_recycle,
    }


def configure_engine(engine: Engine) -> Engine:
    """Per-dialect connection setup shared by the app engine and test engines."""
    backend = engine.dialect.name

    if backend == "sqlite":
        @event.listens_for(engine, "connect")
        def _sqlite_connect(dbapi_conn, _):
            # Let SQLAlchemy emit BEGIN itself so SAVEPOINTs work, and enforce FKs
            dbapi_conn.isolation_level = None
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        @event.listens_for(engine, "begin")
        def _sqlite_begin(conn):
            conn.exec_driver_sql("BEGIN")

    elif _settings.db_schema:
        # Ensure the app schema is first, then public (so extensions remain visible)
        @event.listens_for(engine, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{_settings.db_schema}", public')

    return engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    url = _settings.database_url
    return configure_engine(create_engine(url, future=True, **_engine_kwargs(url)))


@lru_cache(maxsize=1)
def get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), expire_on_commit=False, future=True, autoflush=False)


def SessionLocal() -> Session:
    return get_sessionmaker()()


def get_session() -> Iterator[Session]:
    """
    Yields a transaction-scoped Session.
    Commits on success, rolls back on error.
    """
    session: Session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
