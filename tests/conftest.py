# tests/conftest.py
from __future__ import annotations
import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from filmdb.common.settings import get_settings
from filmdb.database.core.main import configure_engine
from filmdb.database.models import Base  # <-- imports the models/metadata


def _use_postgres() -> bool:
    return os.getenv("FILMDB_TEST_POSTGRES", "").strip().lower() in {"1", "true", "yes"}


@pytest.fixture(scope="session")
def _database_url():
    if not _use_postgres():
        yield "sqlite+pysqlite:///:memory:"
        return
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(get_settings().test_db_image) as pg:
        # Force psycopg (v3) driver in the URL returned by testcontainers (it defaults to psycopg2)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    if _database_url.startswith("sqlite"):
        # One shared in-memory database, usable from the TestClient worker thread
        engine = create_engine(
            _database_url,
            future=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_engine(_database_url, future=True)
    configure_engine(engine)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test Session bound to an outer transaction that is rolled back after the test.
    Service-level commits/rollbacks become SAVEPOINT release/rollback inside it.
    """
    connection = db_engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, future=True, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()
