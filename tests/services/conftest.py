# tests/services/conftest.py
from __future__ import annotations
import pytest
from starlette.testclient import TestClient

from filmdb.database.core.transaction import transactional
from filmdb.services.api.app import create_app
from filmdb.services.api.deps import transactional_session


@pytest.fixture()
def api_client(db):
    """
    A TestClient whose FastAPI dependency `transactional_session` is overridden
    to yield the per-test Session. All API calls in one test share it (so
    POST -> GET works); each request runs in its own SAVEPOINT and everything
    is rolled back at the end of the test.
    """
    app = create_app()

    def _override():
        with transactional(db):
            yield db

    app.dependency_overrides[transactional_session] = _override

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
