# filmdb/services/api/deps.py
from __future__ import annotations
from typing import Generator, List, Optional
from fastapi import Depends, Query
from sqlalchemy.orm import Session

from filmdb.common.settings import get_settings
from filmdb.database.core.main import SessionLocal
from filmdb.domain.dataclasses.paging import PageRequest
from filmdb.domain.policies.sort_guard import parse_sort

cfg = get_settings()


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction; services open SAVEPOINTs inside it.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    # Using the Session.begin() context ensures COMMIT on normal exit,
    # and ROLLBACK if an exception bubbles out.
    with db.begin():
        yield db

def page_request(
    page: int = Query(0, ge=0),
    size: int = Query(cfg.api.default_page_size, ge=1, le=cfg.api.max_page_size),
    sort: Optional[List[str]] = Query(None, description='Repeatable, "field" or "field,desc"'),
) -> PageRequest:
    # Field names are not checked here; repositories drop non-sortable ones.
    return PageRequest(page=page, size=size, sort=tuple(parse_sort(sort)))
