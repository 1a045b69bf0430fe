# filmdb/database/core/transaction.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """
    All-or-nothing block. Opens a transaction, or a SAVEPOINT when the caller
    already holds one (e.g. the request-scoped session of the API layer).
    Any exception rolls back everything done inside the block.
    """
    if db.in_transaction():
        with db.begin_nested():
            yield db
    else:
        with db.begin():
            yield db
