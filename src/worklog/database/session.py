from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from .connection import Database


@contextmanager
def db_session(database: Database) -> Iterator[Session]:
    """One unit of work: commit on success, rollback on error, always close."""
    session = database.session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
