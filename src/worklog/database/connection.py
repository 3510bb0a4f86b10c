from __future__ import annotations

import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def _is_sqlite_memory(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/") == "sqlite:")


class Database:
    """Process-wide database handle: one engine + session factory.

    Built once by the app factory, passed to every repository through the
    container and closed on shutdown.
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs):
        self.url = url
        if _is_sqlite_memory(url):
            # Every session must see the same in-memory database.
            engine_kwargs.setdefault("poolclass", StaticPool)
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        elif not url.startswith("sqlite"):
            engine_kwargs.setdefault("pool_pre_ping", True)

        self._engine = create_engine(url, echo=echo, **engine_kwargs)
        if url.startswith("sqlite"):
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = sessionmaker(bind=self._engine, autoflush=False, expire_on_commit=False)
        self._closed = False

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def closed(self) -> bool:
        return self._closed

    def session(self) -> Session:
        return self._session_factory()

    def ping(self) -> bool:
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.warning("Database ping failed", exc_info=True)
            return False

    def close(self) -> None:
        if self._closed:
            return
        self._engine.dispose()
        self._closed = True
        logger.debug("Database engine disposed")


def _enable_sqlite_foreign_keys(dbapi_conn, _record) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON")
    finally:
        cur.close()
