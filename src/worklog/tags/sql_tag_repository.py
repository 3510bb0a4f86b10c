from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select

from ..database.connection import Database
from ..database.session import db_session
from .model import Tag
from .repository import TagRepository


class SQLTagRepository(TagRepository):
    def __init__(self, database: Database):
        self._db = database

    def list_all(self) -> Sequence[Tag]:
        with db_session(self._db) as session:
            return list(session.scalars(select(Tag).order_by(Tag.tag_name)))

    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        with db_session(self._db) as session:
            return session.get(Tag, tag_id)

    def get_by_name(self, tag_name: str, *, exclude_id: Optional[int] = None) -> Optional[Tag]:
        stmt = select(Tag).where(Tag.tag_name == tag_name)
        if exclude_id is not None:
            stmt = stmt.where(Tag.id != exclude_id)
        with db_session(self._db) as session:
            return session.scalars(stmt).first()

    def create(self, *, tag_name: str, time_minutes: int) -> Tag:
        with db_session(self._db) as session:
            tag = Tag(tag_name=tag_name, time_minutes=time_minutes)
            session.add(tag)
            session.flush()
            return tag

    def update(self, tag_id: int, changes: dict) -> Optional[Tag]:
        with db_session(self._db) as session:
            tag = session.get(Tag, tag_id)
            if not tag:
                return None
            for field, value in changes.items():
                setattr(tag, field, value)
            session.flush()
            return tag

    def delete_by_id(self, tag_id: int) -> bool:
        with db_session(self._db) as session:
            tag = session.get(Tag, tag_id)
            if not tag:
                return False
            session.delete(tag)
            return True
