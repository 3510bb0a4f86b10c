from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String

from ..common.datetime_utils import iso_datetime, utcnow
from ..database.base import Base


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tag_name = Column(String(100), nullable=False, unique=True)
    time_minutes = Column(Integer, nullable=False)  # minutes credited per logged unit
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "tagName": self.tag_name,
            "timeMinutes": self.time_minutes,
            "createdAt": iso_datetime(self.created_at),
        }

    def __repr__(self):
        return f"<Tag id={self.id} name={self.tag_name}>"
