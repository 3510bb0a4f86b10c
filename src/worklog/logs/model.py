from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from ..common.datetime_utils import iso_date, iso_datetime, utcnow
from ..database.base import Base
from ..employees.model import Employee
from ..tags.model import Tag


class Log(Base):
    """Units of work an employee logged against one tag on one day."""

    __tablename__ = "logs"
    __table_args__ = (UniqueConstraint("employee_id", "tag_id", "log_date", name="uq_logs_employee_tag_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False)
    count = Column(Integer, nullable=False, default=0)
    total_minutes = Column(Integer, nullable=False, default=0)
    log_date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    employee = relationship(Employee, backref=backref("logs", cascade="all, delete-orphan"))
    tag = relationship(Tag, backref=backref("logs", cascade="all, delete-orphan"))

    def to_dict(self, *, include_employee: bool = False, include_tag: bool = False) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "tagId": self.tag_id,
            "count": self.count,
            "totalMinutes": self.total_minutes,
            "logDate": iso_date(self.log_date),
            "createdAt": iso_datetime(self.created_at),
        }
        if include_employee:
            out["employee"] = self.employee.to_dict() if self.employee else None
        if include_tag:
            out["tag"] = self.tag.to_dict() if self.tag else None
        return out
