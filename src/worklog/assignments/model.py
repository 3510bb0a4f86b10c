from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from ..common.datetime_utils import iso_datetime, utcnow
from ..database.base import Base
from ..employees.model import Employee
from ..tags.model import Tag


class Assignment(Base):
    __tablename__ = "assignments"
    __table_args__ = (UniqueConstraint("employee_id", "tag_id", name="uq_assignments_employee_tag"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    tag_id = Column(Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False)
    is_mandatory = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    employee = relationship(Employee, backref=backref("assignments", cascade="all, delete-orphan"))
    tag = relationship(Tag, backref=backref("assignments", cascade="all, delete-orphan"))

    def to_dict(self, *, include_relations: bool = False) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "tagId": self.tag_id,
            "isMandatory": bool(self.is_mandatory),
            "createdAt": iso_datetime(self.created_at),
        }
        if include_relations:
            out["employee"] = self.employee.to_dict() if self.employee else None
            out["tag"] = self.tag.to_dict() if self.tag else None
        return out
