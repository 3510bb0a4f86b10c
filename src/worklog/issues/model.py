from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import backref, relationship

from ..common.datetime_utils import iso_datetime, utcnow
from ..core.enums import IssueStatus
from ..database.base import Base
from ..employees.model import Employee


class Issue(Base):
    __tablename__ = "issues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    issue_category = Column(String(50), nullable=False)
    issue_description = Column(Text, nullable=False)
    issue_status = Column(String(20), nullable=False, default=IssueStatus.PENDING.value, index=True)
    raised_date = Column(DateTime, nullable=False, default=utcnow)
    resolved_date = Column(DateTime, nullable=True)
    admin_response = Column(Text, nullable=True)

    employee = relationship(Employee, backref=backref("issues", cascade="all, delete-orphan"))

    @property
    def days_elapsed(self) -> int:
        if not self.raised_date:
            return 0
        end = self.resolved_date or utcnow()
        return max(0, (end - self.raised_date).days)

    def to_dict(self, *, include_employee: bool = False) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "issueCategory": self.issue_category,
            "issueDescription": self.issue_description,
            "issueStatus": self.issue_status,
            "raisedDate": iso_datetime(self.raised_date),
            "resolvedDate": iso_datetime(self.resolved_date),
            "adminResponse": self.admin_response,
            "daysElapsed": self.days_elapsed,
        }
        if include_employee:
            out["employee"] = self.employee.to_dict() if self.employee else None
        return out
