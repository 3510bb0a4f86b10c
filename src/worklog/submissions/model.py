from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from ..database.base import Base
from ..common.datetime_utils import iso_date, iso_datetime
from ..employees.model import Employee


class SubmissionStatus(Base):
    __tablename__ = "submission_statuses"
    __table_args__ = (UniqueConstraint("employee_id", "submission_date", name="uq_submission_employee_date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    submission_date = Column(Date, nullable=False, index=True)
    submission_time = Column(DateTime, nullable=False)
    is_locked = Column(Boolean, nullable=False, default=False)
    total_minutes = Column(Integer, nullable=False, default=0)
    status_message = Column(String(255), nullable=True)

    employee = relationship(Employee, backref=backref("submission_statuses", cascade="all, delete-orphan"))

    def to_dict(self, *, include_employee: bool = False) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "submissionDate": iso_date(self.submission_date),
            "submissionTime": iso_datetime(self.submission_time),
            "isLocked": bool(self.is_locked),
            "totalMinutes": self.total_minutes,
            "statusMessage": self.status_message,
        }
        if include_employee:
            out["employee"] = self.employee.to_dict() if self.employee else None
        return out
