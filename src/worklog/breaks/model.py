from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import backref, relationship

from ..common.datetime_utils import iso_date, iso_datetime, utcnow
from ..database.base import Base
from ..employees.model import Employee


class Break(Base):
    """A break taken by an employee.

    `active_employee_id` mirrors `employee_id` while the break is open and is
    NULL once closed; the unique constraint on it allows at most one open
    break per employee, even under concurrent inserts.
    """

    __tablename__ = "breaks"
    __table_args__ = (UniqueConstraint("active_employee_id", name="uq_breaks_one_active_per_employee"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    break_date = Column(Date, nullable=False)
    break_in_time = Column(DateTime, nullable=True)
    break_out_time = Column(DateTime, nullable=True)
    break_duration = Column(Integer, nullable=False, default=0)  # minutes
    is_active = Column(Boolean, nullable=False, default=True)
    warning_sent = Column(Boolean, nullable=False, default=False)
    active_employee_id = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    employee = relationship(Employee, backref=backref("breaks", cascade="all, delete-orphan"))

    @staticmethod
    def closing_values(*, out_time, duration_minutes: int) -> dict:
        """Column values that end an open break and free its active slot."""
        return {
            "break_out_time": out_time,
            "break_duration": int(duration_minutes),
            "is_active": False,
            "active_employee_id": None,
        }

    def to_dict(self, *, include_employee: bool = False) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "breakDate": iso_date(self.break_date),
            "breakInTime": iso_datetime(self.break_in_time),
            "breakOutTime": iso_datetime(self.break_out_time),
            "breakDuration": self.break_duration or 0,
            "isActive": bool(self.is_active),
            "warningSent": bool(self.warning_sent),
            "createdAt": iso_datetime(self.created_at),
        }
        if include_employee:
            out["employee"] = self.employee.to_dict() if self.employee else None
        return out
