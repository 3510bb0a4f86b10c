from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import backref, relationship

from ..common.datetime_utils import iso_date, iso_datetime, utcnow
from ..database.base import Base
from ..employees.model import Employee


class EmployeeWarning(Base):
    __tablename__ = "warnings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    warning_date = Column(Date, nullable=False)
    warning_message = Column(String(500), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    employee = relationship(Employee, backref=backref("warnings", cascade="all, delete-orphan"))

    def to_dict(self, *, include_employee: bool = False) -> dict:
        out = {
            "id": self.id,
            "employeeId": self.employee_id,
            "warningDate": iso_date(self.warning_date),
            "warningMessage": self.warning_message,
            "isActive": bool(self.is_active),
            "createdAt": iso_datetime(self.created_at),
        }
        if include_employee:
            out["employee"] = self.employee.to_dict() if self.employee else None
        return out
