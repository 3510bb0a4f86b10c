from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String

from ..common.datetime_utils import iso_datetime, utcnow
from ..database.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False, unique=True)
    employee_code = Column(String(50), nullable=False, unique=True, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "employeeCode": self.employee_code,
            "createdAt": iso_datetime(self.created_at),
        }

    def __repr__(self):
        return f"<Employee id={self.id} code={self.employee_code}>"
