from __future__ import annotations

import logging

import mysql.connector
from sqlalchemy import inspect, select
from sqlalchemy.engine import make_url

from .base import Base
from .connection import Database
from .session import db_session

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = (
    ("John Doe", "john.doe@company.com", "EMP001"),
    ("Jane Smith", "jane.smith@company.com", "EMP002"),
    ("Mike Johnson", "mike.johnson@company.com", "EMP003"),
)

DEMO_TAGS = (
    ("Data Entry", 5),
    ("Customer Calls", 15),
    ("Email Processing", 3),
    ("Document Review", 10),
    ("Meeting", 30),
)

# (employee code, tag name, mandatory)
DEMO_ASSIGNMENTS = (
    ("EMP001", "Data Entry", True),
    ("EMP001", "Email Processing", False),
    ("EMP002", "Customer Calls", True),
    ("EMP002", "Meeting", False),
    ("EMP003", "Document Review", True),
    ("EMP003", "Data Entry", False),
)


def _import_models() -> None:
    # Registers every table on Base.metadata.
    from ..assignments import model as _assignments  # noqa: F401
    from ..breaks import model as _breaks  # noqa: F401
    from ..employees import model as _employees  # noqa: F401
    from ..issues import model as _issues  # noqa: F401
    from ..logs import model as _logs  # noqa: F401
    from ..submissions import model as _submissions  # noqa: F401
    from ..tags import model as _tags  # noqa: F401
    from ..warnings import model as _warnings  # noqa: F401


def ensure_database_exists(database_url: str) -> None:
    """CREATE DATABASE IF NOT EXISTS for MySQL URLs; other backends are left alone."""
    url = make_url(database_url)
    if not url.get_backend_name().startswith("mysql") or not url.database:
        return

    conn = mysql.connector.connect(
        host=url.host or "localhost",
        port=int(url.port or 3306),
        user=url.username or "root",
        password=url.password or "",
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{url.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def create_schema(database: Database) -> None:
    _import_models()
    Base.metadata.create_all(database.engine)
    logger.info("Schema ready (tables=%s)", len(list_tables(database)))


def list_tables(database: Database) -> list[str]:
    return sorted(inspect(database.engine).get_table_names())


def seed_demo_data(database: Database) -> None:
    """Insert demo employees, tags and assignments; rows that already exist are kept."""
    from ..assignments.model import Assignment
    from ..employees.model import Employee
    from ..tags.model import Tag

    with db_session(database) as session:
        employees = {}
        for name, email, code in DEMO_EMPLOYEES:
            employee = session.scalars(select(Employee).where(Employee.employee_code == code)).first()
            if employee is None:
                employee = Employee(name=name, email=email, employee_code=code)
                session.add(employee)
            employees[code] = employee

        tags = {}
        for tag_name, minutes in DEMO_TAGS:
            tag = session.scalars(select(Tag).where(Tag.tag_name == tag_name)).first()
            if tag is None:
                tag = Tag(tag_name=tag_name, time_minutes=minutes)
                session.add(tag)
            tags[tag_name] = tag

        session.flush()

        for code, tag_name, mandatory in DEMO_ASSIGNMENTS:
            employee, tag = employees[code], tags[tag_name]
            existing = session.scalars(
                select(Assignment).where(Assignment.employee_id == employee.id, Assignment.tag_id == tag.id)
            ).first()
            if existing is None:
                session.add(Assignment(employee_id=employee.id, tag_id=tag.id, is_mandatory=mandatory))

    logger.info("Demo data ready")
