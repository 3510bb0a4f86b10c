from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .assignments.service import AssignmentService
from .assignments.sql_assignment_repository import SQLAssignmentRepository
from .breaks.service import BreakService
from .breaks.sql_break_repository import SQLBreakRepository
from .common.perf import PerformanceCollector
from .core.constants import DEFAULT_BREAK_LIMIT_MINUTES, DEFAULT_TIMEZONE
from .dashboard.service import DashboardService
from .dashboard.sql_dashboard_repository import SQLDashboardRepository
from .database.connection import Database
from .employees.service import AuthService, EmployeeService
from .employees.sql_employee_repository import SQLEmployeeRepository
from .issues.service import IssueService
from .issues.sql_issue_repository import SQLIssueRepository
from .logs.service import LogService
from .logs.sql_log_repository import SQLLogRepository
from .submissions.service import SubmissionStatusService
from .submissions.sql_submission_repository import SQLSubmissionStatusRepository
from .tags.service import TagService
from .tags.sql_tag_repository import SQLTagRepository
from .warnings.service import WarningService
from .warnings.sql_warning_repository import SQLWarningRepository


@dataclass(frozen=True)
class Container:
    database: Database
    perf: PerformanceCollector

    employees_repo: SQLEmployeeRepository
    tags_repo: SQLTagRepository
    assignments_repo: SQLAssignmentRepository
    breaks_repo: SQLBreakRepository
    logs_repo: SQLLogRepository
    submissions_repo: SQLSubmissionStatusRepository
    warnings_repo: SQLWarningRepository
    issues_repo: SQLIssueRepository
    dashboard_repo: SQLDashboardRepository

    auth_service: AuthService
    employee_service: EmployeeService
    tag_service: TagService
    assignment_service: AssignmentService
    break_service: BreakService
    log_service: LogService
    submission_service: SubmissionStatusService
    warning_service: WarningService
    issue_service: IssueService
    dashboard_service: DashboardService


def build_container(
    *,
    database: Database,
    tz_name: str = DEFAULT_TIMEZONE,
    break_limit_minutes: int = DEFAULT_BREAK_LIMIT_MINUTES,
    perf: Optional[PerformanceCollector] = None,
) -> Container:
    employees_repo = SQLEmployeeRepository(database)
    tags_repo = SQLTagRepository(database)
    assignments_repo = SQLAssignmentRepository(database)
    breaks_repo = SQLBreakRepository(database)
    logs_repo = SQLLogRepository(database)
    submissions_repo = SQLSubmissionStatusRepository(database)
    warnings_repo = SQLWarningRepository(database)
    issues_repo = SQLIssueRepository(database)
    dashboard_repo = SQLDashboardRepository(database)

    return Container(
        database=database,
        perf=perf or PerformanceCollector(),
        employees_repo=employees_repo,
        tags_repo=tags_repo,
        assignments_repo=assignments_repo,
        breaks_repo=breaks_repo,
        logs_repo=logs_repo,
        submissions_repo=submissions_repo,
        warnings_repo=warnings_repo,
        issues_repo=issues_repo,
        dashboard_repo=dashboard_repo,
        auth_service=AuthService(employees_repo),
        employee_service=EmployeeService(employees_repo),
        tag_service=TagService(tags_repo),
        assignment_service=AssignmentService(assignments_repo, employees_repo, tags_repo),
        break_service=BreakService(
            breaks_repo,
            employees_repo,
            tz_name=tz_name,
            limit_minutes=break_limit_minutes,
        ),
        log_service=LogService(
            logs_repo,
            tags_repo,
            assignments_repo,
            submissions_repo,
            tz_name=tz_name,
        ),
        submission_service=SubmissionStatusService(submissions_repo),
        warning_service=WarningService(warnings_repo, employees_repo, tz_name=tz_name),
        issue_service=IssueService(issues_repo, employees_repo),
        dashboard_service=DashboardService(dashboard_repo, tz_name=tz_name),
    )
