from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Issue


class IssueRepository(Protocol):
    def list_for(self, *, employee_id: Optional[int] = None, status: Optional[str] = None) -> Sequence[Issue]:
        raise NotImplementedError

    def create(self, *, employee_id: int, issue_category: str, issue_description: str) -> Issue:
        raise NotImplementedError

    def update(self, issue_id: int, changes: dict) -> Optional[Issue]:
        raise NotImplementedError

    def get_by_id(self, issue_id: int) -> Optional[Issue]:
        raise NotImplementedError
