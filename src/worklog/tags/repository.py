from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Tag


class TagRepository(Protocol):
    def list_all(self) -> Sequence[Tag]:
        raise NotImplementedError

    def get_by_id(self, tag_id: int) -> Optional[Tag]:
        raise NotImplementedError

    def get_by_name(self, tag_name: str, *, exclude_id: Optional[int] = None) -> Optional[Tag]:
        raise NotImplementedError

    def create(self, *, tag_name: str, time_minutes: int) -> Tag:
        raise NotImplementedError

    def update(self, tag_id: int, changes: dict) -> Optional[Tag]:
        raise NotImplementedError

    def delete_by_id(self, tag_id: int) -> bool:
        raise NotImplementedError
