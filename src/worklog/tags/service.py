from __future__ import annotations

from ..core.exceptions import BusinessRuleError, NotFoundError
from .model import Tag
from .repository import TagRepository
from .schemas import TagCreate, TagUpdate

DUPLICATE_TAG = "Tag with this name already exists"


class TagService:
    def __init__(self, tags: TagRepository):
        self._tags = tags

    def list_all(self):
        return self._tags.list_all()

    def get(self, tag_id: int) -> Tag:
        tag = self._tags.get_by_id(tag_id)
        if not tag:
            raise NotFoundError("Tag not found")
        return tag

    def create(self, data: TagCreate) -> Tag:
        if self._tags.get_by_name(data.tag_name):
            raise BusinessRuleError(DUPLICATE_TAG)
        return self._tags.create(tag_name=data.tag_name, time_minutes=data.time_minutes)

    def update(self, tag_id: int, data: TagUpdate) -> Tag:
        self.get(tag_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("tag_name") and self._tags.get_by_name(changes["tag_name"], exclude_id=tag_id):
            raise BusinessRuleError(DUPLICATE_TAG)

        tag = self._tags.update(tag_id, changes)
        if not tag:
            raise NotFoundError("Tag not found")
        return tag

    def delete(self, tag_id: int) -> None:
        if not self._tags.delete_by_id(tag_id):
            raise NotFoundError("Tag not found")
