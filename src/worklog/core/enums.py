from __future__ import annotations

from enum import Enum


class IssueStatus(str, Enum):
    """Lifecycle of a reported issue."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class IssueCategory(str, Enum):
    EQUIPMENT = "Equipment"
    CLEANLINESS = "Cleanliness"
    DOCUMENTS = "Documents"
    STATIONERY = "Stationery"
    IT_SUPPORT = "IT Support"
    OTHER = "Other"
