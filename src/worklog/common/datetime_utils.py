from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE


def now_local(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Current wall-clock time in the configured timezone, as a naive datetime.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)


def utcnow() -> datetime:
    """Naive UTC timestamp used for createdAt columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today_local(tz_name: str = DEFAULT_TIMEZONE) -> date:
    return now_local(tz_name).date()


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes elapsed from start to end (floored, never negative)."""
    return max(0, int((end - start).total_seconds() // 60))


def iso_date(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def iso_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
