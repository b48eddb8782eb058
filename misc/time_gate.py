from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from config.defaults import WEEKDAY_REPLY_HOURS
from config.defaults import WEEKEND_REPLY_HOURS


def reply_hours_for(now: datetime) -> tuple[int, int]:
    # datetime.weekday(): Monday=0 ... Saturday=5, Sunday=6
    if now.weekday() >= 5:
        return WEEKEND_REPLY_HOURS
    return WEEKDAY_REPLY_HOURS


def is_allowed_time(now: datetime) -> bool:
    start, end = reply_hours_for(now)
    return start <= now.hour < end


def now_local(timezone_name: str | None = None) -> datetime:
    if timezone_name:
        return datetime.now(ZoneInfo(timezone_name))
    return datetime.now().astimezone()
