"""Date helpers for month grids and API datetime strings."""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Optional, Tuple


def today_local() -> dt.date:
    return dt.date.today()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_start(year: int, month: int) -> dt.datetime:
    return dt.datetime(year, month, 1)


def month_end(year: int, month: int) -> dt.datetime:
    last_day = days_in_month(year, month)
    return dt.datetime(year, month, last_day, 23, 59, 59)


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def sunday_offset(d: dt.date) -> int:
    # Sunday is 0, Saturday is 6
    return d.isoweekday() % 7


def to_utc_iso(value: dt.datetime) -> str:
    """ISO-8601 in UTC with a ``Z`` suffix; naive values are taken as local time."""
    utc = value.astimezone(dt.timezone.utc).replace(microsecond=0)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def to_api_datetime(d: dt.date, t: dt.time) -> str:
    """Combine a local date and time into the ISO string the API stores."""
    return to_utc_iso(dt.datetime.combine(d, t.replace(second=0, microsecond=0)))


def parse_api_datetime(value: Optional[str]) -> Optional[dt.datetime]:
    if not value:
        return None
    try:
        return dt.datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def to_local(value: Optional[dt.datetime]) -> Optional[dt.datetime]:
    """Aware datetimes are shown in the local zone; naive ones are already local."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_time(value: str, default: dt.time = dt.time(9, 0)) -> dt.time:
    try:
        hours, minutes = str(value).split(":")[:2]
        return dt.time(int(hours), int(minutes))
    except (ValueError, TypeError):
        return default
