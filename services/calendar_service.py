"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Month calendar of scheduled workouts.

Grid helpers are pure so the page and tests share them; the service wraps the
scheduled-workout endpoints with the usual cache invalidation.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from config import MAX_CHIPS_PER_DAY, UPCOMING_LIMIT
from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import ScheduledWorkoutsRepo
from services.query_cache import QueryCache
from utils import time as time_utils

LOGGER = logging.getLogger(__name__)

Week = List[Optional[dt.date]]


def month_grid(year: int, month: int) -> List[Week]:
    """Weeks of seven cells starting on Sunday; cells outside the month are None."""
    first = dt.date(year, month, 1)
    cells: List[Optional[dt.date]] = [None] * time_utils.sunday_offset(first)
    cells.extend(
        dt.date(year, month, day) for day in range(1, time_utils.days_in_month(year, month) + 1)
    )
    while len(cells) % 7:
        cells.append(None)
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    return time_utils.shift_month(year, month, delta)


def month_bounds(year: int, month: int) -> Dict[str, str]:
    return {
        "startDate": time_utils.to_utc_iso(time_utils.month_start(year, month)),
        "endDate": time_utils.to_utc_iso(time_utils.month_end(year, month)),
    }


def day_key(value: Any) -> str:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value or "")[:10]


def group_by_day(workouts: Iterable[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Bucket workouts by the ``YYYY-MM-DD`` prefix of ``scheduledFor``, sorted by time."""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for workout in workouts:
        scheduled = workout.get("scheduledFor")
        if not scheduled:
            continue
        grouped.setdefault(day_key(scheduled), []).append(workout)
    for items in grouped.values():
        items.sort(key=lambda w: str(w.get("scheduledFor")))
    return grouped


def workouts_for_day(
    grouped: Dict[str, List[Dict[str, Any]]],
    day: dt.date,
    limit: int = MAX_CHIPS_PER_DAY,
) -> Tuple[List[Dict[str, Any]], int]:
    """Visible chips for a day plus how many more are hidden."""
    items = grouped.get(day_key(day), [])
    return items[:limit], max(0, len(items) - limit)


def upcoming(
    workouts: Iterable[Dict[str, Any]],
    now: Optional[dt.datetime] = None,
    limit: int = UPCOMING_LIMIT,
) -> List[Dict[str, Any]]:
    """Next workouts from now on, earliest first."""
    now = now or dt.datetime.now(dt.timezone.utc)
    if now.tzinfo is None:
        now = now.astimezone()
    future = []
    for workout in workouts:
        when = time_utils.parse_api_datetime(workout.get("scheduledFor"))
        if when is None:
            continue
        if when.tzinfo is None:
            when = when.astimezone()
        if when >= now:
            future.append((when, workout))
    future.sort(key=lambda pair: pair[0])
    return [w for _, w in future[:limit]]


def workout_status(workout: Dict[str, Any], now: Optional[dt.datetime] = None) -> str:
    if workout.get("completed"):
        return "completed"
    when = time_utils.parse_api_datetime(workout.get("scheduledFor"))
    now = now or dt.datetime.now(dt.timezone.utc)
    if when is not None:
        if when.tzinfo is None:
            when = when.astimezone()
        if now.tzinfo is None:
            now = now.astimezone()
        if when < now:
            return "missed"
    return "scheduled"


@dataclass
class CalendarService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.workouts = ScheduledWorkoutsRepo(self.api)

    def list_scheduled_workouts(self, year: int, month: int) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                return self.workouts.list(**month_bounds(year, month))
            except ApiError as exc:
                if is_missing(exc):
                    LOGGER.warning("Scheduled workouts unavailable (%s)", exc.status_code)
                    return []
                raise

        return self.cache.fetch(("scheduled-workouts", year, month), _load)

    def schedule_workout(
        self,
        client_id: str,
        training_day_id: str,
        day: dt.date,
        at: dt.time,
        notes: Optional[str] = None,
    ) -> Any:
        body = {
            "clientId": client_id,
            "trainingDayId": training_day_id,
            "scheduledFor": time_utils.to_api_datetime(day, at),
        }
        if notes and notes.strip():
            body["notes"] = notes.strip()
        created = self.workouts.create(body)
        self._invalidate()
        return created

    def reschedule_workout(self, workout_id: str, day: dt.date, at: dt.time) -> Any:
        updated = self.workouts.reschedule(workout_id, time_utils.to_api_datetime(day, at))
        self._invalidate()
        return updated

    def cancel_workout(self, workout_id: str) -> None:
        self.workouts.delete(workout_id)
        self._invalidate()

    def _invalidate(self) -> None:
        self.cache.invalidate(("scheduled-workouts",), ("dashboard",))
