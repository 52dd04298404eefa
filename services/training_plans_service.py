"""Training plan queries and mutations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import TrainingPlansRepo
from services.query_cache import QueryCache
from utils.coercion import safe_float_optional

LOGGER = logging.getLogger(__name__)

FALLBACK_REST_SECONDS = 60


def day_exercise_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map a quick-add form (sets, reps, rest, weight, notes) to the day-exercise body.

    The backend has no weight field; a target weight is kept in the custom
    description instead.
    """
    weight = safe_float_optional(data.get("weight"))
    payload = {
        "exerciseId": data["exerciseId"],
        "order": data["order"],
        "targetSets": data.get("targetSets"),
        "targetReps": str(data.get("targetReps", "")),
        "restSeconds": data.get("restSeconds") or FALLBACK_REST_SECONDS,
        "coachNotes": data.get("notes") or None,
        "customDescription": f"Target weight: {weight:g}kg" if weight else None,
    }
    return {k: v for k, v in payload.items() if v is not None}


def sorted_days(plan: Dict[str, Any]) -> List[Dict[str, Any]]:
    days = [
        {**day, "exercises": sorted(day.get("exercises") or [], key=lambda e: e.get("order") or 0)}
        for day in plan.get("days") or []
    ]
    return sorted(days, key=lambda d: d.get("order") or 0)


@dataclass
class TrainingPlansService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.plans = TrainingPlansRepo(self.api)

    def list_plans(self) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                return self.plans.list()
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise

        return self.cache.fetch(("training-plans",), _load)

    def get_plan(self, plan_id: str) -> Optional[Dict[str, Any]]:
        if not plan_id:
            return None

        def _load() -> Optional[Dict[str, Any]]:
            try:
                return self.plans.get(plan_id)
            except ApiError as exc:
                if exc.is_not_found:
                    return None
                raise

        return self.cache.fetch(("training-plans", str(plan_id)), _load)

    def plan_days(self, plan_id: str) -> List[Dict[str, Any]]:
        plan = self.get_plan(plan_id)
        return sorted_days(plan) if plan else []

    def create_plan(self, payload: Dict[str, Any]) -> Any:
        created = self.plans.create(payload)
        LOGGER.info("Created training plan %r with %d days", payload.get("name"), len(payload.get("days") or []))
        self.cache.invalidate(("training-plans",), ("dashboard",))
        return created

    def delete_plan(self, plan_id: str) -> None:
        self.plans.delete(plan_id)
        self.cache.invalidate(("training-plans",), ("dashboard",))

    def add_day_to_plan(self, plan_id: str, name: str, order: int) -> Any:
        created = self.plans.add_day(plan_id, {"name": name, "order": order})
        self.cache.invalidate(("training-plans", str(plan_id)))
        return created

    def add_exercise_to_day(self, plan_id: str, day_id: str, data: Dict[str, Any]) -> Any:
        created = self.plans.add_day_exercise(plan_id, day_id, day_exercise_payload(data))
        self.cache.invalidate(("training-plans", str(plan_id)))
        return created
