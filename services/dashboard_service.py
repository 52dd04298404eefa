"""Role-aware dashboard statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from persistence.api_client import ApiClient
from persistence.repositories import DashboardRepo
from services.auth_service import ROLE_CLIENT
from services.query_cache import QueryCache
from utils.coercion import coerce_int


@dataclass(frozen=True)
class TrainerStats:
    total_clients: int = 0
    total_exercises: int = 0
    total_plans: int = 0
    sessions_today: int = 0


@dataclass(frozen=True)
class ClientStats:
    completed_workouts_this_month: int = 0
    active_plan: Optional[Dict[str, Any]] = None
    next_session: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class Dashboard:
    role: str
    stats: Union[TrainerStats, ClientStats]


def parse_dashboard(payload: Dict[str, Any]) -> Dashboard:
    role = str(payload.get("role") or "").upper()
    data = payload.get("data") or {}
    if role == ROLE_CLIENT:
        return Dashboard(
            role=role,
            stats=ClientStats(
                completed_workouts_this_month=coerce_int(data.get("completedWorkoutsThisMonth")),
                active_plan=data.get("activePlan") or None,
                next_session=data.get("nextSession") or None,
            ),
        )
    return Dashboard(
        role=role or "TRAINER",
        stats=TrainerStats(
            total_clients=coerce_int(data.get("totalClients")),
            total_exercises=coerce_int(data.get("totalExercises")),
            total_plans=coerce_int(data.get("totalPlans")),
            sessions_today=coerce_int(data.get("sessionsToday")),
        ),
    )


@dataclass
class DashboardService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.dashboard = DashboardRepo(self.api)

    def get_dashboard(self) -> Dashboard:
        return self.cache.fetch(("dashboard",), lambda: parse_dashboard(self.dashboard.stats()))


def active_plan_ref(dashboard: Optional[Dashboard], user: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """The signed-in client's plan, from the dashboard or else the user record."""
    if dashboard is not None and isinstance(dashboard.stats, ClientStats) and dashboard.stats.active_plan:
        plan = dashboard.stats.active_plan
        if plan.get("id"):
            return plan
    user = user or {}
    plan = user.get("activePlan") or {}
    if plan.get("id"):
        return plan
    if user.get("activePlanId"):
        return {"id": user["activePlanId"]}
    return None
