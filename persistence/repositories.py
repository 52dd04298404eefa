"""Repository layer over the REST backend.

One repository per resource. Repositories only know paths and payload shapes;
error policy (404 → None, 404/500 → []) lives in the services.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from persistence.api_client import ApiClient, as_list


@dataclass
class BaseRepo:
    api: ApiClient
    resource: str
    list_key: Optional[str] = None

    def _path(self, *parts: Any) -> str:
        suffix = "/".join(str(p) for p in parts)
        return f"{self.resource}/{suffix}" if suffix else self.resource

    def list(self, **params: Any) -> List[Dict[str, Any]]:
        return as_list(self.api.get(self._path(), params=params or None), self.list_key)

    def get(self, entity_id: str) -> Optional[Dict[str, Any]]:
        return self.api.get(self._path(entity_id))

    def create(self, body: Dict[str, Any]) -> Any:
        return self.api.post(self._path(), json_payload=body)

    def update(self, entity_id: str, updates: Dict[str, Any]) -> Any:
        return self.api.patch(self._path(entity_id), json_payload=updates)

    def delete(self, entity_id: str) -> None:
        self.api.delete(self._path(entity_id))


class UsersRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/users")

    def assign_plan(self, user_id: str, plan_id: Optional[str]) -> Any:
        return self.api.patch(self._path(user_id, "plan"), json_payload={"planId": plan_id})

    def update_profile(self, updates: Dict[str, Any]) -> Any:
        return self.api.patch(self._path("profile"), json_payload=updates)


class ExercisesRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/exercises")


class MuscleGroupsRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/muscle-groups")


class TrainingPlansRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/training-plans")

    def add_day(self, plan_id: str, body: Dict[str, Any]) -> Any:
        return self.api.post(self._path(plan_id, "days"), json_payload=body)

    def add_day_exercise(self, plan_id: str, day_id: str, body: Dict[str, Any]) -> Any:
        return self.api.post(
            self._path(plan_id, "days", day_id, "exercises"), json_payload=body
        )


class ScheduledWorkoutsRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/scheduled-workouts", list_key="workouts")

    def reschedule(self, workout_id: str, new_date: str) -> Any:
        return self.api.patch(self._path(workout_id), json_payload={"newDate": new_date})


class ConsultationsRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/consultations", list_key="consultations")

    def page(self, status: Optional[str] = None) -> Dict[str, Any]:
        """Raw ``{consultations, total}`` answer."""
        payload = self.api.get(self._path(), params={"status": status})
        if isinstance(payload, list):
            return {"consultations": payload, "total": len(payload)}
        return payload or {"consultations": [], "total": 0}

    def send_message(self, consultation_id: str, content: str) -> Any:
        return self.api.post(
            self._path(consultation_id, "messages"), json_payload={"content": content}
        )

    def resolve(self, consultation_id: str) -> Any:
        return self.api.patch(self._path(consultation_id, "resolve"))


class BodyMetricsRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/body-metrics", list_key="metrics")


class ProgressPhotosRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/body-metrics/photos", list_key="photos")


class CoachNotesRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/coach-notes")


class DashboardRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/dashboard")

    def stats(self) -> Dict[str, Any]:
        return self.api.get(self._path("stats")) or {}


class AuthRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/auth")

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self.api.post(
            self._path("login"), json_payload={"email": email, "password": password}
        ) or {}

    def register(self, body: Dict[str, Any]) -> Any:
        return self.api.post(self._path("register"), json_payload=body)

    def forgot_password(self, email: str) -> Any:
        return self.api.post(self._path("forgot-password"), json_payload={"email": email})

    def reset_password(self, token: str, new_password: str) -> Any:
        return self.api.post(
            self._path("reset-password"),
            json_payload={"token": token, "newPassword": new_password},
        )

    def change_password(self, old_password: str, new_password: str) -> Any:
        return self.api.post(
            self._path("change-password"),
            json_payload={"oldPassword": old_password, "newPassword": new_password},
        )


class AdminTrainersRepo(BaseRepo):
    def __init__(self, api: ApiClient):
        super().__init__(api, "/admin/trainers")

    def reset_password(self, trainer_id: str, new_password: str) -> Any:
        return self.api.post(
            self._path(trainer_id, "reset-password"),
            json_payload={"newPassword": new_password},
        )
