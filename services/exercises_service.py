"""Exercise library: queries, mutations and client-side search."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from persistence.api_client import ApiClient, ApiError, is_missing
from persistence.repositories import ExercisesRepo, MuscleGroupsRepo
from services.query_cache import QueryCache

UNGROUPED = ""


def filter_exercises(exercises: Iterable[Dict[str, Any]], term: str) -> List[Dict[str, Any]]:
    """Case-insensitive match on name or muscle group; a blank term keeps everything."""
    needle = (term or "").strip().lower()
    items = list(exercises)
    if not needle:
        return items
    return [
        ex
        for ex in items
        if needle in str(ex.get("name") or "").lower()
        or needle in str(ex.get("muscleGroup") or "").lower()
    ]


def group_by_muscle(exercises: Iterable[Dict[str, Any]]) -> "OrderedDict[str, List[Dict[str, Any]]]":
    """Group by muscle group in first-seen order; exercises without one go under UNGROUPED."""
    groups: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
    for ex in exercises:
        key = str(ex.get("muscleGroup") or UNGROUPED)
        groups.setdefault(key, []).append(ex)
    return groups


@dataclass
class ExercisesService:
    api: ApiClient
    cache: QueryCache

    def __post_init__(self) -> None:
        self.exercises = ExercisesRepo(self.api)
        self.muscle_groups = MuscleGroupsRepo(self.api)

    def list_exercises(self) -> List[Dict[str, Any]]:
        return self.cache.fetch(("exercises",), self.exercises.list)

    def get_exercise(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        def _load() -> Optional[Dict[str, Any]]:
            try:
                return self.exercises.get(exercise_id)
            except ApiError as exc:
                if exc.is_not_found:
                    return None
                raise

        return self.cache.fetch(("exercises", str(exercise_id)), _load)

    def list_muscle_groups(self) -> List[Dict[str, Any]]:
        def _load() -> List[Dict[str, Any]]:
            try:
                return self.muscle_groups.list()
            except ApiError as exc:
                if is_missing(exc):
                    return []
                raise

        return self.cache.fetch(("muscle-groups",), _load)

    def muscle_group_names(self, fallback: Iterable[str] = ()) -> List[str]:
        """Names offered by the backend, or ``fallback`` when it has none."""
        names = [str(g["name"]) for g in self.list_muscle_groups() if g.get("name")]
        return names or list(fallback)

    def create_exercise(self, data: Dict[str, Any]) -> Any:
        created = self.exercises.create(data)
        self.cache.invalidate(("exercises",), ("dashboard",))
        return created

    def update_exercise(self, exercise_id: str, data: Dict[str, Any]) -> Any:
        updated = self.exercises.update(exercise_id, data)
        self.cache.invalidate(("exercises",), ("dashboard",))
        return updated

    def delete_exercise(self, exercise_id: str) -> None:
        self.exercises.delete(exercise_id)
        self.cache.invalidate(("exercises",), ("dashboard",))

    def search(self, term: str) -> "OrderedDict[str, List[Dict[str, Any]]]":
        return group_by_muscle(filter_exercises(self.list_exercises(), term))
