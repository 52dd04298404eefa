"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Draft state for the four-step training plan wizard.

The draft (plan info, ordered days, ordered exercises per day) lives in the
page's session state until it is submitted as a single nested POST or thrown
away. Steps only advance one at a time and only when the current step is
valid; going back is always allowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional

from config import (
    DEFAULT_REST_SECONDS,
    DEFAULT_TARGET_REPS,
    DEFAULT_TARGET_RIR,
    DEFAULT_TARGET_SETS,
)
from utils.ids import draft_id

MIN_NAME_LENGTH = 4


class WizardStep(IntEnum):
    INFO = 0
    STRUCTURE = 1
    EXERCISES = 2
    REVIEW = 3


@dataclass
class WizardExercise:
    exercise_id: str
    name: str
    order: int
    target_sets: int = DEFAULT_TARGET_SETS
    target_reps: str = DEFAULT_TARGET_REPS
    target_rir: Optional[int] = DEFAULT_TARGET_RIR
    rest_seconds: Optional[int] = DEFAULT_REST_SECONDS
    custom_description: Optional[str] = None
    custom_video_url: Optional[str] = None
    custom_image_url: Optional[str] = None
    coach_notes: Optional[str] = None
    muscle_group: Optional[str] = None
    id: str = field(default_factory=lambda: draft_id("ex"))

    def to_payload(self) -> Dict[str, Any]:
        return {
            "exerciseId": self.exercise_id,
            "order": self.order,
            "targetSets": self.target_sets,
            "targetReps": self.target_reps,
            "targetRir": self.target_rir,
            "restSeconds": self.rest_seconds,
            "customDescription": self.custom_description,
            "customVideoUrl": self.custom_video_url,
            "customImageUrl": self.custom_image_url,
            "coachNotes": self.coach_notes,
        }


@dataclass
class WizardDay:
    name: str
    order: int
    exercises: List[WizardExercise] = field(default_factory=list)
    id: str = field(default_factory=lambda: draft_id("day"))


# Editable draft fields, keyed by their API name
_FIELD_ATTRS = {
    "targetSets": "target_sets",
    "targetReps": "target_reps",
    "targetRir": "target_rir",
    "restSeconds": "rest_seconds",
    "customDescription": "custom_description",
    "customVideoUrl": "custom_video_url",
    "customImageUrl": "custom_image_url",
    "coachNotes": "coach_notes",
}


def _renumber(items: List[Any]) -> None:
    for index, item in enumerate(items, start=1):
        item.order = index


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


@dataclass
class PlanWizard:
    name: str = ""
    description: str = ""
    days: List[WizardDay] = field(default_factory=list)
    step: WizardStep = WizardStep.INFO

    # --- Sequencing -------------------------------------------------
    def is_step_valid(self, step: Optional[WizardStep] = None) -> bool:
        step = self.step if step is None else WizardStep(step)
        if step == WizardStep.INFO:
            return len(self.name.strip()) >= MIN_NAME_LENGTH
        if step == WizardStep.STRUCTURE:
            return len(self.days) > 0
        return True

    def next_step(self) -> bool:
        """Advance one step; returns False (and stays) when blocked."""
        if self.step == WizardStep.REVIEW or not self.is_step_valid():
            return False
        self.step = WizardStep(self.step + 1)
        return True

    def prev_step(self) -> bool:
        if self.step == WizardStep.INFO:
            return False
        self.step = WizardStep(self.step - 1)
        return True

    def go_to(self, step: int) -> bool:
        """Jump back to an already-visited step; forward jumps are refused."""
        target = WizardStep(step)
        if target > self.step:
            return False
        self.step = target
        return True

    # --- Plan info --------------------------------------------------
    def set_info(self, name: Optional[str] = None, description: Optional[str] = None) -> None:
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description

    # --- Days -------------------------------------------------------
    def add_day(self) -> WizardDay:
        day = WizardDay(name=f"Day {len(self.days) + 1}", order=len(self.days) + 1)
        self.days.append(day)
        return day

    def find_day(self, day_id: str) -> WizardDay:
        for day in self.days:
            if day.id == day_id:
                return day
        raise KeyError(f"Unknown day {day_id}")

    def remove_day(self, day_id: str) -> None:
        self.days = [d for d in self.days if d.id != day_id]
        _renumber(self.days)

    def rename_day(self, day_id: str, name: str) -> None:
        self.find_day(day_id).name = name

    def move_day(self, day_id: str, offset: int) -> None:
        day = self.find_day(day_id)
        index = self.days.index(day)
        target = max(0, min(len(self.days) - 1, index + offset))
        self.days.insert(target, self.days.pop(index))
        _renumber(self.days)

    # --- Exercises --------------------------------------------------
    def add_exercise(self, day_id: str, exercise: Dict[str, Any]) -> WizardExercise:
        day = self.find_day(day_id)
        item = WizardExercise(
            exercise_id=str(exercise["id"]),
            name=str(exercise.get("name") or ""),
            muscle_group=exercise.get("muscleGroup"),
            order=len(day.exercises) + 1,
        )
        day.exercises.append(item)
        return item

    def _find_exercise(self, day: WizardDay, item_id: str) -> WizardExercise:
        for item in day.exercises:
            if item.id == item_id:
                return item
        raise KeyError(f"Unknown exercise {item_id} in {day.id}")

    def remove_exercise(self, day_id: str, item_id: str) -> None:
        day = self.find_day(day_id)
        day.exercises = [e for e in day.exercises if e.id != item_id]
        _renumber(day.exercises)

    def update_exercise(self, day_id: str, item_id: str, config: Dict[str, Any]) -> WizardExercise:
        item = self._find_exercise(self.find_day(day_id), item_id)
        for key, value in config.items():
            attr = _FIELD_ATTRS.get(key)
            if attr is None:
                raise KeyError(f"Field {key} cannot be edited")
            if key == "targetReps":
                value = str(value).strip() if value is not None else DEFAULT_TARGET_REPS
            else:
                value = _blank_to_none(value)
            setattr(item, attr, value)
        return item

    def move_exercise(self, day_id: str, item_id: str, offset: int) -> None:
        day = self.find_day(day_id)
        item = self._find_exercise(day, item_id)
        index = day.exercises.index(item)
        target = max(0, min(len(day.exercises) - 1, index + offset))
        day.exercises.insert(target, day.exercises.pop(index))
        _renumber(day.exercises)

    # --- Review / submit --------------------------------------------
    def summary(self) -> Dict[str, int]:
        return {
            "days": len(self.days),
            "exercises": sum(len(d.exercises) for d in self.days),
        }

    def build_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name.strip(),
            "description": self.description.strip(),
            "days": [
                {
                    "name": day.name,
                    "order": day.order,
                    "exercises": [ex.to_payload() for ex in day.exercises],
                }
                for day in self.days
            ],
        }

    def reset(self) -> None:
        self.name = ""
        self.description = ""
        self.days = []
        self.step = WizardStep.INFO
