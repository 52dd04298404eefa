"""Create/edit form for library exercises."""

from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from config import MUSCLE_GROUPS
from persistence.api_client import ApiError
from services.exercises_service import ExercisesService
from services.forms import validate_exercise
from services.presenters import muscle_group_label
from utils.i18n import t
from utils.ui_helpers import report_error, set_flash, show_field_errors


def render_exercise_form(service: ExercisesService, initial: Optional[Dict[str, Any]] = None) -> bool:
    """Render the form; returns True once the exercise was saved."""
    initial = initial or {}
    exercise_id = initial.get("id")
    options = service.muscle_group_names(MUSCLE_GROUPS)
    current_group = initial.get("muscleGroup") or options[0]
    groups = options if current_group in options else [current_group] + options
    with st.form(f"exercise_form_{exercise_id or 'new'}", clear_on_submit=not exercise_id):
        name = st.text_input(t("fields.name"), value=initial.get("name") or "")
        muscle_group = st.selectbox(
            t("fields.muscleGroup"),
            groups,
            index=groups.index(current_group),
            format_func=muscle_group_label,
        )
        description = st.text_area(t("fields.description"), value=initial.get("description") or "")
        video = st.text_input(t("fields.defaultVideoUrl"), value=initial.get("defaultVideoUrl") or "")
        image = st.text_input(t("fields.defaultImageUrl"), value=initial.get("defaultImageUrl") or "")
        submitted = st.form_submit_button(t("common.save") if exercise_id else t("exercises.create"))
    if not submitted:
        return False
    cleaned, errors = validate_exercise(
        {
            "name": name,
            "muscleGroup": muscle_group,
            "description": description,
            "defaultVideoUrl": video,
            "defaultImageUrl": image,
        }
    )
    if errors:
        show_field_errors(errors)
        return False
    try:
        if exercise_id:
            service.update_exercise(str(exercise_id), cleaned)
        else:
            service.create_exercise(cleaned)
    except ApiError as exc:
        report_error(exc, "exercises.error")
        return False
    set_flash("success", "exercises.updated" if exercise_id else "exercises.created", name=cleaned["name"])
    return True
