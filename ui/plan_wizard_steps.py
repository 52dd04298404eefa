"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Streamlit renderers for the four plan wizard steps.

The wizard object in session state is the single source of truth; widgets
write back through on_change callbacks so a rerun never loses edits.
"""

from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

from persistence.api_client import ApiError
from services.exercises_service import ExercisesService, filter_exercises
from services.plan_wizard import PlanWizard, WizardDay, WizardExercise, WizardStep
from services.presenters import build_wizard_progress
from services.training_plans_service import TrainingPlansService
from utils.formatting import fmt_rest, fmt_sets_reps
from utils.i18n import t
from utils.ui_helpers import report_error, set_flash

STATE_ICONS = {"done": "✅", "current": "🔵", "upcoming": "⚪"}


def render_progress(wizard: PlanWizard) -> None:
    cols = st.columns(len(WizardStep))
    for col, view in zip(cols, build_wizard_progress(wizard.step)):
        with col:
            label = f"{STATE_ICONS[view.state]} {view.index + 1}. {view.label}"
            if view.state == "done":
                if st.button(label, key=f"wizard-goto-{view.index}", use_container_width=True):
                    wizard.go_to(view.index)
                    st.rerun()
            else:
                st.markdown(f"**{label}**" if view.state == "current" else label)


def _nav(wizard: PlanWizard, *, back: bool = True, next_label: str = "wizard.next") -> None:
    col_back, _, col_next = st.columns([1, 3, 1])
    if back and col_back.button(t("wizard.back"), key=f"wizard-back-{int(wizard.step)}"):
        wizard.prev_step()
        st.rerun()
    if col_next.button(
        t(next_label),
        key=f"wizard-next-{int(wizard.step)}",
        type="primary",
        disabled=not wizard.is_step_valid(),
    ):
        if wizard.next_step():
            st.rerun()


# --- Step 1 ------------------------------------------------------------------
def render_info_step(wizard: PlanWizard) -> None:
    st.subheader(t("wizard.info.title"))

    def _sync_info() -> None:
        wizard.set_info(
            name=st.session_state.get("wizard_name", ""),
            description=st.session_state.get("wizard_description", ""),
        )

    st.text_input(t("fields.name"), value=wizard.name, key="wizard_name", on_change=_sync_info)
    st.text_area(
        t("fields.description"), value=wizard.description, key="wizard_description", on_change=_sync_info
    )
    if not wizard.is_step_valid():
        st.caption(t("wizard.info.name_hint"))
    _nav(wizard, back=False)


# --- Step 2 ------------------------------------------------------------------
def _render_day_row(wizard: PlanWizard, day: WizardDay, index: int) -> None:
    key = f"day-name-{day.id}"

    def _rename() -> None:
        wizard.rename_day(day.id, st.session_state.get(key) or day.name)

    cols = st.columns([6, 1, 1, 1])
    cols[0].text_input(
        t("wizard.structure.day_label", order=day.order), value=day.name, key=key, on_change=_rename
    )
    if cols[1].button("↑", key=f"day-up-{day.id}", disabled=index == 0):
        wizard.move_day(day.id, -1)
        st.rerun()
    if cols[2].button("↓", key=f"day-down-{day.id}", disabled=index == len(wizard.days) - 1):
        wizard.move_day(day.id, 1)
        st.rerun()
    if cols[3].button("🗑️", key=f"day-remove-{day.id}"):
        wizard.remove_day(day.id)
        st.rerun()


def render_structure_step(wizard: PlanWizard) -> None:
    st.subheader(t("wizard.structure.title"))
    if not wizard.days:
        st.info(t("wizard.structure.empty"))
    for index, day in enumerate(wizard.days):
        _render_day_row(wizard, day, index)
    if st.button(t("wizard.structure.add_day"), key="wizard-add-day"):
        wizard.add_day()
        st.rerun()
    _nav(wizard)


# --- Step 3 ------------------------------------------------------------------
def _render_exercise_config(wizard: PlanWizard, day: WizardDay, item: WizardExercise, index: int) -> None:
    prefix = f"{day.id}-{item.id}"

    def _update(field: str, widget_key: str) -> None:
        wizard.update_exercise(day.id, item.id, {field: st.session_state.get(widget_key)})

    with st.container(border=True):
        head = st.columns([6, 1, 1, 1])
        head[0].markdown(f"**{item.order}. {item.name}**")
        if head[1].button("↑", key=f"ex-up-{prefix}", disabled=index == 0):
            wizard.move_exercise(day.id, item.id, -1)
            st.rerun()
        if head[2].button("↓", key=f"ex-down-{prefix}", disabled=index == len(day.exercises) - 1):
            wizard.move_exercise(day.id, item.id, 1)
            st.rerun()
        if head[3].button("🗑️", key=f"ex-remove-{prefix}"):
            wizard.remove_exercise(day.id, item.id)
            st.rerun()

        cols = st.columns(4)
        cols[0].number_input(
            t("wizard.exercises.sets"), min_value=1, max_value=20, value=int(item.target_sets or 1),
            key=f"sets-{prefix}", on_change=_update, args=("targetSets", f"sets-{prefix}"),
        )
        cols[1].text_input(
            t("wizard.exercises.reps"), value=item.target_reps,
            key=f"reps-{prefix}", on_change=_update, args=("targetReps", f"reps-{prefix}"),
        )
        cols[2].number_input(
            "RIR", min_value=0, max_value=10, value=int(item.target_rir or 0),
            key=f"rir-{prefix}", on_change=_update, args=("targetRir", f"rir-{prefix}"),
        )
        cols[3].number_input(
            t("wizard.exercises.rest"), min_value=0, max_value=900, step=15, value=int(item.rest_seconds or 0),
            key=f"rest-{prefix}", on_change=_update, args=("restSeconds", f"rest-{prefix}"),
        )
        with st.expander(t("wizard.exercises.custom"), expanded=False):
            for field, attr, label in (
                ("customDescription", "custom_description", "fields.description"),
                ("customVideoUrl", "custom_video_url", "fields.defaultVideoUrl"),
                ("customImageUrl", "custom_image_url", "fields.defaultImageUrl"),
                ("coachNotes", "coach_notes", "fields.coachNotes"),
            ):
                widget_key = f"{field}-{prefix}"
                st.text_input(
                    t(label), value=getattr(item, attr) or "",
                    key=widget_key, on_change=_update, args=(field, widget_key),
                )


def _render_picker(wizard: PlanWizard, day: WizardDay, library: List[Dict[str, Any]]) -> None:
    term = st.text_input(t("wizard.exercises.search"), key=f"search-{day.id}")
    matches = filter_exercises(library, term)
    if not matches:
        st.caption(t("exercises.no_results"))
        return
    labels = {str(ex.get("id")): f"{ex.get('name')} · {t('exercises.muscle_groups.' + str(ex.get('muscleGroup')))}" for ex in matches}
    picked = st.selectbox(
        t("wizard.exercises.pick"),
        list(labels),
        format_func=lambda eid: labels.get(eid, eid),
        key=f"pick-{day.id}",
    )
    if st.button(t("wizard.exercises.add_exercise_button"), key=f"add-ex-{day.id}"):
        exercise = next(ex for ex in matches if str(ex.get("id")) == picked)
        wizard.add_exercise(day.id, exercise)
        st.rerun()


def render_exercises_step(wizard: PlanWizard, exercises: ExercisesService) -> None:
    st.subheader(t("wizard.exercises.title"))
    try:
        library = exercises.list_exercises()
    except ApiError as exc:
        report_error(exc)
        library = []
    for day in wizard.days:
        with st.expander(f"{day.name} ({len(day.exercises)})", expanded=True):
            if not day.exercises:
                st.caption(t("wizard.exercises.empty"))
            for index, item in enumerate(day.exercises):
                _render_exercise_config(wizard, day, item, index)
            _render_picker(wizard, day, library)
    _nav(wizard, next_label="wizard.review_button")


# --- Step 4 ------------------------------------------------------------------
def render_review_step(wizard: PlanWizard, plans: TrainingPlansService) -> bool:
    """Render the summary; returns True once the plan was created."""
    st.subheader(t("wizard.review.title"))
    summary = wizard.summary()
    st.markdown(f"### {wizard.name.strip()}")
    if wizard.description.strip():
        st.write(wizard.description.strip())
    cols = st.columns(2)
    cols[0].metric(t("wizard.review.total_days"), summary["days"])
    cols[1].metric(t("wizard.review.total_exercises"), summary["exercises"])

    for day in wizard.days:
        with st.container(border=True):
            st.markdown(f"**{day.order}. {day.name}**")
            if not day.exercises:
                st.caption(t("wizard.exercises.empty"))
            for item in day.exercises:
                rest = fmt_rest(item.rest_seconds) if item.rest_seconds else "-"
                st.write(
                    f"{item.order}. {item.name} · {fmt_sets_reps(item.target_sets, item.target_reps)}"
                    f" · RIR {item.target_rir if item.target_rir is not None else '-'} · {rest}"
                )

    col_back, _, col_create = st.columns([1, 3, 1])
    if col_back.button(t("wizard.back"), key="wizard-back-review"):
        wizard.prev_step()
        st.rerun()
    if col_create.button(t("wizard.review.create"), type="primary", key="wizard-create"):
        try:
            plans.create_plan(wizard.build_payload())
        except ApiError as exc:
            st.error(exc.detail or t("wizard.review.error"))
            return False
        set_flash("success", "wizard.review.success", name=wizard.name.strip())
        return True
    return False
