from __future__ import annotations

from typing import Any, Dict, List

import streamlit as st

from config import DEFAULT_REST_SECONDS, DEFAULT_TARGET_REPS, DEFAULT_TARGET_SETS
from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.exercises_service import ExercisesService
from services.presenters import build_exercise_line, build_plan_card
from services.training_plans_service import TrainingPlansService, sorted_days
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, set_flash, show_flash, sidebar_account

SELECTED_PLAN = "selected_plan_id"
CONFIRM_DELETE = "plan_confirm_delete"


def _quick_add_exercise(plan_id: str, day: Dict[str, Any], library: List[Dict[str, Any]]) -> None:
    day_id = str(day.get("id"))
    if not library:
        st.caption(t("exercises.empty"))
        return
    labels = {str(ex.get("id")): str(ex.get("name") or "") for ex in library}
    with st.form(f"quick_add_{day_id}", clear_on_submit=True):
        exercise_id = st.selectbox(
            t("wizard.exercises.pick"), list(labels), format_func=lambda eid: labels.get(eid, eid)
        )
        cols = st.columns(4)
        sets = cols[0].number_input(t("wizard.exercises.sets"), min_value=1, max_value=20, value=DEFAULT_TARGET_SETS)
        reps = cols[1].text_input(t("wizard.exercises.reps"), value=DEFAULT_TARGET_REPS)
        rest = cols[2].number_input(
            t("wizard.exercises.rest"), min_value=0, max_value=900, step=15, value=DEFAULT_REST_SECONDS
        )
        weight = cols[3].number_input(t("plans.weight"), min_value=0.0, step=2.5, value=0.0)
        notes = st.text_input(t("fields.coachNotes"))
        submitted = st.form_submit_button(t("wizard.exercises.add_exercise_button"))
    if not submitted:
        return
    try:
        plans_service.add_exercise_to_day(
            plan_id,
            day_id,
            {
                "exerciseId": exercise_id,
                "order": len(day.get("exercises") or []) + 1,
                "targetSets": int(sets),
                "targetReps": reps,
                "restSeconds": int(rest),
                "weight": weight,
                "notes": notes.strip(),
            },
        )
    except ApiError as exc:
        report_error(exc, "plans.error")
        return
    set_flash("success", "plans.exercise_added")
    st.rerun()


def _render_detail(plan_id: str) -> None:
    if st.button(t("plans.back"), key="plan-back"):
        st.session_state.pop(SELECTED_PLAN, None)
        st.rerun()
    try:
        plan = plans_service.get_plan(plan_id)
    except ApiError as exc:
        report_error(exc)
        return
    if plan is None:
        st.error(t("plans.not_found"))
        return
    card = build_plan_card(plan)
    st.subheader(card.name)
    if card.description:
        st.write(card.description)
    st.caption(t("plans.summary", days=card.days, exercises=card.exercises))

    try:
        library = exercises_service.list_exercises()
    except ApiError as exc:
        report_error(exc)
        library = []

    days = sorted_days(plan)
    for day in days:
        with st.expander(f"{day.get('order')}. {day.get('name')}", expanded=True):
            items = day.get("exercises") or []
            if not items:
                st.caption(t("wizard.exercises.empty"))
            for item in items:
                line = build_exercise_line(item)
                st.markdown(f"**{line.name}** · {line.prescription}")
                if line.details:
                    st.caption(" · ".join(line.details))
            _quick_add_exercise(plan_id, day, library)

    with st.form("add_day", clear_on_submit=True):
        name = st.text_input(t("plans.new_day"), value="")
        if st.form_submit_button(t("wizard.structure.add_day")):
            try:
                plans_service.add_day_to_plan(
                    plan_id, name.strip() or t("wizard.structure.day_label", order=len(days) + 1), len(days) + 1
                )
            except ApiError as exc:
                report_error(exc, "plans.error")
            else:
                set_flash("success", "plans.day_added")
                st.rerun()


def _render_list() -> None:
    try:
        plans = plans_service.list_plans()
    except ApiError as exc:
        report_error(exc)
        return
    if not plans:
        st.info(t("plans.empty"))
        return
    for plan in plans:
        card = build_plan_card(plan)
        with st.container(border=True):
            cols = st.columns([5, 1, 1])
            cols[0].markdown(f"**{card.name}**")
            if card.description:
                cols[0].caption(card.description)
            cols[0].caption(t("plans.summary", days=card.days, exercises=card.exercises))
            if cols[1].button(t("plans.view"), key=f"plan-view-{card.plan_id}"):
                st.session_state[SELECTED_PLAN] = card.plan_id
                st.rerun()
            if cols[2].button("🗑️", key=f"plan-delete-{card.plan_id}", help=t("common.delete")):
                st.session_state[CONFIRM_DELETE] = card.plan_id
                st.rerun()
            if st.session_state.get(CONFIRM_DELETE) == card.plan_id:
                st.warning(t("plans.confirm_delete", name=card.name))
                col_yes, col_no = st.columns(2)
                if col_yes.button(t("common.delete"), type="primary", key=f"plan-delete-yes-{card.plan_id}"):
                    st.session_state.pop(CONFIRM_DELETE, None)
                    try:
                        plans_service.delete_plan(card.plan_id)
                    except ApiError as exc:
                        report_error(exc, "plans.error")
                        return
                    set_flash("success", "plans.deleted", name=card.name)
                    st.rerun()
                if col_no.button(t("common.cancel"), key=f"plan-delete-no-{card.plan_id}"):
                    st.session_state.pop(CONFIRM_DELETE, None)
                    st.rerun()


cfg = page_header("nav.plans", "📋")
require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

api = get_api_client(cfg)
cache = get_query_cache(cfg)
plans_service = TrainingPlansService(api, cache)
exercises_service = ExercisesService(api, cache)

col_title, col_action = st.columns([4, 1])
col_title.title(t("plans.title"))
with col_action:
    st.page_link("pages/PlanWizard.py", label=t("plans.new"), icon="➕")

selected = st.session_state.get(SELECTED_PLAN)
if selected:
    _render_detail(str(selected))
else:
    _render_list()
