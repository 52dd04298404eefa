from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.exercises_service import ExercisesService
from services.presenters import muscle_group_label
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, set_flash, show_flash, sidebar_account
from widgets.exercise_form import render_exercise_form

EDITING = "exercise_editing"
CONFIRM_DELETE = "exercise_confirm_delete"


def _create_body(service: ExercisesService) -> None:
    if render_exercise_form(service):
        st.rerun()


def _render_exercise(exercise: dict) -> None:
    exercise_id = str(exercise.get("id"))
    with st.container(border=True):
        cols = st.columns([5, 1, 1])
        cols[0].markdown(f"**{exercise.get('name')}**")
        if exercise.get("description"):
            cols[0].caption(exercise["description"])
        if exercise.get("defaultVideoUrl"):
            cols[0].markdown(f"[🎬 {t('exercises.video')}]({exercise['defaultVideoUrl']})")
        if cols[1].button("✏️", key=f"edit-{exercise_id}", help=t("exercises.edit")):
            st.session_state[EDITING] = exercise_id
            st.rerun()
        if cols[2].button("🗑️", key=f"delete-{exercise_id}", help=t("common.delete")):
            st.session_state[CONFIRM_DELETE] = exercise_id
            st.rerun()

        if st.session_state.get(CONFIRM_DELETE) == exercise_id:
            st.warning(t("common.confirm_delete"))
            col_yes, col_no = st.columns(2)
            if col_yes.button(t("common.delete"), type="primary", key=f"delete-yes-{exercise_id}"):
                st.session_state.pop(CONFIRM_DELETE, None)
                try:
                    exercises_service.delete_exercise(exercise_id)
                except ApiError as exc:
                    report_error(exc, "exercises.error")
                    return
                set_flash("success", "exercises.deleted", name=exercise.get("name") or "")
                st.rerun()
            if col_no.button(t("common.cancel"), key=f"delete-no-{exercise_id}"):
                st.session_state.pop(CONFIRM_DELETE, None)
                st.rerun()

        if st.session_state.get(EDITING) == exercise_id:
            if render_exercise_form(exercises_service, exercise):
                st.session_state.pop(EDITING, None)
                st.rerun()
            if st.button(t("common.cancel"), key=f"edit-cancel-{exercise_id}"):
                st.session_state.pop(EDITING, None)
                st.rerun()


cfg = page_header("nav.exercises", "🏋️")
require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

exercises_service = ExercisesService(get_api_client(cfg), get_query_cache(cfg))

col_title, col_action = st.columns([4, 1])
col_title.title(t("exercises.title"))
if col_action.button(t("exercises.create"), type="primary"):
    st.dialog(t("exercises.create"), width="large")(_create_body)(exercises_service)

term = st.text_input(t("exercises.search"), placeholder=t("exercises.search_placeholder"))

try:
    grouped = exercises_service.search(term)
except ApiError as exc:
    report_error(exc)
    st.stop()

if not grouped:
    st.info(t("exercises.no_results") if term.strip() else t("exercises.empty"))
    st.stop()

for group, items in grouped.items():
    label = muscle_group_label(group)
    with st.expander(f"{label} ({len(items)})", expanded=bool(term.strip())):
        for exercise in items:
            _render_exercise(exercise)
