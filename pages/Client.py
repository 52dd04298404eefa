from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.body_metrics_service import BodyMetricsService
from services.clients_service import ClientsService
from services.coach_notes_service import CoachNotesService
from services.presenters import build_client_card, build_profile_facts
from services.training_plans_service import TrainingPlansService
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, set_flash, show_flash, sidebar_account
from widgets.body_metrics import render_body_metrics_tab, render_progress_photos_tab
from widgets.client_forms import open_assign_plan_dialog, open_edit_profile_dialog
from widgets.coach_notes import render_coach_notes
from widgets.plan_view import render_plan

SELECTED_CLIENT = "selected_client_id"
CONFIRM_DELETE = "client_confirm_delete"


def _render_delete(client_id: str, name: str) -> None:
    if not st.session_state.get(CONFIRM_DELETE):
        if st.button(t("clients.delete"), key="client-delete"):
            st.session_state[CONFIRM_DELETE] = True
            st.rerun()
        return
    st.warning(t("clients.confirm_delete", name=name))
    col_yes, col_no = st.columns(2)
    if col_yes.button(t("common.delete"), type="primary", key="client-delete-yes"):
        st.session_state.pop(CONFIRM_DELETE, None)
        try:
            clients_service.delete_client(client_id)
        except ApiError as exc:
            report_error(exc, "clients.delete_error")
            return
        st.session_state.pop(SELECTED_CLIENT, None)
        set_flash("success", "clients.deleted", name=name)
        st.switch_page("pages/Clients.py")
    if col_no.button(t("common.cancel"), key="client-delete-no"):
        st.session_state.pop(CONFIRM_DELETE, None)
        st.rerun()


cfg = page_header("clients.detail_title", "👤")
user = require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

api = get_api_client(cfg)
cache = get_query_cache(cfg)
clients_service = ClientsService(api, cache)
plans_service = TrainingPlansService(api, cache)
metrics_service = BodyMetricsService(api, cache)
notes_service = CoachNotesService(api, cache)

client_id = st.query_params.get("id") or st.session_state.get(SELECTED_CLIENT)
st.page_link("pages/Clients.py", label=t("clients.back"), icon="⬅️")
if not client_id:
    st.info(t("clients.pick_first"))
    st.stop()
st.session_state[SELECTED_CLIENT] = client_id

try:
    client = clients_service.get_client(str(client_id))
except ApiError as exc:
    report_error(exc)
    st.stop()
if client is None:
    st.error(t("clients.not_found"))
    st.stop()

card = build_client_card(client)
col_head, col_actions = st.columns([3, 2])
with col_head:
    st.title(card.name)
    st.caption(card.email)
with col_actions:
    if st.button(t("profile.edit_title"), key="client-edit", use_container_width=True):
        open_edit_profile_dialog(client, clients_service)
    if st.button(t("clients.assign.title"), key="client-assign", use_container_width=True):
        open_assign_plan_dialog(client, clients_service, plans_service)

tab_profile, tab_plan, tab_metrics, tab_photos, tab_notes = st.tabs(
    [
        t("clients.tabs.profile"),
        t("clients.tabs.plan"),
        t("clients.tabs.metrics"),
        t("clients.tabs.photos"),
        t("clients.tabs.notes"),
    ]
)

with tab_profile:
    facts = build_profile_facts(client)
    if not facts:
        st.info(t("profile.empty"))
    for label, value in facts:
        st.markdown(f"**{label}:** {value}")
    st.divider()
    _render_delete(card.client_id, card.name)

with tab_plan:
    active_plan = client.get("activePlan") or {}
    if not active_plan.get("id"):
        st.info(t("clients.no_plan"))
    else:
        try:
            plan = plans_service.get_plan(str(active_plan["id"])) or active_plan
        except ApiError as exc:
            report_error(exc)
            plan = active_plan
        render_plan(plan)

with tab_metrics:
    render_body_metrics_tab(card.client_id, metrics_service)

with tab_photos:
    render_progress_photos_tab(card.client_id, metrics_service)

with tab_notes:
    render_coach_notes(card.client_id, notes_service, str(user.get("id") or "") or None)
