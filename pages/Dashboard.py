from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_CLIENT, ROLE_TRAINER
from services.dashboard_service import ClientStats, DashboardService
from services.presenters import build_stat_cards, next_session_label
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, show_flash, sidebar_account


cfg = page_header("nav.dashboard", "📊")
user = require_login(cfg, ROLE_TRAINER, ROLE_CLIENT)
sidebar_account(cfg)
show_flash()

dashboard_service = DashboardService(get_api_client(cfg), get_query_cache(cfg))

st.title(t("dashboard.welcome", name=user.get("name") or user.get("email") or ""))

try:
    dashboard = dashboard_service.get_dashboard()
except ApiError as exc:
    report_error(exc, "dashboard.error")
    st.stop()

is_client = dashboard.role == ROLE_CLIENT
st.caption(t("dashboard.client_subtitle") if is_client else t("dashboard.trainer_subtitle"))

cards = build_stat_cards(dashboard)
cols = st.columns(len(cards))
for col, card in zip(cols, cards):
    col.metric(card.label, card.value, help=card.description)

if isinstance(dashboard.stats, ClientStats):
    stats = dashboard.stats
    col_plan, col_next = st.columns(2)
    with col_plan:
        st.subheader(t("dashboard.active_plan.title"))
        if stats.active_plan:
            st.markdown(f"**{stats.active_plan.get('name')}**")
            if stats.active_plan.get("description"):
                st.write(stats.active_plan["description"])
            st.page_link("pages/MyPlan.py", label=t("nav.my_plan"), icon="📋")
        else:
            st.info(t("dashboard.active_plan.no_plan"))
    with col_next:
        st.subheader(t("dashboard.next_session.title"))
        label = next_session_label(stats)
        if label:
            session = stats.next_session or {}
            st.write(label)
            if session.get("dayName") or session.get("planName"):
                st.caption(" · ".join(str(v) for v in (session.get("planName"), session.get("dayName")) if v))
        else:
            st.info(t("dashboard.next_session.none"))
    st.page_link("pages/MyProgress.py", label=t("nav.my_progress"), icon="📈")
else:
    st.subheader(t("dashboard.quick_actions.title"))
    actions = [
        ("pages/Clients.py", "dashboard.quick_actions.new_client", "👤"),
        ("pages/Exercises.py", "dashboard.quick_actions.new_exercise", "🏋️"),
        ("pages/PlanWizard.py", "dashboard.quick_actions.new_plan", "📋"),
        ("pages/Calendar.py", "dashboard.quick_actions.view_calendar", "🗓️"),
    ]
    cols = st.columns(len(actions))
    for col, (page, label_key, icon) in zip(cols, actions):
        with col:
            st.page_link(page, label=t(label_key), icon=icon)
            st.caption(t(f"{label_key}_desc"))
