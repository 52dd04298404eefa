from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_CLIENT
from services.dashboard_service import DashboardService, active_plan_ref
from services.training_plans_service import TrainingPlansService
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, show_flash, sidebar_account
from widgets.plan_view import render_plan


cfg = page_header("nav.my_plan", "📋")
user = require_login(cfg, ROLE_CLIENT)
sidebar_account(cfg)
show_flash()

api = get_api_client(cfg)
cache = get_query_cache(cfg)
dashboard_service = DashboardService(api, cache)
plans_service = TrainingPlansService(api, cache)

st.title(t("nav.my_plan"))
st.caption(t("my_plan.subtitle"))

try:
    dashboard = dashboard_service.get_dashboard()
except ApiError as exc:
    report_error(exc, "dashboard.error")
    dashboard = None

plan_ref = active_plan_ref(dashboard, user)
if plan_ref is None:
    st.info(t("my_plan.no_plan"))
    st.stop()

try:
    plan = plans_service.get_plan(str(plan_ref["id"])) or plan_ref
except ApiError as exc:
    report_error(exc)
    plan = plan_ref

render_plan(plan, expanded=True)
