from __future__ import annotations

import streamlit as st

from services.auth_service import ROLE_CLIENT
from services.body_metrics_service import BodyMetricsService
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, show_flash, sidebar_account
from widgets.body_metrics import render_body_metrics_tab, render_progress_photos_tab


cfg = page_header("nav.my_progress", "📈")
user = require_login(cfg, ROLE_CLIENT)
sidebar_account(cfg)
show_flash()

metrics_service = BodyMetricsService(get_api_client(cfg), get_query_cache(cfg))
client_id = str(user.get("id") or "")

st.title(t("nav.my_progress"))
st.caption(t("my_progress.subtitle"))

tab_metrics, tab_photos = st.tabs([t("clients.tabs.metrics"), t("clients.tabs.photos")])

with tab_metrics:
    render_body_metrics_tab(client_id, metrics_service)

with tab_photos:
    render_progress_photos_tab(client_id, metrics_service)
