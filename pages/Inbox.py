from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.consultations_service import FILTERS, ConsultationsService, count_by_status, filter_by_status
from services.presenters import build_consultation_row
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, show_flash, sidebar_account

SELECTED_CONSULTATION = "selected_consultation_id"
INBOX_FILTER = "inbox_filter"


cfg = page_header("nav.inbox", "💬")
require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

consultations_service = ConsultationsService(get_api_client(cfg), get_query_cache(cfg))

st.title(t("inbox.title"))

try:
    consultations = consultations_service.list_consultations()
except ApiError as exc:
    report_error(exc)
    st.stop()

counts = count_by_status(consultations)
status = st.radio(
    t("inbox.filter"),
    FILTERS,
    horizontal=True,
    key=INBOX_FILTER,
    format_func=lambda s: f"{t(f'inbox.filters.{s.lower()}')} ({counts[s]})",
)

visible = filter_by_status(consultations, status)
if not visible:
    st.info(t("inbox.empty"))
    st.stop()

for consultation in visible:
    row = build_consultation_row(consultation)
    with st.container(border=True):
        cols = st.columns([5, 2, 1])
        cols[0].markdown(f"{row.priority_icon} **{row.subject}**")
        cols[0].caption(f"{row.client} · {row.created}")
        if row.preview:
            cols[0].write(row.preview)
        cols[1].write(f"{row.status} · {row.priority}")
        if cols[2].button(t("inbox.open"), key=f"open-{row.consultation_id}"):
            st.session_state[SELECTED_CONSULTATION] = row.consultation_id
            st.switch_page("pages/Consultation.py")
