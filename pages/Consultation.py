from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.consultations_service import STATUS_RESOLVED, ConsultationsService, sorted_messages
from services.presenters import build_consultation_row, build_message_view
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, set_flash, show_flash, sidebar_account, toast_error

SELECTED_CONSULTATION = "selected_consultation_id"


cfg = page_header("inbox.thread_title", "💬")
user = require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

consultations_service = ConsultationsService(get_api_client(cfg), get_query_cache(cfg))

st.page_link("pages/Inbox.py", label=t("inbox.back"), icon="⬅️")
consultation_id = st.query_params.get("id") or st.session_state.get(SELECTED_CONSULTATION)
if not consultation_id:
    st.info(t("inbox.pick_first"))
    st.stop()

try:
    consultation = consultations_service.get_consultation(str(consultation_id))
except ApiError as exc:
    report_error(exc)
    st.stop()
if consultation is None:
    st.error(t("inbox.not_found"))
    st.stop()

row = build_consultation_row(consultation)
resolved = str(consultation.get("status") or "").upper() == STATUS_RESOLVED

col_head, col_action = st.columns([4, 1])
with col_head:
    st.title(f"{row.priority_icon} {row.subject}")
    st.caption(f"{row.client} · {row.created} · {row.status}")
if not resolved and col_action.button(t("inbox.resolve"), type="primary", key="consultation-resolve"):
    try:
        consultations_service.resolve(row.consultation_id)
    except ApiError as exc:
        report_error(exc, "inbox.error")
    else:
        set_flash("success", "inbox.resolved")
        st.rerun()

messages = sorted_messages(consultation)
if not messages:
    st.caption(t("inbox.no_messages"))
current_user_id = str(user.get("id") or "") or None
for message in messages:
    view = build_message_view(message, current_user_id)
    with st.chat_message(view["role"]):
        st.caption(f"{view['author']} · {view['sent']}")
        st.write(view["content"])

if resolved:
    st.info(t("inbox.closed"))
else:
    reply = st.chat_input(t("inbox.reply_placeholder"))
    if reply is not None:
        try:
            consultations_service.send_message(row.consultation_id, reply)
        except ValueError:
            st.warning(t("inbox.empty_message"))
        except ApiError as exc:
            toast_error(exc)
        else:
            st.rerun()
