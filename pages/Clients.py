from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.clients_service import ClientsService
from services.presenters import build_client_card
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, show_flash, sidebar_account
from widgets.client_forms import open_new_client_dialog

SELECTED_CLIENT = "selected_client_id"


cfg = page_header("nav.clients", "👥")
require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

clients_service = ClientsService(get_api_client(cfg), get_query_cache(cfg))

col_title, col_action = st.columns([4, 1])
col_title.title(t("clients.title"))
if col_action.button(t("clients.new.title"), type="primary"):
    open_new_client_dialog(clients_service)

try:
    clients = clients_service.list_clients()
except ApiError as exc:
    report_error(exc)
    st.stop()

search = st.text_input(t("clients.search"), placeholder=t("clients.search_placeholder"))
needle = search.strip().lower()
cards = [build_client_card(c) for c in clients]
if needle:
    cards = [c for c in cards if needle in c.name.lower() or needle in c.email.lower()]

if not cards:
    st.info(t("clients.empty"))
    st.stop()

st.caption(t("clients.count", count=len(cards)))
for card in cards:
    with st.container(border=True):
        cols = st.columns([1, 4, 3, 2])
        if card.avatar_url and card.avatar_url.startswith("http"):
            cols[0].image(card.avatar_url, width=48)
        else:
            cols[0].markdown(f"### {card.initials}")
        cols[1].markdown(f"**{card.name}**  \n{card.email}")
        cols[2].write(f"📋 {card.plan_label}")
        if cols[3].button(t("clients.view"), key=f"view-{card.client_id}"):
            st.session_state[SELECTED_CLIENT] = card.client_id
            st.switch_page("pages/Client.py")
