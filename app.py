"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Entry point: login gate and role-aware navigation.
"""

import streamlit as st
from streamlit.logger import get_logger

from persistence.api_client import ApiError
from services.auth_service import AuthService, landing_page, nav_links
from services.forms import validate_login
from utils.auth_state import (
    current_user,
    get_api_client,
    is_authenticated,
    login,
    restore_session,
)
from utils.config import redact
from utils.i18n import t
from utils.ui_helpers import page_header, show_field_errors, show_flash, sidebar_account

logger = get_logger(__name__)


def _render_login(cfg) -> None:
    st.title(t("login.title"))
    st.caption(t("login.subtitle"))
    with st.form("login_form"):
        email = st.text_input(t("fields.email"))
        password = st.text_input(t("fields.password"), type="password")
        submitted = st.form_submit_button(t("login.submit"), type="primary")
    st.page_link("pages/Password.py", label=t("login.forgot"), icon="🔑")
    if not submitted:
        return
    cleaned, errors = validate_login({"email": email, "password": password})
    if errors:
        show_field_errors(errors)
        return
    try:
        token, user = AuthService(get_api_client(cfg)).login(cleaned["email"], cleaned["password"])
    except ApiError as exc:
        st.error(exc.detail or t("login.error"))
        return
    login(cfg, token, user)
    st.switch_page(landing_page(user))


def _render_home() -> None:
    user = current_user()
    st.title(t("home.title", name=user.get("name") or user.get("email") or ""))
    for page, label_key, icon in nav_links(user):
        st.page_link(page, label=t(label_key), icon=icon)


def main():
    cfg = page_header("login.title")
    restore_session(cfg)
    logger.debug("API_URL: %s, ENCRYPTION_KEY: %s", cfg.api_url, redact(cfg.encryption_key))
    show_flash()
    if is_authenticated():
        sidebar_account(cfg)
        _render_home()
    else:
        _render_login(cfg)


if __name__ == "__main__":
    main()
