"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

UI helper functions for Streamlit pages.

Consolidates the page header, flash messages, error reporting and rerun
triggers shared by every page.
"""

from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from persistence.api_client import ApiError, UnauthorizedError
from utils.auth_state import FLASH, current_user, init_session_state, logout, write_session_cookie
from utils.config import Config, load_config
from utils.i18n import t
from utils.styling import apply_theme


def page_header(title_key: str, icon: str = "🏋️") -> Config:
    """Common page prologue: configuration, language, page config and theme."""
    cfg = load_config()
    init_session_state(cfg)
    st.set_page_config(page_title=f"Trainer Console - {t(title_key)}", page_icon=icon, layout="wide")
    apply_theme()
    write_session_cookie()
    return cfg


def sidebar_account(cfg: Config) -> None:
    user = current_user()
    with st.sidebar:
        if user:
            st.caption(t("nav.signed_in_as", name=user.get("name") or user.get("email") or ""))
            if st.button(t("nav.logout"), key="sidebar_logout"):
                logout(cfg)
                st.switch_page("app.py")


def set_flash(level: str, message_key: str, **params: object) -> None:
    """Queue a message for the next rerun; message_key is translated on display."""
    st.session_state[FLASH] = (level, message_key, params)


def show_flash() -> None:
    flash = st.session_state.pop(FLASH, None)
    if not flash:
        return
    level, key = flash[0], flash[1]
    params = flash[2] if len(flash) > 2 else {}
    message = t(key, **params)
    if level == "success":
        st.success(message)
    elif level == "warning":
        st.warning(message)
    elif level == "error":
        st.error(message)
    else:
        st.info(message)


def error_message(exc: Exception) -> str:
    """Backend message when there is one, otherwise the translated generic error."""
    if isinstance(exc, ApiError) and exc.detail:
        return exc.detail
    return t("common.error")


def report_error(exc: Exception, prefix_key: Optional[str] = None) -> None:
    """Show an API failure; a rejected session goes back to the login page."""
    if isinstance(exc, UnauthorizedError):
        st.switch_page("app.py")
    message = error_message(exc)
    if prefix_key:
        message = f"{t(prefix_key)}: {message}"
    st.error(message)


def toast_error(exc: Exception) -> None:
    if isinstance(exc, UnauthorizedError):
        st.switch_page("app.py")
    st.toast(error_message(exc), icon="⚠️")


def show_field_errors(errors: Dict[str, str]) -> None:
    for field, key in errors.items():
        st.error(f"{t(f'fields.{field}')}: {t(key)}")
