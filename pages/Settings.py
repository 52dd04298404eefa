"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_CLIENT, ROLE_TRAINER, AuthService
from services.forms import NAME_MIN, validate_change_password
from utils.auth_state import LANGUAGE, get_api_client, get_query_cache, require_login, update_current_user
from utils.i18n import SUPPORTED, t
from utils.ui_helpers import page_header, report_error, set_flash, show_field_errors, show_flash, sidebar_account
from widgets.client_forms import avatar_picker

LANGUAGE_NAMES = {"es": "Español", "en": "English"}

cfg = page_header("nav.settings", "⚙️")
user = require_login(cfg, ROLE_TRAINER, ROLE_CLIENT, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

auth_service = AuthService(get_api_client(cfg), get_query_cache(cfg))

st.title(t("settings.title"))

st.subheader(t("settings.language"))
current_language = st.session_state.get(LANGUAGE, cfg.default_language)
language = st.selectbox(
    t("settings.language"),
    SUPPORTED,
    index=SUPPORTED.index(current_language) if current_language in SUPPORTED else 0,
    format_func=lambda code: LANGUAGE_NAMES.get(code, code),
    label_visibility="collapsed",
)
if language != current_language:
    st.session_state[LANGUAGE] = language
    st.rerun()

st.subheader(t("settings.profile"))
with st.form("profile_form"):
    name = st.text_input(t("fields.name"), value=user.get("name") or "")
    avatar = avatar_picker("settings_avatar", user.get("avatarUrl"))
    save_profile = st.form_submit_button(t("common.save"))
if save_profile:
    if len(name.strip()) < NAME_MIN:
        show_field_errors({"name": "validation.name_min_2"})
    else:
        try:
            merged = auth_service.update_profile({"name": name.strip(), "avatarUrl": avatar})
        except ApiError as exc:
            report_error(exc, "settings.error")
        else:
            update_current_user(cfg, merged)
            set_flash("success", "settings.profile_saved")
            st.rerun()

st.subheader(t("settings.change_password"))
with st.form("password_form", clear_on_submit=True):
    old_password = st.text_input(t("fields.oldPassword"), type="password")
    new_password = st.text_input(t("fields.newPassword"), type="password")
    confirm_password = st.text_input(t("fields.confirmPassword"), type="password")
    change = st.form_submit_button(t("settings.change_password"))
if change:
    cleaned, errors = validate_change_password(
        {"oldPassword": old_password, "newPassword": new_password, "confirmPassword": confirm_password}
    )
    if errors:
        show_field_errors(errors)
    else:
        try:
            auth_service.change_password(cleaned["oldPassword"], cleaned["newPassword"])
        except ApiError as exc:
            report_error(exc, "settings.error")
        else:
            st.success(t("settings.password_changed"))
