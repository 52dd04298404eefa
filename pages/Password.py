from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import AuthService
from services.forms import validate_forgot_password, validate_reset_password
from utils.auth_state import get_api_client
from utils.i18n import t
from utils.ui_helpers import page_header, set_flash, show_field_errors, show_flash

cfg = page_header("password.title", "🔑")
show_flash()

auth_service = AuthService(get_api_client(cfg))
token = st.query_params.get("token")

st.page_link("app.py", label=t("password.back_to_login"), icon="⬅️")

if token:
    st.title(t("password.reset_title"))
    with st.form("reset_password_form"):
        new_password = st.text_input(t("fields.newPassword"), type="password")
        confirm_password = st.text_input(t("fields.confirmPassword"), type="password")
        submitted = st.form_submit_button(t("password.reset_submit"), type="primary")
    if submitted:
        cleaned, errors = validate_reset_password(
            {"newPassword": new_password, "confirmPassword": confirm_password}
        )
        if errors:
            show_field_errors(errors)
        else:
            try:
                auth_service.reset_password(token, cleaned["newPassword"])
            except ApiError as exc:
                st.error(exc.detail or t("password.reset_error"))
            else:
                st.query_params.clear()
                set_flash("success", "password.reset_done")
                st.switch_page("app.py")
else:
    st.title(t("password.forgot_title"))
    st.caption(t("password.forgot_help"))
    with st.form("forgot_password_form"):
        email = st.text_input(t("fields.email"))
        submitted = st.form_submit_button(t("password.forgot_submit"), type="primary")
    if submitted:
        cleaned, errors = validate_forgot_password({"email": email})
        if errors:
            show_field_errors(errors)
        else:
            try:
                auth_service.forgot_password(cleaned["email"])
            except ApiError as exc:
                st.error(exc.detail or t("password.forgot_error"))
            else:
                st.success(t("password.forgot_sent", email=cleaned["email"]))
