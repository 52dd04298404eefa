from __future__ import annotations

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, AdminTrainersService
from services.forms import PASSWORD_MIN, validate_trainer
from services.presenters import display_name
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.i18n import t
from utils.ui_helpers import page_header, report_error, set_flash, show_field_errors, show_flash, sidebar_account

CONFIRM_DELETE = "admin_confirm_delete"
RESET_FOR = "admin_reset_for"


def _create_trainer_form() -> None:
    with st.expander(t("admin.create_title"), expanded=False):
        with st.form("create_trainer_form", clear_on_submit=True):
            email = st.text_input(t("fields.email"))
            name = st.text_input(t("fields.name"))
            password = st.text_input(t("fields.password"), type="password")
            submitted = st.form_submit_button(t("admin.create"), type="primary")
        if not submitted:
            return
        cleaned, errors = validate_trainer({"email": email, "name": name, "password": password})
        if errors:
            show_field_errors(errors)
            return
        try:
            trainers_service.create_trainer(cleaned["email"], cleaned["name"], cleaned["password"])
        except ApiError as exc:
            report_error(exc, "admin.error")
            return
        set_flash("success", "admin.created", name=cleaned["name"])
        st.rerun()


def _render_trainer(trainer: dict) -> None:
    trainer_id = str(trainer.get("id"))
    name = display_name(trainer)
    with st.container(border=True):
        cols = st.columns([5, 2, 1])
        cols[0].markdown(f"**{trainer.get('name') or '-'}**  \n{trainer.get('email') or ''}")
        if cols[1].button(t("admin.reset_password"), key=f"reset-{trainer_id}"):
            st.session_state[RESET_FOR] = trainer_id
            st.rerun()
        if cols[2].button("🗑️", key=f"delete-{trainer_id}", help=t("common.delete")):
            st.session_state[CONFIRM_DELETE] = trainer_id
            st.rerun()

        if st.session_state.get(CONFIRM_DELETE) == trainer_id:
            st.warning(t("admin.confirm_delete", name=name))
            col_yes, col_no = st.columns(2)
            if col_yes.button(t("common.delete"), type="primary", key=f"delete-yes-{trainer_id}"):
                st.session_state.pop(CONFIRM_DELETE, None)
                try:
                    trainers_service.delete_trainer(trainer_id)
                except ApiError as exc:
                    report_error(exc, "admin.error")
                    return
                set_flash("success", "admin.deleted", name=name)
                st.rerun()
            if col_no.button(t("common.cancel"), key=f"delete-no-{trainer_id}"):
                st.session_state.pop(CONFIRM_DELETE, None)
                st.rerun()

        if st.session_state.get(RESET_FOR) == trainer_id:
            with st.form(f"reset_form_{trainer_id}", clear_on_submit=True):
                new_password = st.text_input(t("fields.newPassword"), type="password")
                col_save, col_cancel = st.columns(2)
                save = col_save.form_submit_button(t("common.save"), type="primary")
                cancel = col_cancel.form_submit_button(t("common.cancel"))
            if cancel:
                st.session_state.pop(RESET_FOR, None)
                st.rerun()
            if save:
                if len(new_password) < PASSWORD_MIN:
                    show_field_errors({"newPassword": "validation.password_min_8"})
                    return
                try:
                    trainers_service.reset_password(trainer_id, new_password)
                except ApiError as exc:
                    report_error(exc, "admin.error")
                    return
                st.session_state.pop(RESET_FOR, None)
                set_flash("success", "admin.password_reset", name=name)
                st.rerun()


cfg = page_header("nav.admin", "🛡️")
require_login(cfg, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

trainers_service = AdminTrainersService(get_api_client(cfg), get_query_cache(cfg))

st.title(t("admin.title"))
_create_trainer_form()

try:
    trainers = trainers_service.list_trainers()
except ApiError as exc:
    report_error(exc)
    st.stop()

if not trainers:
    st.info(t("admin.empty"))
for trainer in trainers:
    _render_trainer(trainer)
