"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Client dialogs: create a client, edit a profile, assign a training plan.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional

import streamlit as st

from config import AVATARS, GENDERS
from persistence.api_client import ApiError
from services.clients_service import ClientsService
from services.forms import validate_new_client, validate_profile
from services.training_plans_service import TrainingPlansService
from utils.coercion import safe_float_optional
from utils.i18n import t
from utils.time import parse_api_datetime
from utils.ui_helpers import report_error, set_flash, show_field_errors


def avatar_picker(key: str, current: Optional[str] = None) -> str:
    index = AVATARS.index(current) if current in AVATARS else 0
    return st.radio(
        t("fields.avatarUrl"),
        AVATARS,
        index=index,
        horizontal=True,
        format_func=lambda path: path.rsplit("/", 1)[-1].replace(".png", ""),
        key=key,
    )


# --- New client -------------------------------------------------------------
def _new_client_body(clients: ClientsService) -> None:
    with st.form("new_client_form"):
        email = st.text_input(t("fields.email"))
        name = st.text_input(t("fields.name"))
        col_pw, col_confirm = st.columns(2)
        password = col_pw.text_input(t("fields.password"), type="password")
        confirm = col_confirm.text_input(t("fields.confirmPassword"), type="password")
        avatar = avatar_picker("new_client_avatar")
        submitted = st.form_submit_button(t("clients.new.submit"))
    if not submitted:
        return
    cleaned, errors = validate_new_client(
        {
            "email": email,
            "name": name,
            "password": password,
            "confirmPassword": confirm,
            "avatarUrl": avatar,
        }
    )
    if errors:
        show_field_errors(errors)
        return
    try:
        clients.create_client(cleaned["email"], cleaned["name"], cleaned["password"], cleaned["avatarUrl"])
    except ApiError as exc:
        report_error(exc, "clients.new.error")
        return
    set_flash("success", "clients.new.success", name=cleaned["name"])
    st.rerun()


def open_new_client_dialog(clients: ClientsService) -> None:
    st.dialog(t("clients.new.title"))(_new_client_body)(clients)


# --- Edit profile -----------------------------------------------------------
def _as_date(value: Any) -> Optional[dt.date]:
    parsed = parse_api_datetime(value)
    return parsed.date() if parsed else None


def _number_text(value: Any) -> str:
    number = safe_float_optional(value)
    if number is None:
        return ""
    return f"{number:g}"


def _edit_profile_body(client: Dict[str, Any], clients: ClientsService) -> None:
    client_id = str(client.get("id"))
    gender_options = [""] + GENDERS
    current_gender = str(client.get("gender") or "")
    with st.form(f"edit_profile_{client_id}"):
        name = st.text_input(t("fields.name"), value=client.get("name") or "")
        col_birth, col_gender = st.columns(2)
        birth = col_birth.date_input(
            t("fields.birthDate"),
            value=_as_date(client.get("birthDate")),
            min_value=dt.date(1900, 1, 1),
            max_value=dt.date.today(),
        )
        gender = col_gender.selectbox(
            t("fields.gender"),
            gender_options,
            index=gender_options.index(current_gender) if current_gender in gender_options else 0,
            format_func=lambda g: t(f"profile.genders.{g.lower()}") if g else "-",
        )
        cols = st.columns(3)
        height = cols[0].text_input(t("fields.height"), value=_number_text(client.get("height")))
        weight = cols[1].text_input(t("fields.weight"), value=_number_text(client.get("weight")))
        lean_mass = cols[2].text_input(t("fields.leanMass"), value=_number_text(client.get("leanMass")))
        cols = st.columns(2)
        max_hr = cols[0].text_input(t("fields.maxHeartRate"), value=_number_text(client.get("maxHeartRate")))
        resting_hr = cols[1].text_input(
            t("fields.restingHeartRate"), value=_number_text(client.get("restingHeartRate"))
        )
        avatar = avatar_picker(f"edit_avatar_{client_id}", client.get("avatarUrl"))
        submitted = st.form_submit_button(t("common.save"))
    if not submitted:
        return
    cleaned, errors = validate_profile(
        {
            "name": name,
            "birthDate": birth,
            "gender": gender,
            "height": height,
            "weight": weight,
            "leanMass": lean_mass,
            "maxHeartRate": max_hr,
            "restingHeartRate": resting_hr,
            "avatarUrl": avatar,
        }
    )
    if errors:
        show_field_errors(errors)
        return
    try:
        clients.update_client(client_id, cleaned)
    except ApiError as exc:
        report_error(exc, "profile.error")
        return
    set_flash("success", "profile.saved")
    st.rerun()


def open_edit_profile_dialog(client: Dict[str, Any], clients: ClientsService) -> None:
    st.dialog(t("profile.edit_title"), width="large")(_edit_profile_body)(client, clients)


# --- Assign plan ------------------------------------------------------------
def _assign_plan_body(
    client: Dict[str, Any], clients: ClientsService, plans: TrainingPlansService
) -> None:
    try:
        available: List[Dict[str, Any]] = plans.list_plans()
    except ApiError as exc:
        report_error(exc)
        return
    options = [""] + [str(p.get("id")) for p in available]
    labels = {str(p.get("id")): str(p.get("name") or "") for p in available}
    current = str((client.get("activePlan") or {}).get("id") or "")
    plan_id = st.selectbox(
        t("fields.planId"),
        options,
        index=options.index(current) if current in options else 0,
        format_func=lambda pid: labels.get(pid, pid) if pid else t("clients.assign.none"),
    )
    if not available:
        st.info(t("plans.empty"))
    if st.button(t("clients.assign.submit"), type="primary"):
        try:
            clients.assign_plan(str(client.get("id")), plan_id or None)
        except ApiError as exc:
            report_error(exc, "clients.assign.error")
            return
        set_flash("success", "clients.assign.success")
        st.rerun()


def open_assign_plan_dialog(
    client: Dict[str, Any], clients: ClientsService, plans: TrainingPlansService
) -> None:
    st.dialog(t("clients.assign.title"))(_assign_plan_body)(client, clients, plans)
