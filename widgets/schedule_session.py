"""Schedule-a-session dialog for the calendar page."""

from __future__ import annotations

import datetime as dt
from typing import Optional

import streamlit as st

from config import DEFAULT_SESSION_TIME
from persistence.api_client import ApiError
from services.calendar_service import CalendarService
from services.clients_service import ClientsService
from services.forms import validate_schedule
from services.training_plans_service import TrainingPlansService
from utils.i18n import t
from utils.time import parse_time
from utils.ui_helpers import report_error, set_flash, show_field_errors
from widgets.client_selector import select_client


def _schedule_body(
    clients: ClientsService,
    plans: TrainingPlansService,
    calendar: CalendarService,
    default_date: dt.date,
) -> None:
    try:
        all_clients = clients.list_clients()
    except ApiError as exc:
        report_error(exc)
        return
    client = select_client(all_clients, key="schedule_client", only_with_plan=True)
    if client is None:
        return

    plan = client.get("activePlan") or {}
    st.text_input(t("fields.planId"), value=plan.get("name") or t("calendar.modal.no_plan"), disabled=True)
    try:
        days = plans.plan_days(str(plan.get("id"))) if plan.get("id") else []
    except ApiError as exc:
        report_error(exc)
        return
    if not days:
        st.info(t("calendar.modal.plan_without_days"))
        return
    day_labels = {str(d.get("id")): str(d.get("name") or "") for d in days}
    day_id = st.selectbox(
        t("fields.trainingDayId"),
        list(day_labels),
        format_func=lambda did: day_labels.get(did, did),
        key="schedule_day",
    )

    with st.form("schedule_session_form"):
        col_date, col_time = st.columns(2)
        day = col_date.date_input(t("fields.date"), value=default_date)
        at = col_time.time_input(t("fields.time"), value=parse_time(DEFAULT_SESSION_TIME))
        notes = st.text_area(t("fields.notes"), key="schedule_notes")
        submitted = st.form_submit_button(t("calendar.modal.submit"))

    if not submitted:
        return
    cleaned, errors = validate_schedule(
        {
            "clientId": client.get("id"),
            "trainingDayId": day_id,
            "date": day,
            "time": at,
            "notes": notes,
        }
    )
    if errors:
        show_field_errors(errors)
        return
    try:
        calendar.schedule_workout(
            str(cleaned["clientId"]),
            str(cleaned["trainingDayId"]),
            cleaned["date"],
            cleaned["time"],
            cleaned["notes"],
        )
    except ApiError as exc:
        report_error(exc, "calendar.modal.error")
        return
    set_flash("success", "calendar.modal.success")
    st.rerun()


def open_schedule_dialog(
    clients: ClientsService,
    plans: TrainingPlansService,
    calendar: CalendarService,
    default_date: Optional[dt.date] = None,
) -> None:
    dialog = st.dialog(t("calendar.modal.title"), width="large")
    dialog(_schedule_body)(clients, plans, calendar, default_date or dt.date.today())
