"""Scheduled workout details dialog: reschedule or cancel."""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict

import streamlit as st

from persistence.api_client import ApiError
from services.calendar_service import CalendarService
from services.presenters import build_workout_details
from utils.i18n import t
from utils.ui_helpers import report_error, set_flash


def _details_body(workout: Dict[str, Any], calendar: CalendarService) -> None:
    details = build_workout_details(workout)
    st.markdown(f"**{details['status_label']}**")
    st.write(f"📅 {details['date']} · {details['time']}")
    st.write(f"👤 {t('fields.clientId')}: {details['client'] or '-'}")
    st.write(f"📋 {t('fields.planId')}: {details['plan'] or '-'}")
    st.write(f"🏋️ {t('fields.trainingDayId')}: {details['day'] or '-'}")
    if details["notes"]:
        st.caption(details["notes"])

    workout_id = str(workout.get("id"))
    scheduled_at = details["scheduled_at"] or dt.datetime.now()
    with st.expander(t("calendar.details.reschedule"), expanded=False):
        with st.form(f"reschedule-{workout_id}"):
            col_date, col_time = st.columns(2)
            new_day = col_date.date_input(t("fields.date"), value=scheduled_at.date())
            new_time = col_time.time_input(t("fields.time"), value=scheduled_at.time().replace(second=0, microsecond=0))
            if st.form_submit_button(t("calendar.details.save")):
                try:
                    calendar.reschedule_workout(workout_id, new_day, new_time)
                except ApiError as exc:
                    report_error(exc, "calendar.details.error")
                else:
                    set_flash("success", "calendar.details.rescheduled")
                    st.rerun()

    confirm = st.checkbox(t("calendar.details.confirm_cancel"), key=f"confirm-cancel-{workout_id}")
    if st.button(t("calendar.details.cancel"), disabled=not confirm, key=f"cancel-{workout_id}"):
        try:
            calendar.cancel_workout(workout_id)
        except ApiError as exc:
            report_error(exc, "calendar.details.error")
        else:
            set_flash("success", "calendar.details.cancelled")
            st.rerun()


def open_workout_dialog(workout: Dict[str, Any], calendar: CalendarService) -> None:
    st.dialog(t("calendar.details.title"))(_details_body)(workout, calendar)
