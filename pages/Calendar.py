from __future__ import annotations

import datetime as dt

import streamlit as st

from persistence.api_client import ApiError
from services.auth_service import ROLE_ADMIN, ROLE_TRAINER
from services.calendar_service import CalendarService, group_by_day, shift_month, upcoming
from services.clients_service import ClientsService
from services.presenters import STATUS_ICONS, build_workout_details
from services.training_plans_service import TrainingPlansService
from utils.auth_state import get_api_client, get_query_cache, require_login
from utils.formatting import month_title
from utils.i18n import t
from utils.time import today_local
from utils.ui_helpers import page_header, report_error, show_flash, sidebar_account
from widgets.month_view import render_month_view
from widgets.schedule_session import open_schedule_dialog
from widgets.workout_details import open_workout_dialog

VIEW_YEAR = "calendar_year"
VIEW_MONTH = "calendar_month"
OPEN_WORKOUT = "calendar_open_workout"
SCHEDULE_DAY = "calendar_schedule_day"


def _move(delta: int) -> None:
    year, month = shift_month(st.session_state[VIEW_YEAR], st.session_state[VIEW_MONTH], delta)
    st.session_state[VIEW_YEAR] = year
    st.session_state[VIEW_MONTH] = month


def _go_today() -> None:
    today = today_local()
    st.session_state[VIEW_YEAR] = today.year
    st.session_state[VIEW_MONTH] = today.month


cfg = page_header("nav.calendar", "🗓️")
require_login(cfg, ROLE_TRAINER, ROLE_ADMIN)
sidebar_account(cfg)
show_flash()

api = get_api_client(cfg)
cache = get_query_cache(cfg)
calendar_service = CalendarService(api, cache)
clients_service = ClientsService(api, cache)
plans_service = TrainingPlansService(api, cache)

today = today_local()
st.session_state.setdefault(VIEW_YEAR, today.year)
st.session_state.setdefault(VIEW_MONTH, today.month)
year, month = st.session_state[VIEW_YEAR], st.session_state[VIEW_MONTH]

col_title, col_action = st.columns([4, 1])
col_title.title(t("calendar.title"))
if col_action.button(t("calendar.schedule"), type="primary", key="calendar-schedule"):
    st.session_state[SCHEDULE_DAY] = today

nav = st.columns([1, 1, 4, 1])
nav[0].button("◀", key="calendar-prev", on_click=_move, args=(-1,), help=t("calendar.previous"))
nav[1].button(t("calendar.today"), key="calendar-today", on_click=_go_today)
nav[2].markdown(f"### {month_title(year, month)}")
nav[3].button("▶", key="calendar-next", on_click=_move, args=(1,), help=t("calendar.next"))

try:
    workouts = calendar_service.list_scheduled_workouts(year, month)
except ApiError as exc:
    report_error(exc)
    workouts = []

col_grid, col_side = st.columns([4, 1])
with col_grid:
    render_month_view(
        year=year,
        month=month,
        grouped=group_by_day(workouts),
        today=today,
        on_open_workout=lambda workout: st.session_state.__setitem__(OPEN_WORKOUT, workout),
        on_schedule_day=lambda day: st.session_state.__setitem__(SCHEDULE_DAY, day),
    )

with col_side:
    st.subheader(t("calendar.upcoming"))
    next_workouts = upcoming(workouts, dt.datetime.now(dt.timezone.utc))
    if not next_workouts:
        st.caption(t("calendar.no_upcoming"))
    for workout in next_workouts:
        details = build_workout_details(workout)
        with st.container(border=True):
            st.markdown(f"{STATUS_ICONS[details['status']]} **{details['client'] or '-'}**")
            st.caption(f"{details['date']} · {details['time']}")
            if details["day"]:
                st.caption(details["day"])

pending_workout = st.session_state.pop(OPEN_WORKOUT, None)
pending_day = st.session_state.pop(SCHEDULE_DAY, None)
if pending_workout is not None:
    open_workout_dialog(pending_workout, calendar_service)
elif pending_day is not None:
    open_schedule_dialog(clients_service, plans_service, calendar_service, pending_day)
