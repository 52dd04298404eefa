"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from services.calendar_service import month_grid, workouts_for_day
from services.presenters import build_workout_chip
from utils.formatting import weekday_headers
from utils.i18n import t


def render_month_view(
    *,
    year: int,
    month: int,
    grouped: Dict[str, List[Dict[str, Any]]],
    today: dt.date,
    on_open_workout: Callable[[Dict[str, Any]], None],
    on_schedule_day: Optional[Callable[[dt.date], None]] = None,
) -> None:
    """Render the month grid: up to three workout chips per day plus a '+N' overflow."""
    header_cols = st.columns(7)
    for col, name in zip(header_cols, weekday_headers()):
        col.markdown(f"**{name}**")

    for week in month_grid(year, month):
        cols = st.columns(7)
        for col, day in zip(cols, week):
            with col:
                if day is None:
                    st.markdown("&nbsp;", unsafe_allow_html=True)
                    continue
                marker = " 🔹" if day == today else ""
                st.markdown(f"<span class='tc-day-number'>{day.day}{marker}</span>", unsafe_allow_html=True)
                visible, hidden = workouts_for_day(grouped, day)
                for workout in visible:
                    chip = build_workout_chip(workout)
                    if st.button(
                        chip.label or t("calendar.session"),
                        key=f"chip-{chip.workout_id}",
                        use_container_width=True,
                        help=t(f"calendar.status.{chip.status}"),
                    ):
                        on_open_workout(workout)
                if hidden:
                    st.markdown(
                        f"<span class='tc-more'>{t('calendar.more', count=hidden)}</span>",
                        unsafe_allow_html=True,
                    )
                if on_schedule_day is not None and day >= today:
                    if st.button("＋", key=f"schedule-{day.isoformat()}", help=t("calendar.schedule")):
                        on_schedule_day(day)
