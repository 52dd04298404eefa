"""Read-only rendering of a training plan, day by day."""

from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from services.presenters import build_exercise_line
from services.training_plans_service import sorted_days
from utils.i18n import t


def render_plan(plan: Dict[str, Any], expanded: bool = False) -> None:
    st.subheader(plan.get("name") or "")
    if plan.get("description"):
        st.write(plan["description"])
    days = sorted_days(plan)
    if not days:
        st.info(t("plans.no_days"))
        return
    for day in days:
        with st.expander(f"{day.get('order')}. {day.get('name')}", expanded=expanded):
            for item in day.get("exercises") or []:
                line = build_exercise_line(item)
                st.markdown(f"**{line.name}** · {line.prescription}")
                if line.details:
                    st.caption(" · ".join(line.details))
