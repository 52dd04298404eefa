"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Body metrics tab (history, weight chart, log form) and progress photos tab.
"""

from __future__ import annotations

from typing import Any, Dict, List

import altair as alt
import pandas as pd
import streamlit as st

from persistence.api_client import ApiError
from services.body_metrics_service import BodyMetricsService, latest_metric, metrics_frame, weight_change
from services.forms import OPTIONAL_METRIC_FIELDS, validate_metric
from services.presenters import build_metric_row
from utils.coercion import safe_float_optional
from utils.formatting import fmt_date, fmt_kg
from utils.i18n import t
from utils.time import parse_api_datetime, to_local
from utils.ui_helpers import report_error, set_flash, show_field_errors, toast_error


def weight_chart(df: pd.DataFrame) -> alt.Chart:
    data = df.dropna(subset=["weight"])[["loggedAt", "weight"]]
    return (
        alt.Chart(data, title=t("metrics.chart_title"))
        .mark_line(point=True)
        .encode(
            x=alt.X("loggedAt:T", title=t("metrics.columns.date")),
            y=alt.Y("weight:Q", title=t("metrics.columns.weight"), scale=alt.Scale(zero=False)),
            tooltip=[
                alt.Tooltip("loggedAt:T", title=t("metrics.columns.date")),
                alt.Tooltip("weight:Q", title="kg", format=".1f"),
            ],
        )
    )


def _log_metric_form(client_id: str, service: BodyMetricsService) -> None:
    with st.form(f"log_metric_{client_id}", clear_on_submit=True):
        col_weight, col_fat = st.columns(2)
        raw: Dict[str, Any] = {
            "weight": col_weight.text_input(t("fields.weight")),
            "bodyFat": col_fat.text_input(t("fields.bodyFat")),
        }
        cols = st.columns(5)
        for col, field in zip(cols, [f for f in OPTIONAL_METRIC_FIELDS if f != "bodyFat"]):
            raw[field] = col.text_input(t(f"fields.{field}"))
        raw["notes"] = st.text_area(t("fields.notes"))
        submitted = st.form_submit_button(t("metrics.log"))
    if not submitted:
        return
    cleaned, errors = validate_metric(raw)
    if errors:
        show_field_errors(errors)
        return
    try:
        service.log_metric(client_id, cleaned)
    except ApiError as exc:
        report_error(exc, "metrics.error")
        return
    set_flash("success", "metrics.logged")
    st.rerun()


def render_body_metrics_tab(client_id: str, service: BodyMetricsService) -> None:
    try:
        metrics: List[Dict[str, Any]] = service.list_metrics(client_id)
    except ApiError as exc:
        report_error(exc)
        return

    latest = latest_metric(metrics)
    change = weight_change(metrics)
    cols = st.columns(3)
    cols[0].metric(
        t("metrics.current_weight"),
        fmt_kg(safe_float_optional((latest or {}).get("weight"))) or "-",
        delta=f"{change:+.1f} kg" if change is not None else None,
        delta_color="off",
    )
    cols[1].metric(t("metrics.entries"), str(len(metrics)))
    last_logged = to_local(parse_api_datetime((latest or {}).get("loggedAt")))
    cols[2].metric(t("metrics.last_logged"), fmt_date(last_logged) if last_logged else "-")

    df = metrics_frame(metrics)
    if df["weight"].notna().sum() >= 2:
        st.altair_chart(weight_chart(df), use_container_width=True)
    if metrics:
        rows = [build_metric_row(m) for m in sorted(metrics, key=lambda m: str(m.get("loggedAt") or ""), reverse=True)]
        st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)
    else:
        st.info(t("metrics.empty"))

    with st.expander(t("metrics.log_title"), expanded=not metrics):
        _log_metric_form(client_id, service)


def render_progress_photos_tab(client_id: str, service: BodyMetricsService) -> None:
    with st.form(f"upload_photo_{client_id}", clear_on_submit=True):
        image_url = st.text_input(t("photos.url"))
        caption = st.text_input(t("photos.caption"))
        submitted = st.form_submit_button(t("photos.add"))
    if submitted:
        if not image_url.strip():
            st.error(t("photos.url_required"))
        else:
            try:
                service.upload_photo(client_id, image_url, caption)
            except ApiError as exc:
                report_error(exc, "photos.error")
            else:
                set_flash("success", "photos.added")
                st.rerun()

    try:
        photos = service.list_photos(client_id)
    except ApiError as exc:
        report_error(exc)
        return
    if not photos:
        st.info(t("photos.empty"))
        return
    cols = st.columns(3)
    for index, photo in enumerate(sorted(photos, key=lambda p: str(p.get("loggedAt") or ""), reverse=True)):
        with cols[index % 3]:
            logged = to_local(parse_api_datetime(photo.get("loggedAt")))
            caption_text = photo.get("caption") or ""
            label = f"{fmt_date(logged)} · {caption_text}" if logged else caption_text
            st.image(photo.get("imageUrl"), caption=label or None, use_container_width=True)
            photo_id = str(photo.get("id"))
            confirm = st.checkbox(t("common.confirm_delete"), key=f"confirm-photo-{photo_id}")
            if st.button(t("common.delete"), key=f"delete-photo-{photo_id}", disabled=not confirm):
                try:
                    service.delete_photo(client_id, photo_id)
                except ApiError as exc:
                    toast_error(exc)
                else:
                    st.rerun()
