from __future__ import annotations

import altair as alt
import streamlit as st

THEME_CSS = """
<style>
:root {
    --tc-navy: #1e293b;
    --tc-blue: #2563eb;
    --tc-sky: #38bdf8;
    --tc-green: #16a34a;
    --tc-amber: #f59e0b;
    --tc-red: #dc2626;
    --tc-text-primary: #f8fafc;
    --tc-text-secondary: #cbd5e1;
    --tc-surface: rgba(30, 41, 59, 0.92);
    --tc-surface-soft: rgba(15, 23, 42, 0.7);
    --tc-shadow: 0 14px 28px rgba(2, 6, 23, 0.35);
}

html, body, [data-testid="stAppViewContainer"] {
    background: radial-gradient(circle at top, rgba(30, 41, 59, 0.9), rgba(2, 6, 23, 0.96));
    color: var(--tc-text-primary);
}

[data-testid="stHeader"] {
    background: rgba(2, 6, 23, 0.6);
    backdrop-filter: blur(6px);
    border-bottom: 1px solid rgba(148, 163, 184, 0.2);
}

[data-testid="stSidebar"] > div {
    background: linear-gradient(180deg, rgba(30, 41, 59, 0.96), rgba(15, 23, 42, 0.98));
    border-right: 1px solid rgba(148, 163, 184, 0.2);
}

label, legend {
    color: var(--tc-text-secondary) !important;
}

.stTextInput > div > div,
.stNumberInput > div > div,
.stDateInput > div > div,
.stTimeInput > div > div,
.stTextArea > div > div {
    background-color: rgba(30, 41, 59, 0.85);
    border: 1px solid rgba(148, 163, 184, 0.25);
    border-radius: 10px;
}

.stButton button {
    background: linear-gradient(135deg, var(--tc-blue), #1d4ed8);
    color: var(--tc-text-primary);
    border: none;
    border-radius: 10px;
    box-shadow: var(--tc-shadow);
}

.stButton button:hover {
    filter: brightness(1.1);
}

.stMetric {
    background: var(--tc-surface);
    border-radius: 14px;
    padding: 0.9rem 1.1rem;
    border: 1px solid rgba(148, 163, 184, 0.2);
}

.stAltairChart {
    background: var(--tc-surface-soft);
    border-radius: 18px;
    padding: 1rem 1.6rem;
    border: 1px solid rgba(148, 163, 184, 0.2);
}

.tc-day {
    min-height: 6.5rem;
    padding: 0.35rem;
    border-radius: 10px;
    background: rgba(30, 41, 59, 0.55);
    border: 1px solid rgba(148, 163, 184, 0.15);
}

.tc-day.today {
    border-color: var(--tc-sky);
}

.tc-day-number {
    font-weight: 600;
    color: var(--tc-text-secondary);
}

.tc-chip {
    display: block;
    margin-top: 0.2rem;
    padding: 0.1rem 0.4rem;
    border-radius: 6px;
    font-size: 0.75rem;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
    background: rgba(37, 99, 235, 0.35);
}

.tc-chip.completed {
    background: rgba(22, 163, 74, 0.35);
}

.tc-chip.missed {
    background: rgba(220, 38, 38, 0.35);
}

.tc-more {
    font-size: 0.7rem;
    color: var(--tc-text-secondary);
}

.tc-badge {
    display: inline-block;
    padding: 0.05rem 0.5rem;
    border-radius: 999px;
    font-size: 0.75rem;
    background: rgba(148, 163, 184, 0.25);
}

.block-container {
    padding-top: 1.5rem;
}
</style>
"""

_ALTAIR_THEME_REGISTERED = False


def _enable_altair_theme() -> None:
    global _ALTAIR_THEME_REGISTERED
    if _ALTAIR_THEME_REGISTERED:
        return

    @alt.theme.register("trainer_console_theme", enable=True)
    def _theme() -> alt.theme.ThemeConfig:
        return {
            "config": {
                "background": "rgba(15, 23, 42, 0.01)",
                "view": {"continuousWidth": 400, "continuousHeight": 260, "strokeWidth": 0},
                "axis": {
                    "labelColor": "#f8fafc",
                    "titleColor": "#cbd5e1",
                    "gridColor": "rgba(148, 163, 184, 0.15)",
                    "domainColor": "rgba(148, 163, 184, 0.3)",
                    "tickColor": "rgba(148, 163, 184, 0.3)",
                },
                "legend": {"labelColor": "#f8fafc", "titleColor": "#cbd5e1"},
                "title": {"color": "#cbd5e1", "fontSize": 15, "fontWeight": 600},
                "range": {"category": ["#38bdf8", "#16a34a", "#f59e0b", "#dc2626", "#a855f7"]},
                "mark": {"color": "#38bdf8"},
            }
        }

    _ALTAIR_THEME_REGISTERED = True


def apply_theme() -> None:
    """Inject global CSS theme for Streamlit pages."""
    st.markdown(THEME_CSS, unsafe_allow_html=True)
    _enable_altair_theme()
