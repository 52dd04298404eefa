"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Pure helpers to build page view models for unit testing.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from services.calendar_service import workout_status
from services.dashboard_service import ClientStats, Dashboard, TrainerStats
from services.plan_wizard import WizardStep
from utils.coercion import safe_float_optional, safe_int_optional
from utils.formatting import fmt_cm, fmt_date, fmt_datetime, fmt_kg, fmt_percent, fmt_rest, fmt_sets_reps, fmt_time
from utils.i18n import t
from utils.time import parse_api_datetime, to_local


@dataclass(frozen=True)
class StatCard:
    label: str
    value: str
    description: str


@dataclass(frozen=True)
class ClientCard:
    client_id: str
    name: str
    email: str
    initials: str
    avatar_url: Optional[str]
    plan_label: str


@dataclass(frozen=True)
class PlanCard:
    plan_id: str
    name: str
    description: str
    days: int
    exercises: int


@dataclass(frozen=True)
class ExerciseLine:
    name: str
    prescription: str
    details: List[str]


@dataclass(frozen=True)
class WorkoutChip:
    workout_id: str
    label: str
    status: str


@dataclass(frozen=True)
class ConsultationRow:
    consultation_id: str
    subject: str
    client: str
    status: str
    priority: str
    priority_icon: str
    preview: str
    created: str


@dataclass(frozen=True)
class WizardStepView:
    index: int
    label: str
    state: str


PRIORITY_ICONS = {"HIGH": "🔴", "MEDIUM": "🟠", "LOW": "🟢"}
STATUS_ICONS = {"scheduled": "🗓️", "completed": "✅", "missed": "⚠️"}
WIZARD_LABELS = {
    WizardStep.INFO: "wizard.steps.info",
    WizardStep.STRUCTURE: "wizard.steps.structure",
    WizardStep.EXERCISES: "wizard.steps.exercises",
    WizardStep.REVIEW: "wizard.steps.review",
}


def initials(name: Optional[str]) -> str:
    parts = [p for p in str(name or "").split() if p]
    if not parts:
        return "?"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[-1][0]).upper()


def display_name(user: Optional[Dict[str, Any]]) -> str:
    if not user:
        return ""
    return str(user.get("name") or user.get("email") or "")


def muscle_group_label(group: Optional[str]) -> str:
    """Translated muscle group; unknown backend names are shown as sent."""
    if not group:
        return t("exercises.ungrouped")
    key = f"exercises.muscle_groups.{group}"
    label = t(key)
    return str(group) if label == key else label


def _local_datetime(value: Any) -> Optional[dt.datetime]:
    return to_local(parse_api_datetime(value))


# --- Dashboard --------------------------------------------------------------
def build_stat_cards(dashboard: Dashboard) -> List[StatCard]:
    stats = dashboard.stats
    if isinstance(stats, TrainerStats):
        return [
            StatCard(t("dashboard.stats.total_clients"), str(stats.total_clients), t("dashboard.stats.clients_desc")),
            StatCard(t("dashboard.stats.total_exercises"), str(stats.total_exercises), t("dashboard.stats.exercises_desc")),
            StatCard(t("dashboard.stats.total_plans"), str(stats.total_plans), t("dashboard.stats.plans_desc")),
            StatCard(t("dashboard.stats.sessions_today"), str(stats.sessions_today), t("dashboard.stats.sessions_today_desc")),
        ]
    return [
        StatCard(
            t("dashboard.stats.sessions_month"),
            str(stats.completed_workouts_this_month),
            t("dashboard.stats.sessions_month_desc"),
        )
    ]


def next_session_label(stats: ClientStats) -> Optional[str]:
    session = stats.next_session or {}
    when = _local_datetime(session.get("scheduledFor"))
    if when is None:
        return None
    return t("dashboard.next_session.scheduled_for", date=fmt_datetime(when, "short"))


# --- Clients ----------------------------------------------------------------
def build_client_card(client: Dict[str, Any]) -> ClientCard:
    name = display_name(client)
    plan = client.get("activePlan") or {}
    return ClientCard(
        client_id=str(client.get("id") or ""),
        name=name,
        email=str(client.get("email") or ""),
        initials=initials(name),
        avatar_url=client.get("avatarUrl") or None,
        plan_label=str(plan.get("name")) if plan.get("name") else t("clients.no_plan"),
    )


def build_profile_facts(client: Dict[str, Any]) -> List[tuple]:
    """(label, value) pairs for the profile panel, skipping unknown values."""
    facts = []
    birth = client.get("birthDate")
    if birth:
        parsed = parse_api_datetime(birth)
        facts.append((t("profile.birth_date"), fmt_date(parsed.date()) if parsed else str(birth)))
    gender = client.get("gender")
    if gender:
        facts.append((t("profile.gender"), t(f"profile.genders.{str(gender).lower()}")))
    for field, label, fmt in (
        ("height", "profile.height", fmt_cm),
        ("weight", "profile.weight", fmt_kg),
        ("leanMass", "profile.lean_mass", fmt_kg),
    ):
        value = safe_float_optional(client.get(field))
        if value is not None:
            facts.append((t(label), fmt(value)))
    for field, label in (("maxHeartRate", "profile.max_hr"), ("restingHeartRate", "profile.resting_hr")):
        value = safe_int_optional(client.get(field))
        if value is not None:
            facts.append((t(label), f"{value} bpm"))
    return facts


# --- Plans ------------------------------------------------------------------
def build_plan_card(plan: Dict[str, Any]) -> PlanCard:
    days = plan.get("days") or []
    return PlanCard(
        plan_id=str(plan.get("id") or ""),
        name=str(plan.get("name") or ""),
        description=str(plan.get("description") or ""),
        days=len(days),
        exercises=sum(len(d.get("exercises") or []) for d in days),
    )


def build_exercise_line(day_exercise: Dict[str, Any]) -> ExerciseLine:
    exercise = day_exercise.get("exercise") or {}
    details: List[str] = []
    rir = safe_int_optional(day_exercise.get("targetRir"))
    if rir is not None:
        details.append(f"RIR {rir}")
    rest = safe_int_optional(day_exercise.get("restSeconds"))
    if rest:
        details.append(t("plans.rest", rest=fmt_rest(rest)))
    for field in ("customDescription", "coachNotes"):
        if day_exercise.get(field):
            details.append(str(day_exercise[field]))
    return ExerciseLine(
        name=str(exercise.get("name") or day_exercise.get("name") or ""),
        prescription=fmt_sets_reps(
            safe_int_optional(day_exercise.get("targetSets")), day_exercise.get("targetReps")
        ),
        details=details,
    )


def build_wizard_progress(current: WizardStep) -> List[WizardStepView]:
    views = []
    for step in WizardStep:
        if step < current:
            state = "done"
        elif step == current:
            state = "current"
        else:
            state = "upcoming"
        views.append(WizardStepView(int(step), t(WIZARD_LABELS[step]), state))
    return views


# --- Calendar ---------------------------------------------------------------
def build_workout_chip(workout: Dict[str, Any], now: Optional[dt.datetime] = None) -> WorkoutChip:
    when = _local_datetime(workout.get("scheduledFor"))
    who = workout.get("clientName") or display_name(workout.get("user")) or workout.get("dayName") or ""
    label = f"{fmt_time(when)} {who}".strip() if when else str(who)
    return WorkoutChip(
        workout_id=str(workout.get("id") or ""),
        label=label,
        status=workout_status(workout, now),
    )


def build_workout_details(workout: Dict[str, Any], now: Optional[dt.datetime] = None) -> Dict[str, Any]:
    when = _local_datetime(workout.get("scheduledFor"))
    day = workout.get("trainingDay") or {}
    plan = day.get("plan") or {}
    status = workout_status(workout, now)
    return {
        "status": status,
        "status_label": f"{STATUS_ICONS[status]} {t(f'calendar.status.{status}')}",
        "date": fmt_date(when, "full") if when else "",
        "time": fmt_time(when) if when else "",
        "client": workout.get("clientName") or display_name(workout.get("user")),
        "plan": workout.get("planName") or plan.get("name") or "",
        "day": workout.get("dayName") or day.get("name") or "",
        "notes": workout.get("notes") or "",
        "scheduled_at": when,
    }


# --- Inbox ------------------------------------------------------------------
def build_consultation_row(consultation: Dict[str, Any]) -> ConsultationRow:
    messages = sorted(consultation.get("messages") or [], key=lambda m: str(m.get("createdAt") or ""))
    preview = str(messages[-1].get("content") or "") if messages else ""
    if len(preview) > 80:
        preview = preview[:77] + "..."
    priority = str(consultation.get("priority") or "MEDIUM").upper()
    status = str(consultation.get("status") or "OPEN").upper()
    created = _local_datetime(consultation.get("createdAt"))
    client = consultation.get("client") or {}
    return ConsultationRow(
        consultation_id=str(consultation.get("id") or ""),
        subject=str(consultation.get("subject") or t("inbox.no_subject")),
        client=display_name(client) or str(consultation.get("clientName") or ""),
        status=t(f"inbox.status.{status.lower()}"),
        priority=t(f"inbox.priority.{priority.lower()}"),
        priority_icon=PRIORITY_ICONS.get(priority, "⚪"),
        preview=preview,
        created=fmt_datetime(created, "short") if created else "",
    )


def build_message_view(message: Dict[str, Any], current_user_id: Optional[str]) -> Dict[str, Any]:
    sender = message.get("sender") or {}
    sent = _local_datetime(message.get("createdAt"))
    mine = bool(current_user_id) and str(message.get("senderId")) == str(current_user_id)
    return {
        "role": "user" if mine else "assistant",
        "author": t("inbox.you") if mine else display_name(sender) or t("inbox.client"),
        "content": str(message.get("content") or ""),
        "sent": fmt_datetime(sent, "short") if sent else "",
    }


# --- Body metrics -----------------------------------------------------------
def build_metric_row(metric: Dict[str, Any]) -> Dict[str, str]:
    logged = _local_datetime(metric.get("loggedAt"))
    row = {
        t("metrics.columns.date"): fmt_date(logged) if logged else "",
        t("metrics.columns.weight"): fmt_kg(safe_float_optional(metric.get("weight"))),
        t("metrics.columns.body_fat"): fmt_percent(safe_float_optional(metric.get("bodyFat"))),
    }
    for field in ("waist", "hips", "chest", "arm", "leg"):
        row[t(f"metrics.columns.{field}")] = fmt_cm(safe_float_optional(metric.get(field)))
    row[t("metrics.columns.notes")] = str(metric.get("notes") or "")
    return row
