"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import datetime as dt

import pytest

from services.dashboard_service import ClientStats, Dashboard, TrainerStats
from services.plan_wizard import WizardStep
from services.presenters import (
    build_client_card,
    build_consultation_row,
    build_exercise_line,
    build_message_view,
    build_plan_card,
    build_profile_facts,
    build_stat_cards,
    build_wizard_progress,
    build_workout_details,
    display_name,
    initials,
    muscle_group_label,
)


@pytest.mark.parametrize(
    "name,expected",
    [("Ana García López", "AL"), ("luis", "LU"), ("", "?"), (None, "?")],
)
def test_initials(name, expected):
    assert initials(name) == expected


def test_display_name_falls_back_to_email():
    assert display_name({"email": "a@b.c"}) == "a@b.c"
    assert display_name(None) == ""


def test_client_card_without_plan():
    card = build_client_card({"id": "c1", "name": "Ana Ruiz", "email": "ana@example.com"})
    assert card.initials == "AR"
    assert card.plan_label == "No plan"
    assert card.avatar_url is None


def test_client_card_with_plan():
    card = build_client_card({"id": "c1", "name": "Ana", "activePlan": {"name": "Fuerza"}})
    assert card.plan_label == "Fuerza"


def test_profile_facts_skip_unknown_values():
    facts = dict(build_profile_facts({"gender": "FEMALE", "height": "168", "weight": None, "maxHeartRate": 190}))
    assert facts["Gender"] == "Female"
    assert facts["Height"].startswith("168")
    assert facts["Max heart rate"] == "190 bpm"
    assert len(facts) == 3


def test_plan_card_counts():
    card = build_plan_card({"id": "p1", "name": "Full body", "days": [{"exercises": [{}, {}]}, {"exercises": None}]})
    assert (card.days, card.exercises) == (2, 2)


def test_exercise_line():
    line = build_exercise_line(
        {
            "exercise": {"name": "Sentadilla"},
            "targetSets": 4,
            "targetReps": "6-8",
            "targetRir": 2,
            "restSeconds": 90,
            "coachNotes": "Pausa abajo",
        }
    )
    assert line.name == "Sentadilla"
    assert line.prescription == "4 × 6-8"
    assert line.details[0] == "RIR 2"
    assert line.details[1].startswith("Rest 90")
    assert line.details[2] == "Pausa abajo"


def test_wizard_progress_states():
    views = build_wizard_progress(WizardStep.EXERCISES)
    assert [v.state for v in views] == ["done", "done", "current", "upcoming"]
    assert views[0].label == "Information"
    assert views[-1].label == "Review"


def test_stat_cards_by_role():
    trainer = build_stat_cards(Dashboard("TRAINER", TrainerStats(total_clients=7)))
    assert len(trainer) == 4
    assert (trainer[0].label, trainer[0].value) == ("Clients", "7")

    client = build_stat_cards(Dashboard("CLIENT", ClientStats(completed_workouts_this_month=3)))
    assert [(c.label, c.value) for c in client] == [("Sessions this month", "3")]


def test_workout_details_completed(utc_tz):
    details = build_workout_details(
        {
            "scheduledFor": "2025-03-09T18:30:00.000Z",
            "completed": True,
            "user": {"name": "Ana"},
            "trainingDay": {"name": "Pierna", "plan": {"name": "Fuerza"}},
        }
    )
    assert details["status"] == "completed"
    assert details["status_label"].endswith("Completed")
    assert (details["client"], details["plan"], details["day"]) == ("Ana", "Fuerza", "Pierna")
    assert details["time"] == "18:30"
    assert details["scheduled_at"] == dt.datetime(2025, 3, 9, 18, 30)


def test_consultation_row_preview_and_priority():
    row = build_consultation_row(
        {
            "id": "q1",
            "priority": "high",
            "status": "OPEN",
            "client": {"name": "Ana"},
            "messages": [
                {"createdAt": "2025-01-02T10:00:00.000Z", "content": "x" * 100},
                {"createdAt": "2025-01-01T10:00:00.000Z", "content": "first"},
            ],
        }
    )
    assert row.subject == "(no subject)"
    assert row.priority == "High"
    assert row.priority_icon == "🔴"
    assert row.status == "Open"
    assert row.preview == "x" * 77 + "..."
    assert row.client == "Ana"


def test_message_view_sides():
    message = {"senderId": "t1", "sender": {"name": "Ana"}, "content": "Hola"}
    mine = build_message_view(message, "t1")
    assert (mine["role"], mine["author"]) == ("user", "You")
    other = build_message_view(message, "t2")
    assert (other["role"], other["author"]) == ("assistant", "Ana")
    assert build_message_view({"content": "?"}, None)["author"] == "Client"


def test_muscle_group_label():
    assert muscle_group_label("PIERNA") == "Legs"
    assert muscle_group_label("Glúteo medio") == "Glúteo medio"
    assert muscle_group_label("") == "Other"
