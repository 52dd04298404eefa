"""Consultations, body metrics and coach notes services."""

import pandas as pd
import pytest

from services.body_metrics_service import BodyMetricsService, latest_metric, metrics_frame, weight_change
from services.coach_notes_service import CoachNotesService
from services.consultations_service import (
    ConsultationsService,
    count_by_status,
    filter_by_status,
    sorted_messages,
)

from conftest import FakeResponse

CONSULTATIONS = [
    {"id": "a", "status": "OPEN"},
    {"id": "b", "status": "RESOLVED"},
    {"id": "c", "status": "OPEN"},
]

METRICS = [
    {"id": "m2", "loggedAt": "2025-02-01T08:00:00.000Z", "weight": 71.0, "waist": "80"},
    {"id": "m1", "loggedAt": "2025-01-01T08:00:00.000Z", "weight": 73.5},
    {"id": "m3", "loggedAt": "2025-03-01T08:00:00.000Z", "weight": None, "bodyFat": 17},
]


# --- Consultations ----------------------------------------------------------
def test_count_and_filter_by_status():
    assert count_by_status(CONSULTATIONS) == {"ALL": 3, "OPEN": 2, "RESOLVED": 1}
    assert [c["id"] for c in filter_by_status(CONSULTATIONS, "OPEN")] == ["a", "c"]
    assert len(filter_by_status(CONSULTATIONS, "ALL")) == 3


def test_sorted_messages():
    consultation = {"messages": [{"createdAt": "2025-01-02"}, {"createdAt": "2025-01-01"}]}
    assert [m["createdAt"] for m in sorted_messages(consultation)] == ["2025-01-01", "2025-01-02"]
    assert sorted_messages({}) == []


def test_list_consultations_all_sends_no_status(api, session, cache):
    session.queue("GET", "/consultations", FakeResponse(200, {"consultations": CONSULTATIONS, "total": 3}))
    service = ConsultationsService(api, cache)
    assert len(service.list_consultations("ALL")) == 3
    assert session.calls[0][2]["params"] is None
    assert service.counts()["OPEN"] == 2
    assert len(session.calls) == 1


def test_list_consultations_missing_is_empty(api, session, cache):
    session.queue("GET", "/consultations", FakeResponse(404))
    assert ConsultationsService(api, cache).list_consultations("OPEN") == []


def test_send_message_rejects_blank_and_invalidates(api, session, cache):
    service = ConsultationsService(api, cache)
    with pytest.raises(ValueError):
        service.send_message("a", "   ")
    assert session.calls == []

    cache.fetch(("consultations", "detail", "a"), lambda: {})
    cache.fetch(("consultations", "list", None), lambda: [])
    session.queue("POST", "/consultations/a/messages", FakeResponse(201, {"id": "m"}))
    service.send_message("a", " Hola ")
    assert session.calls[0][2]["json"] == {"content": "Hola"}
    assert len(cache) == 0


def test_resolve(api, session, cache):
    session.queue("PATCH", "/consultations/a/resolve", FakeResponse(200, {"status": "RESOLVED"}))
    assert ConsultationsService(api, cache).resolve("a") == {"status": "RESOLVED"}


# --- Body metrics -----------------------------------------------------------
def test_metrics_frame_sorted_and_numeric():
    df = metrics_frame(METRICS)
    assert list(df["weight"].iloc[:2]) == [73.5, 71.0]
    assert df["waist"].iloc[1] == 80.0
    assert pd.isna(df["weight"].iloc[2])
    assert str(df["loggedAt"].dt.tz) == "UTC"


def test_metrics_frame_empty_has_columns():
    df = metrics_frame([])
    assert df.empty
    assert "weight" in df.columns
    assert "loggedAt" in df.columns


def test_latest_metric_and_weight_change():
    assert latest_metric(METRICS)["id"] == "m3"
    assert latest_metric([]) is None
    assert weight_change(METRICS) == pytest.approx(-2.5)
    assert weight_change(METRICS[:1]) is None


def test_log_metric_adds_user_and_invalidates(api, session, cache):
    cache.fetch(("body-metrics", "c1"), lambda: [])
    cache.fetch(("clients", "c1"), lambda: {})
    cache.fetch(("body-metrics", "c2"), lambda: [])
    session.queue("POST", "/body-metrics", FakeResponse(201, {"id": "m9"}))
    BodyMetricsService(api, cache).log_metric("c1", {"weight": 70.0, "waist": None})
    assert session.calls[0][2]["json"] == {"weight": 70.0, "userId": "c1"}
    assert ("body-metrics", "c1") not in cache
    assert ("clients", "c1") not in cache
    assert ("body-metrics", "c2") in cache


def test_list_metrics_unwraps_response(api, session, cache):
    session.queue("GET", "/body-metrics", FakeResponse(200, {"metrics": METRICS, "total": 3}))
    assert len(BodyMetricsService(api, cache).list_metrics("c1")) == 3
    assert session.calls[0][2]["params"] == {"userId": "c1"}


def test_photos(api, session, cache):
    service = BodyMetricsService(api, cache)
    with pytest.raises(ValueError):
        service.upload_photo("c1", "  ")
    session.queue("POST", "/body-metrics/photos", FakeResponse(201, {"id": "p1"}))
    session.queue("DELETE", "/body-metrics/photos/p1", FakeResponse(204))
    service.upload_photo("c1", " https://img.example.com/1.jpg ", caption=" ")
    service.delete_photo("c1", "p1")
    assert session.calls[0][2]["json"] == {"imageUrl": "https://img.example.com/1.jpg", "userId": "c1"}


# --- Coach notes ------------------------------------------------------------
def test_notes_newest_first(api, session, cache):
    session.queue(
        "GET",
        "/coach-notes",
        FakeResponse(200, [{"id": "old", "createdAt": "2025-01-01"}, {"id": "new", "createdAt": "2025-02-01"}]),
    )
    notes = CoachNotesService(api, cache).list_notes("c1")
    assert [n["id"] for n in notes] == ["new", "old"]
    assert session.calls[0][2]["params"] == {"clientId": "c1"}


def test_note_mutations(api, session, cache):
    service = CoachNotesService(api, cache)
    with pytest.raises(ValueError):
        service.create_note("c1", "")
    with pytest.raises(ValueError):
        service.update_note("c1", "n1", "  ")
    session.queue("POST", "/coach-notes", FakeResponse(201, {"id": "n1"}))
    session.queue("PATCH", "/coach-notes/n1", FakeResponse(200, {"id": "n1"}))
    session.queue("DELETE", "/coach-notes/n1", FakeResponse(204))
    service.create_note("c1", " Knee pain ")
    service.update_note("c1", "n1", "Knee better")
    service.delete_note("c1", "n1")
    assert session.calls[0][2]["json"] == {"clientId": "c1", "content": "Knee pain"}
    assert session.calls[1][2]["json"] == {"content": "Knee better"}


def test_list_and_detail_keys_do_not_collide(api, session, cache):
    session.queue("GET", "/consultations", FakeResponse(200, {"consultations": CONSULTATIONS}))
    session.queue("GET", "/consultations/OPEN", FakeResponse(200, {"id": "OPEN"}))
    service = ConsultationsService(api, cache)
    assert len(service.list_consultations("OPEN")) == 3
    assert service.get_consultation("OPEN") == {"id": "OPEN"}
    assert ("consultations", "list", "OPEN") in cache
    assert ("consultations", "detail", "OPEN") in cache
