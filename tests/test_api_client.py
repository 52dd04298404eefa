import pytest
import requests

from persistence.api_client import (
    GENERIC_ERROR,
    ApiClient,
    ApiError,
    UnauthorizedError,
    as_list,
    extract_message,
    is_missing,
)

from conftest import API_URL, FakeResponse, FakeSession


def test_headers_carry_bearer_token(api, session):
    session.queue("GET", "/exercises", FakeResponse(200, [{"id": "e1"}]))
    assert api.get("/exercises") == [{"id": "e1"}]
    _, _, kwargs = session.calls[0]
    assert kwargs["headers"]["Authorization"] == "Bearer tok-123"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == 15.0


def test_anonymous_requests_have_no_authorization_header(session):
    client = ApiClient(base_url=API_URL + "/", session=session)
    session.queue("POST", "/auth/forgot-password", FakeResponse(201, {"ok": True}))
    client.post("/auth/forgot-password", json_payload={"email": "a@b.co"})
    _, url, kwargs = session.calls[0]
    assert url == f"{API_URL}/auth/forgot-password"
    assert "Authorization" not in kwargs["headers"]
    assert kwargs["json"] == {"email": "a@b.co"}


def test_none_params_are_dropped(api, session):
    session.queue("GET", "/consultations", FakeResponse(200, {"consultations": []}))
    api.get("/consultations", params={"status": None, "page": ""})
    assert session.calls[0][2]["params"] is None


def test_empty_body_returns_none(api, session):
    session.queue("DELETE", "/exercises/e1", FakeResponse(204))
    assert api.delete("/exercises/e1") is None


def test_error_message_from_backend(api, session):
    session.queue("POST", "/exercises", FakeResponse(400, {"message": ["name should not be empty", "bad url"]}))
    with pytest.raises(ApiError) as info:
        api.post("/exercises", json_payload={})
    assert info.value.status_code == 400
    assert info.value.message == "name should not be empty. bad url"
    assert info.value.detail == "name should not be empty. bad url"


def test_error_without_message_uses_generic_text(api, session):
    session.queue("GET", "/users", FakeResponse(500))
    with pytest.raises(ApiError) as info:
        api.get("/users")
    assert info.value.message == GENERIC_ERROR
    assert info.value.detail is None
    assert is_missing(info.value)


def test_unauthorized_triggers_callback(session):
    calls = []
    client = ApiClient(base_url=API_URL, session=session, on_unauthorized=lambda: calls.append(1))
    session.queue("GET", "/dashboard/stats", FakeResponse(401, {"message": "Unauthorized"}))
    with pytest.raises(UnauthorizedError):
        client.get("/dashboard/stats")
    assert calls == [1]


def test_failed_login_does_not_trigger_callback(session):
    calls = []
    client = ApiClient(base_url=API_URL, session=session, on_unauthorized=lambda: calls.append(1))
    session.queue("POST", "/auth/login", FakeResponse(401, {"message": "Invalid credentials"}))
    with pytest.raises(UnauthorizedError) as info:
        client.post("/auth/login", json_payload={"email": "a@b.co", "password": "x"})
    assert info.value.detail == "Invalid credentials"
    assert calls == []


def test_transport_failure_becomes_api_error():
    class BrokenSession(FakeSession):
        def request(self, method, url, **kwargs):
            raise requests.ConnectionError("refused")

    client = ApiClient(base_url=API_URL, session=BrokenSession([]))
    with pytest.raises(ApiError) as info:
        client.get("/users")
    assert info.value.status_code is None
    assert info.value.message == GENERIC_ERROR


def test_extract_message_variants():
    assert extract_message({"message": "  nope "}) == "nope"
    assert extract_message({"error": "Bad Request"}) == "Bad Request"
    assert extract_message(None, fallback="x") == "x"
    assert extract_message({"message": []}, fallback="x") == "x"


def test_as_list_shapes():
    assert as_list([{"id": 1}]) == [{"id": 1}]
    assert as_list({"workouts": [{"id": 2}]}, "workouts") == [{"id": 2}]
    assert as_list({"data": [{"id": 3}]}) == [{"id": 3}]
    assert as_list({"total": 0}) == []
    assert as_list(None) == []


def test_is_missing_only_for_404_and_500():
    assert is_missing(ApiError(404, None))
    assert is_missing(ApiError(500, None))
    assert not is_missing(ApiError(403, None))
    assert not is_missing(ValueError("x"))
