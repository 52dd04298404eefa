import pytest

from persistence.api_client import UnauthorizedError
from services.clients_service import DEFAULT_AVATAR, ClientsService

from conftest import FakeResponse

USERS = [
    {"id": "c1", "name": "Ana", "role": {"name": "CLIENT"}, "activePlan": {"id": "p1", "name": "Fuerza"}},
    {"id": "c2", "name": "Luis", "role": "client"},
    {"id": "t1", "name": "Coach", "role": {"name": "TRAINER"}},
]


def test_list_clients_keeps_only_clients(api, session, cache):
    session.queue("GET", "/users", FakeResponse(200, USERS))
    service = ClientsService(api, cache)
    assert [c["id"] for c in service.list_clients()] == ["c1", "c2"]
    assert [c["id"] for c in service.clients_with_plan()] == ["c1"]
    assert len(session.calls) == 1


@pytest.mark.parametrize("status", [404, 500])
def test_list_clients_missing_is_empty(api, session, cache, status):
    session.queue("GET", "/users", FakeResponse(status))
    assert ClientsService(api, cache).list_clients() == []


def test_unauthorized_propagates(api, session, cache):
    session.queue("GET", "/users", FakeResponse(401, {"message": "Unauthorized"}))
    with pytest.raises(UnauthorizedError):
        ClientsService(api, cache).list_clients()


def test_get_client(api, session, cache):
    session.queue("GET", "/users/c1", FakeResponse(200, USERS[0]))
    session.queue("GET", "/users/zz", FakeResponse(404))
    service = ClientsService(api, cache)
    assert service.get_client("c1")["name"] == "Ana"
    assert service.get_client("zz") is None
    assert service.get_client("") is None


def test_create_client_registers_with_client_role(api, session, cache):
    cache.fetch(("clients",), lambda: [])
    cache.fetch(("dashboard",), lambda: {})
    session.queue("POST", "/auth/register", FakeResponse(201, {"id": "c3"}))
    ClientsService(api, cache).create_client("new@example.com", "Nuevo", "longpass")
    assert session.calls[0][2]["json"] == {
        "email": "new@example.com",
        "name": "Nuevo",
        "password": "longpass",
        "avatarUrl": DEFAULT_AVATAR,
        "role": "CLIENT",
    }
    assert len(cache) == 0


def test_assign_plan_invalidates_client_and_dashboard(api, session, cache):
    for key in (("clients",), ("clients", "c1"), ("dashboard",), ("exercises",)):
        cache.fetch(key, lambda: None)
    session.queue("PATCH", "/users/c1/plan", FakeResponse(200, {}))
    ClientsService(api, cache).assign_plan("c1", "")
    assert session.calls[0][2]["json"] == {"planId": None}
    assert ("exercises",) in cache
    assert len(cache) == 1


def test_update_and_delete_client(api, session, cache):
    session.queue("PATCH", "/users/c1", FakeResponse(200, {"id": "c1"}))
    session.queue("DELETE", "/users/c1", FakeResponse(204))
    service = ClientsService(api, cache)
    service.update_client("c1", {"weight": 70.0})
    service.delete_client("c1")
    assert session.calls[0][2]["json"] == {"weight": 70.0}
    assert session.empty
