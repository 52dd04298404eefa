import pytest

from persistence.api_client import ApiError
from services.auth_service import NAV_LINKS, AdminTrainersService, AuthService, landing_page, nav_links, role_name
from services.dashboard_service import ClientStats, DashboardService, TrainerStats, active_plan_ref, parse_dashboard
from utils.i18n import EN, ES

from conftest import PROJECT_ROOT, FakeResponse


def test_role_name_variants():
    assert role_name({"role": {"name": "trainer"}}) == "TRAINER"
    assert role_name({"role": "ADMIN"}) == "ADMIN"
    assert role_name({}) is None
    assert role_name(None) is None


def test_landing_page_by_role():
    assert landing_page({"role": "ADMIN"}) == "pages/Admin.py"
    assert landing_page({"role": {"name": "TRAINER"}}) == "pages/Dashboard.py"


def test_login_returns_token_and_user(api, session):
    user = {"id": "t1", "email": "coach@example.com", "role": {"name": "TRAINER"}}
    session.queue("POST", "/auth/login", FakeResponse(200, {"accessToken": "jwt", "user": user}))
    token, logged_in = AuthService(api).login(" coach@example.com ", "secret")
    assert token == "jwt"
    assert logged_in == user
    assert session.calls[0][2]["json"] == {"email": "coach@example.com", "password": "secret"}


def test_login_without_token_fails(api, session):
    session.queue("POST", "/auth/login", FakeResponse(200, {"user": {}}))
    with pytest.raises(ApiError):
        AuthService(api).login("coach@example.com", "secret")


def test_reset_password_requires_token(api, session):
    with pytest.raises(ValueError):
        AuthService(api).reset_password("", "newsecret")
    assert session.calls == []


def test_update_profile_merges_and_invalidates_dashboard(api, session, cache):
    cache.fetch(("dashboard",), lambda: {})
    session.queue("PATCH", "/users/profile", FakeResponse(200, {"name": "Coach Ana", "avatarUrl": "/a.png", "id": "t1"}))
    merged = AuthService(api, cache).update_profile({"name": "Ana", "avatarUrl": "/a.png"})
    assert merged == {"name": "Coach Ana", "avatarUrl": "/a.png"}
    assert ("dashboard",) not in cache


def test_admin_trainers(api, session, cache):
    session.queue("GET", "/admin/trainers", FakeResponse(500))
    session.queue("POST", "/admin/trainers", FakeResponse(201, {"id": "t2"}))
    session.queue("GET", "/admin/trainers", FakeResponse(200, [{"id": "t2"}]))
    service = AdminTrainersService(api, cache)
    assert service.list_trainers() == []
    service.create_trainer("new@example.com", "Nuevo", "longpass")
    assert service.list_trainers() == [{"id": "t2"}]
    assert session.calls[1][2]["json"] == {"email": "new@example.com", "name": "Nuevo", "password": "longpass"}


def test_parse_trainer_dashboard():
    dashboard = parse_dashboard(
        {"role": "TRAINER", "data": {"totalClients": 4, "totalExercises": "12", "totalPlans": 2, "sessionsToday": None}}
    )
    assert dashboard.stats == TrainerStats(4, 12, 2, 0)


def test_parse_client_dashboard():
    dashboard = parse_dashboard(
        {
            "role": "client",
            "data": {
                "completedWorkoutsThisMonth": 5,
                "activePlan": {"id": "p1", "name": "Fuerza"},
                "nextSession": None,
            },
        }
    )
    assert dashboard.role == "CLIENT"
    assert isinstance(dashboard.stats, ClientStats)
    assert dashboard.stats.completed_workouts_this_month == 5
    assert dashboard.stats.next_session is None


def test_dashboard_service_caches(api, session, cache):
    session.queue("GET", "/dashboard/stats", FakeResponse(200, {"role": "TRAINER", "data": {"totalClients": 1}}))
    service = DashboardService(api, cache)
    assert service.get_dashboard().stats.total_clients == 1
    assert service.get_dashboard().stats.total_clients == 1
    assert len(session.calls) == 1


def test_client_navigation_reaches_plan_and_progress():
    pages = [page for page, _, _ in nav_links({"role": "CLIENT"})]
    assert "pages/MyPlan.py" in pages
    assert "pages/MyProgress.py" in pages
    assert "pages/Clients.py" not in pages


def test_navigation_by_role():
    assert nav_links({"role": {"name": "ADMIN"}})[0][0] == "pages/Admin.py"
    assert nav_links({"role": "TRAINER"}) == NAV_LINKS["TRAINER"]
    assert nav_links(None) == NAV_LINKS["TRAINER"]


@pytest.mark.parametrize("role", sorted(NAV_LINKS))
def test_nav_links_point_at_real_pages(role):
    for page, label_key, _ in NAV_LINKS[role]:
        assert (PROJECT_ROOT / page).is_file(), page
        assert label_key in EN and label_key in ES


def test_active_plan_from_client_dashboard():
    dashboard = parse_dashboard({"role": "CLIENT", "data": {"activePlan": {"id": "p1", "name": "Fuerza"}}})
    assert active_plan_ref(dashboard, {"activePlan": {"id": "p2"}}) == {"id": "p1", "name": "Fuerza"}


def test_active_plan_falls_back_to_user_record():
    dashboard = parse_dashboard({"role": "CLIENT", "data": {}})
    assert active_plan_ref(dashboard, {"activePlan": {"id": "p2"}}) == {"id": "p2"}
    assert active_plan_ref(None, {"activePlanId": "p3"}) == {"id": "p3"}
    assert active_plan_ref(dashboard, {"activePlan": None}) is None
    assert active_plan_ref(None, None) is None
