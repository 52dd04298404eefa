from persistence.repositories import (
    AdminTrainersRepo,
    AuthRepo,
    BodyMetricsRepo,
    ConsultationsRepo,
    DashboardRepo,
    ScheduledWorkoutsRepo,
    TrainingPlansRepo,
    UsersRepo,
)

from conftest import FakeResponse


def test_users_repo_paths(api, session):
    session.queue("GET", "/users", FakeResponse(200, [{"id": "u1"}]))
    session.queue("GET", "/users/u1", FakeResponse(200, {"id": "u1"}))
    session.queue("PATCH", "/users/u1", FakeResponse(200, {"id": "u1", "name": "Ana"}))
    session.queue("PATCH", "/users/u1/plan", FakeResponse(200, {}))
    session.queue("PATCH", "/users/profile", FakeResponse(200, {}))
    session.queue("DELETE", "/users/u1", FakeResponse(204))

    repo = UsersRepo(api)
    assert repo.list() == [{"id": "u1"}]
    assert repo.get("u1") == {"id": "u1"}
    repo.update("u1", {"name": "Ana"})
    repo.assign_plan("u1", None)
    repo.update_profile({"name": "Coach"})
    repo.delete("u1")

    assert session.calls[3][2]["json"] == {"planId": None}
    assert session.calls[4][2]["json"] == {"name": "Coach"}
    assert session.empty


def test_training_plan_nested_paths(api, session):
    session.queue("POST", "/training-plans/p1/days", FakeResponse(201, {"id": "d1"}))
    session.queue("POST", "/training-plans/p1/days/d1/exercises", FakeResponse(201, {"id": "x1"}))
    repo = TrainingPlansRepo(api)
    assert repo.add_day("p1", {"name": "Day 1", "order": 1}) == {"id": "d1"}
    assert repo.add_day_exercise("p1", "d1", {"exerciseId": "e1"}) == {"id": "x1"}


def test_scheduled_workouts_list_key_and_reschedule(api, session):
    session.queue("GET", "/scheduled-workouts", FakeResponse(200, {"workouts": [{"id": "w1"}]}))
    session.queue("PATCH", "/scheduled-workouts/w1", FakeResponse(200, {"id": "w1"}))
    repo = ScheduledWorkoutsRepo(api)
    assert repo.list(startDate="a", endDate="b") == [{"id": "w1"}]
    assert session.calls[0][2]["params"] == {"startDate": "a", "endDate": "b"}
    repo.reschedule("w1", "2025-03-01T09:00:00.000Z")
    assert session.calls[1][2]["json"] == {"newDate": "2025-03-01T09:00:00.000Z"}


def test_consultations_page_and_actions(api, session):
    session.queue("GET", "/consultations", FakeResponse(200, [{"id": "c1"}]))
    session.queue("POST", "/consultations/c1/messages", FakeResponse(201, {"id": "m1"}))
    session.queue("PATCH", "/consultations/c1/resolve", FakeResponse(200, {"status": "RESOLVED"}))
    repo = ConsultationsRepo(api)
    assert repo.page("OPEN") == {"consultations": [{"id": "c1"}], "total": 1}
    assert session.calls[0][2]["params"] == {"status": "OPEN"}
    repo.send_message("c1", "Hola")
    assert session.calls[1][2]["json"] == {"content": "Hola"}
    repo.resolve("c1")


def test_body_metrics_list_unwraps_metrics(api, session):
    session.queue("GET", "/body-metrics", FakeResponse(200, {"metrics": [{"id": "m1"}], "total": 1}))
    assert BodyMetricsRepo(api).list(userId="u1") == [{"id": "m1"}]


def test_dashboard_stats(api, session):
    session.queue("GET", "/dashboard/stats", FakeResponse(200, {"role": "TRAINER", "data": {}}))
    assert DashboardRepo(api).stats()["role"] == "TRAINER"


def test_auth_repo_payloads(api, session):
    session.queue("POST", "/auth/login", FakeResponse(200, {"accessToken": "t"}))
    session.queue("POST", "/auth/reset-password", FakeResponse(201))
    session.queue("POST", "/auth/change-password", FakeResponse(201))
    repo = AuthRepo(api)
    assert repo.login("a@b.co", "secret") == {"accessToken": "t"}
    repo.reset_password("tok", "newsecret")
    repo.change_password("oldsecret", "newsecret")
    assert session.calls[1][2]["json"] == {"token": "tok", "newPassword": "newsecret"}
    assert session.calls[2][2]["json"] == {"oldPassword": "oldsecret", "newPassword": "newsecret"}


def test_admin_trainers_reset_password(api, session):
    session.queue("POST", "/admin/trainers/t1/reset-password", FakeResponse(201))
    AdminTrainersRepo(api).reset_password("t1", "longenough")
    assert session.calls[0][2]["json"] == {"newPassword": "longenough"}
