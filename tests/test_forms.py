import datetime as dt

import pytest

from services.forms import (
    is_url,
    validate_change_password,
    validate_exercise,
    validate_forgot_password,
    validate_login,
    validate_metric,
    validate_new_client,
    validate_profile,
    validate_reset_password,
    validate_schedule,
    validate_trainer,
)


@pytest.mark.parametrize(
    "email,password,expected",
    [
        ("coach@example.com", "secret", {}),
        ("coach@example", "secret", {"email": "validation.email"}),
        ("", "12345", {"email": "validation.email", "password": "validation.password_min_6"}),
        ("  coach@example.com ", "     1", {}),
    ],
)
def test_validate_login(email, password, expected):
    cleaned, errors = validate_login({"email": email, "password": password})
    assert errors == expected
    assert cleaned["email"] == email.strip()


def test_validate_new_client():
    ok = {
        "email": "ana@example.com",
        "name": " Ana ",
        "password": "longpass",
        "confirmPassword": "longpass",
        "avatarUrl": "",
    }
    cleaned, errors = validate_new_client(ok)
    assert errors == {}
    assert cleaned["name"] == "Ana"
    assert cleaned["avatarUrl"] is None

    _, errors = validate_new_client(
        {**ok, "name": "A", "password": "short", "confirmPassword": "other"}
    )
    assert errors == {
        "name": "validation.name_min_2",
        "password": "validation.password_min_8",
        "confirmPassword": "validation.passwords_mismatch",
    }


def test_validate_trainer():
    _, errors = validate_trainer({"email": "bad", "name": "Jo", "password": "12345678"})
    assert errors == {"email": "validation.email"}


def test_password_flows():
    _, errors = validate_forgot_password({"email": "x@y.z"})
    assert errors == {}

    cleaned, errors = validate_reset_password({"newPassword": "newsecret", "confirmPassword": "newsecret"})
    assert errors == {}
    assert cleaned == {"newPassword": "newsecret"}
    _, errors = validate_reset_password({"newPassword": "newsecret", "confirmPassword": "nope"})
    assert errors == {"confirmPassword": "validation.passwords_mismatch"}

    _, errors = validate_change_password(
        {"oldPassword": "short", "newPassword": "longenough", "confirmPassword": "longenough"}
    )
    assert errors == {"oldPassword": "validation.password_min_8"}


def test_validate_exercise_urls():
    base = {"name": "Remo", "description": "Con barra", "muscleGroup": "DORSAL"}
    cleaned, errors = validate_exercise({**base, "defaultVideoUrl": " https://youtu.be/x ", "defaultImageUrl": ""})
    assert errors == {}
    assert cleaned["defaultVideoUrl"] == "https://youtu.be/x"
    assert cleaned["defaultImageUrl"] is None

    _, errors = validate_exercise({**base, "defaultVideoUrl": "ftp://files/x", "description": " "})
    assert errors == {"defaultVideoUrl": "validation.url", "description": "validation.required"}


def test_is_url():
    assert is_url("http://example.com/a.png")
    assert not is_url("example.com")
    assert not is_url("")


def test_validate_metric():
    cleaned, errors = validate_metric({"weight": "72,5", "waist": "", "bodyFat": "18", "notes": "  "})
    assert errors == {}
    assert cleaned["weight"] == 72.5
    assert cleaned["waist"] is None
    assert cleaned["bodyFat"] == 18.0
    assert cleaned["notes"] is None

    _, errors = validate_metric({"weight": "", "arm": "abc", "leg": "-1"})
    assert errors == {
        "weight": "validation.required",
        "arm": "validation.number",
        "leg": "validation.non_negative",
    }


def test_validate_profile():
    cleaned, errors = validate_profile(
        {"name": "Ana", "birthDate": dt.date(1990, 5, 17), "gender": "female", "height": "168", "weight": ""}
    )
    assert errors == {}
    assert cleaned["birthDate"] == "1990-05-17"
    assert cleaned["gender"] == "FEMALE"
    assert cleaned["height"] == 168.0
    assert cleaned["weight"] is None

    _, errors = validate_profile({"name": "", "birthDate": "17/05/1990", "gender": "x"})
    assert errors == {
        "name": "validation.required",
        "birthDate": "validation.date",
        "gender": "validation.gender",
    }


def test_validate_schedule_requires_everything_but_notes():
    _, errors = validate_schedule({"clientId": "c1", "trainingDayId": "", "date": None, "time": dt.time(9)})
    assert errors == {"trainingDayId": "validation.required", "date": "validation.required"}
