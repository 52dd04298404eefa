"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Synchronous validation for the console's forms.

Every validator takes the raw widget values and returns ``(cleaned, errors)``.
``errors`` maps a field name to an i18n message key; the form is valid when it
is empty. ``cleaned`` holds the payload-ready values (trimmed strings, parsed
numbers, blanks dropped to None).
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

from config import GENDERS
from utils.coercion import is_blank, parse_optional_number

FormErrors = Dict[str, str]
FormResult = Tuple[Dict[str, Any], FormErrors]

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

LOGIN_PASSWORD_MIN = 6
PASSWORD_MIN = 8
NAME_MIN = 2

OPTIONAL_METRIC_FIELDS = ("waist", "hips", "chest", "arm", "leg", "bodyFat")
OPTIONAL_PROFILE_NUMBERS = ("height", "weight", "maxHeartRate", "restingHeartRate", "leanMass")


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def is_email(value: Any) -> bool:
    return bool(EMAIL_RE.match(_text(value)))


def is_url(value: Any) -> bool:
    parsed = urlparse(_text(value))
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _check_email(data: Dict[str, Any], errors: FormErrors, field: str = "email") -> str:
    email = _text(data.get(field))
    if not is_email(email):
        errors[field] = "validation.email"
    return email


def _check_min(
    data: Dict[str, Any], errors: FormErrors, field: str, minimum: int, key: str, strip: bool = True
) -> str:
    raw = data.get(field)
    value = _text(raw) if strip else ("" if raw is None else str(raw))
    if len(value) < minimum:
        errors[field] = key
    return value


def _check_confirmation(
    data: Dict[str, Any], errors: FormErrors, field: str, confirm_field: str
) -> None:
    if (data.get(field) or "") != (data.get(confirm_field) or ""):
        errors[confirm_field] = "validation.passwords_mismatch"


def _optional_number(
    data: Dict[str, Any], errors: FormErrors, field: str, minimum: Optional[float] = 0
) -> Optional[float]:
    try:
        value = parse_optional_number(data.get(field))
    except (TypeError, ValueError):
        errors[field] = "validation.number"
        return None
    if value is not None and minimum is not None and value < minimum:
        errors[field] = "validation.non_negative"
    return value


def _optional_url(data: Dict[str, Any], errors: FormErrors, field: str) -> Optional[str]:
    value = _text(data.get(field))
    if not value:
        return None
    if not is_url(value):
        errors[field] = "validation.url"
    return value


# --- Auth -------------------------------------------------------------------
def validate_login(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    email = _check_email(data, errors)
    password = _check_min(
        data, errors, "password", LOGIN_PASSWORD_MIN, "validation.password_min_6", strip=False
    )
    return {"email": email, "password": password}, errors


def validate_forgot_password(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    return {"email": _check_email(data, errors)}, errors


def validate_reset_password(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    new_password = _check_min(
        data, errors, "newPassword", PASSWORD_MIN, "validation.password_min_8", strip=False
    )
    _check_confirmation(data, errors, "newPassword", "confirmPassword")
    return {"newPassword": new_password}, errors


def validate_change_password(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    old_password = _check_min(
        data, errors, "oldPassword", PASSWORD_MIN, "validation.password_min_8", strip=False
    )
    new_password = _check_min(
        data, errors, "newPassword", PASSWORD_MIN, "validation.password_min_8", strip=False
    )
    _check_confirmation(data, errors, "newPassword", "confirmPassword")
    return {"oldPassword": old_password, "newPassword": new_password}, errors


# --- People -----------------------------------------------------------------
def validate_new_client(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    email = _check_email(data, errors)
    name = _check_min(data, errors, "name", NAME_MIN, "validation.name_min_2")
    password = _check_min(
        data, errors, "password", PASSWORD_MIN, "validation.password_min_8", strip=False
    )
    _check_confirmation(data, errors, "password", "confirmPassword")
    avatar = _text(data.get("avatarUrl")) or None
    return {"email": email, "name": name, "password": password, "avatarUrl": avatar}, errors


def validate_trainer(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    email = _check_email(data, errors)
    name = _check_min(data, errors, "name", NAME_MIN, "validation.name_min_2")
    password = _check_min(
        data, errors, "password", PASSWORD_MIN, "validation.password_min_8", strip=False
    )
    return {"email": email, "name": name, "password": password}, errors


def validate_profile(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    cleaned: Dict[str, Any] = {}

    name = _text(data.get("name"))
    if not name:
        errors["name"] = "validation.required"
    cleaned["name"] = name

    birth = data.get("birthDate")
    if isinstance(birth, dt.date):
        cleaned["birthDate"] = birth.isoformat()
    elif is_blank(birth):
        cleaned["birthDate"] = None
    else:
        try:
            cleaned["birthDate"] = dt.date.fromisoformat(_text(birth)[:10]).isoformat()
        except ValueError:
            errors["birthDate"] = "validation.date"
            cleaned["birthDate"] = None

    gender = _text(data.get("gender")).upper()
    if gender and gender not in GENDERS:
        errors["gender"] = "validation.gender"
    cleaned["gender"] = gender or None

    for field in OPTIONAL_PROFILE_NUMBERS:
        cleaned[field] = _optional_number(data, errors, field)

    cleaned["avatarUrl"] = _text(data.get("avatarUrl")) or None
    return cleaned, errors


# --- Library ----------------------------------------------------------------
def validate_exercise(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    cleaned: Dict[str, Any] = {}
    for field in ("name", "description", "muscleGroup"):
        value = _text(data.get(field))
        if not value:
            errors[field] = "validation.required"
        cleaned[field] = value
    cleaned["defaultVideoUrl"] = _optional_url(data, errors, "defaultVideoUrl")
    cleaned["defaultImageUrl"] = _optional_url(data, errors, "defaultImageUrl")
    return cleaned, errors


# --- Tracking ---------------------------------------------------------------
def validate_metric(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    cleaned: Dict[str, Any] = {}
    if is_blank(data.get("weight")):
        errors["weight"] = "validation.required"
        cleaned["weight"] = None
    else:
        cleaned["weight"] = _optional_number(data, errors, "weight")
    for field in OPTIONAL_METRIC_FIELDS:
        cleaned[field] = _optional_number(data, errors, field)
    cleaned["notes"] = _text(data.get("notes")) or None
    return cleaned, errors


def validate_schedule(data: Dict[str, Any]) -> FormResult:
    errors: FormErrors = {}
    cleaned: Dict[str, Any] = {}
    for field in ("clientId", "trainingDayId", "date", "time"):
        value = data.get(field)
        if is_blank(value):
            errors[field] = "validation.required"
        cleaned[field] = value
    cleaned["notes"] = _text(data.get("notes")) or None
    return cleaned, errors
