"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

import datetime as dt

import pytest

from utils.ids import draft_id, new_id
from utils.time import (
    days_in_month,
    parse_api_datetime,
    parse_time,
    shift_month,
    sunday_offset,
    to_api_datetime,
    to_local,
    to_utc_iso,
)


@pytest.mark.parametrize(
    "year,month,delta,expected",
    [(2025, 1, -1, (2024, 12)), (2025, 12, 1, (2026, 1)), (2025, 6, 0, (2025, 6)), (2025, 3, -15, (2023, 12))],
)
def test_shift_month(year, month, delta, expected):
    assert shift_month(year, month, delta) == expected


def test_sunday_offset():
    assert sunday_offset(dt.date(2025, 6, 1)) == 0  # Sunday
    assert sunday_offset(dt.date(2025, 6, 7)) == 6  # Saturday
    assert days_in_month(2024, 2) == 29


def test_to_utc_iso_naive_is_local(utc_tz):
    assert to_utc_iso(dt.datetime(2025, 3, 9, 18, 30, 12, 500)) == "2025-03-09T18:30:12.000Z"
    assert to_api_datetime(dt.date(2025, 3, 9), dt.time(7, 5, 30)) == "2025-03-09T07:05:00.000Z"


def test_to_utc_iso_aware():
    madrid = dt.timezone(dt.timedelta(hours=1))
    assert to_utc_iso(dt.datetime(2025, 1, 1, 0, 30, tzinfo=madrid)) == "2024-12-31T23:30:00.000Z"


def test_parse_api_datetime(utc_tz):
    parsed = parse_api_datetime("2025-03-09T18:30:00.000Z")
    assert parsed == dt.datetime(2025, 3, 9, 18, 30, tzinfo=dt.timezone.utc)
    assert to_local(parsed) == dt.datetime(2025, 3, 9, 18, 30)
    assert parse_api_datetime("") is None
    assert parse_api_datetime("not a date") is None


def test_parse_time():
    assert parse_time("07:45") == dt.time(7, 45)
    assert parse_time("later") == dt.time(9, 0)


def test_ids():
    a = new_id()
    assert a != new_id()
    assert len(a) > 10
    wid = draft_id("day")
    assert wid.startswith("day-")
    assert len(wid) == len("day-") + 12
