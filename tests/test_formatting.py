import datetime as dt

from utils.formatting import (
    fmt_date,
    fmt_decimal,
    fmt_kg,
    fmt_rest,
    fmt_sets_reps,
    month_title,
    set_locale,
    weekday_headers,
)


def _plain(text):
    return text.replace("\u00A0", " ").replace("\u202F", " ")


def test_spanish_formatting():
    set_locale("es")
    assert fmt_decimal(72.5, 1) == "72,5"
    assert _plain(fmt_kg(62.5)) == "62,5 kg"
    assert month_title(2025, 3) == "Marzo 2025"
    assert weekday_headers()[0].lower().startswith("dom")


def test_english_formatting():
    set_locale("en")
    assert _plain(fmt_kg(70)) == "70.0 kg"
    assert month_title(2025, 3) == "March 2025"
    assert weekday_headers() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert fmt_date(dt.date(2025, 3, 9)) == "Mar 9, 2025"


def test_unknown_locale_falls_back_to_spanish():
    set_locale("xx_YY")
    assert fmt_decimal(1.5, 1) == "1,5"
    set_locale("en")


def test_fmt_rest():
    assert _plain(fmt_rest(90)) == "90 s"
    assert _plain(fmt_rest(150)) == "2:30 min"
    assert _plain(fmt_rest(-5)) == "0 s"
    assert fmt_rest(None) == ""


def test_fmt_sets_reps():
    assert fmt_sets_reps(3, "8-12") == "3 × 8-12"
    assert fmt_sets_reps(4, None) == "4 × -"
    assert fmt_sets_reps(None, None) == ""
    assert fmt_kg(None) == ""
