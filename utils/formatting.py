"""
Locale-aware display helpers for numbers, units and dates.

The API always exchanges plain numbers and ISO strings. These helpers are for
UI rendering only.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional, Union

from babel import dates, numbers

LOCALE = "es_ES"

_LANGUAGE_LOCALES = {"es": "es_ES", "en": "en_US"}


def set_locale(language: str = "es") -> None:
    global LOCALE
    locale_str = _LANGUAGE_LOCALES.get(language, language)
    try:
        # Validate by formatting a simple number
        numbers.format_decimal(1.0, locale=locale_str)
        LOCALE = locale_str
    except Exception:
        LOCALE = "es_ES"


def _nbsp() -> str:
    return " "


def fmt_decimal(value: Optional[float], digits: Optional[int] = None) -> str:
    if value is None:
        return ""
    fmt = None
    if digits is not None:
        fmt = "#" if digits == 0 else "#." + ("0" * digits)
    return numbers.format_decimal(value, format=fmt, locale=LOCALE)


def fmt_kg(kg: Optional[float]) -> str:
    if kg is None:
        return ""
    return f"{fmt_decimal(kg, 1)}{_nbsp()}kg"


def fmt_cm(cm: Optional[float]) -> str:
    if cm is None:
        return ""
    return f"{fmt_decimal(cm, 1)}{_nbsp()}cm"


def fmt_percent(value: Optional[float]) -> str:
    if value is None:
        return ""
    return f"{fmt_decimal(value, 1)}{_nbsp()}%"


def fmt_rest(seconds: Optional[int]) -> str:
    """Rest periods: '90 s' below two minutes, '2:30 min' above."""
    if seconds is None:
        return ""
    total = max(0, int(seconds))
    if total < 120:
        return f"{total}{_nbsp()}s"
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}{_nbsp()}min"


def fmt_sets_reps(sets: Optional[int], reps: Optional[Union[str, int]]) -> str:
    if not sets and not reps:
        return ""
    return f"{int(sets or 0)} × {reps or '-'}"


def fmt_date(value: Optional[Union[dt.date, dt.datetime]], fmt: str = "medium") -> str:
    if value is None:
        return ""
    return dates.format_date(value, format=fmt, locale=LOCALE)


def fmt_datetime(value: Optional[dt.datetime], fmt: str = "medium") -> str:
    if value is None:
        return ""
    return dates.format_datetime(value, format=fmt, locale=LOCALE)


def fmt_time(value: Optional[Union[dt.time, dt.datetime]]) -> str:
    if value is None:
        return ""
    return dates.format_time(value, format="HH:mm", locale=LOCALE)


def month_title(year: int, month: int) -> str:
    label = dates.format_date(dt.date(year, month, 1), format="LLLL y", locale=LOCALE)
    return label[:1].upper() + label[1:]


def weekday_headers() -> list[str]:
    """Short weekday names starting on Sunday."""
    names = dates.get_day_names("abbreviated", locale=LOCALE)
    # babel indexes Monday as 0
    ordered = [names[6]] + [names[i] for i in range(6)]
    return [name[:1].upper() + name[1:] for name in ordered]
