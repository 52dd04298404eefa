"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

Type coercion utilities for API payload values and raw form inputs.
"""

from __future__ import annotations

import math
from typing import Any, Optional


def is_blank(value: Any) -> bool:
    """True for None, empty/whitespace strings and NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Coerce a value to float with a default fallback.

    Args:
        value: Value to coerce (can be None, str, int, float, etc.)
        default: Default value to return if coercion fails (default: 0.0)

    Returns:
        float: Coerced value or default if coercion fails
    """
    try:
        if is_blank(value):
            return default
        return float(value)
    except (TypeError, ValueError):
        return default


def coerce_int(value: Any, default: int = 0) -> int:
    """Coerce a value to int with a default fallback.

    Converts via float first to handle string representations of floats.
    """
    try:
        if is_blank(value):
            return default
        return int(float(value))
    except (TypeError, ValueError):
        return default


def safe_float_optional(value: object) -> Optional[float]:
    """Convert a value to float, returning None when it is missing or invalid."""
    try:
        if is_blank(value) or value == "NaN":
            return None
        result = float(value)  # type: ignore[arg-type]
        if math.isnan(result):
            return None
        return result
    except (TypeError, ValueError):
        return None


def safe_int_optional(value: object) -> Optional[int]:
    result = safe_float_optional(value)
    return None if result is None else int(result)


def parse_optional_number(raw: Any) -> Optional[float]:
    """Parse an optional numeric form field.

    Blank input means "not provided" and yields None. Anything else must be
    numeric.

    Raises:
        ValueError: when the input is present but not a finite number
    """
    if is_blank(raw):
        return None
    if isinstance(raw, bool):
        raise ValueError(f"Not a number: {raw!r}")
    text = str(raw).strip().replace(",", ".") if isinstance(raw, str) else raw
    result = float(text)
    if math.isnan(result) or math.isinf(result):
        raise ValueError(f"Not a finite number: {raw!r}")
    return result
