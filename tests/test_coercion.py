import math

import pytest

from utils.coercion import (
    coerce_float,
    coerce_int,
    is_blank,
    parse_optional_number,
    safe_float_optional,
    safe_int_optional,
)


@pytest.mark.parametrize("value", [None, "", "   ", float("nan")])
def test_is_blank(value):
    assert is_blank(value)


def test_not_blank():
    assert not is_blank(0)
    assert not is_blank("0")


def test_coerce_defaults():
    assert coerce_float("3.5") == 3.5
    assert coerce_float("abc", default=1.0) == 1.0
    assert coerce_int("12.9") == 12
    assert coerce_int(None) == 0
    assert coerce_int("x", default=-1) == -1


def test_safe_optionals():
    assert safe_float_optional("NaN") is None
    assert safe_float_optional(float("nan")) is None
    assert safe_float_optional("2") == 2.0
    assert safe_int_optional("7.0") == 7
    assert safe_int_optional("") is None


def test_parse_optional_number():
    assert parse_optional_number("  ") is None
    assert parse_optional_number(math.nan) is None
    assert parse_optional_number("72,5") == 72.5
    assert parse_optional_number(3) == 3.0


@pytest.mark.parametrize("bad", ["abc", True, "inf"])
def test_parse_optional_number_rejects(bad):
    with pytest.raises(ValueError):
        parse_optional_number(bad)
