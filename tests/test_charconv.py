import math

import pytest

from wolvlib.charconv import parse_float, parse_int


@pytest.mark.parametrize("value", [0, 1, 7, 255, 4096, 123456789])
def test_parse_int_prefixes_round_trip(value):
    assert parse_int(hex(value)) == value
    assert parse_int(oct(value)) == value
    assert parse_int(bin(value)) == value
    assert parse_int(str(value)) == value
    assert parse_int("0X" + format(value, "X")) == value


def test_parse_int_trims_with_auto_base():
    assert parse_int("  42\t\n") == 42
    assert parse_int("-42") == -42


def test_parse_int_ignores_trailing_text():
    assert parse_int("12abc") == 12
    assert parse_int("0b1012") == parse_int("0b101")


def test_parse_int_explicit_base():
    assert parse_int("ff", 16) == 255
    assert parse_int("z", 36) == 35


@pytest.mark.parametrize("text, base", [("abc", 0), ("", 0), ("+5", 0), (" 42", 10), ("-", 10), ("2", 2)])
def test_parse_int_errors(text, base):
    with pytest.raises(ValueError):
        parse_int(text, base)


def test_parse_int_bad_base():
    with pytest.raises(ValueError):
        parse_int("1", 40)


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1e-10, 3.14159, 6.02e23])
def test_parse_float_round_trip(value):
    assert parse_float(repr(value)) == value


def test_parse_float_trailing_text():
    assert parse_float("2.5xyz") == 2.5
    assert parse_float("1e") == 1.0
    assert parse_float(".5") == 0.5


def test_parse_float_special_values():
    assert parse_float("inf") == math.inf
    assert parse_float("-Infinity") == -math.inf
    assert math.isnan(parse_float("nan"))
    assert math.isnan(parse_float("NaN(abc)"))


@pytest.mark.parametrize("text", ["", "abc", "+1", " 1", "1e999", "1e-999", "-"])
def test_parse_float_errors(text):
    with pytest.raises(ValueError):
        parse_float(text)