"""Tests for number parsing and rendering.

Covers the display text round trip, result rounding, and the non-finite
values a division by zero produces.
"""

import math

import pytest

from calcpad.formatting import apply_operator, format_number, format_result, parse_number
from calcpad.models import Operator


# --- parse_number ---

@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("0.", 0.0),
    ("12.5", 12.5),
    ("-7", -7.0),
    (".5", 0.5),
    ("1e+21", 1e21),
])
def test_parse_plain_numbers(text, expected):
    assert parse_number(text) == expected


def test_parse_ignores_trailing_text():
    assert parse_number("5 + ") == 5.0


def test_parse_non_finite():
    assert parse_number("inf") == math.inf
    assert parse_number("-inf") == -math.inf
    assert math.isnan(parse_number("nan"))


def test_parse_garbage_is_nan():
    assert math.isnan(parse_number(""))
    assert math.isnan(parse_number("abc"))


# --- format_number ---

def test_whole_numbers_drop_decimal_point():
    assert format_number(12.0) == "12"
    assert format_number(-3.0) == "-3"


def test_negative_zero_renders_as_zero():
    assert format_number(-0.0) == "0"


def test_fractions_are_shortest_decimal():
    assert format_number(0.1) == "0.1"
    assert format_number(-12.5) == "-12.5"


def test_small_fractions_stay_positional():
    assert format_number(0.00001) == "0.00001"


def test_huge_integers_use_exponent():
    assert format_number(1e21) == "1e+21"
    assert format_number(123456789.0) == "123456789"


def test_non_finite_text():
    assert format_number(math.inf) == "inf"
    assert format_number(-math.inf) == "-inf"
    assert format_number(math.nan) == "nan"


# --- format_result ---

def test_result_integer():
    assert format_result(12.0) == "12"


def test_result_rounds_to_eight_places():
    assert format_result(1 / 3) == "0.33333333"
    assert format_result(2 / 3) == "0.66666667"


def test_result_drops_float_noise():
    assert format_result(0.1 + 0.2) == "0.3"


def test_result_rounds_half_up():
    assert format_result(0.123456785) == "0.12345679"


def test_result_rounding_to_whole_number():
    assert format_result(1.999999999) == "2"


def test_result_tiny_value_is_zero():
    assert format_result(-0.000000001) == "0"


def test_result_non_finite_passes_through():
    assert format_result(math.inf) == "inf"
    assert format_result(math.nan) == "nan"


# --- apply_operator ---

def test_basic_operators():
    assert apply_operator(Operator.ADD, 7, 5) == 12
    assert apply_operator(Operator.SUBTRACT, 7, 5) == 2
    assert apply_operator(Operator.MULTIPLY, 7, 5) == 35
    assert apply_operator(Operator.DIVIDE, 6, 4) == 1.5


def test_percent_is_share_of_first_operand():
    assert apply_operator(Operator.PERCENT, 200, 10) == pytest.approx(20.0)


def test_division_by_zero_does_not_raise():
    assert apply_operator(Operator.DIVIDE, 5, 0) == math.inf
    assert apply_operator(Operator.DIVIDE, -5, 0) == -math.inf
    assert apply_operator(Operator.DIVIDE, 5, -0.0) == -math.inf
    assert math.isnan(apply_operator(Operator.DIVIDE, 0, 0))
