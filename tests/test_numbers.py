import math

import pytest

from flatgeom import NonRealValueError
from flatgeom.numbers import (
    clamp,
    degrees_to_radians,
    divide,
    first_error,
    float_error,
    human_format,
    is_equal,
    is_zero,
    maximum,
    minimum,
    normalize_radians,
    radians_to_degrees,
)


@pytest.mark.parametrize(
    "value, expected",
    [(0.0, True), (5e-10, True), (-5e-10, True), (1e-9, False), (-2e-9, False), (math.nan, False)],
)
def test_is_zero(value, expected):
    assert is_zero(value) is expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1.0, 1.0, True),
        (100.0, 100.0001, True),
        (100.0, 100.01, False),
        (0.0, 1e-11, True),
        (0.0, 1e-6, False),
        (math.nan, math.nan, False),
        (math.inf, math.inf, True),
    ],
)
def test_is_equal(a, b, expected):
    assert is_equal(a, b) is expected


@pytest.mark.parametrize(
    "value, text",
    [
        (2.5, "2.5"),
        (100.0, "100"),
        (0.0, "0"),
        (-0.0, "0"),
        (-3.25, "-3.25"),
        (1.0 / 3.0, "0.333333333"),
        (math.nan, "NaN"),
        (math.inf, "+Inf"),
        (-math.inf, "-Inf"),
    ],
)
def test_human_format(value, text):
    assert human_format(value) == text


def test_clamp_keeps_nan():
    assert clamp(0.0, -1.0, 1.0) == 0.0
    assert clamp(0.0, 2.0, 1.0) == 1.0
    assert clamp(0.0, 0.5, 1.0) == 0.5
    assert math.isnan(clamp(0.0, math.nan, 1.0))


def test_minimum_and_maximum_skip_nan():
    assert minimum([math.nan, 3.0, 1.0]) == 1.0
    assert maximum([math.nan, 3.0, 1.0]) == 3.0
    assert minimum([2.0, math.nan]) == 2.0
    assert math.isnan(minimum([]))


def test_divide_follows_ieee():
    assert divide(1.0, 4.0) == 0.25
    assert divide(1.0, 0.0) == math.inf
    assert divide(-1.0, 0.0) == -math.inf
    assert math.isnan(divide(0.0, 0.0))


def test_float_errors():
    assert float_error(1.0) is None
    assert str(float_error(math.nan)) == "NaN encountered"
    assert str(float_error(math.inf)) == "Positive Inf encountered"
    assert str(float_error(-math.inf)) == "Negative Inf encountered"

    err = first_error([math.inf, 1.0, math.nan])
    assert isinstance(err, NonRealValueError)
    assert isinstance(err, ValueError)
    assert err.is_nan and not err.is_inf

    err = first_error([1.0, -math.inf])
    assert err.is_neg_inf and not err.is_pos_inf


def test_radian_helpers():
    assert normalize_radians(-math.pi / 2) == pytest.approx(1.5 * math.pi)
    assert normalize_radians(5 * math.pi) == pytest.approx(math.pi)
    assert 0.0 <= normalize_radians(-1e-18) < 2 * math.pi
    assert degrees_to_radians(180.0) == pytest.approx(math.pi)
    assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)
