import math

import numpy as np
import pytest

from flatgeom import Constant, Cubic, Linear, Quadratic, Quartic, is_equal_equations


def _real_roots(coefficients):
    roots = np.roots(coefficients)
    return sorted(float(r.real) for r in roots if abs(r.imag) < 1e-7)


def test_degree_is_a_property_of_the_type():
    assert Constant(1).degree == 0
    assert Linear(0, 1).degree == 1
    assert Quadratic(0, 0, 1).degree == 2
    assert Cubic(0, 1, 2, 3).degree == 3
    assert Quartic(1, 0, 0, 0, 0).degree == 4


def test_text_forms():
    assert str(Constant(5)) == "f(t)=5(t^0)"
    assert str(Linear(2, -3)) == "f(t)=2t-3"
    assert str(Quadratic(3, 13, 2)) == "f(t)=3t^2+13t+2"
    assert Cubic(-85, 120, 0, 10).text("t", prefix=False) == "-85t^3+120t^2+0t+10"
    assert Quartic(1, -2, 0, 0.5, -1).text("x") == "f(x)=1x^4-2x^3+0x^2+0.5x-1"


def test_at_evaluates_highest_coefficient_first():
    assert Quadratic(3, 13, 2).at(2.0) == pytest.approx(40.0)
    assert Cubic(1, 0, 0, -8).at(2.0) == pytest.approx(0.0)
    assert Constant(7).at(123.0) == 7


def test_derivative_chain():
    q = Quartic(1, 2, 3, 4, 5)
    assert is_equal_equations(q.derivative(), Cubic(4, 6, 6, 4))
    assert is_equal_equations(q.derivative().derivative(), Quadratic(12, 12, 6))
    assert is_equal_equations(Quadratic(12, 12, 6).derivative(), Linear(24, 12))
    assert is_equal_equations(Linear(24, 12).derivative(), Constant(24))
    assert is_equal_equations(Constant(24).derivative(), Constant(0))


def test_is_equal_equations_requires_same_degree():
    assert not is_equal_equations(Linear(1, 2), Quadratic(0, 1, 2))
    assert is_equal_equations(Linear(1, 2), Linear(1.000001, 2))


def test_linear_and_constant_roots():
    assert Constant(3).roots() == []
    assert Linear(2, -3).roots() == [pytest.approx(1.5)]
    assert Linear(1e-12, 4).roots() == []


def test_quadratic_roots():
    roots = Quadratic(3, 13, 2).roots()
    assert roots == [pytest.approx(-0.159734236868), pytest.approx(-4.1735990964654)]
    assert Quadratic(1, 2, 1).roots() == [pytest.approx(-1.0)]
    assert Quadratic(1, 0, 1).roots() == []
    # vanishing leading coefficient falls back to the linear solver
    assert Quadratic(0, 2, -4).roots() == [pytest.approx(2.0)]


@pytest.mark.parametrize(
    "coefficients",
    [
        (3, -16, 23, -6),
        (1, -7, 14, -8),
        (1, 0, 1, 1),
        (2, -3, -5, 6),
        (-0.5, 2, 1, -3),
    ],
)
def test_cubic_roots_match_numpy(coefficients):
    roots = Cubic(*coefficients).roots()
    assert sorted(roots) == pytest.approx(_real_roots(coefficients), abs=1e-6)
    for root in roots:
        assert Cubic(*coefficients).at(root) == pytest.approx(0.0, abs=1e-7)


def test_cubic_scenario_roots():
    assert sorted(Cubic(3, -16, 23, -6).roots()) == pytest.approx([1 / 3, 2.0, 3.0])


def test_cubic_special_cases():
    # depressed p == 0
    assert Cubic(1, 0, 0, -8).roots() == [pytest.approx(2.0)]
    # depressed q == 0, both signs of p
    assert sorted(Cubic(1, 0, -4, 0).roots()) == pytest.approx([-2.0, 0.0, 2.0])
    assert Cubic(1, 0, 1, 0).roots() == [pytest.approx(0.0)]
    # double root: (x - 1)^2 (x + 2)
    assert sorted(Cubic(1, 0, -3, 2).roots()) == pytest.approx([-2.0, 1.0])
    # shifted special case must be un-depressed: (x - 2)^3
    assert Cubic(1, -6, 12, -8).roots() == [pytest.approx(2.0)]
    # single real root through Cardano
    assert Cubic(1, 0, 1, 1).roots() == [pytest.approx(-0.6823278038280193)]
    # vanishing leading coefficient
    assert sorted(Cubic(0, 1, -3, 2).roots()) == pytest.approx([1.0, 2.0])


@pytest.mark.parametrize(
    "coefficients, expected",
    [
        ((1, -10, 35, -50, 24), [1.0, 2.0, 3.0, 4.0]),
        ((1, -1, -19, 49, -30), [-5.0, 1.0, 2.0, 3.0]),
        ((1, -3, 3, -3, 2), [1.0, 2.0]),
        ((1, 0, -5, 0, 4), [-2.0, -1.0, 1.0, 2.0]),
        ((2, -4, 0, 0, 0), [0.0, 2.0]),
        ((1, 0, 0, 0, 1), []),
        ((1, 0, 0, 1, 2), []),
    ],
)
def test_quartic_roots(coefficients, expected):
    roots = Quartic(*coefficients).roots()
    assert sorted(roots) == pytest.approx(expected, abs=1e-6)


def test_quartic_repeated_roots():
    # (x - 2)^4
    assert Quartic(1, -8, 24, -32, 16).roots() == [pytest.approx(2.0)]
    # (x - 1)^3 (x - 3)
    assert sorted(Quartic(1, -6, 12, -10, 3).roots()) == pytest.approx([1.0, 3.0])


@pytest.mark.parametrize(
    "expected",
    [
        [-7.5, -1.25, 0.5, 6.0],
        [-3.0, -2.0, 4.0, 9.5],
        [0.1, 0.7, 1.9, 3.3],
    ],
)
def test_quartic_matches_expanded_roots(expected):
    coefficients = np.poly(expected)
    roots = Quartic(*coefficients).roots()
    assert sorted(roots) == pytest.approx(expected, abs=1e-6)


def test_quartic_falls_back_to_cubic():
    assert sorted(Quartic(0, 1, -7, 14, -8).roots()) == pytest.approx([1.0, 2.0, 4.0])


def test_or_err():
    assert Quadratic(1, 2, 3).or_err() is None
    assert Cubic(1, math.nan, 2, math.inf).or_err().is_nan
    assert Linear(math.inf, 0).or_err().is_pos_inf
