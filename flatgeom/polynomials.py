"""Polynomials of degree zero through four with closed-form real roots.

Coefficients are stored highest degree first. The degree is a property of
the type, so ``Cubic(0, 1, 2, 3)`` is still a cubic even though its leading
coefficient vanishes; root finding delegates to the lower degree solver in
that case.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Sequence, Tuple

import numpy as np

from .numbers import divide, first_error, human_format, is_equal, is_zero
from .types import NonRealValueError


def _terms_text(coefficients: Sequence[float], symbol: str) -> str:
    degree = len(coefficients) - 1
    parts: List[str] = []
    for index, value in enumerate(coefficients):
        power = degree - index
        if power >= 2:
            suffix = f"{symbol}^{power}"
        elif power == 1:
            suffix = symbol
        else:
            suffix = ""
        if index == 0:
            parts.append(f"{human_format(value)}{suffix}")
        else:
            sign = "-" if value < 0 else "+"
            parts.append(f"{sign}{human_format(abs(value))}{suffix}")
    return "".join(parts)


class _PolynomialBase:
    degree: ClassVar[int]

    def coefficients(self) -> Tuple[float, ...]:
        raise NotImplementedError

    def at(self, t: float) -> float:
        result = 0.0
        for value in self.coefficients():
            result = result * t + value
        return result

    def text(self, symbol: str = "t", prefix: bool = True) -> str:
        head = f"f({symbol})=" if prefix else ""
        return head + _terms_text(self.coefficients(), symbol)

    def or_err(self) -> Optional[NonRealValueError]:
        return first_error(self.coefficients())

    def __str__(self) -> str:
        return self.text()


@dataclass(frozen=True)
class Constant(_PolynomialBase):
    a: float

    degree: ClassVar[int] = 0

    def coefficients(self) -> Tuple[float, ...]:
        return (self.a,)

    def at(self, t: float) -> float:
        return self.a

    def roots(self) -> List[float]:
        return []

    def derivative(self) -> "Constant":
        return Constant(0.0)

    def text(self, symbol: str = "t", prefix: bool = True) -> str:
        head = f"f({symbol})=" if prefix else ""
        return f"{head}{human_format(self.a)}({symbol}^0)"


@dataclass(frozen=True)
class Linear(_PolynomialBase):
    a: float
    b: float

    degree: ClassVar[int] = 1

    def coefficients(self) -> Tuple[float, ...]:
        return (self.a, self.b)

    def roots(self) -> List[float]:
        if is_zero(self.a):
            return []
        return [-self.b / self.a]

    def derivative(self) -> Constant:
        return Constant(self.a)


@dataclass(frozen=True)
class Quadratic(_PolynomialBase):
    a: float
    b: float
    c: float

    degree: ClassVar[int] = 2

    def coefficients(self) -> Tuple[float, ...]:
        return (self.a, self.b, self.c)

    def roots(self) -> List[float]:
        a, b, c = self.a, self.b, self.c
        if is_zero(a):
            return Linear(b, c).roots()
        discriminant = b * b - 4.0 * a * c
        if is_zero(discriminant):
            return [-b / (2.0 * a)]
        if discriminant < 0:
            return []
        f = -b / (2.0 * a)
        g = math.sqrt(discriminant) / (2.0 * a)
        return [f + g, f - g]

    def derivative(self) -> Linear:
        return Linear(2.0 * self.a, self.b)


@dataclass(frozen=True)
class Cubic(_PolynomialBase):
    a: float
    b: float
    c: float
    d: float

    degree: ClassVar[int] = 3

    def coefficients(self) -> Tuple[float, ...]:
        return (self.a, self.b, self.c, self.d)

    def roots(self) -> List[float]:
        a, b, c, d = self.a, self.b, self.c, self.d
        if is_zero(a):
            return Quadratic(b, c, d).roots()

        # depressed form t^3 + pt + q with x = t - b/3a
        shift = b / (3.0 * a)
        p = (3.0 * a * c - b * b) / (3.0 * a * a)
        q = (2.0 * b ** 3 - 9.0 * a * b * c + 27.0 * a * a * d) / (27.0 * a ** 3)

        if is_zero(p):
            depressed = [float(np.cbrt(-q))]
        elif is_zero(q):
            depressed = [0.0]
            if p < 0:
                root = math.sqrt(-p)
                depressed.extend([root, -root])
        else:
            delta = q * q / 4.0 + p ** 3 / 27.0
            if is_zero(delta):
                depressed = [3.0 * q / p, -3.0 * q / (2.0 * p)]
            elif delta > 0:
                sq = math.sqrt(delta)
                depressed = [float(np.cbrt(-q / 2.0 + sq) + np.cbrt(-q / 2.0 - sq))]
            else:
                u = 2.0 * math.sqrt(-p / 3.0)
                cosine = max(-1.0, min(1.0, 3.0 * q / p / u))
                t = math.acos(cosine) / 3.0
                k = 2.0 * math.pi / 3.0
                depressed = [u * math.cos(t), u * math.cos(t - k), u * math.cos(t - 2.0 * k)]
        return [root - shift for root in depressed]

    def derivative(self) -> Quadratic:
        return Quadratic(3.0 * self.a, 2.0 * self.b, self.c)


@dataclass(frozen=True)
class Quartic(_PolynomialBase):
    a: float
    b: float
    c: float
    d: float
    e: float

    degree: ClassVar[int] = 4

    def coefficients(self) -> Tuple[float, ...]:
        return (self.a, self.b, self.c, self.d, self.e)

    def roots(self) -> List[float]:
        a, b, c, d, e = self.a, self.b, self.c, self.d, self.e
        if is_zero(a):
            return Cubic(b, c, d, e).roots()
        if is_zero(e):
            roots = [root for root in Cubic(a, b, c, d).roots() if not is_zero(root)]
            roots.append(0.0)
            return roots
        if is_zero(b) and is_zero(d):
            return _biquadratic_roots(Quadratic(a, c, e))

        delta = (
            256 * a ** 3 * e ** 3
            - 192 * a ** 2 * b * d * e ** 2
            - 128 * a ** 2 * c ** 2 * e ** 2
            + 144 * a ** 2 * c * d ** 2 * e
            - 27 * a ** 2 * d ** 4
            + 144 * a * b ** 2 * c * e ** 2
            - 6 * a * b ** 2 * d ** 2 * e
            - 80 * a * b * c ** 2 * d * e
            + 18 * a * b * c * d ** 3
            + 16 * a * c ** 4 * e
            - 4 * a * c ** 3 * d ** 2
            - 27 * b ** 4 * e ** 2
            + 18 * b ** 3 * c * d * e
            - 4 * b ** 3 * d ** 3
            - 4 * b ** 2 * c ** 3 * e
            + b ** 2 * c ** 2 * d ** 2
        )
        big_p = 8 * a * c - 3 * b ** 2
        big_r = b ** 3 + 8 * d * a ** 2 - 4 * a * b * c
        delta0 = c ** 2 - 3 * b * d + 12 * a * e
        big_d = 64 * a ** 3 * e - 16 * a ** 2 * c ** 2 + 16 * a * b ** 2 * c - 16 * a ** 2 * b * d - 3 * b ** 4

        if is_zero(delta):
            if is_zero(big_d) and is_zero(delta0):
                return [-b / (4.0 * a)]
            if is_zero(delta0):
                x0 = divide(
                    -72 * a ** 2 * e + 10 * a * c ** 2 - 3 * b ** 2 * c,
                    9 * (8 * a ** 2 * d - 4 * a * b * c + b ** 3),
                )
                x1 = -(b / a + 3 * x0)
                return [x0, x1]
            if is_zero(big_d) and big_p > 0 and is_zero(big_r):
                return []
        elif delta > 0 and (big_p > 0 or big_d > 0):
            return []

        # depressed quartic y^4 + py^2 + qy + r with x = y - b/4a
        shift = b / (4.0 * a)
        p = big_p / (8 * a ** 2)
        q = big_r / (8 * a ** 3)
        r = (big_d + 16 * a ** 2 * (12 * e * a - 3 * d * b + c ** 2)) / (256 * a ** 4)

        if is_zero(r):
            depressed = [0.0] + Cubic(1.0, 0.0, p, q).roots()
        elif is_zero(q):
            depressed = _biquadratic_roots(Quadratic(1.0, p, r))
        else:
            resolvent = Cubic(1.0, 2.5 * p, 2 * p ** 2 - r, (p ** 3 - p * r - (q / 2) ** 2) / 2)
            candidates = resolvent.roots()
            if not candidates:
                return []
            y = max(candidates)
            p2y = p + 2 * y
            if p2y <= 0 or is_zero(p2y):
                return []
            s = math.sqrt(p2y)
            half_q = q / 2
            depressed = Quadratic(1.0, s, p + y - half_q / s).roots()
            depressed += Quadratic(1.0, -s, p + y + half_q / s).roots()
        return [root - shift for root in depressed]

    def derivative(self) -> Cubic:
        return Cubic(4.0 * self.a, 3.0 * self.b, 2.0 * self.c, self.d)


def _biquadratic_roots(squared: Quadratic) -> List[float]:
    roots: List[float] = []
    for root in squared.roots():
        if is_zero(root):
            roots.append(0.0)
        elif root > 0:
            value = math.sqrt(root)
            roots.extend([value, -value])
    return roots


def is_equal_equations(a, b) -> bool:
    """Compare two polynomials coefficient by coefficient."""

    if a.degree != b.degree:
        return False
    return all(is_equal(x, y) for x, y in zip(a.coefficients(), b.coefficients()))


__all__ = [
    "Constant",
    "Linear",
    "Quadratic",
    "Cubic",
    "Quartic",
    "is_equal_equations",
]
