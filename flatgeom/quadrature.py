"""Fixed 64-point Gauss-Legendre quadrature used for arc lengths."""

from __future__ import annotations

from typing import Callable

import numpy as np

ORDER = 64

ABSCISSAE, WEIGHTS = np.polynomial.legendre.leggauss(ORDER)
ABSCISSAE.setflags(write=False)
WEIGHTS.setflags(write=False)


def integrate(func: Callable[[float], float], lo: float, hi: float) -> float:
    """Integrate *func* over ``[lo, hi]``."""

    half = 0.5 * (hi - lo)
    mid = 0.5 * (hi + lo)
    values = np.array([func(mid + half * x) for x in ABSCISSAE])
    return float(half * np.dot(WEIGHTS, values))


__all__ = ["ORDER", "ABSCISSAE", "WEIGHTS", "integrate"]
