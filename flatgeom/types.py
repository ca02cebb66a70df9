from __future__ import annotations

import math
from typing import List, Optional, Protocol, Tuple, runtime_checkable

Coordinates = Tuple[float, float]
Limits = Tuple[float, float, float, float]


class NonRealValueError(ValueError):
    """Raised (or returned by ``or_err``) when a geometry holds NaN or infinity."""

    def __init__(self, value: float):
        self.value = float(value)
        if math.isnan(self.value):
            message = "NaN encountered"
        elif self.value < 0:
            message = "Negative Inf encountered"
        else:
            message = "Positive Inf encountered"
        super().__init__(message)

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.value)

    @property
    def is_inf(self) -> bool:
        return math.isinf(self.value)

    @property
    def is_pos_inf(self) -> bool:
        return self.value == math.inf

    @property
    def is_neg_inf(self) -> bool:
        return self.value == -math.inf


@runtime_checkable
class Polynomial(Protocol):
    degree: int

    def at(self, t: float) -> float: ...

    def roots(self) -> List[float]: ...

    def text(self, symbol: str = "t", prefix: bool = True) -> str: ...

    def or_err(self) -> Optional[NonRealValueError]: ...


@runtime_checkable
class Derivable(Protocol):
    def at(self, t: float) -> float: ...

    def roots(self) -> List[float]: ...

    def derivative(self) -> "Derivable": ...


@runtime_checkable
class Coefficienter(Protocol):
    def coefficients(self) -> Tuple[float, ...]: ...


@runtime_checkable
class Pair(Protocol):
    def units(self) -> Coordinates: ...


@runtime_checkable
class OrderedPoints(Protocol):
    def points(self) -> list: ...


__all__ = [
    "Coordinates",
    "Limits",
    "NonRealValueError",
    "Polynomial",
    "Derivable",
    "Coefficienter",
    "Pair",
    "OrderedPoints",
]
