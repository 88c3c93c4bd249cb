from __future__ import annotations

from enum import Enum
import math
from numbers import Real
from typing import Any, Sequence

import numpy as np

from axiskit.errors import ScaleDomainError


DEFAULT_TICK_COUNT = 10
DEFAULT_RANGE = (0, 1)
EPSILON = float(np.finfo(np.float64).eps)


class ScaleKind(str, Enum):
    BAND = "band"
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    ORDINAL = "ordinal"


def normalize(a: float, b: float, x: float) -> float:
    """Takes a value x in [a, b] and returns the corresponding value in [0, 1]."""
    if abs(a - b) < EPSILON:
        return 0.5
    return (x - a) / (b - a)


def interpolate(a: float, b: float, t: float) -> float:
    """Takes a value t in [0, 1] and returns the corresponding value in [a, b]."""
    return (b - a) * t + a


def coerce_range(values: Sequence[Any]) -> tuple[int, int]:
    if len(values) != 2:
        raise ScaleDomainError(f"range must have exactly two values, got {len(values)}")
    out: list[int] = []
    for raw in values:
        if isinstance(raw, bool) or not isinstance(raw, (Real, np.integer, np.floating)):
            raise ScaleDomainError(f"range values must be numeric: {raw!r}")
        if not math.isfinite(float(raw)):
            raise ScaleDomainError(f"range values must be finite: {raw!r}")
        out.append(int(raw))
    return (out[0], out[1])


def coerce_continuous_domain(values: Sequence[Any]) -> tuple[float, float]:
    if len(values) != 2:
        raise ScaleDomainError(f"continuous domain must have exactly two values, got {len(values)}")
    out: list[float] = []
    for raw in values:
        if isinstance(raw, bool) or not isinstance(raw, (Real, np.integer, np.floating)):
            raise ScaleDomainError(f"domain values must be numeric: {raw!r}")
        value = float(raw)
        if not math.isfinite(value):
            raise ScaleDomainError(f"domain values must be finite: {raw!r}")
        out.append(value)
    return (out[0], out[1])


def require_bounds(domain: tuple[Any, ...], range_: tuple[int, ...]) -> None:
    if not domain:
        raise ScaleDomainError("domain is not set")
    if not range_:
        raise ScaleDomainError("range is not set")
