from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Sequence

import numpy as np

from axiskit.errors import ScaleDomainError
from axiskit.scales.base import (
    DEFAULT_RANGE,
    DEFAULT_TICK_COUNT,
    EPSILON,
    ScaleKind,
    coerce_continuous_domain,
    coerce_range,
    interpolate,
    normalize,
    require_bounds,
)


LOGGER = logging.getLogger(__name__)

_E10 = math.sqrt(50.0)
_E5 = math.sqrt(10.0)
_E2 = math.sqrt(2.0)


def tick_increment(start: float, stop: float, tick_count: int) -> float:
    """Nice tick spacing for ``[start, stop]`` split into roughly ``tick_count`` steps.

    The per-decade multiplier is snapped to 1, 2, 5 or 10. For steps of one or
    more the spacing itself is returned. Sub-unit steps come back as a negative
    reciprocal (``-10`` means a spacing of ``0.1``) so callers can divide by an
    integer instead of multiplying by an inexact fraction.
    """
    if tick_count <= 0:
        raise ScaleDomainError("tick_count must be > 0")
    if not stop > start:
        raise ScaleDomainError("stop must be greater than start")
    step = (stop - start) / max(0, tick_count)
    power = math.floor(math.log10(step))
    error = step / (10.0**power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power >= 0:
        return factor * (10.0**power)
    return -(10.0 ** (-power)) / factor


def tick_step(start: float, stop: float, tick_count: int) -> float:
    inc = tick_increment(start, stop, tick_count)
    if inc > 0:
        return inc
    return -1.0 / inc


def linear_ticks(start: float, stop: float, tick_count: int) -> list[float]:
    if tick_count <= 0:
        LOGGER.warning("tick_count=%d produces no ticks", tick_count)
        return []
    lo, hi = (start, stop) if start <= stop else (stop, start)
    if abs(hi - lo) < EPSILON:
        LOGGER.warning("domain bounds are equal (%s); emitting a single tick", lo)
        return [lo]

    inc = tick_increment(lo, hi, tick_count)
    if inc > 0:
        i0 = math.ceil(lo / inc)
        i1 = math.floor(hi / inc)
        ticks = np.arange(i0, i1 + 1, dtype=np.float64) * inc
    else:
        inv = -inc
        i0 = round(lo * inv)
        i1 = round(hi * inv)
        if i0 / inv < lo:
            i0 += 1
        if i1 / inv > hi:
            i1 -= 1
        ticks = np.arange(i0, i1 + 1, dtype=np.float64) / inv
    # Indices past 2**53 collapse onto the same float; keep one tick per value.
    ticks = np.unique(ticks)
    LOGGER.debug("linear ticks over [%s, %s]: %d ticks, increment %s", lo, hi, ticks.size, inc)
    return [float(v) for v in ticks]


@dataclass(frozen=True)
class ScaleLinear:
    """The scale to represent linear data."""

    domain: tuple[float, ...] = ()
    range: tuple[int, ...] = DEFAULT_RANGE
    tick_count: int = DEFAULT_TICK_COUNT

    @property
    def kind(self) -> ScaleKind:
        return ScaleKind.LINEAR

    def set_domain(self, values: Sequence[float]) -> "ScaleLinear":
        return replace(self, domain=coerce_continuous_domain(values))

    def set_range(self, values: Sequence[int]) -> "ScaleLinear":
        return replace(self, range=coerce_range(values))

    def set_tick_count(self, tick_count: int) -> "ScaleLinear":
        if tick_count < 0:
            raise ScaleDomainError("tick_count must be >= 0")
        return replace(self, tick_count=int(tick_count))

    def get_domain(self) -> list[float]:
        return list(self.domain)

    def domain_max(self) -> float:
        require_bounds(self.domain, self.range)
        return self.domain[1]

    def scale(self, x: float) -> float:
        require_bounds(self.domain, self.range)
        a, b = self.domain
        t = normalize(a, b, float(x))
        return interpolate(float(self.range[0]), float(self.range[1]), t)

    def bandwidth(self) -> float:
        return 0.0

    def range_start(self) -> float:
        return float(self.range[0])

    def range_end(self) -> float:
        return float(self.range[1])

    def is_range_reversed(self) -> bool:
        return self.range_start() > self.range_end()

    def get_ticks(self) -> list[float]:
        require_bounds(self.domain, self.range)
        return linear_ticks(self.domain[0], self.domain[1], self.tick_count)
