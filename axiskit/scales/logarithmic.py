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

DEFAULT_LOG_DOMAIN = (1.0, 1000.0)
MIN_TICKS = 2.0
MAX_TICKS = 5.0


def compute_tick_distance(domain_min: float, domain_max: float, tick_count: int) -> float:
    """Power-of-ten tick distance, halved or doubled until the domain holds 2 to 5 ticks."""
    if tick_count <= 0:
        raise ScaleDomainError("tick_count must be > 0")
    domain_distance = domain_max - domain_min
    if not domain_distance > 0:
        raise ScaleDomainError("domain_max must be greater than domain_min")

    tick_distance = 10.0 ** math.floor(math.log10(domain_distance / tick_count))
    while domain_distance / tick_distance < MIN_TICKS:
        tick_distance /= 2.0
    while domain_distance / tick_distance > MAX_TICKS:
        tick_distance *= 2.0
    return tick_distance


@dataclass(frozen=True)
class ScaleLogarithmic:
    """The scale to represent logarithmic data.

    Values are currently placed by linear interpolation between the domain
    bounds, the same as ``ScaleLinear``; only tick spacing differs.
    """

    domain: tuple[float, ...] = DEFAULT_LOG_DOMAIN
    range: tuple[int, ...] = DEFAULT_RANGE
    tick_count: int = DEFAULT_TICK_COUNT

    @property
    def kind(self) -> ScaleKind:
        return ScaleKind.LOGARITHMIC

    def set_domain(self, values: Sequence[float]) -> "ScaleLogarithmic":
        domain = coerce_continuous_domain(values)
        if min(domain) <= 0:
            raise ScaleDomainError(f"logarithmic domain must be positive: {domain}")
        return replace(self, domain=domain)

    def set_range(self, values: Sequence[int]) -> "ScaleLogarithmic":
        return replace(self, range=coerce_range(values))

    def set_tick_count(self, tick_count: int) -> "ScaleLogarithmic":
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
        domain_min, domain_max = self.domain
        t = normalize(domain_min, domain_max, float(x))
        return interpolate(float(self.range[0]), float(self.range[1]), t)

    def bandwidth(self) -> float:
        return 0.0

    def range_start(self) -> float:
        return float(self.range[0])

    def range_end(self) -> float:
        return float(self.range[1])

    def is_range_reversed(self) -> bool:
        return self.range_start() > self.range_end()

    def compute_tick_distance(self) -> float:
        require_bounds(self.domain, self.range)
        return compute_tick_distance(min(self.domain), max(self.domain), self.tick_count)

    def get_ticks(self) -> list[float]:
        require_bounds(self.domain, self.range)
        domain_min, domain_max = self.domain
        if self.tick_count <= 0:
            LOGGER.warning("tick_count=%d produces no ticks", self.tick_count)
            return []
        if abs(domain_max - domain_min) < EPSILON:
            LOGGER.warning("domain bounds are equal (%s); emitting a single tick", domain_min)
            return [domain_min]
        if domain_max < domain_min:
            domain_min, domain_max = domain_max, domain_min

        tick_distance = compute_tick_distance(domain_min, domain_max, self.tick_count)
        # Index from domain_min instead of accumulating so the last tick does not drift.
        count = int(math.floor((domain_max - domain_min) / tick_distance + 1e-9)) + 1
        ticks = domain_min + np.arange(count, dtype=np.float64) * tick_distance
        LOGGER.debug("logarithmic ticks over [%s, %s]: %d ticks, distance %s", domain_min, domain_max, count, tick_distance)
        return [float(v) for v in ticks]
