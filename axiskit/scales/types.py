from __future__ import annotations

import math
from numbers import Real
from typing import Any, Protocol, Sequence, Union

import numpy as np

from axiskit.errors import ScaleContractError
from axiskit.scales.base import ScaleKind
from axiskit.scales.band import ScaleBand
from axiskit.scales.linear import ScaleLinear
from axiskit.scales.logarithmic import ScaleLogarithmic
from axiskit.scales.ordinal import ScaleOrdinal


ScaleType = Union[ScaleBand, ScaleLinear, ScaleLogarithmic, ScaleOrdinal]

CONTINUOUS_SCALES = (ScaleLinear, ScaleLogarithmic)


class Scale(Protocol):
    """Read-only contract every scale variant satisfies."""

    @property
    def kind(self) -> ScaleKind:
        ...

    def get_domain(self) -> list[Any]:
        ...

    def scale(self, value: Any) -> float:
        ...

    def bandwidth(self) -> float:
        ...

    def range_start(self) -> float:
        ...

    def range_end(self) -> float:
        ...

    def is_range_reversed(self) -> bool:
        ...

    def get_ticks(self) -> Sequence[Any]:
        ...


def is_band(scale: ScaleType) -> bool:
    return isinstance(scale, ScaleBand)


def is_continuous(scale: ScaleType) -> bool:
    return isinstance(scale, CONTINUOUS_SCALES)


def band_bandwidth(scale: ScaleType) -> float | None:
    """Bandwidth of a band scale, ``None`` for every other variant."""
    if is_band(scale):
        return scale.bandwidth()
    return None


def scale_value(scale: ScaleType, value: Any) -> float:
    """Map ``value`` through ``scale`` after checking it suits the scale variant."""
    if is_band(scale):
        if not isinstance(value, str):
            raise ScaleContractError(f"band scale expects a category string, got {type(value).__name__}")
        return scale.scale(value)
    if is_continuous(scale):
        if isinstance(value, (bool, str)) or not isinstance(value, (Real, np.integer, np.floating)):
            raise ScaleContractError(f"{scale.kind.value} scale expects a number, got {type(value).__name__}")
        if not math.isfinite(float(value)):
            raise ScaleContractError(f"{scale.kind.value} scale expects a finite number, got {value!r}")
        return scale.scale(float(value))
    if isinstance(scale, ScaleOrdinal):
        return scale.scale(value)
    raise ScaleContractError(f"unknown scale type: {type(scale).__name__}")
