from .band import ScaleBand
from .base import DEFAULT_TICK_COUNT, ScaleKind, interpolate, normalize
from .linear import ScaleLinear, linear_ticks, tick_increment, tick_step
from .logarithmic import ScaleLogarithmic, compute_tick_distance
from .ordinal import ScaleOrdinal
from .types import Scale, ScaleType, band_bandwidth, is_band, is_continuous, scale_value

__all__ = [
    "DEFAULT_TICK_COUNT",
    "Scale",
    "ScaleBand",
    "ScaleKind",
    "ScaleLinear",
    "ScaleLogarithmic",
    "ScaleOrdinal",
    "ScaleType",
    "band_bandwidth",
    "compute_tick_distance",
    "interpolate",
    "is_band",
    "is_continuous",
    "linear_ticks",
    "normalize",
    "scale_value",
    "tick_increment",
    "tick_step",
]
