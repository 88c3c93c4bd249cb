from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import re
from typing import Any, Mapping

from axiskit.errors import ChartConfigError


_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

DEFAULT_TICK_LABEL_FONT_SIZE = 12
DEFAULT_AXIS_LABEL_FONT_SIZE = 14


@dataclass(frozen=True)
class AxisStyle:
    """Style tokens shared by axis lines, ticks and labels."""

    stroke_color: str = "#bbbbbb"
    text_color: str = "#777"
    font_family: str = "sans-serif"
    tick_size: int = 6
    horizontal_label_offset: int = 16
    vertical_label_offset: int = 12
    horizontal_axis_label_gap: int = 42
    tick_label_font_size: int = DEFAULT_TICK_LABEL_FONT_SIZE
    axis_label_font_size: int = DEFAULT_AXIS_LABEL_FONT_SIZE
    tick_label_dy: str = ".35em"


DEFAULT_AXIS_STYLE = AxisStyle()

_COLOR_TOKENS = ("stroke_color", "text_color")
_POSITIVE_INT_TOKENS = (
    "tick_size",
    "horizontal_label_offset",
    "vertical_label_offset",
    "horizontal_axis_label_gap",
    "tick_label_font_size",
    "axis_label_font_size",
)


def validate_axis_style(overrides: Mapping[str, Any] | None = None) -> AxisStyle:
    """Validate and merge style overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_AXIS_STYLE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartConfigError(f"Unknown axis style token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise ChartConfigError(f"Token `{key}` must be a hex color (#RGB, #RRGGBB or #RRGGBBAA)")

    for key in _POSITIVE_INT_TOKENS:
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ChartConfigError(f"Token `{key}` must be a positive integer")

    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ChartConfigError("Token `font_family` must be a non-empty string")

    if not isinstance(raw["tick_label_dy"], str):
        raise ChartConfigError("Token `tick_label_dy` must be a string")

    return AxisStyle(**{f.name: raw[f.name] for f in fields(AxisStyle)})
