from __future__ import annotations

from axiskit.chart import DEFAULT_HEIGHT, DEFAULT_MARGIN, DEFAULT_WIDTH, ChartFrame
from axiskit.errors import ChartConfigError


def chart_frame(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    margin: int | tuple[int, int] | tuple[int, int, int, int] | None = None,
) -> ChartFrame:
    """Build a chart frame; ``margin`` follows CSS shorthand (all, vertical/horizontal, or top/right/bottom/left)."""
    if margin is None:
        top, right, bottom, left = DEFAULT_MARGIN
    elif isinstance(margin, int):
        top = right = bottom = left = margin
    elif len(margin) == 2:
        top, right = margin
        bottom, left = top, right
    elif len(margin) == 4:
        top, right, bottom, left = margin
    else:
        raise ChartConfigError("margin must be an int or a 2- or 4-tuple")
    return ChartFrame(
        width=width,
        height=height,
        margin_top=top,
        margin_right=right,
        margin_bottom=bottom,
        margin_left=left,
    )
