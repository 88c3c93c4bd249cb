from __future__ import annotations

from enum import Enum


class AxisPosition(str, Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        return self in (AxisPosition.TOP, AxisPosition.BOTTOM)

    @property
    def css_class(self) -> str:
        return "x-axis" if self.is_horizontal else "y-axis"
