from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Protocol
import xml.etree.ElementTree as ET

from axiskit.errors import ChartConfigError
from axiskit.markup import SVG_NAMESPACE, node, serialize, translate
from axiskit.position import AxisPosition

if TYPE_CHECKING:
    from axiskit.axis import Axis


DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_MARGIN = (40, 40, 60, 60)


class ChartView(Protocol):
    def view_width(self) -> float:
        ...

    def view_height(self) -> float:
        ...


@dataclass(frozen=True)
class ChartFrame:
    """Outer chart size plus the margins that leave room for the axes."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    margin_top: int = DEFAULT_MARGIN[0]
    margin_right: int = DEFAULT_MARGIN[1]
    margin_bottom: int = DEFAULT_MARGIN[2]
    margin_left: int = DEFAULT_MARGIN[3]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ChartConfigError("chart width/height must be > 0")
        if min(self.margin_top, self.margin_right, self.margin_bottom, self.margin_left) < 0:
            raise ChartConfigError("chart margins must be >= 0")
        if self.view_width() <= 0 or self.view_height() <= 0:
            raise ChartConfigError("chart margins leave no drawable area")

    def view_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    def view_height(self) -> int:
        return self.height - self.margin_top - self.margin_bottom

    def axis_translation(self, position: AxisPosition) -> tuple[int, int]:
        """Where an axis at ``position`` is anchored in chart coordinates."""
        position = AxisPosition(position)
        if position is AxisPosition.BOTTOM:
            return (self.margin_left, self.margin_top + self.view_height())
        if position is AxisPosition.RIGHT:
            return (self.margin_left + self.view_width(), self.margin_top)
        return (self.margin_left, self.margin_top)

    def to_svg(self, axes: Iterable["Axis"]) -> ET.Element:
        root = node(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": self.width,
                "height": self.height,
                "viewBox": f"0 0 {self.width} {self.height}",
            },
        )
        for axis in axes:
            placed = node("g", {"transform": translate(*self.axis_translation(axis.position))}, [axis.to_svg()])
            root.append(placed)
        return root

    def to_markup(self, axes: Iterable["Axis"]) -> str:
        return serialize(self.to_svg(axes))
