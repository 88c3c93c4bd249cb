from __future__ import annotations

from dataclasses import InitVar, dataclass, field
import xml.etree.ElementTree as ET

from axiskit.errors import TickLabelFormatError
from axiskit.format import Formatter, format_number
from axiskit.markup import node, rotate, translate
from axiskit.position import AxisPosition
from axiskit.style import DEFAULT_AXIS_STYLE, AxisStyle


@dataclass(frozen=True)
class AxisLine:
    """The single baseline stroke of an axis, in the axis's own frame."""

    x1: float
    y1: float
    x2: float
    y2: float
    style: AxisStyle = field(default=DEFAULT_AXIS_STYLE, repr=False, compare=False)

    def to_svg(self) -> ET.Element:
        return node(
            "line",
            {
                "x1": self.x1,
                "y1": self.y1,
                "x2": self.x2,
                "y2": self.y2,
                "shape-rendering": "crispEdges",
                "stroke-width": 1,
                "stroke": self.style.stroke_color,
            },
        )


@dataclass(frozen=True)
class TickGeometry:
    translate: tuple[float, float]
    line_end: tuple[int, int]
    label_xy: tuple[int, int]
    text_anchor: str


def tick_geometry(position: AxisPosition, tick_offset: float, label_offset: int, tick_size: int = 6) -> TickGeometry:
    """Placement of one tick group: where it sits, where its stroke ends and where its label goes."""
    if position is AxisPosition.LEFT:
        return TickGeometry((0.0, tick_offset), (-tick_size, 0), (-label_offset, 0), "end")
    if position is AxisPosition.RIGHT:
        return TickGeometry((0.0, tick_offset), (tick_size, 0), (label_offset, 0), "start")
    if position is AxisPosition.TOP:
        return TickGeometry((tick_offset, 0.0), (0, -tick_size), (0, -label_offset), "middle")
    return TickGeometry((tick_offset, 0.0), (0, tick_size), (0, label_offset), "middle")


@dataclass
class AxisTick:
    tick_offset: float
    label_offset: int
    label_rotation: int
    label: str
    axis_position: AxisPosition
    font_size: InitVar[int | None] = None
    label_format: str | None = None
    formatter: Formatter = field(default=format_number, repr=False, compare=False)
    style: AxisStyle = field(default=DEFAULT_AXIS_STYLE, repr=False, compare=False)
    label_font_size: str = field(init=False)

    def __post_init__(self, font_size: int | None) -> None:
        self.label_font_size = f"{self.style.tick_label_font_size}px"
        if font_size is not None:
            self.set_label_font_size(font_size)

    def set_label_rotation(self, rotation: int) -> None:
        self.label_rotation = rotation

    def set_label_format(self, label_format: str) -> None:
        self.label_format = label_format

    def set_label_font_size(self, size: int) -> None:
        self.label_font_size = f"{size}px"

    @property
    def geometry(self) -> TickGeometry:
        return tick_geometry(self.axis_position, self.tick_offset, self.label_offset, self.style.tick_size)

    def formatted_label(self) -> str:
        if not self.label_format:
            return self.label
        try:
            value = float(self.label)
        except ValueError as exc:
            raise TickLabelFormatError(self.label, self.label_format) from exc
        # Billions read better than the SI "giga" on chart axes.
        return self.formatter(self.label_format, value).replace("G", "B")

    def to_svg(self) -> ET.Element:
        text = self.formatted_label()
        geom = self.geometry
        label_x, label_y = geom.label_xy
        line = node(
            "line",
            {
                "x1": 0,
                "y1": 0,
                "x2": geom.line_end[0],
                "y2": geom.line_end[1],
                "shape-rendering": "crispEdges",
                "stroke": self.style.stroke_color,
                "stroke-width": "1px",
            },
        )
        label = node(
            "text",
            {
                "transform": rotate(self.label_rotation, label_x, label_y),
                "x": label_x,
                "y": label_y,
                "dy": self.style.tick_label_dy,
                "text-anchor": geom.text_anchor,
                "font-size": self.label_font_size,
                "font-family": self.style.font_family,
                "fill": self.style.text_color,
            },
            text=text,
        )
        return node("g", {"class": "tick", "transform": translate(*geom.translate)}, [line, label])
