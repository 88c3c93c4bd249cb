from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Union
import xml.etree.ElementTree as ET

from axiskit.chart import ChartView
from axiskit.components import AxisLine, AxisTick
from axiskit.errors import ScaleContractError, ScaleNotImplementedError
from axiskit.format import Formatter, format_number
from axiskit.markup import node, rotate, serialize
from axiskit.position import AxisPosition
from axiskit.scales import ScaleOrdinal, ScaleType, band_bandwidth, is_band, scale_value
from axiskit.style import DEFAULT_AXIS_STYLE, AxisStyle


LOGGER = logging.getLogger(__name__)

# Stand-in for real text metrics: tick space + characters * font size * proportion.
TICK_SPACE_PX = 12
CHARACTER_WIDTH_RATIO = 0.7
CONTINUOUS_LABEL_MARGIN_CHARS = 2


@dataclass(frozen=True)
class BandTickLabel:
    characters: int


@dataclass(frozen=True)
class ContinuousTickLabel:
    upper_bound: float


TickLabelSize = Union[BandTickLabel, ContinuousTickLabel]


def characters_to_px(characters: int, font_size: int) -> int:
    # Halves round up.
    return math.floor(TICK_SPACE_PX + characters * font_size * CHARACTER_WIDTH_RATIO + 0.5)


def tick_label(value: Any) -> str:
    """Raw label text for a tick value; integral numbers are written without a fraction."""
    if isinstance(value, str):
        return value
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def band_center_offset(scale: ScaleType, value: Any) -> float:
    bandwidth = band_bandwidth(scale)
    if bandwidth is None:
        raise ScaleContractError(f"band offset requested from a {scale.kind.value} scale")
    return scale.scale(value) + bandwidth / 2.0


def calculate_max_tick_length(scale: ScaleType) -> TickLabelSize:
    if is_band(scale):
        return BandTickLabel(max((len(str(c)) for c in scale.get_domain()), default=0))
    if isinstance(scale, ScaleOrdinal):
        raise ScaleNotImplementedError("tick label sizing is not implemented for ordinal scales")
    return ContinuousTickLabel(scale.domain_max())


class Axis:
    """An axis drawn along one edge of a chart for a given scale.

    The scale is read once, at construction: ticks, offsets and the label
    sizing hint are copied out of it, so changing or replacing the scale later
    does not move an existing axis. The tick-level setters patch the already
    built ticks in place.
    """

    def __init__(
        self,
        scale: ScaleType,
        position: AxisPosition,
        chart: ChartView,
        *,
        style: AxisStyle = DEFAULT_AXIS_STYLE,
        formatter: Formatter = format_number,
    ) -> None:
        self.position = AxisPosition(position)
        self.style = style
        self.formatter = formatter
        self.length = self._axis_length(self.position, chart)
        self.ticks = self._generate_ticks(scale)
        self.axis_line = self._axis_line()
        self.max_tick_length = calculate_max_tick_length(scale)
        self.label = ""
        self.label_rotation = 0
        self.label_format = ""
        self.label_font_size = f"{style.axis_label_font_size}px"
        self.tick_label_font_size: int | None = None
        LOGGER.debug(
            "built %s axis: %s scale, %d ticks, length %s",
            self.position.value,
            scale.kind.value,
            len(self.ticks),
            self.length,
        )

    @classmethod
    def top(cls, scale: ScaleType, chart: ChartView, **kwargs: Any) -> "Axis":
        return cls(scale, AxisPosition.TOP, chart, **kwargs)

    @classmethod
    def right(cls, scale: ScaleType, chart: ChartView, **kwargs: Any) -> "Axis":
        return cls(scale, AxisPosition.RIGHT, chart, **kwargs)

    @classmethod
    def bottom(cls, scale: ScaleType, chart: ChartView, **kwargs: Any) -> "Axis":
        return cls(scale, AxisPosition.BOTTOM, chart, **kwargs)

    @classmethod
    def left(cls, scale: ScaleType, chart: ChartView, **kwargs: Any) -> "Axis":
        return cls(scale, AxisPosition.LEFT, chart, **kwargs)

    def set_axis_label(self, label: str) -> "Axis":
        self.label = label
        return self

    def set_axis_label_font_size(self, size: int) -> "Axis":
        self.label_font_size = f"{size}px"
        return self

    def set_tick_label_rotation(self, rotation: int) -> "Axis":
        self.label_rotation = rotation
        for tick in self.ticks:
            tick.set_label_rotation(rotation)
        return self

    def set_tick_label_font_size(self, size: int) -> "Axis":
        self.tick_label_font_size = size
        for tick in self.ticks:
            tick.set_label_font_size(size)
        return self

    def set_tick_label_format(self, label_format: str) -> "Axis":
        self.label_format = label_format
        for tick in self.ticks:
            tick.set_label_format(label_format)
        return self

    def has_label(self) -> bool:
        return bool(self.label)

    @property
    def label_offset(self) -> int:
        if self.position.is_horizontal:
            return self.style.horizontal_label_offset
        return self.style.vertical_label_offset

    def calculate_label_offset(self) -> int:
        """Distance from the axis line to the axis label, clear of the tick labels."""
        if self.position.is_horizontal:
            return self.style.horizontal_axis_label_gap
        font_size = self.tick_label_font_size or self.style.tick_label_font_size
        size = self.max_tick_length
        if isinstance(size, BandTickLabel):
            characters = size.characters
        else:
            characters = len(self.formatter(self.label_format, size.upper_bound)) + CONTINUOUS_LABEL_MARGIN_CHARS
        return characters_to_px(characters, font_size)

    def axis_label_placement(self) -> tuple[int, int, int]:
        """``(x, y, rotation)`` of the axis label; side labels are turned to read along their edge."""
        offset = self.calculate_label_offset()
        half = self.length // 2
        if self.position is AxisPosition.TOP:
            return (half, -(offset - 10), 0)
        if self.position is AxisPosition.BOTTOM:
            return (half, offset, 0)
        if self.position is AxisPosition.LEFT:
            return (-half, -offset, -90)
        return (half, -offset, 90)

    def to_svg(self) -> ET.Element:
        group = node("g", {"class": self.position.css_class}, [self.axis_line.to_svg()])
        for tick in self.ticks:
            group.append(tick.to_svg())

        if self.has_label():
            x, y, rotation = self.axis_label_placement()
            group.append(
                node(
                    "text",
                    {
                        "x": x,
                        "y": y,
                        "text-anchor": "middle",
                        "font-size": self.label_font_size,
                        "font-family": self.style.font_family,
                        "fill": self.style.text_color,
                        "transform": rotate(rotation),
                    },
                    text=self.label,
                )
            )
        return group

    def to_markup(self) -> str:
        return serialize(self.to_svg())

    @staticmethod
    def _axis_length(position: AxisPosition, chart: ChartView) -> int:
        if position.is_horizontal:
            return int(chart.view_width())
        return int(chart.view_height())

    def _generate_ticks(self, scale: ScaleType) -> list[AxisTick]:
        banded = is_band(scale)
        ticks: list[AxisTick] = []
        for value in scale.get_ticks():
            if banded:
                tick_offset = band_center_offset(scale, value)
            else:
                tick_offset = scale_value(scale, value)
            ticks.append(
                AxisTick(
                    tick_offset=tick_offset,
                    label_offset=self.label_offset,
                    label_rotation=0,
                    label=tick_label(value),
                    axis_position=self.position,
                    formatter=self.formatter,
                    style=self.style,
                )
            )
        return ticks

    def _axis_line(self) -> AxisLine:
        if self.position.is_horizontal:
            return AxisLine(0.0, 0.0, float(self.length), 0.0, style=self.style)
        return AxisLine(0.0, 0.0, 0.0, float(self.length), style=self.style)
