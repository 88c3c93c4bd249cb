from axiskit.api import chart_frame
from axiskit.axis import Axis, BandTickLabel, ContinuousTickLabel, characters_to_px
from axiskit.chart import ChartFrame, ChartView
from axiskit.components import AxisLine, AxisTick
from axiskit.errors import (
    AxisKitError,
    ChartConfigError,
    FormatSpecError,
    MarkupSerializationError,
    ScaleContractError,
    ScaleDomainError,
    ScaleNotImplementedError,
    TickLabelFormatError,
)
from axiskit.format import format_number
from axiskit.position import AxisPosition
from axiskit.scales import ScaleBand, ScaleKind, ScaleLinear, ScaleLogarithmic, ScaleOrdinal
from axiskit.style import DEFAULT_AXIS_STYLE, AxisStyle, validate_axis_style

__all__ = [
    "Axis",
    "AxisKitError",
    "AxisLine",
    "AxisPosition",
    "AxisStyle",
    "AxisTick",
    "BandTickLabel",
    "ChartConfigError",
    "ChartFrame",
    "ChartView",
    "ContinuousTickLabel",
    "DEFAULT_AXIS_STYLE",
    "FormatSpecError",
    "MarkupSerializationError",
    "ScaleBand",
    "ScaleContractError",
    "ScaleDomainError",
    "ScaleKind",
    "ScaleLinear",
    "ScaleLogarithmic",
    "ScaleNotImplementedError",
    "ScaleOrdinal",
    "TickLabelFormatError",
    "chart_frame",
    "characters_to_px",
    "format_number",
    "validate_axis_style",
]
