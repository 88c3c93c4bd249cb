from __future__ import annotations

import unittest

from axiskit.components import AxisLine, AxisTick, tick_geometry
from axiskit.errors import TickLabelFormatError
from axiskit.position import AxisPosition
from axiskit.style import validate_axis_style


def _tick(position: AxisPosition = AxisPosition.BOTTOM, **kwargs) -> AxisTick:
    params = dict(tick_offset=16.0, label_offset=16, label_rotation=0, label="label", axis_position=position)
    params.update(kwargs)
    return AxisTick(**params)


class AxisTickTests(unittest.TestCase):
    def test_tick_label_font_size_default(self) -> None:
        self.assertEqual(_tick().label_font_size, "12px")

    def test_tick_label_font_size_updated(self) -> None:
        tick = _tick()
        tick.set_label_font_size(20)
        self.assertEqual(tick.label_font_size, "20px")

    def test_tick_label_font_size_explicit(self) -> None:
        self.assertEqual(_tick(font_size=20).label_font_size, "20px")

    def test_geometry_per_position(self) -> None:
        left = tick_geometry(AxisPosition.LEFT, 30.0, 12)
        self.assertEqual((left.translate, left.line_end, left.label_xy, left.text_anchor), ((0.0, 30.0), (-6, 0), (-12, 0), "end"))
        right = tick_geometry(AxisPosition.RIGHT, 30.0, 12)
        self.assertEqual((right.translate, right.line_end, right.label_xy, right.text_anchor), ((0.0, 30.0), (6, 0), (12, 0), "start"))
        top = tick_geometry(AxisPosition.TOP, 30.0, 16)
        self.assertEqual((top.translate, top.line_end, top.label_xy, top.text_anchor), ((30.0, 0.0), (0, -6), (0, -16), "middle"))
        bottom = tick_geometry(AxisPosition.BOTTOM, 30.0, 16)
        self.assertEqual(
            (bottom.translate, bottom.line_end, bottom.label_xy, bottom.text_anchor), ((30.0, 0.0), (0, 6), (0, 16), "middle")
        )

    def test_unformatted_label_is_used_verbatim(self) -> None:
        self.assertEqual(_tick(label="Q1 2024").formatted_label(), "Q1 2024")

    def test_formatted_label_replaces_giga_with_billions(self) -> None:
        tick = _tick(label="1500000000")
        tick.set_label_format(".2s")
        self.assertEqual(tick.formatted_label(), "1.5B")

    def test_injected_formatter_is_used(self) -> None:
        calls: list[tuple[str, float]] = []

        def fake_format(pattern: str, value: float) -> str:
            calls.append((pattern, value))
            return "2G"

        tick = _tick(label="2", label_format="custom", formatter=fake_format)
        self.assertEqual(tick.formatted_label(), "2B")
        self.assertEqual(calls, [("custom", 2.0)])

    def test_non_numeric_label_with_format_raises(self) -> None:
        tick = _tick(label="apples", label_format=".1f")
        with self.assertRaises(TickLabelFormatError) as ctx:
            tick.formatted_label()
        self.assertEqual(ctx.exception.label, "apples")
        self.assertEqual(ctx.exception.pattern, ".1f")

    def test_to_svg_bottom_tick(self) -> None:
        tick = _tick(tick_offset=50.0, label="10")
        tick.set_label_rotation(45)
        group = tick.to_svg()
        self.assertEqual(group.tag, "g")
        self.assertEqual(group.get("class"), "tick")
        self.assertEqual(group.get("transform"), "translate(50,0)")
        line, text = list(group)
        self.assertEqual((line.get("x2"), line.get("y2")), ("0", "6"))
        self.assertEqual(line.get("stroke"), "#bbbbbb")
        self.assertEqual(text.text, "10")
        self.assertEqual(text.get("transform"), "rotate(45,0,16)")
        self.assertEqual(text.get("text-anchor"), "middle")
        self.assertEqual(text.get("dy"), ".35em")
        self.assertEqual(text.get("font-size"), "12px")

    def test_style_tokens_flow_into_tick_markup(self) -> None:
        style = validate_axis_style({"stroke_color": "#000000", "text_color": "#123456", "tick_size": 4})
        group = _tick(position=AxisPosition.LEFT, style=style).to_svg()
        line, text = list(group)
        self.assertEqual(line.get("x2"), "-4")
        self.assertEqual(line.get("stroke"), "#000000")
        self.assertEqual(text.get("fill"), "#123456")


class AxisLineTests(unittest.TestCase):
    def test_axis_line_markup(self) -> None:
        line = AxisLine(0.0, 0.0, 500.0, 0.0).to_svg()
        self.assertEqual(line.tag, "line")
        self.assertEqual(
            {k: line.get(k) for k in ("x1", "y1", "x2", "y2", "stroke-width", "stroke", "shape-rendering")},
            {
                "x1": "0",
                "y1": "0",
                "x2": "500",
                "y2": "0",
                "stroke-width": "1",
                "stroke": "#bbbbbb",
                "shape-rendering": "crispEdges",
            },
        )


if __name__ == "__main__":
    unittest.main()
