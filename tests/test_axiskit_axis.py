from __future__ import annotations

from dataclasses import dataclass
import unittest

from axiskit.axis import (
    Axis,
    BandTickLabel,
    ContinuousTickLabel,
    band_center_offset,
    calculate_max_tick_length,
    characters_to_px,
    tick_label,
)
from axiskit.errors import ScaleContractError, ScaleNotImplementedError, TickLabelFormatError
from axiskit.position import AxisPosition
from axiskit.scales import ScaleBand, ScaleLinear, ScaleLogarithmic, ScaleOrdinal


@dataclass
class _View:
    width: int = 500
    height: int = 300

    def view_width(self) -> int:
        return self.width

    def view_height(self) -> int:
        return self.height


def _linear(range_end: int = 500) -> ScaleLinear:
    return ScaleLinear().set_domain([0, 100]).set_range([0, range_end])


def _band() -> ScaleBand:
    return ScaleBand().set_domain(["a", "bb", "ccc"]).set_range([0, 300]).set_padding(0)


class AxisHelpersTests(unittest.TestCase):
    def test_characters_to_px(self) -> None:
        self.assertEqual(characters_to_px(6, 14), 71)
        self.assertEqual(characters_to_px(7, 14), 81)
        self.assertEqual(characters_to_px(0, 12), 12)
        # 12 + 15 * 0.7 lands exactly on 22.5.
        self.assertEqual(characters_to_px(15, 1), 23)

    def test_tick_label_text(self) -> None:
        self.assertEqual(tick_label(10.0), "10")
        self.assertEqual(tick_label(0.1), "0.1")
        self.assertEqual(tick_label(-0.0), "0")
        self.assertEqual(tick_label("cat"), "cat")

    def test_max_tick_length_per_scale_kind(self) -> None:
        self.assertEqual(calculate_max_tick_length(_band()), BandTickLabel(3))
        self.assertEqual(calculate_max_tick_length(_linear()), ContinuousTickLabel(100.0))
        self.assertEqual(calculate_max_tick_length(ScaleLogarithmic()), ContinuousTickLabel(1000.0))
        self.assertEqual(calculate_max_tick_length(ScaleBand()), BandTickLabel(0))

    def test_band_offset_requires_a_band_scale(self) -> None:
        self.assertEqual(band_center_offset(_band(), "bb"), 150.0)
        with self.assertRaises(ScaleContractError):
            band_center_offset(_linear(), 50.0)


class AxisConstructionTests(unittest.TestCase):
    def test_bottom_axis_with_linear_scale(self) -> None:
        axis = Axis.bottom(_linear(), _View())
        self.assertEqual(axis.position, AxisPosition.BOTTOM)
        self.assertEqual(axis.length, 500)
        self.assertEqual([t.tick_offset for t in axis.ticks], [float(v) for v in range(0, 501, 50)])
        self.assertEqual([t.label for t in axis.ticks], [str(v) for v in range(0, 101, 10)])
        self.assertTrue(all(t.label_offset == 16 for t in axis.ticks))
        line = axis.axis_line
        self.assertEqual((line.x1, line.y1, line.x2, line.y2), (0.0, 0.0, 500.0, 0.0))

    def test_left_axis_uses_view_height(self) -> None:
        axis = Axis.left(_linear(300), _View())
        self.assertEqual(axis.length, 300)
        self.assertTrue(all(t.label_offset == 12 for t in axis.ticks))
        line = axis.axis_line
        self.assertEqual((line.x1, line.y1, line.x2, line.y2), (0.0, 0.0, 0.0, 300.0))

    def test_band_ticks_land_on_band_centers(self) -> None:
        axis = Axis.bottom(_band(), _View())
        self.assertEqual([t.tick_offset for t in axis.ticks], [50.0, 150.0, 250.0])
        self.assertEqual([t.label for t in axis.ticks], ["a", "bb", "ccc"])
        self.assertEqual(axis.max_tick_length, BandTickLabel(3))

    def test_logarithmic_axis_ticks(self) -> None:
        axis = Axis.top(ScaleLogarithmic().set_range([0, 999]), _View())
        self.assertEqual([t.label for t in axis.ticks], ["1", "321", "641", "961"])
        self.assertAlmostEqual(axis.ticks[1].tick_offset, 320.0, places=9)

    def test_empty_tick_set_still_draws_the_line(self) -> None:
        axis = Axis.bottom(_linear().set_tick_count(0), _View())
        self.assertEqual(axis.ticks, [])
        self.assertEqual(len(list(axis.to_svg())), 1)

    def test_ordinal_scale_is_rejected(self) -> None:
        with self.assertRaises(ScaleNotImplementedError):
            Axis.left(ScaleOrdinal().set_domain(["x"]), _View())

    def test_axis_snapshots_scale_at_construction(self) -> None:
        scale = _linear()
        axis = Axis.bottom(scale, _View())
        before = [(t.tick_offset, t.label) for t in axis.ticks]
        scale = scale.set_domain([0, 1000]).set_range([0, 50])
        self.assertEqual([(t.tick_offset, t.label) for t in axis.ticks], before)
        self.assertEqual(axis.max_tick_length, ContinuousTickLabel(100.0))


class AxisMutatorTests(unittest.TestCase):
    def test_tick_label_font_size_updates_every_tick(self) -> None:
        axis = Axis.left(_linear(300), _View())
        axis.set_tick_label_font_size(20)
        self.assertTrue(all(t.label_font_size == "20px" for t in axis.ticks))
        fonts = {text.get("font-size") for text in axis.to_svg().iter("text")}
        self.assertEqual(fonts, {"20px"})

    def test_tick_label_rotation_and_format_update_every_tick(self) -> None:
        axis = Axis.bottom(_linear(), _View())
        axis.set_tick_label_rotation(-45).set_tick_label_format(".1f")
        self.assertTrue(all(t.label_rotation == -45 for t in axis.ticks))
        self.assertEqual(axis.ticks[1].formatted_label(), "10.0")
        self.assertEqual(axis.label_format, ".1f")

    def test_tick_format_on_band_labels_surfaces_an_error(self) -> None:
        axis = Axis.bottom(_band(), _View())
        axis.set_tick_label_format(".1f")
        with self.assertRaises(TickLabelFormatError):
            axis.to_svg()

    def test_axis_label_setters(self) -> None:
        axis = Axis.bottom(_linear(), _View())
        self.assertFalse(axis.has_label())
        axis.set_axis_label("Revenue").set_axis_label_font_size(18)
        self.assertTrue(axis.has_label())
        self.assertEqual(axis.label_font_size, "18px")


class AxisLabelPlacementTests(unittest.TestCase):
    def test_label_rotation_per_position(self) -> None:
        expected = {
            AxisPosition.TOP: 0,
            AxisPosition.BOTTOM: 0,
            AxisPosition.LEFT: -90,
            AxisPosition.RIGHT: 90,
        }
        for position, rotation in expected.items():
            axis = Axis(_linear(), position, _View()).set_axis_label("value")
            self.assertEqual(axis.axis_label_placement()[2], rotation, position)

    def test_horizontal_label_offset_is_fixed(self) -> None:
        bottom = Axis.bottom(_linear(), _View())
        top = Axis.top(_linear(), _View())
        self.assertEqual(bottom.calculate_label_offset(), 42)
        self.assertEqual(bottom.axis_label_placement(), (250, 42, 0))
        self.assertEqual(top.axis_label_placement(), (250, -32, 0))

    def test_vertical_label_offset_follows_upper_bound_width(self) -> None:
        axis = Axis.left(_linear(300), _View())
        # "100" plus two characters of margin at the default 12px font.
        self.assertEqual(axis.calculate_label_offset(), characters_to_px(5, 12))
        self.assertEqual(axis.axis_label_placement(), (-150, -54, -90))
        axis.set_tick_label_format(".3%")
        # "10000.000%" plus margin.
        self.assertEqual(axis.calculate_label_offset(), characters_to_px(12, 12))
        axis.set_tick_label_font_size(20)
        self.assertEqual(axis.calculate_label_offset(), characters_to_px(12, 20))

    def test_vertical_label_offset_for_band_uses_longest_category(self) -> None:
        axis = Axis.right(_band(), _View())
        self.assertEqual(axis.calculate_label_offset(), characters_to_px(3, 12))
        self.assertEqual(axis.axis_label_placement(), (150, -characters_to_px(3, 12), 90))


class AxisMarkupTests(unittest.TestCase):
    def test_axis_svg_structure(self) -> None:
        axis = Axis.left(_linear(300), _View()).set_axis_label("Count")
        group = axis.to_svg()
        children = list(group)
        self.assertEqual(group.get("class"), "y-axis")
        self.assertEqual(children[0].tag, "line")
        ticks = [c for c in children if c.get("class") == "tick"]
        self.assertEqual(len(ticks), 11)
        label = children[-1]
        self.assertEqual(label.tag, "text")
        self.assertEqual(label.text, "Count")
        self.assertEqual(label.get("transform"), "rotate(-90)")
        self.assertEqual(label.get("text-anchor"), "middle")

    def test_axis_without_label_has_no_title_text(self) -> None:
        group = Axis.top(_linear(), _View()).to_svg()
        self.assertEqual(group.get("class"), "x-axis")
        self.assertEqual(len(list(group)), 12)

    def test_to_markup_serializes(self) -> None:
        markup = Axis.bottom(_band(), _View()).to_markup()
        self.assertTrue(markup.startswith('<g class="x-axis">'))
        self.assertIn(">ccc</text>", markup)


if __name__ == "__main__":
    unittest.main()
