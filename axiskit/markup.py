from __future__ import annotations

import math
from typing import Any, Iterable, Mapping
import xml.etree.ElementTree as ET

from axiskit.errors import MarkupSerializationError


SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def attr_value(value: Any, precision: int = 6) -> str:
    """Render an attribute value; integral floats drop their fractional part."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        rounded = round(value, precision)
        if rounded == int(rounded):
            return str(int(rounded))
        return repr(rounded)
    return str(value)


def node(
    tag: str,
    attrs: Mapping[str, Any] | None = None,
    children: Iterable[ET.Element] = (),
    text: str | None = None,
) -> ET.Element:
    elem = ET.Element(tag, {key: attr_value(val) for key, val in (attrs or {}).items()})
    for child in children:
        elem.append(child)
    if text is not None:
        elem.text = text
    return elem


def translate(x: Any, y: Any) -> str:
    return f"translate({attr_value(x)},{attr_value(y)})"


def rotate(angle: Any, cx: Any | None = None, cy: Any | None = None) -> str:
    if cx is None or cy is None:
        return f"rotate({attr_value(angle)})"
    return f"rotate({attr_value(angle)},{attr_value(cx)},{attr_value(cy)})"


def serialize(elem: ET.Element) -> str:
    try:
        return ET.tostring(elem, encoding="unicode")
    except (TypeError, ValueError) as exc:
        raise MarkupSerializationError(f"failed to serialize <{elem.tag}>: {exc}") from exc
