from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import math
import re
from typing import Callable, Protocol

import numpy as np

from axiskit.errors import FormatSpecError


# [[fill]align][sign][symbol][0][width][,][.precision][~][type]
_SPEC_RE = re.compile(r"^(?:(.)?([<>=^]))?([+\-( ])?([$#])?(0)?(\d+)?(,)?(\.\d+)?(~)?([a-z%])?$", re.IGNORECASE)

SI_PREFIXES = ("y", "z", "a", "f", "p", "n", "µ", "m", "", "k", "M", "G", "T", "P", "E", "Z", "Y")
FORMAT_TYPES = frozenset("%bdefgnoprsxX")


class Formatter(Protocol):
    def __call__(self, pattern: str, value: float) -> str:
        ...


@dataclass(frozen=True)
class FormatSpec:
    fill: str = " "
    align: str = ">"
    sign: str = "-"
    symbol: str = ""
    zero: bool = False
    width: int | None = None
    comma: bool = False
    precision: int | None = None
    trim: bool = False
    type: str = ""


@lru_cache(maxsize=128)
def parse_format_spec(pattern: str) -> FormatSpec:
    if not isinstance(pattern, str):
        raise FormatSpecError(f"format pattern must be a string, got {type(pattern).__name__}")
    match = _SPEC_RE.match(pattern)
    if match is None:
        raise FormatSpecError(f"invalid format: {pattern!r}")
    fill, align, sign, symbol, zero, width, comma, precision, trim, type_ = match.groups()
    if type_ is not None and type_ not in FORMAT_TYPES:
        raise FormatSpecError(f"unsupported format type {type_!r} in {pattern!r}")
    return FormatSpec(
        fill=fill if fill is not None else " ",
        align=align or ">",
        sign=sign or "-",
        symbol=symbol or "",
        zero=zero is not None,
        width=int(width) if width is not None else None,
        comma=comma is not None,
        precision=int(precision[1:]) if precision is not None else None,
        trim=trim is not None,
        type=type_ or "",
    )


def format_number(pattern: str, value: float) -> str:
    """Format ``value`` with a d3-style format pattern such as ``".2s"`` or ``",.0f"``."""
    spec = parse_format_spec(pattern)
    fill, align, sign, symbol = spec.fill, spec.align, spec.sign, spec.symbol
    zero, width, comma, precision, trim, type_ = spec.zero, spec.width or 0, spec.comma, spec.precision, spec.trim, spec.type

    if type_ == "n":
        comma = True
        type_ = "g"
    elif not type_:
        if precision is None:
            precision = 12
        trim = True
        type_ = "g"

    if zero or (fill == "0" and align == "="):
        zero = True
        fill = "0"
        align = "="

    if symbol == "$":
        prefix = "$"
    elif symbol == "#" and type_ in "boxX":
        prefix = "0" + type_.lower()
    else:
        prefix = ""
    suffix = "%" if type_ in "%p" else ""
    maybe_suffix = type_ in "defgprs%"

    if precision is None:
        precision = 6
    elif type_ in "gprs":
        precision = max(1, min(21, precision))
    else:
        precision = max(0, min(20, precision))

    number = float(value)
    negative = number < 0 or (number == 0 and math.copysign(1.0, number) < 0)
    prefix_exponent = 0
    if math.isnan(number):
        body = "NaN"
    elif math.isinf(number):
        body = "Infinity"
    elif type_ == "s":
        body, prefix_exponent = _format_prefix_auto(abs(number), precision)
    else:
        body = _FORMAT_TYPES[type_](abs(number), precision)

    if trim:
        body = _trim(body)

    # A negative value that rounds to zero is shown unsigned.
    if negative and _is_zero(body) and sign != "+":
        negative = False

    if negative:
        value_prefix = ("(" if sign == "(" else "-") + prefix
    else:
        value_prefix = ("" if sign in "-(" else sign) + prefix
    value_suffix = (SI_PREFIXES[8 + prefix_exponent // 3] if type_ == "s" else "") + suffix
    if negative and sign == "(":
        value_suffix += ")"

    if maybe_suffix:
        for i, ch in enumerate(body):
            if ch not in "0123456789":
                value_suffix = body[i:] + value_suffix
                body = body[:i]
                break

    if comma and not zero:
        body = _group(body, math.inf)

    length = len(value_prefix) + len(body) + len(value_suffix)
    padding = fill * (width - length) if length < width else ""

    if comma and zero:
        body = _group(padding + body, width - len(value_suffix) if padding else math.inf)
        padding = ""

    if align == "<":
        return value_prefix + body + value_suffix + padding
    if align == "=":
        return value_prefix + padding + body + value_suffix
    if align == "^":
        half = len(padding) >> 1
        return padding[:half] + value_prefix + body + value_suffix + padding[half:]
    return padding + value_prefix + body + value_suffix


def _is_zero(body: str) -> bool:
    try:
        return float(body) == 0
    except ValueError:
        return False


def _decimal_parts(x: float, p: int) -> tuple[str, int]:
    """Significant digits (no decimal point) and decimal exponent of ``x`` at ``p`` digits."""
    if p > 0:
        text = f"{x:.{p - 1}e}"
    else:
        text = np.format_float_scientific(x, unique=True, trim="-")
    mantissa, exponent = text.split("e")
    return mantissa.replace(".", ""), int(exponent)


def _to_exponential(x: float, p: int) -> str:
    mantissa, exponent = f"{x:.{p}e}".split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"


def _to_precision(x: float, p: int) -> str:
    coefficient, exponent = _decimal_parts(x, p)
    if exponent < -6 or exponent >= p:
        mantissa = coefficient[0] + ("." + coefficient[1:] if len(coefficient) > 1 else "")
        return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    return f"{x:.{p - 1 - exponent}f}"


def _format_rounded(x: float, p: int) -> str:
    coefficient, exponent = _decimal_parts(x, p)
    if exponent < 0:
        return "0." + "0" * (-exponent - 1) + coefficient
    if len(coefficient) > exponent + 1:
        return coefficient[: exponent + 1] + "." + coefficient[exponent + 1 :]
    return coefficient + "0" * (exponent - len(coefficient) + 1)


def _format_prefix_auto(x: float, p: int) -> tuple[str, int]:
    coefficient, exponent = _decimal_parts(x, p)
    prefix_exponent = max(-8, min(8, math.floor(exponent / 3))) * 3
    i = exponent - prefix_exponent + 1
    n = len(coefficient)
    if i == n:
        body = coefficient
    elif i > n:
        body = coefficient + "0" * (i - n)
    elif i > 0:
        body = coefficient[:i] + "." + coefficient[i:]
    else:
        body = "0." + "0" * (-i) + _decimal_parts(x, max(0, p + i - 1))[0]
    return body, prefix_exponent


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _trim(s: str) -> str:
    """Drop insignificant trailing zeros, e.g. ``"1.2000e+3"`` -> ``"1.2e+3"``."""
    i0 = -1
    i1 = 0
    for i in range(1, len(s)):
        ch = s[i]
        if ch == ".":
            i0 = i1 = i
        elif ch == "0":
            if i0 == 0:
                i0 = i
            i1 = i
        elif ch in "123456789":
            if i0 > 0:
                i0 = 0
        else:
            break
    return s[:i0] + s[i1 + 1 :] if i0 > 0 else s


def _group(value: str, width: float) -> str:
    parts: list[str] = []
    i = len(value)
    length = 0
    g = 3
    while i > 0 and g > 0:
        if length + g + 1 > width:
            g = max(1, int(width) - length)
        parts.append(value[max(0, i - g) : i])
        i -= g
        length += g + 1
        if length > width:
            break
    return ",".join(reversed(parts))


_FORMAT_TYPES: dict[str, Callable[[float, int], str]] = {
    "%": lambda x, p: f"{x * 100:.{p}f}",
    "b": lambda x, p: format(_round_half_up(x), "b"),
    "d": lambda x, p: str(_round_half_up(x)),
    "e": _to_exponential,
    "f": lambda x, p: f"{x:.{p}f}",
    "g": _to_precision,
    "o": lambda x, p: format(_round_half_up(x), "o"),
    "p": lambda x, p: _format_rounded(x * 100, p),
    "r": _format_rounded,
    "x": lambda x, p: format(_round_half_up(x), "x"),
    "X": lambda x, p: format(_round_half_up(x), "X"),
}
