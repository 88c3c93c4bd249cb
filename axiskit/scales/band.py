from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property
from typing import Any, Sequence

from axiskit.errors import ScaleDomainError
from axiskit.scales.base import DEFAULT_RANGE, ScaleKind, coerce_range, require_bounds


@dataclass(frozen=True)
class BandLayout:
    step: float
    bandwidth: float
    positions: dict[str, float]


@dataclass(frozen=True)
class ScaleBand:
    """Categorical scale giving each category an equal-width band of the range.

    ``padding_inner`` is the fraction of a step left empty between bands,
    ``padding_outer`` the number of steps left empty before the first and after
    the last band, and ``align`` spreads the leftover space (0 puts it all at the
    end, 1 all at the start).
    """

    domain: tuple[str, ...] = ()
    range: tuple[int, ...] = DEFAULT_RANGE
    padding_inner: float = 0.1
    padding_outer: float = 0.1
    align: float = 0.5

    @property
    def kind(self) -> ScaleKind:
        return ScaleKind.BAND

    def set_domain(self, values: Sequence[Any]) -> "ScaleBand":
        seen: dict[str, None] = {}
        for value in values:
            seen.setdefault(str(value), None)
        return replace(self, domain=tuple(seen))

    def set_range(self, values: Sequence[int]) -> "ScaleBand":
        return replace(self, range=coerce_range(values))

    def set_padding(self, padding: float) -> "ScaleBand":
        return self.set_inner_padding(padding).set_outer_padding(padding)

    def set_inner_padding(self, padding: float) -> "ScaleBand":
        if not 0.0 <= padding <= 1.0:
            raise ScaleDomainError("padding_inner must be in [0, 1]")
        return replace(self, padding_inner=float(padding))

    def set_outer_padding(self, padding: float) -> "ScaleBand":
        if padding < 0.0:
            raise ScaleDomainError("padding_outer must be >= 0")
        return replace(self, padding_outer=float(padding))

    def set_align(self, align: float) -> "ScaleBand":
        if not 0.0 <= align <= 1.0:
            raise ScaleDomainError("align must be in [0, 1]")
        return replace(self, align=float(align))

    @cached_property
    def layout(self) -> BandLayout:
        n = len(self.domain)
        r0, r1 = float(self.range[0]), float(self.range[1])
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1.0, n - self.padding_inner + self.padding_outer * 2.0)
        start += (stop - start - step * (n - self.padding_inner)) * self.align
        bandwidth = step * (1.0 - self.padding_inner)
        values = [start + step * i for i in range(n)]
        if reverse:
            values.reverse()
        return BandLayout(
            step=step,
            bandwidth=bandwidth,
            positions=dict(zip(self.domain, values, strict=True)),
        )

    def get_domain(self) -> list[str]:
        return list(self.domain)

    def scale(self, category: Any) -> float:
        require_bounds(self.domain, self.range)
        key = str(category)
        try:
            return self.layout.positions[key]
        except KeyError:
            raise ScaleDomainError(f"category not in band domain: {key!r}") from None

    def bandwidth(self) -> float:
        return self.layout.bandwidth

    def step(self) -> float:
        return self.layout.step

    def range_start(self) -> float:
        return float(self.range[0])

    def range_end(self) -> float:
        return float(self.range[1])

    def is_range_reversed(self) -> bool:
        return self.range_start() > self.range_end()

    def get_ticks(self) -> list[str]:
        return list(self.domain)
