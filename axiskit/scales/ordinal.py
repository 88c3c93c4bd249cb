from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, NoReturn, Sequence

from axiskit.errors import ScaleNotImplementedError
from axiskit.scales.base import DEFAULT_RANGE, ScaleKind, coerce_range


@dataclass(frozen=True)
class ScaleOrdinal:
    """Placeholder for an ordinal scale.

    It can be built and configured so callers can wire it up, but every mapping
    operation raises ``ScaleNotImplementedError``.
    """

    domain: tuple[str, ...] = ()
    range: tuple[int, ...] = DEFAULT_RANGE

    @property
    def kind(self) -> ScaleKind:
        return ScaleKind.ORDINAL

    def set_domain(self, values: Sequence[Any]) -> "ScaleOrdinal":
        return replace(self, domain=tuple(str(v) for v in values))

    def set_range(self, values: Sequence[int]) -> "ScaleOrdinal":
        return replace(self, range=coerce_range(values))

    def get_domain(self) -> list[str]:
        return list(self.domain)

    def range_start(self) -> float:
        return float(self.range[0])

    def range_end(self) -> float:
        return float(self.range[1])

    def is_range_reversed(self) -> bool:
        return self.range_start() > self.range_end()

    def domain_max(self) -> NoReturn:
        _unimplemented("domain_max")

    def scale(self, value: Any) -> NoReturn:
        _unimplemented("scale")

    def bandwidth(self) -> NoReturn:
        _unimplemented("bandwidth")

    def get_ticks(self) -> NoReturn:
        _unimplemented("get_ticks")


def _unimplemented(operation: str) -> NoReturn:
    raise ScaleNotImplementedError(f"ordinal scale does not implement {operation}()")
