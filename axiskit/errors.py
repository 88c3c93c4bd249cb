from __future__ import annotations


class AxisKitError(Exception):
    """Base class for every error raised by axiskit."""


class ScaleDomainError(AxisKitError, ValueError):
    pass


class ScaleContractError(AxisKitError):
    """Raised when scale dispatch reaches a state correct callers never produce."""


class ScaleNotImplementedError(AxisKitError, NotImplementedError):
    pass


class FormatSpecError(AxisKitError, ValueError):
    pass


class TickLabelFormatError(AxisKitError, ValueError):
    def __init__(self, label: str, pattern: str) -> None:
        super().__init__(f"tick label {label!r} is not numeric and cannot be formatted with {pattern!r}")
        self.label = label
        self.pattern = pattern


class MarkupSerializationError(AxisKitError):
    pass


class ChartConfigError(AxisKitError, ValueError):
    pass
