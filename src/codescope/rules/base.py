"""Quality rule interface and registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from codescope.ir.models import QualityMetric, Severity

if TYPE_CHECKING:
    from codescope.ir.models import Module, Symbol

_SEVERITIES: dict[str, Severity] = {
    "info": "info",
    "warning": "warning",
    "error": "error",
}


def parse_severity(value: str) -> Severity:
    """Parse a severity name case-insensitively; unknown names map to info."""
    return _SEVERITIES.get(value.strip().lower(), "info")


def threshold_metric(
    name: str,
    value: float,
    threshold: float,
    severity: Severity,
    message: str,
) -> QualityMetric:
    """Build a measurement that breaches only when ``value > threshold``.

    Compliant measurements are reported as info without a message.
    """
    breached = value > threshold
    return QualityMetric(
        name=name,
        value=float(value),
        threshold=float(threshold),
        severity=severity if breached else "info",
        message=message if breached else None,
    )


def info_metric(
    name: str, value: float, threshold: float | None = None
) -> QualityMetric:
    return QualityMetric(
        name=name,
        value=float(value),
        threshold=None if threshold is None else float(threshold),
        severity="info",
    )


class QualityRule(Protocol):
    """A rule evaluated independently against modules and symbols."""

    @property
    def name(self) -> str:
        """Rule name for logging and identification."""
        ...

    def check_module(self, module: Module) -> list[QualityMetric]: ...

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]: ...


class RuleRegistry:
    """Ordered collection of quality rules.

    Findings are concatenated in registration order. Rules never see each
    other's output within one pass.
    """

    def __init__(self) -> None:
        self._rules: list[QualityRule] = []

    def register(self, rule: QualityRule) -> None:
        self._rules.append(rule)

    @property
    def rules(self) -> tuple[QualityRule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def check_module(self, module: Module) -> list[QualityMetric]:
        return [metric for rule in self._rules for metric in rule.check_module(module)]

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]:
        return [metric for rule in self._rules for metric in rule.check_symbol(symbol)]

    def apply(self, module: Module) -> Module:
        """Attach module and symbol findings in place and return the module."""
        module.metrics = self.check_module(module)
        for symbol in module.symbols:
            symbol.metrics = self.check_symbol(symbol)
        return module


__all__ = [
    "QualityRule",
    "RuleRegistry",
    "info_metric",
    "parse_severity",
    "threshold_metric",
]
