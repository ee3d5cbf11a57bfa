"""Branching complexity rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescope.ir.models import QualityMetric, Severity
from codescope.rules.base import threshold_metric

if TYPE_CHECKING:
    from codescope.ir.models import Module, Symbol


class ComplexityRule:
    """Flags functions whose branching complexity exceeds ``max_complexity``.

    Symbols without a complexity value are never flagged.
    """

    def __init__(self, max_complexity: int = 10, severity: Severity = "warning") -> None:
        self.max_complexity = max_complexity
        self.severity = severity

    @property
    def name(self) -> str:
        return "complexity"

    def _is_complex(self, symbol: Symbol) -> bool:
        return (
            symbol.kind == "function"
            and symbol.branching_complexity is not None
            and symbol.branching_complexity > self.max_complexity
        )

    def check_module(self, module: Module) -> list[QualityMetric]:
        complex_functions = [s for s in module.symbols if self._is_complex(s)]
        details = ", ".join(
            f"{f.name} (complexity: {f.branching_complexity})"
            for f in complex_functions
        )
        return [
            threshold_metric(
                "high_complexity_count",
                len(complex_functions),
                0,
                self.severity,
                f"{len(complex_functions)} functions exceed complexity "
                f"threshold of {self.max_complexity}: {details}",
            )
        ]

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]:
        if not self._is_complex(symbol) or symbol.branching_complexity is None:
            return []
        return [
            threshold_metric(
                "cyclomatic_complexity",
                symbol.branching_complexity,
                self.max_complexity,
                self.severity,
                f"Cyclomatic complexity {symbol.branching_complexity} "
                f"exceeds threshold of {self.max_complexity}",
            )
        ]


__all__ = ["ComplexityRule"]
