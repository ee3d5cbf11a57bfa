"""Function size rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescope.ir.models import QualityMetric, Severity
from codescope.rules.base import threshold_metric

if TYPE_CHECKING:
    from codescope.ir.models import Module, Symbol


class FunctionSizeRule:
    """Flags functions spanning more than ``max_loc`` lines."""

    def __init__(self, max_loc: int = 40, severity: Severity = "warning") -> None:
        self.max_loc = max_loc
        self.severity = severity

    @property
    def name(self) -> str:
        return "function_size"

    def _is_large(self, symbol: Symbol) -> bool:
        return symbol.kind == "function" and symbol.loc > self.max_loc

    def check_module(self, module: Module) -> list[QualityMetric]:
        large = [symbol for symbol in module.symbols if self._is_large(symbol)]
        details = ", ".join(f"{f.name} ({f.loc} LOC)" for f in large)
        return [
            threshold_metric(
                "large_function_count",
                len(large),
                0,
                self.severity,
                f"{len(large)} functions exceed {self.max_loc} lines: {details}",
            )
        ]

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]:
        if not self._is_large(symbol):
            return []
        return [
            threshold_metric(
                "function_size",
                symbol.loc,
                self.max_loc,
                self.severity,
                f"Function has {symbol.loc} lines, "
                f"exceeds threshold of {self.max_loc}",
            )
        ]


__all__ = ["FunctionSizeRule"]
