"""Coupling rule over a module's dependency edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescope.ir.models import QualityMetric, Severity
from codescope.rules.base import info_metric, threshold_metric

if TYPE_CHECKING:
    from codescope.ir.models import Module, Symbol


class CouplingRule:
    """Checks fan-out and import count; fan-in is informational only.

    In this model every outgoing edge is one import, so fan-out and import
    count read the same edge list against different thresholds.
    """

    def __init__(
        self,
        max_fan_out: int = 7,
        max_imports: int = 15,
        severity: Severity = "warning",
    ) -> None:
        self.max_fan_out = max_fan_out
        self.max_imports = max_imports
        self.severity = severity

    @property
    def name(self) -> str:
        return "coupling"

    def check_module(self, module: Module) -> list[QualityMetric]:
        fan_out = len(module.outgoing)
        import_count = len(module.outgoing)
        fan_in = len(module.incoming)

        return [
            threshold_metric(
                "fan_out",
                fan_out,
                self.max_fan_out,
                self.severity,
                f"Module has {fan_out} dependencies, "
                f"exceeds threshold of {self.max_fan_out}",
            ),
            info_metric("fan_in", fan_in),
            threshold_metric(
                "import_count",
                import_count,
                self.max_imports,
                self.severity,
                f"Module has {import_count} imports, "
                f"exceeds threshold of {self.max_imports}",
            ),
        ]

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]:
        return []


__all__ = ["CouplingRule"]
