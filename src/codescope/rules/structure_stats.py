"""Structure statistics rule: symbol counts by kind."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from codescope.ir.models import QualityMetric, Severity
from codescope.rules.base import info_metric, threshold_metric

if TYPE_CHECKING:
    from codescope.ir.models import Module, Symbol

TYPE_DEFINITION_KINDS = ("interface", "type", "enum")


class StructureStatsRule:
    """Counts symbols by kind.

    Function count and the combined type definition count (interfaces, type
    aliases and enums) are checked against thresholds. Class and interface
    counts, and non-zero comment and blank line counts, are informational.
    """

    def __init__(
        self,
        max_functions_per_file: int = 20,
        max_types_per_file: int = 30,
        severity: Severity = "warning",
    ) -> None:
        self.max_functions_per_file = max_functions_per_file
        self.max_types_per_file = max_types_per_file
        self.severity = severity

    @property
    def name(self) -> str:
        return "structure_stats"

    def check_module(self, module: Module) -> list[QualityMetric]:
        counts = Counter(symbol.kind for symbol in module.symbols)
        function_count = counts["function"]
        total_types = sum(counts[kind] for kind in TYPE_DEFINITION_KINDS)

        metrics = [
            threshold_metric(
                "function_count",
                function_count,
                self.max_functions_per_file,
                self.severity,
                f"File has {function_count} functions, "
                f"exceeds threshold of {self.max_functions_per_file}",
            ),
            info_metric("class_count", counts["class"]),
            info_metric("interface_count", counts["interface"]),
            threshold_metric(
                "type_definition_count",
                total_types,
                self.max_types_per_file,
                self.severity,
                f"File has {total_types} type definitions, "
                f"exceeds threshold of {self.max_types_per_file}",
            ),
        ]

        if module.comment_lines > 0:
            metrics.append(info_metric("comment_lines", module.comment_lines))
        if module.blank_lines > 0:
            metrics.append(info_metric("blank_lines", module.blank_lines))

        return metrics

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]:
        return []


__all__ = ["StructureStatsRule"]
