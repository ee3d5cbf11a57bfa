"""File size rule."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescope.ir.models import QualityMetric, Severity
from codescope.rules.base import info_metric, threshold_metric

if TYPE_CHECKING:
    from codescope.ir.models import Module, Symbol


class FileSizeRule:
    """Reports code lines per file and flags files over ``max_loc``."""

    def __init__(self, max_loc: int = 300, severity: Severity = "warning") -> None:
        self.max_loc = max_loc
        self.severity = severity

    @property
    def name(self) -> str:
        return "file_size"

    def check_module(self, module: Module) -> list[QualityMetric]:
        metrics = [info_metric("file_loc", module.loc, self.max_loc)]
        if module.loc > self.max_loc:
            metrics.append(
                threshold_metric(
                    "file_size",
                    module.loc,
                    self.max_loc,
                    self.severity,
                    f"File has {module.loc} lines, "
                    f"exceeds threshold of {self.max_loc}",
                )
            )
        return metrics

    def check_symbol(self, symbol: Symbol) -> list[QualityMetric]:
        return []


__all__ = ["FileSizeRule"]
