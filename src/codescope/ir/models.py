"""Module IR models.

This module contains the normalized intermediate representation produced for
every analyzed file: symbols, dependency edges and quality findings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

SymbolKind = Literal[
    "class", "function", "const", "variable", "interface", "type", "enum"
]
DepKind = Literal["import", "use", "inherit", "aggregate", "compose"]
Severity = Literal["info", "warning", "error"]


class QualityMetric(BaseModel):
    """A single finding emitted by a quality rule."""

    name: str
    value: float
    threshold: float | None = None
    severity: Severity = "info"
    message: str | None = None

    @property
    def is_breach(self) -> bool:
        return self.severity != "info"


class Symbol(BaseModel):
    """A declared code entity."""

    kind: SymbolKind
    name: str
    loc: int = Field(ge=1, description="Inclusive line span of the declaration")
    branching_complexity: int | None = Field(
        default=None, description="Decision-point count, functions only"
    )
    composite_score: float | None = Field(
        default=None, description="Saturating size score in [0, 1]"
    )
    metrics: list[QualityMetric] = Field(default_factory=list)

    @model_validator(mode="after")
    def _complexity_only_on_functions(self) -> Symbol:
        if self.kind != "function" and self.branching_complexity is not None:
            msg = f"{self.kind} symbol {self.name!r} cannot carry branching complexity"
            raise ValueError(msg)
        return self


class DepEdge(BaseModel):
    """A directed dependency relation between modules."""

    source: str | None = None
    target: str | None = None
    relation: DepKind
    strength: float = Field(ge=0.0, le=1.0)
    files: int | None = None


class Module(BaseModel):
    """The unit of analysis for one source file.

    ``loc``, ``comment_lines`` and ``blank_lines`` are mutually exclusive and
    sum to the physical line count of the file.
    """

    path: str
    language: str | None = None
    loc: int = 0
    comment_lines: int = 0
    blank_lines: int = 0
    composite_score: float | None = None
    symbols: list[Symbol] = Field(default_factory=list)
    metrics: list[QualityMetric] = Field(default_factory=list)
    outgoing: list[DepEdge] = Field(default_factory=list)
    incoming: list[DepEdge] = Field(default_factory=list)

    @property
    def total_lines(self) -> int:
        return self.loc + self.comment_lines + self.blank_lines

    def symbols_of_kind(self, kind: SymbolKind) -> list[Symbol]:
        return [symbol for symbol in self.symbols if symbol.kind == kind]


__all__ = [
    "DepEdge",
    "DepKind",
    "Module",
    "QualityMetric",
    "Severity",
    "Symbol",
    "SymbolKind",
]
