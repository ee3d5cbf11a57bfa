"""Module IR models and serialization."""

from codescope.ir.io import (
    load_modules_jsonl,
    module_from_json,
    module_to_dict,
    module_to_json,
    write_modules_jsonl,
)
from codescope.ir.models import (
    DepEdge,
    DepKind,
    Module,
    QualityMetric,
    Severity,
    Symbol,
    SymbolKind,
)

__all__ = [
    "DepEdge",
    "DepKind",
    "Module",
    "QualityMetric",
    "Severity",
    "Symbol",
    "SymbolKind",
    "load_modules_jsonl",
    "module_from_json",
    "module_to_dict",
    "module_to_json",
    "write_modules_jsonl",
]
