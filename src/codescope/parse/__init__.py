"""Parsing utilities for TypeScript and JavaScript sources."""

from codescope.parse.complexity import (
    branching_complexity,
    module_composite_score,
    symbol_composite_score,
)
from codescope.parse.lines import LineCounts, classify_lines
from codescope.parse.treesitter_imports import IMPORT_STRENGTH, extract_imports
from codescope.parse.treesitter_symbols import (
    extract_symbols,
    get_parser,
    symbol_kind_for,
)

__all__ = [
    "IMPORT_STRENGTH",
    "LineCounts",
    "branching_complexity",
    "classify_lines",
    "extract_imports",
    "extract_symbols",
    "get_parser",
    "module_composite_score",
    "symbol_composite_score",
    "symbol_kind_for",
]
