"""Complexity scoring for functions and modules.

Two independent representations are computed:

- branching complexity, an integer decision-point count per function. This is
  the canonical score consumed by the rule engine.
- composite scores, continuous 0.0-1.0 heuristics combining symbol density and
  average symbol size. They are relative-risk proxies, not standard metrics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tree_sitter import Node

# Node types that add one decision point each.
DECISION_NODE_TYPES = frozenset(
    {
        "if_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "switch_case",
        "catch_clause",
    }
)

LOGICAL_OPERATORS = frozenset({"&&", "||"})

# Nested declarations are scored on their own.
NESTED_SCOPE_TYPES = frozenset(
    {"function_declaration", "generator_function_declaration"}
)

DENSITY_WEIGHT = 0.4
SIZE_WEIGHT = 0.6
MODULE_SIZE_DIVISOR = 50.0
SYMBOL_SIZE_DIVISOR = 30.0


def _is_logical_operator(node: Node) -> bool:
    if node.type != "binary_expression":
        return False
    operator = node.child_by_field_name("operator")
    return operator is not None and operator.type in LOGICAL_OPERATORS


def _count_decision_points(node: Node) -> int:
    count = 0
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        if current.type in NESTED_SCOPE_TYPES:
            continue
        if current.type in DECISION_NODE_TYPES or _is_logical_operator(current):
            count += 1
        stack.extend(reversed(current.children))
    return count


def branching_complexity(body: Node | None) -> int:
    """Compute the cyclomatic-style complexity of a function body.

    Starts at 1 and adds one per ``if`` (so each ``else if`` counts once),
    loop, ``case`` label, ``catch`` clause and ``&&``/``||`` operator.
    ``default`` labels do not count.

    Args:
        body: The function's body node, or None for bodiless declarations

    Returns:
        Complexity score, at least 1.
    """
    if body is None:
        return 1
    return 1 + _count_decision_points(body)


def _saturating_size(size: float, divisor: float) -> float:
    if size <= 0:
        return 0.0
    return 1.0 - 1.0 / (1.0 + size / divisor)


def module_composite_score(loc: int, symbol_count: int) -> float:
    """Composite module score in [0, 1]; exactly 0.0 when ``loc`` is 0."""
    if loc == 0:
        return 0.0

    symbol_density = min(symbol_count / loc, 1.0)
    avg_symbol_size = loc / symbol_count if symbol_count > 0 else 0.0
    size_score = _saturating_size(avg_symbol_size, MODULE_SIZE_DIVISOR)

    score = DENSITY_WEIGHT * symbol_density + SIZE_WEIGHT * size_score
    return max(0.0, min(score, 1.0))


def symbol_composite_score(loc: int) -> float:
    """Per-symbol saturating size score in [0, 1)."""
    return max(0.0, min(_saturating_size(loc, SYMBOL_SIZE_DIVISOR), 1.0))


__all__ = [
    "DENSITY_WEIGHT",
    "MODULE_SIZE_DIVISOR",
    "SIZE_WEIGHT",
    "SYMBOL_SIZE_DIVISOR",
    "branching_complexity",
    "module_composite_score",
    "symbol_composite_score",
]
