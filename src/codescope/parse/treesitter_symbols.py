"""Tree-sitter based symbol extraction for TypeScript and JavaScript."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from codescope.ir.models import Symbol, SymbolKind
from codescope.parse.complexity import branching_complexity, symbol_composite_score

if TYPE_CHECKING:
    from collections.abc import Callable

Dialect = Literal["typescript", "tsx", "javascript"]

_LANGUAGE_FACTORIES: dict[Dialect, Callable[[], object]] = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
    "javascript": tree_sitter_javascript.language,
}

_PARSERS: dict[Dialect, Parser] = {}

# Declaration node type -> (symbol kind, name field).
_DECLARATION_KINDS: dict[str, tuple[SymbolKind, str]] = {
    "class_declaration": ("class", "name"),
    "abstract_class_declaration": ("class", "name"),
    "function_declaration": ("function", "name"),
    "generator_function_declaration": ("function", "name"),
    "interface_declaration": ("interface", "name"),
    "type_alias_declaration": ("type", "name"),
    "enum_declaration": ("enum", "name"),
}


def get_parser(dialect: Dialect) -> Parser:
    """Return the cached Tree-sitter parser for a dialect."""
    if dialect not in _PARSERS:
        lang = Language(_LANGUAGE_FACTORIES[dialect]())
        _PARSERS[dialect] = Parser(lang)
    return _PARSERS[dialect]


def symbol_kind_for(node_type: str) -> tuple[SymbolKind, str] | None:
    """Map a declaration node type to its symbol kind and name field."""
    return _DECLARATION_KINDS.get(node_type)


def node_loc(node: Node) -> int:
    """Inclusive line span of a node (rows are 0-indexed)."""
    return node.end_point[0] - node.start_point[0] + 1


def _decode_node_text(node: Node) -> str:
    return node.text.decode("utf8", errors="replace") if node.text else ""


def _create_symbol(node: Node, kind: SymbolKind, name: str) -> Symbol:
    loc = node_loc(node)
    complexity: int | None = None
    if kind == "function":
        complexity = branching_complexity(node.child_by_field_name("body"))

    return Symbol(
        kind=kind,
        name=name,
        loc=loc,
        branching_complexity=complexity,
        composite_score=symbol_composite_score(loc),
    )


def _traverse_node(node: Node, symbols: list[Symbol]) -> None:
    """Pre-order traversal collecting declared symbols."""
    mapping = symbol_kind_for(node.type)
    if mapping is not None:
        kind, name_field = mapping
        name_node = node.child_by_field_name(name_field)
        name = _decode_node_text(name_node) if name_node is not None else ""
        # Anonymous declarations (e.g. `export default function () {}`) are
        # not recorded.
        if name:
            symbols.append(_create_symbol(node, kind, name))

    for child in node.children:
        _traverse_node(child, symbols)


def extract_symbols(root: Node) -> list[Symbol]:
    """Extract declared symbols from a parsed syntax tree.

    Args:
        root: Root node of the concrete syntax tree

    Returns:
        Symbols in source declaration order. Function symbols carry their
        branching complexity; all symbols carry a composite size score.
    """
    symbols: list[Symbol] = []
    _traverse_node(root, symbols)
    return symbols


__all__ = [
    "Dialect",
    "extract_symbols",
    "get_parser",
    "node_loc",
    "symbol_kind_for",
]
