"""Tree-sitter based import extraction for TypeScript and JavaScript."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescope.ir.models import DepEdge

if TYPE_CHECKING:
    from tree_sitter import Node

# Heuristic weight for a static, resolvable import. Not a measured quantity.
IMPORT_STRENGTH = 0.7

_QUOTE_CHARS = "\"'"


def _import_source_text(node: Node) -> str:
    source_node = node.child_by_field_name("source")
    if source_node is None or not source_node.text:
        return ""
    raw = source_node.text.decode("utf8", errors="replace")
    return raw.strip(_QUOTE_CHARS)


def _traverse_imports(node: Node, edges: list[DepEdge]) -> None:
    if node.type == "import_statement":
        target = _import_source_text(node)
        if target:
            edges.append(
                DepEdge(
                    source=None,
                    target=target,
                    relation="import",
                    strength=IMPORT_STRENGTH,
                )
            )

    for child in node.children:
        _traverse_imports(child, edges)


def extract_imports(root: Node) -> list[DepEdge]:
    """Extract import edges in source order.

    The edge ``source`` is left unset and ``target`` is the raw specifier
    text, e.g. ``./utils`` or ``react``. Graph indexing records resolved
    copies with both endpoints set.
    """
    edges: list[DepEdge] = []
    _traverse_imports(root, edges)
    return edges


__all__ = ["IMPORT_STRENGTH", "extract_imports"]
