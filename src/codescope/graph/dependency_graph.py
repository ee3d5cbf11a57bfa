"""Directed dependency graph over analyzed modules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from codescope.graph.algos import find_cycles
from codescope.graph.resolve import resolve_import

if TYPE_CHECKING:
    from collections.abc import Iterable

    from codescope.ir.models import DepEdge, Module

log = logging.getLogger(__name__)


class DependencyGraph:
    """Module paths as nodes, DepEdge payloads as directed edges.

    Each path maps to exactly one node. Edges whose endpoints were never added
    are dropped silently, and queries on unknown paths return empty results.
    Build the graph fully before querying it.
    """

    def __init__(self) -> None:
        self._nodes: list[str] = []
        self._path_to_node: dict[str, int] = {}
        self._outgoing: dict[int, list[tuple[int, DepEdge]]] = {}
        self._incoming: dict[int, list[tuple[int, DepEdge]]] = {}
        self._edge_count = 0

    def add_module(self, module: Module | str) -> int:
        """Add a module (or bare path) as a node; re-adding returns the same node."""
        path = module if isinstance(module, str) else module.path
        node = self._path_to_node.get(path)
        if node is not None:
            return node

        node = len(self._nodes)
        self._nodes.append(path)
        self._path_to_node[path] = node
        self._outgoing[node] = []
        self._incoming[node] = []
        return node

    def add_edge(self, source: str, target: str, edge: DepEdge) -> None:
        source_node = self._path_to_node.get(source)
        target_node = self._path_to_node.get(target)
        if source_node is None or target_node is None:
            return

        self._outgoing[source_node].append((target_node, edge))
        self._incoming[target_node].append((source_node, edge))
        self._edge_count += 1

    def __contains__(self, path: object) -> bool:
        return path in self._path_to_node

    @property
    def nodes(self) -> list[str]:
        return list(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def outgoing(self, path: str) -> list[DepEdge]:
        node = self._path_to_node.get(path)
        if node is None:
            return []
        return [edge for _, edge in self._outgoing[node]]

    def incoming(self, path: str) -> list[DepEdge]:
        node = self._path_to_node.get(path)
        if node is None:
            return []
        return [edge for _, edge in self._incoming[node]]

    def fan_out(self, path: str) -> int:
        return len(self.outgoing(path))

    def fan_in(self, path: str) -> int:
        return len(self.incoming(path))

    def adjacency(self) -> dict[str, set[str]]:
        """Collapse parallel edges into a path -> successor paths mapping."""
        return {
            self._nodes[node]: {self._nodes[target] for target, _ in edges}
            for node, edges in self._outgoing.items()
        }

    def find_cycles(self) -> list[list[str]]:
        return find_cycles(self.adjacency())


def build_dependency_graph(modules: Iterable[Module]) -> DependencyGraph:
    """Index many modules into a graph and fill each module's incoming edges.

    Every module becomes a node first. Each outgoing import whose specifier
    resolves to another analyzed module is then added as an edge carrying a
    copy of the DepEdge with both endpoints set. Unresolved imports (external
    packages, missing files) are skipped.

    Args:
        modules: Assembled modules; their ``incoming`` lists are replaced

    Returns:
        The populated graph.
    """
    module_list = list(modules)
    graph = DependencyGraph()
    for module in module_list:
        graph.add_module(module)

    known_paths = set(graph.nodes)
    unresolved = 0
    for module in module_list:
        for edge in module.outgoing:
            if edge.target is None:
                continue
            target = resolve_import(module.path, edge.target, known_paths)
            if target is None:
                unresolved += 1
                continue
            resolved = edge.model_copy(update={"source": module.path, "target": target})
            graph.add_edge(module.path, target, resolved)

    for module in module_list:
        module.incoming = graph.incoming(module.path)

    log.debug(
        "Indexed %d modules, %d edges (%d unresolved imports)",
        len(known_paths),
        graph.edge_count,
        unresolved,
    )
    return graph


__all__ = ["DependencyGraph", "build_dependency_graph"]
