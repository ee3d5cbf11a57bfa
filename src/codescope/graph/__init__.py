"""Dependency graph indexing and algorithms."""

from codescope.graph.algos import find_cycles
from codescope.graph.dependency_graph import DependencyGraph, build_dependency_graph
from codescope.graph.resolve import resolve_import

__all__ = [
    "DependencyGraph",
    "build_dependency_graph",
    "find_cycles",
    "resolve_import",
]
