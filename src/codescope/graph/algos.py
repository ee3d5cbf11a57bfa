"""Graph algorithms over module dependency adjacency."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Set


def _successors(graph: Mapping[str, Set[str]], path: str) -> Iterator[str]:
    return iter(sorted(graph.get(path, ())))


def strongly_connected_components(
    graph: Mapping[str, Set[str]],
) -> list[list[str]]:
    """Tarjan's algorithm without recursion.

    Import chains in large projects can be deeper than the interpreter's
    recursion limit, so the DFS keeps an explicit stack of successor
    iterators. Nodes that only appear as edge targets are visited too.

    Returns:
        Components in the order Tarjan emits them (reverse topological).
    """
    index_of: dict[str, int] = {}
    low_link: dict[str, int] = {}
    on_stack: set[str] = set()
    scc_stack: list[str] = []
    components: list[list[str]] = []

    for start in sorted(graph):
        if start in index_of:
            continue

        index_of[start] = low_link[start] = len(index_of)
        scc_stack.append(start)
        on_stack.add(start)
        work = [(start, _successors(graph, start))]

        while work:
            path, successors = work[-1]
            descended = False
            for succ in successors:
                if succ not in index_of:
                    index_of[succ] = low_link[succ] = len(index_of)
                    scc_stack.append(succ)
                    on_stack.add(succ)
                    work.append((succ, _successors(graph, succ)))
                    descended = True
                    break
                if succ in on_stack:
                    low_link[path] = min(low_link[path], index_of[succ])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                low_link[parent] = min(low_link[parent], low_link[path])

            if low_link[path] == index_of[path]:
                component: list[str] = []
                while True:
                    member = scc_stack.pop()
                    on_stack.discard(member)
                    component.append(member)
                    if member == path:
                        break
                components.append(component)

    return components


def find_cycles(graph: Mapping[str, Set[str]]) -> list[list[str]]:
    """Find import cycles.

    Args:
        graph: Adjacency mapping of module path -> imported module paths

    Returns:
        Cycles as sorted member lists, themselves sorted. Self-imports count
        as single-member cycles.
    """
    cycles = [
        sorted(component)
        for component in strongly_connected_components(graph)
        if len(component) > 1 or component[0] in graph.get(component[0], ())
    ]
    return sorted(cycles)


__all__ = ["find_cycles", "strongly_connected_components"]
