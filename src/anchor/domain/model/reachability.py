"""Reachability queries over a ModuleGraph.

Depth-first traversal with a visited set. A visited node is never expanded
again, so both queries terminate on cyclic graphs. Nodes missing from the
graph are external leaves with zero outgoing edges.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from anchor.domain.model.module_graph import ModuleGraph
    from anchor.domain.model.module_id import ModuleID


def transitive_closure(graph: ModuleGraph, start: ModuleID) -> frozenset[ModuleID]:
    """Get all modules reachable from start, start included.

    Args:
        graph: Module graph
        start: Module to resolve (may be external)

    Returns:
        Frozenset of reachable modules

    Time: O(V + E) of the subgraph reachable from start
    """
    visited: set[ModuleID] = {start}
    stack: list[ModuleID] = [start]

    while stack:
        node = stack.pop()
        for dep in graph.dependencies_of(node):
            if dep not in visited:
                visited.add(dep)
                stack.append(dep)

    return frozenset(visited)


def find_path(
    graph: ModuleGraph,
    start: ModuleID,
    target: ModuleID,
) -> tuple[ModuleID, ...] | None:
    """Find a dependency chain from start to target.

    The chain is a depth-first witness, not necessarily the shortest one.
    Successors are explored in sorted order, so the result is deterministic.

    Args:
        graph: Module graph
        start: First module of the chain
        target: Last module of the chain

    Returns:
        (start, ..., target) with an edge between each consecutive pair,
        (start,) if start == target, None if target is unreachable
    """
    if start == target:
        return (start,)

    visited: set[ModuleID] = {start}
    path: list[ModuleID] = [start]
    pending: list[list[ModuleID]] = [_successors(graph, start)]

    while pending:
        candidates = pending[-1]
        if not candidates:
            pending.pop()
            path.pop()
            continue

        node = candidates.pop()
        if node == target:
            return (*path, node)
        if node in visited:
            continue

        visited.add(node)
        path.append(node)
        pending.append(_successors(graph, node))

    return None


def _successors(graph: ModuleGraph, node: ModuleID) -> list[ModuleID]:
    """Successors as a stack: smallest module popped first."""
    return sorted(graph.dependencies_of(node), reverse=True)


class ClosureCache:
    """Run-scoped memo of transitive closures.

    One instance per check run over one immutable graph. A subject checked
    against many forbidden modules is resolved once.
    """

    def __init__(self, graph: ModuleGraph) -> None:
        if graph is None:
            raise TypeError("graph must not be None")
        self._graph = graph
        self._closures: dict[ModuleID, frozenset[ModuleID]] = {}

    @property
    def graph(self) -> ModuleGraph:
        """Graph the closures are computed over."""
        return self._graph

    def closure_of(self, module: ModuleID) -> frozenset[ModuleID]:
        """Get transitive closure of module, computing it on first use."""
        closure = self._closures.get(module)
        if closure is None:
            closure = transitive_closure(self._graph, module)
            self._closures[module] = closure
        return closure

    def dependencies_of(self, module: ModuleID) -> frozenset[ModuleID]:
        """Get transitive dependencies of module, module itself excluded."""
        return self.closure_of(module) - {module}

    def __len__(self) -> int:
        """Number of cached closures."""
        return len(self._closures)
