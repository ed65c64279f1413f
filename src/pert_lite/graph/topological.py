"""Topological sort via depth-first search with back-edge detection.

Each unvisited node (ascending id) roots a DFS that walks forward arcs
in insertion order.  A node is prepended to the order when it
finishes, i.e. after all of its descendants have finished, so every
arc points from an earlier to a later position.

While a node is on the current DFS path it is marked active.  Reaching
an active node again is a back edge, which means the network has a
cycle and EC/LC are undefined.  dfs_order() reports the first cycle it
sees; topological_sort() refuses to return an order for such a graph.

The DFS keeps its own stack of (node, arc iterator) frames instead of
recursing, so a long dependency chain does not hit the interpreter's
recursion limit.  The visiting order is the same as the recursive form.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from pert_lite.graph.network import Arc, Node, PertGraph

log = logging.getLogger(__name__)


class NotADagError(Exception):
    """Raised when the network contains a directed cycle."""

    def __init__(self, cycle_path: list[int]) -> None:
        self.cycle_path = cycle_path
        super().__init__(
            "Not a DAG: cycle " + " -> ".join(str(n) for n in cycle_path)
        )


@dataclass(slots=True)
class DfsOrder:
    """Result of a DFS linearisation."""
    order: list[Node]
    cycle: list[int] | None = None

    @property
    def has_cycle(self) -> bool:
        return self.cycle is not None


def _cycle_path(parent: dict[int, int], tail: int, head: int) -> list[int]:
    # head is an ancestor of tail on the DFS path; walk back up to it
    path = [tail]
    cur = tail
    while cur != head:
        cur = parent[cur]
        path.append(cur)
    path.reverse()
    path.append(head)
    return path


def dfs_order(graph: PertGraph) -> DfsOrder:
    """Linearise *graph* by DFS finishing time.

    Never raises on a cycle: the first back edge found is recorded in
    DfsOrder.cycle and the (meaningless) order is still returned.
    """
    graph.reset_visit_flags()
    nodes = graph.nodes
    finished: list[Node] = []
    parent: dict[int, int] = {}
    cycle: list[int] | None = None

    for root in nodes:
        if root.visited:
            continue
        root.visited = root.active = True
        stack: list[tuple[Node, Iterator[Arc]]] = [(root, iter(root.arcs))]
        while stack:
            node, arcs = stack[-1]
            for arc in arcs:
                succ = nodes[arc.head]
                if not succ.visited:
                    succ.visited = succ.active = True
                    parent[succ.node_id] = node.node_id
                    stack.append((succ, iter(succ.arcs)))
                    break
                if succ.active and cycle is None:
                    cycle = _cycle_path(parent, node.node_id, succ.node_id)
                    log.warning("Back edge %s found, not a DAG", arc)
            else:
                stack.pop()
                node.active = False
                finished.append(node)

    finished.reverse()
    return DfsOrder(order=finished, cycle=cycle)


def topological_sort(graph: PertGraph) -> list[Node]:
    """Return every node in topological order, source first.

    Raises NotADagError if the graph has a cycle.
    """
    result = dfs_order(graph)
    if result.cycle is not None:
        raise NotADagError(result.cycle)
    log.debug("Sorted %d nodes", len(result.order))
    return result.order
