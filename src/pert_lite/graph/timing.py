"""Forward and backward timing passes over a topologically sorted network.

Forward pass (earliest completion):
    EC(source) = 0
    EC(v)      = max over predecessors u of EC(u) + duration(v)

Backward pass (latest completion):
    LC(sink)   = EC(sink)
    LC(u)      = min over successors v of LC(v) - duration(v)

Anchoring LC(sink) to EC(sink) ties the backward pass to the real
project length, so slack = LC - EC is zero exactly on the nodes that
cannot move without delaying the project.  Both passes are O(V + E)
because the order guarantees every dependency is final before use.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from pert_lite.graph.network import Node, PertGraph

log = logging.getLogger(__name__)


class InvariantViolationError(RuntimeError):
    """A node left the timing passes in an impossible state.

    This signals a construction or traversal bug, not bad user input.
    """

    def __init__(self, node: Node, reason: str) -> None:
        self.node = node
        super().__init__(
            f"Node {node.node_id} (EC={node.ec}, LC={node.lc}): {reason}"
        )


def forward_pass(graph: PertGraph, order: Sequence[Node]) -> None:
    """Fill in EC for every node, walking *order* front to back."""
    nodes = graph.nodes
    graph.source.ec = 0
    for node in order:
        for arc in node.rev_arcs:
            candidate = nodes[arc.tail].ec + node.duration
            if candidate > node.ec:
                node.ec = candidate
    log.debug("Forward pass done, EC(sink)=%s", graph.sink.ec)


def backward_pass(graph: PertGraph, order: Sequence[Node]) -> int:
    """Fill in LC for every node, walking *order* back to front.

    Returns the critical path length, LC(sink).
    """
    nodes = graph.nodes
    sink = graph.sink
    sink.lc = sink.ec
    for node in reversed(order):
        for arc in node.arcs:
            succ = nodes[arc.head]
            candidate = succ.lc - succ.duration
            if candidate < node.lc:
                node.lc = candidate
    log.debug("Backward pass done, LC(source)=%s", graph.source.lc)
    return sink.lc  # type: ignore[return-value]


def check_invariants(graph: PertGraph) -> None:
    """Raise InvariantViolationError on any sentinel or LC < EC node."""
    for node in graph.nodes:
        if node.ec == -math.inf:
            raise InvariantViolationError(node, "EC never computed")
        if node.lc == math.inf:
            raise InvariantViolationError(node, "LC never computed")
        if node.lc < node.ec:
            raise InvariantViolationError(node, "LC is earlier than EC")


def derive_slack(graph: PertGraph) -> list[Node]:
    """Set slack = LC - EC on every node and return the zero-slack ones.

    The returned list is in id order and includes source and sink.
    """
    check_invariants(graph)
    critical: list[Node] = []
    for node in graph.nodes:
        node.slack = node.lc - node.ec
        if node.slack == 0:
            critical.append(node)
    return critical
