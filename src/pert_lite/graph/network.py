"""Activity-on-node PERT network backed by adjacency lists.

Every real activity 1..n is a Node carrying a duration.  Two synthetic
nodes bracket the network: the source (id 0) and the sink (id n+1),
both with duration 0.  Once connect_source_and_sink() has run, the
source reaches every activity and every activity reaches the sink, so
the project always has one entry and one exit.

Each arc is stored twice: in the tail's forward list and in the head's
reverse list.  The forward pass reads predecessors and the backward
pass reads successors, and both are then a single linear scan.
"""
from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Arc:
    """Finish-to-start dependency: *head* cannot start before *tail* ends."""
    tail: int
    head: int

    def __str__(self) -> str:
        return f"({self.tail},{self.head})"


@dataclass(slots=True, eq=False)
class Node:
    """One activity plus its timing and traversal state."""
    node_id: int
    duration: int = 0
    ec: float = -math.inf
    lc: float = math.inf
    slack: float = -math.inf
    visited: bool = False
    active: bool = False   # on the current DFS path
    _arcs: list[Arc] = field(default_factory=list, repr=False)
    _rev_arcs: list[Arc] = field(default_factory=list, repr=False)

    @property
    def arcs(self) -> tuple[Arc, ...]:
        """Outgoing arcs in insertion order."""
        return tuple(self._arcs)

    @property
    def rev_arcs(self) -> tuple[Arc, ...]:
        """Incoming arcs in insertion order."""
        return tuple(self._rev_arcs)

    def __str__(self) -> str:
        return str(self.node_id)


class NodeView(Sequence):
    """Read-only, id-ordered view over a graph's nodes."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: list[Node]) -> None:
        self._nodes = nodes

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return tuple(self._nodes[index])
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"NodeView({len(self._nodes)} nodes)"


class PertGraph:
    """PERT network of *n* activities plus synthetic source and sink."""

    __slots__ = ("_n", "_nodes", "_view", "_bracketed")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Activity count must be non-negative, got {n}")
        self._n = n
        self._nodes: list[Node] = [Node(i) for i in range(n + 2)]
        self._view = NodeView(self._nodes)
        self._bracketed = False

    # ---- construction ----------------------------------------------------

    def set_duration(self, node_id: int, duration: int) -> None:
        """Set the duration of real activity *node_id*."""
        if not 1 <= node_id <= self._n:
            raise ValueError(f"Node {node_id} is not an activity (1..{self._n})")
        if duration < 0:
            raise ValueError(
                f"Duration of node {node_id} must be non-negative, got {duration}"
            )
        self._nodes[node_id].duration = duration

    def add_arc(self, tail: int, head: int) -> Arc:
        """Add the arc tail -> head.

        No cycle or duplicate check is made; the sorter reports cycles
        and duplicates are harmless to every pass.
        """
        self._check_id(tail)
        self._check_id(head)
        arc = Arc(tail, head)
        self._nodes[tail]._arcs.append(arc)
        self._nodes[head]._rev_arcs.append(arc)
        return arc

    def connect_source_and_sink(self) -> None:
        """Wire the source to every activity and every activity to the sink.

        Also adds source -> sink directly so a project with no
        activities still has a path.
        """
        if self._bracketed:
            raise ValueError("Source and sink are already connected")
        for i in range(1, self._n + 1):
            self.add_arc(self.source.node_id, i)
            self.add_arc(i, self.sink.node_id)
        self.add_arc(self.source.node_id, self.sink.node_id)
        self._bracketed = True

    # ---- traversal state -------------------------------------------------

    def reset_visit_flags(self) -> None:
        for node in self._nodes:
            node.visited = False
            node.active = False

    def reset_timing(self) -> None:
        """Put EC, LC and slack back to their sentinels."""
        for node in self._nodes:
            node.ec = -math.inf
            node.lc = math.inf
            node.slack = -math.inf

    # ---- queries ---------------------------------------------------------

    @property
    def nodes(self) -> NodeView:
        """All nodes in id order, source first and sink last."""
        return self._view

    @property
    def activity_count(self) -> int:
        return self._n

    @property
    def source(self) -> Node:
        return self._nodes[0]

    @property
    def sink(self) -> Node:
        return self._nodes[self._n + 1]

    @property
    def is_bracketed(self) -> bool:
        return self._bracketed

    def node(self, node_id: int) -> Node:
        self._check_id(node_id)
        return self._nodes[node_id]

    def activities(self) -> Iterator[Node]:
        """Real nodes 1..n in id order."""
        return iter(self._nodes[1:self._n + 1])

    def successors(self, node_id: int) -> list[Node]:
        return [self._nodes[a.head] for a in self.node(node_id)._arcs]

    def predecessors(self, node_id: int) -> list[Node]:
        return [self._nodes[a.tail] for a in self.node(node_id)._rev_arcs]

    def arcs(self) -> Iterator[Arc]:
        for node in self._nodes:
            yield from node._arcs

    @property
    def arc_count(self) -> int:
        return sum(len(node._arcs) for node in self._nodes)

    def describe(self) -> str:
        """One line per node listing its outgoing arcs."""
        lines = []
        for node in self._nodes:
            lines.append(f"{node}: " + "".join(str(a) for a in node._arcs))
        return "\n".join(lines)

    def _check_id(self, node_id: int) -> None:
        if not 0 <= node_id <= self._n + 1:
            raise ValueError(
                f"Node {node_id} out of range (0..{self._n + 1})"
            )

    # ---- dunder ----------------------------------------------------------

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"PertGraph(activities={self._n}, arcs={self.arc_count})"
