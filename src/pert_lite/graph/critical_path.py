"""Enumeration of every critical path in a slack-annotated network.

A critical path runs from the source to the sink through zero-slack
nodes only.  Zero slack at both ends is not enough for an arc to be
critical, though: two zero-slack nodes can be joined by an arc that is
not on any longest chain.  The arc u -> v is followed only when

    EC(v) == EC(u) + duration(v)

i.e. v's earliest completion is actually determined by u.

The walk is an exhaustive DFS with backtracking: a node is marked
visited while it is on the current path and unmarked when the walk
returns from it, so it can take part in other paths.  Every branch
point with equal continuations yields separate paths.  The cost is
proportional to (number of critical paths) x (path length) because the
filter prunes everything else.
"""
from __future__ import annotations

import logging
from typing import Iterator

from pert_lite.graph.network import Arc, Node, PertGraph

log = logging.getLogger(__name__)


def _is_critical_arc(tail: Node, head: Node) -> bool:
    return (
        not head.visited
        and head.slack == 0
        and head.ec == tail.ec + head.duration
    )


def critical_paths(graph: PertGraph) -> list[list[int]]:
    """Return every critical path as a list of activity ids.

    Slack must already be derived.  Source and sink are left out of
    each path; paths come out in the order the forward arcs were added.
    """
    graph.reset_visit_flags()
    nodes = graph.nodes
    source, sink = graph.source, graph.sink
    paths: list[list[int]] = []

    source.visited = True
    path: list[Node] = [source]
    frames: list[Iterator[Arc]] = [iter(source.arcs)]
    while frames:
        node = path[-1]
        for arc in frames[-1]:
            succ = nodes[arc.head]
            if not _is_critical_arc(node, succ):
                continue
            if succ is sink:
                paths.append([n.node_id for n in path[1:]])
                continue
            succ.visited = True
            path.append(succ)
            frames.append(iter(succ.arcs))
            break
        else:
            frames.pop()
            path.pop().visited = False

    log.debug("Found %d critical path(s)", len(paths))
    return paths
