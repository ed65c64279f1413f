"""Full critical path analysis of a PERT network.

analyze() runs the pipeline in one go:

    topological sort -> forward pass -> backward pass -> slack
                     -> critical path enumeration

and returns everything a caller needs as a PertReport, including how
long the run took.  Timing is part of the returned value; nothing is
kept in module state between calls.
"""
from __future__ import annotations

import time
import tracemalloc
from dataclasses import dataclass, field

from pert_lite.graph.critical_path import critical_paths
from pert_lite.graph.network import PertGraph
from pert_lite.graph.timing import backward_pass, derive_slack, forward_pass
from pert_lite.graph.topological import topological_sort


@dataclass(frozen=True, slots=True)
class NodeTiming:
    """EC, LC and slack of one activity."""
    node_id: int
    ec: int
    lc: int
    slack: int


@dataclass(slots=True)
class PertReport:
    """Result of a full analysis run."""
    length: int
    critical_nodes: list[int]
    paths: list[list[int]]
    timings: list[NodeTiming]
    elapsed_ms: float
    peak_memory_bytes: int | None = None
    _by_id: dict[int, NodeTiming] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._by_id = {t.node_id: t for t in self.timings}

    @property
    def critical_node_count(self) -> int:
        return len(self.critical_nodes)

    @property
    def path_count(self) -> int:
        return len(self.paths)

    def timing(self, node_id: int) -> NodeTiming:
        return self._by_id[node_id]


def analyze(graph: PertGraph, trace_memory: bool = False) -> PertReport:
    """Compute critical path length, critical nodes and every critical path.

    The graph must already have its source and sink connected.  Timing
    fields are reset first, so calling this twice on the same graph
    gives the same answer.

    If trace_memory=True the tracemalloc peak during the run is
    recorded in the report.  Tracing slows the run down noticeably.

    Raises NotADagError on a cyclic network and InvariantViolationError
    if the passes leave any node inconsistent.
    """
    if not graph.is_bracketed:
        raise ValueError("Graph needs connect_source_and_sink() before analysis")

    # an already running trace belongs to the caller and is left running
    was_tracing = tracemalloc.is_tracing()
    if trace_memory:
        if not was_tracing:
            tracemalloc.start()
        tracemalloc.reset_peak()
    t0 = time.perf_counter()
    try:
        graph.reset_timing()
        order = topological_sort(graph)
        forward_pass(graph, order)
        length = backward_pass(graph, order)
        derive_slack(graph)
        paths = critical_paths(graph)
        elapsed_ms = (time.perf_counter() - t0) * 1000
        peak = tracemalloc.get_traced_memory()[1] if trace_memory else None
    finally:
        if trace_memory and not was_tracing:
            tracemalloc.stop()

    timings = [
        NodeTiming(
            node_id=node.node_id,
            ec=int(node.ec),
            lc=int(node.lc),
            slack=int(node.slack),
        )
        for node in graph.activities()
    ]
    critical = [t.node_id for t in timings if t.slack == 0]

    return PertReport(
        length=int(length),
        critical_nodes=critical,
        paths=paths,
        timings=timings,
        elapsed_ms=elapsed_ms,
        peak_memory_bytes=peak,
    )
