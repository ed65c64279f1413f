"""PERT network model and critical path algorithms."""

from pert_lite.graph.analysis import NodeTiming, PertReport, analyze
from pert_lite.graph.critical_path import critical_paths
from pert_lite.graph.network import Arc, Node, NodeView, PertGraph
from pert_lite.graph.timing import (
    InvariantViolationError,
    backward_pass,
    check_invariants,
    derive_slack,
    forward_pass,
)
from pert_lite.graph.topological import (
    DfsOrder,
    NotADagError,
    dfs_order,
    topological_sort,
)

__all__ = [
    "Arc",
    "DfsOrder",
    "InvariantViolationError",
    "Node",
    "NodeTiming",
    "NodeView",
    "NotADagError",
    "PertGraph",
    "PertReport",
    "analyze",
    "backward_pass",
    "check_invariants",
    "critical_paths",
    "derive_slack",
    "dfs_order",
    "forward_pass",
    "topological_sort",
]
