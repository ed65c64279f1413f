"""Reading PERT networks and rendering analysis reports."""

from pert_lite.io.reader import MalformedInputError, read_graph, read_graph_file
from pert_lite.io.report import (
    format_paths,
    format_report,
    format_stats,
    format_table,
)

__all__ = [
    "MalformedInputError",
    "format_paths",
    "format_report",
    "format_stats",
    "format_table",
    "read_graph",
    "read_graph_file",
]
