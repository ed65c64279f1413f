"""Console rendering of a PertReport.

The layout is the classic one for this tool:

    <length> <critical nodes> <critical paths>

    1: 1 3 4
    2: 2 3 4

    Task    EC  LC  Slack
    1       ...
"""
from __future__ import annotations

from pert_lite.graph.analysis import PertReport


def format_paths(report: PertReport) -> str:
    """Numbered critical paths, one per line."""
    return "\n".join(
        f"{i}: " + " ".join(str(n) for n in path)
        for i, path in enumerate(report.paths, start=1)
    )


def format_table(report: PertReport) -> str:
    lines = ["Task\tEC\tLC\tSlack"]
    for t in report.timings:
        lines.append(f"{t.node_id}\t{t.ec}\t{t.lc}\t{t.slack}")
    return "\n".join(lines)


def format_stats(report: PertReport) -> str:
    """Elapsed time, plus peak memory when it was traced."""
    lines = [f"Time: {report.elapsed_ms:.3f} msec."]
    if report.peak_memory_bytes is not None:
        lines.append(f"Memory: {report.peak_memory_bytes / 1_000_000:.2f} MB peak.")
    return "\n".join(lines)


def format_report(report: PertReport, stats: bool = False) -> str:
    """Format a PertReport as the full console report."""
    parts = []
    if stats:
        parts.append(format_stats(report))
    parts.append(
        f"{report.length} {report.critical_node_count} {report.path_count}"
    )
    parts.append("")
    parts.append(format_paths(report))
    parts.append("")
    parts.append(format_table(report))
    return "\n".join(parts)
