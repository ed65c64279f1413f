"""pert-lite CLI entry point.

Usage: uv run pert-lite [FILE] [--stats] [--memory] [--dump-graph] [-v]

Reads a PERT network from FILE (or stdin) and prints the critical path
report.
"""
import argparse
import logging
import sys

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_NOT_A_DAG = 2
EXIT_INTERNAL = 3

log = logging.getLogger("pert_lite")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pert-lite",
        description="Critical path analysis of PERT activity-on-node networks.",
    )
    parser.add_argument(
        "file", nargs="?", default=None,
        help="Network file to read (default: standard input)",
    )
    parser.add_argument(
        "--stats", action="store_true",
        help="Print elapsed analysis time before the report.",
    )
    parser.add_argument(
        "--memory", action="store_true",
        help="Trace peak memory during analysis (implies --stats).",
    )
    parser.add_argument(
        "--dump-graph", action="store_true",
        help="Print every node's outgoing arcs before analysing.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def _run(args: argparse.Namespace) -> int:
    from pert_lite.graph.analysis import analyze
    from pert_lite.graph.timing import InvariantViolationError
    from pert_lite.graph.topological import NotADagError
    from pert_lite.io.reader import MalformedInputError, read_graph_file
    from pert_lite.io.report import format_report

    try:
        graph = read_graph_file(args.file if args.file else sys.stdin)
    except OSError as exc:
        log.error("Cannot open input: %s", exc)
        return EXIT_BAD_INPUT
    except MalformedInputError as exc:
        log.error("Malformed input: %s", exc)
        return EXIT_BAD_INPUT

    if args.dump_graph:
        print(graph.describe())
        print()

    try:
        report = analyze(graph, trace_memory=args.memory)
    except NotADagError as exc:
        log.error("%s", exc)
        return EXIT_NOT_A_DAG
    except InvariantViolationError:
        log.exception("Internal consistency check failed")
        return EXIT_INTERNAL

    print(format_report(report, stats=args.stats or args.memory))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return _run(args)


if __name__ == "__main__":
    sys.exit(main())
