"""Command line entry point for graph statistics.

Example usage::

    graph-stats p2p-Gnutella04.txt --source 4780 --target 5049
    graph-stats edges.txt --universe all --top 10 --json
"""
import argparse
import sys
from typing import List, Optional

from loguru import logger

from graph_stats.exceptions import GraphStatsError
from graph_stats.graph_analysis.analyzer import GraphAnalyzer
from graph_stats.graph_analysis.base import NodeUniverse
from graph_stats.graphs.graph_metrics import AnalysisConfig
from graph_stats.report import render_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graph-stats",
        description="Degree centrality, shortest path, degree dispersion and "
        "clustering for a directed edge-list graph",
    )
    parser.add_argument("edge_file", help="Edge list: one 'from to' pair per line")
    parser.add_argument("--source", type=int, help="Start node of the path query")
    parser.add_argument("--target", type=int, help="End node of the path query")
    parser.add_argument(
        "--top", type=int, default=5, help="Entries per centrality ranking (default: 5)"
    )
    parser.add_argument(
        "--universe",
        choices=[u.value for u in NodeUniverse],
        default=NodeUniverse.SOURCES.value,
        help="Node set for the statistics: nodes with outgoing edges, or all nodes",
    )
    parser.add_argument(
        "--sorted-successors",
        action="store_true",
        help="Break shortest-path ties by ascending node id",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"],
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.source is None) != (args.target is None):
        parser.error("--source and --target must be given together")
    if args.top < 1:
        parser.error("--top must be at least 1")

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    config = AnalysisConfig(
        universe=NodeUniverse(args.universe),
        sorted_successors=args.sorted_successors,
        top_k=args.top,
    )
    analyzer = GraphAnalyzer(config)

    try:
        analyzer.load(args.edge_file)
        report = analyzer.analyze(source=args.source, target=args.target)
    except GraphStatsError as e:
        logger.error(str(e))
        return 1
    except OSError as e:
        logger.error(f"Cannot read {args.edge_file}: {e}")
        return 1

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(render_text(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
