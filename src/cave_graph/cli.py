"""
Count the start-to-end paths through a cave system.

Reads one "A-B" edge per line and reports how many paths exist under
the strict and/or relaxed revisit policy.

Usage:
    cave-graph input.txt
    cave-graph input.txt --policy relaxed --show-paths
    cave-graph input.txt --json
    cave-graph input.txt --describe
    cave-graph input.txt --config enumeration.yaml -vv
"""

import argparse
import json
import logging
import sys

from .config import ConfigError, load_config
from .graph import CaveGraph, MalformedEdgeError
from .handlers import RevisitPolicy, SafetyLimitExceeded, describe, traverse
from .handlers.base import EnumerationResult, GraphSummaryResult


def format_result(result: EnumerationResult, show_paths: bool = False) -> str:
    """Format one policy's result for display."""
    lines = [f"{result['policy']}: {result['path_count']}"]
    if show_paths:
        lines.extend(f"  {','.join(path)}" for path in result["paths"])
    return "\n".join(lines)


def format_summary(summary: GraphSummaryResult) -> str:
    """Format graph diagnostics for display."""
    lines = ["Cave graph", "=" * 40]
    lines.append(f"  nodes: {summary['node_count']}")
    lines.append(f"  edges: {summary['edge_count']}")
    lines.append(f"  large: {', '.join(summary['large_nodes']) or '-'}")
    lines.append(f"  small: {', '.join(summary['small_nodes']) or '-'}")
    lines.append(f"  density: {summary['density']:.3f}")
    lines.append(f"  end reachable: {'yes' if summary['end_reachable'] else 'no'}")
    if summary["dead_ends"]:
        lines.append(f"  dead ends: {', '.join(summary['dead_ends'])}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cave-graph",
        description="Enumerate start-to-end paths through a cave system",
    )
    parser.add_argument(
        "input_path",
        help="File with one edge (e.g. 'start-A') per line"
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in RevisitPolicy] + ["both"],
        default="both",
        help="Revisit policy to apply (default: both)"
    )
    parser.add_argument(
        "--show-paths",
        action="store_true",
        help="List every path found"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON"
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Show graph diagnostics before enumerating"
    )
    parser.add_argument(
        "--config",
        help="YAML file with enumeration limits"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every round (-vv)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.policy == "both":
        policies = list(RevisitPolicy)
    else:
        policies = [RevisitPolicy(args.policy)]

    try:
        config = load_config(args.config)
        graph = CaveGraph.from_file(args.input_path)
        summary = describe(graph) if args.describe else None
        results = [traverse(graph, policy, config) for policy in policies]
    except OSError as e:
        print(f"Error: cannot read {args.input_path}: {e}", file=sys.stderr)
        return 1
    except (ConfigError, MalformedEdgeError, SafetyLimitExceeded) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload: dict = {"results": results}
        if summary is not None:
            payload["graph"] = summary
        if not args.show_paths:
            for result in results:
                result.pop("paths")
        print(json.dumps(payload, indent=2))
        return 0

    if summary is not None:
        print(format_summary(summary))
        print()
    for result in results:
        print(format_result(result, args.show_paths))
    return 0


if __name__ == "__main__":
    sys.exit(main())
