#!/usr/bin/env python3
"""
Route Planner CLI - Find the shortest route between two points.

Usage:
    python scripts/route.py --start A --goal F
    python scripts/route.py --start a --goal g --algorithm hopcount
    python scripts/route.py --start A --goal D --seed data/other_campus.json
    python scripts/route.py --list

Algorithms:
    weighted  - Shortest total distance in km (Dijkstra), alias "dijkstra"
    hopcount  - Fewest connections (BFS), alias "bfs"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from route_planner.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    LOG_FORMAT,
    LOG_LEVEL,
    SEED_GRAPH_PATH,
)
from route_planner.data import SeedDataError  # noqa: E402
from route_planner.graph import Algorithm, GraphError, NoPathFound  # noqa: E402
from route_planner.session import RouteSession  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        help="Start node id (case-insensitive)",
    )
    parser.add_argument(
        "--goal",
        type=str,
        help="Goal node id (case-insensitive)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=["weighted", "hopcount", "dijkstra", "bfs"],
        help=f"Routing algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--seed",
        type=Path,
        default=SEED_GRAPH_PATH,
        help="Seed graph file, .json or .msgpack (default: data/seed_graph.json)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the nodes and connections of the graph and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def print_graph(session: RouteSession) -> None:
    print(f"\nNodes ({len(session.list_nodes())}):")
    for node in session.list_nodes():
        print(f"  {node.id:<4} {node.title:<24} ({node.latitude:.6f}, {node.longitude:.6f})")

    print(f"\nConnections ({len(session.list_edges())}):")
    for edge in session.list_edges():
        print(f"  {edge.source} <-> {edge.target}  {edge.weight} km")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt="%H:%M:%S")

    try:
        algorithm = Algorithm.parse(args.algorithm)
    except ValueError as e:
        print(f"Error: {e} (check ROUTE_PLANNER_ALGORITHM)", file=sys.stderr)
        return 1

    try:
        session = RouteSession.from_seed_file(args.seed, algorithm=algorithm)
    except (FileNotFoundError, SeedDataError, GraphError) as e:
        print(f"Error: could not load graph: {e}", file=sys.stderr)
        return 1

    if args.list:
        print_graph(session)
        return 0

    if not args.start or not args.goal:
        print("Error: --start and --goal are required (or use --list)", file=sys.stderr)
        return 1

    try:
        outcome = session.route(args.start, args.goal)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"Route Planner ({session.algorithm.value})")
    print("=" * 60)

    if isinstance(outcome, NoPathFound):
        print(f"  {outcome.message}")
        return 1

    print(f"  Start:    {outcome.start}")
    print(f"  Goal:     {outcome.goal}")
    print(f"  Distance: {outcome.cost} km")
    print(f"  Hops:     {outcome.hops}")
    print("=" * 60)

    print("\nSteps:")
    for step in outcome.steps():
        print(f"  {step}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
