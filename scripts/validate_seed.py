#!/usr/bin/env python3
"""
Validate the seed graph file and report on its shape.

Usage:
    python scripts/validate_seed.py
    python scripts/validate_seed.py --seed data/other_campus.msgpack
"""

import argparse
import logging
import math
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from route_planner.config import SEED_GRAPH_PATH, get_missing_data_files  # noqa: E402 - must be after sys.path modification
from route_planner.data import SeedDataError, load_seed  # noqa: E402
from route_planner.graph import GraphError, GraphStore, dijkstra  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def load_store(path: Path) -> GraphStore | None:
    """Load the seed file and build a store from it."""
    print(f"\n=== Loading {path} ===\n")

    if not path.exists():
        print(f"✗ {path.name}: NOT FOUND")
        return None

    start_time = time.time()
    try:
        store = GraphStore.from_seed(load_seed(path))
    except (SeedDataError, GraphError) as e:
        print(f"✗ {e}")
        return None

    load_time = (time.time() - start_time) * 1000
    print(f"✓ Loaded in {load_time:.1f} ms")
    print(f"  nodes: {store.node_count()}")
    print(f"  edges: {store.edge_count()}")
    return store


def report_connectivity(store: GraphStore) -> bool:
    """Report isolated nodes and nodes unreachable from the first node."""
    print("\n=== Connectivity ===\n")

    nodes = store.nodes()
    if not nodes:
        print("⚠ Graph has no nodes")
        return False

    isolated = [node.id for node in nodes if not store.neighbors(node.id)]
    if isolated:
        print(f"⚠ Isolated nodes: {', '.join(isolated)}")
    else:
        print("✓ No isolated nodes")

    origin = nodes[0].id
    tree = dijkstra(store.adjacency(), origin)
    unreachable = [node_id for node_id, dist in tree.distances.items() if math.isinf(dist)]
    if unreachable:
        print(f"⚠ Unreachable from {origin}: {', '.join(unreachable)}")
        return False

    farthest = max(tree.distances, key=tree.distances.get)
    print(f"✓ Every node is reachable from {origin}")
    print(f"  farthest: {farthest} ({tree.distances[farthest]:.3f} km)")
    return True


def main() -> int:
    """Main validation routine."""
    parser = argparse.ArgumentParser(description="Validate a seed graph file")
    parser.add_argument("--seed", type=Path, default=SEED_GRAPH_PATH, help="Seed graph file")
    args = parser.parse_args()

    print("=" * 60)
    print("Route Planner Seed Validation")
    print("=" * 60)

    if args.seed == SEED_GRAPH_PATH:
        missing = get_missing_data_files()
        if missing:
            print(f"\n✗ Missing data files: {', '.join(missing)}")
            print(f"  Expected {SEED_GRAPH_PATH} (or set ROUTE_PLANNER_SEED)")
            return 1

    store = load_store(args.seed)
    if store is None:
        print("\n✗ Seed graph could not be loaded.")
        return 1

    connected = report_connectivity(store)

    print("\n" + "=" * 60)
    if connected:
        print("✓ All validation checks passed!")
    else:
        print("⚠ Graph is valid but not fully connected.")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
