"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from route_planner.graph import GraphStore
from route_planner.session import RouteSession, cycle_color_picker


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def seed_path(project_root: Path) -> Path:
    """Return the reference seed dataset."""
    return project_root / "data" / "seed_graph.json"


@pytest.fixture
def seed_data() -> dict:
    """Return a small seed dataset as decoded JSON."""
    return {
        "nodes": [
            {"id": "A", "title": "A - Entrance", "latitude": 3.4516, "longitude": -76.5320},
            {"id": "B", "title": "B - Block 1", "latitude": 3.4520, "longitude": -76.5310},
            {"id": "C", "title": "C - Block 2", "latitude": 3.4512, "longitude": -76.5300},
        ],
        "edges": [
            {"source": "A", "target": "B", "weight": 0.3},
            {"source": "B", "target": "C", "weight": 0.4},
        ],
    }


@pytest.fixture
def line_store() -> GraphStore:
    """A-B (0.3), B-C (0.4), plus an isolated node Z."""
    store = GraphStore()
    store.add_node("A", "A - Entrance", 3.4516, -76.5320)
    store.add_node("B", "B - Block 1", 3.4520, -76.5310)
    store.add_node("C", "C - Block 2", 3.4512, -76.5300)
    store.add_node("Z", "Z - Island", 3.4400, -76.5400)
    store.add_edge("A", "B", 0.3)
    store.add_edge("B", "C", 0.4)
    return store


@pytest.fixture
def detour_store() -> GraphStore:
    """
    Graph where the fewest-hops path is not the shortest-distance path.

    A-D direct is 5.0 km; A-B-C-D is 3.0 km.
    """
    store = GraphStore()
    for i, node_id in enumerate("ABCD"):
        store.add_node(node_id, None, 3.45 + i * 0.001, -76.53)
    store.add_edge("A", "B", 1.0)
    store.add_edge("B", "C", 1.0)
    store.add_edge("C", "D", 1.0)
    store.add_edge("A", "D", 5.0)
    return store


@pytest.fixture
def colors() -> list[str]:
    return ["#ff0000", "#00ff00", "#0000ff"]


@pytest.fixture
def session(line_store: GraphStore, colors: list[str]) -> RouteSession:
    """Session over line_store with deterministic route colors."""
    return RouteSession(store=line_store, color_picker=cycle_color_picker(colors))
