"""
Graph module.

Provides the routing graph and its search algorithms:
- GraphStore: Validated node/edge collection with a cached adjacency view
- Dijkstra: Shortest path by total distance
- BFS: Shortest path by number of hops
"""

from route_planner.graph.errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    GraphError,
    IncompleteSelectionError,
    InvalidCoordinateError,
    InvalidNodeIdError,
    InvalidWeightError,
    RoutingError,
    SelfLoopError,
    UnknownNodeError,
)
from route_planner.graph.models import Edge, Node, canonical_id
from route_planner.graph.pathfinding import (
    Algorithm,
    NoPathFound,
    PathResult,
    ShortestPathTree,
    bfs_shortest_path,
    dijkstra,
    find_path,
    path_cost,
    reconstruct_path,
)
from route_planner.graph.store import GraphStore

__all__ = [
    "Algorithm",
    "DuplicateEdgeError",
    "DuplicateNodeError",
    "Edge",
    "GraphError",
    "GraphStore",
    "IncompleteSelectionError",
    "InvalidCoordinateError",
    "InvalidNodeIdError",
    "InvalidWeightError",
    "Node",
    "NoPathFound",
    "PathResult",
    "RoutingError",
    "SelfLoopError",
    "ShortestPathTree",
    "UnknownNodeError",
    "bfs_shortest_path",
    "canonical_id",
    "dijkstra",
    "find_path",
    "path_cost",
    "reconstruct_path",
]
