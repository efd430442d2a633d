"""
Shortest-path search over a GraphStore.

Two notions of "shortest" are supported:
- weighted: minimum total edge weight (Dijkstra)
- hopcount: minimum number of edges (BFS)

The search functions are stateless: they read an adjacency view and
return fresh results, so a query after a graph mutation always starts
from scratch.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from route_planner.config import COST_PRECISION
from route_planner.graph.errors import UnknownNodeError
from route_planner.graph.store import Adjacency, GraphStore

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    """Which notion of "shortest" a query uses."""

    WEIGHTED = "weighted"
    HOPCOUNT = "hopcount"

    @classmethod
    def parse(cls, value: str | Algorithm) -> Algorithm:
        """
        Resolve an algorithm name.

        Accepts the enum values plus the aliases "dijkstra" and "bfs".

        Raises:
            ValueError: If the name is not recognized
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        aliases = {"dijkstra": cls.WEIGHTED, "bfs": cls.HOPCOUNT}
        if name in aliases:
            return aliases[name]
        try:
            return cls(name)
        except ValueError:
            available = ", ".join([a.value for a in cls] + list(aliases))
            raise ValueError(f"Unknown algorithm '{value}'. Available: {available}") from None


@dataclass(frozen=True)
class ShortestPathTree:
    """
    Output of a single-source Dijkstra run.

    Attributes:
        start: Source node id
        distances: Node id -> minimum total weight from start (inf if unreachable)
        predecessors: Node id -> previous node on a shortest path (None for
            start and for unreachable nodes)
    """

    start: str
    distances: dict[str, float]
    predecessors: dict[str, str | None]

    def path_to(self, goal: str) -> list[str] | None:
        return reconstruct_path(self.predecessors, self.start, goal)


@dataclass(frozen=True)
class PathResult:
    """A found path with its cost in kilometers."""

    found: ClassVar[bool] = True

    nodes: tuple[str, ...]
    cost: float
    algorithm: Algorithm

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1


@dataclass(frozen=True)
class NoPathFound:
    """
    The goal is not reachable from the start.

    A normal outcome of the graph's topology, returned rather than raised.
    """

    found: ClassVar[bool] = False

    start: str
    goal: str
    algorithm: Algorithm

    @property
    def message(self) -> str:
        return f"No route found between '{self.start}' and '{self.goal}'"


def dijkstra(adjacency: Adjacency, start: str) -> ShortestPathTree:
    """
    Single-source shortest distances by total edge weight.

    Uses a binary heap; equal tentative distances are settled in the order
    they were pushed, so results are deterministic for a given graph.

    Weights must be non-negative. The store never accepts a negative
    weight; if one reaches this function anyway it raises ValueError
    instead of returning distances that may be wrong.

    Raises:
        UnknownNodeError: If start is not in the adjacency view
        ValueError: If a negative edge weight is encountered
    """
    if start not in adjacency:
        raise UnknownNodeError(start)

    distances = {node_id: math.inf for node_id in adjacency}
    predecessors: dict[str, str | None] = {node_id: None for node_id in adjacency}
    distances[start] = 0.0

    finalized: set[str] = set()
    order = itertools.count()
    heap = [(0.0, next(order), start)]

    while heap:
        dist_u, _, u = heapq.heappop(heap)
        if u in finalized:
            continue
        finalized.add(u)

        for v, weight in adjacency[u]:
            if weight < 0:
                raise ValueError(f"Negative edge weight {weight} between '{u}' and '{v}'")
            if v in finalized:
                continue
            alt = dist_u + weight
            if alt < distances[v]:
                distances[v] = alt
                predecessors[v] = u
                heapq.heappush(heap, (alt, next(order), v))

    logger.debug(f"Dijkstra from {start}: finalized {len(finalized)}/{len(adjacency)} nodes")
    return ShortestPathTree(start=start, distances=distances, predecessors=predecessors)


def reconstruct_path(
    predecessors: Mapping[str, str | None],
    start: str,
    goal: str,
) -> list[str] | None:
    """
    Walk the predecessor chain back from goal to start.

    Returns:
        Node ids from start to goal inclusive ([start] when start == goal),
        or None if the chain ends before reaching start
    """
    path: list[str] = []
    seen: set[str] = set()
    node: str | None = goal

    while node is not None:
        if node in seen:
            raise ValueError(f"Predecessor chain from '{goal}' loops at '{node}'")
        path.append(node)
        if node == start:
            path.reverse()
            return path
        seen.add(node)
        node = predecessors.get(node)

    return None


def bfs_shortest_path(adjacency: Adjacency, start: str, goal: str) -> list[str] | None:
    """
    Find a path with the fewest edges using BFS.

    Returns:
        Node ids from start to goal, or None if goal is unreachable

    Raises:
        UnknownNodeError: If start or goal is not in the adjacency view
    """
    for node_id in (start, goal):
        if node_id not in adjacency:
            raise UnknownNodeError(node_id)

    # Maps node to the node it was first discovered from
    visited: dict[str, str | None] = {start: None}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        if current == goal:
            return reconstruct_path(visited, start, goal)

        for neighbor, _ in adjacency[current]:
            if neighbor in visited:
                continue
            visited[neighbor] = current
            queue.append(neighbor)

    return None


def path_cost(store: GraphStore, path: Sequence[str]) -> float:
    """
    Sum of edge weights along a path.

    Raises:
        ValueError: If two consecutive nodes are not connected
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        weight = store.edge_weight(a, b)
        if weight is None:
            raise ValueError(f"'{a}' and '{b}' are not connected")
        total += weight
    return total


def find_path(
    store: GraphStore,
    start: str,
    goal: str,
    algorithm: str | Algorithm = Algorithm.WEIGHTED,
) -> PathResult | NoPathFound:
    """
    Find the shortest path between two nodes of a store.

    The cost is always reported in kilometers: the Dijkstra distance for
    weighted queries, the sum of the traversed edge weights for hop-count
    queries. It is rounded to COST_PRECISION decimals.

    Raises:
        UnknownNodeError: If start or goal does not exist
        ValueError: If the algorithm name is unknown
    """
    algorithm = Algorithm.parse(algorithm)
    start = store.get_node(start).id
    goal = store.get_node(goal).id
    adjacency = store.adjacency()

    if algorithm is Algorithm.WEIGHTED:
        tree = dijkstra(adjacency, start)
        path = tree.path_to(goal)
        cost = tree.distances[goal]
    else:
        path = bfs_shortest_path(adjacency, start, goal)
        cost = path_cost(store, path) if path is not None else math.inf

    if path is None:
        logger.debug(f"No {algorithm.value} path from {start} to {goal}")
        return NoPathFound(start=start, goal=goal, algorithm=algorithm)

    return PathResult(
        nodes=tuple(path),
        cost=round(cost, COST_PRECISION),
        algorithm=algorithm,
    )
