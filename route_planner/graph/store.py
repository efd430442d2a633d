"""
GraphStore: the mutable node/edge collection the router searches.

Usage:
    from route_planner.graph import GraphStore

    store = GraphStore()
    store.add_node("a", "A - Entrance", 3.4516, -76.5320)
    store.add_node("b", "B - Block 1", 3.4520, -76.5310)
    store.add_edge("A", "B", 0.3)
    store.neighbors("A")  # [("B", 0.3)]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from route_planner.graph.errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    UnknownNodeError,
)
from route_planner.graph.models import Edge, Node, canonical_id

if TYPE_CHECKING:
    from route_planner.data.loader import GraphSeed

logger = logging.getLogger(__name__)

Adjacency = Mapping[str, tuple[tuple[str, float], ...]]


class GraphStore:
    """
    Owns the nodes and edges of an undirected weighted graph.

    Nodes are keyed by canonical id and kept in insertion order; edges are
    kept in insertion order. The adjacency view is derived from the edge
    list on demand and cached until the next mutation.

    Every mutation either succeeds completely or raises a GraphError and
    leaves the store untouched.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edges: list[Edge] = []
        self._edge_index: dict[frozenset[str], Edge] = {}
        self._adjacency: Adjacency | None = None

    @classmethod
    def from_seed(cls, seed: GraphSeed) -> GraphStore:
        """Build a store from a seed dataset, validating every record."""
        store = cls()
        for node in seed.nodes:
            store.add_node(node.id, node.title, node.latitude, node.longitude)
        for edge in seed.edges:
            store.add_edge(edge.source, edge.target, edge.weight)
        logger.info(
            f"Built graph from seed: {store.node_count()} nodes, {store.edge_count()} edges"
        )
        return store

    # =========================================================================
    # Mutations
    # =========================================================================

    def add_node(
        self,
        node_id: str,
        title: str | None,
        latitude: float,
        longitude: float,
    ) -> Node:
        """
        Add a node.

        Args:
            node_id: Identifier (case-insensitive, trimmed)
            title: Display title; a default is derived from the id if empty
            latitude: Degrees north
            longitude: Degrees east

        Returns:
            The stored Node

        Raises:
            InvalidNodeIdError: If the id is blank
            DuplicateNodeError: If a node with the same canonical id exists
            InvalidCoordinateError: If latitude/longitude are not finite
        """
        key = canonical_id(node_id)
        if key in self._nodes:
            raise DuplicateNodeError(key)

        node = Node(id=key, title=title or "", latitude=latitude, longitude=longitude)
        self._nodes[key] = node
        self._adjacency = None
        logger.info(f"Added node {node.id} ({node.title})")
        return node

    def add_edge(self, source: str, target: str, weight: float) -> Edge:
        """
        Connect two existing nodes.

        Raises:
            UnknownNodeError: If either endpoint does not exist
            SelfLoopError: If both endpoints are the same node
            InvalidWeightError: If weight is negative, infinite or not a number
            DuplicateEdgeError: If the pair is already connected
        """
        a = canonical_id(source)
        b = canonical_id(target)
        for node_id in (a, b):
            if node_id not in self._nodes:
                raise UnknownNodeError(node_id)

        edge = Edge(source=a, target=b, weight=weight)
        if edge.key in self._edge_index:
            raise DuplicateEdgeError(a, b)

        self._edges.append(edge)
        self._edge_index[edge.key] = edge
        self._adjacency = None
        logger.info(f"Added connection {a} <-> {b} ({edge.weight} km)")
        return edge

    # =========================================================================
    # Queries
    # =========================================================================

    def has_node(self, node_id: str) -> bool:
        """Check if a node exists (id is canonicalized first)."""
        try:
            return canonical_id(node_id) in self._nodes
        except ValueError:
            return False

    def get_node(self, node_id: str) -> Node:
        """Get a node by id, raising UnknownNodeError if absent."""
        key = canonical_id(node_id)
        node = self._nodes.get(key)
        if node is None:
            raise UnknownNodeError(key)
        return node

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def nodes(self) -> tuple[Node, ...]:
        """All nodes in insertion order."""
        return tuple(self._nodes.values())

    def edges(self) -> tuple[Edge, ...]:
        """All edges in insertion order."""
        return tuple(self._edges)

    def edge_weight(self, a: str, b: str) -> float | None:
        """Weight of the edge joining a and b, or None if they are not adjacent."""
        edge = self._edge_index.get(frozenset((canonical_id(a), canonical_id(b))))
        return edge.weight if edge is not None else None

    def neighbors(self, node_id: str) -> list[tuple[str, float]]:
        """
        Get the (neighbor id, weight) pairs one edge away from a node.

        Returns an empty list for an isolated node.

        Raises:
            UnknownNodeError: If the node does not exist
        """
        key = canonical_id(node_id)
        if key not in self._nodes:
            raise UnknownNodeError(key)
        return list(self.adjacency()[key])

    def adjacency(self) -> Adjacency:
        """Read-only adjacency view, rebuilt after any mutation."""
        if self._adjacency is None:
            self._adjacency = self._build_adjacency()
        return self._adjacency

    def _build_adjacency(self) -> Adjacency:
        adj: dict[str, list[tuple[str, float]]] = {node_id: [] for node_id in self._nodes}
        for edge in self._edges:
            assert edge.source in adj and edge.target in adj, (
                f"Edge {edge.source}-{edge.target} references a node missing from the store"
            )
            for end in (edge.source, edge.target):
                adj[end].append((edge.other(end), edge.weight))

        logger.debug(f"Rebuilt adjacency view ({len(adj)} nodes, {len(self._edges)} edges)")
        return MappingProxyType({node_id: tuple(links) for node_id, links in adj.items()})

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self.has_node(node_id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.node_count()}, edges={self.edge_count()})"
