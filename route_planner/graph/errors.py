"""
Exceptions raised by the graph store and the routing session.

Structural errors subclass GraphError (a ValueError) and carry the
offending id or value so callers can build a precise message.
A missing path is not an error: see pathfinding.NoPathFound.
"""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for rejected graph mutations and lookups."""


class InvalidNodeIdError(GraphError):
    def __init__(self, node_id: object) -> None:
        self.node_id = node_id
        super().__init__(f"Invalid node id: {node_id!r}")


class DuplicateNodeError(GraphError):
    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"A node with id '{node_id}' already exists")


class UnknownNodeError(GraphError):
    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' does not exist")


class InvalidCoordinateError(GraphError):
    def __init__(self, latitude: object, longitude: object, reason: str = "must be finite numbers") -> None:
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Invalid coordinate ({latitude!r}, {longitude!r}): {reason}"
        )


class InvalidWeightError(GraphError):
    def __init__(self, weight: object) -> None:
        self.weight = weight
        super().__init__(
            f"Invalid edge weight {weight!r}: must be a finite non-negative number"
        )


class DuplicateEdgeError(GraphError):
    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"A connection between '{source}' and '{target}' already exists")


class SelfLoopError(GraphError):
    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Cannot connect node '{node_id}' to itself")


class RoutingError(Exception):
    """Base class for route queries that cannot be evaluated."""


class IncompleteSelectionError(RoutingError):
    def __init__(self, start: str | None, goal: str | None) -> None:
        self.start = start
        self.goal = goal
        super().__init__(
            f"A start and a goal must both be selected (start={start!r}, goal={goal!r})"
        )
