"""
Node and Edge records for the routing graph.

Both are frozen dataclasses that validate themselves on construction,
so a Node or Edge that exists is always well-formed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from route_planner.config import (
    DEFAULT_NODE_TITLE_SUFFIX,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
)
from route_planner.graph.errors import (
    InvalidCoordinateError,
    InvalidNodeIdError,
    InvalidWeightError,
    SelfLoopError,
)


def canonical_id(raw: object) -> str:
    """
    Normalize a node identifier: trimmed and uppercased.

    Raises:
        InvalidNodeIdError: If the id is not a string or is blank
    """
    if not isinstance(raw, str):
        raise InvalidNodeIdError(raw)
    node_id = raw.strip().upper()
    if not node_id:
        raise InvalidNodeIdError(raw)
    return node_id


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Node:
    """
    A routable point of interest.

    Attributes:
        id: Canonical (uppercase) identifier
        title: Display title
        latitude: Degrees north, in [-90, 90]
        longitude: Degrees east, in [-180, 180]
    """

    id: str
    title: str
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", canonical_id(self.id))

        lat, lon = self.latitude, self.longitude
        if not (_is_number(lat) and _is_number(lon)):
            raise InvalidCoordinateError(lat, lon)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidCoordinateError(lat, lon)
        if not LATITUDE_RANGE[0] <= lat <= LATITUDE_RANGE[1]:
            raise InvalidCoordinateError(lat, lon, "latitude out of range")
        if not LONGITUDE_RANGE[0] <= lon <= LONGITUDE_RANGE[1]:
            raise InvalidCoordinateError(lat, lon, "longitude out of range")
        object.__setattr__(self, "latitude", float(lat))
        object.__setattr__(self, "longitude", float(lon))

        title = self.title.strip() if isinstance(self.title, str) else ""
        if not title:
            title = f"{self.id} - {DEFAULT_NODE_TITLE_SUFFIX}"
        object.__setattr__(self, "title", title)

    @property
    def coordinate(self) -> tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Edge:
    """
    An undirected weighted connection between two nodes.

    Attributes:
        source: Id of the first endpoint (as given when added)
        target: Id of the second endpoint
        weight: Distance in kilometers
    """

    source: str
    target: str
    weight: float
    key: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = canonical_id(self.source)
        target = canonical_id(self.target)
        if source == target:
            raise SelfLoopError(source)

        weight = self.weight
        if not _is_number(weight) or not math.isfinite(weight) or weight < 0:
            raise InvalidWeightError(weight)

        object.__setattr__(self, "source", source)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "weight", float(weight))
        object.__setattr__(self, "key", frozenset((source, target)))

    def other(self, node_id: str) -> str:
        """Return the endpoint opposite to node_id."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        raise ValueError(f"Node '{node_id}' is not an endpoint of {self}")
