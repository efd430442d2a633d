"""
Route records and display colors.
"""

from __future__ import annotations

import itertools
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from route_planner.config import COORDINATE_DISPLAY_PRECISION
from route_planner.graph.pathfinding import Algorithm

# Returns a display color such as "#1f77b4"
ColorPicker = Callable[[], str]


def random_color_picker(seed: int | None = None) -> ColorPicker:
    """
    Build a picker that returns random "#rrggbb" colors.

    Args:
        seed: Random seed for reproducibility
    """
    rng = random.Random(seed)

    def pick() -> str:
        return f"#{rng.randrange(0x1000000):06x}"

    return pick


def cycle_color_picker(colors: list[str]) -> ColorPicker:
    """Build a picker that returns the given colors in turn, repeating."""
    if not colors:
        raise ValueError("At least one color is required")
    palette = itertools.cycle(list(colors))

    def pick() -> str:
        return next(palette)

    return pick


@dataclass(frozen=True)
class Route:
    """
    One computed path, ready for display.

    Attributes:
        nodes: Node ids from start to goal inclusive
        titles: Node titles, aligned with nodes
        coordinates: (latitude, longitude) pairs, aligned with nodes
        cost: Total distance in kilometers, rounded to 3 decimals
        color: Display color for the overlay
        algorithm: Algorithm that selected the path
        created_at: When the route was computed
    """

    nodes: tuple[str, ...]
    titles: tuple[str, ...]
    coordinates: tuple[tuple[float, float], ...]
    cost: float
    color: str
    algorithm: Algorithm
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    @property
    def start(self) -> str:
        return self.nodes[0]

    @property
    def goal(self) -> str:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.nodes) - 1

    def steps(self) -> list[str]:
        """Numbered, human-readable stops along the route."""
        precision = COORDINATE_DISPLAY_PRECISION
        return [
            f"{i}. {title} ({node_id}) - Lat {lat:.{precision}f}, Lon {lon:.{precision}f}"
            for i, (node_id, title, (lat, lon)) in enumerate(
                zip(self.nodes, self.titles, self.coordinates, strict=True), start=1
            )
        ]

    def to_dict(self) -> dict:
        return {
            "nodes": list(self.nodes),
            "titles": list(self.titles),
            "coordinates": [
                {"latitude": lat, "longitude": lon} for lat, lon in self.coordinates
            ],
            "cost_km": self.cost,
            "hops": self.hops,
            "color": self.color,
            "algorithm": self.algorithm.value,
        }
