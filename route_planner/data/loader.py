"""
Seed dataset loading.

The initial graph is configuration, not code: it is read from a JSON
file (or a msgpack file with the same structure) at start-up.

File structure:
    {
        "nodes": [{"id": "A", "title": "A - Entrance", "latitude": 3.45, "longitude": -76.53}, ...],
        "edges": [{"source": "A", "target": "B", "weight": 0.3}, ...]
    }

Nodes may also give their position as "coord": {"latitude": ..., "longitude": ...},
and edges may use "from"/"to" instead of "source"/"target".

Usage:
    from route_planner.data.loader import load_seed

    seed = load_seed()  # SEED_GRAPH_PATH
    store = GraphStore.from_seed(seed)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import msgpack

from route_planner.config import SEED_GRAPH_PATH
from route_planner.graph.errors import GraphError
from route_planner.graph.models import Edge, Node

logger = logging.getLogger(__name__)


class SeedDataError(ValueError):
    """Raised when a seed file cannot be read as a graph dataset."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid seed data in {path}: {reason}")


@dataclass(frozen=True)
class GraphSeed:
    """
    Validated node and edge records, not yet checked against each other.

    Duplicate ids and dangling edge endpoints are caught when the seed is
    applied to a GraphStore.
    """

    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...]


def load_seed(path: Path | str | None = None) -> GraphSeed:
    """
    Load a seed dataset from disk.

    Args:
        path: .json or .msgpack file (default: SEED_GRAPH_PATH)

    Raises:
        FileNotFoundError: If the file does not exist
        SeedDataError: If the file is not a valid graph dataset
    """
    path = Path(path) if path is not None else SEED_GRAPH_PATH
    logger.info(f"Loading seed graph from {path}...")

    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except ValueError as e:
                raise SeedDataError(path, f"not valid UTF-8 JSON ({e})") from e
    elif suffix in (".msgpack", ".mpk"):
        with open(path, "rb") as f:
            try:
                raw = msgpack.unpack(f, raw=False)
            except ValueError as e:
                raise SeedDataError(path, f"not valid msgpack ({e})") from e
    else:
        raise SeedDataError(path, f"unsupported file type '{path.suffix}'")

    seed = parse_seed(raw, source=path)
    logger.info(f"Loaded {len(seed.nodes)} nodes and {len(seed.edges)} edges")
    return seed


def parse_seed(raw: Any, source: Path | str = "<memory>") -> GraphSeed:
    """Convert decoded seed data into Node and Edge records."""
    if not isinstance(raw, dict):
        raise SeedDataError(source, "top level must be an object with 'nodes' and 'edges'")

    raw_nodes = raw.get("nodes")
    raw_edges = raw.get("edges", [])
    if not isinstance(raw_nodes, list):
        raise SeedDataError(source, "'nodes' must be a list")
    if not isinstance(raw_edges, list):
        raise SeedDataError(source, "'edges' must be a list")

    nodes = tuple(_parse_node(entry, i, source) for i, entry in enumerate(raw_nodes))
    edges = tuple(_parse_edge(entry, i, source) for i, entry in enumerate(raw_edges))
    return GraphSeed(nodes=nodes, edges=edges)


def _parse_node(entry: Any, index: int, source: Path | str) -> Node:
    if not isinstance(entry, dict):
        raise SeedDataError(source, f"node #{index} must be an object")

    position = entry.get("coord", entry)
    if not isinstance(position, dict):
        raise SeedDataError(source, f"node #{index} 'coord' must be an object")
    try:
        return Node(
            id=entry["id"],
            title=entry.get("title") or "",
            latitude=position["latitude"],
            longitude=position["longitude"],
        )
    except KeyError as e:
        raise SeedDataError(source, f"node #{index} is missing {e}") from e
    except GraphError as e:
        raise SeedDataError(source, f"node #{index}: {e}") from e


def _parse_edge(entry: Any, index: int, source: Path | str) -> Edge:
    if not isinstance(entry, dict):
        raise SeedDataError(source, f"edge #{index} must be an object")

    try:
        return Edge(
            source=entry["source"] if "source" in entry else entry["from"],
            target=entry["target"] if "target" in entry else entry["to"],
            weight=entry["weight"],
        )
    except KeyError as e:
        raise SeedDataError(source, f"edge #{index} is missing {e}") from e
    except GraphError as e:
        raise SeedDataError(source, f"edge #{index}: {e}") from e
