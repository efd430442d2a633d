"""
Route session: drives route queries over a graph and keeps their history.

The session is the programmatic surface a presentation layer talks to.
It owns one GraphStore and one Selection, and recomputes the current
route explicitly whenever the selection becomes complete, the graph
changes, or the algorithm changes while a start and goal are chosen.
"""

from __future__ import annotations

import logging
from pathlib import Path

from route_planner.config import DEFAULT_ALGORITHM, ROUTE_COLOR_SEED
from route_planner.data.loader import load_seed
from route_planner.graph.errors import IncompleteSelectionError, UnknownNodeError
from route_planner.graph.models import Edge, Node, canonical_id
from route_planner.graph.pathfinding import Algorithm, NoPathFound, PathResult, find_path
from route_planner.graph.store import GraphStore
from route_planner.session.route import ColorPicker, Route, random_color_picker
from route_planner.session.selection import Selection, SelectionState

logger = logging.getLogger(__name__)


class RouteSession:
    """
    Runs route queries against a GraphStore.

    The session handles:
    - Graph mutation (add node / add connection)
    - The start/goal selection state machine
    - Computing routes with the chosen algorithm
    - Accumulating computed routes for overlay display

    A missing path is reported as a NoPathFound value and never added to
    the history. Structural problems (unknown ids, duplicates, bad values)
    propagate as GraphError subclasses.
    """

    def __init__(
        self,
        store: GraphStore | None = None,
        algorithm: str | Algorithm = DEFAULT_ALGORITHM,
        color_picker: ColorPicker | None = None,
    ) -> None:
        """
        Initialize a session.

        Args:
            store: Graph to route over (default: an empty graph)
            algorithm: "weighted" (distance) or "hopcount"
            color_picker: Callable returning a display color per route
        """
        self._store = store if store is not None else GraphStore()
        self._algorithm = Algorithm.parse(algorithm)
        self._pick_color = color_picker or random_color_picker(ROUTE_COLOR_SEED)
        self._selection = Selection()
        self._history: tuple[Route, ...] = ()
        self._current_route: Route | None = None
        self._last_outcome: Route | NoPathFound | None = None

    @classmethod
    def from_seed_file(cls, path: Path | str | None = None, **kwargs) -> RouteSession:
        """Build a session over the seed dataset (default: SEED_GRAPH_PATH)."""
        store = GraphStore.from_seed(load_seed(path))
        return cls(store=store, **kwargs)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def store(self) -> GraphStore:
        return self._store

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def history(self) -> tuple[Route, ...]:
        """Routes computed since the last reset, oldest first."""
        return self._history

    @property
    def current_route(self) -> Route | None:
        return self._current_route

    @property
    def last_outcome(self) -> Route | NoPathFound | None:
        """Result of the most recent computation (None if nothing to show)."""
        return self._last_outcome

    def is_selected(self, node_id: str) -> bool:
        """Whether a node is the current start or goal."""
        key = canonical_id(node_id)
        return key in (self._selection.start, self._selection.goal)

    def list_nodes(self) -> tuple[Node, ...]:
        return self._store.nodes()

    def list_edges(self) -> tuple[Edge, ...]:
        return self._store.edges()

    # =========================================================================
    # Commands
    # =========================================================================

    def add_node(
        self,
        node_id: str,
        title: str | None,
        latitude: float,
        longitude: float,
    ) -> Node:
        """Add a node to the graph, then refresh the current route."""
        node = self._store.add_node(node_id, title, latitude, longitude)
        self._refresh()
        return node

    def add_edge(self, source: str, target: str, weight: float) -> Edge:
        """Connect two nodes, then refresh the current route."""
        edge = self._store.add_edge(source, target, weight)
        self._refresh()
        return edge

    def select(self, node_id: str) -> SelectionState:
        """
        Feed a node choice into the selection state machine.

        Computes a route when the selection becomes complete.

        Raises:
            UnknownNodeError: If the node does not exist
        """
        node = self._store.get_node(node_id)
        state = self._selection.choose(node.id)
        logger.debug(
            f"Selection is {state.value} (start={self._selection.start}, goal={self._selection.goal})"
        )
        self._refresh()
        return state

    def set_algorithm(self, algorithm: str | Algorithm) -> Algorithm:
        """Switch algorithm, then refresh the current route."""
        self._algorithm = Algorithm.parse(algorithm)
        logger.info(f"Algorithm set to {self._algorithm.value}")
        self._refresh()
        return self._algorithm

    def compute_route(self, algorithm: str | Algorithm | None = None) -> Route | NoPathFound:
        """
        Compute a route between the selected start and goal.

        Args:
            algorithm: Override for this query (default: the session algorithm)

        Returns:
            The new current Route (also appended to history), or NoPathFound

        Raises:
            IncompleteSelectionError: If a start and a goal are not both selected
            UnknownNodeError: If a selected node no longer exists
        """
        if not self._selection.is_complete:
            raise IncompleteSelectionError(self._selection.start, self._selection.goal)

        return self.route(self._selection.start, self._selection.goal, algorithm)

    def route(
        self,
        start: str,
        goal: str,
        algorithm: str | Algorithm | None = None,
    ) -> Route | NoPathFound:
        """
        Compute a route between two given nodes, bypassing the selection.

        Start and goal may be the same node, which gives a one-stop route
        with zero cost. The outcome is recorded like compute_route's.

        Raises:
            UnknownNodeError: If start or goal does not exist
        """
        algorithm = Algorithm.parse(algorithm) if algorithm is not None else self._algorithm

        try:
            result = find_path(self._store, start, goal, algorithm)
        except UnknownNodeError as e:
            logger.warning(f"Cannot route {start} -> {goal}: {e}")
            raise

        if isinstance(result, NoPathFound):
            logger.warning(result.message)
            self._current_route = None
            self._last_outcome = result
            return result

        route = self._build_route(result)
        self._history = (*self._history, route)
        self._current_route = route
        self._last_outcome = route
        logger.info(
            f"Route ({algorithm.value}, {route.cost} km, {route.hops} hops): "
            f"{' -> '.join(route.nodes)}"
        )
        return route

    def reset(self) -> None:
        """Clear the selection, the current route and the route history."""
        self._selection.clear()
        self._history = ()
        self._current_route = None
        self._last_outcome = None
        logger.info("Session reset")

    # =========================================================================
    # Internals
    # =========================================================================

    def _refresh(self) -> None:
        """Recompute from scratch if a start and goal are chosen, else clear."""
        if self._selection.is_complete:
            self.compute_route()
        else:
            self._current_route = None
            self._last_outcome = None

    def _build_route(self, result: PathResult) -> Route:
        nodes = [self._store.get_node(node_id) for node_id in result.nodes]
        return Route(
            nodes=result.nodes,
            titles=tuple(node.title for node in nodes),
            coordinates=tuple(node.coordinate for node in nodes),
            cost=result.cost,
            color=self._pick_color(),
            algorithm=result.algorithm,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(store={self._store!r}, "
            f"algorithm={self._algorithm.value!r}, routes={len(self._history)})"
        )
