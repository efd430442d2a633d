"""
Tests for Dijkstra, BFS and path reconstruction.

Optimality is checked against brute-force enumeration of every simple
path on small random graphs.
"""

import math
import random

import pytest

from route_planner.graph import (
    Algorithm,
    GraphStore,
    NoPathFound,
    PathResult,
    UnknownNodeError,
    bfs_shortest_path,
    dijkstra,
    find_path,
    path_cost,
    reconstruct_path,
)


def random_store(rng: random.Random, max_nodes: int = 8) -> GraphStore:
    """Build a random undirected graph with up to max_nodes nodes."""
    store = GraphStore()
    count = rng.randint(1, max_nodes)
    ids = [f"N{i}" for i in range(count)]
    for i, node_id in enumerate(ids):
        store.add_node(node_id, None, i * 0.01, i * 0.01)

    density = rng.uniform(0.1, 0.7)
    for i in range(count):
        for j in range(i + 1, count):
            if rng.random() < density:
                # Coarse weights make exact ties common
                store.add_edge(ids[i], ids[j], rng.choice([0.0, 0.5, 1.0, 1.5, 2.0, rng.uniform(0, 3)]))
    return store


def all_simple_paths(store: GraphStore, start: str, goal: str) -> list[list[str]]:
    adjacency = store.adjacency()
    paths = []

    def walk(path: list[str]) -> None:
        node = path[-1]
        if node == goal:
            paths.append(list(path))
            return
        for neighbor, _ in adjacency[node]:
            if neighbor not in path:
                path.append(neighbor)
                walk(path)
                path.pop()

    walk([start])
    return paths


GRAPH_SEEDS = range(60)


class TestDijkstra:
    """Test weighted shortest path distances."""

    def test_line(self, line_store):
        tree = dijkstra(line_store.adjacency(), "A")
        assert tree.distances["C"] == pytest.approx(0.7)
        assert tree.predecessors == {"A": None, "B": "A", "C": "B", "Z": None}
        assert tree.distances["Z"] == math.inf

    def test_prefers_lighter_detour(self, detour_store):
        tree = dijkstra(detour_store.adjacency(), "A")
        assert tree.distances["D"] == pytest.approx(3.0)
        assert tree.path_to("D") == ["A", "B", "C", "D"]

    def test_unknown_start(self, line_store):
        with pytest.raises(UnknownNodeError):
            dijkstra(line_store.adjacency(), "Q")

    def test_negative_weight_refused(self):
        """A negative weight that bypassed the store is refused, not routed."""
        adjacency = {"A": (("B", -1.0),), "B": (("A", -1.0),)}
        with pytest.raises(ValueError):
            dijkstra(adjacency, "A")

    def test_deterministic(self, detour_store):
        """Repeated runs on the same graph give identical results."""
        first = dijkstra(detour_store.adjacency(), "A")
        second = dijkstra(detour_store.adjacency(), "A")
        assert first == second

    @pytest.mark.parametrize("graph_seed", GRAPH_SEEDS)
    def test_matches_brute_force(self, graph_seed):
        """Every distance equals the cheapest simple path found by enumeration."""
        rng = random.Random(graph_seed)
        store = random_store(rng)
        ids = [node.id for node in store.nodes()]
        start = rng.choice(ids)
        tree = dijkstra(store.adjacency(), start)

        for goal in ids:
            paths = all_simple_paths(store, start, goal)
            if not paths:
                assert tree.distances[goal] == math.inf
                continue
            best = min(path_cost(store, path) for path in paths)
            assert tree.distances[goal] == pytest.approx(best)

    @pytest.mark.parametrize("graph_seed", GRAPH_SEEDS)
    def test_reconstruction_well_formed(self, graph_seed):
        """Reconstructed paths run start to goal with no repeats; None iff unreachable."""
        rng = random.Random(graph_seed)
        store = random_store(rng)
        ids = [node.id for node in store.nodes()]
        start = rng.choice(ids)
        tree = dijkstra(store.adjacency(), start)

        for goal in ids:
            path = reconstruct_path(tree.predecessors, start, goal)
            if math.isinf(tree.distances[goal]):
                assert path is None
                continue
            assert path is not None
            assert path[0] == start
            assert path[-1] == goal
            assert len(path) == len(set(path))
            assert path_cost(store, path) == pytest.approx(tree.distances[goal])


class TestBFS:
    """Test hop-count shortest path."""

    def test_fewest_hops_ignores_weight(self, detour_store):
        assert bfs_shortest_path(detour_store.adjacency(), "A", "D") == ["A", "D"]

    def test_unreachable(self, line_store):
        assert bfs_shortest_path(line_store.adjacency(), "A", "Z") is None

    def test_start_is_goal(self, line_store):
        assert bfs_shortest_path(line_store.adjacency(), "B", "B") == ["B"]

    def test_unknown_goal(self, line_store):
        with pytest.raises(UnknownNodeError):
            bfs_shortest_path(line_store.adjacency(), "A", "Q")

    @pytest.mark.parametrize("graph_seed", GRAPH_SEEDS)
    def test_hop_count_minimal(self, graph_seed):
        """BFS edge count is minimal among all start-goal paths."""
        rng = random.Random(graph_seed)
        store = random_store(rng)
        ids = [node.id for node in store.nodes()]
        start = rng.choice(ids)

        for goal in ids:
            path = bfs_shortest_path(store.adjacency(), start, goal)
            paths = all_simple_paths(store, start, goal)
            if not paths:
                assert path is None
                continue
            assert path is not None
            assert path[0] == start and path[-1] == goal
            assert len(path) - 1 == min(len(p) - 1 for p in paths)


class TestReconstructPath:
    """Test predecessor walking."""

    def test_start_equals_goal(self):
        assert reconstruct_path({"A": None}, "A", "A") == ["A"]

    def test_broken_chain_is_no_path(self):
        """A chain that never reaches start means no path, not an empty path."""
        assert reconstruct_path({"A": None, "B": None, "C": "B"}, "A", "C") is None

    def test_goal_missing_from_map(self):
        assert reconstruct_path({"A": None}, "A", "Q") is None

    def test_cycle_detected(self):
        with pytest.raises(ValueError):
            reconstruct_path({"B": "C", "C": "B"}, "A", "B")


class TestFindPath:
    """Test the store-level query used by sessions."""

    def test_weighted_scenario(self, line_store):
        """A-B 0.3, B-C 0.4: A to C is [A, B, C] at 0.7 km."""
        result = find_path(line_store, "A", "C", "weighted")
        assert isinstance(result, PathResult)
        assert result.nodes == ("A", "B", "C")
        assert result.cost == 0.7
        assert result.hops == 2
        assert result.found is True

    def test_isolated_goal(self, line_store):
        result = find_path(line_store, "A", "Z")
        assert isinstance(result, NoPathFound)
        assert result.found is False
        assert (result.start, result.goal) == ("A", "Z")
        assert "No route" in result.message

    @pytest.mark.parametrize("algorithm", ["weighted", "hopcount"])
    def test_start_equals_goal(self, line_store, algorithm):
        result = find_path(line_store, "a", "A", algorithm)
        assert result.nodes == ("A",)
        assert result.cost == 0

    def test_hopcount_reports_real_distance(self, detour_store):
        """Hop-count routes still report kilometers along the chosen path."""
        result = find_path(detour_store, "A", "D", Algorithm.HOPCOUNT)
        assert result.nodes == ("A", "D")
        assert result.cost == 5.0
        assert result.algorithm is Algorithm.HOPCOUNT

    def test_cost_rounded(self):
        store = GraphStore()
        for node_id in "ABC":
            store.add_node(node_id, None, 0.0, 0.0)
        store.add_edge("A", "B", 0.1234)
        store.add_edge("B", "C", 0.2)
        assert find_path(store, "A", "C").cost == 0.323

    def test_unknown_ids(self, line_store):
        with pytest.raises(UnknownNodeError):
            find_path(line_store, "Q", "A")
        with pytest.raises(UnknownNodeError):
            find_path(line_store, "A", "Q")

    def test_path_cost_rejects_gap(self, line_store):
        with pytest.raises(ValueError):
            path_cost(line_store, ["A", "C"])


class TestAlgorithm:
    """Test algorithm name parsing."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("weighted", Algorithm.WEIGHTED),
            ("Dijkstra", Algorithm.WEIGHTED),
            ("hopcount", Algorithm.HOPCOUNT),
            (" bfs ", Algorithm.HOPCOUNT),
            (Algorithm.HOPCOUNT, Algorithm.HOPCOUNT),
        ],
    )
    def test_parse(self, name, expected):
        assert Algorithm.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            Algorithm.parse("astar")
