"""
Data loading module.

Provides seed dataset loading for the initial routing graph.

Usage:
    from route_planner.data import load_seed

    seed = load_seed()
    seed.nodes, seed.edges
"""

from route_planner.data.loader import GraphSeed, SeedDataError, load_seed, parse_seed

__all__ = ["GraphSeed", "SeedDataError", "load_seed", "parse_seed"]
