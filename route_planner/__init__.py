"""
Route Planner.

A small routing engine that finds shortest paths between points of
interest on a mutable, undirected weighted graph, by distance or by
hop count, and keeps a session history of the routes it found.
"""

__version__ = "0.1.0"
