"""Graph-related utilities for the ride location network.

This subpackage builds the index-based location graph from trip records
and runs hop-count searches and distance statistics on top of it.
"""

from .bfs import bfs_distances, shortest_path
from .builder import build_graph, load_ride_graph, unique_locations
from .stats import all_distance_tables, distance_stats

__all__ = [
    "all_distance_tables",
    "bfs_distances",
    "build_graph",
    "distance_stats",
    "load_ride_graph",
    "shortest_path",
    "unique_locations",
]
