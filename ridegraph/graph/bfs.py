"""Breadth-first search over the location graph.

Every edge counts as one hop. Both functions work on plain index-based
adjacency lists and keep their distance / predecessor arrays private
to a single call, so they can safely run side by side in threads.
"""

from collections import deque
from typing import Deque, List, Optional, Sequence

from ..domain.models import DistanceTable


def _check_index(adjacency: Sequence[Sequence[int]], node: int, name: str) -> None:
    if not 0 <= node < len(adjacency):
        raise IndexError(
            f"{name} index {node} out of range for graph with "
            f"{len(adjacency)} locations"
        )


def shortest_path(
    adjacency: Sequence[Sequence[int]], start: int, end: int
) -> Optional[List[int]]:
    """Find a path from ``start`` to ``end`` with the fewest hops.

    Parameters
    ----------
    adjacency:
        Destination indices per location index.
    start:
        Index of the departure location.
    end:
        Index of the arrival location.

    Returns
    -------
    list[int] or None
        Location indices from ``start`` to ``end`` inclusive, or ``None``
        when ``end`` cannot be reached. ``[start]`` when both are equal.

    Raises
    ------
    IndexError
        If either index is outside the graph.
    """
    _check_index(adjacency, start, "start")
    _check_index(adjacency, end, "end")

    size = len(adjacency)
    distance: List[Optional[int]] = [None] * size
    previous: List[Optional[int]] = [None] * size
    distance[start] = 0

    queue: Deque[int] = deque([start])
    while queue:
        u = queue.popleft()
        if u == end:
            break
        for v in adjacency[u]:
            if distance[v] is None:
                distance[v] = distance[u] + 1
                previous[v] = u
                queue.append(v)

    if distance[end] is None:
        return None

    path: List[int] = []
    current: Optional[int] = end
    while current is not None:
        path.append(current)
        current = previous[current]

    path.reverse()
    return path


def bfs_distances(adjacency: Sequence[Sequence[int]], source: int) -> DistanceTable:
    """Hop count from ``source`` to every location, ``None`` if unreachable.

    Raises IndexError when ``source`` is outside the graph.
    """
    _check_index(adjacency, source, "source")

    distance: DistanceTable = [None] * len(adjacency)
    distance[source] = 0

    queue: Deque[int] = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if distance[v] is None:
                distance[v] = distance[u] + 1
                queue.append(v)

    return distance
