"""All-pairs hop distances and their summary statistics."""

from __future__ import annotations

import logging
import statistics
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Sequence

from ..domain.models import DistanceStats, DistanceTable
from .bfs import bfs_distances

logger = logging.getLogger(__name__)


def all_distance_tables(
    adjacency: Sequence[Sequence[int]], workers: int = 1
) -> List[DistanceTable]:
    """Run a BFS from every location, returning one table per source.

    With ``workers > 1`` the traversals are spread over a thread pool.
    Tables are always returned in source order, so the result does not
    depend on ``workers``.
    """
    sources = range(len(adjacency))
    if workers <= 1 or len(adjacency) < 2:
        return [bfs_distances(adjacency, source) for source in sources]

    logger.debug(
        "Running parallel BFS",
        extra={"sources": len(adjacency), "workers": workers},
    )
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda s: bfs_distances(adjacency, s), sources))


def distance_stats(tables: Iterable[DistanceTable]) -> DistanceStats:
    """Aggregate every finite entry of the distance tables.

    Self distances (always 0) are included, unreachable pairs are not.
    The standard deviation is the population one. Without any finite
    entry, which only happens for an empty graph, all values are zero.
    """
    finite = [d for table in tables for d in table if d is not None]
    if not finite:
        return DistanceStats()

    mean = statistics.fmean(finite)
    return DistanceStats(
        mean=mean,
        stddev=statistics.pstdev(finite, mean),
        max=max(finite),
    )
