"""Graph construction from trip records.

Locations are indexed after sorting their names, so the same batch of
trips always yields the same indices and the same adjacency lists.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from ..domain.models import Adjacency, Location, RideGraph, TripRecord


def unique_locations(records: Iterable[TripRecord]) -> Set[Location]:
    """Collect every location appearing as an origin or a destination."""
    locations: Set[Location] = set()
    for record in records:
        locations.add(record.origin)
        locations.add(record.destination)
    return locations


def build_graph(
    records: Sequence[TripRecord],
) -> Tuple[Adjacency, Dict[Location, int], List[Location]]:
    """Build the directed location graph for a batch of trips.

    Parameters
    ----------
    records:
        Trip records, already filtered by the record source.

    Returns
    -------
    adjacency, dict[str, int], list[str]
        The adjacency lists (one destination index per trip, duplicates
        kept), the name -> index mapping and the sorted location names.
        An empty batch gives three empty structures.
    """
    names = sorted(unique_locations(records))
    index = {name: i for i, name in enumerate(names)}

    adjacency: List[List[int]] = [[] for _ in names]
    for record in records:
        u = index.get(record.origin)
        v = index.get(record.destination)
        if u is not None and v is not None:
            adjacency[u].append(v)

    return tuple(tuple(targets) for targets in adjacency), index, names


def load_ride_graph(records: Sequence[TripRecord]) -> RideGraph:
    """Build the graph and bundle it as an immutable RideGraph."""
    adjacency, index, names = build_graph(records)
    return RideGraph(
        locations=tuple(names),
        index=MappingProxyType(index),
        adjacency=adjacency,
    )
