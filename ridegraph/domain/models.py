"""Immutable domain models for ride graph analytics.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the application: trips,
the location graph built from them, and the analytics derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

Location = str

# One entry per location index, each listing the destination index of
# every trip leaving that location (duplicates preserved).
Adjacency = tuple[tuple[int, ...], ...]

# Hop count per location index, None when unreachable from the source.
DistanceTable = list[Optional[int]]

RouteCount = tuple[tuple[Location, Location], int]


class Category(Enum):
    """Trip category as recorded in the ride log."""

    BUSINESS = "Business"
    PERSONAL = "Personal"

    @classmethod
    def parse(cls, raw: str) -> Category:
        """Map a raw CATEGORY column value to a category.

        Anything other than ``Business`` counts as a personal trip.
        """
        if raw.strip() == cls.BUSINESS.value:
            return cls.BUSINESS
        return cls.PERSONAL


@dataclass(frozen=True, slots=True)
class TripRecord:
    """A single ride from ``origin`` to ``destination``.

    Attributes:
        origin: Location where the ride started
        destination: Location where the ride stopped
        category: Business or personal trip
    """

    origin: Location
    destination: Location
    category: Category


@dataclass(frozen=True, slots=True)
class RideGraph:
    """Directed location graph built from a batch of trips.

    Attributes:
        locations: Location names sorted lexicographically; position is
            the location index
        index: Read-only location name -> index mapping
        adjacency: Destination indices per location index
    """

    locations: tuple[Location, ...] = ()
    index: Mapping[Location, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    adjacency: Adjacency = ()

    @property
    def num_nodes(self) -> int:
        return len(self.locations)

    @property
    def num_edges(self) -> int:
        return sum(len(targets) for targets in self.adjacency)

    @property
    def is_empty(self) -> bool:
        return not self.locations

    def names(self, path: Optional[list[int]]) -> list[Location]:
        """Translate a path of indices into location names."""
        if not path:
            return []
        return [self.locations[i] for i in path]


@dataclass(frozen=True, slots=True)
class DistanceStats:
    """Aggregate hop-count statistics over all reachable location pairs.

    When the graph has no finite distances at all (empty graph) every
    field is zero.

    Attributes:
        mean: Arithmetic mean of finite distances
        stddev: Population standard deviation of finite distances
        max: Largest finite distance (diameter for strongly connected graphs)
    """

    mean: float = 0.0
    stddev: float = 0.0
    max: int = 0


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Everything computed in one analytics run.

    Attributes:
        total_rides: Number of trip records analysed
        num_locations: Number of distinct locations
        top_routes: Most frequent direct routes with their counts
        personal_hub: Busiest location among personal trips ("" if none)
        business_hub: Busiest location among business trips ("" if none)
        top_route_path: Shortest hop path for the most frequent route,
            as location names; empty when there is no route
        stats: Hop-count statistics over the whole graph
    """

    total_rides: int
    num_locations: int
    top_routes: tuple[RouteCount, ...] = ()
    personal_hub: Location = ""
    business_hub: Location = ""
    top_route_path: tuple[Location, ...] = ()
    stats: DistanceStats = field(default_factory=DistanceStats)
