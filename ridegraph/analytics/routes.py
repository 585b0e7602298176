"""Route frequency and hub popularity over a batch of trips."""

from collections import Counter
from typing import Dict, List, Sequence, Tuple

from ..domain.models import Category, Location, RouteCount, TripRecord

CategoryTallies = Dict[Category, Counter]


def top_k_routes(records: Sequence[TripRecord], k: int) -> List[RouteCount]:
    """Return the ``k`` most frequent direct routes with their counts.

    Routes are sorted by descending count; equal counts are ordered by
    ``(origin, destination)``. Fewer than ``k`` distinct routes returns
    them all.

    Raises:
        ValueError: If ``k`` is negative.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")

    counts = Counter((r.origin, r.destination) for r in records)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:k]


def category_tallies(records: Sequence[TripRecord]) -> CategoryTallies:
    """Count appearances of each location, as origin or destination, per category.

    Every category gets an entry, empty when no trip has that category.
    """
    tallies: CategoryTallies = {category: Counter() for category in Category}
    for record in records:
        tally = tallies[record.category]
        tally[record.origin] += 1
        tally[record.destination] += 1
    return tallies


def busiest_location(tally: Counter) -> Location:
    """Location with the highest count, ``""`` for an empty tally.

    Ties go to the lexicographically smallest location name.
    """
    if not tally:
        return ""
    return min(tally.items(), key=lambda item: (-item[1], item[0]))[0]


def popular_hubs(records: Sequence[TripRecord]) -> Tuple[Location, Location]:
    """Return ``(personal_hub, business_hub)`` for a batch of trips."""
    tallies = category_tallies(records)
    return (
        busiest_location(tallies[Category.PERSONAL]),
        busiest_location(tallies[Category.BUSINESS]),
    )
