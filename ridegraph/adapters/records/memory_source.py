"""In-memory record source for tests and demos.

Lets callers hand a fixed batch of trips to the analytics service
without touching the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from ...domain.models import Category, TripRecord


@dataclass(frozen=True)
class InMemoryRecordSource:
    """Record source backed by a fixed tuple of trips."""

    records: Tuple[TripRecord, ...] = ()

    @classmethod
    def from_tuples(
        cls, rows: Iterable[Tuple[str, str, Category]]
    ) -> InMemoryRecordSource:
        """Build a source from ``(origin, destination, category)`` tuples."""
        return cls(tuple(TripRecord(o, d, c) for o, d, c in rows))

    @classmethod
    def cycle(cls) -> InMemoryRecordSource:
        """Three personal trips forming the cycle A -> B -> C -> A."""
        return cls.from_tuples(
            [
                ("A", "B", Category.PERSONAL),
                ("B", "C", Category.PERSONAL),
                ("C", "A", Category.PERSONAL),
            ]
        )

    def load(self) -> Tuple[TripRecord, ...]:
        return self.records
