"""Record source port - Abstraction for loading trip records.

The analytics core never opens files itself: it receives whatever
implementation of this protocol the container injects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import TripRecord


class RecordSourcePort(Protocol):
    """Port for loading trip records.

    Implementations:
    - adapters/records/csv_source.py (CSVRecordSource) - Production
    - adapters/records/memory_source.py (InMemoryRecordSource) - Testing

    Records returned must already be filtered: no empty or excluded
    location names.
    """

    def load(self) -> Sequence[TripRecord]:
        """Load the trip records.

        Returns:
            Trip records in dataset order.
        """
        ...
