"""Record source adapters - Implementations of RecordSourcePort.

Available implementations:
- CSVRecordSource: Loads trips from the ride-log CSV
- InMemoryRecordSource: Serves a fixed batch of trips
"""

from .csv_source import CSVRecordSource
from .memory_source import InMemoryRecordSource

__all__ = ["CSVRecordSource", "InMemoryRecordSource"]
