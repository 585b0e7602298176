"""CSV record source adapter.

Reads the ride-log CSV and turns each usable row into a TripRecord:
- Column positions and header handling from configuration
- Rows with missing columns are skipped
- Empty and excluded locations (e.g. "Unknown Location") are dropped
- Records are cached after the first load
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import DatasetConfig, get_config
from ...domain.errors import DatasetError
from ...domain.models import Category, TripRecord


@dataclass
class CSVRecordSource:
    """Record source that loads trips from a CSV file.

    This adapter implements RecordSourcePort.

    Attributes:
        config: Dataset configuration (path, columns, exclusions)
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().dataset)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _records: Optional[List[TripRecord]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> List[TripRecord]:
        """Load trip records from the configured CSV file.

        Returns:
            Filtered trip records in file order.

        Raises:
            DatasetError: If the file cannot be read.
        """
        if self._records is not None:
            return self._records

        path = self.config.rides_path
        self._logger.debug("Loading rides", extra={"rides_path": str(path)})

        try:
            records = self._read_csv()
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DatasetError(
                f"Failed to load rides: {e}",
                file_path=str(path),
                cause=e,
            )

        self._records = records
        self._logger.info("Rides loaded", extra={"rides": len(records)})
        return records

    def _read_csv(self) -> List[TripRecord]:
        """Internal method to parse and filter the CSV rows."""
        cfg = self.config
        records: List[TripRecord] = []
        skipped = 0

        with cfg.rides_path.open(newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            if cfg.has_header:
                next(reader, None)

            for row in reader:
                if len(row) < cfg.min_columns:
                    skipped += 1
                    continue

                origin = row[cfg.origin_column].strip()
                destination = row[cfg.destination_column].strip()
                if not self._is_known(origin) or not self._is_known(destination):
                    skipped += 1
                    continue

                records.append(
                    TripRecord(
                        origin=origin,
                        destination=destination,
                        category=Category.parse(row[cfg.category_column]),
                    )
                )

        if skipped:
            self._logger.debug("Rows skipped", extra={"skipped": skipped})
        return records

    def _is_known(self, location: str) -> bool:
        return bool(location) and location not in self.config.excluded_locations

    def clear_cache(self) -> None:
        """Clear cached records."""
        self._records = None
        self._logger.debug("Record cache cleared")
