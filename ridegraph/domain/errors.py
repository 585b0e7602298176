"""Typed domain errors for ride graph analytics.

All errors inherit from RideGraphError and can optionally wrap a root
cause exception for debugging.

Programmer errors (out-of-range node indices, negative ``k``) are not
part of this hierarchy: they surface as the builtin IndexError and
ValueError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RideGraphError(Exception):
    """Base error for the ride graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DatasetError(RideGraphError):
    """Ride-log dataset could not be read.

    Attributes:
        file_path: Path to the dataset file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class LocationNotFoundError(RideGraphError):
    """Location name is not part of the graph.

    Attributes:
        location: The location name that was not found
    """

    location: str = ""


@dataclass
class NoRouteFoundError(RideGraphError):
    """No path exists between the requested locations.

    Attributes:
        origin: Origin location name
        destination: Destination location name
    """

    origin: str = ""
    destination: str = ""

