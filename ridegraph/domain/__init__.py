"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DatasetError,
    LocationNotFoundError,
    NoRouteFoundError,
    RideGraphError,
)
from .models import (
    Adjacency,
    AnalysisReport,
    Category,
    DistanceStats,
    DistanceTable,
    Location,
    RideGraph,
    RouteCount,
    TripRecord,
)

__all__ = [
    # Models
    "Adjacency",
    "AnalysisReport",
    "Category",
    "DistanceStats",
    "DistanceTable",
    "Location",
    "RideGraph",
    "RouteCount",
    "TripRecord",
    # Errors
    "RideGraphError",
    "DatasetError",
    "LocationNotFoundError",
    "NoRouteFoundError",
]
