"""Services layer - Application orchestration.

Available services:
- RideAnalyticsService: Loads a ride log and computes its analytics
"""

from .ride_analytics import RideAnalyticsService

__all__ = ["RideAnalyticsService"]
