"""Descriptive analytics over trip records."""

from .routes import busiest_location, category_tallies, popular_hubs, top_k_routes

__all__ = [
    "busiest_location",
    "category_tallies",
    "popular_hubs",
    "top_k_routes",
]
