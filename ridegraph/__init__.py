"""Top-level package for ride-log graph analytics.

Trips from a ride log are turned into a directed graph of locations.
On top of it the package reports the most frequent direct routes, the
busiest location per trip category, fewest-hop paths and hop-count
statistics over all reachable location pairs.
"""
