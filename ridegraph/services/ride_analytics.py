"""Ride analytics service - Main orchestrator.

Pulls trips from the injected record source, builds the location graph
and runs every analysis on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..analytics.routes import popular_hubs, top_k_routes
from ..domain.errors import LocationNotFoundError, NoRouteFoundError
from ..domain.models import AnalysisReport, Location, RideGraph
from ..graph.bfs import shortest_path
from ..graph.builder import load_ride_graph
from ..graph.stats import all_distance_tables, distance_stats
from ..ports.presenter import ReportPresenterPort
from ..ports.records import RecordSourcePort


@dataclass
class RideAnalyticsService:
    """Main service for analysing a ride log.

    This service orchestrates the full run:
    1. Record loading
    2. Graph construction
    3. Route frequencies and category hubs
    4. Shortest path for the most frequent route
    5. All-pairs hop statistics

    Attributes:
        record_source: Supplies filtered trip records
        presenter: Optional report renderer
        top_k: Number of most frequent routes to report
        workers: Thread count for the all-pairs BFS
    """

    record_source: RecordSourcePort
    presenter: Optional[ReportPresenterPort] = None
    top_k: int = 5
    workers: int = 1

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def graph(self) -> RideGraph:
        """Build the location graph from the current records."""
        graph = load_ride_graph(self.record_source.load())
        self._logger.debug(
            "Graph built",
            extra={"nodes": graph.num_nodes, "edges": graph.num_edges},
        )
        return graph

    def analyze(self) -> AnalysisReport:
        """Run every analysis and collect the results.

        Returns:
            AnalysisReport for the loaded records.
        """
        records = self.record_source.load()
        self._logger.info("Starting analysis", extra={"rides": len(records)})

        graph = load_ride_graph(records)
        top_routes = top_k_routes(records, self.top_k)
        personal_hub, business_hub = popular_hubs(records)

        top_route_path: List[Location] = []
        if top_routes:
            (origin, destination), _ = top_routes[0]
            path = shortest_path(
                graph.adjacency, graph.index[origin], graph.index[destination]
            )
            top_route_path = graph.names(path)

        tables = all_distance_tables(graph.adjacency, workers=self.workers)
        stats = distance_stats(tables)
        self._logger.info(
            "Analysis complete",
            extra={
                "locations": graph.num_nodes,
                "mean_hops": stats.mean,
                "max_hops": stats.max,
            },
        )

        return AnalysisReport(
            total_rides=len(records),
            num_locations=graph.num_nodes,
            top_routes=tuple(top_routes),
            personal_hub=personal_hub,
            business_hub=business_hub,
            top_route_path=tuple(top_route_path),
            stats=stats,
        )

    def solve(self, origin: Location, destination: Location) -> List[Location]:
        """Find the fewest-hop route between two named locations.

        Raises:
            LocationNotFoundError: If either location is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        graph = self.graph()
        for name in (origin, destination):
            if name not in graph.index:
                raise LocationNotFoundError(
                    f"Location not found: {name}", location=name
                )

        path = shortest_path(
            graph.adjacency, graph.index[origin], graph.index[destination]
        )
        if path is None:
            self._logger.warning(
                "No route found",
                extra={"origin": origin, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {origin} to {destination}",
                origin=origin,
                destination=destination,
            )
        return graph.names(path)

    def render(self, report: AnalysisReport) -> str:
        """Render a report through the configured presenter.

        Raises:
            RuntimeError: If no presenter was injected.
        """
        if self.presenter is None:
            raise RuntimeError("No presenter configured")
        return self.presenter.render(report)
