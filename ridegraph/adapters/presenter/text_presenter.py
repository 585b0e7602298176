"""Plain-text presenter for analytics reports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...domain.models import AnalysisReport


@dataclass(frozen=True)
class TextReportPresenter:
    """Render an AnalysisReport as console-friendly text.

    Attributes:
        path_separator: String placed between locations of a path
    """

    path_separator: str = " -> "

    def render(self, report: AnalysisReport) -> str:
        lines: List[str] = [
            f"Total rides after filter: {report.total_rides}",
            f"Locations: {report.num_locations}",
            "",
            f"Top {len(report.top_routes)} routes:",
        ]
        for (origin, destination), count in report.top_routes:
            unit = "trip" if count == 1 else "trips"
            lines.append(f"  {origin} -> {destination}: {count} {unit}")

        lines += [
            "",
            f"Personal: {report.personal_hub or '-'}",
            f"Business: {report.business_hub or '-'}",
        ]

        if report.top_routes:
            (origin, destination), _ = report.top_routes[0]
            lines.append("")
            if report.top_route_path:
                path = self.path_separator.join(report.top_route_path)
                lines.append(f"Shortest {origin}->{destination}: {path}")
            else:
                lines.append(f"No path found between {origin} and {destination}.")

        stats = report.stats
        lines += [
            "",
            f"Graph hops: mean {stats.mean:.2f}, "
            f"stddev {stats.stddev:.2f}, max {stats.max}",
        ]
        return "\n".join(lines)
