"""Presenter port - Abstraction for rendering analytics results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import AnalysisReport


class ReportPresenterPort(Protocol):
    """Port for turning an AnalysisReport into displayable text.

    Implementation: adapters/presenter/text_presenter.py
    """

    def render(self, report: AnalysisReport) -> str:
        """Render the report.

        Args:
            report: The computed analytics.

        Returns:
            The formatted output.
        """
        ...
