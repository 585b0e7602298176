"""Presenter adapters - Implementations of ReportPresenterPort."""

from .text_presenter import TextReportPresenter

__all__ = ["TextReportPresenter"]
