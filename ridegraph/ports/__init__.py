"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the analytics core and external
adapters. They enable dependency injection and make the system testable.
"""

from .presenter import ReportPresenterPort
from .records import RecordSourcePort

__all__ = [
    "RecordSourcePort",
    "ReportPresenterPort",
]
