"""Live flight status tracking package."""

from flui.tracker.alert import LandingAlert
from flui.tracker.models import FlightStatusViewModel, QueryResult
from flui.tracker.selection import select_relevant_flight
from flui.tracker.service import TrackerService
from flui.tracker.sources.base import RawFlight
from flui.tracker.status import FlightStatus, classify

__all__ = [
    "FlightStatus",
    "FlightStatusViewModel",
    "LandingAlert",
    "QueryResult",
    "RawFlight",
    "TrackerService",
    "classify",
    "select_relevant_flight",
]
