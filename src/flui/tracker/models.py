"""Data models for flight tracking."""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from flui.tracker.selection import select_relevant_flight
from flui.tracker.sources.base import RawFlight
from flui.tracker.status import FlightStatus, classify
from flui.tracker.times import (
    ARRIVED,
    format_local,
    format_remaining,
    parse_instant,
    to_iso,
    utc_now,
    whole_minutes,
)


@dataclass(frozen=True)
class FlightStatusViewModel:
    """Display-ready snapshot of one flight at one point in time.

    Timestamps are ISO-8601 strings; time-dependent values are computed on
    each call. Use replace() or with_progress() to get a modified copy.
    """

    flight_number: str
    status: FlightStatus = FlightStatus.ON_TIME
    scheduled_departure: Optional[str] = None
    scheduled_arrival: Optional[str] = None
    estimated_departure: Optional[str] = None
    estimated_arrival: Optional[str] = None
    actual_departure: Optional[str] = None
    actual_arrival: Optional[str] = None
    progress_percent: Optional[int] = None
    origin_airport: Optional[str] = None
    destination_airport: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: RawFlight) -> "FlightStatusViewModel":
        """Build a view model from a provider record, classifying its status."""
        return cls(
            flight_number=raw.ident,
            status=classify(raw),
            scheduled_departure=to_iso(raw.scheduled_departure),
            scheduled_arrival=to_iso(raw.scheduled_arrival),
            estimated_departure=to_iso(raw.estimated_departure),
            estimated_arrival=to_iso(raw.estimated_arrival),
            actual_departure=to_iso(raw.actual_departure),
            actual_arrival=to_iso(raw.actual_arrival),
            progress_percent=raw.progress_percent,
            origin_airport=raw.origin_code,
            destination_airport=raw.destination_code,
        )

    def replace(self, **overrides) -> "FlightStatusViewModel":
        """Return a copy with the given fields overridden."""
        return dataclasses.replace(self, **overrides)

    def with_progress(self, progress_percent: Optional[int]) -> "FlightStatusViewModel":
        """Return a copy with only progress_percent replaced."""
        return self.replace(progress_percent=progress_percent)

    @property
    def landed(self) -> bool:
        """A flight with an actual arrival has landed, whatever else it reports."""
        return self.actual_arrival is not None

    def departure_time(self) -> Optional[str]:
        return self.actual_departure or self.estimated_departure

    def arrival_time(self) -> Optional[str]:
        return self.actual_arrival or self.estimated_arrival

    def progress_percentage(self) -> float:
        if self.progress_percent is None:
            return 0.0
        return float(self.progress_percent)

    def formatted_arrival_time(self) -> Optional[str]:
        """Arrival time in the local timezone, e.g. 'Nov 18, 2025 at 2:30 PM EST'."""
        arrival = parse_instant(self.arrival_time())
        if arrival is None:
            return None
        return format_local(arrival)

    def time_remaining(self, now: Optional[datetime] = None) -> Optional[str]:
        """Time left until the estimated arrival, like '2h 30m' or '45m'."""
        if self.landed:
            return ARRIVED
        arrival = parse_instant(self.estimated_arrival)
        if arrival is None:
            return None
        return format_remaining(arrival - (now or utc_now()))

    def is_approaching_landing(
        self, threshold_minutes: int, now: Optional[datetime] = None
    ) -> bool:
        """True while the estimated arrival is 1..threshold_minutes whole minutes away."""
        if self.landed:
            return False
        arrival = parse_instant(self.estimated_arrival)
        if arrival is None:
            return False
        minutes = whole_minutes(arrival - (now or utc_now()))
        return 0 < minutes <= threshold_minutes


@dataclass
class QueryResult:
    """All instances returned for one flight number."""

    flight_number: str
    flights: List[RawFlight] = field(default_factory=list)

    def relevant_flight(self, now: Optional[datetime] = None) -> Optional[RawFlight]:
        return select_relevant_flight(self.flights, now=now)

    def to_dataframe(self, now: Optional[datetime] = None):
        """Convert to pandas DataFrame, one row per flight instance."""
        import pandas as pd

        columns = [
            "ident",
            "status",
            "origin",
            "destination",
            "scheduled_departure",
            "estimated_departure",
            "actual_departure",
            "scheduled_arrival",
            "estimated_arrival",
            "actual_arrival",
            "progress",
            "selected",
        ]
        if not self.flights:
            return pd.DataFrame(columns=columns)

        selected = self.relevant_flight(now=now)
        return pd.DataFrame(
            [
                {
                    "ident": f.ident,
                    "status": str(classify(f)),
                    "origin": f.origin_code,
                    "destination": f.destination_code,
                    "scheduled_departure": f.scheduled_departure,
                    "estimated_departure": f.estimated_departure,
                    "actual_departure": f.actual_departure,
                    "scheduled_arrival": f.scheduled_arrival,
                    "estimated_arrival": f.estimated_arrival,
                    "actual_arrival": f.actual_arrival,
                    "progress": f.progress_percent,
                    "selected": f is selected,
                }
                for f in self.flights
            ],
            columns=columns,
        )
