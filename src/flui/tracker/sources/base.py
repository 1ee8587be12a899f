"""Abstract interface for flight data sources."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class RawFlight:
    """One provider-reported instance of a flight (a single day's operation).

    All timestamps are timezone-aware UTC. Delays are in seconds, positive
    meaning late.
    """

    ident: str
    cancelled: bool = False
    scheduled_departure: Optional[datetime] = None
    estimated_departure: Optional[datetime] = None
    actual_departure: Optional[datetime] = None
    scheduled_arrival: Optional[datetime] = None
    estimated_arrival: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None
    departure_delay: Optional[int] = None
    arrival_delay: Optional[int] = None
    progress_percent: Optional[int] = None
    origin_code: Optional[str] = None
    destination_code: Optional[str] = None

    @property
    def landed(self) -> bool:
        return self.actual_arrival is not None


@runtime_checkable
class FlightSource(Protocol):
    """Protocol for pluggable flight data sources."""

    def fetch_flights(self, ident: str) -> List[RawFlight]:
        """Fetch every known instance of the flight identified by ident."""
        ...
