"""Flight status classification from raw provider records."""

import enum
from typing import Callable, Tuple

from flui.tracker.sources.base import RawFlight


class FlightStatus(enum.Enum):
    """Categorical status of a single flight instance."""

    ON_TIME = "On Time"
    DELAYED = "Delayed"
    CANCELLED = "Cancelled"
    EN_ROUTE = "En Route"

    def __str__(self) -> str:
        return self.value


def _is_late(delay) -> bool:
    return delay is not None and delay > 0


# Evaluated top to bottom, first match wins. The order is part of the contract.
STATUS_RULES: Tuple[Tuple[Callable[[RawFlight], bool], FlightStatus], ...] = (
    (lambda r: r.cancelled, FlightStatus.CANCELLED),
    (
        lambda r: r.actual_departure is not None and not r.landed,
        FlightStatus.EN_ROUTE,
    ),
    (lambda r: _is_late(r.departure_delay), FlightStatus.DELAYED),
    (lambda r: _is_late(r.arrival_delay), FlightStatus.DELAYED),
)

DEFAULT_STATUS = FlightStatus.ON_TIME


def classify(record: RawFlight) -> FlightStatus:
    """Return the status of record; ON_TIME when no rule matches."""
    for matches, status in STATUS_RULES:
        if matches(record):
            return status
    return DEFAULT_STATUS
