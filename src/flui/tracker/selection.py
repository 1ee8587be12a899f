"""Pick the flight instance an operator watching right now cares about."""

from datetime import datetime, timedelta
from typing import List, Optional

from flui.tracker.sources.base import RawFlight
from flui.tracker.times import utc_now

# Operators usually look a flight up about two hours into its relevant window.
SELECTION_ANCHOR = timedelta(hours=2)


def select_relevant_flight(
    records: List[RawFlight], now: Optional[datetime] = None
) -> Optional[RawFlight]:
    """
    Return the record whose estimated arrival is closest to now minus two hours.

    Ties go to the record seen first. When no record has an estimated arrival
    the first record is returned as is; an empty list gives None.
    """
    if not records:
        return None

    target = (now or utc_now()) - SELECTION_ANCHOR

    best = None
    best_distance = None
    for record in records:
        if record.estimated_arrival is None:
            continue
        distance = abs(record.estimated_arrival - target)
        if best_distance is None or distance < best_distance:
            best, best_distance = record, distance

    return best if best is not None else records[0]
