"""Offline flight source with canned data, for demos and trying the UI."""

from datetime import datetime, timedelta
from typing import List, Optional

from flui.tracker.sources.base import RawFlight
from flui.tracker.times import utc_now

DEMO_ORIGIN = "OGG"
DEMO_DESTINATION = "HNL"


class DemoSource:
    """
    Returns three instances of the requested flight relative to a fixed clock:
    yesterday's (landed), today's (airborne, landing in about 40 minutes) and
    tomorrow's (scheduled, slightly delayed).
    """

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or utc_now()

    def fetch_flights(self, ident: str) -> List[RawFlight]:
        now = self.now
        day = timedelta(days=1)
        block = timedelta(hours=2)

        today_off = now - timedelta(hours=1, minutes=20)
        today_on = now + timedelta(minutes=40)

        return [
            RawFlight(
                ident=ident,
                scheduled_departure=today_off - day,
                estimated_departure=today_off - day,
                actual_departure=today_off - day + timedelta(minutes=4),
                scheduled_arrival=today_on - day,
                estimated_arrival=today_on - day,
                actual_arrival=today_on - day + timedelta(minutes=2),
                departure_delay=240,
                arrival_delay=120,
                progress_percent=100,
                origin_code=DEMO_ORIGIN,
                destination_code=DEMO_DESTINATION,
            ),
            RawFlight(
                ident=ident,
                scheduled_departure=today_off,
                estimated_departure=today_off,
                actual_departure=today_off,
                scheduled_arrival=today_off + block,
                estimated_arrival=today_on,
                departure_delay=0,
                arrival_delay=0,
                progress_percent=67,
                origin_code=DEMO_ORIGIN,
                destination_code=DEMO_DESTINATION,
            ),
            RawFlight(
                ident=ident,
                scheduled_departure=today_off + day,
                estimated_departure=today_off + day + timedelta(minutes=15),
                scheduled_arrival=today_off + day + block,
                estimated_arrival=today_off + day + block + timedelta(minutes=15),
                departure_delay=900,
                arrival_delay=900,
                progress_percent=0,
                origin_code=DEMO_ORIGIN,
                destination_code=DEMO_DESTINATION,
            ),
        ]
