"""FlightAware AeroAPI (v4) flight lookup client.

Requires an API key from https://www.flightaware.com/aeroapi/ (set the
FLIGHTAWARE_API_KEY env var or pass api_key).

Endpoint:
  GET /flights/{ident}  ->  {"flights": [...], "links": ..., "num_pages": ...}

The response holds every instance FlightAware knows for the identifier,
typically a few days back and forward.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

import requests

from flui.tracker.sources.base import RawFlight
from flui.tracker.times import parse_instant

logger = logging.getLogger(__name__)

AEROAPI_URL = "https://aeroapi.flightaware.com/aeroapi"


class FlightAwareSource:
    """Flight data source using the FlightAware AeroAPI."""

    def __init__(self, api_key: str, base_url: str = AEROAPI_URL, timeout: int = 30):
        if not api_key:
            raise ValueError("FlightAware API key required")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_flights(self, ident: str) -> List[RawFlight]:
        """Fetch all instances of a flight from AeroAPI."""
        url = f"{self.base_url}/flights/{ident}"
        logger.debug("GET %s", url)
        resp = requests.get(
            url,
            headers={"x-apikey": self.api_key},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()

        items = (data.get("flights") or []) if isinstance(data, dict) else []
        flights = []
        for item in items:
            if isinstance(item, dict):
                flights.append(self._parse_flight(item))
        logger.debug("AeroAPI returned %d instance(s) for %s", len(flights), ident)
        return flights

    def _parse_flight(self, item: dict[str, Any]) -> RawFlight:
        """Map one AeroAPI flight object onto a RawFlight."""
        return RawFlight(
            ident=str(item.get("ident") or "").strip(),
            cancelled=bool(item.get("cancelled", False)),
            scheduled_departure=self._get_time(item, "scheduled_off"),
            estimated_departure=self._get_time(item, "estimated_off"),
            actual_departure=self._get_time(item, "actual_off"),
            scheduled_arrival=self._get_time(item, "scheduled_on"),
            estimated_arrival=self._get_time(item, "estimated_on"),
            actual_arrival=self._get_time(item, "actual_on"),
            departure_delay=self._get_int(item, "departure_delay"),
            arrival_delay=self._get_int(item, "arrival_delay"),
            progress_percent=self._get_int(item, "progress_percent"),
            origin_code=self._airport_code(item.get("origin")),
            destination_code=self._airport_code(item.get("destination")),
        )

    def _get_time(self, d: dict, key: str) -> Optional[datetime]:
        return parse_instant(d.get(key))

    def _get_int(self, d: dict, key: str) -> Optional[int]:
        v = d.get(key)
        if v is None or isinstance(v, bool):
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None

    def _airport_code(self, airport: Any) -> Optional[str]:
        """IATA code if present, else ICAO."""
        if not isinstance(airport, dict):
            return None
        for key in ("code_iata", "code_icao"):
            v = airport.get(key)
            if v is not None and str(v).strip():
                return str(v).strip()
        return None
