"""Tracker service - one poll cycle: fetch, select, classify, derive."""

import logging
from datetime import datetime
from typing import Optional

import requests

from flui.tracker.models import FlightStatusViewModel, QueryResult
from flui.tracker.sources.base import FlightSource

logger = logging.getLogger(__name__)

SIMULATED_PROGRESS_STEP = 1


class TrackerService:
    """Turns provider responses for one flight number into view models."""

    def __init__(
        self,
        flight_number: str,
        source: FlightSource,
        simulate_progress: bool = False,
        progress_step: int = SIMULATED_PROGRESS_STEP,
    ):
        self.flight_number = flight_number
        self._source = source
        self.simulate_progress = simulate_progress
        self.progress_step = progress_step
        self._simulated_progress: Optional[int] = None

    def query(self) -> QueryResult:
        """Fetch every instance of the tracked flight."""
        return QueryResult(
            flight_number=self.flight_number,
            flights=self._source.fetch_flights(self.flight_number),
        )

    def poll_once(self, now: Optional[datetime] = None) -> Optional[FlightStatusViewModel]:
        """
        Run one update cycle.

        Returns None when the provider fails or has nothing for the flight, in
        which case the caller keeps showing its previous view model.
        """
        try:
            result = self.query()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Fetching %s failed: %s", self.flight_number, e)
            return None

        raw = result.relevant_flight(now=now)
        if raw is None:
            logger.info("No flights found for %s", self.flight_number)
            return None

        view_model = FlightStatusViewModel.from_raw(raw)
        logger.debug(
            "%s: %s, progress %s%%",
            view_model.flight_number,
            view_model.status,
            view_model.progress_percent,
        )
        if self.simulate_progress:
            view_model = self._advance_progress(view_model)
        return view_model

    def _advance_progress(self, view_model: FlightStatusViewModel) -> FlightStatusViewModel:
        """Step progress forward from the last simulated value, capped at 100."""
        if self._simulated_progress is None:
            progress = view_model.progress_percent or 0
        else:
            progress = self._simulated_progress + self.progress_step
        self._simulated_progress = min(progress, 100)
        return view_model.with_progress(self._simulated_progress)
