"""One-shot landing alert on top of the stateless approach predicate."""

from datetime import datetime
from typing import Optional

from flui.tracker.models import FlightStatusViewModel

DEFAULT_ALERT_MINUTES = 30


class LandingAlert:
    """Fires once per approach window.

    The window opens when the flight comes within threshold_minutes of its
    estimated arrival and closes when it leaves it (landed, pushed back, or
    arrival data lost); the alert re-arms once the window closes.
    """

    def __init__(self, threshold_minutes: int = DEFAULT_ALERT_MINUTES):
        self.threshold_minutes = threshold_minutes
        self._alerted = False

    @property
    def alerted(self) -> bool:
        return self._alerted

    def update(self, view_model: FlightStatusViewModel, now: Optional[datetime] = None) -> bool:
        """Return True only on the first update inside an approach window."""
        if not view_model.is_approaching_landing(self.threshold_minutes, now=now):
            self._alerted = False
            return False
        if self._alerted:
            return False
        self._alerted = True
        return True
