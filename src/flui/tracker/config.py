"""Runtime configuration from CLI options and environment variables."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from flui.tracker.alert import DEFAULT_ALERT_MINUTES
from flui.tracker.service import TrackerService
from flui.tracker.sources.base import FlightSource
from flui.tracker.sources.demo import DemoSource
from flui.tracker.sources.flightaware import FlightAwareSource

FLIGHT_NUMBER_ENV = "FLIGHT_NUMBER"
API_KEY_ENV = "FLIGHTAWARE_API_KEY"
POLL_INTERVAL_ENV = "FLUI_POLL_INTERVAL"

DEFAULT_POLL_INTERVAL = 60.0


class ConfigurationError(ValueError):
    """Invalid or missing configuration."""


class MissingFlightNumber(ConfigurationError):
    def __init__(self):
        super().__init__(
            "Flight number is required. Provide via --flight-number flag "
            f"or {FLIGHT_NUMBER_ENV} environment variable"
        )


class MissingApiKey(ConfigurationError):
    def __init__(self):
        super().__init__(
            "FlightAware API key is required. Provide via --api-key flag "
            f"or {API_KEY_ENV} environment variable"
        )


@dataclass
class Config:
    """Settings for one tracking session."""

    flight_number: str
    api_key: Optional[str] = None
    poll_interval: float = DEFAULT_POLL_INTERVAL
    alert_threshold: int = DEFAULT_ALERT_MINUTES
    demo: bool = False
    simulate_progress: bool = False

    @classmethod
    def from_options(
        cls,
        flight_number: Optional[str],
        api_key: Optional[str],
        poll_interval: Optional[float] = None,
        alert_threshold: Optional[int] = None,
        demo: bool = False,
        simulate_progress: bool = False,
        env: Optional[Mapping[str, str]] = None,
    ) -> "Config":
        """
        Merge explicit options with environment fallbacks and validate.
        The flight number is checked before the API key; demo mode needs no key.
        """
        env = os.environ if env is None else env

        flight_number = (flight_number or env.get(FLIGHT_NUMBER_ENV, "")).strip()
        if not flight_number:
            raise MissingFlightNumber()

        api_key = (api_key or env.get(API_KEY_ENV, "")).strip() or None
        if api_key is None and not demo:
            raise MissingApiKey()

        if poll_interval is None:
            raw_interval = env.get(POLL_INTERVAL_ENV)
            if raw_interval:
                try:
                    poll_interval = float(raw_interval)
                except ValueError:
                    raise ConfigurationError(
                        f"Invalid {POLL_INTERVAL_ENV}: {raw_interval}. Expected seconds"
                    )
            else:
                poll_interval = DEFAULT_POLL_INTERVAL
        if poll_interval <= 0:
            raise ConfigurationError(f"Poll interval must be positive, got {poll_interval}")

        if alert_threshold is None:
            alert_threshold = DEFAULT_ALERT_MINUTES
        if alert_threshold < 0:
            raise ConfigurationError(f"Alert threshold must not be negative, got {alert_threshold}")

        return cls(
            flight_number=flight_number,
            api_key=api_key,
            poll_interval=poll_interval,
            alert_threshold=alert_threshold,
            demo=demo,
            simulate_progress=simulate_progress,
        )

    def create_source(self) -> FlightSource:
        if self.demo:
            return DemoSource()
        return FlightAwareSource(api_key=self.api_key)

    def create_service(self) -> TrackerService:
        return TrackerService(
            self.flight_number,
            self.create_source(),
            simulate_progress=self.simulate_progress,
        )
