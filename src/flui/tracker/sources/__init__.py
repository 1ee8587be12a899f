"""Pluggable flight data sources."""

from flui.tracker.sources.base import FlightSource, RawFlight
from flui.tracker.sources.demo import DemoSource
from flui.tracker.sources.flightaware import FlightAwareSource

__all__ = ["DemoSource", "FlightAwareSource", "FlightSource", "RawFlight"]
