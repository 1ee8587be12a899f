"""Unit tests for picking the relevant flight instance."""

from datetime import datetime, timedelta

from flui.tracker.selection import SELECTION_ANCHOR, select_relevant_flight
from flui.tracker.sources.base import RawFlight


class TestSelectRelevantFlight:
    """Tests for select_relevant_flight."""

    def test_empty_returns_none(self, fixed_now: datetime) -> None:
        assert select_relevant_flight([], now=fixed_now) is None

    def test_picks_closest_to_anchor(self, fixed_now: datetime) -> None:
        target = fixed_now - SELECTION_ANCHOR
        records = [
            RawFlight(ident="OLD", estimated_arrival=target - timedelta(minutes=80)),
            RawFlight(ident="CURRENT", estimated_arrival=target + timedelta(minutes=5, seconds=30)),
            RawFlight(ident="FUTURE", estimated_arrival=target + timedelta(hours=4, minutes=35)),
        ]
        assert select_relevant_flight(records, now=fixed_now).ident == "CURRENT"

    def test_before_target_counts_as_distance(self, fixed_now: datetime) -> None:
        target = fixed_now - SELECTION_ANCHOR
        records = [
            RawFlight(ident="LATER", estimated_arrival=target + timedelta(minutes=10)),
            RawFlight(ident="EARLIER", estimated_arrival=target - timedelta(minutes=5)),
        ]
        assert select_relevant_flight(records, now=fixed_now).ident == "EARLIER"

    def test_tie_goes_to_first(self, fixed_now: datetime) -> None:
        target = fixed_now - SELECTION_ANCHOR
        records = [
            RawFlight(ident="A", estimated_arrival=target + timedelta(minutes=30)),
            RawFlight(ident="B", estimated_arrival=target - timedelta(minutes=30)),
        ]
        assert select_relevant_flight(records, now=fixed_now).ident == "A"

    def test_records_without_estimate_are_skipped(self, fixed_now: datetime) -> None:
        records = [
            RawFlight(ident="NO_ETA"),
            RawFlight(ident="FAR", estimated_arrival=fixed_now + timedelta(days=3)),
        ]
        assert select_relevant_flight(records, now=fixed_now).ident == "FAR"

    def test_no_estimates_falls_back_to_first(self, fixed_now: datetime) -> None:
        records = [
            RawFlight(ident="FIRST", cancelled=True),
            RawFlight(ident="SECOND"),
        ]
        assert select_relevant_flight(records, now=fixed_now).ident == "FIRST"

    def test_defaults_to_current_time(self) -> None:
        record = RawFlight(ident="ONLY")
        assert select_relevant_flight([record]) is record
