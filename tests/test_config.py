"""Unit tests for configuration loading and validation."""

import pytest

from flui.tracker.config import (
    API_KEY_ENV,
    DEFAULT_POLL_INTERVAL,
    FLIGHT_NUMBER_ENV,
    POLL_INTERVAL_ENV,
    Config,
    ConfigurationError,
    MissingApiKey,
    MissingFlightNumber,
)
from flui.tracker.service import TrackerService
from flui.tracker.sources.demo import DemoSource
from flui.tracker.sources.flightaware import FlightAwareSource


class TestConfigFromOptions:
    """Tests for Config.from_options."""

    def test_both_values(self) -> None:
        config = Config.from_options("AA100", "test-api-key", env={})
        assert config.flight_number == "AA100"
        assert config.api_key == "test-api-key"
        assert config.poll_interval == DEFAULT_POLL_INTERVAL
        assert config.alert_threshold == 30

    def test_missing_flight_number(self) -> None:
        with pytest.raises(MissingFlightNumber):
            Config.from_options(None, "test-api-key", env={})

    def test_missing_api_key(self) -> None:
        with pytest.raises(MissingApiKey):
            Config.from_options("AA100", None, env={})

    def test_missing_both_reports_flight_number_first(self) -> None:
        with pytest.raises(MissingFlightNumber):
            Config.from_options(None, None, env={})

    def test_environment_fallbacks(self) -> None:
        env = {FLIGHT_NUMBER_ENV: "HAL824", API_KEY_ENV: "env-key", POLL_INTERVAL_ENV: "15"}
        config = Config.from_options(None, None, env=env)
        assert config.flight_number == "HAL824"
        assert config.api_key == "env-key"
        assert config.poll_interval == 15.0

    def test_options_override_environment(self) -> None:
        env = {FLIGHT_NUMBER_ENV: "HAL824", API_KEY_ENV: "env-key"}
        config = Config.from_options("UAL1", "flag-key", poll_interval=5, env=env)
        assert config.flight_number == "UAL1"
        assert config.api_key == "flag-key"
        assert config.poll_interval == 5

    def test_reads_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv(FLIGHT_NUMBER_ENV, "DAL9")
        monkeypatch.setenv(API_KEY_ENV, "proc-key")
        config = Config.from_options(None, None)
        assert config.flight_number == "DAL9"

    def test_demo_needs_no_api_key(self) -> None:
        config = Config.from_options("AA100", None, demo=True, env={})
        assert config.api_key is None
        assert config.demo

    @pytest.mark.parametrize("interval", [0, -5])
    def test_non_positive_interval(self, interval: float) -> None:
        with pytest.raises(ConfigurationError, match="Poll interval"):
            Config.from_options("AA100", "k", poll_interval=interval, env={})

    def test_invalid_interval_env(self) -> None:
        with pytest.raises(ConfigurationError, match=POLL_INTERVAL_ENV):
            Config.from_options("AA100", "k", env={POLL_INTERVAL_ENV: "soon"})

    def test_negative_alert_threshold(self) -> None:
        with pytest.raises(ConfigurationError, match="Alert threshold"):
            Config.from_options("AA100", "k", alert_threshold=-1, env={})


class TestConfigurationErrorMessages:
    """Tests for the error messages shown to the operator."""

    def test_flight_number_message(self) -> None:
        message = str(MissingFlightNumber())
        assert "Flight number is required" in message
        assert "--flight-number" in message
        assert "FLIGHT_NUMBER" in message

    def test_api_key_message(self) -> None:
        message = str(MissingApiKey())
        assert "FlightAware API key is required" in message
        assert "--api-key" in message
        assert "FLIGHTAWARE_API_KEY" in message

    def test_errors_are_value_errors(self) -> None:
        assert isinstance(MissingApiKey(), ValueError)


class TestConfigFactories:
    """Tests for source and service construction."""

    def test_flightaware_source(self) -> None:
        source = Config(flight_number="AA100", api_key="k").create_source()
        assert isinstance(source, FlightAwareSource)
        assert source.api_key == "k"

    def test_demo_source(self) -> None:
        assert isinstance(Config(flight_number="AA100", demo=True).create_source(), DemoSource)

    def test_service(self) -> None:
        config = Config(flight_number="AA100", demo=True, simulate_progress=True)
        service = config.create_service()
        assert isinstance(service, TrackerService)
        assert service.flight_number == "AA100"
        assert service.simulate_progress
