"""CLI for live flight tracking."""

import argparse
import logging
import sys

import requests
from rich.console import Console
from rich.logging import RichHandler

from flui.tracker.alert import LandingAlert
from flui.tracker.config import Config, ConfigurationError
from flui.tracker.pipeline import run_display


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="flui",
        description="Track a flight live in the terminal (e.g. HAL824)",
    )
    parser.add_argument(
        "--flight-number",
        "-f",
        help="Flight identifier to track (env: FLIGHT_NUMBER)",
    )
    parser.add_argument(
        "--api-key",
        "-k",
        help="FlightAware AeroAPI key (env: FLIGHTAWARE_API_KEY)",
    )
    parser.add_argument(
        "--interval",
        "-i",
        type=float,
        help="Seconds between polls (env: FLUI_POLL_INTERVAL, default 60)",
    )
    parser.add_argument(
        "--alert-minutes",
        "-a",
        type=int,
        help="Ring the bell once the flight is this many minutes from landing (default 30)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use built-in sample data instead of FlightAware",
    )
    parser.add_argument(
        "--simulate-progress",
        action="store_true",
        help="Advance progress by one percent per poll (for demos)",
    )
    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="Print every instance of the flight once and exit",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="With --list, also write the instances to a CSV file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool, console: Console) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level="DEBUG" if verbose else "WARNING",
            format="%(name)s: %(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def list_flights(config: Config, output=None) -> int:
    """Print every instance of the flight, marking the one the tracker would pick."""
    service = config.create_service()
    try:
        result = service.query()
    except (requests.RequestException, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    df = result.to_dataframe()
    if df.empty:
        print(f"No flights found for {config.flight_number}.", file=sys.stderr)
        return 0

    print(df.to_string(index=False))

    if output:
        df.to_csv(output, index=False)
        print(f"\nWrote {len(df)} rows to {output}", file=sys.stderr)
    return 0


def main(argv=None):
    args = parse_args(argv)
    console = Console()
    configure_logging(args.verbose, console)

    try:
        config = Config.from_options(
            flight_number=args.flight_number,
            api_key=args.api_key,
            poll_interval=args.interval,
            alert_threshold=args.alert_minutes,
            demo=args.demo,
            simulate_progress=args.simulate_progress,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.list:
        sys.exit(list_flights(config, output=args.output))

    console.print(f"Tracking flight {config.flight_number}. Type q and Enter to quit.")
    last = run_display(
        config.create_service(),
        interval=config.poll_interval,
        alert=LandingAlert(config.alert_threshold),
        console=console,
    )
    if last is None:
        print(f"No data received for {config.flight_number}.", file=sys.stderr)


if __name__ == "__main__":
    main()
