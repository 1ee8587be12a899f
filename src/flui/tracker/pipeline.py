"""Background polling and the foreground display loop.

A single Poller thread produces view models into a one-slot channel; the
display loop drains it without blocking, so a slow provider never stalls
redraws or the quit key. Only whole view models cross the channel.
"""

import logging
import queue
import select
import sys
import threading
import time
from typing import Callable, Generic, Optional, TypeVar

from rich.console import Console
from rich.live import Live

from flui.tracker.alert import LandingAlert
from flui.tracker.models import FlightStatusViewModel
from flui.tracker.render import render_flight_status, render_waiting
from flui.tracker.service import TrackerService

logger = logging.getLogger(__name__)

T = TypeVar("T")

DISPLAY_TICK = 0.25
QUIT_KEYS = {"q", "quit", "exit"}


class LatestValueChannel(Generic[T]):
    """Single-slot channel where a newer value replaces an unread one."""

    def __init__(self):
        self._slot: "queue.Queue[T]" = queue.Queue(maxsize=1)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, value: T) -> bool:
        """Publish value without blocking. Returns False once the receiver is gone."""
        if self.closed:
            return False
        while True:
            try:
                self._slot.put_nowait(value)
                return True
            except queue.Full:
                try:
                    self._slot.get_nowait()
                except queue.Empty:
                    pass

    def try_receive(self) -> Optional[T]:
        """Take the pending value, if any, without blocking."""
        if self.closed:
            return None
        try:
            return self._slot.get_nowait()
        except queue.Empty:
            return None

    def close(self) -> None:
        """Drop the receiving side; the pending value is discarded and later sends are refused."""
        self._closed.set()
        try:
            self._slot.get_nowait()
        except queue.Empty:
            pass

    def wait_closed(self, timeout: float) -> bool:
        return self._closed.wait(timeout)


class Poller(threading.Thread):
    """Polls the tracker service on a fixed interval until the channel closes."""

    def __init__(
        self,
        service: TrackerService,
        channel: LatestValueChannel[FlightStatusViewModel],
        interval: float,
    ):
        super().__init__(name="flui-poller", daemon=True)
        self.service = service
        self.channel = channel
        self.interval = interval

    def run(self) -> None:
        while not self.channel.closed:
            try:
                view_model = self.service.poll_once()
            except Exception:
                logger.exception("Poll cycle for %s failed", self.service.flight_number)
                view_model = None
            if view_model is not None and not self.channel.send(view_model):
                break
            if self.channel.wait_closed(self.interval):
                break
        logger.debug("Poller for %s stopped", self.service.flight_number)


def wait_for_quit(stream=None) -> Callable[[float], bool]:
    """
    Build an exit check that waits up to timeout seconds for a quit command
    (q + Enter) on stream. Non-interactive streams never request exit; the
    check then just sleeps.
    """
    stream = stream or sys.stdin

    def check(timeout: float) -> bool:
        try:
            interactive = stream.isatty()
            ready, _, _ = select.select([stream], [], [], timeout) if interactive else ([], [], [])
        except (OSError, ValueError):
            interactive = False
        if not interactive:
            time.sleep(timeout)
            return False
        if not ready:
            return False
        line = stream.readline()
        if not line:
            return True
        return line.strip().lower() in QUIT_KEYS

    return check


def run_display(
    service: TrackerService,
    interval: float,
    alert: Optional[LandingAlert] = None,
    console: Optional[Console] = None,
    should_exit: Optional[Callable[[float], bool]] = None,
    tick: float = DISPLAY_TICK,
) -> Optional[FlightStatusViewModel]:
    """
    Track a flight until the operator quits. Returns the last displayed view model.
    """
    console = console or Console()
    alert = alert or LandingAlert()
    should_exit = should_exit or wait_for_quit()

    channel: LatestValueChannel[FlightStatusViewModel] = LatestValueChannel()
    poller = Poller(service, channel, interval)
    poller.start()

    current: Optional[FlightStatusViewModel] = None
    try:
        with Live(
            render_waiting(service.flight_number),
            console=console,
            auto_refresh=False,
        ) as live:
            while True:
                latest = channel.try_receive()
                if latest is not None:
                    current = latest
                if current is None:
                    live.update(render_waiting(service.flight_number), refresh=True)
                else:
                    if alert.update(current):
                        logger.info("%s is approaching landing", current.flight_number)
                        console.bell()
                    live.update(render_flight_status(current, width=console.width), refresh=True)
                if should_exit(tick):
                    break
    except KeyboardInterrupt:
        pass
    finally:
        channel.close()
        poller.join(timeout=max(tick, 1.0))

    return current
