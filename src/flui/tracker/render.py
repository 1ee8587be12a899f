"""Terminal rendering of a flight status view model with rich."""

import math
from datetime import datetime
from typing import List, Optional

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from flui.tracker.models import FlightStatusViewModel
from flui.tracker.status import FlightStatus

STATUS_COLORS = {
    FlightStatus.ON_TIME: "green",
    FlightStatus.DELAYED: "yellow",
    FlightStatus.CANCELLED: "red",
    FlightStatus.EN_ROUTE: "blue",
}

ORIGIN = "origin"
TRAVELED = "traveled"
PLANE = "plane"
REMAINING = "remaining"
DESTINATION = "destination"

_CELL_GLYPHS = {
    ORIGIN: ("●", "white"),
    TRAVELED: ("─", "yellow"),
    PLANE: ("✈", "cyan"),
    REMAINING: ("─", "bright_black"),
    DESTINATION: ("●", "white"),
}

UNKNOWN_AIRPORT = "???"
NOT_AVAILABLE = "N/A"
MIN_PATH_WIDTH = 10
# Panel border plus one cell of padding on each side
PANEL_INSET = 4


def flight_path_cells(width: int, progress: float) -> List[str]:
    """
    Lay out a flight path of width cells for a progress percentage.

    The first and last cells are the airport markers; the plane sits at
    round(path_width * progress / 100) within the path, never past its last cell.
    Widths too small for both markers give no cells.
    """
    if width < 2:
        return []
    progress = min(max(progress, 0.0), 100.0)
    path_width = max(width - 2, 0)
    # Round half up; progress is non-negative so this matches rounding away from zero
    position = int(math.floor(path_width * progress / 100 + 0.5))
    if path_width > 0:
        position = min(max(position, 0), path_width - 1)

    cells = [ORIGIN]
    for i in range(path_width):
        if i < position:
            cells.append(TRAVELED)
        elif i == position:
            cells.append(PLANE)
        else:
            cells.append(REMAINING)
    cells.append(DESTINATION)
    return cells


def render_flight_path(width: int, progress: float) -> Text:
    """Styled flight path line; empty when there is no room to draw it."""
    text = Text()
    if width < MIN_PATH_WIDTH:
        return text
    for cell in flight_path_cells(width, progress):
        glyph, style = _CELL_GLYPHS[cell]
        text.append(glyph, style=style)
    return text


def progress_info(view_model: FlightStatusViewModel, now: Optional[datetime] = None) -> str:
    remaining = view_model.time_remaining(now=now) or NOT_AVAILABLE
    return f"{view_model.progress_percentage():.0f}% • {remaining}"


def airports_line(view_model: FlightStatusViewModel, width: int) -> str:
    origin = view_model.origin_airport or UNKNOWN_AIRPORT
    destination = view_model.destination_airport or UNKNOWN_AIRPORT
    half = width // 2
    return f"{origin:<{half}}{destination:>{half}}"


def render_flight_progress(
    view_model: FlightStatusViewModel, width: int, now: Optional[datetime] = None
) -> Panel:
    inner = max(width - PANEL_INSET, 0)
    info = progress_info(view_model, now=now)
    padding = max(inner - len(info), 0) // 2
    lines = Group(
        Text(airports_line(view_model, inner), style="white"),
        Text(" " * padding + info, style="bold cyan"),
        render_flight_path(inner, view_model.progress_percentage()),
    )
    return Panel(lines, title="Flight Progress", title_align="left")


def render_flight_status(
    view_model: FlightStatusViewModel, width: int = 80, now: Optional[datetime] = None
) -> Group:
    """Full status screen: flight number, status, arrival time and progress."""
    color = STATUS_COLORS.get(view_model.status, "white")
    arrival = view_model.formatted_arrival_time() or NOT_AVAILABLE
    return Group(
        Panel(
            Text(f"Flight: {view_model.flight_number}", style="bold cyan"),
            title="Flight Information",
            title_align="left",
        ),
        Panel(Text(f"Status: {view_model.status}", style=f"bold {color}")),
        Panel(Text(f"Estimated Arrival: {arrival}", style="white")),
        render_flight_progress(view_model, width, now=now),
    )


def render_waiting(flight_number: str) -> Panel:
    """Placeholder shown until the first successful poll."""
    return Panel(
        Text(f"Waiting for data on {flight_number}...", style="dim"),
        title="Flight Information",
        title_align="left",
    )
