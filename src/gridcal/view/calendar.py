# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from gridcal.color import (
    OUTSIDE_MONTH_STYLE,
    TODAY_STYLE,
    get_category_style,
)
from gridcal.model.event import Event
from gridcal.service.calendar import get_calendar_days, is_same_month, weekday_names
from gridcal.service.occurrence import events_on, sort_events_by_time
from gridcal.service.recurrence import MAX_ITERATIONS
from gridcal.time import date_to_display_str, today_local
from gridcal.view.event import events_view
from gridcal.view.header import header


def calendar_month_view(
    events: list[Event],
    month: pendulum.Date,
    week_start: str = "sunday",
    max_iterations: int = MAX_ITERATIONS,
    cell_width: int = 16,
    max_events_per_day: int = 4,
) -> None:
    """
    Display a monthly calendar grid with the events of each day.

    Args:
        events: All stored events
        month: Any date in the month to display
        week_start: 'sunday' or 'monday'
        max_iterations: Recurrence expansion ceiling
        cell_width: Width of each day cell in characters
        max_events_per_day: Events listed per cell before collapsing to "+N more"
    """
    header("month")

    console = Console()
    console.print(f"\n[bold]{month.format('MMMM YYYY')}[/bold]\n")
    console.print(
        _render_month_grid(
            events, month, week_start, max_iterations, cell_width, max_events_per_day
        )
    )
    console.print()


def _render_month_grid(
    events: list[Event],
    month: pendulum.Date,
    week_start: str,
    max_iterations: int,
    cell_width: int,
    max_events_per_day: int,
) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in weekday_names(week_start):
        table.add_column(day_name, style="bold", width=cell_width)

    today = today_local()
    week_cells: list[Text] = []

    for day in get_calendar_days(month, week_start):
        cell_content = Text()

        if day == today:
            cell_content.append(f"{day.day:2d}", style=TODAY_STYLE)
            cell_content.append("\n")
        elif not is_same_month(day, month):
            cell_content.append(f"{day.day:2d}\n", style=OUTSIDE_MONTH_STYLE)
        else:
            cell_content.append(f"{day.day:2d}\n", style="bold")

        day_events = sort_events_by_time(events_on(events, day, max_iterations))
        for event in day_events[:max_events_per_day]:
            label = f"{event['start_time'] or ''} {event['title'] or ''}".strip()
            cell_content.append(
                label[:cell_width], style=get_category_style(event["category"])
            )
            cell_content.append("\n")
        if len(day_events) > max_events_per_day:
            cell_content.append(
                f"+{len(day_events) - max_events_per_day} more\n",
                style=OUTSIDE_MONTH_STYLE,
            )

        week_cells.append(cell_content)
        if len(week_cells) == 7:
            table.add_row(*week_cells)
            week_cells = []

    return table


def calendar_day_view(
    events: list[Event],
    date: pendulum.Date,
    max_iterations: int = MAX_ITERATIONS,
) -> None:
    """List the events taking place on one day, ordered by start time."""
    day_events = sort_events_by_time(events_on(events, date, max_iterations))
    events_view(
        date_to_display_str(date),
        day_events,
        columns=["id", "time", "title", "category", "recurrence", "description"],
    )
