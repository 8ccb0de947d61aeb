# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Annotated, Optional

import pendulum
import typer

from gridcal.configuration import Configuration
from gridcal.model.event import Event, RecurrencePattern
from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.event import EVENT_REPO
from gridcal.service.occurrence import conflicts_with, events_on, sort_events_by_time
from gridcal.service.recurrence import MAX_INTERVAL
from gridcal.service.sample import generate_sample_events
from gridcal.service.validate import is_complete_event
from gridcal.template.event import get_event_template
from gridcal.terminal.completion import complete_category, complete_recurrence_pattern
from gridcal.terminal.custom_typer import AliasedTyperGroup
from gridcal.terminal.parse import parse_date, parse_time_of_day
from gridcal.terminal.validate import (
    validate_category,
    validate_event_or_raise,
    validate_recurrence_pattern,
)
from gridcal.time import date_to_display_str, date_to_str, today_local
from gridcal.view.event import conflicts_view, events_view, single_event_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
TIME_HELP = "valid inputs: (H)H:mm"


def _resolve_event(id_prefix: str) -> Event:
    matches = EVENT_REPO.find_events_by_id_prefix(id_prefix)
    if len(matches) == 0:
        raise typer.BadParameter(f"No event with id '{id_prefix}'")
    if len(matches) > 1:
        raise typer.BadParameter(
            f"Id '{id_prefix}' is ambiguous, it matches {len(matches)} events"
        )
    return matches[0]


def _find_conflicts(event: Event, config: Configuration) -> list[Event]:
    if not is_complete_event(event):
        return []
    return conflicts_with(
        event,
        EVENT_REPO.get_all_events(),
        expand_recurrences=config["expand_recurring_conflicts"],
        max_iterations=config["max_recurrence_iterations"],
    )


def _confirm_conflicts(event: Event, config: Configuration, force: bool) -> None:
    """Warn about conflicts and ask before saving; conflicts never block --force."""
    if not config["show_conflict_warning"]:
        return
    conflicts = _find_conflicts(event, config)
    if len(conflicts) == 0:
        return
    conflicts_view(conflicts)
    if not force and not typer.confirm("Do you want to save anyway?"):
        raise typer.Abort()


def _apply_recurrence(
    event: Event, repeat: Optional[str], interval: Optional[int]
) -> None:
    if repeat is not None:
        event["recurring"] = repeat != RecurrencePattern.NONE
        event["recurrence_pattern"] = repeat
    if interval is not None:
        # Expansion caps intervals at MAX_INTERVAL
        event["recurrence_interval"] = min(interval, MAX_INTERVAL)


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="event title")],
    start: Annotated[
        str, typer.Option("--start", "-s", parser=parse_time_of_day, help=TIME_HELP)
    ],
    end: Annotated[
        str, typer.Option("--end", "-e", parser=parse_time_of_day, help=TIME_HELP)
    ],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-D")] = None,
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            callback=validate_category,
            autocompletion=complete_category,
        ),
    ] = None,
    repeat: Annotated[
        Optional[str],
        typer.Option(
            "--repeat",
            "-r",
            callback=validate_recurrence_pattern,
            autocompletion=complete_recurrence_pattern,
            help="daily, weekly, monthly or none",
        ),
    ] = None,
    interval: Annotated[
        Optional[int],
        typer.Option("--interval", "-i", help="repeat every N days/weeks/months"),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="save without confirming conflicts")
    ] = False,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    event = get_event_template()
    event["title"] = title
    event["date"] = date_to_str(date if date is not None else today_local())
    event["start_time"] = start
    event["end_time"] = end
    event["description"] = description
    if category is not None:
        event["category"] = category
    _apply_recurrence(event, repeat, interval)

    validate_event_or_raise(event)
    _confirm_conflicts(event, config, force)

    id = EVENT_REPO.save_new_event(event)
    single_event_view(EVENT_REPO.get_event(id))


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-d", parser=parse_date, help=DATE_HELP),
    ] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_time_of_day, help=TIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_time_of_day, help=TIME_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-D")] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rD")
    ] = False,
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category",
            "-c",
            callback=validate_category,
            autocompletion=complete_category,
        ),
    ] = None,
    repeat: Annotated[
        Optional[str],
        typer.Option(
            "--repeat",
            "-r",
            callback=validate_recurrence_pattern,
            autocompletion=complete_recurrence_pattern,
            help="daily, weekly, monthly or none",
        ),
    ] = None,
    interval: Annotated[
        Optional[int],
        typer.Option("--interval", "-i", help="repeat every N days/weeks/months"),
    ] = None,
    force: Annotated[
        bool, typer.Option("--force", "-f", help="save without confirming conflicts")
    ] = False,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    event = _resolve_event(id)

    updated_event = deepcopy(event)
    if title is not None:
        updated_event["title"] = title
    if date is not None:
        updated_event["date"] = date_to_str(date)
    if start is not None:
        updated_event["start_time"] = start
    if end is not None:
        updated_event["end_time"] = end
    if description is not None:
        updated_event["description"] = description
    if remove_description:
        updated_event["description"] = None
    if category is not None:
        updated_event["category"] = category
    _apply_recurrence(updated_event, repeat, interval)

    validate_event_or_raise(updated_event)
    _confirm_conflicts(updated_event, config, force)

    EVENT_REPO.modify_event(
        updated_event["id"],
        title=title,
        date=updated_event["date"] if date is not None else None,
        start_time=start,
        end_time=end,
        description=description,
        category=category,
        recurring=updated_event["recurring"] if repeat is not None else None,
        recurrence_pattern=repeat,
        recurrence_interval=(
            updated_event["recurrence_interval"] if interval is not None else None
        ),
        remove_description=remove_description,
    )
    single_event_view(EVENT_REPO.get_event(updated_event["id"]))


@app.command("move, mv", no_args_is_help=True)
def move(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    date: Annotated[
        pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)
    ],
) -> None:
    """Reschedule an event to another day, keeping its times."""
    config = CONFIGURATION_REPO.get_config()
    event = _resolve_event(id)

    moved_event = deepcopy(event)
    moved_event["date"] = date_to_str(date)
    if config["show_conflict_warning"]:
        conflicts = _find_conflicts(moved_event, config)
        if len(conflicts) > 0:
            conflicts_view(conflicts)

    EVENT_REPO.move_event(moved_event["id"], moved_event["date"])
    single_event_view(EVENT_REPO.get_event(moved_event["id"]))


@app.command("delete, rm", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    event = _resolve_event(id)
    if not yes and not typer.confirm(f"Delete '{event['title']}'?"):
        raise typer.Abort()
    EVENT_REPO.delete_event(event["id"])


@app.command("show, s", no_args_is_help=True)
def show(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
) -> None:
    single_event_view(_resolve_event(id))


@app.command("list, ls")
def list_events(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date", "-d", parser=parse_date, help=f"only events on this day; {DATE_HELP}"
        ),
    ] = None,
) -> None:
    events = EVENT_REPO.get_all_events()
    if date is None:
        events_view(
            "events",
            sorted(
                sort_events_by_time(events), key=lambda event: event["date"] or ""
            ),
        )
        return

    config = CONFIGURATION_REPO.get_config()
    events_view(
        date_to_display_str(date),
        sort_events_by_time(
            events_on(events, date, config["max_recurrence_iterations"])
        ),
    )


@app.command("conflicts, c", no_args_is_help=True)
def conflicts(
    id: Annotated[str, typer.Argument(help="event id or unique id prefix")],
    expand: Annotated[
        Optional[bool],
        typer.Option(
            "--expand/--no-expand",
            help="compare recurring occurrences instead of stored dates",
        ),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    if expand is not None:
        config["expand_recurring_conflicts"] = expand

    event = _resolve_event(id)
    events_view("conflicts", _find_conflicts(event, config))


@app.command("sample")
def sample() -> None:
    """Add demo events (dev mode only)."""
    config = CONFIGURATION_REPO.get_config()
    if not config["dev_mode"]:
        raise typer.BadParameter("Sample events are only available in dev mode")

    added = EVENT_REPO.add_events(generate_sample_events(today_local()))
    typer.echo(f"Added {added} sample event(s)")
