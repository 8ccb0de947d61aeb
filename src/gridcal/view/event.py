# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gridcal.color import CONFLICT_STYLE, get_category_color
from gridcal.model.event import Event
from gridcal.view.header import header

CONFLICT_PREVIEW_LIMIT = 3


def format_recurrence(event: Event) -> str:
    if not event["recurring"]:
        return ""
    interval = event["recurrence_interval"]
    if interval == 1:
        return event["recurrence_pattern"]
    return f"{event['recurrence_pattern']} /{interval}"


def format_time_range(event: Event) -> str:
    return f"{event['start_time'] or ''}-{event['end_time'] or ''}"


def events_view(
    report_name: str,
    events: list[Event],
    columns: list[str] = ["id", "date", "time", "title", "category", "recurrence"],
    use_color: bool = True,
) -> None:
    header(report_name)

    events_table = Table(box=box.SIMPLE)
    for column in columns:
        events_table.add_column(column)

    for event in events:
        row = []
        for column in columns:
            column_value = ""
            if column == "time":
                column_value = format_time_range(event)
            elif column == "recurrence":
                column_value = format_recurrence(event)
            elif isinstance(event[column], bool):  # type: ignore[literal-required]
                column_value = str(event[column])  # type: ignore[literal-required]
            elif event[column] is not None:  # type: ignore[literal-required]
                column_value = escape(str(event[column]))  # type: ignore[literal-required]

            if use_color and column in ("title", "category"):
                color = get_category_color(event["category"])
                column_value = f"[{color}]{column_value}[/{color}]"

            row.append(column_value)
        events_table.add_row(*row)

    console = Console()
    console.print(events_table)


def single_event_view(event: Event) -> None:
    header("event")

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    color = get_category_color(event["category"])
    event_table.add_row("id", event["id"])
    event_table.add_row("title", escape(event["title"] or ""))
    event_table.add_row("date", event["date"])
    event_table.add_row("time", format_time_range(event))
    event_table.add_row("description", escape(event["description"] or ""))
    event_table.add_row("category", f"[{color}]{event['category']}[/{color}]")
    event_table.add_row("recurring", str(event["recurring"]))
    event_table.add_row("recurrence", format_recurrence(event))
    event_table.add_row("created", event["created"].format("YYYY-MM-DD HH:mm"))
    event_table.add_row("updated", event["updated"].format("YYYY-MM-DD HH:mm"))

    console = Console()
    console.print(event_table)


def conflicts_view(conflicts: list[Event]) -> None:
    """Warn about conflicting events, listing the first few."""
    console = Console()
    console.print(
        f"[{CONFLICT_STYLE}]This event conflicts with {len(conflicts)} existing event(s):[/{CONFLICT_STYLE}]"
    )
    for conflict in conflicts[:CONFLICT_PREVIEW_LIMIT]:
        console.print(
            f"  - {escape(conflict['title'] or '')} ({format_time_range(conflict)})"
        )
    if len(conflicts) > CONFLICT_PREVIEW_LIMIT:
        console.print(f"  ...and {len(conflicts) - CONFLICT_PREVIEW_LIMIT} more")
