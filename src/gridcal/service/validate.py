# SPDX-License-Identifier: MIT

from gridcal.model.event import RECURRENCE_PATTERNS, Event, RecurrencePattern
from gridcal.time import date_from_str_optional, time_of_day_from_str_optional

_REQUIRED_FIELDS = ["title", "date", "start_time", "end_time"]


def is_complete_event(event: Event) -> bool:
    """True when every required field is a non-empty string."""
    return all(
        isinstance(event.get(field), str) and event.get(field) != ""
        for field in _REQUIRED_FIELDS
    )


def validate_event(event: Event) -> dict[str, str]:
    """
    Check an event before it is saved.

    Returns:
        Mapping of field name to error message, empty when the event is valid
    """
    errors: dict[str, str] = {}

    title = event.get("title")
    if not isinstance(title, str) or title.strip() == "":
        errors["title"] = "Event title is required"

    if not event.get("date"):
        errors["date"] = "Date is required"
    elif date_from_str_optional(event["date"]) is None:
        errors["date"] = f"Invalid date '{event['date']}'"

    start_time = time_of_day_from_str_optional(event.get("start_time"))
    end_time = time_of_day_from_str_optional(event.get("end_time"))
    if not event.get("start_time"):
        errors["start_time"] = "Start time is required"
    elif start_time is None:
        errors["start_time"] = f"Invalid start time '{event['start_time']}'"
    if not event.get("end_time"):
        errors["end_time"] = "End time is required"
    elif end_time is None:
        errors["end_time"] = f"Invalid end time '{event['end_time']}'"
    elif start_time is not None and end_time <= start_time:
        errors["end_time"] = "End time must be after start time"

    pattern = event.get("recurrence_pattern")
    if pattern not in RECURRENCE_PATTERNS:
        errors["recurrence_pattern"] = f"Unknown recurrence pattern '{pattern}'"
    elif event.get("recurring"):
        if pattern == RecurrencePattern.NONE:
            errors["recurrence_pattern"] = "Recurring events need a recurrence pattern"
        interval = event.get("recurrence_interval")
        if not isinstance(interval, int) or interval < 1:
            errors["recurrence_interval"] = "Interval must be at least 1"

    return errors
