# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from gridcal.model.category import CATEGORIES
from gridcal.model.event import RECURRENCE_PATTERNS, Event
from gridcal.service.calendar import WEEK_STARTS
from gridcal.service.validate import validate_event


def validate_category(category: Optional[str]) -> Optional[str]:
    if category is None:
        return None
    if category not in CATEGORIES:
        raise typer.BadParameter(
            f"Category must be one of: {', '.join(CATEGORIES)}"
        )
    return category


def validate_recurrence_pattern(pattern: Optional[str]) -> Optional[str]:
    if pattern is None:
        return None
    if pattern not in RECURRENCE_PATTERNS:
        raise typer.BadParameter(
            f"Recurrence must be one of: {', '.join(RECURRENCE_PATTERNS)}"
        )
    return pattern


def validate_week_start(week_start: Optional[str]) -> Optional[str]:
    if week_start is None:
        return None
    if week_start not in WEEK_STARTS:
        raise typer.BadParameter(f"Week start must be one of: {', '.join(WEEK_STARTS)}")
    return week_start


def validate_event_or_raise(event: Event) -> Event:
    """
    Raises:
        typer.BadParameter: If the event has any field errors
    """
    errors = validate_event(event)
    if errors:
        raise typer.BadParameter("; ".join(errors.values()))
    return event
