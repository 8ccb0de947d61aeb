# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, TypedDict

import pendulum

from gridcal.model.event import Event, RecurrencePattern, RecurrenceRule
from gridcal.time import date_from_str_optional

logger = logging.getLogger(__name__)

# Safety valve against pathological (interval, horizon) pairs. The default
# one year horizon needs at most 366 steps.
MAX_ITERATIONS = 1000

MIN_INTERVAL = 1
MAX_INTERVAL = 365

_PATTERN_STEP_UNITS = {
    RecurrencePattern.DAILY: "days",
    RecurrencePattern.WEEKLY: "weeks",
    RecurrencePattern.MONTHLY: "months",
}


class Expansion(TypedDict):
    dates: list[pendulum.Date]
    warnings: list[str]


def clamp_interval(interval: Any) -> int:
    """Force a recurrence interval into [MIN_INTERVAL, MAX_INTERVAL].

    Missing or non-numeric intervals count as MIN_INTERVAL.
    """
    if isinstance(interval, bool):
        return MIN_INTERVAL
    try:
        value = int(interval)
    except (TypeError, ValueError):
        return MIN_INTERVAL
    return max(MIN_INTERVAL, min(value, MAX_INTERVAL))


def default_horizon(anchor_date: pendulum.Date) -> pendulum.Date:
    return anchor_date.add(years=1)


def expand_with_diagnostics(
    anchor_date: Any,
    pattern: Optional[str],
    interval: Any = 1,
    horizon: Any = None,
    max_iterations: int = MAX_ITERATIONS,
) -> Expansion:
    """
    Expand a recurrence rule into the dates it occupies, collecting warnings.

    The anchor is always the first date. The cursor advances by one step of the
    pattern at a time and every step landing on or before the horizon is kept.
    Malformed input never raises:

    - an invalid anchor date gives no dates at all
    - an unknown pattern gives only the anchor
    - an out of range interval is clamped into [1, 365]
    - an invalid horizon is replaced by the default of anchor + 1 year
    - hitting max_iterations stops expansion with what was computed so far

    Args:
        anchor_date: First occurrence, as a date or a 'YYYY-MM-DD' string
        pattern: One of 'daily', 'weekly', 'monthly'
        interval: Number of pattern units between occurrences
        horizon: Last date that may be included (defaults to anchor + 1 year)
        max_iterations: Upper bound on cursor advances

    Returns:
        Expansion with the ascending, de-duplicated dates and any warnings
    """
    warnings: list[str] = []

    anchor = date_from_str_optional(anchor_date)
    if anchor is None:
        warnings.append(f"invalid anchor date {anchor_date!r}")
        return {"dates": [], "warnings": warnings}

    safe_interval = clamp_interval(interval)
    if safe_interval != interval:
        warnings.append(f"interval {interval!r} clamped to {safe_interval}")

    max_date: Optional[pendulum.Date] = None
    if horizon is not None:
        max_date = date_from_str_optional(horizon)
        if max_date is None:
            warnings.append(f"invalid horizon {horizon!r}, using default")
    if max_date is None:
        max_date = default_horizon(anchor)

    dates = [anchor]

    step_unit = _PATTERN_STEP_UNITS.get(pattern) if isinstance(pattern, str) else None
    if step_unit is None:
        if pattern != RecurrencePattern.NONE:
            warnings.append(f"unknown recurrence pattern {pattern!r}")
        return {"dates": dates, "warnings": warnings}

    cursor = anchor
    iterations = 0
    while cursor < max_date and iterations < max_iterations:
        iterations += 1
        cursor = cursor.add(**{step_unit: safe_interval})
        if cursor <= max_date:
            dates.append(cursor)

    if cursor < max_date:
        warnings.append(
            f"stopped after {iterations} iterations before reaching {max_date.to_date_string()}"
        )

    return {"dates": dates, "warnings": warnings}


def expand(
    anchor_date: Any,
    pattern: Optional[str],
    interval: Any = 1,
    horizon: Any = None,
    max_iterations: int = MAX_ITERATIONS,
) -> list[pendulum.Date]:
    """Dates on which a recurrence rule occurs, anchor first, up to the horizon."""
    expansion = expand_with_diagnostics(
        anchor_date, pattern, interval, horizon, max_iterations
    )
    for warning in expansion["warnings"]:
        logger.debug("recurrence expansion: %s", warning)
    return expansion["dates"]


def is_recurring(event: Event) -> bool:
    return bool(event.get("recurring")) and event.get(
        "recurrence_pattern"
    ) not in (None, RecurrencePattern.NONE)


def recurrence_rule_from_event(event: Event) -> Optional[RecurrenceRule]:
    """Derive the recurrence rule of a recurring event, None otherwise."""
    if not is_recurring(event):
        return None
    anchor = date_from_str_optional(event.get("date"))
    if anchor is None:
        return None
    return {
        "anchor_date": anchor,
        "pattern": event["recurrence_pattern"],
        "interval": clamp_interval(event.get("recurrence_interval") or 1),
    }


def occurrence_dates(
    event: Event,
    horizon: Any = None,
    max_iterations: int = MAX_ITERATIONS,
) -> list[pendulum.Date]:
    """All dates an event occupies: its expansion if recurring, else its date."""
    rule = recurrence_rule_from_event(event)
    if rule is None:
        anchor = date_from_str_optional(event.get("date"))
        return [] if anchor is None else [anchor]

    return expand(
        rule["anchor_date"],
        rule["pattern"],
        rule["interval"],
        horizon,
        max_iterations,
    )
