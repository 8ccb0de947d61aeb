# SPDX-License-Identifier: MIT

import logging
from typing import Any, Iterable, Optional

import pendulum

from gridcal.model.event import Event
from gridcal.service.recurrence import (
    MAX_ITERATIONS,
    expand,
    occurrence_dates,
    recurrence_rule_from_event,
)
from gridcal.time import (
    date_from_str_optional,
    datetime_from_date_and_time_optional,
    is_same_day,
    time_of_day_to_str_optional,
)

logger = logging.getLogger(__name__)

Interval = tuple[pendulum.DateTime, pendulum.DateTime]


def occurs_on(
    event: Event, date: Any, max_iterations: int = MAX_ITERATIONS
) -> bool:
    """
    Check whether an event takes place on a calendar day.

    Single events match on their own date. Recurring events match when the
    day is part of their expansion. Events with an unparseable date never
    occur.
    """
    day = date_from_str_optional(date)
    if day is None:
        return False

    anchor = date_from_str_optional(event.get("date"))
    if anchor is None:
        logger.debug("event %s has an invalid date %r", event.get("id"), event.get("date"))
        return False

    rule = recurrence_rule_from_event(event)
    if rule is None:
        return is_same_day(anchor, day)

    if day < rule["anchor_date"]:
        return False

    recurring_dates = expand(
        rule["anchor_date"],
        rule["pattern"],
        rule["interval"],
        max_iterations=max_iterations,
    )
    return day in recurring_dates


def events_on(
    events: Iterable[Event], date: Any, max_iterations: int = MAX_ITERATIONS
) -> list[Event]:
    """Events occurring on a day, in their original order."""
    if date_from_str_optional(date) is None:
        return []
    return [event for event in events if occurs_on(event, date, max_iterations)]


def sort_events_by_time(events: Iterable[Event]) -> list[Event]:
    """Stable sort by start time; a missing start time sorts as 00:00."""
    return sorted(
        events,
        key=lambda event: time_of_day_to_str_optional(event.get("start_time")) or "00:00",
    )


def _interval_on(event: Event, date: Any) -> Optional[Interval]:
    start = datetime_from_date_and_time_optional(date, event.get("start_time"))
    end = datetime_from_date_and_time_optional(date, event.get("end_time"))
    if start is None or end is None:
        return None
    return start, end


def _overlaps(first: Interval, second: Interval) -> bool:
    # Half-open intervals: touching end and start do not overlap
    return first[0] < second[1] and first[1] > second[0]


def conflicts_with(
    candidate: Event,
    events: Iterable[Event],
    expand_recurrences: bool = False,
    max_iterations: int = MAX_ITERATIONS,
) -> list[Event]:
    """
    Find the events whose time range overlaps the candidate's.

    By default only events stored on the candidate's literal date are
    compared, and recurring events are not expanded. With expand_recurrences
    both sides are expanded and a pair conflicts when the two occurrence sets
    share a day and the times of day overlap.

    An event sharing the candidate's id is never reported, so an event being
    edited does not conflict with its stored self. Pairs with malformed
    dates or times are skipped.

    Args:
        candidate: The event being created or edited
        events: Existing events to check against
        expand_recurrences: Compare recurring occurrences instead of stored dates
        max_iterations: Ceiling passed on to recurrence expansion

    Returns:
        Conflicting events, in their original order
    """
    candidate_date = date_from_str_optional(candidate.get("date"))
    if candidate_date is None:
        return []
    candidate_interval = _interval_on(candidate, candidate_date)
    if candidate_interval is None:
        logger.debug(
            "candidate %s has malformed times %r-%r",
            candidate.get("id"),
            candidate.get("start_time"),
            candidate.get("end_time"),
        )
        return []

    candidate_id = candidate.get("id")
    candidate_dates: set[pendulum.Date] = set()
    if expand_recurrences:
        candidate_dates = set(
            occurrence_dates(candidate, max_iterations=max_iterations)
        )

    conflicts = []
    for event in events:
        if event.get("id") == candidate_id:
            continue

        if expand_recurrences:
            shared_dates = candidate_dates.intersection(
                occurrence_dates(event, max_iterations=max_iterations)
            )
            if not shared_dates:
                continue
            day = min(shared_dates)
            candidate_day_interval = _interval_on(candidate, day)
            event_interval = _interval_on(event, day)
            if candidate_day_interval is None or event_interval is None:
                continue
            if _overlaps(candidate_day_interval, event_interval):
                conflicts.append(event)
            continue

        if not is_same_day(event.get("date"), candidate_date):
            continue

        event_interval = _interval_on(event, candidate_date)
        if event_interval is None:
            logger.debug("skipping event %s with malformed times", event.get("id"))
            continue

        if _overlaps(candidate_interval, event_interval):
            conflicts.append(event)

    return conflicts
