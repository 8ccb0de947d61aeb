# SPDX-License-Identifier: MIT

from typing import Any, Callable

import pytest

from gridcal.model.event import Event, RecurrencePattern
from gridcal.template.event import get_event_template


@pytest.fixture
def make_event() -> Callable[..., Event]:
    counter = iter(range(1, 10_000))

    def _make_event(**fields: Any) -> Event:
        event = get_event_template()
        event["id"] = f"event-{next(counter)}"
        event["title"] = "Event"
        event["date"] = "2024-03-05"
        event["start_time"] = "09:00"
        event["end_time"] = "10:00"
        event.update(fields)  # type: ignore[typeddict-item]
        if event["recurrence_pattern"] != RecurrencePattern.NONE and "recurring" not in fields:
            event["recurring"] = True
        return event

    return _make_event
