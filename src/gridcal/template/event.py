# SPDX-License-Identifier: MIT

from gridcal.model.category import Category
from gridcal.model.event import Event, RecurrencePattern
from gridcal.time import now_local


def get_event_template() -> Event:
    now = now_local()
    return {
        "id": None,
        "title": None,
        "date": None,
        "start_time": None,
        "end_time": None,
        "description": None,
        "category": Category.OTHER,
        "recurring": False,
        "recurrence_pattern": RecurrencePattern.NONE,
        "recurrence_interval": 1,
        "created": now,
        "updated": now,
    }
