# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from gridcal.model.entity_id import EntityId


class RecurrencePattern:
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


RECURRENCE_PATTERNS = [
    RecurrencePattern.NONE,
    RecurrencePattern.DAILY,
    RecurrencePattern.WEEKLY,
    RecurrencePattern.MONTHLY,
]


class Event(TypedDict):
    id: Optional[EntityId]
    title: Optional[str]
    date: Optional[str]
    start_time: Optional[str]
    end_time: Optional[str]
    description: Optional[str]
    category: str
    recurring: bool
    recurrence_pattern: str
    recurrence_interval: int
    created: pendulum.DateTime
    updated: pendulum.DateTime


class RecurrenceRule(TypedDict):
    anchor_date: pendulum.Date
    pattern: str
    interval: int
