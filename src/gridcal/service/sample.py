# SPDX-License-Identifier: MIT

import pendulum

from gridcal.model.category import Category
from gridcal.model.event import Event, RecurrencePattern
from gridcal.template.event import get_event_template
from gridcal.time import date_to_str


def generate_sample_events(today: pendulum.Date) -> list[Event]:
    """Demo events: a weekly meeting, a daily lunch and tomorrow's appointment."""
    tomorrow = today.add(days=1)

    team_meeting = get_event_template()
    team_meeting["id"] = "sample-1"
    team_meeting["title"] = "Team Meeting"
    team_meeting["date"] = date_to_str(today)
    team_meeting["start_time"] = "09:00"
    team_meeting["end_time"] = "10:00"
    team_meeting["description"] = "Weekly team standup meeting"
    team_meeting["category"] = Category.WORK
    team_meeting["recurring"] = True
    team_meeting["recurrence_pattern"] = RecurrencePattern.WEEKLY

    lunch_break = get_event_template()
    lunch_break["id"] = "sample-2"
    lunch_break["title"] = "Lunch Break"
    lunch_break["date"] = date_to_str(today)
    lunch_break["start_time"] = "12:00"
    lunch_break["end_time"] = "13:00"
    lunch_break["description"] = "Daily lunch break"
    lunch_break["category"] = Category.PERSONAL
    lunch_break["recurring"] = True
    lunch_break["recurrence_pattern"] = RecurrencePattern.DAILY

    doctor_appointment = get_event_template()
    doctor_appointment["id"] = "sample-3"
    doctor_appointment["title"] = "Doctor Appointment"
    doctor_appointment["date"] = date_to_str(tomorrow)
    doctor_appointment["start_time"] = "14:30"
    doctor_appointment["end_time"] = "15:30"
    doctor_appointment["description"] = "Annual checkup"
    doctor_appointment["category"] = Category.HEALTH

    return [team_meeting, lunch_break, doctor_appointment]
