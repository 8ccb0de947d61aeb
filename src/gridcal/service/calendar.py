# SPDX-License-Identifier: MIT

import pendulum

WEEK_STARTS: list[str] = ["sunday", "monday"]

_WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _days_since_week_start(date: pendulum.Date, week_start: str) -> int:
    # isoweekday: Monday = 1, ..., Sunday = 7
    if week_start == "monday":
        return date.isoweekday() - 1
    return date.isoweekday() % 7


def weekday_names(week_start: str) -> list[str]:
    if week_start == "monday":
        return list(_WEEKDAY_NAMES)
    return _WEEKDAY_NAMES[-1:] + _WEEKDAY_NAMES[:-1]


def get_calendar_days(month: pendulum.Date, week_start: str = "sunday") -> list[pendulum.Date]:
    """
    Get every day shown on the month grid containing the given date.

    The grid runs from the start of the week holding the first of the month to
    the end of the week holding the last, so it always covers whole weeks.

    Args:
        month: Any date in the month to display
        week_start: 'sunday' or 'monday'

    Returns:
        List of dates, a multiple of seven long
    """
    month_start = month.start_of("month")
    month_end = month.end_of("month")

    grid_start = month_start.subtract(days=_days_since_week_start(month_start, week_start))
    grid_end = month_end.add(days=6 - _days_since_week_start(month_end, week_start))

    days = []
    current_date = grid_start
    while current_date <= grid_end:
        days.append(current_date)
        current_date = current_date.add(days=1)
    return days


def previous_month(date: pendulum.Date) -> pendulum.Date:
    return date.subtract(months=1)


def next_month(date: pendulum.Date) -> pendulum.Date:
    return date.add(months=1)


def is_same_month(date: pendulum.Date, month: pendulum.Date) -> bool:
    return date.year == month.year and date.month == month.month
