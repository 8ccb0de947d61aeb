# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Any, Optional, cast

import pendulum

_TIME_OF_DAY_P = re.compile(r"^(\d{1,2}):(\d{2})$")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_value_optional(value: Any) -> Optional[pendulum.DateTime]:
    """Read a stored timestamp that YAML may already have turned into a datetime."""
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value)
    if isinstance(value, str):
        try:
            return datetime_from_str(value)
        except (ValueError, TypeError):
            return None
    return None


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_from_str_optional(value: Any) -> Optional[pendulum.Date]:
    """Convert a stored date value to a pendulum.Date.

    Accepts 'YYYY-MM-DD' strings as well as date and datetime objects; the time
    component of a datetime is dropped. Anything that is not a valid calendar
    date gives None.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    if not isinstance(value, str) or value.strip() == "":
        return None

    try:
        parsed = pendulum.parse(value.strip(), exact=True)
    except (ValueError, TypeError):
        return None

    if isinstance(parsed, datetime.datetime):
        return pendulum.date(parsed.year, parsed.month, parsed.day)
    if isinstance(parsed, datetime.date):
        return pendulum.date(parsed.year, parsed.month, parsed.day)
    return None


def time_of_day_from_str_optional(value: Any) -> Optional[pendulum.Time]:
    """Parse an '(H)H:mm' time of day, returning None when malformed."""
    if not isinstance(value, str):
        return None

    time_match = _TIME_OF_DAY_P.match(value.strip())
    if not time_match:
        return None

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    if hour < 0 or hour > 23 or minute < 0 or minute > 59:
        return None
    return pendulum.time(hour, minute)


def time_of_day_to_str_optional(value: Any) -> Optional[str]:
    """Zero pad a stored time of day as HH:mm.

    YAML reads an unquoted 10:00 as the base 60 integer 600, which is turned
    back into a time. Values that are not a time of day are kept as strings.
    """
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < 24 * 60:
        return f"{value // 60:02d}:{value % 60:02d}"

    time_of_day = time_of_day_from_str_optional(value)
    if time_of_day is None:
        return str(value)
    return f"{time_of_day.hour:02d}:{time_of_day.minute:02d}"


def datetime_from_date_and_time_optional(
    date_value: Any, time_value: Any
) -> Optional[pendulum.DateTime]:
    """Join a stored date and time of day into a naive local pendulum.DateTime."""
    date = date_from_str_optional(date_value)
    time_of_day = time_of_day_from_str_optional(time_value)
    if date is None or time_of_day is None:
        return None
    return pendulum.naive(
        date.year, date.month, date.day, time_of_day.hour, time_of_day.minute
    )


def is_same_day(first: Any, second: Any) -> bool:
    first_date = date_from_str_optional(first)
    second_date = date_from_str_optional(second)
    if first_date is None or second_date is None:
        return False
    return first_date == second_date
