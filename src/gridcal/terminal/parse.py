# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from gridcal.service.calendar import next_month, previous_month
from gridcal.time import date_from_str_optional, today_local


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        parsed = date_from_str_optional(date)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date '{date}'")
        return parsed

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_time_of_day(time_param: Optional[str]) -> Optional[str]:
    """
    Parse a time string in (H)H:mm format and return it zero padded as HH:mm.

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    if time_param is None:
        return None

    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_param.strip())
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_param}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    # Validate hour and minute ranges
    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return f"{hour:02d}:{minute:02d}"


def parse_month(month_param: Optional[str]) -> pendulum.Date:
    """
    Parse a month reference into the first day of that month.

    Accepts YYYY-MM, YYYY-MM-DD, this/t, next/n, prev/previous/p, or a month
    offset like 1, -2. None means the current month.
    """
    this_month = today_local().start_of("month")
    if month_param is None:
        return this_month

    month = month_param.strip()

    month_match = re.match(r"^(\d{4})-(\d{2})$", month)
    if month_match:
        year = int(month_match.group(1))
        month_number = int(month_match.group(2))
        if month_number < 1 or month_number > 12:
            raise typer.BadParameter(f"Month must be between 1 and 12, got {month_number}")
        return pendulum.date(year, month_number, 1)

    if re.match(r"^\d{4}-\d{2}-\d{2}$", month):
        parsed = date_from_str_optional(month)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date '{month}'")
        return parsed.start_of("month")

    if re.match(r"^-?\d+$", month):
        return this_month.add(months=int(month))

    if month == "this" or month == "t":
        return this_month
    if month == "next" or month == "n":
        return next_month(this_month)
    if month in ("prev", "previous", "p"):
        return previous_month(this_month)
    raise typer.BadParameter("Incorrect month format")
