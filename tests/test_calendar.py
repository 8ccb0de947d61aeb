# SPDX-License-Identifier: MIT

import pendulum

from gridcal.service.calendar import (
    get_calendar_days,
    is_same_month,
    next_month,
    previous_month,
    weekday_names,
)


def test_grid_starting_sunday_covers_whole_weeks() -> None:
    days = get_calendar_days(pendulum.date(2024, 3, 15), "sunday")

    assert days[0] == pendulum.date(2024, 2, 25)
    assert days[-1] == pendulum.date(2024, 4, 6)
    assert len(days) == 42
    assert all((later - earlier).days == 1 for earlier, later in zip(days, days[1:]))


def test_grid_starting_monday() -> None:
    days = get_calendar_days(pendulum.date(2024, 3, 15), "monday")

    assert days[0] == pendulum.date(2024, 2, 26)
    assert days[-1] == pendulum.date(2024, 3, 31)
    assert len(days) == 35


def test_grid_when_month_starts_on_week_start() -> None:
    # September 2024 starts on a Sunday and ends on a Monday
    days = get_calendar_days(pendulum.date(2024, 9, 1), "sunday")

    assert days[0] == pendulum.date(2024, 9, 1)
    assert days[-1] == pendulum.date(2024, 10, 5)


def test_weekday_names() -> None:
    assert weekday_names("sunday")[0] == "Sun"
    assert weekday_names("monday") == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def test_month_navigation() -> None:
    assert next_month(pendulum.date(2024, 1, 31)) == pendulum.date(2024, 2, 29)
    assert previous_month(pendulum.date(2024, 3, 31)) == pendulum.date(2024, 2, 29)
    assert is_same_month(pendulum.date(2024, 3, 1), pendulum.date(2024, 3, 31))
    assert not is_same_month(pendulum.date(2024, 3, 1), pendulum.date(2023, 3, 1))
