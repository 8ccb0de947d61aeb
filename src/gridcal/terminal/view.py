# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.repository.event import EVENT_REPO
from gridcal.terminal.custom_typer import AliasedTyperGroup
from gridcal.terminal.parse import parse_date, parse_month
from gridcal.time import today_local
from gridcal.view.calendar import calendar_day_view, calendar_month_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("month, m")
def month(
    month: Annotated[
        Optional[str],
        typer.Argument(
            help="valid inputs: YYYY-MM, YYYY-MM-DD, this, next, prev, or month offset like 1, -1"
        ),
    ] = None,
    cell_width: Annotated[int, typer.Option("--cell-width", "-w")] = 16,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    calendar_month_view(
        EVENT_REPO.get_all_events(),
        parse_month(month),
        week_start=config["week_start"],
        max_iterations=config["max_recurrence_iterations"],
        cell_width=cell_width,
    )


@app.command("day, d")
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    calendar_day_view(
        EVENT_REPO.get_all_events(),
        date if date is not None else today_local(),
        max_iterations=config["max_recurrence_iterations"],
    )
