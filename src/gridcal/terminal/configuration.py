# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from gridcal.repository.configuration import CONFIGURATION_REPO
from gridcal.terminal.custom_typer import AliasedTyperGroup
from gridcal.terminal.validate import validate_week_start
from gridcal.view.header import header

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, s")
def show() -> None:
    header("config")

    config_table = Table(box=box.SIMPLE)
    config_table.add_column("setting")
    config_table.add_column("value")
    for key, value in CONFIGURATION_REPO.get_config().items():
        config_table.add_row(key, str(value))

    console = Console()
    console.print(config_table)


@app.command("set", no_args_is_help=True)
def set_config(
    show_header: Annotated[
        Optional[bool], typer.Option("--show-header/--hide-header")
    ] = None,
    data_path: Annotated[Optional[str], typer.Option("--data-path")] = None,
    remove_data_path: Annotated[bool, typer.Option("--remove-data-path")] = False,
    storage_key: Annotated[Optional[str], typer.Option("--storage-key")] = None,
    week_start: Annotated[
        Optional[str],
        typer.Option("--week-start", callback=validate_week_start, help="sunday or monday"),
    ] = None,
    show_conflict_warning: Annotated[
        Optional[bool],
        typer.Option("--conflict-warning/--no-conflict-warning"),
    ] = None,
    expand_recurring_conflicts: Annotated[
        Optional[bool],
        typer.Option("--expand-recurring-conflicts/--literal-date-conflicts"),
    ] = None,
    max_recurrence_iterations: Annotated[
        Optional[int],
        typer.Option("--max-recurrence-iterations", min=1),
    ] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level")] = None,
    dev_mode: Annotated[Optional[bool], typer.Option("--dev-mode/--no-dev-mode")] = None,
) -> None:
    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        storage_key=storage_key,
        week_start=week_start,
        show_conflict_warning=show_conflict_warning,
        expand_recurring_conflicts=expand_recurring_conflicts,
        max_recurrence_iterations=max_recurrence_iterations,
        log_level=log_level,
        dev_mode=dev_mode,
    )
    show()
