# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from gridcal.terminal import configuration, event, view
from gridcal.terminal.custom_typer import OrderedAliasedTyperGroup
from gridcal.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="gridcal - a month grid calendar in the CLI",
    no_args_is_help=True,
)
app.add_typer(event.app, name="event, e")
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    gridcal - a month grid calendar in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
