# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from noteease import state as app_state
from noteease.terminal import configuration
from noteease.terminal.custom_typer import OrderedAliasedTyperGroup
from noteease.terminal.note import add, delete, edit, list_notes, search, show
from noteease.terminal.session import session
from noteease.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="noteease - short notes in the terminal",
    no_args_is_help=True,
)
app.command(name="add, a")(add)
app.command(name="list, ls")(list_notes)
app.command(name="show, sh")(show)
app.command(name="edit, e")(edit)
app.command(name="delete, d")(delete)
app.command(name="search, s")(search)
app.command(name="session, se")(session)
app.add_typer(configuration.app, name="config, c", help="View or change settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Reset display ids when notes are listed",
        ),
    ] = None,
) -> None:
    """
    noteease - short notes in the terminal

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids is not None:
        app_state.set_clear_ids(clear_ids)


def run() -> None:
    app()
