# SPDX-License-Identifier: MIT

import shutil
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from noteease import state as app_state
from noteease.repository.configuration import CONFIGURATION_REPO
from noteease.repository.note import NoteRepository
from noteease.service.controller import ViewStateController
from noteease.terminal.parse import parse_note_id
from noteease.view.header import header
from noteease.view.note import session_report

SESSION_COMMANDS = [
    ("add, a", "start a new note"),
    ("select, sel ID", "view a note"),
    ("edit, e", "edit the note being viewed"),
    ("title TEXT", "set the draft title"),
    ("content TEXT", "set the draft content (\\n starts a new line)"),
    ("save", "commit the draft"),
    ("cancel", "discard the draft"),
    ("delete, d [ID]", "delete a note, the one being viewed by default"),
    ("search [TEXT]", "filter the list; no text clears the filter"),
    ("sidebar", "show or hide the note list"),
    ("resize WIDTH", "apply a viewport width"),
    ("help, h", "show this help"),
    ("quit, q", "leave the session"),
]


def session_help() -> None:
    help_table = Table(show_header=False, box=None)
    help_table.add_column("command", style="cyan")
    help_table.add_column("description")
    for command, description in SESSION_COMMANDS:
        help_table.add_row(command, description)
    Console().print(help_table)


def run_session_command(controller: ViewStateController, line: str) -> bool:
    """
    Apply one session command to the controller.

    Returns False when the session should end.
    """
    command, _, argument = line.strip().partition(" ")
    argument = argument.strip()

    match command.lower():
        case "":
            pass
        case "add" | "a":
            controller.add()
        case "select" | "sel":
            controller.select(parse_note_id(argument))
        case "edit" | "e":
            controller.edit()
        case "title":
            controller.set_title(argument)
        case "content":
            controller.set_content(argument.replace("\\n", "\n"))
        case "save":
            controller.save()
        case "cancel":
            controller.cancel()
        case "delete" | "d":
            if argument != "":
                controller.delete(parse_note_id(argument))
            elif controller.selected_id is not None:
                controller.delete(controller.selected_id)
        case "search":
            controller.search(argument)
        case "sidebar":
            controller.toggle_sidebar()
        case "resize":
            if not argument.isdigit():
                raise typer.BadParameter(f"Width must be a number, got {argument!r}")
            controller.resize(int(argument))
        case "help" | "h":
            session_help()
        case "quit" | "q" | "exit":
            return False
        case _:
            raise typer.BadParameter(f"Unknown command {command!r}; try 'help'")

    return True


def render_session(controller: ViewStateController) -> None:
    app_state.refresh_display_ids()
    header("session")
    session_report(controller)


def session(
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            help="viewport width used to decide whether the note list shows",
        ),
    ] = None,
) -> None:
    """Interactive session: browse, create, edit and delete notes."""
    config = CONFIGURATION_REPO.get_config()
    if width is None:
        width = shutil.get_terminal_size().columns

    controller = ViewStateController(
        NoteRepository(),
        viewport_width=width,
        sidebar_breakpoint=config["sidebar_breakpoint"],
        preview_length=config["preview_length"],
    )

    render_session(controller)
    while True:
        try:
            line = typer.prompt(
                "noteease", default="", show_default=False, prompt_suffix="> "
            )
        except typer.Abort:
            break

        try:
            if not run_session_command(controller, line):
                break
        except typer.BadParameter as e:
            typer.echo(f"Error: {e.message}", err=True)
            continue

        render_session(controller)
