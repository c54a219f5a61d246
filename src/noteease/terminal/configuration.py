# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from noteease import configuration
from noteease.repository.configuration import CONFIGURATION_REPO
from noteease.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "data_path", str(configuration.resolve_data_path(config["data_path"]))
    )
    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("clear_ids_on_view", __enabled(config["clear_ids_on_view"]))
    table.add_row("sidebar_breakpoint", str(config["sidebar_breakpoint"]))
    table.add_row("preview_length", str(config["preview_length"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_file", config["log_file"] or "None")

    console.print(table)


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding notes.yaml"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="use the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option("--clear-ids-on-view/--keep-ids-on-view"),
    ] = None,
    sidebar_breakpoint: Annotated[
        Optional[int],
        typer.Option(
            "--sidebar-breakpoint",
            min=0,
            help="terminal width above which the session shows the note list",
        ),
    ] = None,
    preview_length: Annotated[
        Optional[int],
        typer.Option("--preview-length", min=0),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help=f"one of {', '.join(configuration.LOG_LEVELS)}",
        ),
    ] = None,
    log_file: Annotated[
        Optional[str],
        typer.Option("--log-file"),
    ] = None,
    remove_log_file: Annotated[
        bool,
        typer.Option("--remove-log-file"),
    ] = False,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in configuration.LOG_LEVELS:
        raise typer.BadParameter(
            f"Unknown log level {log_level}; expected one of "
            f"{', '.join(configuration.LOG_LEVELS)}",
            param_hint="--log-level",
        )

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        clear_ids_on_view=clear_ids_on_view,
        sidebar_breakpoint=sidebar_breakpoint,
        preview_length=preview_length,
        log_level=log_level,
        log_file=log_file,
        remove_log_file=remove_log_file,
    )
    CONFIGURATION_REPO.flush()

    view()
