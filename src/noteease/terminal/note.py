# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.text import Text

from noteease import state as app_state
from noteease.repository.configuration import CONFIGURATION_REPO
from noteease.repository.note import NoteRepository
from noteease.service.controller import summarize_note
from noteease.terminal.parse import open_editor_for_text, parse_note_id
from noteease.view.header import header
from noteease.view.note import notes_report, single_note_report


def warn_on_persist_failure(repository: NoteRepository) -> None:
    if repository.last_persist_error is not None:
        Console(stderr=True).print(
            Text(
                f"Warning: notes could not be saved to disk: {repository.last_persist_error}",
                style="yellow",
            )
        )


def add(
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="at most 128 characters"),
    ] = None,
    content: Annotated[
        Optional[str],
        typer.Option(
            "--content",
            "-c",
            help="at most 4096 characters; opens $EDITOR when neither option is given",
        ),
    ] = None,
) -> None:
    """Create a note."""
    if title is None and content is None:
        content = open_editor_for_text()

    repository = NoteRepository()
    note_id = repository.add(title or "", content or "")
    if note_id is None:
        typer.echo("Note not created: title and content are blank", err=True)
        raise typer.Exit(1)
    warn_on_persist_failure(repository)

    note = repository.get_note(note_id)
    assert note is not None
    header("note")
    single_note_report(note)


def list_notes(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="case-insensitive title/content filter"),
    ] = "",
) -> None:
    """List notes, most recent first."""
    config = CONFIGURATION_REPO.get_config()
    repository = NoteRepository()

    app_state.refresh_display_ids()

    summaries = [
        summarize_note(note, config["preview_length"])
        for note in repository.filter(search)
    ]
    header("notes")
    notes_report(summaries, search_query=search)


def search(
    query: Annotated[str, typer.Argument(help="Search query string")],
) -> None:
    """Show the notes whose title or content contains QUERY."""
    list_notes(search=query)


def show(
    note_id: Annotated[
        str,
        typer.Argument(parser=parse_note_id, help="display id or full note id"),
    ],
) -> None:
    """Show a single note."""
    repository = NoteRepository()
    note = repository.get_note(note_id)
    if note is None:
        typer.echo(f"No note with id {note_id}", err=True)
        raise typer.Exit(1)

    header("note")
    single_note_report(note)


def edit(
    note_id: Annotated[
        str,
        typer.Argument(parser=parse_note_id, help="display id or full note id"),
    ],
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="new title"),
    ] = None,
    content: Annotated[
        Optional[str],
        typer.Option(
            "--content",
            "-c",
            help="new content; opens $EDITOR when neither option is given",
        ),
    ] = None,
) -> None:
    """Change the title or content of a note."""
    repository = NoteRepository()
    note = repository.get_note(note_id)
    if note is None:
        typer.echo(f"No note with id {note_id}", err=True)
        raise typer.Exit(1)

    if title is None and content is None:
        content = open_editor_for_text(note["content"]) or ""

    updated = repository.update(
        note_id,
        title if title is not None else note["title"],
        content if content is not None else note["content"],
    )
    if not updated:
        typer.echo("Note not saved: title and content are blank", err=True)
        raise typer.Exit(1)
    warn_on_persist_failure(repository)

    updated_note = repository.get_note(note_id)
    assert updated_note is not None
    header("note")
    single_note_report(updated_note)


def delete(
    note_id: Annotated[
        str,
        typer.Argument(parser=parse_note_id, help="display id or full note id"),
    ],
) -> None:
    """Delete a note."""
    repository = NoteRepository()
    if not repository.remove(note_id):
        typer.echo(f"No note with id {note_id}; nothing deleted")
        return
    warn_on_persist_failure(repository)

    typer.echo(f"Deleted note {note_id}")
