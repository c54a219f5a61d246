# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from noteease.model.entity_id import NoteId
from noteease.model.note import Note, NoteSummary
from noteease.model.view_state import EditBuffer, ViewMode
from noteease.repository.id_map import ID_MAP_REPO
from noteease.service.controller import ViewStateController
from noteease.time import datetime_to_display_local_datetime_str

EMPTY_LIST_MESSAGE = "No notes found."
EMPTY_NOTES_MESSAGE = "No notes to display. Get started by creating a new note!"


def notes_report(
    notes: list[NoteSummary],
    selected_id: Optional[NoteId] = None,
    search_query: str = "",
) -> None:
    """Print the note list, marking the selected note."""
    console = Console()

    if search_query != "":
        console.print(Text(f"search: {search_query}", style="italic"))

    if len(notes) == 0:
        console.print(Text(EMPTY_LIST_MESSAGE, style="dim"))
        return

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("id")
    notes_table.add_column("title")
    notes_table.add_column("preview", overflow="ellipsis")
    notes_table.add_column("last edited")

    for note in notes:
        style = "bold" if note["id"] == selected_id else None
        notes_table.add_row(
            str(ID_MAP_REPO.associate_id(note["id"])),
            Text(note["title"]),
            Text(note["preview"].replace("\n", " ")),
            datetime_to_display_local_datetime_str(note["last_edited"]),
            style=style,
        )

    console.print(notes_table)


def single_note_report(note: Note) -> None:
    """Print one note the way the main panel shows it."""
    console = Console()

    note_id = note["id"]
    assert note_id is not None
    display_id = ID_MAP_REPO.associate_id(note_id)

    body = (
        Text(note["content"])
        if note["content"] != ""
        else Text("(No content)", style="italic dim")
    )
    console.print(
        Panel(
            body,
            title=f"[bold]{escape(note['title'])}[/bold]",
            subtitle=f"Last edited: {datetime_to_display_local_datetime_str(note['last_edited'])}",
            border_style="blue",
        )
    )
    console.print(Text(f"id {display_id}  {note_id}", style="dim"))


def edit_form_report(edit_buffer: EditBuffer, creating: bool) -> None:
    console = Console()

    form_table = Table(box=box.SIMPLE, show_header=False)
    form_table.add_column("field", style="cyan")
    form_table.add_column("value")
    form_table.add_row("title", Text(edit_buffer["title"]))
    form_table.add_row("content", Text(edit_buffer["content"]))

    console.print(
        Panel(
            form_table,
            title="New note" if creating else "Edit note",
            subtitle="save | cancel",
            border_style="green",
        )
    )


def empty_report() -> None:
    console = Console()
    console.print(Panel(Text(EMPTY_NOTES_MESSAGE, style="dim"), border_style="dim"))


def main_panel_report(controller: ViewStateController) -> None:
    match controller.mode:
        case ViewMode.CREATING:
            edit_form_report(controller.edit_buffer, creating=True)
        case ViewMode.EDITING:
            edit_form_report(controller.edit_buffer, creating=False)
        case ViewMode.VIEWING:
            note = controller.current_note
            if note is None:
                empty_report()
            else:
                single_note_report(note)
        case ViewMode.EMPTY:
            empty_report()


def session_report(controller: ViewStateController) -> None:
    """Print the sidebar (when visible) and the main panel."""
    if controller.sidebar_visible:
        selected_id = None if controller.is_creating else controller.selected_id
        notes_report(controller.sidebar_items, selected_id, controller.search_query)
    main_panel_report(controller)

    warning = controller.persistence_warning
    if warning is not None:
        Console(stderr=True).print(Text(warning, style="yellow"))
