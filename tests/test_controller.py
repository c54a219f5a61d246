from pathlib import Path

from noteease.model.view_state import ViewMode
from noteease.repository.note import NoteRepository
from noteease.service.controller import ViewStateController, summarize_note


def test_start_empty(repository: NoteRepository) -> None:
    controller = ViewStateController(repository)

    assert controller.mode == ViewMode.EMPTY
    assert controller.selected_id is None
    assert controller.current_note is None


def test_start_selects_most_recent(repository: NoteRepository) -> None:
    repository.add("Older", "")
    newer_id = repository.add("Newer", "")

    controller = ViewStateController(repository)

    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": newer_id}


def test_add_groceries_from_empty(repository: NoteRepository) -> None:
    controller = ViewStateController(repository)

    controller.add()
    assert controller.is_creating
    controller.set_title("Groceries")
    controller.set_content("Milk, eggs")
    assert repository.is_empty()

    assert controller.save()

    notes = repository.get_all_notes()
    assert [(note["title"], note["content"]) for note in notes] == [
        ("Groceries", "Milk, eggs")
    ]
    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": notes[0]["id"]}
    assert controller.edit_buffer == {"title": "", "content": ""}


def test_blank_save_keeps_form_open(repository: NoteRepository) -> None:
    note_id = repository.add("Groceries", "Milk")
    controller = ViewStateController(repository)

    controller.add()
    controller.set_title("   ")

    assert not controller.save()
    assert controller.mode == ViewMode.CREATING
    assert [note["id"] for note in repository.get_all_notes()] == [note_id]


def test_add_clears_selection_and_cancel_restores_it(
    repository: NoteRepository,
) -> None:
    older_id = repository.add("Older", "")
    repository.add("Newer", "")
    controller = ViewStateController(repository)
    controller.select(older_id)

    controller.add()
    assert controller.selected_id is None
    controller.set_title("draft")

    assert controller.cancel()
    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": older_id}
    assert controller.edit_buffer == {"title": "", "content": ""}


def test_cancel_create_from_empty(repository: NoteRepository) -> None:
    controller = ViewStateController(repository)

    controller.add()
    controller.set_content("draft")
    controller.cancel()

    assert controller.mode == ViewMode.EMPTY
    assert repository.is_empty()


def test_edit_copies_note_into_buffer(repository: NoteRepository) -> None:
    note_id = repository.add("Groceries", "Milk")
    controller = ViewStateController(repository)

    assert controller.edit()
    assert controller.state == {"mode": ViewMode.EDITING, "selected_id": note_id}

    controller.set_content("Milk, eggs")
    stored = repository.get_note(note_id)
    assert stored is not None
    assert stored["content"] == "Milk"

    assert controller.save()
    stored = repository.get_note(note_id)
    assert stored is not None
    assert stored["content"] == "Milk, eggs"
    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": note_id}


def test_edit_buffer_is_not_aliased(repository: NoteRepository) -> None:
    repository.add("Groceries", "Milk")
    controller = ViewStateController(repository)
    controller.edit()

    buffer = controller.edit_buffer
    buffer["title"] = "changed outside"

    assert controller.edit_buffer["title"] == "Groceries"


def test_edit_only_from_viewing(repository: NoteRepository) -> None:
    controller = ViewStateController(repository)
    assert not controller.edit()

    repository.add("Groceries", "")
    controller.add()
    assert not controller.edit()
    assert controller.is_creating


def test_blank_edit_save_stays_editing(repository: NoteRepository) -> None:
    note_id = repository.add("Groceries", "Milk")
    controller = ViewStateController(repository)
    controller.edit()
    controller.set_title("")
    controller.set_content("")

    assert not controller.save()
    assert controller.state == {"mode": ViewMode.EDITING, "selected_id": note_id}
    stored = repository.get_note(note_id)
    assert stored is not None
    assert stored["title"] == "Groceries"


def test_cancel_edit_returns_to_viewing(repository: NoteRepository) -> None:
    note_id = repository.add("Groceries", "Milk")
    controller = ViewStateController(repository)
    controller.edit()
    controller.set_title("Changed")

    assert controller.cancel()

    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": note_id}
    stored = repository.get_note(note_id)
    assert stored is not None
    assert stored["title"] == "Groceries"


def test_cancel_outside_form_is_ignored(repository: NoteRepository) -> None:
    repository.add("Groceries", "")
    controller = ViewStateController(repository)
    before = controller.state

    assert not controller.cancel()
    assert controller.state == before


def test_select_discards_unsaved_edit(repository: NoteRepository) -> None:
    older_id = repository.add("Older", "")
    newer_id = repository.add("Newer", "")
    controller = ViewStateController(repository)
    controller.edit()
    controller.set_title("unsaved")

    assert controller.select(older_id)

    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": older_id}
    assert controller.edit_buffer == {"title": "", "content": ""}
    stored = repository.get_note(newer_id)
    assert stored is not None
    assert stored["title"] == "Newer"


def test_select_missing_note_is_ignored(repository: NoteRepository) -> None:
    note_id = repository.add("Groceries", "")
    controller = ViewStateController(repository)

    assert not controller.select("gone")
    assert controller.selected_id == note_id


def test_delete_selected_selects_next_most_recent(
    repository: NoteRepository,
) -> None:
    a_id = repository.add("A", "older")
    b_id = repository.add("B", "newer")
    controller = ViewStateController(repository)
    assert controller.selected_id == b_id

    assert controller.delete(b_id)

    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": a_id}


def test_delete_last_note_empties(repository: NoteRepository) -> None:
    note_id = repository.add("Only", "")
    controller = ViewStateController(repository)

    assert controller.delete(note_id)

    assert controller.mode == ViewMode.EMPTY
    assert controller.selected_id is None
    assert repository.is_empty()


def test_delete_unselected_keeps_selection(repository: NoteRepository) -> None:
    a_id = repository.add("A", "")
    b_id = repository.add("B", "")
    controller = ViewStateController(repository)

    controller.delete(a_id)

    assert controller.selected_id == b_id


def test_delete_cancels_edit(repository: NoteRepository) -> None:
    a_id = repository.add("A", "")
    b_id = repository.add("B", "")
    controller = ViewStateController(repository)
    controller.edit()
    controller.set_title("unsaved")

    controller.delete(a_id)

    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": b_id}
    assert controller.edit_buffer == {"title": "", "content": ""}


def test_delete_cancels_create(repository: NoteRepository) -> None:
    a_id = repository.add("A", "")
    b_id = repository.add("B", "")
    controller = ViewStateController(repository)
    controller.add()

    controller.delete(b_id)

    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": a_id}


def test_delete_missing_note_is_noop(repository: NoteRepository) -> None:
    note_id = repository.add("A", "")
    controller = ViewStateController(repository)

    assert not controller.delete("gone")
    assert controller.selected_id == note_id


def test_save_on_stale_edit_falls_back(repository: NoteRepository) -> None:
    a_id = repository.add("A", "")
    b_id = repository.add("B", "")
    controller = ViewStateController(repository)
    controller.edit()
    controller.set_title("B edited")

    # Removed behind the controller's back
    repository.remove(b_id)

    assert controller.save()
    assert controller.state == {"mode": ViewMode.VIEWING, "selected_id": a_id}
    assert [note["title"] for note in repository.get_all_notes()] == ["A"]


def test_search_filters_sidebar(repository: NoteRepository) -> None:
    repository.add("Groceries", "Milk, eggs")
    repository.add("Ideas", "buy a MILK frother")
    repository.add("Todo", "call mom")
    controller = ViewStateController(repository)

    controller.search("milk")

    assert [item["title"] for item in controller.sidebar_items] == [
        "Ideas",
        "Groceries",
    ]

    controller.search("")
    assert len(controller.sidebar_items) == 3


def test_sidebar_visibility(repository: NoteRepository) -> None:
    narrow = ViewStateController(repository, viewport_width=40, sidebar_breakpoint=60)
    wide = ViewStateController(repository, viewport_width=120, sidebar_breakpoint=60)

    assert not narrow.sidebar_visible
    assert wide.sidebar_visible

    assert narrow.toggle_sidebar()
    assert not narrow.resize(30)


def test_summarize_note_preview(repository: NoteRepository) -> None:
    note_id = repository.add("Long", "x" * 100)
    note = repository.get_note(note_id)
    assert note is not None

    summary = summarize_note(note, 42)

    assert summary["id"] == note_id
    assert summary["preview"] == "x" * 42


def test_persistence_warning_surfaces(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    repository = NoteRepository(blocker / "notes.yaml")
    controller = ViewStateController(repository)

    controller.add()
    controller.set_title("Groceries")
    assert controller.save()

    assert controller.persistence_warning is not None
    assert controller.current_note is not None
    assert controller.current_note["title"] == "Groceries"
