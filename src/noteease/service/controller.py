# SPDX-License-Identifier: MIT

from typing import Optional

from loguru import logger

from noteease.configuration import DEFAULT_PREVIEW_LENGTH, DEFAULT_SIDEBAR_BREAKPOINT
from noteease.model.entity_id import NoteId
from noteease.model.note import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    Note,
    NoteSummary,
)
from noteease.model.view_state import EditBuffer, ViewMode, ViewState
from noteease.repository.note import NoteRepository, is_blank
from noteease.template.view_state import (
    get_edit_buffer_template,
    get_view_state_template,
)


def summarize_note(note: Note, preview_length: int = DEFAULT_PREVIEW_LENGTH) -> NoteSummary:
    note_id = note["id"]
    assert note_id is not None
    return {
        "id": note_id,
        "title": note["title"],
        "preview": note["content"][:preview_length],
        "last_edited": note["last_edited"],
    }


class ViewStateController:
    """
    Selection and editing state machine on top of a NoteRepository.

    The presentation layer calls the command methods (add, select, edit,
    set_title, set_content, save, cancel, delete, search, toggle_sidebar,
    resize) and reads the derived properties to decide what to render.
    Commands that do not apply in the current mode are ignored and return
    False.
    """

    def __init__(
        self,
        repository: NoteRepository,
        viewport_width: Optional[int] = None,
        sidebar_breakpoint: int = DEFAULT_SIDEBAR_BREAKPOINT,
        preview_length: int = DEFAULT_PREVIEW_LENGTH,
    ) -> None:
        self._repository = repository
        self._sidebar_breakpoint = sidebar_breakpoint
        self._preview_length = preview_length

        self._state: ViewState = get_view_state_template()
        self._edit_buffer: EditBuffer = get_edit_buffer_template()
        # Selection to return to when a create is cancelled
        self._return_id: Optional[NoteId] = None
        self._search_query = ""
        self._sidebar_visible = True
        if viewport_width is not None:
            self.resize(viewport_width)

        self.__reconcile()

    # Derived view data

    @property
    def state(self) -> ViewState:
        return {"mode": self._state["mode"], "selected_id": self._state["selected_id"]}

    @property
    def mode(self) -> ViewMode:
        return self._state["mode"]

    @property
    def selected_id(self) -> Optional[NoteId]:
        return self._state["selected_id"]

    @property
    def is_creating(self) -> bool:
        return self._state["mode"] == ViewMode.CREATING

    @property
    def is_editing(self) -> bool:
        return self._state["mode"] == ViewMode.EDITING

    @property
    def edit_buffer(self) -> EditBuffer:
        return {
            "title": self._edit_buffer["title"],
            "content": self._edit_buffer["content"],
        }

    @property
    def search_query(self) -> str:
        return self._search_query

    @property
    def sidebar_visible(self) -> bool:
        return self._sidebar_visible

    @property
    def current_note(self) -> Optional[Note]:
        selected_id = self._state["selected_id"]
        if selected_id is None:
            return None
        return self._repository.get_note(selected_id)

    @property
    def filtered_notes(self) -> list[Note]:
        return self._repository.filter(self._search_query)

    @property
    def sidebar_items(self) -> list[NoteSummary]:
        return [
            summarize_note(note, self._preview_length) for note in self.filtered_notes
        ]

    @property
    def persistence_warning(self) -> Optional[str]:
        error = self._repository.last_persist_error
        if error is None:
            return None
        return f"Notes could not be saved to disk: {error}"

    # Commands

    def add(self) -> None:
        match self._state["mode"]:
            case ViewMode.VIEWING | ViewMode.EDITING:
                self._return_id = self._state["selected_id"]
            case ViewMode.EMPTY:
                self._return_id = None
            case ViewMode.CREATING:
                pass

        self.__set_state(ViewMode.CREATING, None)
        self._edit_buffer = get_edit_buffer_template()

    def select(self, note_id: NoteId) -> bool:
        if self._repository.get_note(note_id) is None:
            logger.debug(f"Ignoring selection of missing note {note_id}")
            return False

        self.__set_state(ViewMode.VIEWING, note_id)
        self._edit_buffer = get_edit_buffer_template()
        self._return_id = None
        return True

    def edit(self) -> bool:
        if self._state["mode"] != ViewMode.VIEWING:
            return False

        note = self.current_note
        if note is None:
            self.__reconcile()
            return False

        self.__set_state(ViewMode.EDITING, note["id"])
        self._edit_buffer = {"title": note["title"], "content": note["content"]}
        return True

    def set_title(self, title: str) -> bool:
        if self._state["mode"] not in (ViewMode.CREATING, ViewMode.EDITING):
            return False
        self._edit_buffer["title"] = title[:MAX_TITLE_LENGTH]
        return True

    def set_content(self, content: str) -> bool:
        if self._state["mode"] not in (ViewMode.CREATING, ViewMode.EDITING):
            return False
        self._edit_buffer["content"] = content[:MAX_CONTENT_LENGTH]
        return True

    def save(self) -> bool:
        """
        Commit the edit buffer.

        Returns True when the form closed. A blank buffer is rejected and
        the form stays open.
        """
        title = self._edit_buffer["title"]
        content = self._edit_buffer["content"]

        match self._state["mode"]:
            case ViewMode.CREATING:
                note_id = self._repository.add(title, content)
                if note_id is None:
                    return False
                self.__set_state(ViewMode.VIEWING, note_id)
            case ViewMode.EDITING:
                if is_blank(title, content):
                    return False
                selected_id = self._state["selected_id"]
                assert selected_id is not None
                self._repository.update(selected_id, title, content)
                self.__set_state(ViewMode.VIEWING, selected_id)
            case _:
                return False

        self._edit_buffer = get_edit_buffer_template()
        self._return_id = None
        self.__reconcile()
        return True

    def cancel(self) -> bool:
        if not self.__close_form():
            return False
        self.__reconcile()
        return True

    def delete(self, note_id: NoteId) -> bool:
        removed = self._repository.remove(note_id)
        self.__close_form()
        self.__reconcile()
        return removed

    def search(self, query: str) -> None:
        self._search_query = query

    def toggle_sidebar(self) -> bool:
        self._sidebar_visible = not self._sidebar_visible
        return self._sidebar_visible

    def resize(self, viewport_width: int) -> bool:
        self._sidebar_visible = viewport_width > self._sidebar_breakpoint
        return self._sidebar_visible

    # Internals

    def __set_state(self, mode: ViewMode, selected_id: Optional[NoteId]) -> None:
        if mode != self._state["mode"] or selected_id != self._state["selected_id"]:
            logger.debug(f"View state: {mode.value} {selected_id or ''}".rstrip())
        self._state = {"mode": mode, "selected_id": selected_id}

    def __close_form(self) -> bool:
        match self._state["mode"]:
            case ViewMode.CREATING:
                if self._return_id is not None:
                    self.__set_state(ViewMode.VIEWING, self._return_id)
                else:
                    self.__set_state(ViewMode.EMPTY, None)
            case ViewMode.EDITING:
                self.__set_state(ViewMode.VIEWING, self._state["selected_id"])
            case _:
                return False

        self._edit_buffer = get_edit_buffer_template()
        self._return_id = None
        return True

    def __reconcile(self) -> None:
        """Re-validate the selection against the live collection."""
        mode = self._state["mode"]

        if self._repository.is_empty():
            if mode != ViewMode.CREATING:
                self.__set_state(ViewMode.EMPTY, None)
                self._edit_buffer = get_edit_buffer_template()
                self._return_id = None
            return

        if mode == ViewMode.CREATING:
            return

        selected_id = self._state["selected_id"]
        if selected_id is not None and self._repository.get_note(selected_id) is not None:
            return

        # Nothing selected or the selection was deleted
        most_recent = self._repository.most_recent()
        assert most_recent is not None
        self.__set_state(ViewMode.VIEWING, most_recent["id"])
        self._edit_buffer = get_edit_buffer_template()
