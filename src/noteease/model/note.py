# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from noteease.model.entity_id import NoteId

MAX_TITLE_LENGTH = 128
MAX_CONTENT_LENGTH = 4096
UNTITLED_PLACEHOLDER = "(Untitled)"


class Note(TypedDict):
    id: Optional[NoteId]
    title: str
    content: str
    last_edited: pendulum.DateTime


class NoteSummary(TypedDict):
    """Sidebar row for a note."""

    id: NoteId
    title: str
    preview: str
    last_edited: pendulum.DateTime
