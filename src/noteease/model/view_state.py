# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional, TypedDict

from noteease.model.entity_id import NoteId


class ViewMode(Enum):
    EMPTY = "empty"
    VIEWING = "viewing"
    CREATING = "creating"
    EDITING = "editing"


class ViewState(TypedDict):
    """
    Selection and editing mode of the main panel.

    selected_id is set only in VIEWING and EDITING. It is a reference by id
    and must be looked up against the live collection before use.
    """

    mode: ViewMode
    selected_id: Optional[NoteId]


class EditBuffer(TypedDict):
    title: str
    content: str
