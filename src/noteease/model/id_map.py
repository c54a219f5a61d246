# SPDX-License-Identifier: MIT

from typing import TypedDict

from noteease.model.entity_id import NoteId


class IdMap(TypedDict):
    """
    Short display ids for notes.

    Example:

    Note with an id of "3f2b...".
    Display id for that note is 7.

    id_map["synthetic_to_real"][7] # returns "3f2b..."
    """

    synthetic_to_real: dict[int, NoteId]
    real_to_synthetic: dict[NoteId, int]
