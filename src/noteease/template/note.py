# SPDX-License-Identifier: MIT

from noteease.model.note import Note
from noteease.time import now_utc


def get_note_template() -> Note:
    return {
        "id": None,
        "title": "",
        "content": "",
        "last_edited": now_utc(),
    }
