# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

NoteId: TypeAlias = str


def generate_note_id() -> NoteId:
    return str(uuid.uuid4())
