# SPDX-License-Identifier: MIT

import os
import re
import subprocess
import tempfile
from typing import Optional

import typer

from noteease.model.entity_id import NoteId
from noteease.repository.id_map import ID_MAP_REPO


def parse_note_id(note_id_param: str) -> NoteId:
    """
    Resolve a note id typed on the command line.

    Small integers are display ids from the last list; anything else is
    taken as a full note id.
    """
    note_id = note_id_param.strip()
    if re.match(r"^\d+$", note_id):
        real_id = ID_MAP_REPO.get_real_id(int(note_id))
        if real_id is None:
            raise typer.BadParameter(
                f"Unknown note id {note_id}; run 'noteease list' to refresh ids"
            )
        return real_id
    return note_id


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Open the user's preferred editor to write note content.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".txt") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        tf.seek(0)
        text = tf.read()
        if not text.strip():
            return None
        return text.rstrip("\n")
