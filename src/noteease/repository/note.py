# SPDX-License-Identifier: MIT

import os
import shutil
import tempfile
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

import yaml.representer
from loguru import logger
from yaml import YAMLError, dump, load

try:
    from yaml import CSafeDumper as SafeDumper
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeDumper, SafeLoader  # type: ignore[assignment]

from noteease import configuration, time
from noteease.model.entity_id import NoteId, generate_note_id
from noteease.model.note import (
    MAX_CONTENT_LENGTH,
    MAX_TITLE_LENGTH,
    UNTITLED_PLACEHOLDER,
    Note,
)
from noteease.service.search import filter_notes
from noteease.template.note import get_note_template


class LiteralString(str):
    """String subclass to trigger literal block scalar style in YAML."""

    pass


def literal_string_representer(dumper: Any, data: str) -> Any:
    """YAML representer for literal block scalar (|) style."""
    text = str(data)
    if "\n" in text:
        return dumper.represent_scalar("tag:yaml.org,2002:str", text, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", text)


yaml.representer.SafeRepresenter.add_representer(
    LiteralString, literal_string_representer
)

try:
    from yaml.cyaml import CSafeDumper as CYAMLSafeDumper

    CYAMLSafeDumper.add_representer(LiteralString, literal_string_representer)
except ImportError:
    pass


def normalize_title(title: str) -> str:
    return title.strip()[:MAX_TITLE_LENGTH]


def normalize_content(content: str) -> str:
    return content.strip()[:MAX_CONTENT_LENGTH]


def is_blank(title: str, content: str) -> bool:
    return not title.strip() and not content.strip()


class NoteRepository:
    """
    Owns the note collection and keeps the notes file in step with it.

    The collection is ordered most recent first. Every mutation is written
    to disk immediately; reads hand out copies so no caller can alias a
    stored note.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._notes: Optional[list[Note]] = None
        self.last_persist_error: Optional[Exception] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.DATA_NOTES_PATH

    @property
    def notes(self) -> list[Note]:
        if self._notes is None:
            self._notes = self.load()
        return self._notes

    def load(self) -> list[Note]:
        """
        Read the persisted collection.

        A missing file is an empty collection. An unreadable or malformed
        file is also treated as empty; it is moved aside first so the next
        persist does not overwrite it. Malformed records are skipped, and a
        copy of the file is kept beside it since the next persist drops them.
        """
        if not self.path.is_file():
            return []

        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Notes file {self.path} is not valid UTF-8: {e}")
            self.__preserve_unreadable_file()
            return []
        except OSError as e:
            logger.warning(f"Unable to read notes file {self.path}: {e}")
            return []

        try:
            raw_notes = load(text, Loader=SafeLoader)
        except YAMLError as e:
            logger.warning(f"Notes file {self.path} is not valid YAML: {e}")
            self.__preserve_unreadable_file()
            return []

        if raw_notes is None:
            return []
        if not isinstance(raw_notes, list):
            logger.warning(
                f"Notes file {self.path} does not hold a list of notes, ignoring it"
            )
            self.__preserve_unreadable_file()
            return []

        notes: list[Note] = []
        seen_ids: set[NoteId] = set()
        skipped = 0
        for index, raw_note in enumerate(raw_notes):
            note = self.__convert_note_for_deserialization(raw_note)
            if note is None:
                logger.warning(f"Skipping malformed note record at position {index}")
                skipped += 1
                continue
            note_id = note["id"]
            assert note_id is not None
            if note_id in seen_ids:
                logger.warning(f"Skipping duplicate note id {note_id}")
                skipped += 1
                continue
            seen_ids.add(note_id)
            notes.append(note)

        if skipped > 0:
            # The next persist drops the skipped records
            self.__preserve_unreadable_file(keep_original=True)

        logger.debug(f"Loaded {len(notes)} notes from {self.path}")
        return notes

    def persist(self, notes: Optional[list[Note]] = None) -> bool:
        """
        Write the full collection to the notes file atomically.

        Returns False when the write failed. The in-memory collection is left
        untouched either way and remains the source of truth.
        """
        if notes is None:
            notes = self.notes

        try:
            serializable_notes = [
                self.__convert_note_for_serialization(note) for note in notes
            ]
            text = dump(
                serializable_notes,
                Dumper=SafeDumper,
                allow_unicode=True,
                sort_keys=False,
            )
            self.__write_atomic(text)
        except (OSError, TypeError, ValueError, YAMLError) as e:
            logger.warning(f"Unable to persist notes to {self.path}: {e}")
            self.last_persist_error = e
            return False

        self.last_persist_error = None
        return True

    def add(self, title: str, content: str) -> Optional[NoteId]:
        """
        Create a note at the front of the collection.

        Returns the new id, or None when title and content are both blank.
        """
        title = normalize_title(title)
        content = normalize_content(content)
        if not title and not content:
            logger.debug("Rejected blank note")
            return None

        note = get_note_template()
        note["id"] = self.__generate_unique_id()
        note["title"] = title or UNTITLED_PLACEHOLDER
        note["content"] = content

        self.notes.insert(0, note)
        self.persist()

        logger.info(f"Added note {note['id']}")
        return note["id"]

    def update(self, id: NoteId, title: str, content: str) -> bool:
        """
        Replace the title and content of a note in place.

        Unknown ids and blank input leave the collection unchanged and
        return False.
        """
        note = self.__find_note(id)
        if note is None:
            logger.debug(f"Ignoring update of missing note {id}")
            return False

        title = normalize_title(title)
        content = normalize_content(content)
        if not title and not content:
            logger.debug(f"Rejected blank update of note {id}")
            return False

        note["title"] = title or UNTITLED_PLACEHOLDER
        note["content"] = content
        note["last_edited"] = time.next_edit_timestamp(note["last_edited"])

        self.persist()

        logger.info(f"Updated note {id}")
        return True

    def remove(self, id: NoteId) -> bool:
        note = self.__find_note(id)
        if note is None:
            logger.debug(f"Ignoring removal of missing note {id}")
            return False

        self.notes.remove(note)
        self.persist()

        logger.info(f"Removed note {id}")
        return True

    def filter(self, query: str) -> list[Note]:
        return deepcopy(filter_notes(self.notes, query))

    def get_all_notes(self) -> list[Note]:
        return deepcopy(self.notes)

    def get_note(self, id: NoteId) -> Optional[Note]:
        note = self.__find_note(id)
        if note is None:
            return None
        return deepcopy(note)

    def most_recent(self) -> Optional[Note]:
        if len(self.notes) == 0:
            return None
        return deepcopy(self.notes[0])

    def is_empty(self) -> bool:
        return len(self.notes) == 0

    def __find_note(self, id: NoteId) -> Optional[Note]:
        return next((note for note in self.notes if note["id"] == id), None)

    def __generate_unique_id(self) -> NoteId:
        existing_ids = {note["id"] for note in self.notes}
        note_id = generate_note_id()
        while note_id in existing_ids:
            note_id = generate_note_id()
        return note_id

    def __write_atomic(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        temp_file = tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        )
        temp_path = Path(temp_file.name)
        try:
            with temp_file:
                temp_file.write(text)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_path, self.path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

    def __preserve_unreadable_file(self, keep_original: bool = False) -> None:
        stamp = time.now_utc().format("YYYYMMDD[T]HHmmss")
        backup_path = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
        try:
            if keep_original:
                shutil.copy2(self.path, backup_path)
            else:
                self.path.replace(backup_path)
        except OSError as e:
            logger.warning(f"Unable to back up unreadable notes file: {e}")
            return
        logger.warning(f"Backed up unreadable notes file to {backup_path}")

    def __convert_note_for_serialization(self, note: Note) -> dict[str, Any]:
        return {
            "id": note["id"],
            "title": note["title"],
            "content": LiteralString(note["content"]),
            "lastEdited": time.datetime_to_iso_str(note["last_edited"]),
        }

    def __convert_note_for_deserialization(self, raw_note: Any) -> Optional[Note]:
        if not isinstance(raw_note, dict):
            return None

        note_id = raw_note.get("id")
        title = raw_note.get("title")
        content = raw_note.get("content")
        if not isinstance(note_id, str) or note_id == "":
            return None
        if not isinstance(title, str) or not isinstance(content, str):
            return None

        try:
            last_edited = time.datetime_from_value(raw_note.get("lastEdited"))
        except (TypeError, ValueError):
            return None

        return {
            "id": note_id,
            "title": title,
            "content": content,
            "last_edited": last_edited,
        }
