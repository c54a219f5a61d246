# SPDX-License-Identifier: MIT

from typing import Optional

from noteease.model.note import Note


def __substring_match(query: str, text: Optional[str]) -> bool:
    """
    Perform case-insensitive substring matching.

    Args:
        query: The search query string
        text: The text to search within

    Returns:
        True if text contains query, ignoring case
    """
    if text is None:
        return False

    return query.lower() in text.lower()


def __note_matches(note: Note, query: str) -> bool:
    return __substring_match(query, note["title"]) or __substring_match(
        query, note["content"]
    )


def filter_notes(notes: list[Note], query: str) -> list[Note]:
    """
    Filter notes by a search query.

    Args:
        notes: Notes in display order
        query: The search query string; an empty query matches everything

    Returns:
        The notes whose title or content contains query, in their original order
    """
    if query == "":
        return list(notes)

    return [note for note in notes if __note_matches(note, query)]
