import pytest

from noteease.model.note import Note
from noteease.service.search import filter_notes
from noteease.template.note import get_note_template


def make_note(note_id: str, title: str, content: str) -> Note:
    note = get_note_template()
    note["id"] = note_id
    note["title"] = title
    note["content"] = content
    return note


@pytest.fixture
def notes() -> list[Note]:
    return [
        make_note("1", "Groceries", "Milk, eggs"),
        make_note("2", "Meeting", "Discuss GROCERY budget"),
        make_note("3", "(Untitled)", "remember the milk"),
    ]


def test_empty_query_returns_everything_in_order(notes: list[Note]) -> None:
    assert filter_notes(notes, "") == notes


def test_query_is_case_insensitive(notes: list[Note]) -> None:
    assert [note["id"] for note in filter_notes(notes, "MILK")] == ["1", "3"]


def test_query_matches_title_or_content(notes: list[Note]) -> None:
    assert [note["id"] for note in filter_notes(notes, "grocer")] == ["1", "2"]


def test_every_result_contains_query(notes: list[Note]) -> None:
    for query in ("e", "mi", "untitled", "budget", "zzz"):
        for note in filter_notes(notes, query):
            haystack = (note["title"] + "\n" + note["content"]).lower()
            assert query.lower() in haystack


def test_whitespace_is_part_of_the_query(notes: list[Note]) -> None:
    assert [note["id"] for note in filter_notes(notes, " eggs")] == ["1"]
    assert filter_notes(notes, "  ") == []
