"""
Unit tests for the Note value object and its line format.
"""

import dataclasses

import pytest

from quicknotes.types import UNTITLED, Note


def test_empty_title_becomes_untitled() -> None:
    assert Note("", "body").title == UNTITLED


def test_title_and_content_kept_as_given() -> None:
    note = Note("todo", "buy milk")
    assert note.title == "todo"
    assert note.content == "buy milk"


def test_note_is_immutable() -> None:
    note = Note("todo", "buy milk")
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.title = "other"  # type: ignore[misc]


def test_to_line_uses_colon_separator() -> None:
    assert Note("todo", "buy milk").to_line() == "todo:buy milk"


def test_from_line_splits_on_first_colon_only() -> None:
    note = Note.from_line("meeting:room 4: 10:30\n")
    assert note == Note("meeting", "room 4: 10:30")


def test_from_line_without_colon_is_rejected() -> None:
    assert Note.from_line("no separator here\n") is None


def test_from_line_strips_crlf() -> None:
    assert Note.from_line("a:b\r\n") == Note("a", "b")


def test_from_line_with_empty_title_gets_placeholder() -> None:
    note = Note.from_line(":orphan content")
    assert note is not None
    assert note.title == UNTITLED
    assert note.content == "orphan content"


def test_colon_in_title_moves_to_content_on_reload() -> None:
    # Known limitation of the line format: only the first colon separates.
    reloaded = Note.from_line(Note("10:30", "standup").to_line())
    assert reloaded == Note("10", "30:standup")
