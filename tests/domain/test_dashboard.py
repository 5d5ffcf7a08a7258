"""Tests for dashboard helpers: view filter, attachments, tag filters."""

from __future__ import annotations

import pytest

from notectl.domain.models import Note, NoteFilters
from notectl.domain.notes import (
    add_filter_tag,
    filter_by_view,
    has_active_filters,
    parse_attachments,
    remove_filter_tag,
)
from notectl.domain.types import ViewMode


@pytest.fixture
def notes() -> list[Note]:
    return [
        Note(id=1, title="a", pinned=True),
        Note(id=2, title="b", favorite=True),
        Note(id=3, title="c", pinned=True, favorite=True),
        Note(id=4, title="d"),
    ]


class TestFilterByView:
    def test_all(self, notes: list[Note]) -> None:
        assert [n.id for n in filter_by_view(notes, ViewMode.ALL)] == [1, 2, 3, 4]

    def test_pinned(self, notes: list[Note]) -> None:
        assert [n.id for n in filter_by_view(notes, "pinned")] == [1, 3]

    def test_favorite(self, notes: list[Note]) -> None:
        assert [n.id for n in filter_by_view(notes, "favorite")] == [2, 3]

    def test_unknown_mode_rejected(self, notes: list[Note]) -> None:
        with pytest.raises(ValueError):
            filter_by_view(notes, "archived")


class TestParseAttachments:
    def test_splits_lines(self) -> None:
        text = "https://a.example/1\n  https://b.example/2  \n\n"
        assert parse_attachments(text) == ["https://a.example/1", "https://b.example/2"]

    def test_empty(self) -> None:
        assert parse_attachments(None) == []
        assert parse_attachments("") == []
        assert parse_attachments("\n \n") == []


class TestFilterTags:
    def test_add_new(self) -> None:
        assert add_filter_tag(["a"], "b") == ["a", "b"]

    def test_add_duplicate_or_blank(self) -> None:
        assert add_filter_tag(["a"], "a") == ["a"]
        assert add_filter_tag(["a"], "  ") == ["a"]

    def test_add_does_not_mutate(self) -> None:
        tags = ["a"]
        add_filter_tag(tags, "b")
        assert tags == ["a"]

    def test_remove(self) -> None:
        assert remove_filter_tag(["a", "b"], "a") == ["b"]
        assert remove_filter_tag(["a"], "zzz") == ["a"]


class TestActiveFilters:
    def test_none(self) -> None:
        assert has_active_filters(NoteFilters()) is False

    @pytest.mark.parametrize(
        "filters",
        [
            NoteFilters(search="x"),
            NoteFilters(start_date="2024-01-01"),
            NoteFilters(end_date="2024-01-01"),
            NoteFilters(tags=("a",)),
        ],
    )
    def test_any_field(self, filters: NoteFilters) -> None:
        assert has_active_filters(filters) is True
