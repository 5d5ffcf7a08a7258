"""Dashboard helpers — view filtering and form-field parsing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from notectl.domain.models import Note, NoteFilters
from notectl.domain.types import ViewMode

_N = TypeVar("_N", bound=Note)


def filter_by_view(notes: Iterable[_N], mode: ViewMode | str) -> list[_N]:
    """Apply the all/pinned/favorite view selector to fetched notes."""
    view = ViewMode(mode)
    if view is ViewMode.PINNED:
        return [n for n in notes if n.pinned]
    if view is ViewMode.FAVORITE:
        return [n for n in notes if n.favorite]
    return list(notes)


def parse_attachments(text: str | None) -> list[str]:
    """One URL per line; surrounding whitespace and blank lines are dropped.

    Examples:
        >>> parse_attachments("  https://a.example/x \\n\\nhttps://b.example/y\\n")
        ['https://a.example/x', 'https://b.example/y']
    """
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


def add_filter_tag(tags: Sequence[str], tag: str) -> list[str]:
    """Return *tags* with *tag* appended, unless it is blank or already there."""
    if not tag.strip() or tag in tags:
        return list(tags)
    return [*tags, tag]


def remove_filter_tag(tags: Sequence[str], tag: str) -> list[str]:
    return [t for t in tags if t != tag]


def has_active_filters(filters: NoteFilters) -> bool:
    return bool(filters.search or filters.start_date or filters.end_date or filters.tags)
