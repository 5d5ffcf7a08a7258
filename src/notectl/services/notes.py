"""NoteService — the notes dashboard: list, view, edit, pin, favorite.

Listing applies server-side filters (keyword, date range, tags) through the
API and the all/pinned/favorite view selector on the client, exactly as
the web dashboard does.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from notectl.domain.models import NoteFilters
from notectl.domain.notes import (
    add_filter_tag,
    filter_by_view,
    has_active_filters,
    parse_attachments,
    remove_filter_tag,
)
from notectl.domain.types import ViewMode
from notectl.infrastructure.api import NotectlApiError
from notectl.services._helpers import dump, dump_all
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult
from notectl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class NoteService(BaseService):
    """CRUD and view operations on the signed-in user's notes."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @traced
    def list_notes(
        self,
        filters: NoteFilters | None = None,
        *,
        view: ViewMode | str = ViewMode.ALL,
    ) -> ServiceResult:
        """Fetch notes matching *filters*, then narrow to *view*."""
        if (denied := self._require_session("list_notes")) is not None:
            return denied
        filters = filters or NoteFilters()
        try:
            with trace_span("api.list_notes") as span:
                notes = self._api.list_notes(filters)
                if span:
                    span.annotate("fetched", len(notes))
        except NotectlApiError as exc:
            return self._api_failure("list_notes", exc)

        shown = filter_by_view(notes, view)
        return ServiceResult(
            ok=True,
            op="list_notes",
            data={
                "items": dump_all(shown),
                "count": len(shown),
                "fetched": len(notes),
                "view": ViewMode(view).value,
                "filters": filters.to_params(),
                "filtered": has_active_filters(filters),
            },
        )

    @traced
    def get(self, note_id: int) -> ServiceResult:
        if (denied := self._require_session("get_note")) is not None:
            return denied
        try:
            note = self._api.get_note(note_id)
        except NotectlApiError as exc:
            return self._api_failure("get_note", exc)
        return ServiceResult(ok=True, op="get_note", data=dump(note))

    @traced
    def tags(self) -> ServiceResult:
        if (denied := self._require_session("list_tags")) is not None:
            return denied
        try:
            tags = self._api.list_tags()
        except NotectlApiError as exc:
            return self._api_failure("list_tags", exc)
        return ServiceResult(ok=True, op="list_tags", data={"tags": tags, "count": len(tags)})

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @traced
    def create(
        self,
        title: str,
        *,
        description: str | None = None,
        tags: Sequence[str] = (),
        attachments_text: str | None = None,
        pinned: bool = False,
        favorite: bool = False,
    ) -> ServiceResult:
        if (denied := self._require_session("create_note")) is not None:
            return denied
        if not title.strip():
            return ServiceResult.failure("create_note", "VALIDATION", "Title is required")
        payload: dict[str, Any] = {
            "title": title,
            "description": description,
            "tags": _unique(tags),
            "attachments": parse_attachments(attachments_text),
            "pinned": pinned,
            "favorite": favorite,
        }
        try:
            note = self._api.create_note(payload)
        except NotectlApiError as exc:
            return self._api_failure("create_note", exc)
        logger.info("Created note %s", note.id)
        return ServiceResult(ok=True, op="create_note", data=dump(note))

    @traced
    def update(
        self,
        note_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        tags: Sequence[str] | None = None,
        add_tags: Sequence[str] = (),
        remove_tags: Sequence[str] = (),
        attachments_text: str | None = None,
        pinned: bool | None = None,
        favorite: bool | None = None,
    ) -> ServiceResult:
        """Send only the fields that were given (partial update).

        *tags* replaces the tag list outright.  *add_tags* and *remove_tags*
        edit the note's current tags instead, which costs one extra fetch.
        """
        if (denied := self._require_session("update_note")) is not None:
            return denied
        payload: dict[str, Any] = {}
        if title is not None:
            if not title.strip():
                return ServiceResult.failure("update_note", "VALIDATION", "Title cannot be empty")
            payload["title"] = title
        if description is not None:
            payload["description"] = description
        if tags is not None:
            payload["tags"] = _unique(tags)
        elif add_tags or remove_tags:
            try:
                current = self._api.get_note(note_id)
            except NotectlApiError as exc:
                return self._api_failure("update_note", exc)
            edited = _unique([*current.tags, *add_tags])
            for tag in remove_tags:
                edited = remove_filter_tag(edited, tag.strip())
            if edited != current.tags:
                payload["tags"] = edited
        if attachments_text is not None:
            payload["attachments"] = parse_attachments(attachments_text)
        if pinned is not None:
            payload["pinned"] = pinned
        if favorite is not None:
            payload["favorite"] = favorite
        if not payload:
            return ServiceResult.failure("update_note", "NO_CHANGES", "Nothing to update")

        try:
            note = self._api.update_note(note_id, payload)
        except NotectlApiError as exc:
            return self._api_failure("update_note", exc)
        data = dump(note)
        data["fields_changed"] = sorted(payload)
        return ServiceResult(ok=True, op="update_note", data=data)

    @traced
    def delete(self, note_id: int) -> ServiceResult:
        if (denied := self._require_session("delete_note")) is not None:
            return denied
        try:
            self._api.delete_note(note_id)
        except NotectlApiError as exc:
            return self._api_failure("delete_note", exc)
        logger.info("Deleted note %s", note_id)
        return ServiceResult(ok=True, op="delete_note", data={"id": note_id})

    def toggle_pin(self, note_id: int) -> ServiceResult:
        return self._toggle(note_id, "pinned", op="toggle_pin")

    def toggle_favorite(self, note_id: int) -> ServiceResult:
        return self._toggle(note_id, "favorite", op="toggle_favorite")

    @traced
    def _toggle(self, note_id: int, flag: str, *, op: str) -> ServiceResult:
        if (denied := self._require_session(op)) is not None:
            return denied
        try:
            current = self._api.get_note(note_id)
            note = self._api.update_note(note_id, {flag: not getattr(current, flag)})
        except NotectlApiError as exc:
            return self._api_failure(op, exc)
        data = dump(note)
        data["fields_changed"] = [flag]
        return ServiceResult(ok=True, op=op, data=data)


def _unique(tags: Sequence[str]) -> list[str]:
    """Drop blanks and repeats, keeping first occurrence order."""
    result: list[str] = []
    for tag in tags:
        result = add_filter_tag(result, tag.strip())
    return result
