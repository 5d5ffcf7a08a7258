"""Tests for the Rich renderers."""

from __future__ import annotations

from typing import Any

from notectl.output.renderers import render_quiet, render_result
from notectl.services.result import ServiceResult


def _ok(op: str, **data: Any) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=data)


class TestQuiet:
    def test_ids_from_items(self) -> None:
        assert render_quiet(_ok("list_notes", items=[{"id": 3}, {"id": 5}])) == "3\n5"

    def test_single_id(self) -> None:
        assert render_quiet(_ok("create_note", id=9, title="x")) == "9"

    def test_plain_ok(self) -> None:
        assert render_quiet(_ok("signout", signed_out=True)) == "OK: signout"

    def test_error(self) -> None:
        result = ServiceResult.failure("analytics", "API_ERROR", "boom")
        assert render_quiet(result) == "ERROR: analytics — boom"


class TestErrors:
    def test_message(self) -> None:
        result = ServiceResult.failure("list_notes", "SESSION_EXPIRED", "Session expired.")
        out = render_result(result)
        assert "ERROR" in out
        assert "Session expired." in out
        assert "SESSION_EXPIRED" not in out

    def test_verbose_shows_code_and_detail(self) -> None:
        result = ServiceResult.failure("get_note", "API_ERROR", "Note not found", status=404)
        out = render_result(result, verbose=True)
        assert "API_ERROR" in out
        assert "status: 404" in out


class TestNotes:
    def test_table(self) -> None:
        items = [
            {"id": 1, "title": "Groceries", "tags": ["home"], "pinned": True,
             "created_at": "2024-03-05T10:00:00"},
            {"id": 2, "title": "Standup", "tags": ["work"], "favorite": True,
             "created_at": "2024-03-06T10:00:00"},
        ]
        out = render_result(_ok("list_notes", items=items, count=2, fetched=2, view="all"))
        assert "Groceries" in out and "Standup" in out
        assert "2024-03-05" in out
        assert "pinned" in out and "favorite" in out
        assert "2 notes" in out

    def test_empty_unfiltered(self) -> None:
        out = render_result(_ok("list_notes", items=[], filtered=False))
        assert out == "No notes found."

    def test_empty_filtered(self) -> None:
        out = render_result(_ok("list_notes", items=[], filtered=True))
        assert out == "No notes match the current filters."

    def test_single_note(self) -> None:
        out = render_result(
            _ok(
                "get_note",
                id=4,
                title="Trip",
                description="Pack light",
                tags=["travel"],
                attachments=["https://a.example/map"],
                owner={"name": "Ada", "email": "ada@example.com"},
            )
        )
        assert "Trip" in out
        assert "Pack light" in out
        assert "https://a.example/map" in out
        assert "ada@example.com" in out

    def test_mutation(self) -> None:
        out = render_result(_ok("toggle_pin", id=4, title="Trip", pinned=True))
        assert "OK" in out and "toggle_pin" in out
        assert "pinned: True" in out

    def test_tags(self) -> None:
        out = render_result(_ok("list_tags", tags=["home", "work"], count=2))
        assert "home" in out and "2 tags" in out


class TestAnalytics:
    def test_summary_and_panels(self) -> None:
        data = {
            "total": 3,
            "pinned": 1,
            "favorites": 1,
            "charts": {
                "tags": [{"tag": "work", "count": 2}],
                "weekly": [{"label": "2024-03-03", "count": 2}],
                "monthly": [],
            },
        }
        out = render_result(_ok("analytics", **data))
        assert "Total Notes: 3" in out
        assert "Top tags" in out and "work" in out
        assert "2024-03-03" in out
        assert "Monthly activity" in out
        assert "No data yet" in out

    def test_all_empty(self) -> None:
        data = {"total": 0, "pinned": 0, "favorites": 0, "charts": {}}
        out = render_result(_ok("analytics", **data))
        assert out.count("No data yet") == 3


class TestAdmin:
    def test_no_data(self) -> None:
        out = render_result(
            _ok("admin_overview", available=False, message="No admin data available yet.")
        )
        assert out == "No admin data available yet."

    def test_overview(self) -> None:
        data = {
            "available": True,
            "note_metrics": [{"label": "Total Notes", "value": 1200}],
            "people_metrics": [{"label": "Total Users", "value": 3}],
            "notes_range": "weekly",
            "users_range": "monthly",
            "notes_timeline": [{"label": "Mar 3", "count": 4}],
            "users_timeline": [],
            "users": [
                {"name": "Ada", "email": "ada@example.com", "note_count": 30,
                 "created_at": "2024-01-02T10:00:00", "is_monthly_active": True},
            ],
        }
        out = render_result(_ok("admin_overview", **data))
        assert "Total Notes: 1,200" in out
        assert "Mar 3" in out
        assert "User timeline (monthly)" in out
        assert "No data yet" in out
        assert "ada@example.com" in out


class TestAccountAndGeneric:
    def test_whoami(self) -> None:
        out = render_result(_ok("whoami", id=1, name="Ada", email="a@x", role="admin"))
        assert "Ada" in out and "a@x" in out
        assert "administrator" in out

    def test_signout(self) -> None:
        assert "Already signed out." in render_result(_ok("signout", signed_out=False))

    def test_generic_fallback(self) -> None:
        out = render_result(_ok("unknown_op", answer=42))
        assert "unknown_op" in out and "answer: 42" in out

    def test_verbose_telemetry(self) -> None:
        result = ServiceResult(
            ok=True,
            op="create_note",
            data={"id": 1},
            meta={
                "telemetry": {
                    "name": "NoteService.create",
                    "duration_ms": 12.5,
                    "children": [{"name": "api.create", "duration_ms": 10.0}],
                }
            },
        )
        out = render_result(result, verbose=True)
        assert "NoteService.create" in out
        assert "api.create" in out
