"""Tests for output mode selection."""

from __future__ import annotations

import json

from notectl.output.formatters import OutputSettings, format_result
from notectl.services.result import ServiceResult


def _ok(**data: object) -> ServiceResult:
    return ServiceResult(ok=True, op="list_notes", data=dict(data))


class TestFormatResult:
    def test_json(self) -> None:
        out = format_result(_ok(items=[{"id": 1}]), settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["op"] == "list_notes"
        assert parsed["data"]["items"] == [{"id": 1}]

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True

    def test_quiet(self) -> None:
        out = format_result(_ok(items=[{"id": 1}, {"id": 2}]), settings=OutputSettings(quiet=True))
        assert out == "1\n2"

    def test_default_is_rich(self) -> None:
        out = format_result(_ok(items=[], filtered=False))
        assert "No notes found." in out
