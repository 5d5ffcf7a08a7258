"""Tests for the analytics command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from notectl.cli import cli
from tests.conftest import FakeHttp, note_payload


@pytest.fixture
def _token(token_path: Path) -> None:
    token_path.parent.mkdir(parents=True, exist_ok=True)
    token_path.write_text("tok")


@pytest.mark.usefixtures("_isolated_cli", "_token")
class TestAnalyticsCommand:
    def test_json(self, cli_runner: CliRunner, http: FakeHttp) -> None:
        http.routes[("GET", "/api/notes")] = (
            200,
            [note_payload(i, tags=[f"t{i}"]) for i in range(10)],
        )
        result = cli_runner.invoke(cli, ["--json", "analytics"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["total"] == 10
        assert len(data["charts"]["tags"]) == 8
        assert data["charts"]["weekly"] == [{"label": "2024-03-03", "count": 10}]
        assert http.calls[0]["params"] is None

    def test_limits_from_config(
        self, cli_runner: CliRunner, http: FakeHttp, tmp_path: Path
    ) -> None:
        (tmp_path / "notectl.toml").write_text("[charts]\ntag_limit = 3\n")
        http.routes[("GET", "/api/notes")] = (
            200,
            [note_payload(i, tags=[f"t{i}"]) for i in range(10)],
        )
        result = cli_runner.invoke(cli, ["--json", "analytics"])
        assert len(json.loads(result.output)["data"]["charts"]["tags"]) == 3

    def test_rich_empty_state(self, cli_runner: CliRunner, http: FakeHttp) -> None:
        http.routes[("GET", "/api/notes")] = (200, [])
        result = cli_runner.invoke(cli, ["analytics"])
        assert result.exit_code == 0, result.output
        assert "Total Notes: 0" in result.output
        assert result.output.count("No data yet") == 3

    def test_verbose_shows_timings(self, cli_runner: CliRunner, http: FakeHttp) -> None:
        http.routes[("GET", "/api/notes")] = (200, [note_payload(1)])
        result = cli_runner.invoke(cli, ["--json", "-v", "analytics"])
        # Debug logging goes to stderr under -v; the envelope is on stdout.
        meta = json.loads(result.stdout)["meta"]
        assert meta["telemetry"]["name"] == "AnalyticsService.analytics"

    def test_connection_error(self, cli_runner: CliRunner, http: FakeHttp) -> None:
        import requests

        http.routes[("GET", "/api/notes")] = requests.ConnectionError("refused")
        result = cli_runner.invoke(cli, ["--json", "analytics"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "CONNECTION_ERROR"
