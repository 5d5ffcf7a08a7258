"""Shared pytest fixtures and test helpers for notectl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import requests
from click.testing import CliRunner

from notectl.infrastructure.api import ApiClient
from notectl.infrastructure.session import SessionStore
from notectl.services.telemetry import disable_telemetry

BASE_URL = "http://notes.test"

Handler = Callable[[dict[str, Any]], tuple[int, Any]]


def make_response(status: int, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeHttp:
    """Stand-in for ``requests.Session`` routing on ``(method, path)``.

    Routes map to either a ``(status, body)`` tuple or a callable that
    receives the recorded call and returns one.  Every request is recorded
    in :attr:`calls`.
    """

    def __init__(self, routes: dict[tuple[str, str], Any] | None = None) -> None:
        self.routes: dict[tuple[str, str], Any] = dict(routes or {})
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        path = url.removeprefix(BASE_URL)
        call = {"method": method, "path": path, **kwargs}
        self.calls.append(call)
        route = self.routes.get((method, path))
        if route is None:
            return make_response(404, {"detail": "Not Found"})
        if isinstance(route, BaseException):
            raise route
        status, body = route(call) if callable(route) else route
        if isinstance(body, bytes):
            return make_response(status, raw=body)
        return make_response(status, body)

    def close(self) -> None:
        self.closed = True

    def paths(self) -> list[str]:
        return [f"{c['method']} {c['path']}" for c in self.calls]


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def user_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "id": 1,
        "name": "Ada",
        "email": "ada@example.com",
        "role": "user",
        "created_at": "2024-01-02T10:00:00",
        "last_login": None,
    }
    payload.update(overrides)
    return payload


def note_payload(note_id: int = 1, **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": note_id,
        "title": f"Note {note_id}",
        "description": None,
        "user_id": 1,
        "tags": [],
        "attachments": [],
        "pinned": False,
        "favorite": False,
        "created_at": "2024-03-05T12:00:00",
        "updated_at": "2024-03-05T12:00:00",
    }
    payload.update(overrides)
    return payload


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def token_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "session"


@pytest.fixture
def session_store(token_path: Path) -> SessionStore:
    return SessionStore(token_path)


@pytest.fixture
def signed_in(session_store: SessionStore) -> SessionStore:
    """A session store that already holds a token."""
    session_store.set_token("tok-123")
    return session_store


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def api(session_store: SessionStore, http: FakeHttp) -> ApiClient:
    return ApiClient(BASE_URL, session_store, http=http)  # type: ignore[arg-type]


@pytest.fixture
def _isolated_cli(
    tmp_path: Path, token_path: Path, http: FakeHttp, monkeypatch: pytest.MonkeyPatch
) -> Generator[None]:
    """Run CLI invocations against :class:`FakeHttp` with a temp token file.

    Use via ``@pytest.mark.usefixtures("_isolated_cli")`` on command test
    classes; request ``http`` to register routes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NOTECTL_CONFIG", raising=False)
    monkeypatch.setenv("NOTECTL_API__BASE_URL", BASE_URL)
    monkeypatch.setenv("NOTECTL_SESSION__TOKEN_PATH", str(token_path))
    monkeypatch.setattr("notectl.infrastructure.api.requests.Session", lambda: http)
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    disable_telemetry()
