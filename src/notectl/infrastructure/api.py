"""HTTP client for the notes service REST API.

:class:`ApiClient` wraps a ``requests.Session``.  Every request carries a
JSON content type and, when a token is stored, a bearer ``Authorization``
header.  Responses are decoded into the wire models of
:mod:`notectl.domain.models`.

Failures surface as :class:`NotectlApiError` subclasses; the service layer
turns them into ``ServiceResult`` errors.  A 401 from any endpoint clears
the stored token, so the next command starts signed out.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from notectl.domain.models import (
    AdminAnalytics,
    AdminStats,
    AuthResponse,
    Note,
    NoteFilters,
    NoteWithOwner,
    User,
)

if TYPE_CHECKING:
    from notectl.infrastructure.session import SessionStore

logger = logging.getLogger(__name__)

SESSION_EXPIRED_MESSAGE = "Session expired. Please sign in again."
GENERIC_ERROR_DETAIL = "An error occurred"


class NotectlApiError(Exception):
    """Base class for every failure talking to the notes service."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiError(NotectlApiError):
    """The service answered with a non-success status."""


class SessionExpiredError(NotectlApiError):
    """The service rejected the bearer token (HTTP 401)."""


class ApiConnectionError(NotectlApiError):
    """The request never produced a response (DNS, refused, timeout)."""


def _error_detail(response: requests.Response) -> str:
    """Extract the human-readable ``detail`` from an error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = {"detail": GENERIC_ERROR_DETAIL}

    detail = payload.get("detail") if isinstance(payload, dict) else None
    if isinstance(detail, list):
        # Validation errors arrive as a list of {"loc", "msg", ...} objects.
        messages = [str(d.get("msg", d)) if isinstance(d, dict) else str(d) for d in detail]
        detail = "; ".join(messages)
    if detail:
        return str(detail)
    return f"HTTP error! status: {response.status_code}"


class ApiClient:
    """Typed access to the notes service endpoints.

    Args:
        base_url: Service root, e.g. ``http://localhost:8000``.
        session_store: Where the bearer token is read from and written to.
        timeout: Per-request timeout in seconds.
        http: Pre-built ``requests.Session`` (tests inject a stub here).
    """

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        *,
        timeout: float = 30.0,
        http: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.timeout = timeout
        self._http = http or requests.Session()

    def close(self) -> None:
        self._http.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (or None).

        Raises:
            SessionExpiredError: HTTP 401; the stored token is cleared first.
            ApiError: Any other non-2xx status, or an undecodable body.
            ApiConnectionError: No response was received.
        """
        headers = {"Content-Type": "application/json"}
        token = self.session_store.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s params=%s", method, url, params or {})
        try:
            response = self._http.request(
                method,
                url,
                json=json,
                params=params or None,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ApiConnectionError(f"Could not reach {self.base_url}: {exc}") from exc

        if not response.ok:
            if response.status_code == 401:
                self.session_store.clear()
                raise SessionExpiredError(SESSION_EXPIRED_MESSAGE, status_code=401)
            detail = _error_detail(response)
            logger.debug("%s %s failed: %s %s", method, url, response.status_code, detail)
            raise ApiError(detail, status_code=response.status_code)

        if response.status_code == 204 or not response.text:
            return None

        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"Invalid JSON response from {endpoint}", status_code=response.status_code
            ) from exc

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    def signup(self, name: str, email: str, password: str) -> AuthResponse:
        payload = {"name": name, "email": email, "password": password}
        auth = AuthResponse.model_validate(self.request("POST", "/api/auth/signup", json=payload))
        if auth.access_token:
            self.session_store.set_token(auth.access_token)
        return auth

    def signin(self, email: str, password: str) -> AuthResponse:
        payload = {"email": email, "password": password}
        auth = AuthResponse.model_validate(self.request("POST", "/api/auth/signin", json=payload))
        if auth.access_token:
            self.session_store.set_token(auth.access_token)
        return auth

    def signout(self) -> None:
        self.session_store.clear()

    def current_user(self) -> User:
        return User.model_validate(self.request("GET", "/api/auth/me"))

    def update_email(self, email: str) -> User:
        return User.model_validate(self.request("PUT", "/api/auth/email", json={"email": email}))

    def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> dict[str, Any]:
        payload = {
            "current_password": current_password,
            "new_password": new_password,
            "confirm_password": confirm_password,
        }
        return self.request("PUT", "/api/auth/password", json=payload) or {}

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------

    def list_notes(self, filters: NoteFilters | None = None) -> list[NoteWithOwner]:
        params = filters.to_params() if filters else {}
        rows = self.request("GET", "/api/notes", params=params) or []
        return [NoteWithOwner.model_validate(row) for row in rows]

    def get_note(self, note_id: int) -> NoteWithOwner:
        return NoteWithOwner.model_validate(self.request("GET", f"/api/notes/{note_id}"))

    def create_note(self, payload: dict[str, Any]) -> Note:
        return Note.model_validate(self.request("POST", "/api/notes", json=payload))

    def update_note(self, note_id: int, payload: dict[str, Any]) -> Note:
        return Note.model_validate(self.request("PUT", f"/api/notes/{note_id}", json=payload))

    def delete_note(self, note_id: int) -> None:
        self.request("DELETE", f"/api/notes/{note_id}")

    def list_tags(self) -> list[str]:
        return list(self.request("GET", "/api/notes/tags") or [])

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    def admin_stats(self) -> AdminStats:
        return AdminStats.model_validate(self.request("GET", "/api/admin/stats"))

    def admin_analytics(self) -> AdminAnalytics:
        return AdminAnalytics.model_validate(self.request("GET", "/api/admin/analytics"))
