"""BaseService — shared plumbing for every notectl service.

Each service receives the :class:`ApiClient` at construction time and
translates infrastructure exceptions into ``ServiceResult`` errors, so
commands only ever see results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notectl.infrastructure.api import (
    ApiConnectionError,
    NotectlApiError,
    SessionExpiredError,
)
from notectl.services.result import ServiceResult

if TYPE_CHECKING:
    from notectl.infrastructure.api import ApiClient

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED_MESSAGE = "Not signed in. Run 'notectl auth signin' first."


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class NoteService(BaseService):
            def get(self, note_id: int) -> ServiceResult:
                if (denied := self._require_session("get_note")) is not None:
                    return denied
                try:
                    note = self._api.get_note(note_id)
                except NotectlApiError as exc:
                    return self._api_failure("get_note", exc)
                ...
    """

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    def _require_session(self, op: str) -> ServiceResult | None:
        """Return a NOT_AUTHENTICATED failure when no token is stored."""
        if self._api.session_store.has_token:
            return None
        return ServiceResult.failure(op, "NOT_AUTHENTICATED", NOT_AUTHENTICATED_MESSAGE)

    def _api_failure(self, op: str, exc: NotectlApiError) -> ServiceResult:
        """Map an API exception to a failed ServiceResult."""
        if isinstance(exc, SessionExpiredError):
            code = "SESSION_EXPIRED"
        elif isinstance(exc, ApiConnectionError):
            code = "CONNECTION_ERROR"
        else:
            code = "API_ERROR"
        logger.debug("%s failed with %s: %s", op, code, exc.message)
        detail = {"status": exc.status_code} if exc.status_code is not None else {}
        return ServiceResult.failure(op, code, exc.message, **detail)
