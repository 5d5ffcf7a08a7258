"""AuthService — sign-up, sign-in, sign-out, and the current account."""

from __future__ import annotations

import logging

from notectl.infrastructure.api import NotectlApiError
from notectl.services._helpers import dump
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult
from notectl.services.telemetry import traced

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """Account lifecycle against ``/api/auth``."""

    @traced
    def signup(self, name: str, email: str, password: str) -> ServiceResult:
        if not name.strip() or not email.strip() or not password:
            return ServiceResult.failure(
                "signup", "VALIDATION", "Name, email, and password are required"
            )
        try:
            auth = self._api.signup(name.strip(), email.strip(), password)
        except NotectlApiError as exc:
            return self._api_failure("signup", exc)
        logger.info("Signed up %s", auth.user.email)
        return ServiceResult(ok=True, op="signup", data=dump(auth.user))

    @traced
    def signin(self, email: str, password: str) -> ServiceResult:
        if not email.strip() or not password:
            return ServiceResult.failure("signin", "VALIDATION", "Email and password are required")
        try:
            auth = self._api.signin(email.strip(), password)
        except NotectlApiError as exc:
            return self._api_failure("signin", exc)
        logger.info("Signed in %s", auth.user.email)
        return ServiceResult(ok=True, op="signin", data=dump(auth.user))

    def signout(self) -> ServiceResult:
        was_signed_in = self._api.session_store.has_token
        self._api.signout()
        return ServiceResult(ok=True, op="signout", data={"signed_out": was_signed_in})

    @traced
    def whoami(self) -> ServiceResult:
        """Resolve the stored token to an account.

        Any failure other than a network error means the token is unusable,
        so it is discarded.
        """
        if (denied := self._require_session("whoami")) is not None:
            return denied
        try:
            user = self._api.current_user()
        except NotectlApiError as exc:
            if exc.status_code is not None:
                self._api.signout()
            return self._api_failure("whoami", exc)
        return ServiceResult(ok=True, op="whoami", data=dump(user))
