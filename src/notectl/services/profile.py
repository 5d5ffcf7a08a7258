"""ProfileService — account details, email change, password change."""

from __future__ import annotations

from notectl.infrastructure.api import NotectlApiError
from notectl.services._helpers import dump
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult
from notectl.services.telemetry import traced


class ProfileService(BaseService):
    @traced
    def show(self) -> ServiceResult:
        if (denied := self._require_session("profile")) is not None:
            return denied
        try:
            user = self._api.current_user()
        except NotectlApiError as exc:
            return self._api_failure("profile", exc)
        return ServiceResult(ok=True, op="profile", data=dump(user))

    @traced
    def update_email(self, email: str) -> ServiceResult:
        if (denied := self._require_session("update_email")) is not None:
            return denied
        if not email.strip():
            return ServiceResult.failure("update_email", "VALIDATION", "Email is required")
        try:
            user = self._api.update_email(email.strip())
        except NotectlApiError as exc:
            return self._api_failure("update_email", exc)
        data = dump(user)
        data["message"] = "Email updated successfully."
        return ServiceResult(ok=True, op="update_email", data=data)

    @traced
    def change_password(
        self, current_password: str, new_password: str, confirm_password: str
    ) -> ServiceResult:
        """Forward a password change; matching and strength rules are the server's."""
        if (denied := self._require_session("change_password")) is not None:
            return denied
        try:
            body = self._api.change_password(current_password, new_password, confirm_password)
        except NotectlApiError as exc:
            return self._api_failure("change_password", exc)
        message = body.get("detail") or "Password updated successfully."
        return ServiceResult(ok=True, op="change_password", data={"message": message})
