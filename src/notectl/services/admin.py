"""AdminService — workspace-wide metrics for administrators.

Stats and analytics are separate endpoints and load independently: a
failed analytics fetch still shows the stats (with a warning), and a
failed stats fetch shows the "no data" state.  An expired session aborts
the whole overview.
"""

from __future__ import annotations

import logging
from typing import Any

from notectl.domain.models import AdminAnalytics, AdminStats
from notectl.domain.timeline import format_timeline
from notectl.domain.types import Granularity
from notectl.infrastructure.api import NotectlApiError, SessionExpiredError
from notectl.services._helpers import dump_all
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult
from notectl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

NO_ADMIN_DATA_MESSAGE = "No admin data available yet."


def _note_metrics(stats: AdminStats) -> list[dict[str, Any]]:
    return [
        {"label": "Total Notes", "value": stats.total_notes},
        {"label": "This Week", "value": stats.notes_last_7_days},
        {"label": "This Month", "value": stats.notes_last_30_days},
        {"label": "This Year", "value": stats.notes_last_365_days},
    ]


def _people_metrics(stats: AdminStats) -> list[dict[str, Any]]:
    return [
        {"label": "Total Users", "value": stats.total_users},
        {"label": "Active (30d)", "value": stats.monthly_active_users},
        {"label": "Active (12m)", "value": stats.annual_active_users},
    ]


class AdminService(BaseService):
    @traced
    def overview(
        self,
        *,
        notes_range: Granularity | str = Granularity.WEEKLY,
        users_range: Granularity | str = Granularity.WEEKLY,
    ) -> ServiceResult:
        op = "admin_overview"
        if (denied := self._require_session(op)) is not None:
            return denied
        notes_range = Granularity(notes_range)
        users_range = Granularity(users_range)

        try:
            user = self._api.current_user()
        except NotectlApiError as exc:
            return self._api_failure(op, exc)
        if not user.is_admin:
            return ServiceResult.failure(
                op, "FORBIDDEN", "Admin access required", role=user.role.value
            )

        warnings: list[str] = []
        stats: AdminStats | None = None
        analytics: AdminAnalytics | None = None
        try:
            with trace_span("api.admin_stats"):
                stats = self._api.admin_stats()
        except SessionExpiredError as exc:
            return self._api_failure(op, exc)
        except NotectlApiError as exc:
            logger.warning("Failed to load admin stats: %s", exc.message)
            warnings.append(f"Failed to load admin stats: {exc.message}")
        try:
            with trace_span("api.admin_analytics"):
                analytics = self._api.admin_analytics()
        except SessionExpiredError as exc:
            return self._api_failure(op, exc)
        except NotectlApiError as exc:
            logger.warning("Failed to load analytics: %s", exc.message)
            warnings.append(f"Failed to load analytics: {exc.message}")

        if stats is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"available": False, "message": NO_ADMIN_DATA_MESSAGE},
                warnings=warnings,
            )

        analytics = analytics or AdminAnalytics()
        notes_timeline = format_timeline(analytics.notes_timeline.points(notes_range), notes_range)
        users_timeline = format_timeline(analytics.users_timeline.points(users_range), users_range)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "available": True,
                "note_metrics": _note_metrics(stats),
                "people_metrics": _people_metrics(stats),
                "notes_range": notes_range.value,
                "users_range": users_range.value,
                "notes_timeline": dump_all(notes_timeline),
                "users_timeline": dump_all(users_timeline),
                "users": dump_all(stats.users),
            },
            warnings=warnings,
        )
