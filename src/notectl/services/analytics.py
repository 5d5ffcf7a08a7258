"""AnalyticsService — the personal analytics view.

Fetches the signed-in user's notes, aggregates them client-side, and cuts
the result down to the chart panels.  Nothing is cached: every call
fetches and recomputes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from notectl.config.models import ChartsConfig
from notectl.domain.charts import select_chart_data
from notectl.infrastructure.api import NotectlApiError
from notectl.services._helpers import dump_all
from notectl.services.base import BaseService
from notectl.services.result import ServiceResult
from notectl.services.state import ViewState
from notectl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from notectl.domain.models import NoteFilters
    from notectl.infrastructure.api import ApiClient


class AnalyticsService(BaseService):
    """Summary counts and chart series for the current note collection.

    Args:
        api: Client used to fetch the notes.
        charts: Panel size limits (``[charts]`` config section).
        state: State owner to update; a fresh one is created by default.
    """

    def __init__(
        self,
        api: ApiClient,
        *,
        charts: ChartsConfig | None = None,
        state: ViewState | None = None,
    ) -> None:
        super().__init__(api)
        self._charts = charts or ChartsConfig()
        self.state = state or ViewState()

    @traced
    def analytics(self, filters: NoteFilters | None = None) -> ServiceResult:
        if (denied := self._require_session("analytics")) is not None:
            return denied

        self.state.begin()
        try:
            with trace_span("api.list_notes"):
                notes = self._api.list_notes(filters)
        except NotectlApiError as exc:
            self.state.fail(exc.message)
            return self._api_failure("analytics", exc)

        with trace_span("aggregate") as span:
            snapshot = self.state.resolve(notes)
            if span:
                span.annotate("notes", snapshot.total)

        charts = select_chart_data(
            snapshot,
            tag_limit=self._charts.tag_limit,
            weekly_limit=self._charts.weekly_limit,
            monthly_limit=self._charts.monthly_limit,
        )
        return ServiceResult(
            ok=True,
            op="analytics",
            data={
                "total": snapshot.total,
                "pinned": snapshot.pinned,
                "favorites": snapshot.favorites,
                "charts": {
                    "tags": dump_all(charts.tags),
                    "weekly": dump_all(charts.weekly),
                    "monthly": dump_all(charts.monthly),
                },
                "series_sizes": {
                    "tags": len(snapshot.tags),
                    "weekly": len(snapshot.weekly),
                    "monthly": len(snapshot.monthly),
                },
            },
        )
