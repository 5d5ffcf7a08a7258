"""Chart data selection — bounded slices of an analytics snapshot.

Each analytics panel renders a fixed-size window of its series:
the most-used tags, and the most recent week and month buckets that
actually contain notes.  Empty weeks or months are absent from the
snapshot, so they are never zero-filled here either.
"""

from __future__ import annotations

from pydantic import BaseModel

from notectl.domain.analytics import AnalyticsSnapshot
from notectl.domain.models import LabelCount, TagCount

DEFAULT_TAG_LIMIT = 8
DEFAULT_WEEKLY_LIMIT = 8
DEFAULT_MONTHLY_LIMIT = 6


class ChartData(BaseModel):
    """Series ready for the three analytics panels.

    An empty tuple means the panel has nothing to plot and must show a
    "no data" state rather than an empty chart.
    """

    model_config = {"frozen": True}

    tags: tuple[TagCount, ...] = ()
    weekly: tuple[LabelCount, ...] = ()
    monthly: tuple[LabelCount, ...] = ()


def _tail(series: tuple[LabelCount, ...], limit: int) -> tuple[LabelCount, ...]:
    # series[-0:] would return everything.
    if limit <= 0:
        return ()
    return series[-limit:]


def select_chart_data(
    snapshot: AnalyticsSnapshot,
    *,
    tag_limit: int = DEFAULT_TAG_LIMIT,
    weekly_limit: int = DEFAULT_WEEKLY_LIMIT,
    monthly_limit: int = DEFAULT_MONTHLY_LIMIT,
) -> ChartData:
    """Cut *snapshot* down to the slices the panels render.

    Args:
        snapshot: Output of :func:`~notectl.domain.analytics.aggregate_notes`.
        tag_limit: Leading entries of the descending tag series to keep.
        weekly_limit: Trailing entries of the ascending weekly series.
        monthly_limit: Trailing entries of the ascending monthly series.
    """
    return ChartData(
        tags=snapshot.tags[: max(tag_limit, 0)],
        weekly=_tail(snapshot.weekly, weekly_limit),
        monthly=_tail(snapshot.monthly, monthly_limit),
    )
