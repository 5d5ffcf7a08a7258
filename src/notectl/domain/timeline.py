"""Axis labels for the admin activity timelines.

The service sends timeline points already bucketed; only the label needs
reshaping for display, and how depends on the bucket size.  Formatting
must never fail: anything that cannot be parsed is shown as sent.

Weekly labels follow the same UTC convention as the note aggregator.  A
bare date is taken as is, but a label with a time and an offset is moved
to UTC first, so ``"2024-03-05T23:00:00-05:00"`` displays as ``"Mar 6"``.
"""

from __future__ import annotations

from collections.abc import Iterable

from notectl.domain.analytics import MONTH_ABBREVIATIONS, parse_timestamp
from notectl.domain.models import AdminTimelinePoint, LabelCount
from notectl.domain.types import Granularity


def _coerce_granularity(granularity: Granularity | str) -> Granularity | None:
    try:
        return Granularity(granularity)
    except ValueError:
        return None


def _format_weekly(label: str) -> str:
    moment = parse_timestamp(label)
    if moment is None:
        return label
    return f"{MONTH_ABBREVIATIONS[moment.month - 1]} {moment.day}"


def _format_monthly(label: str) -> str:
    parts = label.split("-")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return label
    try:
        year = int(parts[0])
        month = int(parts[1])
    except ValueError:
        return label
    # Out-of-range months roll into the neighbouring years: 13 -> January
    # of the next year, 0 -> December of the previous one.
    carry, index = divmod(month - 1, 12)
    return f"{MONTH_ABBREVIATIONS[index]} {year + carry}"


def format_timeline_label(label: str, granularity: Granularity | str) -> str:
    """Return the display label for a timeline point.

    Examples:
        >>> format_timeline_label("2024-03-05", "weekly")
        'Mar 5'
        >>> format_timeline_label("2024-03", "monthly")
        'Mar 2024'
        >>> format_timeline_label("2024", "yearly")
        '2024'
        >>> format_timeline_label("someday", "weekly")
        'someday'
    """
    kind = _coerce_granularity(granularity)
    if kind is Granularity.WEEKLY:
        return _format_weekly(label)
    if kind is Granularity.MONTHLY:
        return _format_monthly(label)
    return label


def format_timeline(
    points: Iterable[AdminTimelinePoint],
    granularity: Granularity | str,
) -> list[LabelCount]:
    """Map :func:`format_timeline_label` over a list of timeline points."""
    return [
        LabelCount(label=format_timeline_label(p.label, granularity), count=p.count)
        for p in points
    ]
