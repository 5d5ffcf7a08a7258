"""Client-side analytics aggregation over a fetched note collection.

:func:`aggregate_notes` turns the notes currently on screen into an
:class:`AnalyticsSnapshot`: headline counts plus tag, weekly, and monthly
frequency series.  It is a pure function; the snapshot is recomputed from
scratch whenever the collection changes and is never cached.

Calendar convention: timestamps are interpreted in UTC (naive values are
taken to be UTC already) and month names come from a fixed English table,
so labels never depend on the process locale or timezone.  Weeks start on
Sunday.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime, timedelta
from typing import Any

from pydantic import BaseModel

from notectl.domain.models import LabelCount, TagCount

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class AnalyticsSnapshot(BaseModel):
    """Derived counts for one note collection.

    Attributes:
        total: Number of notes.
        pinned: Notes with ``pinned`` set.
        favorites: Notes with ``favorite`` set.
        tags: ``(tag, count)`` by count descending; ties in first-seen order.
        weekly: ``(YYYY-MM-DD week start, count)`` ascending by label.
        monthly: ``("Mon YYYY", count)`` ascending by label, lexically.
    """

    model_config = {"frozen": True}

    total: int = 0
    pinned: int = 0
    favorites: int = 0
    tags: tuple[TagCount, ...] = ()
    weekly: tuple[LabelCount, ...] = ()
    monthly: tuple[LabelCount, ...] = ()


def _get(note: Any, name: str) -> Any:
    if isinstance(note, Mapping):
        return note.get(name)
    return getattr(note, name, None)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp to an aware UTC datetime.

    Accepts ``datetime`` and ``date`` objects as well as strings.  Returns
    None for missing or unparseable values, and for offset timestamps that
    land outside years 1 to 9999 once moved to UTC, instead of raising.

    Examples:
        >>> parse_timestamp("2024-03-05T23:30:00-02:00").isoformat()
        '2024-03-06T01:30:00+00:00'
        >>> parse_timestamp("not a date") is None
        True
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        # Offsets that push the instant past year 1 or 9999.
        return None


def week_start_label(moment: datetime) -> str:
    """ISO date of the Sunday on or before *moment*'s calendar date.

    Raises OverflowError for dates in the first days of year 1, whose
    Sunday falls before the start of the calendar.

    Examples:
        >>> week_start_label(datetime(2024, 3, 6, 15, 0))
        '2024-03-03'
        >>> week_start_label(datetime(2024, 3, 3))
        '2024-03-03'
    """
    day = moment.date()
    # date.weekday() counts from Monday; shift so Sunday is 0.
    offset = (day.weekday() + 1) % 7
    return (day - timedelta(days=offset)).isoformat()


def month_label(moment: datetime) -> str:
    """Short month plus year, e.g. ``"Jan 2024"``."""
    return f"{MONTH_ABBREVIATIONS[moment.month - 1]} {moment.year}"


def aggregate_notes(notes: Iterable[Any]) -> AnalyticsSnapshot:
    """Aggregate *notes* into an :class:`AnalyticsSnapshot`.

    *notes* may hold :class:`~notectl.domain.models.Note` instances or plain
    mappings with the same keys.  Missing tags contribute nothing; a missing
    or unparseable ``created_at`` still counts toward the headline totals but
    not toward either time series, and so does one whose week would begin
    before 0001-01-01.
    """
    total = pinned = favorites = 0
    tag_counts: Counter[str] = Counter()
    weekly_counts: Counter[str] = Counter()
    monthly_counts: Counter[str] = Counter()

    for note in notes:
        total += 1
        if _get(note, "pinned"):
            pinned += 1
        if _get(note, "favorite"):
            favorites += 1

        for tag in _get(note, "tags") or ():
            tag_counts[tag] += 1

        created = parse_timestamp(_get(note, "created_at"))
        if created is None:
            continue
        try:
            week = week_start_label(created)
        except OverflowError:
            continue
        weekly_counts[week] += 1
        monthly_counts[month_label(created)] += 1

    # sorted() is stable and Counter keeps insertion order, so equal counts
    # stay in first-seen order.
    tags = sorted(tag_counts.items(), key=lambda item: -item[1])

    # Plain string order for both series.  Monthly labels therefore sort
    # alphabetically by month name, not chronologically.
    weekly = sorted(weekly_counts.items())
    monthly = sorted(monthly_counts.items())

    return AnalyticsSnapshot(
        total=total,
        pinned=pinned,
        favorites=favorites,
        tags=tuple(TagCount(tag=t, count=c) for t, c in tags),
        weekly=tuple(LabelCount(label=lbl, count=c) for lbl, c in weekly),
        monthly=tuple(LabelCount(label=lbl, count=c) for lbl, c in monthly),
    )
