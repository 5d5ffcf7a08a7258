"""Tests for admin timeline label formatting."""

from __future__ import annotations

import pytest

from notectl.domain.models import AdminTimelinePoint
from notectl.domain.timeline import format_timeline, format_timeline_label
from notectl.domain.types import Granularity


class TestWeekly:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("2024-03-05", "Mar 5"),
            ("2024-12-29", "Dec 29"),
            ("2024-01-01T00:00:00", "Jan 1"),
        ],
    )
    def test_formats_month_and_day(self, label: str, expected: str) -> None:
        assert format_timeline_label(label, "weekly") == expected

    def test_unparseable_passes_through(self) -> None:
        assert format_timeline_label("week 12", Granularity.WEEKLY) == "week 12"

    def test_offset_label_shown_in_utc(self) -> None:
        assert format_timeline_label("2024-03-05T23:00:00-05:00", "weekly") == "Mar 6"

    @pytest.mark.parametrize(
        "label", ["0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"]
    )
    def test_offset_past_calendar_edge_passes_through(self, label: str) -> None:
        assert format_timeline_label(label, "weekly") == label

    def test_first_day_of_calendar(self) -> None:
        assert format_timeline_label("0001-01-01", "weekly") == "Jan 1"


class TestMonthly:
    def test_formats_month_and_year(self) -> None:
        assert format_timeline_label("2024-03", "monthly") == "Mar 2024"
        assert format_timeline_label("1999-12", "monthly") == "Dec 1999"

    def test_out_of_range_month_rolls_over(self) -> None:
        assert format_timeline_label("2024-13", "monthly") == "Jan 2025"
        assert format_timeline_label("2024-00", "monthly") == "Dec 2023"

    @pytest.mark.parametrize("label", ["2024", "2024-", "-03", "abcd-ef", ""])
    def test_malformed_passes_through(self, label: str) -> None:
        assert format_timeline_label(label, "monthly") == label

    def test_extra_parts_ignored(self) -> None:
        assert format_timeline_label("2024-03-05", "monthly") == "Mar 2024"


class TestOtherGranularities:
    def test_yearly_unchanged(self) -> None:
        assert format_timeline_label("2024", "yearly") == "2024"

    def test_unknown_granularity_unchanged(self) -> None:
        assert format_timeline_label("2024-03-05", "daily") == "2024-03-05"


class TestFormatTimeline:
    def test_maps_labels_and_keeps_counts(self) -> None:
        points = [
            AdminTimelinePoint(label="2024-03-03", count=4),
            AdminTimelinePoint(label="2024-03-10", count=0),
        ]
        formatted = format_timeline(points, "weekly")
        assert [(p.label, p.count) for p in formatted] == [("Mar 3", 4), ("Mar 10", 0)]

    def test_empty(self) -> None:
        assert format_timeline([], "monthly") == []


class TestScenarios:
    def test_weekly_and_invalid_month(self) -> None:
        assert format_timeline_label("2024-03-05", "weekly") == "Mar 5"
        label = format_timeline_label("2024-13", "monthly")
        assert isinstance(label, str) and label
