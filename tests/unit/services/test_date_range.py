"""
Tests for range windows and calendar-day arithmetic.

Tests cover:
- Window start resolution for every catalog range and "all"
- Inclusive day filtering
- Inclusive day spans
"""

import re

import pytest

from gitiary.services.activity.date_range import (
    RANGE_CHOICES,
    day_span_inclusive,
    filter_by_day_inclusive,
    resolve_range_start,
    shift_day,
    today_utc,
)
from tests.helpers.factories import make_daily


class TestResolveRangeStart:
    """Tests for resolve_range_start."""

    def test_seven_day_window_includes_reference_day(self) -> None:
        """A 7-day range covers the reference day and the 6 days before it."""
        assert resolve_range_start(7, "2026-01-10") == "2026-01-04"

    def test_crosses_month_and_year_boundaries(self) -> None:
        assert resolve_range_start(30, "2026-01-10") == "2025-12-12"

    def test_leap_day(self) -> None:
        assert resolve_range_start(7, "2024-03-03") == "2024-02-26"
        assert shift_day("2024-02-28", 1) == "2024-02-29"

    @pytest.mark.parametrize("days", RANGE_CHOICES)
    def test_window_spans_exactly_range_days(self, days: int) -> None:
        start = resolve_range_start(days, "2026-06-30")
        assert day_span_inclusive(start, "2026-06-30") == days

    def test_all_has_no_lower_bound(self) -> None:
        assert resolve_range_start("all", "2026-01-10") is None

    def test_defaults_to_today(self) -> None:
        """Without a reference date the window ends today (UTC)."""
        assert resolve_range_start(7) == shift_day(today_utc(), -6)

    def test_rejects_unknown_range(self) -> None:
        with pytest.raises(ValueError):
            resolve_range_start(14, "2026-01-10")  # type: ignore[arg-type]


class TestFilterByDayInclusive:
    """Tests for filter_by_day_inclusive."""

    def test_keeps_start_day(self) -> None:
        rows = make_daily(("2026-01-03", 1), ("2026-01-04", 2), ("2026-01-10", 3))
        result = filter_by_day_inclusive(rows, "2026-01-04")
        assert [r.day for r in result] == ["2026-01-04", "2026-01-10"]

    def test_upper_bound_is_inclusive(self) -> None:
        rows = make_daily(("2026-01-04", 1), ("2026-01-10", 2), ("2026-01-11", 3))
        result = filter_by_day_inclusive(rows, "2026-01-04", "2026-01-10")
        assert [r.day for r in result] == ["2026-01-04", "2026-01-10"]

    def test_no_bounds_passes_everything_through(self) -> None:
        rows = make_daily(("2026-01-01", 1), ("2026-01-02", 2))
        result = filter_by_day_inclusive(rows, None)
        assert result == rows
        assert result is not rows

    def test_does_not_mutate_input(self) -> None:
        rows = make_daily(("2026-01-01", 1), ("2026-01-10", 2))
        filter_by_day_inclusive(rows, "2026-01-05")
        assert len(rows) == 2


class TestDaySpanInclusive:
    """Tests for day_span_inclusive."""

    def test_same_day_is_one(self) -> None:
        assert day_span_inclusive("2026-01-10", "2026-01-10") == 1

    def test_counts_both_endpoints(self) -> None:
        assert day_span_inclusive("2026-01-01", "2026-01-10") == 10

    def test_missing_endpoint_is_zero(self) -> None:
        assert day_span_inclusive(None, "2026-01-10") == 0
        assert day_span_inclusive("2026-01-10", None) == 0


class TestTodayUtc:
    def test_format(self) -> None:
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today_utc())
