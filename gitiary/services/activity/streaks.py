"""Streak, gap and regularity metrics for a single repository's daily series.

A missing day in the series means zero commits, so none of these functions
assume a dense series.
"""

from collections.abc import Sequence

from .date_range import days_between, shift_day
from .types import DailyEntry


def _sorted_active_days(daily: Sequence[DailyEntry]) -> list[str]:
    return sorted(entry.day for entry in daily if entry.commits > 0)


def active_days(daily: Sequence[DailyEntry]) -> int:
    """Count of days with at least one commit."""
    return sum(1 for entry in daily if entry.commits > 0)


def total_commits(daily: Sequence[DailyEntry]) -> int:
    return sum(entry.commits for entry in daily)


def current_streak(daily: Sequence[DailyEntry], reference_date: str) -> int:
    """Consecutive active days walking backward from reference_date.

    Returns 0 when the reference day itself has no commits.
    """
    commits_by_day = {entry.day: entry.commits for entry in daily}

    streak = 0
    current = reference_date
    while commits_by_day.get(current, 0) > 0:
        streak += 1
        current = shift_day(current, -1)

    return streak


def longest_streak(daily: Sequence[DailyEntry]) -> int:
    """Length of the longest run of calendar-consecutive active days."""
    days = _sorted_active_days(daily)
    if not days:
        return 0

    longest = 1
    run = 1
    for prev, curr in zip(days, days[1:]):
        if days_between(prev, curr) == 1:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    return longest


def max_gap(daily: Sequence[DailyEntry]) -> int:
    """Most fully-inactive days strictly between two consecutive active days."""
    days = _sorted_active_days(daily)
    if len(days) < 2:
        return 0

    return max(days_between(prev, curr) - 1 for prev, curr in zip(days, days[1:]))


def regularity(daily: Sequence[DailyEntry], period_days: int) -> float:
    """Active days divided by the period length.

    Not clamped: a period shorter than the data span can yield a ratio above 1.
    """
    if period_days == 0:
        return 0.0
    return active_days(daily) / period_days
