"""Calendar-day arithmetic and range windows.

Days are ``YYYY-MM-DD`` strings. That format sorts lexicographically in day
order, so plain string comparison stands in for date comparison everywhere.
"""

from collections.abc import Iterable
from datetime import UTC, date, datetime, timedelta
from typing import Protocol, TypeVar

from .types import ImpactRange

RANGE_CHOICES: tuple[int, ...] = (7, 30, 90, 180, 360)
ALL_RANGE = "all"


class _HasDay(Protocol):
    @property
    def day(self) -> str: ...


RowT = TypeVar("RowT", bound=_HasDay)


def today_utc() -> str:
    """Current UTC calendar day."""
    return datetime.now(UTC).date().isoformat()


def parse_day(day: str) -> date:
    """Parse a ``YYYY-MM-DD`` string, raising ValueError on anything else."""
    return date.fromisoformat(day)


def shift_day(day: str, days: int) -> str:
    """Move a day by a whole number of calendar days (negative goes back)."""
    return (parse_day(day) + timedelta(days=days)).isoformat()


def days_between(earlier: str, later: str) -> int:
    """Signed number of calendar days from ``earlier`` to ``later``."""
    return (parse_day(later) - parse_day(earlier)).days


def resolve_range_start(range_: ImpactRange, reference_date: str | None = None) -> str | None:
    """Convert a range selector to the first day of its window.

    A numeric range covers the reference day and the ``range_ - 1`` days
    before it, so 7 means the reference day plus the 6 preceding days.

    Args:
        range_: One of RANGE_CHOICES, or "all"
        reference_date: Last day of the window; defaults to today (UTC)

    Returns:
        Inclusive start day, or None for "all" (no lower bound)
    """
    if range_ == ALL_RANGE:
        return None
    if range_ not in RANGE_CHOICES:
        raise ValueError(f"Unsupported range: {range_!r}")

    reference = reference_date or today_utc()
    return shift_day(reference, -(range_ - 1))


def filter_by_day_inclusive(
    rows: Iterable[RowT],
    start_day: str | None,
    end_day: str | None = None,
) -> list[RowT]:
    """Keep rows whose day falls within ``[start_day, end_day]``.

    Either bound may be None. Always returns a new list.
    """
    return [
        row
        for row in rows
        if (start_day is None or row.day >= start_day)
        and (end_day is None or row.day <= end_day)
    ]


def day_span_inclusive(first_day: str | None, last_day: str | None) -> int:
    """Number of calendar days from first_day to last_day, counting both ends."""
    if not first_day or not last_day:
        return 0
    return max(0, days_between(first_day, last_day) + 1)
