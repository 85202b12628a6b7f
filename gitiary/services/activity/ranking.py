"""Sorting for the repository comparison table."""

from collections.abc import Callable, Sequence
from operator import attrgetter
from typing import Any, Literal

from .types import ComparisonRepo, SortDirection

SortField = Literal[
    "name",
    "first_commit_date",
    "last_commit_date",
    "total_commits",
    "active_days",
    "regularity",
    "max_gap",
    "current_streak",
    "longest_streak",
]

NULLABLE_DATE_FIELDS = {"first_commit_date", "last_commit_date"}
NUMERIC_FIELDS = {
    "total_commits",
    "active_days",
    "regularity",
    "max_gap",
    "current_streak",
    "longest_streak",
}
SORT_FIELDS = {"name"} | NULLABLE_DATE_FIELDS | NUMERIC_FIELDS
SORT_DIRECTIONS = {"asc", "desc"}


def _identity_key(repo: ComparisonRepo) -> str:
    return f"{repo.owner}/{repo.name}".lower()


def sort_repos(
    repos: Sequence[ComparisonRepo],
    field: SortField,
    direction: SortDirection,
) -> list[ComparisonRepo]:
    """Return repos ordered by field, leaving the input untouched.

    The sort is stable. Null dates always come last, whichever direction is
    requested; direction only orders the non-null values.
    """
    if field not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field: {field!r}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unsupported sort direction: {direction!r}")

    reverse = direction == "desc"

    if field in NULLABLE_DATE_FIELDS:
        present = [r for r in repos if getattr(r, field) is not None]
        missing = [r for r in repos if getattr(r, field) is None]
        present.sort(key=lambda r: getattr(r, field), reverse=reverse)
        return present + missing

    key: Callable[[ComparisonRepo], Any] = (
        _identity_key if field == "name" else attrgetter(field)
    )

    # list.sort with reverse=True keeps equal elements in input order
    return sorted(repos, key=key, reverse=reverse)
