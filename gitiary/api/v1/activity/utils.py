"""Shared utilities for Activity API endpoints."""

import logging

from gitiary.core.exceptions import ValidationError
from gitiary.schemas.activity import DailyEntryIn, RepoDatasetIn
from gitiary.services.activity.date_range import ALL_RANGE, RANGE_CHOICES, parse_day
from gitiary.services.activity.types import (
    CommitRecord,
    DailyImpactEntry,
    ImpactRange,
    RepoDataset,
    RepoRef,
)

logger = logging.getLogger(__name__)


def _coerce_range(raw: str | None) -> ImpactRange | None:
    if raw == ALL_RANGE:
        return ALL_RANGE
    try:
        parsed = int(raw or "")
    except ValueError:
        return None
    return parsed if parsed in RANGE_CHOICES else None  # type: ignore[return-value]


def parse_range(raw: str | None, default: str) -> ImpactRange:
    """Convert a range query value to a range selector.

    Args:
        raw: "all", or one of "7", "30", "90", "180", "360"
        default: Value to fall back to when raw is missing or unrecognized

    Returns:
        A numeric range or "all" (90 if the default itself is unusable)
    """
    selected = _coerce_range(raw)
    if selected is not None:
        return selected

    if raw:
        logger.info(f"Unrecognized range {raw!r}, using default {default!r}")
    fallback = _coerce_range(default)
    return fallback if fallback is not None else 90


def validate_reference_date(raw: str | None) -> str | None:
    """Ensure an optional reference date is a real YYYY-MM-DD day."""
    if raw is None:
        return None
    try:
        return parse_day(raw).isoformat()
    except ValueError:
        raise ValidationError(f"reference_date must be YYYY-MM-DD, got {raw!r}") from None


def to_daily_entries(rows: list[DailyEntryIn]) -> list[DailyImpactEntry]:
    return [
        DailyImpactEntry(
            day=row.day,
            commits=row.commits,
            additions=row.additions,
            deletions=row.deletions,
            files_changed=row.files_changed,
        )
        for row in rows
    ]


def to_dataset(payload: RepoDatasetIn) -> RepoDataset:
    """Convert a validated request body into the engine's input dataclass."""
    return RepoDataset(
        repo=RepoRef(
            id=payload.repo.id,
            owner=payload.repo.owner,
            name=payload.repo.name,
            display_name=payload.repo.display_name,
        ),
        daily=to_daily_entries(payload.daily),
        commits=[
            CommitRecord(
                sha=c.sha,
                day=c.day,
                committed_at=c.committed_at,
                message=c.message,
                additions=c.additions,
                deletions=c.deletions,
                files_changed=c.files_changed,
            )
            for c in payload.commits
        ],
        first_commit_date=payload.first_commit_date,
        last_commit_date=payload.last_commit_date,
    )
