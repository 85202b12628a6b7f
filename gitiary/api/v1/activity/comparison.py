"""Activity API: Repository comparison endpoint."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query

from gitiary.config import settings
from gitiary.core.exceptions import ValidationError
from gitiary.schemas.activity import RepoDatasetIn
from gitiary.services.activity.comparison import build_comparison_stats
from gitiary.services.activity.ranking import SORT_DIRECTIONS, SORT_FIELDS

from .utils import to_dataset, validate_reference_date

router = APIRouter()


@router.post("/comparison")
async def get_comparison(
    payload: list[RepoDatasetIn],
    period_days: int | None = Query(None, ge=0, description="Lookback used for regularity"),
    sort: str = Query("name", description="Sort field, e.g. name, total_commits, regularity"),
    direction: str = Query("asc", description="Sort direction: asc or desc"),
    reference_date: str | None = Query(None, description="Day streaks are measured from"),
) -> dict[str, Any]:
    """Compare consistency metrics (streaks, gaps, regularity) across repositories.

    Repositories without a first/last commit date sort last for date fields.
    """
    if sort not in SORT_FIELDS:
        raise ValidationError(f"Unknown sort field: {sort}")
    if direction not in SORT_DIRECTIONS:
        raise ValidationError(f"Unknown sort direction: {direction}")

    days = settings.comparison_period_days if period_days is None else period_days
    stats = build_comparison_stats(
        [to_dataset(repo) for repo in payload],
        period_days=days,
        reference_date=validate_reference_date(reference_date),
        sort_field=sort,  # type: ignore[arg-type]
        direction=direction,  # type: ignore[arg-type]
    )
    return asdict(stats)
