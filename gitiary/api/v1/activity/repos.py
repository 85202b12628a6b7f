"""Activity API: Repository list summary endpoint."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query

from gitiary.schemas.activity import RepoDatasetIn
from gitiary.services.activity.comparison import build_repo_summaries

from .utils import to_dataset, validate_reference_date

router = APIRouter()


@router.post("/repos/summary")
async def get_repo_summaries(
    payload: list[RepoDatasetIn],
    reference_date: str | None = Query(None, description="Last day of every window"),
) -> dict[str, Any]:
    """Commit totals per repository for the 7/30/90/180/360-day windows and all time."""
    summaries = build_repo_summaries(
        [to_dataset(repo) for repo in payload],
        reference_date=validate_reference_date(reference_date),
    )
    return {"repos": [asdict(s) for s in summaries]}
