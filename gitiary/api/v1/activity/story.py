"""Activity API: Story endpoint."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query

from gitiary.config import settings
from gitiary.schemas.activity import RepoDatasetIn
from gitiary.services.activity.story import build_story_summary

from .utils import to_dataset

router = APIRouter()


@router.post("/story")
async def get_story(
    payload: list[RepoDatasetIn],
    period_days: int | None = Query(None, ge=0, description="Length of the summarized period"),
) -> dict[str, Any]:
    """Summarize the period across repositories and flag exceptional days.

    Daily series must already be limited to the period.
    """
    days = settings.story_period_days if period_days is None else period_days
    summary = build_story_summary([to_dataset(repo) for repo in payload], days)
    return asdict(summary)
