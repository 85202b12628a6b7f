"""Activity API: Impact endpoint."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query

from gitiary.config import settings
from gitiary.schemas.activity import ImpactDataIn
from gitiary.services.activity.impact import build_impact_view
from gitiary.services.activity.types import ImpactData

from .utils import parse_range, to_daily_entries, to_dataset, validate_reference_date

router = APIRouter()


@router.post("/impact")
async def get_impact(
    payload: ImpactDataIn,
    range_: str | None = Query(
        None, alias="range", description="Time range: 7, 30, 90, 180, 360 or all"
    ),
    reference_date: str | None = Query(None, description="Last day of the window (YYYY-MM-DD)"),
) -> dict[str, Any]:
    """Build the impact view (line/file churn) for the selected range.

    Returns:
    - Summary totals and averages for the window
    - Top 5 days by commits, line changes and files changed
    - Top 10 largest commits
    - One row per repository, including repositories idle in the window
    """
    selected = parse_range(range_, settings.default_impact_range)
    data = ImpactData(
        daily=to_daily_entries(payload.daily),
        repos=[to_dataset(repo) for repo in payload.repos],
    )

    view = build_impact_view(data, selected, validate_reference_date(reference_date))
    return asdict(view)
