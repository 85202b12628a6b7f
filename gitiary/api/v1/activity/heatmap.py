"""Activity API: Heatmap endpoint."""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query

from gitiary.config import settings
from gitiary.schemas.activity import HeatmapIn
from gitiary.services.activity.heatmap import build_heat_year_data
from gitiary.services.activity.types import HeatDailyRow, HeatMonthRepoRow

router = APIRouter()


@router.post("/heatmap")
async def get_heatmap(
    payload: HeatmapIn,
    min_year: int | None = Query(None, description="Earliest selectable year"),
) -> dict[str, Any]:
    """Group daily and monthly-per-repo totals into a year → month → repo heatmap."""
    year = settings.min_heat_year if min_year is None else min_year

    years = build_heat_year_data(
        [HeatDailyRow(day=r.day, total_commits=r.total_commits) for r in payload.daily],
        [
            HeatMonthRepoRow(
                month=r.month,
                repo_id=r.repo_id,
                owner=r.owner,
                name=r.name,
                display_name=r.display_name,
                commits=r.commits,
            )
            for r in payload.months
        ],
        min_year=year,
    )
    return {"min_year": year, "years": [asdict(y) for y in years]}
