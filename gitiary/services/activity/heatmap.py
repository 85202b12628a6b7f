"""Reshape pre-aggregated commit rows into a year → month → repo heatmap."""

import logging
from collections import defaultdict
from collections.abc import Sequence

from .types import HeatDailyRow, HeatDay, HeatMonth, HeatMonthRepo, HeatMonthRepoRow, HeatYear

logger = logging.getLogger(__name__)


def _year_of(key: str) -> int:
    """Year from a ``YYYY-MM-DD`` day or ``YYYY-MM`` month key."""
    return int(key[:4])


def build_heat_year_data(
    daily_rows: Sequence[HeatDailyRow],
    month_rows: Sequence[HeatMonthRepoRow],
    min_year: int,
) -> list[HeatYear]:
    """Group daily and monthly-per-repo totals by calendar year.

    Years come newest first, each with its days in calendar order and its
    months newest first. Repos within a month are ordered by commits (desc),
    then owner and name. Zero-commit rows are dropped. When nothing is left,
    a single empty entry for ``min_year`` is returned so there is always a
    year to select.
    """
    days_by_year: dict[int, list[HeatDay]] = defaultdict(list)
    for row in daily_rows:
        if row.total_commits <= 0:
            continue
        days_by_year[_year_of(row.day)].append(
            HeatDay(day=row.day, total_commits=row.total_commits)
        )

    repos_by_month: dict[str, list[HeatMonthRepo]] = defaultdict(list)
    for row in month_rows:
        if row.commits <= 0:
            continue
        repos_by_month[row.month].append(
            HeatMonthRepo(
                repo_id=row.repo_id,
                owner=row.owner,
                name=row.name,
                display_name=row.display_name,
                commits=row.commits,
            )
        )

    months_by_year: dict[int, list[HeatMonth]] = defaultdict(list)
    for month in sorted(repos_by_month, reverse=True):
        repos = sorted(repos_by_month[month], key=lambda r: (-r.commits, r.owner, r.name))
        months_by_year[_year_of(month)].append(
            HeatMonth(
                month=month,
                total_commits=sum(r.commits for r in repos),
                repos=repos,
            )
        )

    years = sorted(set(days_by_year) | set(months_by_year), reverse=True)
    if not years:
        logger.debug(f"No heatmap activity, defaulting to {min_year}")
        return [HeatYear(year=min_year, daily=[], months=[])]

    return [
        HeatYear(
            year=year,
            daily=sorted(days_by_year.get(year, []), key=lambda d: d.day),
            months=months_by_year.get(year, []),
        )
        for year in years
    ]
