"""Per-repository comparison rows and rolling-window summaries."""

import logging
from collections.abc import Sequence

from .date_range import RANGE_CHOICES, filter_by_day_inclusive, resolve_range_start, today_utc
from .ranking import SortField, sort_repos
from .streaks import (
    active_days,
    current_streak,
    longest_streak,
    max_gap,
    regularity,
    total_commits,
)
from .types import ComparisonRepo, ComparisonStats, RepoDataset, RepoSummary, SortDirection

logger = logging.getLogger(__name__)

DEFAULT_COMPARISON_DAYS = 360


def build_comparison_row(
    dataset: RepoDataset,
    period_days: int,
    reference_date: str,
) -> ComparisonRepo:
    """Compute consistency metrics for one repository.

    The daily series is used as supplied; callers fetch it for the period.
    """
    repo = dataset.repo
    return ComparisonRepo(
        id=repo.id,
        owner=repo.owner,
        name=repo.name,
        display_name=repo.display_name,
        total_commits=total_commits(dataset.daily),
        active_days=active_days(dataset.daily),
        regularity=regularity(dataset.daily, period_days),
        max_gap=max_gap(dataset.daily),
        current_streak=current_streak(dataset.daily, reference_date),
        longest_streak=longest_streak(dataset.daily),
        first_commit_date=dataset.first_commit_date,
        last_commit_date=dataset.last_commit_date,
    )


def build_comparison_stats(
    datasets: Sequence[RepoDataset],
    period_days: int = DEFAULT_COMPARISON_DAYS,
    reference_date: str | None = None,
    sort_field: SortField = "name",
    direction: SortDirection = "asc",
) -> ComparisonStats:
    """Build the comparison table for all repositories, ordered for display."""
    reference = reference_date or today_utc()
    rows = [build_comparison_row(d, period_days, reference) for d in datasets]
    logger.debug(f"Built {len(rows)} comparison rows over {period_days}d ending {reference}")

    return ComparisonStats(
        period=f"{period_days}d",
        repos=sort_repos(rows, sort_field, direction),
    )


def build_repo_summaries(
    datasets: Sequence[RepoDataset],
    reference_date: str | None = None,
) -> list[RepoSummary]:
    """Commit totals per repository for every catalog window plus all time.

    Rows keep input order.
    """
    reference = reference_date or today_utc()
    window_starts = {days: resolve_range_start(days, reference) for days in RANGE_CHOICES}

    summaries: list[RepoSummary] = []
    for dataset in datasets:
        windowed = {
            days: total_commits(filter_by_day_inclusive(dataset.daily, start, reference))
            for days, start in window_starts.items()
        }
        repo = dataset.repo
        summaries.append(
            RepoSummary(
                id=repo.id,
                owner=repo.owner,
                name=repo.name,
                display_name=repo.display_name,
                commits_7d=windowed[7],
                commits_30d=windowed[30],
                commits_90d=windowed[90],
                commits_180d=windowed[180],
                commits_360d=windowed[360],
                commits_all=total_commits(dataset.daily),
            )
        )

    return summaries
