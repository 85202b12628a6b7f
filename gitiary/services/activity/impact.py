"""Impact view: line/file churn summary, top days, largest commits, repo rollups."""

import logging
from collections.abc import Callable, Sequence

from .date_range import (
    ALL_RANGE,
    day_span_inclusive,
    filter_by_day_inclusive,
    resolve_range_start,
    today_utc,
)
from .types import (
    CommitRecord,
    DailyEntry,
    DailyImpactEntry,
    ImpactData,
    ImpactDailyRow,
    ImpactLargestCommitRow,
    ImpactRange,
    ImpactRepoRow,
    ImpactSummary,
    ImpactTopDayRow,
    ImpactView,
    RepoDataset,
)

logger = logging.getLogger(__name__)

TOP_DAYS_LIMIT = 5
LARGEST_COMMITS_LIMIT = 10


def _per_commit(total: int, commits: int) -> float:
    return total / commits if commits > 0 else 0.0


def _to_daily_row(entry: DailyImpactEntry) -> ImpactDailyRow:
    return ImpactDailyRow(
        day=entry.day,
        commits=entry.commits,
        additions=entry.additions,
        deletions=entry.deletions,
        files_changed=entry.files_changed,
        net=entry.additions - entry.deletions,
        total_changes=entry.additions + entry.deletions,
    )


def _top_days(
    rows: Sequence[ImpactDailyRow],
    metric: Callable[[ImpactDailyRow], int],
) -> list[ImpactTopDayRow]:
    """Highest-metric days first; equal metrics fall back to the earlier day."""
    ranked = sorted(rows, key=lambda row: (-metric(row), row.day))
    return [
        ImpactTopDayRow(
            day=row.day,
            commits=row.commits,
            total_changes=row.total_changes,
            files_changed=row.files_changed,
        )
        for row in ranked[:TOP_DAYS_LIMIT]
    ]


def _largest_commits(candidates: list[ImpactLargestCommitRow]) -> list[ImpactLargestCommitRow]:
    """Biggest commits by total line changes; later commits win ties."""
    ranked = sorted(candidates, key=lambda c: (c.total_changes, c.committed_at), reverse=True)
    return ranked[:LARGEST_COMMITS_LIMIT]


def _commit_row(dataset: RepoDataset, commit: CommitRecord) -> ImpactLargestCommitRow:
    repo = dataset.repo
    return ImpactLargestCommitRow(
        repo_id=repo.id,
        owner=repo.owner,
        name=repo.name,
        display_name=repo.display_name,
        sha=commit.sha,
        day=commit.day,
        committed_at=commit.committed_at,
        message=commit.message,
        additions=commit.additions,
        deletions=commit.deletions,
        files_changed=commit.files_changed,
        total_changes=commit.additions + commit.deletions,
    )


def _repo_row(dataset: RepoDataset, daily: Sequence[DailyEntry]) -> ImpactRepoRow:
    """Sum a repository's windowed series; an empty window yields an all-zero row."""
    commits = sum(d.commits for d in daily)
    additions = sum(getattr(d, "additions", 0) for d in daily)
    deletions = sum(getattr(d, "deletions", 0) for d in daily)
    files_changed = sum(getattr(d, "files_changed", 0) for d in daily)
    repo = dataset.repo

    return ImpactRepoRow(
        id=repo.id,
        owner=repo.owner,
        name=repo.name,
        display_name=repo.display_name,
        commits=commits,
        additions=additions,
        deletions=deletions,
        net=additions - deletions,
        files_changed=files_changed,
        avg_lines_per_commit=_per_commit(additions + deletions, commits),
        avg_files_per_commit=_per_commit(files_changed, commits),
    )


def _summarize(daily_rows: Sequence[ImpactDailyRow]) -> ImpactSummary:
    """Totals over the windowed combined series (rows must be sorted by day)."""
    total_commits = sum(row.commits for row in daily_rows)
    lines_added = sum(row.additions for row in daily_rows)
    lines_deleted = sum(row.deletions for row in daily_rows)
    files_changed = sum(row.files_changed for row in daily_rows)
    first_commit_date = daily_rows[0].day if daily_rows else None
    last_commit_date = daily_rows[-1].day if daily_rows else None

    return ImpactSummary(
        total_commits=total_commits,
        first_commit_date=first_commit_date,
        last_commit_date=last_commit_date,
        active_days=sum(1 for row in daily_rows if row.commits > 0),
        total_days=day_span_inclusive(first_commit_date, last_commit_date),
        lines_added=lines_added,
        lines_deleted=lines_deleted,
        net_change=lines_added - lines_deleted,
        files_changed=files_changed,
        avg_lines_per_commit=_per_commit(lines_added + lines_deleted, total_commits),
        avg_files_per_commit=_per_commit(files_changed, total_commits),
    )


def build_impact_view(
    data: ImpactData,
    range_: ImpactRange,
    reference_date: str | None = None,
) -> ImpactView:
    """Build the impact view for the selected range.

    A numeric range keeps days in ``[start, reference_date]``; "all" keeps
    everything. Every repository gets a row, even one with nothing in range.

    Args:
        data: Combined daily impact series and per-repository datasets
        range_: Window size in days (7, 30, 90, 180, 360) or "all"
        reference_date: Last day of the window; defaults to today (UTC)
    """
    reference = reference_date or today_utc()
    start_day = resolve_range_start(range_, reference)
    end_day = None if range_ == ALL_RANGE else reference

    daily_rows = sorted(
        (_to_daily_row(e) for e in filter_by_day_inclusive(data.daily, start_day, end_day)),
        key=lambda row: row.day,
    )

    repo_rows: list[ImpactRepoRow] = []
    candidates: list[ImpactLargestCommitRow] = []
    for dataset in data.repos:
        repo_daily = filter_by_day_inclusive(dataset.daily, start_day, end_day)
        repo_rows.append(_repo_row(dataset, repo_daily))
        candidates.extend(
            _commit_row(dataset, commit)
            for commit in filter_by_day_inclusive(dataset.commits, start_day, end_day)
        )

    repo_rows.sort(key=lambda row: (-row.net, row.name.lower(), row.name))

    logger.debug(
        f"Impact view for range={range_} ending {reference}: "
        f"{len(daily_rows)} days, {len(repo_rows)} repos, {len(candidates)} commits"
    )

    return ImpactView(
        summary=_summarize(daily_rows),
        daily_rows=daily_rows,
        top_by_commits=_top_days(daily_rows, lambda row: row.commits),
        top_by_changes=_top_days(daily_rows, lambda row: row.total_changes),
        top_by_files=_top_days(daily_rows, lambda row: row.files_changed),
        largest_commits=_largest_commits(candidates),
        repo_rows=repo_rows,
    )
