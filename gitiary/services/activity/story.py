"""Cross-repository story: totals, standout repositories and highlight days."""

import logging
import statistics
from collections import defaultdict
from collections.abc import Callable, Sequence

from .streaks import longest_streak, regularity, total_commits
from .types import HighlightDay, RepoDataset, RepoHighlight, StorySummary

logger = logging.getLogger(__name__)

HIGHLIGHT_SIGMA = 1.5
HIGHLIGHT_LIMIT = 5


def _pick_repo(
    datasets: Sequence[RepoDataset],
    metric: Callable[[RepoDataset], float],
) -> RepoDataset | None:
    """Dataset with the highest metric; the first one seen wins ties.

    Returns None when the best value is 0.
    """
    best: RepoDataset | None = None
    best_value: float = 0
    for dataset in datasets:
        value = metric(dataset)
        if value > best_value:
            best, best_value = dataset, value
    return best


def _highlight(dataset: RepoDataset | None, period_days: int) -> RepoHighlight | None:
    if dataset is None:
        return None
    repo = dataset.repo
    return RepoHighlight(
        id=repo.id,
        owner=repo.owner,
        name=repo.name,
        display_name=repo.display_name,
        commits=total_commits(dataset.daily),
        regularity=regularity(dataset.daily, period_days),
    )


def find_highlight_days(datasets: Sequence[RepoDataset]) -> list[HighlightDay]:
    """Days whose combined commits exceed mean + 1.5 standard deviations.

    Mean and population standard deviation are taken over days with any
    activity. Results are ordered by commits (desc, then day) and capped.
    """
    totals: dict[str, int] = defaultdict(int)
    contributors: dict[str, list[str]] = defaultdict(list)
    for dataset in datasets:
        for entry in dataset.daily:
            if entry.commits <= 0:
                continue
            totals[entry.day] += entry.commits
            if dataset.repo.label not in contributors[entry.day]:
                contributors[entry.day].append(dataset.repo.label)

    if not totals:
        return []

    values = list(totals.values())
    mean = statistics.fmean(values)
    stddev = statistics.pstdev(values)
    threshold = mean + HIGHLIGHT_SIGMA * stddev

    outliers = sorted(
        (day for day, commits in totals.items() if commits > threshold),
        key=lambda day: (-totals[day], day),
    )
    return [
        HighlightDay(day=day, commits=totals[day], repos=contributors[day])
        for day in outliers[:HIGHLIGHT_LIMIT]
    ]


def build_story_summary(datasets: Sequence[RepoDataset], period_days: int) -> StorySummary:
    """Summarize activity across repositories for the story page.

    Series are used as supplied; callers pre-filter them to the period.
    """
    active_day_set = {
        entry.day for dataset in datasets for entry in dataset.daily if entry.commits > 0
    }

    most_active = _pick_repo(datasets, lambda d: total_commits(d.daily))
    most_consistent = _pick_repo(datasets, lambda d: regularity(d.daily, period_days))
    highlights = find_highlight_days(datasets)

    logger.debug(
        f"Story over {len(datasets)} repos / {period_days}d: "
        f"{len(active_day_set)} active days, {len(highlights)} highlights"
    )

    return StorySummary(
        total_commits=sum(total_commits(d.daily) for d in datasets),
        active_days=len(active_day_set),
        total_days=period_days,
        most_active_repo=_highlight(most_active, period_days),
        most_consistent_repo=_highlight(most_consistent, period_days),
        longest_streak=max((longest_streak(d.daily) for d in datasets), default=0),
        highlights=highlights,
    )
