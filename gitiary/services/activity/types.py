"""Type definitions for activity analytics inputs and views.

Inputs are built fresh per request from persistence rows. Views are frozen
and serialize with ``dataclasses.asdict`` without further transformation.
"""

from dataclasses import dataclass, field
from typing import Literal

ImpactRange = Literal[7, 30, 90, 180, 360, "all"]
SortDirection = Literal["asc", "desc"]

# ─────────────────────────────────────────────────────────────
# Inputs
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RepoRef:
    """Repository identity."""

    id: int
    owner: str
    name: str
    display_name: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def label(self) -> str:
        """Name shown to users: the display name if set, otherwise the repo name."""
        return self.display_name or self.name


@dataclass(frozen=True)
class DailyEntry:
    """Commit count for one repository on one day."""

    day: str  # YYYY-MM-DD
    commits: int


@dataclass(frozen=True)
class DailyImpactEntry(DailyEntry):
    """Daily commit count plus line and file churn."""

    additions: int = 0
    deletions: int = 0
    files_changed: int = 0


@dataclass(frozen=True)
class CommitRecord:
    """A single commit with its churn stats."""

    sha: str
    day: str  # YYYY-MM-DD, derived from committed_at
    committed_at: str  # UTC, YYYY-MM-DDTHH:MM:SSZ; compared as a string
    message: str
    additions: int = 0
    deletions: int = 0
    files_changed: int = 0


@dataclass(frozen=True)
class RepoDataset:
    """Everything the engine knows about one repository for a request."""

    repo: RepoRef
    daily: list[DailyEntry] = field(default_factory=list)
    commits: list[CommitRecord] = field(default_factory=list)
    first_commit_date: str | None = None  # over all history
    last_commit_date: str | None = None  # over all history


@dataclass(frozen=True)
class ImpactData:
    """Combined daily impact series plus per-repository datasets."""

    daily: list[DailyImpactEntry]
    repos: list[RepoDataset]


@dataclass(frozen=True)
class HeatDailyRow:
    """Combined commits across active repositories for one day."""

    day: str
    total_commits: int


@dataclass(frozen=True)
class HeatMonthRepoRow:
    """Commits for one repository in one month."""

    month: str  # YYYY-MM
    repo_id: int
    owner: str
    name: str
    commits: int
    display_name: str | None = None


# ─────────────────────────────────────────────────────────────
# Impact views
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ImpactSummary:
    total_commits: int
    first_commit_date: str | None
    last_commit_date: str | None
    active_days: int
    total_days: int
    lines_added: int
    lines_deleted: int
    net_change: int
    files_changed: int
    avg_lines_per_commit: float
    avg_files_per_commit: float


@dataclass(frozen=True)
class ImpactDailyRow:
    day: str
    commits: int
    additions: int
    deletions: int
    files_changed: int
    net: int
    total_changes: int


@dataclass(frozen=True)
class ImpactTopDayRow:
    day: str
    commits: int
    total_changes: int
    files_changed: int


@dataclass(frozen=True)
class ImpactLargestCommitRow:
    repo_id: int
    owner: str
    name: str
    display_name: str | None
    sha: str
    day: str
    committed_at: str
    message: str
    additions: int
    deletions: int
    files_changed: int
    total_changes: int


@dataclass(frozen=True)
class ImpactRepoRow:
    id: int
    owner: str
    name: str
    display_name: str | None
    commits: int
    additions: int
    deletions: int
    net: int
    files_changed: int
    avg_lines_per_commit: float
    avg_files_per_commit: float


@dataclass(frozen=True)
class ImpactView:
    """Response structure for the impact page."""

    summary: ImpactSummary
    daily_rows: list[ImpactDailyRow]
    top_by_commits: list[ImpactTopDayRow]
    top_by_changes: list[ImpactTopDayRow]
    top_by_files: list[ImpactTopDayRow]
    largest_commits: list[ImpactLargestCommitRow]
    repo_rows: list[ImpactRepoRow]


# ─────────────────────────────────────────────────────────────
# Comparison views
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ComparisonRepo:
    """Per-repository consistency metrics for the compare table."""

    id: int
    owner: str
    name: str
    display_name: str | None
    total_commits: int
    active_days: int
    regularity: float
    max_gap: int
    current_streak: int
    longest_streak: int
    first_commit_date: str | None = None
    last_commit_date: str | None = None


@dataclass(frozen=True)
class ComparisonStats:
    period: str  # e.g. "360d"
    repos: list[ComparisonRepo]


@dataclass(frozen=True)
class RepoSummary:
    """Rolling-window commit totals for the repository list."""

    id: int
    owner: str
    name: str
    display_name: str | None
    commits_7d: int
    commits_30d: int
    commits_90d: int
    commits_180d: int
    commits_360d: int
    commits_all: int


# ─────────────────────────────────────────────────────────────
# Heatmap views
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HeatDay:
    day: str
    total_commits: int


@dataclass(frozen=True)
class HeatMonthRepo:
    repo_id: int
    owner: str
    name: str
    display_name: str | None
    commits: int


@dataclass(frozen=True)
class HeatMonth:
    month: str  # YYYY-MM
    total_commits: int
    repos: list[HeatMonthRepo]


@dataclass(frozen=True)
class HeatYear:
    year: int
    daily: list[HeatDay]
    months: list[HeatMonth]


# ─────────────────────────────────────────────────────────────
# Story views
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RepoHighlight:
    """A repository singled out in the story, with the metric that earned it."""

    id: int
    owner: str
    name: str
    display_name: str | None
    commits: int
    regularity: float


@dataclass(frozen=True)
class HighlightDay:
    """A day whose combined commit count is an outlier."""

    day: str
    commits: int
    repos: list[str]


@dataclass(frozen=True)
class StorySummary:
    total_commits: int
    active_days: int
    total_days: int
    most_active_repo: RepoHighlight | None
    most_consistent_repo: RepoHighlight | None
    longest_streak: int
    highlights: list[HighlightDay]
