"""Pydantic schemas for activity analytics requests.

The persistence layer posts its query results in these shapes. Counts are
validated as non-negative and days as real calendar dates here so the engine
can trust its inputs; the API layer converts them to the engine's dataclasses
before building a view.
"""

from datetime import UTC, date, datetime

from pydantic import BaseModel, Field, field_validator

DAY_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
MONTH_PATTERN = r"^\d{4}-\d{2}$"


def _check_day(value: str | None) -> str | None:
    """Reject pattern-shaped strings that are not real days (e.g. 2026-02-30)."""
    if value is not None:
        date.fromisoformat(value)
    return value


def _normalize_timestamp(value: str) -> str:
    """Rewrite an ISO 8601 timestamp as UTC ``YYYY-MM-DDTHH:MM:SSZ``.

    Naive timestamps are taken as UTC. The fixed-width form keeps string
    comparison in time order.
    """
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


# ─────────────────────────────────────────────────────────────
# Per-repository rows
# ─────────────────────────────────────────────────────────────


class RepoRefIn(BaseModel):
    """Repository identity."""

    id: int
    owner: str
    name: str
    display_name: str | None = Field(default=None, description="Presentation-only name override")


class DailyEntryIn(BaseModel):
    """Commits (and optional churn) for one repository on one day."""

    day: str = Field(pattern=DAY_PATTERN, description="Calendar day, YYYY-MM-DD")
    commits: int = Field(ge=0)
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    files_changed: int = Field(default=0, ge=0)

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        return _check_day(value)


class CommitRecordIn(BaseModel):
    """A single commit with its churn stats."""

    sha: str
    day: str = Field(pattern=DAY_PATTERN)
    committed_at: str = Field(description="ISO 8601 timestamp, normalized to UTC with a Z suffix")
    message: str = ""
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    files_changed: int = Field(default=0, ge=0)

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        return _check_day(value)

    @field_validator("committed_at")
    @classmethod
    def normalize_committed_at(cls, value: str) -> str:
        return _normalize_timestamp(value)


class RepoDatasetIn(BaseModel):
    """All rows for one repository."""

    repo: RepoRefIn
    daily: list[DailyEntryIn] = Field(default_factory=list)
    commits: list[CommitRecordIn] = Field(default_factory=list)
    first_commit_date: str | None = Field(
        default=None, pattern=DAY_PATTERN, description="First active day over all history"
    )
    last_commit_date: str | None = Field(
        default=None, pattern=DAY_PATTERN, description="Last active day over all history"
    )

    @field_validator("first_commit_date", "last_commit_date")
    @classmethod
    def validate_commit_dates(cls, value: str | None) -> str | None:
        return _check_day(value)


# ─────────────────────────────────────────────────────────────
# Request bodies
# ─────────────────────────────────────────────────────────────


class ImpactDataIn(BaseModel):
    """Combined daily series for all active repos plus each repo's rows."""

    daily: list[DailyEntryIn] = Field(default_factory=list)
    repos: list[RepoDatasetIn] = Field(default_factory=list)


class HeatDailyRowIn(BaseModel):
    day: str = Field(pattern=DAY_PATTERN)
    total_commits: int = Field(ge=0)

    @field_validator("day")
    @classmethod
    def validate_day(cls, value: str) -> str:
        return _check_day(value)


class HeatMonthRepoRowIn(BaseModel):
    month: str = Field(pattern=MONTH_PATTERN, description="Calendar month, YYYY-MM")
    repo_id: int
    owner: str
    name: str
    display_name: str | None = None
    commits: int = Field(ge=0)

    @field_validator("month")
    @classmethod
    def validate_month(cls, value: str) -> str:
        _check_day(f"{value}-01")
        return value


class HeatmapIn(BaseModel):
    """Pre-aggregated heatmap rows, already limited to the minimum year."""

    daily: list[HeatDailyRowIn] = Field(default_factory=list)
    months: list[HeatMonthRepoRowIn] = Field(default_factory=list)
