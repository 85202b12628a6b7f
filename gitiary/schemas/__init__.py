"""Pydantic schemas for API request/response validation."""

from gitiary.schemas.activity import (
    CommitRecordIn,
    DailyEntryIn,
    HeatDailyRowIn,
    HeatmapIn,
    HeatMonthRepoRowIn,
    ImpactDataIn,
    RepoDatasetIn,
    RepoRefIn,
)

__all__ = [
    "CommitRecordIn",
    "DailyEntryIn",
    "HeatDailyRowIn",
    "HeatMonthRepoRowIn",
    "HeatmapIn",
    "ImpactDataIn",
    "RepoDatasetIn",
    "RepoRefIn",
]
