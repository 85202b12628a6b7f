"""
Tests for the impact view builder.

Tests cover:
- All-time summary, rankings and repo rows
- Range filtering (including repos with nothing in range)
- Tie-breaks for top days and largest commits
- Guarded averages on empty data
"""

from dataclasses import asdict

from gitiary.services.activity.impact import build_impact_view
from gitiary.services.activity.types import (
    CommitRecord,
    DailyImpactEntry,
    ImpactData,
    RepoDataset,
    RepoRef,
)


class TestImpactAllTime:
    """Range "all" over the sample data."""

    def test_summary(self, impact_data) -> None:
        summary = build_impact_view(impact_data, "all", "2026-01-10").summary

        assert summary.total_commits == 6
        assert summary.lines_added == 45
        assert summary.lines_deleted == 20
        assert summary.net_change == 25
        assert summary.files_changed == 12
        assert summary.first_commit_date == "2026-01-01"
        assert summary.last_commit_date == "2026-01-10"
        assert summary.active_days == 3
        assert summary.total_days == 10
        assert summary.avg_lines_per_commit == 65 / 6
        assert summary.avg_files_per_commit == 2

    def test_rankings(self, impact_data) -> None:
        view = build_impact_view(impact_data, "all", "2026-01-10")

        assert view.top_by_commits[0].day == "2026-01-01"
        assert view.top_by_changes[0].total_changes == 40
        assert [row.day for row in view.top_by_files] == ["2026-01-01", "2026-01-10", "2026-01-02"]
        assert view.largest_commits[0].sha == "a2"
        assert [c.sha for c in view.largest_commits] == ["a2", "a1", "b1"]

    def test_repo_rows_sorted_by_net(self, impact_data) -> None:
        rows = build_impact_view(impact_data, "all", "2026-01-10").repo_rows

        assert [r.name for r in rows] == ["repo-a", "repo-b"]
        assert rows[0].net == 17
        assert rows[1].net == 8
        assert rows[1].display_name == "Repo B"

    def test_daily_rows_carry_net_and_total_changes(self, impact_data) -> None:
        rows = build_impact_view(impact_data, "all", "2026-01-10").daily_rows

        assert [r.day for r in rows] == ["2026-01-01", "2026-01-02", "2026-01-10"]
        assert rows[0].net == 20
        assert rows[0].total_changes == 40

    def test_view_is_json_ready(self, impact_data) -> None:
        payload = asdict(build_impact_view(impact_data, "all", "2026-01-10"))
        assert payload["summary"]["total_commits"] == 6
        assert isinstance(payload["repo_rows"], list)


class TestImpactRangeFilter:
    """Range 7 ending 2026-01-10 keeps only 2026-01-04..2026-01-10."""

    def test_summary_only_counts_window(self, impact_data) -> None:
        view = build_impact_view(impact_data, 7, "2026-01-10")

        assert view.summary.total_commits == 2
        assert view.summary.lines_added == 10
        assert view.summary.lines_deleted == 8
        assert len(view.daily_rows) == 1
        assert view.daily_rows[0].day == "2026-01-10"
        assert view.summary.total_days == 1

    def test_keeps_zeroed_repos(self, impact_data) -> None:
        """A repository idle in the window still gets an all-zero row."""
        rows = build_impact_view(impact_data, 7, "2026-01-10").repo_rows

        repo_b = next(r for r in rows if r.name == "repo-b")
        assert len(rows) == 2
        assert repo_b.commits == 0
        assert repo_b.additions == 0
        assert repo_b.deletions == 0
        assert repo_b.net == 0
        assert repo_b.files_changed == 0
        assert repo_b.avg_lines_per_commit == 0
        assert repo_b.avg_files_per_commit == 0

    def test_largest_commits_respect_window(self, impact_data) -> None:
        view = build_impact_view(impact_data, 7, "2026-01-10")

        assert len(view.largest_commits) == 1
        assert view.largest_commits[0].sha == "a2"

    def test_excludes_days_after_reference(self, impact_data) -> None:
        view = build_impact_view(impact_data, 7, "2026-01-02")

        assert [r.day for r in view.daily_rows] == ["2026-01-01", "2026-01-02"]
        assert view.summary.total_commits == 4

    def test_does_not_mutate_input(self, impact_data) -> None:
        build_impact_view(impact_data, 7, "2026-01-10")
        assert len(impact_data.daily) == 3
        assert len(impact_data.repos[1].daily) == 2


class TestImpactOrdering:
    def test_top_days_tie_break_on_earlier_day(self) -> None:
        data = ImpactData(
            daily=[DailyImpactEntry(f"2026-01-{d:02d}", 2) for d in range(7, 0, -1)],
            repos=[],
        )
        top = build_impact_view(data, "all", "2026-01-07").top_by_commits

        assert [row.day for row in top] == [f"2026-01-0{d}" for d in range(1, 6)]

    def test_largest_commits_tie_break_on_later_timestamp(self) -> None:
        repo = RepoRef(id=1, owner="o", name="r")
        commits = [
            CommitRecord(f"c{i}", "2026-01-01", f"2026-01-01T{i:02d}:00:00Z", "m", 5, 5, 1)
            for i in range(12)
        ]
        data = ImpactData(daily=[], repos=[RepoDataset(repo=repo, commits=commits)])

        largest = build_impact_view(data, "all", "2026-01-01").largest_commits
        assert len(largest) == 10
        assert largest[0].sha == "c11"
        assert largest[-1].sha == "c2"

    def test_repo_rows_tie_break_on_name(self) -> None:
        data = ImpactData(
            daily=[],
            repos=[
                RepoDataset(repo=RepoRef(id=1, owner="o", name="beta")),
                RepoDataset(repo=RepoRef(id=2, owner="o", name="alpha")),
            ],
        )
        rows = build_impact_view(data, 30, "2026-01-01").repo_rows
        assert [r.name for r in rows] == ["alpha", "beta"]

    def test_repo_rows_name_tie_break_ignores_case(self) -> None:
        data = ImpactData(
            daily=[],
            repos=[
                RepoDataset(repo=RepoRef(id=1, owner="o", name="Zeta")),
                RepoDataset(repo=RepoRef(id=2, owner="o", name="alpha")),
                RepoDataset(repo=RepoRef(id=3, owner="o", name="Beta")),
            ],
        )
        rows = build_impact_view(data, 30, "2026-01-01").repo_rows
        assert [r.name for r in rows] == ["alpha", "Beta", "Zeta"]


class TestImpactEmpty:
    def test_empty_inputs(self) -> None:
        view = build_impact_view(ImpactData(daily=[], repos=[]), 90, "2026-01-10")

        assert view.summary.total_commits == 0
        assert view.summary.first_commit_date is None
        assert view.summary.last_commit_date is None
        assert view.summary.total_days == 0
        assert view.summary.avg_lines_per_commit == 0
        assert view.summary.avg_files_per_commit == 0
        assert view.top_by_commits == []
        assert view.largest_commits == []
        assert view.repo_rows == []
