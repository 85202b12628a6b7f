"""Activity analytics engine.

Pure transforms from per-day and per-commit rows to dashboard views:
- Range windows and day arithmetic
- Streak, gap and regularity metrics
- Repository comparison tables and rolling-window summaries
- Impact (line/file churn) views
- Year/month/repo heatmaps
- Story summaries with outlier highlight days
"""

from .comparison import build_comparison_row, build_comparison_stats, build_repo_summaries
from .date_range import (
    ALL_RANGE,
    RANGE_CHOICES,
    day_span_inclusive,
    filter_by_day_inclusive,
    resolve_range_start,
    today_utc,
)
from .heatmap import build_heat_year_data
from .impact import build_impact_view
from .ranking import SORT_FIELDS, sort_repos
from .story import build_story_summary, find_highlight_days
from .streaks import current_streak, longest_streak, max_gap, regularity

__all__ = [
    "ALL_RANGE",
    "RANGE_CHOICES",
    "SORT_FIELDS",
    "build_comparison_row",
    "build_comparison_stats",
    "build_heat_year_data",
    "build_impact_view",
    "build_repo_summaries",
    "build_story_summary",
    "current_streak",
    "day_span_inclusive",
    "filter_by_day_inclusive",
    "find_highlight_days",
    "longest_streak",
    "max_gap",
    "regularity",
    "resolve_range_start",
    "sort_repos",
    "today_utc",
]
