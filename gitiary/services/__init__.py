# Services package

from gitiary.services.activity import (
    build_comparison_stats,
    build_heat_year_data,
    build_impact_view,
    build_repo_summaries,
    build_story_summary,
)

__all__ = [
    "build_comparison_stats",
    "build_heat_year_data",
    "build_impact_view",
    "build_repo_summaries",
    "build_story_summary",
]
