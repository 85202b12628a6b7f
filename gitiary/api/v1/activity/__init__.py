"""Activity API endpoints package.

This package exposes the analytics engine over HTTP:
- Impact (line/file churn) view
- Repository comparison table
- Rolling-window repository summaries
- Year/month heatmap
- Story summary with highlight days
"""

from fastapi import APIRouter

from .comparison import router as comparison_router
from .heatmap import router as heatmap_router
from .impact import router as impact_router
from .repos import router as repos_router
from .story import router as story_router

# Compose the main router
router = APIRouter(prefix="/activity", tags=["activity"])
router.include_router(impact_router)
router.include_router(comparison_router)
router.include_router(repos_router)
router.include_router(heatmap_router)
router.include_router(story_router)

__all__ = ["router"]
