"""API endpoint modules."""

from .auth import router as auth_router
from .chart import router as chart_router
from .content import router as content_router
from .favorites import router as favorites_router
from .leaderboard import router as leaderboard_router

__all__ = [
    "auth_router",
    "chart_router",
    "content_router",
    "favorites_router",
    "leaderboard_router",
]
