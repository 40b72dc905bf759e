"""HTTP API for Dopameter."""

from .endpoints import (
    auth_router,
    chart_router,
    content_router,
    favorites_router,
    leaderboard_router,
)

__all__ = [
    "auth_router",
    "chart_router",
    "content_router",
    "favorites_router",
    "leaderboard_router",
]
