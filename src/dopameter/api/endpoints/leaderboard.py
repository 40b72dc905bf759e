"""Leaderboard endpoint."""

from fastapi import APIRouter

from dopameter.schemas import LeaderboardEntry

from ..dependencies import ContentServiceDep

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("/{time_frame}", response_model=list[LeaderboardEntry])
async def get_leaderboard(time_frame: str, service: ContentServiceDep) -> list[LeaderboardEntry]:
    """Rank content created within the daily, weekly or monthly window."""
    return service.leaderboard(time_frame)
