"""Favorites listing for the current actor."""

from fastapi import APIRouter

from dopameter.schemas import FavoriteWithContent

from ..dependencies import ContentServiceDep, CurrentActorDep

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[FavoriteWithContent])
async def list_favorites(
    service: ContentServiceDep,
    actor: CurrentActorDep,
) -> list[FavoriteWithContent]:
    """Return the caller's saved content."""
    return service.favorites_for(actor)
