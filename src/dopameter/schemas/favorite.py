"""Favorite-related Pydantic schemas."""

from .common import CamelModel, MessageResponse, UtcDatetime
from .content import EnrichedContent


class FavoriteOut(CamelModel):
    id: int
    user_id: str
    content_id: int
    created_at: UtcDatetime


class FavoriteWithContent(FavoriteOut):
    """A favorite joined with the enriched content it points at."""

    content: EnrichedContent | None = None


class SaveResponse(MessageResponse):
    saved: bool
