"""Vote-related Pydantic schemas."""

from .common import CamelModel, Emoji, UtcDatetime


class VoteCreate(CamelModel):
    """Schema for casting a vote; the emoji is checked by the service."""

    emoji: str | None = None


class VoteOut(CamelModel):
    """A recorded vote."""

    id: int
    content_id: int
    user_id: str
    emoji: Emoji
    created_at: UtcDatetime
