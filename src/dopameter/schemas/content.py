"""Content-related Pydantic schemas."""

from pydantic import Field

from .common import CamelModel, ContentType, Emoji, UtcDatetime


class ContentOut(CamelModel):
    """Stored content record."""

    id: int
    user_id: str
    type: ContentType
    url: str
    created_at: UtcDatetime


class EnrichedContent(ContentOut):
    """Content plus vote statistics derived from the ledger at read time."""

    total_votes: int = 0
    average_rating: float = 0.0
    top_emoji: Emoji = Emoji.MID


class LeaderboardEntry(EnrichedContent):
    """Enriched content with its 1-based leaderboard position."""

    rank: int = Field(..., ge=1)


class ContentImport(CamelModel):
    """Body of an import-by-URL request.

    Both fields are optional here so that missing values surface as the
    service's own 400 messages rather than schema errors.
    """

    url: str | None = None
    type: str | None = None
