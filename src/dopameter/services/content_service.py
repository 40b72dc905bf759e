"""Content, vote and favorite operations on top of a storage backend."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Final

from dopameter.core.errors import NotFoundError, ValidationError
from dopameter.db.time import utcnow
from dopameter.schemas import (
    ContentOut,
    ContentType,
    Emoji,
    EnrichedContent,
    FavoriteOut,
    FavoriteWithContent,
    LeaderboardEntry,
    LeaderboardTimeFrame,
    VoteOut,
)
from dopameter.storage import Storage

from . import ranking
from .aggregation import enrich

__all__ = ["IMPORTABLE_TYPES", "ContentService"]

logger = logging.getLogger(__name__)

# Linked content is rendered inline, so only media the client can embed is allowed.
IMPORTABLE_TYPES: Final[frozenset[ContentType]] = frozenset({ContentType.IMAGE, ContentType.VIDEO})


class ContentService:
    """Validation and orchestration for the content API.

    Every read re-derives statistics from the vote ledger.
    """

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    # Content ---------------------------------------------------------------

    def _enrich(self, content: ContentOut) -> EnrichedContent:
        return enrich(content, self.storage.votes_for(content.id))

    def list_content(self) -> list[EnrichedContent]:
        """Return all content with vote statistics."""
        return [self._enrich(content) for content in self.storage.list_content()]

    def get_content(self, content_id: int) -> EnrichedContent:
        """Return one enriched content item.

        Raises:
            NotFoundError: If no content has ``content_id``.
        """
        content = self.storage.get_content(content_id)
        if content is None:
            raise NotFoundError("Content", content_id)
        return self._enrich(content)

    def create_content(
        self,
        user_id: str,
        content_type: ContentType | str,
        url: str,
        *,
        created_at: datetime | None = None,
    ) -> EnrichedContent:
        """Register new content owned by ``user_id``."""
        if not url or not url.strip():
            raise ValidationError("URL is required")
        try:
            kind = ContentType(content_type)
        except ValueError as err:
            allowed = ", ".join(member.value for member in ContentType)
            raise ValidationError(f"Content type must be one of: {allowed}") from err

        content = self.storage.create_content(
            user_id=user_id,
            content_type=kind,
            url=url.strip(),
            created_at=created_at,
        )
        logger.info("Content %d (%s) created by %s", content.id, kind.value, user_id)
        return self._enrich(content)

    def import_content(
        self,
        user_id: str,
        url: str | None,
        content_type: str | None,
    ) -> EnrichedContent:
        """Register content hosted elsewhere; only images and videos qualify."""
        if not url or not url.strip():
            raise ValidationError("URL is required")
        if content_type not in {kind.value for kind in IMPORTABLE_TYPES}:
            raise ValidationError("Content type must be image or video")
        return self.create_content(user_id, content_type, url)

    # Votes -----------------------------------------------------------------

    def record_vote(self, content_id: int, user_id: str, emoji: Emoji | str | None) -> VoteOut:
        """Append a vote after checking the emoji and the content.

        Raises:
            ValidationError: If ``emoji`` is not one of the five reactions.
            NotFoundError: If the content does not exist. No vote is written.
        """
        try:
            reaction = Emoji(emoji)
        except ValueError as err:
            allowed = ", ".join(member.value for member in Emoji)
            raise ValidationError(f"Emoji must be one of: {allowed}") from err

        if self.storage.get_content(content_id) is None:
            raise NotFoundError("Content", content_id)

        vote = self.storage.create_vote(content_id=content_id, user_id=user_id, emoji=reaction)
        logger.info("Vote %d on content %d: %s", vote.id, content_id, reaction.name.lower())
        return vote

    # Rankings --------------------------------------------------------------

    def trending(self, limit: int) -> list[EnrichedContent]:
        return ranking.trending(self.list_content(), limit)

    def latest(self, limit: int) -> list[EnrichedContent]:
        return ranking.latest(self.list_content(), limit)

    def leaderboard(
        self,
        time_frame: LeaderboardTimeFrame | str,
        now: datetime | None = None,
    ) -> list[LeaderboardEntry]:
        moment = now or utcnow()
        # Validate before enriching everything.
        ranking.leaderboard_cutoff(time_frame, moment)
        return ranking.leaderboard(self.list_content(), time_frame, moment)

    # Favorites -------------------------------------------------------------

    def save_favorite(self, user_id: str, content_id: int) -> FavoriteOut:
        """Save content for ``user_id``; saving twice returns the same entry."""
        existing = self.storage.get_favorite(user_id, content_id)
        if existing is not None:
            return existing
        if self.storage.get_content(content_id) is None:
            raise NotFoundError("Content", content_id)
        favorite = self.storage.create_favorite(user_id=user_id, content_id=content_id)
        logger.info("Content %d saved by %s", content_id, user_id)
        return favorite

    def remove_favorite(self, user_id: str, content_id: int) -> None:
        self.storage.delete_favorite(user_id, content_id)

    def favorites_for(self, user_id: str) -> list[FavoriteWithContent]:
        """Return the user's favorites joined with their enriched content."""
        joined: list[FavoriteWithContent] = []
        for favorite in self.storage.favorites_for(user_id):
            content = self.storage.get_content(favorite.content_id)
            joined.append(
                FavoriteWithContent(
                    **favorite.model_dump(),
                    content=self._enrich(content) if content is not None else None,
                )
            )
        return joined
