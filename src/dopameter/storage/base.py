"""Storage interface shared by the in-memory and SQL backends."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from dopameter.schemas import (
    ChartSeries,
    ChartTimeFrame,
    ContentOut,
    ContentType,
    Emoji,
    FavoriteOut,
    VoteOut,
)

__all__ = ["Storage"]


class Storage(ABC):
    """Content registry, vote ledger, favorites index and chart cache.

    Implementations only persist and fetch records. Existence checks,
    idempotent favorites and aggregation live in the service layer so both
    backends behave identically.
    """

    # Content registry -------------------------------------------------------

    @abstractmethod
    def create_content(
        self,
        *,
        user_id: str,
        content_type: ContentType,
        url: str,
        created_at: datetime | None = None,
    ) -> ContentOut:
        """Insert content with the next sequential id."""

    @abstractmethod
    def get_content(self, content_id: int) -> ContentOut | None:
        """Return content by id, or None."""

    @abstractmethod
    def list_content(self) -> list[ContentOut]:
        """Return every content record; callers impose their own order."""

    # Vote ledger ------------------------------------------------------------

    @abstractmethod
    def create_vote(
        self,
        *,
        content_id: int,
        user_id: str,
        emoji: Emoji,
        created_at: datetime | None = None,
    ) -> VoteOut:
        """Append a vote to the ledger."""

    @abstractmethod
    def votes_for(self, content_id: int) -> list[VoteOut]:
        """Return the votes on ``content_id`` in insertion order."""

    # Favorites index --------------------------------------------------------

    @abstractmethod
    def get_favorite(self, user_id: str, content_id: int) -> FavoriteOut | None:
        """Return the favorite for the pair, or None."""

    @abstractmethod
    def create_favorite(self, *, user_id: str, content_id: int) -> FavoriteOut:
        """Insert a favorite; returns the existing row if the pair is taken."""

    @abstractmethod
    def delete_favorite(self, user_id: str, content_id: int) -> None:
        """Remove the favorite for the pair if present."""

    @abstractmethod
    def favorites_for(self, user_id: str) -> list[FavoriteOut]:
        """Return the user's favorites in insertion order."""

    # Chart cache ------------------------------------------------------------

    @abstractmethod
    def get_chart(self, time_frame: ChartTimeFrame) -> ChartSeries | None:
        """Return the memoized series for ``time_frame``, or None."""

    @abstractmethod
    def put_chart(self, series: ChartSeries) -> ChartSeries:
        """Memoize ``series``; the first stored series for a frame wins."""

    # Lifecycle --------------------------------------------------------------

    @abstractmethod
    def reset(self) -> None:
        """Drop all content, votes and favorites and restart id counters."""

    def is_empty(self) -> bool:
        """Return True when no content has been registered."""
        return not self.list_content()

    def close(self) -> None:
        """Release backend resources."""
