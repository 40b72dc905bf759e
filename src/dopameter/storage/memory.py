"""In-process storage backed by plain dictionaries."""
from __future__ import annotations

import itertools
from datetime import datetime
from threading import Lock

from dopameter.db.time import utcnow
from dopameter.schemas import (
    ChartSeries,
    ChartTimeFrame,
    ContentOut,
    ContentType,
    Emoji,
    FavoriteOut,
    VoteOut,
)

from .base import Storage

__all__ = ["MemoryStorage"]


class MemoryStorage(Storage):
    """Non-durable storage for tests, demos and single-process deployments.

    A single lock makes each operation atomic; nothing spans operations.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._content: dict[int, ContentOut] = {}
        self._votes: dict[int, VoteOut] = {}
        self._favorites: dict[int, FavoriteOut] = {}
        self._charts: dict[ChartTimeFrame, ChartSeries] = {}
        self._reset_counters()

    def _reset_counters(self) -> None:
        self._content_ids = itertools.count(start=1)
        self._vote_ids = itertools.count(start=1)
        self._favorite_ids = itertools.count(start=1)

    def create_content(
        self,
        *,
        user_id: str,
        content_type: ContentType,
        url: str,
        created_at: datetime | None = None,
    ) -> ContentOut:
        with self._lock:
            content = ContentOut(
                id=next(self._content_ids),
                user_id=user_id,
                type=content_type,
                url=url,
                created_at=created_at or utcnow(),
            )
            self._content[content.id] = content
            return content

    def get_content(self, content_id: int) -> ContentOut | None:
        with self._lock:
            return self._content.get(content_id)

    def list_content(self) -> list[ContentOut]:
        with self._lock:
            return list(self._content.values())

    def create_vote(
        self,
        *,
        content_id: int,
        user_id: str,
        emoji: Emoji,
        created_at: datetime | None = None,
    ) -> VoteOut:
        with self._lock:
            vote = VoteOut(
                id=next(self._vote_ids),
                content_id=content_id,
                user_id=user_id,
                emoji=emoji,
                created_at=created_at or utcnow(),
            )
            self._votes[vote.id] = vote
            return vote

    def votes_for(self, content_id: int) -> list[VoteOut]:
        with self._lock:
            return [vote for vote in self._votes.values() if vote.content_id == content_id]

    def _find_favorite(self, user_id: str, content_id: int) -> FavoriteOut | None:
        for favorite in self._favorites.values():
            if favorite.user_id == user_id and favorite.content_id == content_id:
                return favorite
        return None

    def get_favorite(self, user_id: str, content_id: int) -> FavoriteOut | None:
        with self._lock:
            return self._find_favorite(user_id, content_id)

    def create_favorite(self, *, user_id: str, content_id: int) -> FavoriteOut:
        with self._lock:
            existing = self._find_favorite(user_id, content_id)
            if existing is not None:
                return existing
            favorite = FavoriteOut(
                id=next(self._favorite_ids),
                user_id=user_id,
                content_id=content_id,
                created_at=utcnow(),
            )
            self._favorites[favorite.id] = favorite
            return favorite

    def delete_favorite(self, user_id: str, content_id: int) -> None:
        with self._lock:
            favorite = self._find_favorite(user_id, content_id)
            if favorite is not None:
                del self._favorites[favorite.id]

    def favorites_for(self, user_id: str) -> list[FavoriteOut]:
        with self._lock:
            return [fav for fav in self._favorites.values() if fav.user_id == user_id]

    def get_chart(self, time_frame: ChartTimeFrame) -> ChartSeries | None:
        with self._lock:
            return self._charts.get(time_frame)

    def put_chart(self, series: ChartSeries) -> ChartSeries:
        with self._lock:
            return self._charts.setdefault(series.time_frame, series)

    def reset(self) -> None:
        with self._lock:
            self._content.clear()
            self._votes.clear()
            self._favorites.clear()
            self._reset_counters()

