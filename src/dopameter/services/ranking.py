"""Read-only orderings over enriched content."""
from __future__ import annotations

import calendar
from collections.abc import Iterable
from datetime import datetime, timedelta

from dopameter.core.errors import ValidationError
from dopameter.schemas import EnrichedContent, LeaderboardEntry, LeaderboardTimeFrame

__all__ = ["latest", "leaderboard", "leaderboard_cutoff", "trending"]


def _one_month_earlier(moment: datetime) -> datetime:
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def leaderboard_cutoff(time_frame: LeaderboardTimeFrame | str, now: datetime) -> datetime:
    """Return the earliest ``created_at`` included for ``time_frame``."""
    try:
        frame = LeaderboardTimeFrame(time_frame)
    except ValueError as err:
        raise ValidationError(
            "Time frame must be one of: daily, weekly, monthly"
        ) from err

    if frame is LeaderboardTimeFrame.DAILY:
        return now - timedelta(days=1)
    if frame is LeaderboardTimeFrame.WEEKLY:
        return now - timedelta(days=7)
    return _one_month_earlier(now)


def trending(items: Iterable[EnrichedContent], limit: int) -> list[EnrichedContent]:
    """Most voted first, then highest rated."""
    ordered = sorted(
        items,
        key=lambda item: (item.total_votes, item.average_rating),
        reverse=True,
    )
    return ordered[:limit]


def latest(items: Iterable[EnrichedContent], limit: int) -> list[EnrichedContent]:
    """Newest first."""
    return sorted(items, key=lambda item: item.created_at, reverse=True)[:limit]


def leaderboard(
    items: Iterable[EnrichedContent],
    time_frame: LeaderboardTimeFrame | str,
    now: datetime,
) -> list[LeaderboardEntry]:
    """Rank content created within ``time_frame`` by rating, then vote count.

    Ranks are contiguous and start at 1.
    """
    cutoff = leaderboard_cutoff(time_frame, now)
    recent = [item for item in items if item.created_at >= cutoff]
    recent.sort(key=lambda item: (item.average_rating, item.total_votes), reverse=True)
    return [
        LeaderboardEntry(**item.model_dump(), rank=position)
        for position, item in enumerate(recent, start=1)
    ]
