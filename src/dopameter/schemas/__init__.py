"""
Pydantic schemas for API request/response models and storage records.

Responses are serialized with camelCase keys to match the web client.
"""

from .chart import ChartSeries
from .common import (
    ChartTimeFrame,
    ContentType,
    Emoji,
    LeaderboardTimeFrame,
    MessageResponse,
)
from .content import ContentImport, ContentOut, EnrichedContent, LeaderboardEntry
from .favorite import FavoriteOut, FavoriteWithContent, SaveResponse
from .vote import VoteCreate, VoteOut

__all__ = [
    "ChartSeries", "ChartTimeFrame",
    "ContentImport", "ContentOut", "ContentType", "EnrichedContent", "LeaderboardEntry",
    "Emoji", "LeaderboardTimeFrame", "MessageResponse",
    "FavoriteOut", "FavoriteWithContent", "SaveResponse",
    "VoteCreate", "VoteOut",
]
