"""Shared Pydantic types for API payloads and storage records."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dopameter.db.time import ensure_utc


class Emoji(str, Enum):
    """The five reactions a voter can cast, weakest first."""

    MID = "😐"
    MILD = "😊"
    SOLID = "😄"
    BRAIN_MELT = "🤯"
    LIQUIDATION = "🔥"


class ContentType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    MEME = "meme"
    TWEET = "tweet"
    OTHER = "other"


class LeaderboardTimeFrame(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ChartTimeFrame(str, Enum):
    HOURS_24 = "24H"
    DAYS_7 = "7D"
    DAYS_30 = "30D"


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either spelling."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
