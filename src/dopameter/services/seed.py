"""Demo content for local development (``SEED_DEMO_DATA=true``)."""
from __future__ import annotations

import logging
import random
from typing import Final

from dopameter.schemas import ChartTimeFrame, ContentType, Emoji

from .chart import ChartService
from .content_service import ContentService

__all__ = ["DEMO_USER_ID", "SAMPLE_URLS", "seed_demo_data"]

logger = logging.getLogger(__name__)

DEMO_USER_ID: Final[str] = "demo-user-1"

_UNSPLASH_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=500"
SAMPLE_URLS: Final[tuple[str, ...]] = tuple(
    f"https://images.unsplash.com/{photo}{_UNSPLASH_PARAMS}"
    for photo in (
        "photo-1583511655857-d19b40a7a54e",
        "photo-1559757175-5700dde675bc",
        "photo-1550684848-fac1c5b4e853",
        "photo-1501386761578-eac5c94b800a",
        "photo-1531427186611-ecfd6d936c79",
        "photo-1566837945700-30057527ade0",
    )
)

_SAMPLE_TYPES: Final[tuple[ContentType, ...]] = (
    ContentType.MEME,
    ContentType.IMAGE,
    ContentType.TWEET,
    ContentType.VIDEO,
)


def seed_demo_data(
    content_service: ContentService,
    chart_service: ChartService,
    rng: random.Random | None = None,
) -> bool:
    """Populate an empty store with sample content, votes and favorites.

    Returns:
        True if data was written, False if the store already had content.
    """
    if not content_service.storage.is_empty():
        logger.info("Skipping demo seed: storage already has content")
        return False

    rng = rng or random.Random()
    emojis = list(Emoji)
    created = [
        content_service.create_content(DEMO_USER_ID, _SAMPLE_TYPES[index % len(_SAMPLE_TYPES)], url)
        for index, url in enumerate(SAMPLE_URLS)
    ]
    for content in created:
        for _ in range(10 + rng.randrange(40)):
            content_service.record_vote(content.id, DEMO_USER_ID, rng.choice(emojis))

    content_service.save_favorite(DEMO_USER_ID, created[0].id)
    content_service.save_favorite(DEMO_USER_ID, created[2].id)

    for time_frame in ChartTimeFrame:
        chart_service.get(time_frame)

    logger.info("Seeded %d demo content items", len(created))
    return True
