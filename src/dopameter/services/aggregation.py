"""Per-content vote statistics derived from the ledger."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from dopameter.schemas import ContentOut, Emoji, EnrichedContent, VoteOut

__all__ = ["DEFAULT_TOP_EMOJI", "EMOJI_SCORES", "average_rating", "enrich", "top_emoji"]

EMOJI_SCORES: Final[dict[Emoji, int]] = {
    Emoji.MID: 1,
    Emoji.MILD: 2,
    Emoji.SOLID: 3,
    Emoji.BRAIN_MELT: 4,
    Emoji.LIQUIDATION: 5,
}

DEFAULT_TOP_EMOJI: Final[Emoji] = Emoji.MID


def average_rating(votes: Sequence[VoteOut]) -> float:
    """Mean ordinal score of ``votes``; 0.0 when there are none."""
    if not votes:
        return 0.0
    return sum(EMOJI_SCORES[vote.emoji] for vote in votes) / len(votes)


def top_emoji(votes: Sequence[VoteOut]) -> Emoji:
    """Most frequent emoji; on a tie the one seen first wins."""
    counts: dict[Emoji, int] = {}
    for vote in votes:
        counts[vote.emoji] = counts.get(vote.emoji, 0) + 1

    best = DEFAULT_TOP_EMOJI
    max_count = 0
    for emoji, count in counts.items():
        if count > max_count:
            best, max_count = emoji, count
    return best


def enrich(content: ContentOut, votes: Sequence[VoteOut]) -> EnrichedContent:
    """Attach vote count, mean rating and top emoji to ``content``.

    Args:
        content: The stored content record.
        votes: Every vote recorded against ``content``.

    Returns:
        A fresh EnrichedContent; nothing is cached.
    """
    return EnrichedContent(
        **content.model_dump(),
        total_votes=len(votes),
        average_rating=average_rating(votes),
        top_emoji=top_emoji(votes),
    )
