"""
Lexicon-based review polarity.

This is a keyword heuristic, not real NLP sentiment. Each review contributes
(distinct positive words found) - (distinct negative words found); the total is
averaged over the reviews and clamped to [-1, 1].
"""

import re
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from . import settings


class Lexicon(BaseModel):
    """
    Immutable word lists for polarity counting.

    By default a word matches anywhere in the lowercased text, so "badly"
    counts as "bad". Set `whole_words=True` to require word boundaries.
    """

    model_config = ConfigDict(frozen=True)

    positive: frozenset[str] = Field(
        default_factory=lambda: frozenset(settings.POSITIVE_WORDS)
    )
    negative: frozenset[str] = Field(
        default_factory=lambda: frozenset(settings.NEGATIVE_WORDS)
    )
    whole_words: bool = False

    def hits(self, text: str, words: Iterable[str]) -> int:
        lowered = text.lower()
        if self.whole_words:
            return sum(
                1
                for word in words
                if re.search(rf"\b{re.escape(word.lower())}\b", lowered)
            )
        return sum(1 for word in words if word.lower() in lowered)


DEFAULT_LEXICON = Lexicon()


def _review_text(review: Any) -> str:
    if isinstance(review, BaseModel):
        review = review.model_dump(by_alias=True)
    if isinstance(review, Mapping):
        text = review.get("Review")
    else:
        text = review
    return text if isinstance(text, str) else ""


def score_text(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    """Polarity delta of a single review."""
    return lexicon.hits(text, lexicon.positive) - lexicon.hits(text, lexicon.negative)


def score(reviews: Iterable[Any], lexicon: Lexicon = DEFAULT_LEXICON) -> float:
    """
    Average polarity over reviews, clamped to [-1, 1]. Zero when there are none.
    Reviews may be ReviewRecords, decoded rows, or plain strings.
    """
    reviews = list(reviews)
    if not reviews:
        return 0.0

    total_delta = sum(score_text(_review_text(review), lexicon) for review in reviews)
    return max(-1.0, min(1.0, total_delta / len(reviews)))
