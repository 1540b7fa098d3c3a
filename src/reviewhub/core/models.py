"""Data models for ReviewHub."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .constants import SentimentConstants


class Sentiment(Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"

    @classmethod
    def from_score(cls, score: float) -> "Sentiment":
        """Classify a compound score using the fixed symmetric thresholds."""
        if score >= SentimentConstants.POSITIVE_THRESHOLD:
            return cls.POSITIVE
        if score <= SentimentConstants.NEGATIVE_THRESHOLD:
            return cls.NEGATIVE
        return cls.NEUTRAL


class CrawlMode(Enum):
    SINGLE_PAGE = "single_page"  # one product detail page, never paginated
    MULTI_PAGE = "multi_page"  # review listing, fetched until a page comes back empty


@dataclass(frozen=True)
class ReviewRecord:
    """A single scored review."""
    text: str
    score: float
    sentiment: Sentiment

    def __post_init__(self):
        if not (SentimentConstants.MIN_SCORE <= self.score <= SentimentConstants.MAX_SCORE):
            raise ValueError(f"Invalid score: {self.score}. Must be in [-1.0, 1.0]")
        expected = Sentiment.from_score(self.score)
        if self.sentiment is not expected:
            raise ValueError(
                f"Sentiment {self.sentiment.value} is inconsistent with score {self.score} "
                f"(expected {expected.value})"
            )


@dataclass(frozen=True)
class AggregateReport:
    """Summary statistics over a whole corpus."""
    total: int
    positive_count: int
    negative_count: int
    neutral_count: int
    average_score: float
    average_sentiment: Sentiment


@dataclass(frozen=True)
class CrawlResult:
    """Outcome of one crawl: the ordered corpus plus what the crawl observed."""
    mode: CrawlMode
    reviews: Tuple[ReviewRecord, ...]
    pages_fetched: int
    more_reviews_available: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.reviews
