"""Core modules for ReviewHub."""

from .models import *
from .config import settings
from .errors import *
from .sentiment import ReviewRecordBuilder, VADERSentimentAnalyzer, classify_score
from .scoring import aggregate_reviews
from .text import normalize_text

__all__ = [
    "settings",
    "Sentiment",
    "CrawlMode",
    "ReviewRecord",
    "AggregateReport",
    "CrawlResult",
    "ReviewHubError",
    "SourceRejectedError",
    "CrawlFailedError",
    "TransportError",
    "ParseError",
    "CrawlBudgetExceeded",
    "EmptyCorpusError",
    "ReviewRecordBuilder",
    "VADERSentimentAnalyzer",
    "classify_score",
    "aggregate_reviews",
    "normalize_text",
]
