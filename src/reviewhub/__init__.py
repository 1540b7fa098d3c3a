"""ReviewHub - Flipkart review crawling and sentiment analysis."""

__version__ = "0.1.0"
__author__ = "ReviewHub Team"

from .core.models import *
from .core.config import settings
from .core.scoring import aggregate_reviews
from .core.sentiment import ReviewRecordBuilder, VADERSentimentAnalyzer
from .services.flipkart_client import FlipkartClient
from .services.review_pipeline import ReviewPipeline

__all__ = [
    "settings",
    "aggregate_reviews",
    "ReviewRecordBuilder",
    "VADERSentimentAnalyzer",
    "FlipkartClient",
    "ReviewPipeline",
]
