"""Sentiment scoring and review record construction."""

import logging
from typing import Protocol

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .models import ReviewRecord, Sentiment
from .text import normalize_text

logger = logging.getLogger(__name__)


class SentimentOracle(Protocol):
    """Anything that maps text to a compound polarity in [-1, 1]."""

    def polarity(self, text: str) -> float:
        ...


def classify_score(score: float) -> Sentiment:
    """Map a compound score to Positive, Negative or Neutral."""
    return Sentiment.from_score(score)


class VADERSentimentAnalyzer:
    """VADER sentiment analyzer."""
    
    def __init__(self):
        self.analyzer = SentimentIntensityAnalyzer()
    
    def polarity(self, text: str) -> float:
        """Return the VADER compound score of text."""
        scores = self.analyzer.polarity_scores(text)
        return float(scores['compound'])


class ReviewRecordBuilder:
    """Turns raw extracted review text into a scored, classified record."""
    
    def __init__(self, oracle: SentimentOracle):
        self.oracle = oracle
    
    def build(self, raw_text: str) -> ReviewRecord:
        text = normalize_text(raw_text)
        if not text:
            logger.debug("Review text is empty after normalization, keeping it")
        # Oracle errors propagate: a review that cannot be scored must not be skipped silently
        score = self.oracle.polarity(text)
        return ReviewRecord(text=text, score=score, sentiment=classify_score(score))
