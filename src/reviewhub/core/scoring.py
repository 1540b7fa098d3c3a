"""Corpus aggregation."""

import logging
from typing import Sequence

from .errors import EmptyCorpusError
from .models import AggregateReport, ReviewRecord, Sentiment

logger = logging.getLogger(__name__)


def aggregate_reviews(reviews: Sequence[ReviewRecord]) -> AggregateReport:
    """Compute class counts and the average compound score of a corpus.

    The corpus must be non-empty; callers check for an empty crawl before
    aggregating.

    Raises:
        EmptyCorpusError: if ``reviews`` is empty.
    """
    if not reviews:
        raise EmptyCorpusError("Cannot aggregate an empty corpus")
    
    counts = {sentiment: 0 for sentiment in Sentiment}
    score_sum = 0.0
    for review in reviews:
        counts[review.sentiment] += 1
        score_sum += review.score
    
    total = len(reviews)
    average_score = score_sum / total
    report = AggregateReport(
        total=total,
        positive_count=counts[Sentiment.POSITIVE],
        negative_count=counts[Sentiment.NEGATIVE],
        neutral_count=counts[Sentiment.NEUTRAL],
        average_score=average_score,
        average_sentiment=Sentiment.from_score(average_score),
    )
    
    logger.info(
        f"Aggregated {total} reviews: {report.positive_count} positive, "
        f"{report.negative_count} negative, {report.neutral_count} neutral "
        f"(avg={average_score:.4f})"
    )
    return report
