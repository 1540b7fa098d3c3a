"""Console report formatting."""

from typing import List

from ..core.constants import ReportConstants, SentimentConstants
from ..core.models import AggregateReport, CrawlResult, ReviewRecord

MORE_REVIEWS_NOTE = "More reviews available on the reviews page."


def _field(label: str, value) -> str:
    return f"{label:<{ReportConstants.LABEL_WIDTH}}: {value}"


def format_score(score: float) -> str:
    """Shortest decimal form of a score; whole numbers print without a fractional part."""
    if float(score).is_integer():
        return f"{score:.0f}"
    return repr(float(score))


def rule() -> str:
    return ReportConstants.RULE_CHAR * ReportConstants.RULE_WIDTH


def format_review(review: ReviewRecord) -> str:
    lines = [
        "Review:",
        review.text,
        _field("Score", format_score(review.score)),
        _field("Sentiment", review.sentiment.value),
        rule(),
    ]
    return "\n".join(lines)


def format_summary(report: AggregateReport) -> str:
    """Aggregate block; the average is shown at compound-score precision."""
    lines = [
        _field("Total Reviews", report.total),
        _field("Number of Positive Reviews", report.positive_count),
        _field("Number of Negative Reviews", report.negative_count),
        _field("Number of Neutral Reviews", report.neutral_count),
        _field("Average Sentiment Score", format_score(round(report.average_score, SentimentConstants.DISPLAY_PRECISION))),
        _field("Average Sentiment", report.average_sentiment.value),
    ]
    return "\n".join(lines)


def format_report(result: CrawlResult, report: AggregateReport) -> str:
    sections: List[str] = [format_review(review) for review in result.reviews]
    if result.more_reviews_available:
        sections.append(f"\n{MORE_REVIEWS_NOTE}\n")
    sections.append(format_summary(report))
    return "\n".join(sections)
