"""Command-line interface for ReviewHub."""

import argparse
import logging
import sys
from typing import Optional

from .core.config import settings
from .core.constants import FileConstants
from .core.errors import CrawlFailedError, SourceRejectedError
from .core.scoring import aggregate_reviews
from .core.sentiment import ReviewRecordBuilder, VADERSentimentAnalyzer
from .services.flipkart_client import FlipkartClient
from .services.review_pipeline import ReviewPipeline
from .utils.data_prep import export_to_csv
from .utils.report import format_report

logger = logging.getLogger(__name__)

PROMPT = "Enter the product reviews page link: "
INCORRECT_SOURCE_MESSAGE = "Incorrect website!!\nPlease enter a Flipkart product review page link."
NO_REVIEWS_MESSAGE = "No reviews found for the product."


def setup_logging(log_level: Optional[str] = None):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, (log_level or settings.log_level).upper()),
        format=FileConstants.LOG_FORMAT
    )


def read_link() -> str:
    """Prompt the operator for the target URL."""
    return input(PROMPT).strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ReviewHub - Flipkart review sentiment analysis")
    parser.add_argument('url', nargs='?', help='Product page or product-reviews link (prompted for when omitted)')
    parser.add_argument('--out', default=settings.output_file, help=f'Output CSV file (default: {settings.output_file})')
    parser.add_argument('--max-pages', type=int, default=settings.max_pages,
                        help='Stop with an error after this many listing pages (0 = no limit)')
    parser.add_argument('--log-level', default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help='Logging level')
    return parser


def cmd_analyze(url: str, out: str, max_pages: int) -> None:
    """Crawl url, print the report and write the CSV."""
    with FlipkartClient() as client:
        pipeline = ReviewPipeline(
            client=client,
            builder=ReviewRecordBuilder(VADERSentimentAnalyzer()),
            max_pages=max_pages
        )
        try:
            result = pipeline.run(url)
        except SourceRejectedError:
            logger.info(f"Rejected source: {url}")
            print(INCORRECT_SOURCE_MESSAGE)
            return
    
    if result.is_empty:
        print(NO_REVIEWS_MESSAGE)
        return
    
    report = aggregate_reviews(result.reviews)
    print(format_report(result, report))
    export_to_csv(result.reviews, out)


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    
    try:
        url = args.url.strip() if args.url else read_link()
        cmd_analyze(url, args.out, args.max_pages)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        sys.exit(1)
    except CrawlFailedError as e:
        logger.error(f"Crawl failed: {e}")
        print(f"Crawl failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
