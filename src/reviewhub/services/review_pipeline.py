"""Review crawl orchestration: mode detection and the page fetch loop."""

import logging
from typing import Iterator, List, Optional, Protocol, Tuple

from ..core.constants import SourceConstants
from ..core.errors import CrawlBudgetExceeded, SourceRejectedError
from ..core.models import CrawlMode, CrawlResult, ReviewRecord
from ..core.sentiment import ReviewRecordBuilder

logger = logging.getLogger(__name__)


class PageSource(Protocol):
    """Fetches a URL and exposes its review blocks (see ``FlipkartClient``)."""

    def get_page(self, url: str):
        ...


def detect_mode(url: str) -> Optional[CrawlMode]:
    """Pick the crawl strategy from the URL shape, or None if it is not a review source."""
    if SourceConstants.SITE_DOMAIN not in url:
        return None
    if SourceConstants.PRODUCT_PAGE_MARKER in url:
        return CrawlMode.SINGLE_PAGE
    if SourceConstants.REVIEWS_PAGE_MARKER in url:
        return CrawlMode.MULTI_PAGE
    return None


def page_url(base_link: str, page_number: int) -> str:
    """Listing URL for a page; the page parameter is appended to the base link as-is."""
    return f"{base_link}&{SourceConstants.PAGE_PARAM}={page_number}"


class ReviewPipeline:
    """
    Crawls one review source and builds its ordered corpus.
    
    Pages are fetched strictly one after another. Each page's records form a
    contiguous block appended after the previous page's block, so the corpus
    order is page order, then document order within a page.
    """
    
    def __init__(self, client: PageSource, builder: ReviewRecordBuilder, max_pages: int = 0):
        """
        Args:
            client: Page source used for every fetch
            builder: Record builder applied to each extracted review text
            max_pages: Crawl budget for listings (0 = keep going until an empty page)
        """
        self.client = client
        self.builder = builder
        self.max_pages = max_pages
    
    def _build_records(self, page) -> List[ReviewRecord]:
        return [self.builder.build(text) for text in page.review_texts()]
    
    def iter_pages(self, base_link: str) -> Iterator[Tuple[int, List[ReviewRecord]]]:
        """
        Yield ``(page_number, records)`` for each non-empty listing page.
        
        Stops at the first page without review blocks. That empty page is
        still fetched; it is the only termination signal.
        """
        page_number = SourceConstants.FIRST_PAGE
        while True:
            if self.max_pages and page_number > self.max_pages:
                raise CrawlBudgetExceeded(self.max_pages)
            
            page = self.client.get_page(page_url(base_link, page_number))
            if page.review_count() == 0:
                logger.info(f"No reviews found on Page Number {page_number}!")
                return
            
            records = self._build_records(page)
            logger.info(f"Page Number {page_number} processed successfully!")
            yield page_number, records
            page_number += 1
    
    def crawl_listing(self, base_link: str) -> CrawlResult:
        """Crawl a paginated review listing until it runs dry."""
        collected: List[ReviewRecord] = []
        pages_with_reviews = 0
        for _, records in self.iter_pages(base_link):
            collected.extend(records)
            pages_with_reviews += 1
        reviews = tuple(collected)
        
        logger.info(f"Collected {len(reviews)} reviews from {pages_with_reviews} pages")
        return CrawlResult(
            mode=CrawlMode.MULTI_PAGE,
            reviews=reviews,
            pages_fetched=pages_with_reviews + 1
        )
    
    def crawl_product_page(self, url: str) -> CrawlResult:
        """Collect the reviews shown on a single product page."""
        page = self.client.get_page(url)
        if page.review_count() == 0:
            logger.info(f"No reviews found on {url}")
            return CrawlResult(mode=CrawlMode.SINGLE_PAGE, reviews=(), pages_fetched=1)
        
        reviews = tuple(self._build_records(page))
        more_available = page.has_more_reviews()
        if more_available:
            logger.info("Product page links to a longer review listing, not following it")
        return CrawlResult(
            mode=CrawlMode.SINGLE_PAGE,
            reviews=reviews,
            pages_fetched=1,
            more_reviews_available=more_available
        )
    
    def run(self, url: str) -> CrawlResult:
        """
        Crawl url in the mode its shape selects.
        
        Raises:
            SourceRejectedError: url is neither a product page nor a review listing
            CrawlFailedError: any page failed to fetch or parse
        """
        mode = detect_mode(url)
        if mode is None:
            raise SourceRejectedError(url)
        
        logger.info(f"Crawling {url} in {mode.value} mode")
        if mode is CrawlMode.SINGLE_PAGE:
            return self.crawl_product_page(url)
        return self.crawl_listing(url)
