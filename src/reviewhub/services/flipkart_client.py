"""Flipkart page transport and review markup extraction."""

import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import SelectorConstants
from ..core.errors import ParseError, TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = (429,)


class ReviewPage:
    """A fetched document, queried with the fixed review selectors."""
    
    def __init__(
        self,
        soup: BeautifulSoup,
        review_selector: str = SelectorConstants.REVIEW_BLOCK,
        marker_selector: str = SelectorConstants.MORE_REVIEWS_MARKER
    ):
        self.soup = soup
        self.review_selector = review_selector
        self.marker_selector = marker_selector
    
    @classmethod
    def from_html(cls, html: str, **selectors) -> "ReviewPage":
        try:
            soup = BeautifulSoup(html, SelectorConstants.HTML_PARSER)
        except Exception as e:
            raise ParseError(f"Failed to parse document: {e}") from e
        return cls(soup, **selectors)
    
    def _select(self, selector: str):
        try:
            return self.soup.select(selector)
        except SelectorSyntaxError as e:
            raise ParseError(f"Invalid selector {selector!r}: {e}") from e
    
    def review_count(self) -> int:
        """Number of review blocks on the page."""
        return len(self._select(self.review_selector))
    
    def review_texts(self) -> List[str]:
        """Concatenated inner text of every review block, in document order."""
        return [
            block.get_text().strip()
            for block in self._select(self.review_selector)
        ]
    
    def has_more_reviews(self) -> bool:
        """Whether the page links to a fuller review listing."""
        return len(self._select(self.marker_selector)) > 0


class FlipkartClient:
    """Sequential HTTP client for Flipkart product and review pages."""
    
    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.max_retries = max(1, max_retries if max_retries is not None else settings.max_retries)
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": settings.accept_header,
            "User-Agent": user_agent or settings.user_agent,
        })
    
    def __enter__(self) -> "FlipkartClient":
        return self
    
    def __exit__(self, *exc_info) -> None:
        self.close()
    
    def close(self) -> None:
        self.session.close()
    
    def _get(self, url: str) -> str:
        response = self.session.get(url, timeout=self.timeout)
        if response.status_code in RETRYABLE_STATUSES or response.status_code >= 500:
            response.raise_for_status()
        elif response.status_code >= 400:
            # Error pages carry no review blocks, so a listing that has run out ends normally
            logger.info(f"{url} returned HTTP {response.status_code}, parsing body as an empty page")
        return response.text
    
    def fetch_html(self, url: str) -> str:
        """GET url and return the body, retrying transport errors a bounded number of times."""
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.retry_delay, max=self.retry_delay * settings.retry_backoff * 10),
            retry=retry_if_exception_type(requests.RequestException),
            reraise=True
        )
        try:
            for attempt in retrying:
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.warning(f"Retrying {url} (attempt {attempt.retry_state.attempt_number}/{self.max_retries})")
                    return self._get(url)
        except requests.RequestException as e:
            logger.error(f"Request for {url} failed: {e}")
            raise TransportError(url, str(e)) from e
    
    def get_page(self, url: str) -> ReviewPage:
        """Fetch url and wrap the document for review extraction."""
        logger.debug(f"Fetching {url}")
        return ReviewPage.from_html(self.fetch_html(url))
