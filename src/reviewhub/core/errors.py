"""Exception hierarchy for ReviewHub."""


class ReviewHubError(Exception):
    """Base class for all ReviewHub errors."""


class SourceRejectedError(ReviewHubError):
    """The input URL is neither a product page nor a review listing."""

    def __init__(self, url: str):
        super().__init__(f"Unrecognized review source: {url!r}")
        self.url = url


class CrawlFailedError(ReviewHubError):
    """A page could not be fetched or parsed; the whole crawl is aborted."""


class TransportError(CrawlFailedError):
    """HTTP request failed after all retry attempts."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class ParseError(CrawlFailedError):
    """A fetched document or a selector could not be parsed."""


class CrawlBudgetExceeded(CrawlFailedError):
    """The listing did not run out of reviews within the configured page budget."""

    def __init__(self, max_pages: int):
        super().__init__(f"Crawl budget of {max_pages} pages exhausted before the listing ended")
        self.max_pages = max_pages


class EmptyCorpusError(ReviewHubError):
    """Aggregation was requested over zero reviews."""
