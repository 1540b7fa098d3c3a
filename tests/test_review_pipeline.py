"""Tests for mode detection and the page fetch loop."""

import pytest
from unittest.mock import Mock

from reviewhub.core.errors import CrawlBudgetExceeded, SourceRejectedError, TransportError
from reviewhub.core.models import CrawlMode, Sentiment
from reviewhub.core.sentiment import ReviewRecordBuilder
from reviewhub.services.flipkart_client import FlipkartClient
from reviewhub.services.review_pipeline import ReviewPipeline, detect_mode, page_url
from tests.conftest import LISTING_URL, PRODUCT_URL, FakeClient, StubOracle, make_review_html


def _listing_pages(*pages):
    """Map page=1..N listing URLs to pages of review texts."""
    return {page_url(LISTING_URL, n): make_review_html(texts) for n, texts in enumerate(pages, 1)}


class TestModeDetection:
    
    def test_product_page(self):
        assert detect_mode(PRODUCT_URL) is CrawlMode.SINGLE_PAGE
    
    def test_review_listing(self):
        assert detect_mode(LISTING_URL) is CrawlMode.MULTI_PAGE
    
    def test_product_marker_checked_first(self):
        assert detect_mode("https://www.flipkart.com/a/p/itm1/product-reviews/x") is CrawlMode.SINGLE_PAGE
    
    @pytest.mark.parametrize("url", [
        "https://www.amazon.in/dp/B0123/product-reviews/",
        "https://www.flipkart.com/search?q=phone",
        "",
    ])
    def test_unrecognized(self, url):
        assert detect_mode(url) is None
    
    def test_page_url_appends_page_param(self):
        assert page_url(LISTING_URL, 1) == LISTING_URL + "&page=1"
        assert page_url(LISTING_URL, 12) == LISTING_URL + "&page=12"


class TestListingCrawl:
    """Test multi-page mode."""
    
    def test_three_two_zero_pages(self):
        """Test that pages of [3, 2, 0] reviews give 5 records from exactly 3 fetches."""
        client = FakeClient(_listing_pages(["a1", "a2", "a3"], ["b1", "b2"], []))
        pipeline = ReviewPipeline(client, ReviewRecordBuilder(StubOracle()))
        
        result = pipeline.run(LISTING_URL)
        
        assert [r.text for r in result.reviews] == ["a1", "a2", "a3", "b1", "b2"]
        assert client.requested == [page_url(LISTING_URL, n) for n in (1, 2, 3)]
        assert result.pages_fetched == 3
        assert result.mode is CrawlMode.MULTI_PAGE
    
    def test_first_page_empty(self):
        client = FakeClient({})
        result = ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run(LISTING_URL)
        
        assert result.is_empty
        assert client.requested == [page_url(LISTING_URL, 1)]
    
    def test_iter_pages_yields_contiguous_blocks(self):
        client = FakeClient(_listing_pages(["a1"], ["b1", "b2"], ["c1"]))
        pipeline = ReviewPipeline(client, ReviewRecordBuilder(StubOracle()))
        
        pages = [(n, [r.text for r in records]) for n, records in pipeline.iter_pages(LISTING_URL)]
        
        assert pages == [(1, ["a1"]), (2, ["b1", "b2"]), (3, ["c1"])]
        assert len(client.requested) == 4
    
    def test_records_are_scored(self):
        oracle = StubOracle({"love it": 0.7, "hate it": -0.7})
        client = FakeClient(_listing_pages(["love it", "hate it", "meh"]))
        
        result = ReviewPipeline(client, ReviewRecordBuilder(oracle)).run(LISTING_URL)
        
        assert [r.sentiment for r in result.reviews] == [
            Sentiment.POSITIVE, Sentiment.NEGATIVE, Sentiment.NEUTRAL
        ]
    
    def test_budget_exceeded_aborts(self):
        client = FakeClient(_listing_pages(["a"], ["b"], ["c"]))
        pipeline = ReviewPipeline(client, ReviewRecordBuilder(StubOracle()), max_pages=2)
        
        with pytest.raises(CrawlBudgetExceeded):
            pipeline.run(LISTING_URL)
        assert len(client.requested) == 2
    
    def test_budget_not_hit_when_listing_ends(self):
        client = FakeClient(_listing_pages(["a"], ["b"]))
        pipeline = ReviewPipeline(client, ReviewRecordBuilder(StubOracle()), max_pages=3)
        assert len(pipeline.run(LISTING_URL).reviews) == 2
    
    def test_fetch_failure_mid_crawl_propagates(self):
        class FailingClient(FakeClient):
            def get_page(self, url):
                if url.endswith("page=2"):
                    raise TransportError(url, "connection reset")
                return super().get_page(url)
        
        client = FailingClient(_listing_pages(["a1"], ["b1"]))
        with pytest.raises(TransportError):
            ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run(LISTING_URL)


class TestProductPageCrawl:
    """Test single-page mode."""
    
    def test_single_fetch_without_page_param(self):
        client = FakeClient({PRODUCT_URL: make_review_html(["one", "two"])})
        result = ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run(PRODUCT_URL)
        
        assert client.requested == [PRODUCT_URL]
        assert [r.text for r in result.reviews] == ["one", "two"]
        assert result.mode is CrawlMode.SINGLE_PAGE
        assert not result.more_reviews_available
    
    def test_more_reviews_marker_is_not_followed(self):
        client = FakeClient({PRODUCT_URL: make_review_html(["one"], more_marker=True)})
        result = ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run(PRODUCT_URL)
        
        assert result.more_reviews_available
        assert client.requested == [PRODUCT_URL]
    
    def test_no_reviews(self):
        client = FakeClient({PRODUCT_URL: make_review_html([], more_marker=True)})
        result = ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run(PRODUCT_URL)
        
        assert result.is_empty
        assert result.pages_fetched == 1


def test_rejected_source_makes_no_requests():
    client = FakeClient({})
    with pytest.raises(SourceRejectedError):
        ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run("https://example.com/reviews")
    assert client.requested == []


def test_listing_ends_on_not_found_page():
    """Test that a 404 after the last listing page ends the crawl like an empty page."""
    def respond(url, timeout):
        response = Mock()
        if url == page_url(LISTING_URL, 1):
            response.status_code = 200
            response.text = make_review_html(["only review"])
        else:
            response.status_code = 404
            response.text = "<html><body>Not found</body></html>"
        return response
    
    session = Mock()
    session.headers = {}
    session.get.side_effect = respond
    client = FlipkartClient(max_retries=2, retry_delay=0, session=session)
    
    result = ReviewPipeline(client, ReviewRecordBuilder(StubOracle())).run(LISTING_URL)
    
    assert [r.text for r in result.reviews] == ["only review"]
    assert result.pages_fetched == 2
    assert session.get.call_count == 2
