"""Shared test helpers for ReviewHub tests."""

from typing import Dict, List

from reviewhub.services.flipkart_client import ReviewPage

PRODUCT_URL = "https://www.flipkart.com/acme-phone/p/itm123?pid=ABC"
LISTING_URL = "https://www.flipkart.com/acme-phone/product-reviews/itm123?pid=ABC"


def make_review_html(texts: List[str], more_marker: bool = False) -> str:
    """Render a page in Flipkart's review markup."""
    blocks = "".join(
        f'<div class="col"><div class="ZmyHeo"><div><div class="">{text}</div></div></div></div>'
        for text in texts
    )
    marker = '<div class="_23J90q RcXBOT"><span>All 120 reviews</span></div>' if more_marker else ""
    return f"<html><body><div class='reviews'>{blocks}</div>{marker}</body></html>"


class StubOracle:
    """Deterministic oracle: fixed scores per text, a default otherwise."""

    def __init__(self, scores: Dict[str, float] = None, default: float = 0.0):
        self.scores = scores or {}
        self.default = default
        self.calls = []

    def polarity(self, text: str) -> float:
        self.calls.append(text)
        return self.scores.get(text, self.default)


class FakeClient:
    """Serves canned HTML per URL and records every fetch."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.requested = []

    def get_page(self, url: str) -> ReviewPage:
        self.requested.append(url)
        return ReviewPage.from_html(self.pages.get(url, make_review_html([])))

