"""Services for ReviewHub."""

from .flipkart_client import FlipkartClient, ReviewPage
from .review_pipeline import ReviewPipeline, detect_mode, page_url

__all__ = [
    "FlipkartClient",
    "ReviewPage",
    "ReviewPipeline",
    "detect_mode",
    "page_url",
]
