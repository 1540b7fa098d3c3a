"""Basic usage examples for ReviewHub."""

from reviewhub import FlipkartClient, ReviewPipeline, ReviewRecordBuilder, VADERSentimentAnalyzer, aggregate_reviews
from reviewhub.utils import export_to_csv, format_summary


def example_listing_crawl():
    """Example: crawl every page of a product's review listing."""
    link = "https://www.flipkart.com/some-product/product-reviews/itm0000000000000?pid=XXXXXXXXXXXXXXXX"
    print(f"🔍 Crawling {link}")
    
    with FlipkartClient() as client:
        pipeline = ReviewPipeline(client, ReviewRecordBuilder(VADERSentimentAnalyzer()), max_pages=20)
        for page_number, records in pipeline.iter_pages(link):
            print(f"📄 Page {page_number}: {len(records)} reviews")


def example_product_page():
    """Example: score the reviews shown on a product page and save them."""
    link = "https://www.flipkart.com/some-product/p/itm0000000000000?pid=XXXXXXXXXXXXXXXX"
    
    with FlipkartClient() as client:
        result = ReviewPipeline(client, ReviewRecordBuilder(VADERSentimentAnalyzer())).run(link)
    
    if result.is_empty:
        print("No reviews found for the product.")
        return
    
    print(format_summary(aggregate_reviews(result.reviews)))
    export_to_csv(result.reviews, "Reviews.csv")
    if result.more_reviews_available:
        print("📋 More reviews available on the reviews page.")


if __name__ == "__main__":
    example_product_page()
    example_listing_crawl()
