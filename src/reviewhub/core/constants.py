"""Constants and configuration values for ReviewHub."""

# Sentiment Constants
class SentimentConstants:
    """Thresholds shared by per-review and corpus-average classification."""
    
    POSITIVE_THRESHOLD = 0.05  # compound >= this is Positive
    NEGATIVE_THRESHOLD = -0.05  # compound <= this is Negative
    MIN_SCORE = -1.0
    MAX_SCORE = 1.0
    DISPLAY_PRECISION = 4  # VADER rounds compound scores to 4 places

# Source Constants
class SourceConstants:
    """Constants describing the crawled site and its URL shapes."""
    
    SITE_DOMAIN = "flipkart.com"
    PRODUCT_PAGE_MARKER = "/p/"  # single product detail page
    REVIEWS_PAGE_MARKER = "/product-reviews/"  # paginated review listing
    PAGE_PARAM = "page"
    FIRST_PAGE = 1

# Selector Constants
class SelectorConstants:
    """CSS selectors for the review markup."""
    
    REVIEW_BLOCK = "div.ZmyHeo > div > div"
    MORE_REVIEWS_MARKER = "div._23J90q.RcXBOT"
    HTML_PARSER = "html.parser"

# Report Constants
class ReportConstants:
    """Console report layout."""
    
    LABEL_WIDTH = 27
    RULE_CHAR = "="
    RULE_WIDTH = 100

# File and Path Constants
class FileConstants:
    """Constants for file operations."""
    
    CSV_COLUMNS = ["Review", "Score", "Sentiment"]
    CSV_DELIMITER = ","
    TEMP_SUFFIX = ".tmp"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
