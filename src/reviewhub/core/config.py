"""Configuration management for ReviewHub."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""
    
    # HTTP
    user_agent: str = Field("Flipkart-Sentiment-Analysis/0.1", description="User-Agent header sent with every request")
    accept_header: str = Field("application/json", description="Accept header sent with every request")
    request_timeout: float = Field(30.0, description="Per-request timeout in seconds")
    
    # Retries
    max_retries: int = Field(3, description="Maximum attempts per page fetch")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")
    
    # Crawl
    max_pages: int = Field(0, description="Crawl budget in pages (0 = unbounded)")
    output_file: str = Field("Reviews.csv", description="CSV file written after a successful crawl")
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "REVIEWHUB_"


# Global settings instance
settings = Settings()
