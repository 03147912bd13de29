"""Configuration settings for the Company Insights pipeline."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Extraction provider
    hyperbrowser_api_key: str = ""
    hyperbrowser_base_url: str = "https://app.hyperbrowser.ai/api"

    # HTTP Client Settings
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    job_poll_interval: float = 2.0  # seconds between extract job status checks
    job_timeout: float = 120.0  # give up polling an abandoned job after this long

    # Per-section deadlines (seconds)
    website_deadline: float = 30.0
    social_deadline: float = 20.0
    competitive_deadline: float = 25.0
    founder_deadline: float = 25.0

    # Per-section provider wait budgets (milliseconds)
    website_wait_ms: int = 5000
    social_wait_ms: int = 3000
    competitive_wait_ms: int = 4000
    founder_wait_ms: int = 4000

    # Per-section link limits
    website_max_links: int = 3
    social_max_links: int = 1
    competitive_max_links: int = 2
    founder_max_links: int = 2

    # Enrichment across companies
    enrich_concurrency: int = 3

    # Batch analysis
    top_performers_limit: int = 10
    max_trends: int = 5
    dominance_threshold_pct: int = 15
    keyword_min_mentions: int = 3
    keyword_share_pct: int = 10
    geographic_threshold_pct: int = 30
    matrix_top_industries: int = 3
    matrix_min_members: int = 3
    matrix_industries: list[str] = ["AI/ML", "Fintech", "Healthcare"]
    funding_multiplier_millions: float = 2.5

    # Company store
    store_capacity: int = 20

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
