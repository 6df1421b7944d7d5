"""
Configuration settings for the Finnish Company Search.
Loads from environment variables with sensible defaults.
"""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_BASE = "https://avoindata.prh.fi/opendata-ytj-api/v3"


@dataclass
class Settings:
    """Main application settings."""
    # PRH / YTJ open data API
    api_base_url: str = DEFAULT_API_BASE
    user_agent: str = "FinnishCompanySearch/1.0"

    timeout: int = 30  # Seconds per request

    # How long a fetched result page is considered fresh
    cache_ttl_seconds: int = 300

    log_file: Optional[str] = None

    @property
    def companies_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/companies"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            api_base_url=os.getenv("PRH_API_BASE", DEFAULT_API_BASE),
            user_agent=os.getenv("PRH_USER_AGENT", "FinnishCompanySearch/1.0"),
            timeout=int(os.getenv("PRH_TIMEOUT", 30)),
            cache_ttl_seconds=int(os.getenv("CACHE_TTL_SECONDS", 300)),
            log_file=os.getenv("LOG_FILE") or None,
        )
