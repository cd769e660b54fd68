"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any environment at all, although the upstream
API key must be supplied for the event routes to return data.

Settings are frozen: code that needs a variation (tests, for example)
should build a new value with ``dataclasses.replace``.
"""

import os
from dataclasses import dataclass


DISCOVERY_BASE_URL = "https://app.ticketmaster.com/discovery/v2"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Finder API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    # Path to the SQLite credential store.  Relative paths are resolved
    # against the package directory by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "event_finder.db")

    # Upstream event-discovery provider.  Each URL is used without the
    # ``.json`` suffix, which the client appends.
    ticketmaster_api_key: str = os.getenv("TICKETMASTER_API_KEY", "")
    ticketmaster_events_api_url: str = os.getenv(
        "TICKETMASTER_EVENTS_API_URL", f"{DISCOVERY_BASE_URL}/events"
    )
    ticketmaster_class_api_url: str = os.getenv(
        "TICKETMASTER_CLASS_API_URL", f"{DISCOVERY_BASE_URL}/classifications"
    )
    ticketmaster_attraction_api_url: str = os.getenv(
        "TICKETMASTER_ATTRACTION_API_URL", f"{DISCOVERY_BASE_URL}/attractions"
    )
    ticketmaster_suggest_api_url: str = os.getenv(
        "TICKETMASTER_SUGGEST_API_URL", f"{DISCOVERY_BASE_URL}/suggest"
    )

    # Page size requested from the upstream search endpoint and the last
    # page for which a ``nextPage`` is still offered.
    events_page_size: int = int(os.getenv("EVENTS_PAGE_SIZE", "200"))
    events_max_page: int = int(os.getenv("EVENTS_MAX_PAGE", "4"))

    # Outbound request behaviour.  Only transport failures (connection
    # errors, timeouts) are retried; error statuses never are.
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))
    upstream_max_retries: int = int(os.getenv("UPSTREAM_MAX_RETRIES", "2"))
    upstream_retry_backoff: float = float(os.getenv("UPSTREAM_RETRY_BACKOFF_SECONDS", "0.5"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
