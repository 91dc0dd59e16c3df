"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

DEFAULT_ACCEPTED_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:1234",
    "https://movies.com",
    "https://admin.movies.com",
]


def get_movies_data_path() -> str:
    """Get seed dataset path from env or default."""
    return os.getenv("MOVIES_DATA", "") or str(
        Path(__file__).resolve().parents[1] / "data" / "movies.json"
    )


def get_accepted_origins() -> list[str]:
    """Get CORS allow-list (comma-separated ACCEPTED_ORIGINS) or default."""
    raw = os.getenv("ACCEPTED_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or list(DEFAULT_ACCEPTED_ORIGINS)


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "1234"))
