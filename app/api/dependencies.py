"""
FastAPI dependency injection for the movie repository.
"""

from app.database.init_db import init_repository
from app.database.repository import MovieRepository
from app.utils.logging_config import get_logger

logger = get_logger(__name__)


# Singleton repository
_movie_repository: MovieRepository | None = None


def get_movie_repository() -> MovieRepository:
    """Get or create the process-wide repository, seeded on first use."""
    global _movie_repository
    if _movie_repository is None:
        _movie_repository = init_repository()
        logger.info("Movie repository initialized with %d movies", len(_movie_repository))
    return _movie_repository
