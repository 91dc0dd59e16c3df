"""
Repository initialization from the bundled seed dataset.

The dataset is a JSON array of movie records, each with an ``id``.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.api.config import get_movies_data_path
from app.database.repository import InMemoryMovieRepository
from app.utils.logging_config import get_logger

logger = get_logger(__name__)


def load_seed_movies(data_path: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Read seed movies from a JSON file.

    Args:
        data_path: Path to the JSON array (default: MOVIES_DATA or bundled file)

    Returns:
        List of movie dicts

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array of objects with an ``id``
    """
    path = Path(data_path or get_movies_data_path())
    with path.open(encoding="utf-8") as f:
        movies = json.load(f)

    if not isinstance(movies, list):
        raise ValueError(f"Seed data in {path} must be a JSON array")
    for i, movie in enumerate(movies):
        if not isinstance(movie, dict) or "id" not in movie:
            raise ValueError(f"Seed record {i} in {path} has no 'id'")

    logger.info("Loaded %d seed movies from %s", len(movies), path)
    return movies


def init_repository(data_path: Optional[str] = None) -> InMemoryMovieRepository:
    """Create an in-memory repository holding the seed movies."""
    return InMemoryMovieRepository(load_seed_movies(data_path))
